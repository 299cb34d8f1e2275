"""Walk-through of hosts, guests, accommodations and reservations."""

from __future__ import annotations

import argparse

from udeastay.accommodation import Accommodation
from udeastay.console import (
    clear_console,
    pause,
    print_divider,
    print_info,
    print_success,
    print_title,
    space,
)
from udeastay.date import Date
from udeastay.guest import Guest
from udeastay.host import Host
from udeastay.reservation import Reservation

_YES = "\033[1;32mSí\033[0m"
_NO = "\033[1;31mNo\033[0m"


def _answer(flag: bool) -> str:
    return _YES if flag else _NO


def _break(interactive: bool) -> None:
    if interactive:
        pause()
        clear_console()


def run_demo(interactive: bool = True) -> Host:
    """Run the sample scenario, printing every step; return the host afterwards.

    With ``interactive`` false the pauses and screen clears are skipped.
    """
    print_title(" TESTING ACTORS ", "=", 50)
    print_divider("=", 50)

    host = Host("9876543210", "Ana María Ospina", 12, 95)
    guest = Guest("1234567890", "Juanchito perez", 3, 80)

    accommodation = Accommodation(
        1001,
        "Casa bonita",
        host,
        "antioquia",
        "Casa",
        "Calle 123",
        50000,
        ["WiFi", "Piscina", "Parking"],
    )

    today = Date(1, 6, 2024)
    next_week = today.add_days(6)
    next_month = today.add_days(30)

    first = Reservation(
        1001,
        accommodation,
        guest.name,
        next_week,
        3,
        "Efectivo",
        today,
        accommodation.price_per_night * 3,
        "Sin anotaciones",
    )
    accommodation.add_reservation(first)

    print_title("DETALLES DEL ALOJAMIENTO", "=")
    accommodation.view_details()
    space()

    print_title("DETALLES DEL RESERVA", "=")
    first.view_info()
    space()

    print_title("Pruebas de disponibilidad", "-")
    print_info("Disponible del 1 al 3 de junio?: ", _answer(accommodation.is_available(today, 3)))
    print_info("Disponible del 7 de junio?: ", _answer(accommodation.is_available(next_week, 1)))
    print_info(
        "Disponible del 1 al 5 de julio?: ",
        _answer(accommodation.is_available(next_month, 5)),
    )
    space()

    _break(interactive)

    print_title("PRUEBAS DE HUÉSPED", "=", 50)

    print_title("Agregando reservaciones", "-", 40)
    guest.add_reservation(first)
    print_success("Reservación agregada exitosamente\n")

    print_title("Verificando disponibilidad", "-", 40)
    print_info("Disponible 1-3 junio?: ", _answer(guest.check_availability(today, 3)))
    print_info("Disponible 7-8 junio?: ", _answer(guest.check_availability(next_week, 2)))

    print_title("Mostrando reservaciones", "-", 40)
    guest.view_reservations()

    print_title("Cancelando reservación", "-", 40)
    guest.cancel_reservation(1001)
    print_success("Reservación cancelada\n")

    print_title("Reservaciones después de cancelar", "-", 40)
    guest.view_reservations()
    space()

    first.generate_voucher()

    _break(interactive)

    apartment = Accommodation(
        1002,
        "Apartamento Central",
        host,
        "Antioquia",
        "Apartamento",
        "Carrera 45 #23-12",
        75000,
        ["WiFi", "Cocina"],
    )

    print_title("Agregando alojamientos", "-", 40)
    host.add_accommodation(accommodation)
    host.add_accommodation(apartment)
    print_success("Alojamientos agregados exitosamente\n")

    second = Reservation(
        1002,
        apartment,
        "María González",
        next_month,
        4,
        "Tarjeta",
        today,
        300000,
        "Vista a la ciudad",
    )
    apartment.add_reservation(second)

    print_title("Consultando todas las reservaciones", "-", 40)
    host.consult_reservations()
    space()

    print_title("Cancelando reservación", "-", 40)
    host.cancel_reservation(1002)
    print_success("Reservación cancelada\n")

    print_title("Consultando reservaciones después de cancelar", "-", 40)
    host.consult_reservations()
    space()

    print_title("Eliminando alojamiento", "-", 40)
    host.remove_accommodation(1002)

    print_title("Consultando alojamientos después de eliminar", "-", 40)
    host.consult_reservations()

    return host


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: run the demonstration scenario."""
    parser = argparse.ArgumentParser(
        prog="udeastay", description="Run the accommodation booking demonstration."
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="do not wait for ENTER or clear the screen between sections",
    )
    args = parser.parse_args(argv)
    run_demo(interactive=not args.non_interactive)
    return 0
"""Bookings of an accommodation for a run of nights."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from udeastay.console import print_divider, print_info, print_title, space
from udeastay.date import Date

if TYPE_CHECKING:
    from udeastay.accommodation import Accommodation


@dataclass
class Reservation:
    """A booking of ``days`` nights starting on ``start_date``."""

    id: int
    accommodation: Accommodation = field(repr=False, compare=False)
    guest_name: str
    start_date: Date
    days: int
    payment_method: str
    payment_date: Date
    total_price: int
    annotations: str = ""

    def end_date(self) -> Date:
        """Return the first day after the stay (check-out day)."""
        return self.start_date.add_days(self.days)

    def overlaps(self, start: Date, days: int) -> bool:
        """Return True if the stay collides with ``days`` nights from ``start``."""
        end = start.add_days(days)
        return not (end <= self.start_date or start >= self.end_date())

    def generate_voucher(self) -> None:
        """Print a receipt with every detail of the booking."""
        print_title("COMPROBANTE DE RESERVA", "=", 60)
        space()

        print_title("DETALLES DE LA RESERVA", "-", 40)
        print_info("ID de reserva    : ", str(self.id))
        print_info("Acomodación      : ", self.accommodation.name)
        print_info("Nombre huésped   : ", self.guest_name)
        space()

        print_title("FECHAS", "-", 40)
        print_info("Fecha inicio     : ", self.start_date.format())
        print_info("Fecha fin        : ", self.start_date.add_days(self.days - 1).format())
        print_info("Días reservados  : ", str(self.days))
        space()

        print_title("INFORMACIÓN DE PAGO", "-", 40)
        print_info("Método de pago   : ", self.payment_method)
        print_info("Fecha de pago    : ", self.payment_date.format())
        print_info("Precio total     : $", str(self.total_price))
        space()

        if self.annotations:
            print_title("ANOTACIONES", "-", 40)
            print_info("", self.annotations)
            space()

        print_divider("=", 60)

    def view_info(self) -> None:
        """Print a short summary of the booking."""
        print_info("ID             : ", self.id)
        print_info("Alojamiento    : ", self.accommodation.name)
        print_info("Fecha inicio   : ", self.start_date.format())
        print_info("Días           : ", self.days)
        print_info("Precio total   : $", self.total_price)
        space()
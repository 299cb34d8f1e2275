"""Hosts and the accommodations they offer."""

from __future__ import annotations

from dataclasses import dataclass, field

from udeastay.accommodation import Accommodation
from udeastay.console import (
    print_centered,
    print_divider,
    print_error,
    print_info,
    print_success,
    print_title,
    space,
)


@dataclass(eq=False)
class Host:
    """A person who offers accommodations."""

    document: str
    name: str
    antiquity: int
    rating: int
    accommodations: list[Accommodation] = field(default_factory=list, repr=False)

    def add_accommodation(self, accommodation: Accommodation) -> None:
        """Add an accommodation offered by this host."""
        self.accommodations.append(accommodation)

    def remove_accommodation(self, accommodation_id: int) -> bool:
        """Remove the accommodation with ``accommodation_id``; return True if removed."""
        for index, accommodation in enumerate(self.accommodations):
            if accommodation.id == accommodation_id:
                del self.accommodations[index]
                print_success("Alojamiento eliminado exitosamente\n")
                return True
        print_error(f"No se encontró el alojamiento con ID: {accommodation_id}")
        space()
        return False

    def cancel_reservation(self, reservation_id: int) -> bool:
        """Cancel the booking with ``reservation_id`` in any accommodation."""
        for accommodation in self.accommodations:
            if accommodation.delete_reservation(reservation_id):
                return True
        print_error(f"No se encontró la reservación con ID: {reservation_id}")
        space()
        return False

    def consult_reservations(self) -> None:
        """Print the bookings of every accommodation."""
        if not self.accommodations:
            print_error("No hay alojamientos para mostrar. \n")
            return
        for number, accommodation in enumerate(self.accommodations, start=1):
            print_title(f"Alojamiento {number}", "-", 50)
            print_divider("-", 50)
            print_info("Alojamiento: ", accommodation.name)
            print_centered("---- Reservaciones ----", 50)
            if not accommodation.reservations:
                print_error("No hay reservaciones para mostrar. \n")
                continue
            for reservation in accommodation.reservations:
                reservation.view_info()
"""Guests and the bookings they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from udeastay.console import print_error, print_title
from udeastay.date import Date
from udeastay.reservation import Reservation


@dataclass(eq=False)
class Guest:
    """A person who books accommodations."""

    document: str
    name: str
    antiquity: int
    rating: int
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    def add_reservation(self, reservation: Reservation) -> None:
        """Record a booking held by this guest."""
        self.reservations.append(reservation)

    def cancel_reservation(self, reservation_id: int) -> bool:
        """Drop the booking with ``reservation_id``; return True if one was dropped."""
        for index, reservation in enumerate(self.reservations):
            if reservation.id == reservation_id:
                del self.reservations[index]
                return True
        return False

    def check_availability(self, start: Date, days: int) -> bool:
        """Return True if the guest has no booking during ``days`` nights from ``start``."""
        if days <= 0:
            return False
        return not any(res.overlaps(start, days) for res in self.reservations)

    def view_reservations(self) -> None:
        """Print every booking held by the guest."""
        if not self.reservations:
            print_error("No hay reservas para mostrar.")
            return
        print_title(f"Reservas de {self.name}", "-", 40)
        for number, reservation in enumerate(self.reservations, start=1):
            print_title(f"Reserva #{number}", "-", 30)
            reservation.view_info()
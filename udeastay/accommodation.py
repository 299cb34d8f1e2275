"""Accommodations offered by hosts and their bookings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from udeastay.console import (
    print_centered,
    print_divider,
    print_info,
    print_success,
)
from udeastay.date import Date

if TYPE_CHECKING:
    from udeastay.host import Host
    from udeastay.reservation import Reservation


@dataclass(eq=False)
class Accommodation:
    """A place to stay, with its price per night and its bookings."""

    id: int
    name: str
    host: Host = field(repr=False)
    department: str
    kind: str
    address: str
    price_per_night: int
    amenities: list[str] = field(default_factory=list)
    reservations: list[Reservation] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.amenities = list(self.amenities)
        self.reservations = list(self.reservations)

    def add_reservation(self, reservation: Reservation) -> None:
        """Record a booking for this accommodation."""
        self.reservations.append(reservation)

    def is_available(self, start: Date, days: int) -> bool:
        """Return True if no booking collides with ``days`` nights from ``start``."""
        if days <= 0:
            return False
        return not any(res.overlaps(start, days) for res in self.reservations)

    def view_details(self) -> None:
        """Print the main details of the accommodation."""
        print_divider("-")
        print_centered(f"Alojamiento: {self.name}")
        print_info("Anfitrion        : ", self.host.name)
        print_info("Departamento     : ", self.department)
        print_info("Direccion        : ", self.address)
        print_info("Precio por noche : ", self.price_per_night)
        print_info("Amenidades       : ", self.amenities)

    def delete_reservation(self, reservation_id: int) -> bool:
        """Remove the booking with ``reservation_id``; return True if one was removed."""
        for index, reservation in enumerate(self.reservations):
            if reservation.id == reservation_id:
                del self.reservations[index]
                print_success("Reservación eliminada exitosamente\n")
                return True
        return False
"""Calendar dates with day arithmetic and Spanish long-form formatting."""

from __future__ import annotations

from dataclasses import dataclass

WEEKDAY_NAMES = ("Domingo", "Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado")
MONTH_NAMES = (
    "Enero", "Febrero", "Marzo", "Abril", "Mayo", "Junio",
    "Julio", "Agosto", "Septiembre", "Octubre", "Noviembre", "Diciembre",
)
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Return True if ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Return the number of days of ``month`` in ``year``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True)
class Date:
    """A day/month/year triple; it may hold an invalid date, see ``is_valid``."""

    day: int
    month: int
    year: int

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def is_valid(self) -> bool:
        """Return True if the date exists in the Gregorian calendar."""
        if self.year < 1 or not 1 <= self.month <= 12 or self.day < 1:
            return False
        return self.day <= days_in_month(self.month, self.year)

    def weekday(self) -> int:
        """Return the day of the week, 0 for Sunday through 6 for Saturday."""
        d, m, y = self.day, self.month, self.year
        if m < 3:
            m += 12
            y -= 1
        k = y % 100
        j = y // 100
        h = (d + 13 * (m + 1) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
        return (h + 6) % 7

    def format(self) -> str:
        """Return the date as e.g. ``"Lunes, 1 de Enero de 2024"``."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        return (
            f"{WEEKDAY_NAMES[self.weekday()]}, {self.day} de "
            f"{MONTH_NAMES[self.month - 1]} de {self.year}"
        )

    def __str__(self) -> str:
        return self.format()

    def add_days(self, days: int) -> Date:
        """Return the date ``days`` days later; non-positive counts change nothing."""
        d, m, y = self.day, self.month, self.year
        while days > 0:
            remaining = days_in_month(m, y) - d
            if days <= remaining:
                d += days
                break
            days -= remaining + 1
            d = 1
            m += 1
            if m > 12:
                m = 1
                y += 1
        return Date(d, m, y)
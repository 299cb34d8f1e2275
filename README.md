# udeastay

A small toolkit for running a lodging service from the console. It models
hosts, guests, accommodations and reservations. It checks availability for
date ranges and prints details, reservation listings and payment vouchers in
Spanish, with coloured terminal output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
udeastay
udeastay --non-interactive
```

This runs a fixed walkthrough. It creates a host, a guest and two
accommodations. It books reservations, checks availability, shows a voucher,
cancels bookings and removes an accommodation. By default it stops between
sections and waits for ENTER, then clears the screen. With
`--non-interactive` it runs straight through. The same scenario is available
from code as `udeastay.demo.run_demo(interactive)`, which returns the `Host`
as it stands at the end.

## Library use

```python
from udeastay.date import Date
from udeastay.host import Host
from udeastay.guest import Guest
from udeastay.accommodation import Accommodation
from udeastay.reservation import Reservation

host = Host("9876543210", "Ana", 12, 95)
guest = Guest("1234567890", "Juan", 3, 80)

house = Accommodation(1001, "Casa bonita", host, "Antioquia", "Casa",
                      "Calle 123", 50000, ["WiFi", "Piscina"])
host.add_accommodation(house)

start = Date(7, 6, 2024)
booking = Reservation(1001, house, guest.name, start, 3, "Efectivo",
                      Date(1, 6, 2024), 150000, "Sin anotaciones")
house.add_reservation(booking)
guest.add_reservation(booking)

house.is_available(Date(1, 6, 2024), 3)   # True
house.is_available(start, 1)              # False
booking.generate_voucher()
```

A reservation covers the nights from its start date up to, but not including,
`end_date()`, which is `start_date.add_days(days)`. `Reservation.overlaps`
reports whether those half-open ranges collide. A range of zero or fewer days
is never available.

### Classes

- `Accommodation`: has `add_reservation`, `is_available`, `view_details` and
  `delete_reservation`. `delete_reservation` returns `True` if it removed a
  booking.
- `Guest`: has `add_reservation`, `cancel_reservation` (returns `True` if it
  dropped a booking), `check_availability` and `view_reservations`.
- `Host`: has `add_accommodation`, `remove_accommodation` and
  `cancel_reservation`. The last two return `True` on success and print an
  error message when nothing matches. `consult_reservations` lists the
  bookings of every accommodation.
- `Reservation`: has `end_date`, `overlaps`, `view_info` and
  `generate_voucher`.

### Dates

`Date(day, month, year)` supports comparison, `is_valid()`, `weekday()`
(0 is Sunday), `add_days(n)` and `format()`. `format()` gives text such as
`"Lunes, 1 de Enero de 2024"`. The helpers `is_leap_year` and
`days_in_month` are in the same module.

### Text and console helpers

- `udeastay.text.split_fields(text, delimiter)` splits a record string at a
  single-character delimiter and drops empty fields.
- `udeastay.console` has the output helpers `print_text`, `print_title`,
  `print_divider`, `print_centered`, `print_info`, `print_success`,
  `print_error` and `space`. `format_value` renders sequences comma-separated.
- `read_line` reads one line of input. `read_int` and `read_float` skip blank
  lines and ask again when the input is not a number.
- `pause` waits for ENTER, and `clear_console` clears the terminal.

## What it does not do

Everything is held in memory. Nothing is saved to or loaded from files. There
is no interactive menu for entering hosts, guests or bookings. The only
command is the fixed walkthrough described above.
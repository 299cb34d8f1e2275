"""Hosts, guests, accommodations and reservations managed from the console."""

__version__ = "0.0.1"
"""Text helpers for record-style strings."""

from __future__ import annotations


def split_fields(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at ``delimiter``, dropping empty fields."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return [part for part in text.split(delimiter) if part]
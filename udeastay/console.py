"""Console output formatting and input reading."""

from __future__ import annotations

import re
import subprocess
import sys
from collections.abc import Iterable

BOLD = "\033[1;1m"
GREEN = "\033[1;32m"
RED = "\033[1;31m"
RESET = "\033[0m"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_value(value: object) -> str:
    """Render a value for display; sequences become comma-separated."""
    if isinstance(value, (str, bytes)):
        return value if isinstance(value, str) else value.decode()
    if isinstance(value, Iterable):
        return ", ".join(format_value(item) for item in value)
    return str(value)


def print_text(text: str) -> None:
    """Print ``text`` followed by a newline."""
    print(text)


def print_info(text: str, value: object) -> None:
    """Print a bold label followed by a value."""
    print(f"{BOLD}{text}{RESET}{format_value(value)}")


def print_title(title: str, fill: str = "-", width: int = 50) -> None:
    """Print a bold title centred in a line of ``fill`` characters."""
    if len(title) >= width:
        print(f"{BOLD}{title}{RESET}")
        return
    left = (width - len(title)) // 2
    right = width - len(title) - left
    print(f"{fill * left}{BOLD}{title}{RESET}{fill * right}")


def print_divider(fill: str = "-", width: int = 50) -> None:
    """Print a line of ``width`` fill characters."""
    print(fill * width)


def print_centered(text: str, width: int = 50) -> None:
    """Print ``text`` centred with spaces in a field of ``width``."""
    if len(text) > width:
        print(text)
        return
    left = (width - len(text)) // 2
    right = width - len(text) - left
    print(f"{' ' * left}{text}{' ' * right}")


def print_success(text: str) -> None:
    """Print ``text`` in green, without a newline."""
    print(f"{GREEN}{text}{RESET}", end="")


def print_error(text: str) -> None:
    """Print ``text`` in red, without a newline."""
    print(f"{RED}{text}{RESET}", end="")


def space() -> None:
    """Print an empty line."""
    print()


def read_line() -> str:
    """Read one line of input; an exhausted input gives an empty string."""
    try:
        return input()
    except EOFError:
        return ""


def _read_number(pattern: re.Pattern[str], convert, message: str):
    while True:
        line = input()
        if not line.strip():
            continue
        match = pattern.match(line)
        if match:
            return convert(match.group(1))
        print_error(message)


def read_int() -> int:
    """Read an integer, asking again until one is entered."""
    return _read_number(_INT_PREFIX, int, "Error: Ingrese un numero entero valido: ")


def read_float() -> float:
    """Read a decimal number, asking again until one is entered."""
    return _read_number(_FLOAT_PREFIX, float, "Error: Ingrese un numero decimal valido: ")


def pause() -> None:
    """Wait until the user presses ENTER."""
    print("Presione ENTER para continuar...", end="", flush=True)
    try:
        input()
    except EOFError:
        pass


def clear_console() -> None:
    """Clear the terminal screen."""
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass
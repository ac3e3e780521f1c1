"""ANSI colour helpers for console messages."""

from enum import Enum


class Color(str, Enum):
    """ANSI escape sequences used for console output."""

    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"


def colorize(text: str, color: Color) -> str:
    """Wrap *text* in the escape sequence of *color* followed by a reset."""
    return f"{color.value}{text}{Color.RESET.value}"


def red_print(text: str) -> None:
    """Print *text* in red, without adding a newline."""
    print(colorize(text, Color.RED), end="")


def green_print(text: str) -> None:
    """Print *text* in green, without adding a newline."""
    print(colorize(text, Color.GREEN), end="")


def yellow_print(text: str) -> None:
    """Print *text* in yellow, without adding a newline."""
    print(colorize(text, Color.YELLOW), end="")
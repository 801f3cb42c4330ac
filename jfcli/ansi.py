"""ANSI terminal color utilities.

Honors the NO_COLOR / FORCE_COLOR conventions and disables colors when the
output stream is not a terminal.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "BOLD",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "colorize",
    "make_style",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
GREEN = "32"
YELLOW = "33"
BLUE = "34"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str, stream: TextIO | None = None) -> str:
    """Wrap text in ANSI codes when `stream` supports colors.

    Args:
        text: The text to colorize.
        *codes: ANSI codes to apply (e.g., GREEN, BOLD).
        stream: Stream the text will be written to (defaults to sys.stdout).

    Returns:
        The text, wrapped in escape sequences if colors are enabled.
    """
    if not codes or not should_colorize(stream or sys.stdout):
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Create a style prefix and suffix pair for log formatters."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


class LogStyles:
    """Pre-built styles for log levels."""

    DEBUG = (BLUE, DIM)
    WARNING = (YELLOW,)
    ERROR = (RED,)
    CRITICAL = (RED, BOLD)

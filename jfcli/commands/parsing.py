"""Command line flags parsing for leaf commands."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Any, NoReturn

from ..config import parse_bool
from ..models import UsageError
from .models import FlagKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import Command

__all__ = ["HELP_FLAGS", "parse_flags", "show_help_requested"]

HELP_FLAGS = frozenset(("--help", "-h"))


class _FlagParser(argparse.ArgumentParser):
    """Argument parser raising UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{self.prog}: {message}")


def show_help_requested(args: Sequence[str]) -> bool:
    """Check whether `args` is a single help flag.

    Commands skipping flag parsing only show their help in that case.
    """
    return len(args) == 1 and args[0] in HELP_FLAGS


def _normalize_bool_flags(args: Sequence[str], bool_flags: set[str]) -> list[str]:
    """Rewrite `--flag=value` for boolean flags to `--flag` / `--no-flag`."""
    normalized: list[str] = []
    for arg in args:
        if arg == "--":
            normalized.extend(args[len(normalized) :])
            break
        name, sep, value = arg.partition("=")
        if sep and name.startswith("--") and name[2:] in bool_flags:
            try:
                enabled = parse_bool(value)
            except ValueError as e:
                raise UsageError(f"invalid value for {name}: {value!r}") from e
            normalized.append(name if enabled else f"--no-{name[2:]}")
        else:
            normalized.append(arg)
    return normalized


def _build_parser(command: Command) -> tuple[_FlagParser, dict[str, str]]:
    parser = _FlagParser(prog=command.full_name, add_help=False, allow_abbrev=False)
    parser.add_argument("-h", "--help", dest="show_help", action="store_true")
    destinations: dict[str, str] = {}
    for index, flag in enumerate(command.flags):
        dest = f"flag_{index}"
        destinations[dest] = flag.name
        if flag.kind is FlagKind.BOOL:
            parser.add_argument(f"--{flag.name}", dest=dest, action="store_const", const=True, default=None)
            parser.add_argument(f"--no-{flag.name}", dest=dest, action="store_const", const=False, default=None)
        else:
            parser.add_argument(f"--{flag.name}", dest=dest, type=int if flag.kind is FlagKind.INT else str, default=None)
    parser.add_argument("args", nargs="*")
    return parser, destinations


def parse_flags(command: Command, args: Sequence[str]) -> tuple[dict[str, Any], list[str], bool]:
    """Parse the command line of a leaf command.

    Flags may appear before, after or between positional arguments.

    Args:
        command: The invoked command
        args: Arguments following the command name

    Returns:
        Tuple of (flags, positional_args, show_help)
        - flags: values of the flags given on the command line, by flag name
        - positional_args: remaining arguments
        - show_help: True if --help / -h was given

    Raises:
        UsageError: On unknown flags or invalid values
    """
    bool_flags = {flag.name for flag in command.flags if flag.kind is FlagKind.BOOL}
    parser, destinations = _build_parser(command)
    namespace = parser.parse_intermixed_args(_normalize_bool_flags(args, bool_flags))
    flags = {name: getattr(namespace, dest) for dest, name in destinations.items() if getattr(namespace, dest) is not None}
    return flags, list(namespace.args), namespace.show_help

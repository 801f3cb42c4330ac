"""Integrity checks of the assembled command tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import DuplicateAliasError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Command

__all__ = ["validate_aliases"]


def validate_aliases(commands: Iterable[Command]) -> None:
    """Check that no two subcommands of the same namespace share an alias.

    Only siblings are compared: the same alias may be used under two
    different namespaces.

    Args:
        commands: The top-level commands

    Raises:
        DuplicateAliasError: On the first duplicated alias
    """
    for command in commands:
        seen: set[str] = set()
        for subcommand in command.subcommands:
            for alias in subcommand.aliases:
                if alias in seen:
                    raise DuplicateAliasError(alias, command.name, subcommand.name)
                seen.add(alias)

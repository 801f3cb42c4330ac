"""Command tree walking and labelling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import OTHER_CATEGORY

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .models import Command

__all__ = ["assign_paths", "group_by_category", "iter_commands", "normalize_category"]


def normalize_category(command: Command) -> Command:
    """Put a command without category in the "Other" category."""
    if not command.category:
        command.category = OTHER_CATEGORY
    return command


def assign_paths(commands: Iterable[Command], parent: tuple[str, ...] = ()) -> None:
    """Record the full command path on every node of the tree.

    Args:
        commands: Commands at one level of the tree
        parent: Path of their parent command (empty for top-level commands)
    """
    for command in commands:
        command.path = (*parent, command.name)
        assign_paths(command.subcommands, command.path)


def iter_commands(commands: Iterable[Command], include_hidden: bool = True) -> Iterator[Command]:
    """Iterate depth-first over every command of the tree.

    Args:
        commands: The top-level commands
        include_hidden: If False, hidden commands and their subtrees are skipped
    """
    for command in commands:
        if command.hidden and not include_hidden:
            continue
        yield command
        yield from iter_commands(command.subcommands, include_hidden)


def group_by_category(commands: Iterable[Command]) -> dict[str, list[Command]]:
    """Group the visible commands by category, categories sorted by name.

    Commands without category are reported in the "Other" category.
    """
    groups: dict[str, list[Command]] = {}
    for command in commands:
        if command.hidden:
            continue
        groups.setdefault(command.category or OTHER_CATEGORY, []).append(command)
    return dict(sorted(groups.items()))

"""JSON catalog of the visible commands, grouped by category (`jf dumpjson`)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .commands.models import OTHER_CATEGORY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Command

__all__ = ["MAX_DEPTH", "dump_commands_json", "export_command", "export_commands"]

# root -> namespace -> leaf
MAX_DEPTH = 3


def export_command(command: Command, depth: int = 1) -> dict[str, Any]:
    """Describe one command and its visible subcommands, empty fields omitted."""
    entry: dict[str, Any] = {
        "name": command.name,
        "shortName": command.aliases[0] if command.aliases else "",
        "description": command.usage,
        "args": command.usage_text,
        "usage": command.help_name,
    }
    if depth < MAX_DEPTH:
        entry["subcommands"] = [export_command(sub, depth + 1) for sub in command.visible_subcommands]
    entry["flags"] = [{"name": flag.name, "usage": str(flag)} for flag in command.flags]
    return {key: value for key, value in entry.items() if value}


def export_commands(commands: Iterable[Command]) -> dict[str, list[dict[str, Any]]]:
    """Map each category to the description of its visible commands."""
    catalog: dict[str, list[dict[str, Any]]] = {}
    for command in commands:
        if command.hidden:
            continue
        catalog.setdefault(command.category or OTHER_CATEGORY, []).append(export_command(command))
    return catalog


def dump_commands_json(commands: Iterable[Command]) -> str:
    """Return the catalog as indented JSON."""
    return json.dumps(export_commands(commands), indent=2, ensure_ascii=False)

"""Typo detection for unknown commands.

When a typed command is not found, the registry is scanned for commands at
a small edit distance, and an exact match one level down (e.g. "jf bp"
typed for "jf rt bp") wins over any approximate match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import MAX_SUGGESTION_DISTANCE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Command

__all__ = ["format_suggestions", "levenshtein", "search_similar_commands"]


def levenshtein(source: str, target: str) -> int:
    """Return the edit distance between two strings.

    Insertions, deletions and substitutions all cost 1. Case sensitive.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)
    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (source_char != target_char),
                )
            )
        previous = current
    return previous[-1]


def search_similar_commands(commands: Iterable[Command], token: str) -> list[str]:
    """Find the commands the user most likely meant when typing `token`.

    Args:
        commands: Commands at the level where `token` was not found
        token: The unrecognized command

    Returns:
        Full command names (unsorted). A single entry when a subcommand
        matches `token` exactly, otherwise every command name or alias at the
        smallest distance seen, up to MAX_SUGGESTION_DISTANCE.
    """
    min_distance = MAX_SUGGESTION_DISTANCE
    best: list[str] = []
    for command in commands:
        for subcommand in command.subcommands:
            for sub_name in subcommand.names():
                if levenshtein(sub_name, token) == 0:
                    return [f"{command.full_name} {sub_name}"]
        for name in command.names():
            distance = levenshtein(name, token)
            if distance > min_distance:
                continue
            # show the alias the user can type, not the canonical name
            suggestion = " ".join((*command.path[:-1], name))
            if distance < min_distance:
                min_distance = distance
                best = [suggestion]
            else:
                best.append(suggestion)
    return best


def format_suggestions(app_name: str, suggestions: list[str]) -> str:
    """Format the suggestions shown after a "not a command" message."""
    if not suggestions:
        return ""
    if len(suggestions) == 1:
        return f"The most similar command is:\n\t{app_name} {suggestions[0]}"
    lines = "\n\t".join(f"{app_name} {suggestion}" for suggestion in sorted(suggestions))
    return f"The most similar commands are:\n\t{lines}"

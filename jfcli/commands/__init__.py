"""Command handling utilities for jfcli.

This package provides:
- models: Data structures (Command, Flag, Context)
- parsing: Flags parsing for leaf commands
- tree: Walking and labelling the command tree
"""

from .models import NAMESPACES_CATEGORY, OTHER_CATEGORY, PLUGINS_CATEGORY, Action, Command, Context, Flag, FlagKind

__all__ = [
    "NAMESPACES_CATEGORY",
    "OTHER_CATEGORY",
    "PLUGINS_CATEGORY",
    "Action",
    "Command",
    "Context",
    "Flag",
    "FlagKind",
]

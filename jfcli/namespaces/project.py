"""`jf project`: project initialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .common import leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command

__all__ = ["get_commands"]


def get_commands() -> list[Command]:
    """Return the `project` subcommands."""
    return [
        leaf(
            "project",
            "init",
            "Generate a configuration for a project, to enable building it with JFrog CLI.",
            usages=["[command options] [path]"],
            flags=[string_flag("server-id", "Server ID configured using the config command.")],
        ),
    ]

"""Embedded plugins: plugins shipped inside the CLI, requiring no installation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..commands.models import OTHER_CATEGORY
from ..models import EmbeddedPluginError, PluginError
from .components import convert_app_commands

if TYPE_CHECKING:
    from ..commands.models import Command
    from .interface import PluginApp

__all__ = ["convert_embedded_plugin"]


def convert_embedded_plugin(app: PluginApp) -> list[Command]:
    """Convert an embedded plugin to CLI commands.

    Plugin namespaces without category are put in the "Other" category
    before the conversion, which copies the category only once.

    Raises:
        EmbeddedPluginError: If the plugin commands can't be converted
    """
    for namespace in app.subcommands:
        if not namespace.category:
            namespace.category = OTHER_CATEGORY
    try:
        return convert_app_commands(app)
    except PluginError as e:
        raise EmbeddedPluginError(app.name, e) from e

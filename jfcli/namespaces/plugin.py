"""`jf plugin`: installed plugins management."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logging_setup import get_logger
from ..plugins.installed import uninstall_plugin
from ..utils import ask_yes_no, get_quiet_value
from .common import bool_flag, expect_args, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command, Context

__all__ = ["get_commands", "uninstall"]

log = get_logger("plugins")


def prepare_install(ctx: Context) -> dict[str, Any]:
    """install: `<plugin name>[@version]`, into the plugins directory."""
    (spec,) = expect_args(ctx, "plugin name and version")
    name, _, version = spec.partition("@")
    return {"name": name, "version": version, "plugins_dir": ctx.settings.plugins_dir}


def prepare_publish(ctx: Context) -> dict[str, Any]:
    """publish: `<plugin name> <plugin version>`."""
    name, version = expect_args(ctx, "plugin name", "plugin version")
    return {"name": name, "version": version}


def uninstall(ctx: Context) -> int:
    """Remove an installed plugin, asking for confirmation unless quiet."""
    (name,) = expect_args(ctx, "plugin name")
    if not get_quiet_value(ctx) and not ask_yes_no(f"Are you sure you want to uninstall the '{name}' plugin?"):
        return 0
    path = uninstall_plugin(ctx.settings.plugins_dir, name)
    log.info("Plugin '%s' was uninstalled successfully from %s.", name, path)
    return 0


def get_commands() -> list[Command]:
    """Return the `plugin` subcommands."""
    return [
        leaf(
            "plugin",
            "install",
            "Install or upgrade a JFrog CLI plugin.",
            aliases=["i"],
            usages=["<plugin name>[@version] [command options]"],
            flags=[string_flag("server-id", "Artifactory server ID configured using the config command."), string_flag("repo", "Artifactory repository to download the plugin from.")],
            prepare=prepare_install,
        ),
        leaf(
            "plugin",
            "publish",
            "Publish a JFrog CLI plugin.",
            aliases=["p"],
            usages=["<plugin name> <plugin version> [command options]"],
            flags=[string_flag("server-id", "Artifactory server ID configured using the config command."), string_flag("repo", "Artifactory repository to upload the plugin to.")],
            prepare=prepare_publish,
        ),
        leaf(
            "plugin",
            "uninstall",
            "Uninstall a JFrog CLI plugin.",
            aliases=["ui"],
            usages=["<plugin name>"],
            flags=[bool_flag("quiet", "Set to true to skip the uninstall confirmation message.")],
            action=uninstall,
        ),
    ]

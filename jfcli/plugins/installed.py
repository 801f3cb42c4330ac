"""Installed plugins: executables living in the plugins directory.

Layout::

    <plugins dir>/<name>/bin/<name>

Each plugin becomes a top-level command running the executable with the
remaining command line.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from ..commands.models import PLUGINS_CATEGORY, Command
from ..logging_setup import get_logger
from ..models import JfError

if TYPE_CHECKING:
    from ..commands.models import Action, Context

__all__ = ["InstalledPlugins", "find_plugin_executable", "get_installed_plugins", "run_plugin", "uninstall_plugin"]


def find_plugin_executable(plugin_dir: Path) -> Path | None:
    """Return the plugin executable of `plugin_dir`, if there is one."""
    name = plugin_dir.name
    for candidate in (plugin_dir / "bin" / name, plugin_dir / "bin" / f"{name}.exe"):
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate
    return None


def run_plugin(executable: Path, args: list[str]) -> int:
    """Run a plugin executable and return its exit status."""
    try:
        return subprocess.run([str(executable), *args], check=False).returncode
    except OSError as e:
        raise JfError(f"Failed running plugin {executable.name}: {e}") from e


def _plugin_action(executable: Path) -> Action:
    def _action(ctx: Context) -> int:
        return run_plugin(executable, ctx.args)

    return _action


def uninstall_plugin(plugins_dir: Path, name: str) -> Path:
    """Remove an installed plugin.

    Returns:
        The removed directory

    Raises:
        JfError: If the plugin is not installed
    """
    plugin_dir = plugins_dir / name
    if not name or os.sep in name or name in (".", "..") or not plugin_dir.is_dir():
        raise JfError(f"Plugin '{name}' is not installed in {plugins_dir}")
    shutil.rmtree(plugin_dir)
    return plugin_dir


class InstalledPlugins:
    """Namespace provider exposing the plugins found in a directory."""

    def __init__(self, plugins_dir: Path) -> None:
        self.plugins_dir = plugins_dir
        self.log = get_logger("plugins")

    def get_commands(self) -> list[Command]:
        """Return one command per installed plugin, sorted by name."""
        if not self.plugins_dir.is_dir():
            return []
        commands: list[Command] = []
        for plugin_dir in sorted(self.plugins_dir.iterdir()):
            if not plugin_dir.is_dir():
                continue
            executable = find_plugin_executable(plugin_dir)
            if executable is None:
                self.log.debug("Skipping %s: no executable found", plugin_dir)
                continue
            self.log.debug("Found plugin %s", plugin_dir.name)
            commands.append(
                Command(
                    name=plugin_dir.name,
                    usage=f"Run the '{plugin_dir.name}' plugin.",
                    category=PLUGINS_CATEGORY,
                    action=_plugin_action(executable),
                    skip_flag_parsing=True,
                )
            )
        return commands


def get_installed_plugins(plugins_dir: Path) -> list[Command]:
    """Return the commands of the plugins installed in `plugins_dir`."""
    return InstalledPlugins(plugins_dir).get_commands()

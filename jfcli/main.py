"""jf - the JFrog CLI."""

from __future__ import annotations

import importlib
import os
import sys
from typing import TYPE_CHECKING, Any

from .app import App
from .command_registry import build_registry
from .commands.models import NAMESPACES_CATEGORY, OTHER_CATEGORY, Command
from .config import load_settings
from .constants import LOG_LEVEL_ENV
from .logging_setup import get_logger, init_logger
from .models import ConfigError, ExitCode, JfError
from .namespaces import artifactory, buildtools, completion, configuration, distribution, general, lifecycle, missioncontrol, pipelines, plugin, project
from .plugins import security
from .plugins.installed import InstalledPlugins
from .validation import validate_aliases

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import ModuleType

    from .command_registry import CommandRegistry, NamespaceProvider
    from .config import Settings
    from .plugins.interface import PluginApp

__all__ = ["create_registry", "get_builtin_commands", "main", "run"]


def _namespace(name: str, usage: str, subcommands: list[Command], aliases: Sequence[str] = (), category: str = NAMESPACES_CATEGORY, hidden: bool = False) -> Command:
    return Command(name=name, aliases=list(aliases), usage=usage, category=category, subcommands=subcommands, hidden=hidden)


def get_builtin_commands() -> list[Command]:
    """Return the built-in namespaces and commands, in declaration order."""
    general_commands = {command.name: command for command in general.get_commands()}
    for command in general_commands.values():
        command.category = OTHER_CATEGORY
    return [
        _namespace("artifactory", "Artifactory commands.", artifactory.get_commands(), aliases=["rt"]),
        _namespace("mc", "Mission Control commands.", missioncontrol.get_commands()),
        _namespace("ds", "Distribution V1 commands.", distribution.get_commands()),
        _namespace("pl", "Pipelines commands.", pipelines.get_commands()),
        _namespace("completion", "Generate autocomplete scripts.", completion.get_commands(), category=OTHER_CATEGORY),
        _namespace("plugin", "Plugins commands.", plugin.get_commands()),
        _namespace("config", "Config commands.", configuration.get_commands(), aliases=["c"]),
        _namespace("project", "Project commands.", project.get_commands(), category=OTHER_CATEGORY, hidden=True),
        general_commands["ci-setup"],
        general_commands["setup"],
        general_commands["intro"],
        general_commands["options"],
        general_commands["login"],
        general_commands["access-token-create"],
        general_commands["dumpjson"],
    ]


def _import(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Can't load module '{module_name}': {e}") from e


def _load_embedded_plugins(settings: Settings) -> list[PluginApp]:
    apps = [security.get_app()]
    for module_name in settings.embedded_plugins:
        module: Any = _import(module_name)
        if not hasattr(module, "get_app"):
            raise ConfigError(f"Module '{module_name}' is not an embedded plugin: get_app() is missing")
        apps.append(module.get_app())
    return apps


def _load_providers(settings: Settings) -> list[NamespaceProvider]:
    providers: list[Any] = [InstalledPlugins(settings.plugins_dir), buildtools, lifecycle]
    for module_name in settings.namespaces:
        module = _import(module_name)
        if not hasattr(module, "get_commands"):
            raise ConfigError(f"Module '{module_name}' is not a namespace provider: get_commands() is missing")
        providers.append(module)
    return providers


def create_registry(settings: Settings) -> CommandRegistry:
    """Build the command tree of the CLI.

    Raises:
        JfError: If a plugin or provider can't be loaded
    """
    return build_registry(get_builtin_commands(), _load_embedded_plugins(settings), _load_providers(settings))


def run(argv: Sequence[str], settings: Settings | None = None) -> int:
    """Build the commands and run the command line.

    Returns:
        The process exit status
    """
    log = get_logger("startup")
    try:
        settings = settings if settings is not None else load_settings()
        registry = create_registry(settings)
        validate_aliases(registry)
    except JfError as e:
        log.error(str(e))
        return int(e.exit_code)
    return App(registry, settings).run(argv)


def main() -> None:
    """Run the `jf` command."""
    init_logger(level_name=os.environ.get(LOG_LEVEL_ENV))
    log = get_logger("startup")
    try:
        code = run(sys.argv[1:])
    except KeyboardInterrupt:
        code = ExitCode.ERROR
    except Exception:  # pylint: disable=W0718
        log.critical("Unhandled exception:", exc_info=True)
        code = ExitCode.ERROR
    sys.exit(code)


if __name__ == "__main__":
    main()

"""Plugin interface: how a plugin describes its commands.

Plugins (embedded in the CLI or shipped separately) describe their commands
with these classes instead of `jfcli.commands.Command`. The
`jfcli.plugins.components` converter turns them into CLI commands.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

__all__ = [
    "PluginAction",
    "PluginApp",
    "PluginArgument",
    "PluginCommand",
    "PluginContext",
    "PluginFlag",
    "PluginNamespace",
]


@dataclass
class PluginFlag:
    """A plugin command option."""

    name: str
    description: str = ""
    kind: str = "string"  # "string" or "bool"
    default: str | bool | None = None
    mandatory: bool = False
    hidden: bool = False


@dataclass
class PluginArgument:
    """A positional argument, for help texts."""

    name: str
    description: str = ""


@dataclass
class PluginContext:
    """Invocation context handed to plugin actions."""

    command_name: str
    arguments: list[str] = field(default_factory=list)
    flags: dict[str, str | bool] = field(default_factory=dict)
    set_flags: set[str] = field(default_factory=set)

    def is_flag_set(self, name: str) -> bool:
        """Return True if the flag was given on the command line."""
        return name in self.set_flags

    def get_string_flag(self, name: str) -> str:
        """Return a string flag value ("" if unknown)."""
        value = self.flags.get(name, "")
        return "" if value is None else str(value)

    def get_bool_flag(self, name: str) -> bool:
        """Return a boolean flag value (False if unknown)."""
        return bool(self.flags.get(name, False))


PluginAction = Callable[[PluginContext], "int | None"]


@dataclass
class PluginCommand:
    """A plugin command."""

    name: str
    description: str = ""
    category: str = ""
    aliases: list[str] = field(default_factory=list)
    usage_options: list[str] = field(default_factory=list)  # usage lines, without the "jf <path>" prefix
    arguments: list[PluginArgument] = field(default_factory=list)
    flags: list[PluginFlag] = field(default_factory=list)
    env_vars: list[str] = field(default_factory=list)
    action: PluginAction | None = None
    skip_flag_parsing: bool = False
    hidden: bool = False


@dataclass
class PluginNamespace:
    """A group of plugin commands invoked as `jf <namespace> <command>`."""

    name: str
    description: str = ""
    category: str = ""
    hidden: bool = False
    commands: list[PluginCommand] = field(default_factory=list)


@dataclass
class PluginApp:
    """A self-describing plugin bundle."""

    name: str
    description: str = ""
    version: str = ""
    subcommands: list[PluginNamespace] = field(default_factory=list)  # namespaces
    commands: list[PluginCommand] = field(default_factory=list)  # top-level commands

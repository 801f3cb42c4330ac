"""Data models for command descriptors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from ..app import App
    from ..config import Settings

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

OTHER_CATEGORY = "Other"
NAMESPACES_CATEGORY = "Command Namespaces"
PLUGINS_CATEGORY = "Plugins"


class FlagKind(StrEnum):
    """Value type of a flag."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"


@dataclass
class Flag:
    """A command line option (`--name` or `--name=value`)."""

    name: str
    usage: str = ""
    kind: FlagKind = FlagKind.STRING
    default: str | bool | int | None = None
    hidden: bool = False

    def __str__(self) -> str:
        placeholder = "" if self.kind is FlagKind.BOOL else f"=<{self.kind}>"
        default = f" [Default: {self.default}]" if self.default not in (None, "") else ""
        return f"--{self.name}{placeholder}\t{self.usage}{default}".rstrip()

    def default_value(self) -> str | bool | int:
        """Return the default value, or the zero value of the flag's kind."""
        if self.default is not None:
            return self.default
        if self.kind is FlagKind.BOOL:
            return False
        if self.kind is FlagKind.INT:
            return 0
        return ""


Action = Callable[["Context"], "int | None"]


@dataclass
class Command:
    """Declarative description of one invocable command.

    Top-level commands are namespaces (e.g. "artifactory") or standalone
    commands (e.g. "login"). Flags, help texts and the action are passed
    through to the dispatcher without being inspected by the registry.
    """

    name: str
    aliases: list[str] = field(default_factory=list)
    usage: str = ""  # one line description, shown in command listings
    help_name: str = ""  # full usage block, shown by `--help`
    usage_text: str = ""  # arguments description
    args_usage: str = ""  # environment variables description
    description: str = ""
    category: str = ""
    action: Action | None = None
    subcommands: list[Command] = field(default_factory=list)
    flags: list[Flag] = field(default_factory=list)
    skip_flag_parsing: bool = False
    hidden: bool = False
    path: tuple[str, ...] = field(default=(), repr=False)  # set on registration

    def names(self) -> list[str]:
        """Return every token the command can be invoked by: name first, then aliases."""
        return [self.name, *self.aliases]

    @property
    def full_name(self) -> str:
        """The space separated command path, e.g. "artifactory upload"."""
        return " ".join(self.path) if self.path else self.name

    def has_name(self, token: str) -> bool:
        """Check whether `token` invokes this command."""
        return token == self.name or token in self.aliases

    def find_subcommand(self, token: str) -> Command | None:
        """Return the direct subcommand invoked by `token`, if any."""
        for subcommand in self.subcommands:
            if subcommand.has_name(token):
                return subcommand
        return None

    def find_flag(self, name: str) -> Flag | None:
        """Return the flag called `name`, if any."""
        for flag in self.flags:
            if flag.name == name:
                return flag
        return None

    @property
    def visible_flags(self) -> list[Flag]:
        """Flags listed in help."""
        return [flag for flag in self.flags if not flag.hidden]

    @property
    def visible_subcommands(self) -> list[Command]:
        """Subcommands listed in help and completions."""
        return [cmd for cmd in self.subcommands if not cmd.hidden]


@dataclass
class Context:
    """What an action gets to see of the invocation."""

    app: App
    command: Command
    args: list[str] = field(default_factory=list)
    flags: dict[str, Any] = field(default_factory=dict)  # only the flags given on the command line

    @property
    def settings(self) -> Settings:
        """The CLI settings."""
        return self.app.settings

    @property
    def out(self) -> TextIO:
        """The stream commands write their output to."""
        return self.app.out

    def is_set(self, name: str) -> bool:
        """Return True if the flag was given on the command line."""
        return name in self.flags

    def get(self, name: str) -> Any:
        """Return the flag value, falling back to the flag's default.

        Raises:
            KeyError: If the command has no such flag
        """
        if name in self.flags:
            return self.flags[name]
        flag = self.command.find_flag(name)
        if flag is None:
            raise KeyError(f"{self.command.full_name} has no '{name}' flag")
        return flag.default_value()

    def get_string(self, name: str) -> str:
        """Return the flag value as a string."""
        value = self.get(name)
        return "" if value is None else str(value)

    def get_bool(self, name: str) -> bool:
        """Return the flag value as a bool."""
        return bool(self.get(name))

    def get_int(self, name: str) -> int:
        """Return the flag value as an int."""
        return int(self.get(name))

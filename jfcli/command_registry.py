"""Command registry - assembly of the full command tree.

The tree is the concatenation of:
- the built-in namespaces and commands, in declaration order
- the commands of the embedded plugins
- the commands of every namespace provider
- the help-only commands of the namespace providers

sorted by name. It is built once at startup and not modified afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

from .commands.tree import assign_paths, normalize_category
from .plugins.embedded import convert_embedded_plugin

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .commands.models import Command
    from .plugins.interface import PluginApp

__all__ = ["CommandRegistry", "NamespaceProvider", "build_registry"]


@runtime_checkable
class NamespaceProvider(Protocol):
    """Anything contributing top-level commands (an object or a module).

    A provider may also define `get_help_commands()`, returning commands
    appended after every provider's commands.
    """

    def get_commands(self) -> list[Command]:
        """Return the provided top-level commands."""
        ...


class CommandRegistry(Sequence["Command"]):
    """Immutable, name-sorted sequence of the top-level commands."""

    def __init__(self, commands: Iterable[Command]) -> None:
        self._commands: tuple[Command, ...] = tuple(sorted(commands, key=lambda command: command.name))

    @overload
    def __getitem__(self, index: int) -> Command: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Command, ...]: ...

    def __getitem__(self, index: int | slice) -> Command | tuple[Command, ...]:
        return self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry({[command.name for command in self._commands]})"

    def find(self, token: str) -> Command | None:
        """Return the top-level command invoked by `token` (name or alias), if any."""
        for command in self._commands:
            if command.has_name(token):
                return command
        return None

    def resolve(self, tokens: Sequence[str]) -> Command | None:
        """Return the command at the end of a path such as ["rt", "u"]."""
        if not tokens:
            return None
        command = self.find(tokens[0])
        for token in tokens[1:]:
            if command is None:
                break
            command = command.find_subcommand(token)
        return command


def build_registry(
    builtins: Iterable[Command],
    embedded_plugins: Iterable[PluginApp] = (),
    providers: Iterable[NamespaceProvider] = (),
) -> CommandRegistry:
    """Assemble the command tree.

    Args:
        builtins: The built-in top-level commands
        embedded_plugins: Plugins to convert and register
        providers: Other namespace providers, in order

    Returns:
        The registry, with categories normalized and command paths assigned

    Raises:
        EmbeddedPluginError: If an embedded plugin can't be converted
        Any error raised by a provider is propagated unchanged.
    """
    commands: list[Command] = list(builtins)
    for app in embedded_plugins:
        commands.extend(convert_embedded_plugin(app))

    help_commands: list[Command] = []
    for provider in providers:
        commands.extend(provider.get_commands())
        get_help_commands = getattr(provider, "get_help_commands", None)
        if get_help_commands is not None:
            help_commands.extend(get_help_commands())
    commands.extend(help_commands)

    for command in commands:
        normalize_category(command)
    registry = CommandRegistry(commands)
    assign_paths(registry)
    return registry

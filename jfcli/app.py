"""Command line dispatcher.

Resolves the command path typed by the user in the registry, parses the
flags of the invoked command and runs its action.
"""

from __future__ import annotations

import platform
import sys
from typing import TYPE_CHECKING, TextIO

from .commands.models import Context
from .commands.parsing import HELP_FLAGS, parse_flags, show_help_requested
from .config import load_settings
from .constants import APP_NAME, APP_USAGE, VERSION
from .help import get_app_help, get_command_help, get_namespace_help
from .logging_setup import get_logger
from .models import ExitCode, JfError, UsageError
from .suggest import format_suggestions, search_similar_commands
from .utils import generate_trace_id

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .command_registry import CommandRegistry
    from .commands.models import Command
    from .config import Settings

__all__ = ["VERSION_FLAGS", "App"]

VERSION_FLAGS = frozenset(("--version", "-v"))


class App:
    """The `jf` application."""

    def __init__(  # noqa: PLR0913
        self,
        registry: CommandRegistry,
        settings: Settings | None = None,
        name: str = APP_NAME,
        usage: str = APP_USAGE,
        version: str = VERSION,
        out: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.settings = settings if settings is not None else load_settings()
        self.name = name
        self.usage = usage
        self.version = version
        self.out: TextIO = out if out is not None else sys.stdout
        self.trace_id = ""
        self.log = get_logger(name)

    def write(self, text: str) -> None:
        """Write to the application output."""
        self.out.write(text)

    def run(self, argv: Sequence[str]) -> int:
        """Run the command line (without the executable name).

        Returns:
            The process exit status
        """
        try:
            return self._run(list(argv))
        except JfError as e:
            self.log.error(str(e))
            return int(e.exit_code)

    def before(self) -> None:
        """Run before any command: debug information and a fresh trace id."""
        self.log.debug("JFrog CLI version: %s", self.version)
        self.log.debug("OS/Arch: %s/%s", platform.system().lower(), platform.machine().lower())
        self.trace_id = generate_trace_id()
        self.log.debug("Trace ID for JFrog Platform logs: %s", self.trace_id)

    def _run(self, args: list[str]) -> int:
        if not args or args[0] in HELP_FLAGS:
            self.write(get_app_help(self.registry, self.usage, self.version, self.name))
            return ExitCode.SUCCESS
        if args[0] in VERSION_FLAGS:
            self.write(f"{self.name} version {self.version}\n")
            return ExitCode.SUCCESS
        if args[0].startswith("-"):
            raise UsageError(f"flag provided but not defined: {args[0]}")
        self.before()
        command = self.registry.find(args[0])
        if command is None:
            return self.command_not_found(self.registry, args[0])
        return self._dispatch(command, args[1:])

    def _dispatch(self, command: Command, args: list[str]) -> int:
        if command.subcommands:
            if not args or args[0] in HELP_FLAGS:
                self.write(get_namespace_help(command, self.name))
                return ExitCode.SUCCESS
            subcommand = command.find_subcommand(args[0])
            if subcommand is not None:
                return self._dispatch(subcommand, args[1:])
            if command.action is None:
                if args[0].startswith("-"):
                    raise UsageError(f"flag provided but not defined: {args[0]}")
                return self.command_not_found(command.subcommands, args[0], prefix=command.full_name)
        return self._invoke(command, args)

    def _invoke(self, command: Command, args: list[str]) -> int:
        if command.skip_flag_parsing:
            flags: dict = {}
            positional = list(args)
            # installed plugins print their own help
            show_help = bool(command.help_name) and show_help_requested(args)
        else:
            flags, positional, show_help = parse_flags(command, args)
        if show_help or command.action is None:
            self.write(get_command_help(command, self.name))
            return ExitCode.SUCCESS
        self.log.debug("Running %s", command.full_name)
        result = command.action(Context(self, command, positional, flags))
        return int(result or ExitCode.SUCCESS)

    def command_not_found(self, commands: Iterable[Command], token: str, prefix: str = "") -> int:
        """Report an unknown command, with the most similar ones.

        Args:
            commands: Commands at the level where `token` was looked up
            token: The unknown command
            prefix: Path of the parent namespace, if any
        """
        typed = f"{prefix} {token}".strip()
        self.write(f"'{self.name} {typed}' is not a {self.name} command. See --help\n")
        suggestions = format_suggestions(self.name, search_similar_commands(commands, token))
        if suggestions:
            self.write(suggestions + "\n")
        return ExitCode.ERROR

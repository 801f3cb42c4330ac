"""Shell completion scripts generated from the command tree.

The visible command tree is mirrored into an argparse parser which shtab
renders for the requested shell.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

import shtab

from .commands.models import FlagKind
from .constants import APP_NAME, SUPPORTED_SHELLS
from .models import UsageError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Command

__all__ = ["DEFAULT_PATHS", "build_parser", "generate_completion", "get_default_path", "install_completion"]

DEFAULT_PATHS = {
    "bash": f"~/.local/share/bash-completion/completions/{APP_NAME}",
    "zsh": f"~/.zsh/completions/_{APP_NAME}",
    "tcsh": f"~/.config/tcsh/completions/{APP_NAME}.tcsh",
}


def _add_commands(subparsers: argparse._SubParsersAction, commands: Iterable[Command], depth: int) -> None:
    taken: set[str] = set()
    for command in commands:
        if command.hidden or command.name in taken:
            continue
        aliases = [alias for alias in command.aliases if alias not in taken]
        taken.update((command.name, *aliases))
        parser = subparsers.add_parser(command.name, aliases=aliases, help=command.usage, add_help=False)
        for flag in command.visible_flags:
            if flag.kind is FlagKind.BOOL:
                parser.add_argument(f"--{flag.name}", help=flag.usage, action="store_true")
            else:
                parser.add_argument(f"--{flag.name}", help=flag.usage, metavar=flag.kind.value)
        if command.visible_subcommands:
            _add_commands(parser.add_subparsers(dest=f"command_{depth}"), command.subcommands, depth + 1)


def build_parser(commands: Iterable[Command], prog: str = APP_NAME) -> argparse.ArgumentParser:
    """Mirror the visible command tree into an argparse parser."""
    parser = argparse.ArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("--help", "-h", action="store_true", help="show help")
    parser.add_argument("--version", "-v", action="store_true", help="print the version")
    _add_commands(parser.add_subparsers(dest="command"), commands, 1)
    return parser


def generate_completion(commands: Iterable[Command], shell: str, prog: str = APP_NAME) -> str:
    """Generate the completion script of `shell`.

    Raises:
        UsageError: If the shell is not supported
    """
    if shell not in SUPPORTED_SHELLS:
        raise UsageError(f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}")
    return shtab.complete(build_parser(commands, prog), shell=shell)


def get_default_path(shell: str) -> Path:
    """Get the default user-level completion path for a shell."""
    return Path(DEFAULT_PATHS[shell]).expanduser()


def install_completion(script: str, shell: str, path: Path | None = None) -> Path:
    """Write a completion script, creating parent directories as needed.

    Returns:
        The path written to
    """
    target = path or get_default_path(shell)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(script, encoding="utf-8")
    return target

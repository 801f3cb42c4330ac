"""Help texts for the application, namespaces and commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .commands.tree import group_by_category
from .constants import APP_NAME, ENV_VARS, LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .commands.models import Command

__all__ = [
    "create_env_vars",
    "create_usage",
    "get_app_help",
    "get_command_help",
    "get_global_env_vars",
    "get_namespace_help",
]


def create_usage(command: str, description: str, usages: Iterable[str], app_name: str = APP_NAME) -> str:
    """Build the "Name / Usage" block shown at the top of a command help.

    Args:
        command: Command path, e.g. "rt upload"
        description: One line description
        usages: Full usage lines, e.g. "jf rt u [command options] <source> <target>"
        app_name: Executable name
    """
    lines = "\n\t".join(usages)
    return f"\nName:\n\t{app_name} {command} - {description}\n\nUsage:\n\t{lines}\n"


def _format_env_var(name: str) -> str:
    default, description = ENV_VARS[name]
    default_line = f"\t\t[Default: {default}]\n" if default else ""
    return f"\t{name}\n{default_line}\t\t{description}\n\n"


def create_env_vars(*names: str) -> str:
    """Describe the environment variables a command reads.

    The log level variable is always listed first. Unknown names are listed
    without description.
    """
    text = _format_env_var(LOG_LEVEL_ENV)
    for name in names:
        if name == LOG_LEVEL_ENV:
            continue
        text += _format_env_var(name) if name in ENV_VARS else f"\t{name}\n\n"
    return text


def get_global_env_vars() -> str:
    """Describe every environment variable supported by the CLI."""
    return "Global Environment Variables:\n\n" + "".join(_format_env_var(name) for name in ENV_VARS)


def _listing(commands: Iterable[Command], indent: str) -> list[str]:
    rows = [(", ".join(command.names()), command.description or command.usage) for command in commands if not command.hidden]
    if not rows:
        return []
    width = max(len(names) for names, _ in rows) + 3
    return [f"{indent}{names:{width}s}{desc}".rstrip() for names, desc in rows]


def get_app_help(commands: Iterable[Command], usage: str, version: str, app_name: str = APP_NAME) -> str:
    """Get the help of the application: visible commands grouped by category.

    Args:
        commands: The top-level commands
        usage: One line description of the application
        version: The CLI version
        app_name: Executable name
    """
    lines = [
        "NAME:",
        f"   {app_name} - {usage}",
        "",
        "USAGE:",
        f"   {app_name} [global options] command [command options] [arguments...]",
        "",
        "VERSION:",
        f"   {version}",
        "",
        "COMMANDS:",
    ]
    for category, grouped in group_by_category(commands).items():
        lines.append("")
        lines.append(f"   {category}:")
        lines.extend(_listing(grouped, "     "))
    lines += [
        "",
        "GLOBAL OPTIONS:",
        "   --help, -h     show help",
        "   --version, -v  print the version",
        "",
    ]
    return "\n".join(lines)


def get_namespace_help(command: Command, app_name: str = APP_NAME) -> str:
    """Get the help of a command having subcommands."""
    lines = [
        "NAME:",
        f"   {app_name} {command.full_name} - {command.usage}",
        "",
        "USAGE:",
        f"   {app_name} {command.full_name} command [command options] [arguments...]",
        "",
        "COMMANDS:",
        *_listing(command.subcommands, "   "),
        "",
        "OPTIONS:",
        "   --help, -h  show help",
        "",
    ]
    return "\n".join(lines)


def get_command_help(command: Command, app_name: str = APP_NAME) -> str:
    """Get the help of a leaf command: usage, arguments, options and environment variables."""
    help_name = command.help_name or create_usage(
        command.full_name,
        command.usage,
        [f"{app_name} {command.full_name} [command options] [arguments...]"],
        app_name,
    )
    text = help_name
    if command.usage_text:
        text += f"\nArguments:\n{command.usage_text}\n"
    if command.visible_flags:
        options = "\n\t".join(str(flag) for flag in command.visible_flags)
        text += f"\nOptions:\n\t{options}\n"
    if command.args_usage:
        text += f"\nEnvironment Variables:\n{command.args_usage}"
    return text + "\n"

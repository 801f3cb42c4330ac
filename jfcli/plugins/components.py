"""Conversion of plugin command descriptions into CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..commands.models import Command, Flag, FlagKind
from ..help import create_env_vars, create_usage
from ..models import PluginError, UsageError
from .interface import PluginAction, PluginApp, PluginCommand, PluginContext, PluginFlag

if TYPE_CHECKING:
    from ..commands.models import Action, Context

__all__ = ["convert_app_commands"]

_FLAG_KINDS = {"string": FlagKind.STRING, "bool": FlagKind.BOOL}


def _convert_flag(flag: PluginFlag, command_name: str) -> Flag:
    kind = _FLAG_KINDS.get(flag.kind)
    if kind is None:
        raise PluginError(f"flag '{flag.name}' of command '{command_name}' has an unsupported type '{flag.kind}'")
    if flag.mandatory and flag.default not in (None, ""):
        raise PluginError(f"mandatory flag '{flag.name}' of command '{command_name}' can't have a default value")
    prefix = "[Mandatory]" if flag.mandatory else "[Optional]"
    return Flag(
        name=flag.name,
        usage=f"{prefix} {flag.description}".strip(),
        kind=kind,
        default=flag.default,
        hidden=flag.hidden,
    )


def _wrap_action(command: PluginCommand, plugin_action: PluginAction) -> Action:
    """Adapt a plugin action to the CLI action signature."""

    def _action(ctx: Context) -> int | None:
        missing = [flag.name for flag in command.flags if flag.mandatory and not ctx.is_set(flag.name)]
        if missing:
            raise UsageError(f"Missing mandatory option(s) for '{ctx.command.full_name}': {', '.join('--' + name for name in missing)}")
        plugin_ctx = PluginContext(
            command_name=command.name,
            arguments=list(ctx.args),
            flags={flag.name: ctx.get(flag.name) for flag in command.flags},
            set_flags=set(ctx.flags),
        )
        return plugin_action(plugin_ctx)

    return _action


def _arguments_text(command: PluginCommand) -> str:
    return "".join(f"\t{arg.name}\n\t\t{arg.description}\n\n" for arg in command.arguments)


def _convert_command(command: PluginCommand, namespace: str = "") -> Command:
    if not command.name:
        raise PluginError("found a command without a name")
    if command.action is None:
        raise PluginError(f"command '{command.name}' has no action")
    path = f"{namespace} {command.name}".strip()
    usages = [f"jf {path} {usage}".rstrip() for usage in command.usage_options] or [f"jf {path} [command options]"]
    return Command(
        name=command.name,
        aliases=list(command.aliases),
        usage=command.description,
        help_name=create_usage(path, command.description, usages),
        usage_text=_arguments_text(command),
        args_usage=create_env_vars(*command.env_vars),
        category=command.category,
        action=_wrap_action(command, command.action),
        flags=[_convert_flag(flag, command.name) for flag in command.flags],
        skip_flag_parsing=command.skip_flag_parsing,
        hidden=command.hidden,
    )


def convert_app_commands(app: PluginApp) -> list[Command]:
    """Convert every namespace and command of a plugin to CLI commands.

    Args:
        app: The plugin

    Returns:
        One command per plugin namespace, then one per top-level plugin command

    Raises:
        PluginError: If a command or flag can't be converted
    """
    converted: list[Command] = []
    for namespace in app.subcommands:
        converted.append(
            Command(
                name=namespace.name,
                usage=namespace.description,
                category=namespace.category,
                hidden=namespace.hidden,
                subcommands=[_convert_command(command, namespace.name) for command in namespace.commands],
            )
        )
    converted.extend(_convert_command(command) for command in app.commands)
    return converted

"""Helpers shared by command actions."""

from __future__ import annotations

import os
import secrets
from collections.abc import Mapping
from typing import TYPE_CHECKING

import questionary

from .ansi import BOLD, GREEN, colorize
from .constants import BUILD_NAME_ENV, BUILD_NUMBER_ENV, BUILD_URL_ENV, ENV_EXCLUDE_ENV

if TYPE_CHECKING:
    from .commands.models import Context

__all__ = [
    "ask_yes_no",
    "generate_trace_id",
    "get_build_name",
    "get_build_number",
    "get_build_url",
    "get_env_exclude",
    "get_interactive_value",
    "get_or_default_env",
    "get_quiet_value",
    "print_title",
]


def get_quiet_value(ctx: Context) -> bool:
    """Whether to skip confirmation prompts.

    The --quiet flag wins when given, otherwise prompts are skipped in CI.
    """
    if ctx.is_set("quiet"):
        return ctx.get_bool("quiet")
    return ctx.settings.ci


def get_interactive_value(ctx: Context) -> bool:
    """Whether to run in interactive mode.

    The --interactive flag wins when given, otherwise interactive unless in CI.
    """
    if ctx.is_set("interactive"):
        return ctx.get_bool("interactive")
    return not ctx.settings.ci


def get_or_default_env(value: str, env_key: str, environ: Mapping[str, str] | None = None) -> str:
    """Return `value` if not empty, else the environment variable `env_key`."""
    if value:
        return value
    return (os.environ if environ is None else environ).get(env_key, "")


def get_build_name(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Build name from the argument, or JFROG_CLI_BUILD_NAME."""
    return get_or_default_env(value, BUILD_NAME_ENV, environ)


def get_build_number(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Build number from the argument, or JFROG_CLI_BUILD_NUMBER."""
    return get_or_default_env(value, BUILD_NUMBER_ENV, environ)


def get_build_url(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Build URL from the argument, or JFROG_CLI_BUILD_URL."""
    return get_or_default_env(value, BUILD_URL_ENV, environ)


def get_env_exclude(value: str, environ: Mapping[str, str] | None = None) -> str:
    """Excluded environment patterns from the argument, or JFROG_CLI_ENV_EXCLUDE."""
    return get_or_default_env(value, ENV_EXCLUDE_ENV, environ)


def generate_trace_id() -> str:
    """Generate a 16 chars hexadecimal trace id."""
    return secrets.token_hex(8)


def ask_yes_no(message: str, default: bool = False) -> bool:
    """Ask a yes/no question, returning `default` if the prompt is aborted."""
    answer = questionary.confirm(message, default=default).ask()
    return default if answer is None else bool(answer)


def print_title(ctx: Context, title: str) -> None:
    """Write a highlighted line to the command output."""
    ctx.out.write(colorize(title, GREEN, BOLD, stream=ctx.out) + "\n")

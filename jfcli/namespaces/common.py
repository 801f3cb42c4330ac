"""Flags and builders shared by the built-in namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..commands.models import Command, Flag, FlagKind
from ..help import create_env_vars, create_usage
from ..models import UsageError
from ..services import delegate
from ..utils import get_build_name, get_build_number

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from ..commands.models import Action, Context

__all__ = [
    "SERVER_FLAGS",
    "bool_flag",
    "build_info_args",
    "expect_args",
    "int_flag",
    "leaf",
    "string_flag",
]


def string_flag(name: str, usage: str, default: str | None = None, hidden: bool = False) -> Flag:
    """A `--name=<value>` flag."""
    return Flag(name, f"[Optional] {usage}", FlagKind.STRING, default, hidden)


def bool_flag(name: str, usage: str, default: bool = False, hidden: bool = False) -> Flag:
    """A `--name` / `--name=false` flag."""
    return Flag(name, f"[Default: {str(default).lower()}] {usage}", FlagKind.BOOL, default, hidden)


def int_flag(name: str, usage: str, default: int | None = None) -> Flag:
    """A `--name=<number>` flag."""
    return Flag(name, f"[Optional] {usage}", FlagKind.INT, default)


SERVER_FLAGS = [
    string_flag("url", "JFrog platform URL."),
    string_flag("user", "JFrog username."),
    string_flag("password", "JFrog password."),
    string_flag("access-token", "JFrog access token."),
    string_flag("server-id", "Server ID configured using the 'jf config' command."),
    bool_flag("insecure-tls", "Set to true to skip TLS certificates verification."),
]


def leaf(  # noqa: PLR0913
    namespace: str,
    name: str,
    description: str,
    aliases: Iterable[str] = (),
    usages: Iterable[str] = (),
    arguments: str = "",
    flags: Iterable[Flag] = (),
    env_vars: Iterable[str] = (),
    prepare: Callable[[Context], dict[str, Any]] | None = None,
    action: Action | None = None,
    hidden: bool = False,
    skip_flag_parsing: bool = False,
) -> Command:
    """Declare a namespace subcommand.

    Unless `action` is given, the command is delegated to the service client
    registered as "<namespace>.<name>".

    Args:
        namespace: Short name of the parent namespace, e.g. "rt" (empty for top-level commands)
        name: Command name
        description: One line description
        aliases: Alternate tokens
        usages: Usage lines without the "jf <namespace> <command>" prefix
        arguments: Arguments description
        flags: Accepted flags
        env_vars: Environment variables read by the command
        prepare: Maps the invocation to the service call keyword arguments
        action: Local implementation
        hidden: Excluded from help and completion
        skip_flag_parsing: Pass every argument to the action unparsed
    """
    aliases = list(aliases)
    path = f"{namespace} {name}".strip()
    short_path = f"{namespace} {aliases[0] if aliases else name}".strip()
    usage_lines = [f"jf {short_path} {usage}".rstrip() for usage in usages] or [f"jf {short_path} [command options]"]
    operation = f"{namespace}.{name}" if namespace else name
    return Command(
        name=name,
        aliases=aliases,
        usage=description,
        help_name=create_usage(path, description, usage_lines),
        usage_text=arguments,
        args_usage=create_env_vars(*env_vars),
        action=action if action is not None else delegate(operation, prepare),
        flags=list(flags),
        hidden=hidden,
        skip_flag_parsing=skip_flag_parsing,
    )


def expect_args(ctx: Context, *names: str, optional: int = 0, args: Sequence[str] | None = None) -> list[str]:
    """Check the number of positional arguments.

    Args:
        ctx: The invocation
        names: Argument names, mandatory ones first
        optional: How many of the last names may be omitted
        args: The arguments to check (defaults to the command arguments)

    Returns:
        One value per name, omitted ones empty

    Raises:
        UsageError: On a wrong number of arguments
    """
    args = list(ctx.args if args is None else args)
    if not len(names) - optional <= len(args) <= len(names):
        expected = " ".join(f"[{n}]" if i >= len(names) - optional else f"<{n}>" for i, n in enumerate(names))
        raise UsageError(f"Wrong number of arguments ({len(args)}). Expected: jf {ctx.command.full_name} {expected}")
    return args + [""] * (len(names) - len(args))


def build_info_args(ctx: Context, args: Sequence[str] | None = None) -> tuple[str, str]:
    """Return the build name and number, from the arguments or the environment.

    Raises:
        UsageError: If either is missing
    """
    name_arg, number_arg = expect_args(ctx, "build name", "build number", optional=2, args=args)
    build_name = get_build_name(name_arg)
    build_number = get_build_number(number_arg)
    if not build_name or not build_number:
        raise UsageError(
            f"'jf {ctx.command.full_name}' requires a build name and number, as arguments or through the "
            "JFROG_CLI_BUILD_NAME and JFROG_CLI_BUILD_NUMBER environment variables."
        )
    return build_name, build_number

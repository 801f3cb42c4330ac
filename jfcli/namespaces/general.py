"""Top-level commands which are not namespaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..catalog import dump_commands_json
from ..config import server_config_exists
from ..help import get_global_env_vars
from ..models import UsageError
from ..utils import print_title
from .common import SERVER_FLAGS, bool_flag, expect_args, int_flag, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command, Context

__all__ = ["get_commands", "intro", "options"]


def intro(ctx: Context) -> int:
    """Welcome message, shown after installation."""
    if ctx.settings.ci:
        return 0
    ctx.out.write("\n")
    print_title(ctx, f"Thank you for installing version {ctx.app.version} of JFrog CLI! 🐸")
    if server_config_exists(ctx.settings):
        return 0
    print_title(ctx, "So what's next?")
    ctx.out.write("\n")
    print_title(ctx, "Authenticate with your JFrog Platform by running one of the following two commands:")
    ctx.out.write("\n")
    ctx.out.write(f"{ctx.app.name} login\n")
    print_title(ctx, "or")
    ctx.out.write(f"{ctx.app.name} c add\n")
    return 0


def options(ctx: Context) -> int:
    """Print the supported environment variables."""
    ctx.out.write(get_global_env_vars())
    return 0


def dumpjson(ctx: Context) -> int:
    """Print the catalog of the visible commands."""
    ctx.out.write(dump_commands_json(ctx.app.registry) + "\n")
    return 0


def prepare_setup(ctx: Context) -> dict[str, Any]:
    """setup: `[setup token]`, human or machine output."""
    (token,) = expect_args(ctx, "setup token", optional=1)
    output_format = ctx.get_string("format") or "human"
    if output_format not in ("human", "machine"):
        raise UsageError(f"Unsupported format '{output_format}'. Use 'human' or 'machine'.")
    return {"token": token, "format": output_format}


def prepare_access_token(ctx: Context) -> dict[str, Any]:
    """access-token-create: `[username]`."""
    (username,) = expect_args(ctx, "username", optional=1)
    return {
        "username": username,
        "groups": ctx.get_string("groups"),
        "scope": ctx.get_string("scope"),
        "expiry": ctx.get_int("expiry"),
        "refreshable": ctx.get_bool("refreshable"),
        "audience": ctx.get_string("audience"),
    }


def get_commands() -> list[Command]:
    """Return the general top-level commands."""
    return [
        leaf(
            "",
            "ci-setup",
            "Setup a basic CI pipeline with the JFrog Platform.",
            usages=["[path]"],
            hidden=True,
        ),
        leaf(
            "",
            "setup",
            "Setup the JFrog CLI for the JFrog Platform, using a token.",
            usages=["[setup token] [command options]"],
            flags=[string_flag("format", "Output format, 'human' or 'machine'.", default="human")],
            prepare=prepare_setup,
            hidden=True,
        ),
        leaf("", "intro", "Show the welcome message.", action=intro, hidden=True),
        leaf("", "options", "Show all supported environment variables.", action=options),
        leaf("", "login", "Log in to the JFrog Platform from the browser."),
        leaf(
            "",
            "access-token-create",
            "Creates an access token. By default, a user-scoped token will be created, unless the --groups and/or --scope flags are provided.",
            aliases=["atc"],
            usages=["[command options] [username]"],
            flags=[
                string_flag("groups", "A list of comma-separated groups for the access token to be associated with."),
                string_flag("scope", "The scope of access that the token provides."),
                int_flag("expiry", "The time in seconds for which the token will be valid."),
                bool_flag("refreshable", "Set to true if you'd like the token to be refreshable."),
                string_flag("audience", "A space-separated list of the other instances or services that should accept this token."),
                *SERVER_FLAGS,
            ],
            prepare=prepare_access_token,
        ),
        leaf("", "dumpjson", "Print the catalog of the JFrog CLI commands as JSON.", action=dumpjson, hidden=True),
    ]

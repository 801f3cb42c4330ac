"""`jf config`: server configurations management."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..utils import get_interactive_value, get_quiet_value
from .common import bool_flag, expect_args, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command, Context

__all__ = ["get_commands"]

NAMESPACE = "config"

_SERVER_DETAILS = [
    string_flag("url", "JFrog Platform URL."),
    string_flag("artifactory-url", "JFrog Artifactory URL."),
    string_flag("distribution-url", "JFrog Distribution URL."),
    string_flag("xray-url", "JFrog Xray URL."),
    string_flag("user", "JFrog Platform username."),
    string_flag("password", "JFrog Platform password."),
    string_flag("access-token", "JFrog Platform access token."),
    bool_flag("password-stdin", "Set to true if you'd like to provide the password via stdin."),
    bool_flag("access-token-stdin", "Set to true if you'd like to provide the access token via stdin."),
    bool_flag("basic-auth-only", "Set to true to disable replacing username and password with an access token."),
    bool_flag("interactive", "Set to false if you do not want the config command to be interactive.", default=True),
    bool_flag("enc-password", "If set to false then the configured password will not be encrypted.", default=True),
    bool_flag("overwrite", "Overwrites the instance configuration if an instance with the same ID already exists."),
]


def prepare_add(ctx: Context) -> dict[str, Any]:
    """add / edit: `[server ID]`, interactive unless in CI or --interactive=false."""
    (server_id,) = expect_args(ctx, "server ID", optional=1)
    return {"server_id": server_id, "interactive": get_interactive_value(ctx)}


def prepare_remove(ctx: Context) -> dict[str, Any]:
    """remove: `[server ID]`, all servers if omitted."""
    (server_id,) = expect_args(ctx, "server ID", optional=1)
    return {"server_id": server_id, "quiet": get_quiet_value(ctx)}


def get_commands() -> list[Command]:
    """Return the `config` subcommands."""
    return [
        leaf(NAMESPACE, "add", "Adds a server configuration.", usages=["[command options] [server ID]"], flags=_SERVER_DETAILS, prepare=prepare_add),
        leaf(NAMESPACE, "edit", "Edits a server configuration.", usages=["[command options] <server ID>"], flags=_SERVER_DETAILS, prepare=prepare_add),
        leaf(NAMESPACE, "show", "Shows the stored configuration.", aliases=["s"], usages=["[server ID]"]),
        leaf(
            NAMESPACE,
            "remove",
            "Removes a stored server configuration.",
            aliases=["rm"],
            usages=["[command options] [server ID]"],
            flags=[bool_flag("quiet", "Set to true to skip the delete confirmation message.")],
            prepare=prepare_remove,
        ),
        leaf(NAMESPACE, "import", "Imports a server configuration, generated by the 'jf c export' command.", aliases=["im"], usages=["<server token>"]),
        leaf(NAMESPACE, "export", "Creates a server configuration token, which can be used by the 'jf c import' command.", aliases=["ex"], usages=["[server ID]"]),
        leaf(NAMESPACE, "use", "Set the active server by its ID.", usages=["<server ID>"]),
    ]

"""`jf mc`: Mission Control commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .common import int_flag, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command

__all__ = ["get_commands"]

NAMESPACE = "mc"

_MC_FLAGS = [
    string_flag("url", "Mission Control URL."),
    string_flag("access-token", "Mission Control admin token."),
    string_flag("server-id", "Server ID configured using the config command."),
]


def get_commands() -> list[Command]:
    """Return the `mc` subcommands."""
    return [
        leaf(NAMESPACE, "jpd-add", "Add a JPD to Mission Control.", aliases=["ja"], usages=["<config>"], flags=_MC_FLAGS),
        leaf(NAMESPACE, "jpd-delete", "Delete a JPD from Mission Control.", aliases=["jd"], usages=["<jpd id>"], flags=_MC_FLAGS),
        leaf(
            NAMESPACE,
            "license-acquire",
            "Acquire a license from the specified bucket and mark it as taken by the provided name.",
            aliases=["la"],
            usages=["<bucket id> <name>"],
            flags=_MC_FLAGS,
        ),
        leaf(
            NAMESPACE,
            "license-deploy",
            "Deploy a license or a number of licenses to the specified JPD.",
            aliases=["ld"],
            usages=["<bucket id> <jpd id>"],
            flags=[*_MC_FLAGS, int_flag("license-count", "The number of licenses to deploy.", default=1)],
        ),
        leaf(NAMESPACE, "license-release", "Release a license from the specified bucket.", aliases=["lr"], usages=["<bucket id> <jpd id>"], flags=_MC_FLAGS),
    ]

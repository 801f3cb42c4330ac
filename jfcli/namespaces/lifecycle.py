"""Release lifecycle management commands.

Module-level namespace provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .common import SERVER_FLAGS, bool_flag, expect_args, leaf, string_flag

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..commands.models import Command, Context, Flag

__all__ = ["LIFECYCLE_CATEGORY", "get_commands"]

LIFECYCLE_CATEGORY = "Release Lifecycle"

_BUNDLE_ARGS = "\trelease bundle name\n\t\tName of the Release Bundle.\n\n\trelease bundle version\n\t\tVersion of the Release Bundle.\n\n"
_COMMON_FLAGS = [
    string_flag("project", "Project key associated with the Release Bundle version."),
    string_flag("signing-key", "The GPG/RSA key-pair name given in Artifactory."),
    bool_flag("sync", "Set to false to run asynchronously.", default=True),
    *SERVER_FLAGS,
]


def prepare_bundle(ctx: Context) -> dict[str, Any]:
    """`<name> <version>`."""
    name, version = expect_args(ctx, "release bundle name", "release bundle version")
    return {"name": name, "version": version, "project": ctx.get_string("project")}


def prepare_promote(ctx: Context) -> dict[str, Any]:
    """`<name> <version> <environment>`."""
    name, version, environment = expect_args(ctx, "release bundle name", "release bundle version", "environment")
    return {"name": name, "version": version, "environment": environment, "project": ctx.get_string("project")}


def prepare_export(ctx: Context) -> dict[str, Any]:
    """`<name> <version> [target pattern]`."""
    name, version, target = expect_args(ctx, "release bundle name", "release bundle version", "target pattern", optional=1)
    return {"name": name, "version": version, "target": target, "project": ctx.get_string("project")}


def _command(name: str, alias: str, description: str, usage: str, flags: list[Flag], prepare: Callable[[Context], dict[str, Any]] = prepare_bundle) -> Command:
    command = leaf(
        "",
        name,
        description,
        aliases=[alias],
        usages=[usage],
        arguments=_BUNDLE_ARGS,
        flags=[*flags, *_COMMON_FLAGS],
        prepare=prepare,
    )
    command.category = LIFECYCLE_CATEGORY
    return command


def get_commands() -> list[Command]:
    """Return the release lifecycle commands."""
    return [
        _command(
            "release-bundle-create",
            "rbc",
            "Create a Release Bundle from builds or from existing Release Bundles.",
            "[command options] <release bundle name> <release bundle version>",
            [string_flag("builds", "Path to a JSON file containing information of the source builds."), string_flag("spec", "Path to a File Spec.")],
        ),
        _command(
            "release-bundle-promote",
            "rbp",
            "Promote a Release Bundle.",
            "[command options] <release bundle name> <release bundle version> <environment>",
            [string_flag("include-repos", "List of semicolon-separated(;) repositories to include in the promotion."), string_flag("exclude-repos", "List of semicolon-separated(;) repositories to exclude from the promotion.")],
            prepare=prepare_promote,
        ),
        _command(
            "release-bundle-distribute",
            "rbd",
            "Distribute a Release Bundle.",
            "[command options] <release bundle name> <release bundle version>",
            [string_flag("dist-rules", "Path to distribution rules."), bool_flag("create-repo", "Set to true to create the repository on the edge if it does not exist."), bool_flag("dry-run", "Set to true to only simulate the distribution.")],
        ),
        _command(
            "release-bundle-delete-local",
            "rbdell",
            "Delete all release bundle promotions to an environment or delete a release bundle locally altogether.",
            "[command options] <release bundle name> <release bundle version>",
            [bool_flag("quiet", "Set to true to skip the delete confirmation message.")],
        ),
        _command(
            "release-bundle-delete-remote",
            "rbdelr",
            "Delete a release bundle version from the Artifactory instances it was distributed to.",
            "[command options] <release bundle name> <release bundle version>",
            [string_flag("dist-rules", "Path to distribution rules."), bool_flag("quiet", "Set to true to skip the delete confirmation message.")],
        ),
        _command(
            "release-bundle-export",
            "rbe",
            "Trigger the Export process and download the Release Bundle archive.",
            "[command options] <release bundle name> <release bundle version> [target pattern]",
            [],
            prepare=prepare_export,
        ),
    ]

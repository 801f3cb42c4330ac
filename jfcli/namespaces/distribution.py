"""`jf ds`: Distribution commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .common import SERVER_FLAGS, bool_flag, expect_args, int_flag, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command, Context

__all__ = ["get_commands"]

NAMESPACE = "ds"

_BUNDLE_ARGS = "\trelease bundle name\n\t\tRelease bundle name.\n\n\trelease bundle version\n\t\tRelease bundle version.\n\n"

_BUNDLE_FLAGS = [
    string_flag("spec", "Path to a File Spec."),
    string_flag("spec-vars", "List of semicolon-separated(;) variables in the form of \"key1=value1;key2=value2;...\" to be replaced in the File Spec."),
    string_flag("desc", "Description of the release bundle."),
    string_flag("release-notes-path", "Path to a file describes the release notes for the release bundle version."),
    string_flag("release-notes-syntax", "The syntax for the release notes. Can be one of 'markdown', 'asciidoc', or 'plain_text'.", default="plain_text"),
    bool_flag("sign", "If set to true, automatically signs the release bundle version."),
    string_flag("passphrase", "The passphrase for the signing key."),
    string_flag("repo", "A repository name at source Artifactory to store release bundle artifacts in."),
    bool_flag("dry-run", "Set to true to disable communication with JFrog Distribution."),
]
_DISTRIBUTION_RULES = [
    string_flag("dist-rules", "Path to distribution rules."),
    string_flag("site", "Wildcard filter for site name.", default="*"),
    string_flag("city", "Wildcard filter for site city name.", default="*"),
    string_flag("country-codes", "Semicolon-separated list of wildcard filters for site country codes.", default="*"),
]


def prepare_bundle(ctx: Context) -> dict[str, Any]:
    """Release bundle commands: `<name> <version>`."""
    name, version = expect_args(ctx, "release bundle name", "release bundle version")
    return {"name": name, "version": version}


def get_commands() -> list[Command]:
    """Return the `ds` subcommands."""
    return [
        leaf(
            NAMESPACE,
            "release-bundle-create",
            "Create a release bundle.",
            aliases=["rbc"],
            usages=["[command options] <release bundle name> <release bundle version> <pattern>", "--spec=<File Spec path> [command options] <release bundle name> <release bundle version>"],
            arguments=_BUNDLE_ARGS,
            flags=[*_BUNDLE_FLAGS, *SERVER_FLAGS],
        ),
        leaf(
            NAMESPACE,
            "release-bundle-update",
            "Update a release bundle.",
            aliases=["rbu"],
            usages=["[command options] <release bundle name> <release bundle version> <pattern>", "--spec=<File Spec path> [command options] <release bundle name> <release bundle version>"],
            arguments=_BUNDLE_ARGS,
            flags=[*_BUNDLE_FLAGS, *SERVER_FLAGS],
        ),
        leaf(
            NAMESPACE,
            "release-bundle-sign",
            "Sign a release bundle.",
            aliases=["rbs"],
            usages=["[command options] <release bundle name> <release bundle version>"],
            arguments=_BUNDLE_ARGS,
            flags=[string_flag("passphrase", "The passphrase for the signing key."), string_flag("repo", "A repository name at source Artifactory to store release bundle artifacts in."), *SERVER_FLAGS],
            prepare=prepare_bundle,
        ),
        leaf(
            NAMESPACE,
            "release-bundle-distribute",
            "Distribute a release bundle.",
            aliases=["rbd"],
            usages=["[command options] <release bundle name> <release bundle version>"],
            arguments=_BUNDLE_ARGS,
            flags=[
                *_DISTRIBUTION_RULES,
                bool_flag("sync", "Set to true to enable sync distribution."),
                int_flag("max-wait-minutes", "Max minutes to wait for sync distribution.", default=60),
                bool_flag("create-repo", "Set to true to create the repository on the edge if it does not exist."),
                bool_flag("dry-run", "Set to true to disable communication with JFrog Distribution."),
                *SERVER_FLAGS,
            ],
            prepare=prepare_bundle,
        ),
        leaf(
            NAMESPACE,
            "release-bundle-delete",
            "Delete a release bundle.",
            aliases=["rbdel"],
            usages=["[command options] <release bundle name> <release bundle version>"],
            arguments=_BUNDLE_ARGS,
            flags=[
                *_DISTRIBUTION_RULES,
                bool_flag("delete-from-dist", "Set to true to delete release bundle version in JFrog Distribution itself after deletion is complete."),
                bool_flag("sync", "Set to true to run synchronously."),
                bool_flag("quiet", "Set to true to skip the delete confirmation message."),
                bool_flag("dry-run", "Set to true to disable communication with JFrog Distribution."),
                *SERVER_FLAGS,
            ],
            prepare=prepare_bundle,
        ),
    ]

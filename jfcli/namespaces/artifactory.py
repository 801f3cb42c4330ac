"""`jf rt`: Artifactory commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..constants import BUILD_NAME_ENV, BUILD_NUMBER_ENV, BUILD_URL_ENV, ENV_EXCLUDE_ENV
from ..filespec import get_file_system_spec, get_spec, spec_from_args
from ..models import UsageError
from ..utils import get_build_url, get_env_exclude, get_quiet_value
from .common import SERVER_FLAGS, bool_flag, build_info_args, expect_args, int_flag, leaf, string_flag

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ..commands.models import Command, Context
    from ..filespec import SpecFiles

__all__ = ["get_commands"]

NAMESPACE = "rt"

_SPEC_FLAGS = [
    string_flag("spec", "Path to a File Spec."),
    string_flag("spec-vars", "List of semicolon-separated(;) variables in the form of \"key1=value1;key2=value2;...\" to be replaced in the File Spec."),
]
_BUILD_FLAGS = [
    string_flag("build-name", "Providing this option will collect and record build info for this build name."),
    string_flag("build-number", "Providing this option will collect and record build info for this build number."),
    string_flag("module", "Optional module name for the build-info."),
    string_flag("project", "JFrog Artifactory project key."),
]
_COMMON_FILTERS = [
    string_flag("exclusions", "Semicolon-separated list of exclusion patterns."),
    bool_flag("recursive", "Set to false if you do not wish to collect artifacts in sub-folders.", default=True),
    bool_flag("regexp", "Set to true to use a regular expression instead of wildcards."),
    int_flag("threads", "Number of working threads.", default=3),
    bool_flag("dry-run", "Set to true to disable communication with Artifactory."),
    bool_flag("quiet", "Set to true to skip the confirmation message."),
]
_REMOTE_FILTERS = [
    string_flag("props", "List of semicolon-separated properties in the form of \"key1=value1;key2=value2,value3\"."),
    string_flag("exclude-props", "List of semicolon-separated properties to exclude artifacts."),
    string_flag("build", "If specified, only artifacts of the specified build are matched, in the form of build-name/build-number."),
    string_flag("bundle", "If specified, only artifacts of the specified bundle are matched, in the form of bundle-name/bundle-version."),
    string_flag("exclude-artifacts", "If specified, build artifacts are not matched."),
    string_flag("include-deps", "If specified, also dependencies of the specified build are matched."),
    string_flag("sort-by", "List of semicolon-separated fields to sort by."),
    string_flag("sort-order", "The order by which fields in the 'sort-by' option should be sorted. Accepts 'asc' or 'desc'."),
    int_flag("offset", "The offset from which to fetch items."),
    int_flag("limit", "The maximum number of items to fetch."),
    bool_flag("include-dirs", "Set to true if you'd like to also apply the source path pattern for directories."),
]


def _file_spec(ctx: Context, is_download: bool) -> SpecFiles:
    if ctx.is_set("spec"):
        if ctx.args:
            raise UsageError("No arguments should be sent when the spec option is used.")
        return get_spec(ctx, is_download) if is_download else get_file_system_spec(ctx)
    return spec_from_args(ctx, is_download)


def _transfer_options(ctx: Context) -> dict[str, Any]:
    return {
        "threads": ctx.get_int("threads"),
        "dry_run": ctx.get_bool("dry-run"),
        "build_name": ctx.get_string("build-name"),
        "build_number": ctx.get_string("build-number"),
        "module": ctx.get_string("module"),
        "project": ctx.get_string("project"),
    }


def prepare_upload(ctx: Context) -> dict[str, Any]:
    """Upload: a file-system sourced spec."""
    return {"spec": _file_spec(ctx, is_download=False), **_transfer_options(ctx)}


def prepare_download(ctx: Context) -> dict[str, Any]:
    """Download: a repository sourced spec."""
    return {"spec": _file_spec(ctx, is_download=True), **_transfer_options(ctx)}


def prepare_remote_spec(ctx: Context) -> dict[str, Any]:
    """Commands working on artifacts in Artifactory (move, copy, delete, search...)."""
    return {"spec": _file_spec(ctx, is_download=True), "quiet": get_quiet_value(ctx)}


def prepare_props(ctx: Context) -> dict[str, Any]:
    """set-props / delete-props: `<pattern> <properties>`, or a spec and `<properties>`."""
    if ctx.is_set("spec"):
        (properties,) = expect_args(ctx, "properties")
        spec = get_spec(ctx, is_download=True)
    else:
        pattern, properties = expect_args(ctx, "files pattern", "properties")
        spec = spec_from_args(ctx, is_download=True, args=[pattern])
    return {"spec": spec, "properties": properties, "quiet": get_quiet_value(ctx)}


def _build_kwargs(ctx: Context, args: Sequence[str] | None = None) -> dict[str, Any]:
    build_name, build_number = build_info_args(ctx, args)
    return {"build_name": build_name, "build_number": build_number, "project": ctx.get_string("project")}


def prepare_build(ctx: Context) -> dict[str, Any]:
    """Build-info commands: `[build name] [build number]`."""
    return _build_kwargs(ctx)


def prepare_build_publish(ctx: Context) -> dict[str, Any]:
    """build-publish adds the CI build URL and the excluded environment patterns."""
    return {
        **_build_kwargs(ctx),
        "build_url": get_build_url(ctx.get_string("build-url")),
        "env_exclude": get_env_exclude(ctx.get_string("env-exclude")),
        "dry_run": ctx.get_bool("dry-run"),
    }


def prepare_build_promote(ctx: Context) -> dict[str, Any]:
    """build-promote: `[build name] [build number] <target repository>`."""
    *build_args, target_repo = expect_args(ctx, "build name", "build number", "target repository", optional=2)
    # the target repository is always the last argument
    given = [arg for arg in (*build_args, target_repo) if arg]
    if not given:
        raise UsageError("The target repository is mandatory.")
    return {
        **_build_kwargs(ctx, given[:-1]),
        "target_repo": given[-1],
        "status": ctx.get_string("status"),
        "comment": ctx.get_string("comment"),
        "copy": ctx.get_bool("copy"),
        "dry_run": ctx.get_bool("dry-run"),
    }


def prepare_curl(ctx: Context) -> dict[str, Any]:
    """curl: every argument is passed to curl, except --server-id."""
    curl_args = [arg for arg in ctx.args if not arg.startswith("--server-id")]
    if not curl_args:
        raise UsageError("Wrong number of arguments. Expected: jf rt curl [command options] <curl command>")
    server_id = next((arg.partition("=")[2] for arg in ctx.args if arg.startswith("--server-id=")), "")
    return {"curl_args": curl_args, "server_id": server_id}


def _named(*names: str) -> Callable[[Context], dict[str, Any]]:
    def _prepare(ctx: Context) -> dict[str, Any]:
        return dict(zip((n.replace(" ", "_") for n in names), expect_args(ctx, *names), strict=True))

    return _prepare


_BUILD_ARGS = "\tbuild name\n\t\tBuild name.\n\n\tbuild number\n\t\tBuild number.\n\n"


def get_commands() -> list[Command]:
    """Return the `rt` subcommands."""
    return [
        leaf(
            NAMESPACE,
            "upload",
            "Upload files.",
            aliases=["u"],
            usages=["[command options] <source pattern> <target pattern>", "--spec=<File Spec path> [command options]"],
            arguments="\tsource pattern\n\t\tSpecifies the local file system path to artifacts.\n\n\ttarget pattern\n\t\tSpecifies the target path in Artifactory.\n\n",
            flags=[
                *_SPEC_FLAGS,
                *_BUILD_FLAGS,
                *_COMMON_FILTERS,
                string_flag("target-props", "List of semicolon-separated properties to attach to the uploaded artifacts."),
                bool_flag("flat", "If true, the file paths are not preserved in Artifactory."),
                bool_flag("explode", "Set to true to extract an archive after it is deployed to Artifactory."),
                bool_flag("symlinks", "Set to true to preserve symbolic links structure in Artifactory."),
                bool_flag("include-dirs", "Set to true if you'd like to also apply the source path pattern for directories."),
                *SERVER_FLAGS,
            ],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            prepare=prepare_upload,
        ),
        leaf(
            NAMESPACE,
            "download",
            "Download files from Artifactory to local file system.",
            aliases=["dl"],
            usages=["[command options] <source pattern> [target pattern]", "--spec=<File Spec path> [command options]"],
            arguments="\tsource pattern\n\t\tSpecifies the source path in Artifactory.\n\n\ttarget pattern\n\t\tThe local file system target path.\n\n",
            flags=[
                *_SPEC_FLAGS,
                *_BUILD_FLAGS,
                *_COMMON_FILTERS,
                *_REMOTE_FILTERS,
                bool_flag("flat", "Set to true if you do not wish to have the Artifactory repository path structure created locally."),
                bool_flag("explode", "Set to true to extract an archive after it is downloaded."),
                bool_flag("validate-symlinks", "Set to true to perform a checksum validation when downloading symbolic links."),
                string_flag("gpg-key", "Path to the public GPG key file used to validate downloaded release bundles."),
                *SERVER_FLAGS,
            ],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            prepare=prepare_download,
        ),
        leaf(
            NAMESPACE,
            "move",
            "Move files between Artifactory paths.",
            aliases=["mv"],
            usages=["[command options] <source pattern> <target pattern>", "--spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, bool_flag("flat", "If true, the source path structure is not preserved."), *SERVER_FLAGS],
            prepare=prepare_remote_spec,
        ),
        leaf(
            NAMESPACE,
            "copy",
            "Copy files between Artifactory paths.",
            aliases=["cp"],
            usages=["[command options] <source pattern> <target pattern>", "--spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, bool_flag("flat", "If true, the source path structure is not preserved."), *SERVER_FLAGS],
            prepare=prepare_remote_spec,
        ),
        leaf(
            NAMESPACE,
            "delete",
            "Delete files from Artifactory.",
            aliases=["del"],
            usages=["[command options] <delete pattern>", "--spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, *SERVER_FLAGS],
            prepare=prepare_remote_spec,
        ),
        leaf(
            NAMESPACE,
            "search",
            "Search files in Artifactory.",
            aliases=["s"],
            usages=["[command options] <search pattern>", "--spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, bool_flag("count", "Set to true to display only the total of files or folders found."), *SERVER_FLAGS],
            prepare=prepare_remote_spec,
        ),
        leaf(
            NAMESPACE,
            "set-props",
            "Set properties on existing files in Artifactory.",
            aliases=["sp"],
            usages=["[command options] <files pattern> <file properties>", "<file properties> --spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, *SERVER_FLAGS],
            prepare=prepare_props,
        ),
        leaf(
            NAMESPACE,
            "delete-props",
            "Delete properties on existing files in Artifactory.",
            aliases=["delp"],
            usages=["[command options] <files pattern> <properties keys>", "<properties keys> --spec=<File Spec path> [command options]"],
            flags=[*_SPEC_FLAGS, *_COMMON_FILTERS, *_REMOTE_FILTERS, *SERVER_FLAGS],
            prepare=prepare_props,
        ),
        leaf(
            NAMESPACE,
            "build-publish",
            "Publish build info.",
            aliases=["bp"],
            usages=["[command options] <build name> <build number>"],
            arguments=_BUILD_ARGS,
            flags=[
                string_flag("project", "JFrog Artifactory project key."),
                string_flag("build-url", "Can be used for setting the CI server build URL in the build-info."),
                string_flag("env-exclude", "List of case insensitive semicolon-separated(;) patterns in the form of \"value1;value2;...\"."),
                bool_flag("dry-run", "Set to true to get a preview of the recorded build info, without publishing it to Artifactory."),
                *SERVER_FLAGS,
            ],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV, BUILD_URL_ENV, ENV_EXCLUDE_ENV],
            prepare=prepare_build_publish,
        ),
        leaf(
            NAMESPACE,
            "build-collect-env",
            "Collect environment variables. Environment variables can be excluded using the build-publish command.",
            aliases=["bce"],
            usages=["[command options] <build name> <build number>"],
            arguments=_BUILD_ARGS,
            flags=[string_flag("project", "JFrog Artifactory project key.")],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            prepare=prepare_build,
        ),
        leaf(
            NAMESPACE,
            "build-add-dependencies",
            "Adds dependencies from the local file-system to the build info.",
            aliases=["bad"],
            usages=["[command options] <build name> <build number> <pattern>"],
            flags=[*_SPEC_FLAGS, string_flag("project", "JFrog Artifactory project key."), bool_flag("from-rt", "Set to true to search the files in Artifactory, rather than on the local file system.")],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
        ),
        leaf(
            NAMESPACE,
            "build-add-git",
            "Collect VCS details from git and add them to a build.",
            aliases=["bag"],
            usages=["[command options] <build name> <build number> [path to .git]"],
            flags=[string_flag("config", "Path to a configuration file."), string_flag("project", "JFrog Artifactory project key.")],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
        ),
        leaf(
            NAMESPACE,
            "build-clean",
            "This command is used to clean (remove) build info collected locally.",
            aliases=["bc"],
            usages=["[command options] <build name> <build number>"],
            arguments=_BUILD_ARGS,
            flags=[string_flag("project", "JFrog Artifactory project key.")],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            prepare=prepare_build,
        ),
        leaf(
            NAMESPACE,
            "build-promote",
            "This command is used to promote build in Artifactory.",
            aliases=["bpr"],
            usages=["[command options] <build name> <build number> <target repository>"],
            flags=[
                string_flag("project", "JFrog Artifactory project key."),
                string_flag("status", "Build promotion status."),
                string_flag("comment", "Build promotion comment."),
                bool_flag("copy", "Set to true to copy the artifacts instead of moving them."),
                bool_flag("dry-run", "If true, promotion is only simulated."),
                *SERVER_FLAGS,
            ],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            prepare=prepare_build_promote,
        ),
        leaf(
            NAMESPACE,
            "build-discard",
            "Discard builds by setting retention parameters.",
            aliases=["bdi"],
            usages=["[command options] <build name>"],
            flags=[
                int_flag("max-days", "The maximum number of days to keep builds in Artifactory."),
                int_flag("max-builds", "The maximum number of builds to store in Artifactory."),
                string_flag("exclude-builds", "List of comma-separated build numbers to exclude."),
                bool_flag("delete-artifacts", "If set to true, automatically removes build artifacts stored in Artifactory."),
                bool_flag("async", "If set to true, build discard will run asynchronously."),
                string_flag("project", "JFrog Artifactory project key."),
                *SERVER_FLAGS,
            ],
            env_vars=[BUILD_NAME_ENV],
        ),
        leaf(
            NAMESPACE,
            "build-docker-create",
            "Add a published docker image to the build-info.",
            aliases=["bdc"],
            usages=["<target repo> --image-file=<image file path> [command options]"],
            flags=[string_flag("image-file", "Path to a file which includes one line in the following format: IMAGE-TAG@sha256:MANIFEST-SHA256."), *_BUILD_FLAGS, *SERVER_FLAGS],
            prepare=_named("target repo"),
        ),
        leaf(NAMESPACE, "ping", "Send applicative health check request to Artifactory.", aliases=["p"], flags=SERVER_FLAGS),
        leaf(
            NAMESPACE,
            "curl",
            "Execute a cUrl command, using the configured Artifactory details.",
            aliases=["cl"],
            usages=["[command options] <curl command>"],
            prepare=prepare_curl,
            skip_flag_parsing=True,
        ),
        leaf(NAMESPACE, "repo-template", "Create a JSON template for repository creation or update.", aliases=["rpt"], usages=["<template path>"], prepare=_named("template path")),
        leaf(NAMESPACE, "repo-create", "Create a new repository in Artifactory.", aliases=["rc"], usages=["<template path> [command options]"], flags=[string_flag("vars", "List of variables in the form of \"key1=value1;key2=value2;...\"."), *SERVER_FLAGS], prepare=_named("template path")),
        leaf(NAMESPACE, "repo-update", "Update an existing repository configuration in Artifactory.", aliases=["ru"], usages=["<template path> [command options]"], flags=[string_flag("vars", "List of variables in the form of \"key1=value1;key2=value2;...\"."), *SERVER_FLAGS], prepare=_named("template path")),
        leaf(NAMESPACE, "repo-delete", "Permanently delete repositories with all of their content from Artifactory.", aliases=["rdel"], usages=["<repository pattern>"], flags=[bool_flag("quiet", "Set to true to skip the delete confirmation message."), *SERVER_FLAGS], prepare=_named("repository pattern")),
        leaf(NAMESPACE, "replication-template", "Create a JSON template for a replication job creation.", aliases=["rplt"], usages=["<template path>"], prepare=_named("template path")),
        leaf(NAMESPACE, "replication-create", "Create a new replication job in Artifactory.", aliases=["rplc"], usages=["<template path> [command options]"], flags=SERVER_FLAGS, prepare=_named("template path")),
        leaf(NAMESPACE, "replication-delete", "Remove a replication repository from Artifactory.", aliases=["rpldel"], usages=["<repository key>"], flags=[bool_flag("quiet", "Set to true to skip the delete confirmation message."), *SERVER_FLAGS], prepare=_named("repository key")),
        leaf(NAMESPACE, "permission-target-template", "Create a JSON template for a permission target creation or replacement.", aliases=["ptt"], usages=["<template path>"], prepare=_named("template path")),
        leaf(NAMESPACE, "permission-target-create", "Create a new permission target in the JFrog Platform.", aliases=["ptc"], usages=["<template path> [command options]"], flags=SERVER_FLAGS, prepare=_named("template path")),
        leaf(NAMESPACE, "permission-target-update", "Update a permission target in the JFrog Platform.", aliases=["ptu"], usages=["<template path> [command options]"], flags=SERVER_FLAGS, prepare=_named("template path")),
        leaf(NAMESPACE, "permission-target-delete", "Permanently delete a permission target.", aliases=["ptdel"], usages=["<permission target name>"], flags=[bool_flag("quiet", "Set to true to skip the delete confirmation message."), *SERVER_FLAGS], prepare=_named("permission target name")),
        leaf(NAMESPACE, "user-create", "Create new user.", usages=["<username> <password> <email>"], flags=[string_flag("users-groups", "A list of comma-separated groups for the new user."), bool_flag("admin", "Set to true if you'd like to create an admin user."), *SERVER_FLAGS], prepare=_named("username", "password", "email")),
        leaf(NAMESPACE, "users-create", "Create new users.", aliases=["uc"], usages=["--csv=<users details file path> [command options]"], flags=[string_flag("csv", "Path to a CSV file with the users' details."), string_flag("users-groups", "A list of comma-separated groups for the new users."), bool_flag("replace", "Set to true if you'd like existing users or groups to be replaced."), *SERVER_FLAGS]),
        leaf(NAMESPACE, "users-delete", "Delete users.", aliases=["udel"], usages=["<users list> [command options]", "--csv=<users details file path> [command options]"], flags=[string_flag("csv", "Path to a CSV file with the users' details."), bool_flag("quiet", "Set to true to skip the delete confirmation message."), *SERVER_FLAGS]),
        leaf(NAMESPACE, "group-create", "Create new users group.", aliases=["gc"], usages=["<group name>"], flags=SERVER_FLAGS, prepare=_named("group name")),
        leaf(NAMESPACE, "group-add-users", "Add a list of users to a group.", aliases=["gau"], usages=["<group name> <users list>"], flags=SERVER_FLAGS, prepare=_named("group name", "users list")),
        leaf(NAMESPACE, "group-delete", "Delete a users group.", aliases=["gdel"], usages=["<group name>"], flags=[bool_flag("quiet", "Set to true to skip the delete confirmation message."), *SERVER_FLAGS], prepare=_named("group name")),
        leaf(NAMESPACE, "transfer-settings", "Copy configuration from one Artifactory server to another.", usages=["<source server ID> <target server ID>"], prepare=_named("source server ID", "target server ID")),
        leaf(NAMESPACE, "transfer-files", "Transfer files from one Artifactory to another Artifactory.", usages=["<source server ID> <target server ID> [command options]"], flags=[string_flag("include-repos", "List of semicolon-separated(;) repositories to include in the transfer."), string_flag("exclude-repos", "List of semicolon-separated(;) repositories to exclude from the transfer."), bool_flag("status", "Set to true to show the status of the transfer-files command currently in progress.")]),
    ]

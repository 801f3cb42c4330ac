"""`jf pl`: Pipelines commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .common import bool_flag, expect_args, leaf, string_flag

if TYPE_CHECKING:
    from ..commands.models import Command, Context

__all__ = ["get_commands"]

NAMESPACE = "pl"

_PL_FLAGS = [string_flag("server-id", "Server ID configured using the config command.")]


def prepare_trigger(ctx: Context) -> dict[str, Any]:
    """trigger: `<pipeline name> <branch name>`."""
    pipeline_name, branch = expect_args(ctx, "pipeline name", "branch name")
    return {"pipeline_name": pipeline_name, "branch": branch, "monitor": ctx.get_bool("monitor")}


def prepare_sync(ctx: Context) -> dict[str, Any]:
    """sync and sync-status: `<repository name> <branch name>`."""
    repository, branch = expect_args(ctx, "repository name", "branch name")
    return {"repository": repository, "branch": branch}


def get_commands() -> list[Command]:
    """Return the `pl` subcommands."""
    return [
        leaf(
            NAMESPACE,
            "status",
            "Fetch the latest pipeline run status.",
            aliases=["s"],
            usages=["[command options]"],
            flags=[
                *_PL_FLAGS,
                string_flag("branch", "Branch name to filter."),
                string_flag("pipeline-name", "Pipeline name to filter."),
                bool_flag("monitor", "Monitor pipeline status until it completes."),
                bool_flag("single-branch", "Set to true for single branch pipelines."),
            ],
        ),
        leaf(
            NAMESPACE,
            "trigger",
            "Trigger a manual pipeline run.",
            aliases=["t"],
            usages=["<pipeline name> <branch name>"],
            arguments="\tpipeline name\n\t\tPipeline name to trigger the manual run on.\n\n\tbranch name\n\t\tBranch name to trigger the manual run on.\n\n",
            flags=[*_PL_FLAGS, bool_flag("monitor", "Monitor pipeline status until it completes.")],
            prepare=prepare_trigger,
        ),
        leaf(NAMESPACE, "version", "Show the version of JFrog Pipelines.", aliases=["v"], flags=_PL_FLAGS),
        leaf(NAMESPACE, "sync", "Sync a pipeline resource.", aliases=["sy"], usages=["<repository name> <branch name>"], flags=_PL_FLAGS, prepare=prepare_sync),
        leaf(NAMESPACE, "sync-status", "Fetch the pipeline resource sync status.", aliases=["ss"], usages=["<repository name> <branch name>"], flags=_PL_FLAGS, prepare=prepare_sync),
    ]

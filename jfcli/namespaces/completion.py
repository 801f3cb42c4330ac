"""`jf completion`: shell completion scripts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..completions import generate_completion, install_completion
from ..constants import SUPPORTED_SHELLS
from ..logging_setup import get_logger
from .common import bool_flag, leaf

if TYPE_CHECKING:
    from ..commands.models import Action, Command, Context

__all__ = ["get_commands"]

log = get_logger("completion")

_INSTALL_FLAG = bool_flag("install", "Set to true to install the completion script instead of printing it to the standard output.")


def _completion_action(shell: str) -> Action:
    def _action(ctx: Context) -> int:
        script = generate_completion(ctx.app.registry, shell, ctx.app.name)
        if ctx.get_bool("install"):
            path = install_completion(script, shell)
            log.info("Generated %s completion script at %s", shell, path)
        else:
            ctx.out.write(script)
        return 0

    return _action


def get_commands() -> list[Command]:
    """Return one subcommand per supported shell."""
    return [
        leaf(
            "completion",
            shell,
            f"Generate {shell} completion script.",
            usages=["[command options]"],
            flags=[_INSTALL_FLAG],
            action=_completion_action(shell),
        )
        for shell in SUPPORTED_SHELLS
    ]

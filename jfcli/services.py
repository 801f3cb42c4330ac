"""Delegation of business actions to external service clients.

Service clients register one callable per operation in the `jfcli.services`
entry point group::

    [project.entry-points."jfcli.services"]
    "rt.upload" = "jfrog_services.artifactory:upload"

The callable receives the command context, plus the keyword arguments
computed by the command's `prepare` function, if any.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any

from .logging_setup import get_logger
from .models import ServiceNotAvailableError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .commands.models import Action, Context

__all__ = ["SERVICES_GROUP", "delegate", "load_service_handler"]

SERVICES_GROUP = "jfcli.services"

log = get_logger("services")


def load_service_handler(operation: str) -> Callable[..., int | None]:
    """Load the callable handling `operation` (e.g. "rt.upload").

    Raises:
        ServiceNotAvailableError: If no installed distribution provides it
    """
    matches = entry_points(group=SERVICES_GROUP, name=operation)
    for entry_point in matches:
        log.debug("Loading %s from %s", operation, entry_point.value)
        return entry_point.load()
    raise ServiceNotAvailableError(operation, SERVICES_GROUP)


def delegate(operation: str, prepare: Callable[[Context], dict[str, Any]] | None = None) -> Action:
    """Create an action forwarding to the service client of `operation`.

    Args:
        operation: Entry point name
        prepare: Validates the invocation and maps flags and arguments to
            keyword arguments; it runs before the handler is looked up, so
            usage errors are reported even without a client installed
    """

    def _action(ctx: Context) -> int | None:
        kwargs = prepare(ctx) if prepare is not None else {}
        handler = load_service_handler(operation)
        return handler(ctx, **kwargs)

    _action.__name__ = f"delegate_{operation.replace('.', '_').replace('-', '_')}"
    return _action

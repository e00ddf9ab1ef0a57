"""Error hook plumbing.

Every validation failure in the domain is routed through an OnError hook.
The hook may raise its own exception, log, or do nothing at all; if it
returns, the original error is raised anyway.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

if TYPE_CHECKING:
    from datalocations.domain.exceptions.base import DataLocationError
    from datalocations.domain.ports.on_error import OnError


def THROW_THE_ERROR(error: DataLocationError) -> NoReturn:  # noqa: N802
    """Default error hook: raise the error as-is."""
    raise error


def report_error(error: DataLocationError, on_error: OnError) -> NoReturn:
    """Pass `error` to the hook, then raise it.

    Args:
        error: Structured error describing the failed validation
        on_error: Caller-supplied hook

    Raises:
        Whatever the hook raises, otherwise `error` itself.
    """
    on_error(error)
    raise error

"""Run context binding for structured logging.

Binds run-scoped context (run id, locale, namespace) to every log entry
emitted while a conversion is in progress.

Usage:
    from infrastructure.logging import bind_run_context

    with bind_run_context(locale="en"):
        logger.info("locale_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_run_context(
    run_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind run-scoped context to all logs within the context manager.

    Nested blocks may rebind keys (for example ``namespace``); on exit the
    keys bound by the block are removed again.

    Args:
        run_id: Identifier of the run. Reuses the current one when already
            bound, otherwise a new one is generated.
        **extra_context: Additional key-value pairs to include in logs.
            ``None`` values are skipped.

    Yields:
        The run id bound for the block.
    """
    run_id = run_id or get_run_id() or uuid.uuid4().hex
    context: dict[str, Any] = {"run_id": run_id}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield run_id
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        restore = {k: previous[k] for k in context if k in previous}
        if restore:
            structlog.contextvars.bind_contextvars(**restore)


def get_run_id() -> Optional[str]:
    """Get the current run id from the logging context.

    Returns:
        The run id if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("run_id")


def clear_run_context() -> None:
    """Clear all run-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()

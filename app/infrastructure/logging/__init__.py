"""Structured logging for the converter (structlog over stdlib logging).

    from infrastructure.logging import bind_run_context, get_module_logger

    logger = get_module_logger()
    with bind_run_context(locale="en"):
        logger.info("locale_started")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_run_context,
    get_run_id,
    clear_run_context,
)
from infrastructure.logging.formatters import add_static_fields, truncate_large_values

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_run_context",
    "get_run_id",
    "clear_run_context",
    "add_static_fields",
    "truncate_large_values",
]

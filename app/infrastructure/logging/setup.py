"""Structlog setup for the converter.

Events are written to stderr, rendered for the console in development and
as JSON lines in production. Nothing is emitted while pytest is running.

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("namespace_converted", locale="en", namespace="auth")
"""

import inspect
import logging
import sys
from types import ModuleType
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import settings
from infrastructure.logging.formatters import add_static_fields, truncate_large_values

APP_NAME = "i18n-converter"

# Leaf texts and file contents can end up in event fields
MAX_VALUE_LENGTH = 500

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(json_output: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_static_fields(app_name=APP_NAME, environment=settings.ENVIRONMENT),
        truncate_large_values(MAX_VALUE_LENGTH),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger.

    Args:
        log_level: Level name such as ``DEBUG``. Defaults to settings.LOG_LEVEL;
            unknown names fall back to INFO.
        is_production: JSON output when true. Defaults to settings.is_production.

    Returns:
        A logger bound to the new configuration.
    """
    json_output = settings.is_production if is_production is None else is_production

    if _is_test_environment():
        level = SILENT
    else:
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=_build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, stream=sys.stderr, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module() -> Optional[ModuleType]:
    # two frames up: past this helper and the public get_*logger function
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            return None
        frame = frame.f_back
    return inspect.getmodule(frame) if frame is not None else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Return a logger bound to ``logger_name`` (the caller's module by default)."""
    if name is None:
        module = _caller_module()
        name = module.__name__ if module else "unknown"
    return logger.bind(logger_name=name)


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    In ``modules/translations/walker.py`` the bound context is
    ``component="walker"`` and ``module_path="modules.translations.walker"``.
    """
    module = _caller_module()
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )

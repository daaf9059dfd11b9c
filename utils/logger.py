import structlog
import logging
import sys
from typing import Optional, TextIO
from config.settings import settings

def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None
):
    """
    Configure structured logging for the dashboard.

    Logs go to stderr by default so the rendered report on stdout stays clean.

    Args:
        log_level: Overrides settings.log_level
        log_format: "json" or "console", overrides settings.log_format
        stream: Destination for log lines
    """
    level = getattr(logging, (log_level or settings.log_level).upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if (log_format or settings.log_format) == "json"
        else structlog.dev.ConsoleRenderer()
    )
    stream = stream or sys.stderr

    logging.basicConfig(format="%(message)s", level=level, stream=stream)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

def get_logger(name: str):
    """
    Get a logger for a component; the name is attached to every event.

    The name travels as an initial value of the lazy proxy, so loggers created
    at import time still pick up the configuration from setup_logging().
    """
    return structlog.get_logger(logger_name=name)

"""Structured logging configuration."""
import logging
import structlog
from core.config import settings


def configure_logging():
    """Configure structured logging with structlog."""
    # Map string log level to logging constant
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(
        service=settings.app_name,
        version=settings.app_version,
    )


def get_logger(name: str):
    """Get a logger instance for a records client module."""
    return structlog.get_logger(name)

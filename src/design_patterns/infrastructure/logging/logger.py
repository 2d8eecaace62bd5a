"""Structured logging set up with structlog on top of the stdlib logging module.

Diagnostic logs never share a stream with demo output: demo lines go through
an :class:`~design_patterns.infrastructure.output.OutputSink`, logs go to
stderr and/or a rotating file.
"""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from design_patterns.config.schemas.base_config import LogDestination, LogFormat
from design_patterns.config.schemas.logging_schema import LoggingConfig

_lock = threading.RLock()
_configured = False
_installed_handlers: List[logging.Handler] = []


def _shared_processors(config: LoggingConfig) -> list:
    processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if config.format == LogFormat.JSON:
        processors.append(structlog.processors.format_exc_info)
    processors.append(structlog.processors.UnicodeDecoder())
    return processors


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.destination == LogDestination.STDOUT:
        handlers.append(logging.StreamHandler(sys.stdout))
    elif config.destination in (LogDestination.STDERR, LogDestination.BOTH):
        handlers.append(logging.StreamHandler(sys.stderr))

    if config.requires_file():
        log_path = os.path.expandvars(config.file_path or "logs/design_patterns.log")
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        )
    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Calling this again replaces the handlers installed by the previous call;
    handlers installed by anyone else (pytest, embedding applications) are left alone.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.
    Returns:
        Configured structlog logger for the package.
    """
    global _configured
    config = config or LoggingConfig()

    with _lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.value))

        for handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
        _installed_handlers.clear()

        shared = _shared_processors(config)
        if config.format == LogFormat.JSON:
            renderer = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer(colors=False)

        formatter = structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared,
        )
        for handler in _build_handlers(config):
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)
            _installed_handlers.append(handler)

        structlog.configure(
            processors=[structlog.stdlib.filter_by_level]
            + shared
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _configured = True

    logger = structlog.get_logger("design_patterns")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
        log_format=config.format.value,
    )
    return logger


def is_configured() -> bool:
    """Whether setup_logging has run in this process."""
    return _configured


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, configuring defaults on first use."""
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)

"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import orjson
import structlog


def configure_logging(
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog to write to stderr.

    Args:
        json_output: If True, output JSON logs. If False, use console renderer.
        level: Minimum level name to emit, e.g. "INFO" or "DEBUG".
        stream: Text stream to write to. Defaults to the current sys.stderr.
    """
    if stream is None:
        stream = sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
    ]

    if json_output:
        # JSON for CI log collectors
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=orjson.dumps),
        ]
        logger_factory: structlog.types.WrappedLogger = structlog.BytesLoggerFactory(
            file=stream.buffer
        )
    else:
        # Pretty console for local builds
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=stream.isatty()),
        ]
        logger_factory = structlog.PrintLoggerFactory(file=stream)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=logger_factory,
        # Each CLI run may hand us a different stream
        cache_logger_on_first_use=False,
    )


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A structlog bound logger.
    """
    return structlog.get_logger(name)

"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog

from repeat_math.utils.settings import get_settings

if TYPE_CHECKING:
    from repeat_math.utils.settings import LoggingSettings

_log_stream: TextIO | None = None


def _build_renderer(log_format: str) -> Any:
    """Return the final structlog processor for the configured format."""
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "event"],
        )
    return structlog.processors.JSONRenderer()


def _open_stream(log_file_path: str | None) -> TextIO:
    """Open the destination stream for log lines."""
    global _log_stream  # noqa: PLW0603

    if _log_stream is not None and _log_stream is not sys.stderr:
        _log_stream.close()

    if log_file_path:
        path = Path(log_file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        _log_stream = path.open("a", encoding="utf-8")
    else:
        _log_stream = sys.stderr
    return _log_stream


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog from the logging settings.

    Args:
        settings: Settings to apply. Defaults to the global settings instance.

    """
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping()[settings.log_level]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _build_renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.WriteLoggerFactory(
            file=_open_stream(settings.log_file_path),
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the component name."""
    return structlog.get_logger(name, component=name)


__all__ = ["configure_logging", "get_logger"]

"""Logging for litequery.

Every logger handed out by :func:`get_logger` lives under the ``litequery``
namespace, so applications can tune the whole library through one logger.

Builders attach the details of each render to the log record as
``extra_fields``: the builder type, the leading statement keyword, the SQL
length and the placeholder and parameter counts, or the phase name and its
duration when ``debug_mode`` timing is on. The formatters below lay those
fields out either as JSON lines or as ``key=value`` text.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

from litequery._serialization import encode_json
from litequery.exceptions import ImproperConfigurationError

if TYPE_CHECKING:
    from logging import LogRecord
    from pathlib import Path
    from typing import TextIO

__all__ = (
    "ROOT_LOGGER_NAME",
    "KeyValueFormatter",
    "StructuredFormatter",
    "configure_logging",
    "get_logger",
    "statement_fields",
)

ROOT_LOGGER_NAME = "litequery"
KEY_VALUE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def statement_fields(record: LogRecord) -> dict[str, Any]:
    """Return the render details a builder attached to ``record``, if any."""
    fields = getattr(record, "extra_fields", None)
    return dict(fields) if isinstance(fields, dict) else {}


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message, then the render details.

    Example output::

        {"time":"...","level":"DEBUG","logger":"litequery.builder","message":"Built SelectBuilder statement",
         "builder_type":"SelectBuilder","statement":"SELECT","sql_length":30,"placeholder_count":1,"parameter_count":1}
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(statement_fields(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


class KeyValueFormatter(logging.Formatter):
    """Plain text with the render details appended as ``key=value`` pairs.

    Durations are shown with three decimals, e.g.
    ``... DEBUG litequery.builder: Completed build phase: compile in 0.012ms phase=compile duration_ms=0.012``.
    """

    def __init__(self, fmt: str | None = KEY_VALUE_FORMAT, datefmt: str | None = None) -> None:
        super().__init__(fmt, datefmt)

    def formatMessage(self, record: LogRecord) -> str:  # noqa: N802
        line = super().formatMessage(record)
        fields = statement_fields(record)
        if not fields:
            return line
        pairs = " ".join(f"{key}={_format_value(value)}" for key, value in fields.items())
        return f"{line} {pairs}"


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "structured": StructuredFormatter,
    "key_value": KeyValueFormatter,
}


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``litequery`` namespace.

    Args:
        name: Child logger name, e.g. ``"builder"``. Names already under ``litequery`` are used as is.

    Returns:
        The ``litequery`` logger, or the named child of it.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    format_style: str = "structured",
    stream: TextIO | None = None,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Send litequery's render logs to ``stream`` and, optionally, a file.

    Handlers previously installed on the ``litequery`` logger are removed. The
    logger stops propagating, so records are not duplicated by the root logger.

    Args:
        level: A level number or name, e.g. ``"DEBUG"`` to see every rendered statement.
        format_style: ``"structured"`` for JSON lines or ``"key_value"`` for text.
        stream: Stream for the console handler. Defaults to ``sys.stderr``.
        log_file: Optional path that receives the same records as JSON lines.

    Raises:
        ImproperConfigurationError: If ``level`` or ``format_style`` is not recognised.

    Returns:
        The configured ``litequery`` logger.
    """
    resolved = level if isinstance(level, int) else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        msg = f"Unknown log level {level!r}."
        raise ImproperConfigurationError(msg)
    formatter_type = _FORMATTERS.get(format_style)
    if formatter_type is None:
        msg = f"Unknown log format style {format_style!r}. Expected one of: {', '.join(sorted(_FORMATTERS))}"
        raise ImproperConfigurationError(msg)

    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setFormatter(formatter_type())
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.setLevel(resolved)
    logger.propagate = False
    return logger

"""Logging setup for daypath.

Library modules only create ``logging.getLogger(__name__)`` loggers and log at
DEBUG; handlers are installed by the application through
``configure_logging``. Output is either a text line per record or, with
``structured=True``, one JSON object per line:

    {"level": "DEBUG", "message": "...", "timestamp": "...",
     "context": {"logger_name": "...", "module": "...", "function": "...",
                 "line": 42, ...extra fields...}}

Timings from ``log_performance`` go to the separate DAYPATH_PERF logger so
they can be enabled without turning on DEBUG everywhere.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
import functools
import json
import logging
from pathlib import Path
import sys
import time
from typing import Any, TypeVar

from daypath.core.utils.json import json_default

PERF_LOGGER_NAME = "DAYPATH_PERF"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])

# Attributes every LogRecord carries; anything else on a record came from
# ``extra=`` or a LoggerAdapter and belongs in the context block.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """Render a record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        exc_type, exc_value, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            context["error_type"] = exc_type.__name__
            context["error_message"] = str(exc_value)
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=json_default)


def _make_handler(filename: str | Path | None) -> logging.Handler:
    if filename is None or str(filename) == "":
        return logging.StreamHandler(sys.stdout)
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | Path | None = None,
    structured: bool = False,
) -> None:
    """Install a single root handler, replacing any existing ones.

    Args:
        level: Level name, case-insensitive (DEBUG ... CRITICAL).
        format_string: Text format; ignored when ``structured`` is set.
        filename: Log file (parent dirs created); stdout when None.
        structured: Emit JSON lines instead of text.

    Raises:
        ValueError: If ``level`` is not a known level name.

    Example:
        >>> configure_logging(level="DEBUG", structured=True, filename="logs/daypath.jsonl")
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    handler = _make_handler(filename)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=numeric, handlers=[handler], force=True)


def get_perf_logger() -> logging.Logger:
    return logging.getLogger(PERF_LOGGER_NAME)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, wrapped in a LoggerAdapter when context is given.

    Example:
        >>> log = get_logger(__name__, document="curve.json")
        >>> log.debug("Loaded %d nodes", 3)
    """
    base = logging.getLogger(name)
    return logging.LoggerAdapter(base, context) if context else base


def log_performance(func: F) -> F:
    """Log the wall time of each call to ``func`` at DEBUG on DAYPATH_PERF."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            get_perf_logger().debug(
                "Function %r took %.4f seconds to execute.",
                func.__qualname__,
                time.perf_counter() - start,
            )

    return wrapper  # type: ignore[return-value]

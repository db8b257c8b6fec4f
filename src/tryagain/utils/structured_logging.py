r"""Structured logging utilities for machine-readable log output.

The retry executors attach ``attempt``, ``delay`` and ``error_type``
fields to their log records. This module provides an opt-in JSON
formatter that renders those fields, and a context-local session id to
group the records of one retry session.

Example:
    Enable structured logging for tryagain:

    ```python
    import logging
    from tryagain.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("tryagain")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag the records of one retry session:

    ```python
    from tryagain import retry
    from tryagain.backoff import ExponentialBackoff
    from tryagain.utils.structured_logging import clear_session_id, set_session_id

    set_session_id("sync-orders")
    try:
        retry(ExponentialBackoff(max_attempts=5), sync_orders)
    finally:
        clear_session_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_session_id",
    "get_session_id",
    "log_structured",
    "set_session_id",
]

import contextvars
import json
import logging
import time
from typing import Any

# Context variable so that concurrent tasks and threads keep their own id
_session_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "tryagain_session_id", default=None
)

# Attributes present on every LogRecord, excluded from the extra fields
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def get_session_id() -> str | None:
    """Get the current retry session id.

    Returns:
        The current session id, or None if not set.

    Example:
        ```pycon
        >>> from tryagain.utils.structured_logging import clear_session_id, get_session_id
        >>> clear_session_id()
        >>> get_session_id() is None
        True

        ```
    """
    return _session_id.get()


def set_session_id(session_id: str) -> None:
    """Set the retry session id for the current context.

    Args:
        session_id: The id attached to every structured log record
            emitted in the current context.

    Example:
        ```pycon
        >>> from tryagain.utils.structured_logging import get_session_id, set_session_id
        >>> set_session_id("session-456")
        >>> get_session_id()
        'session-456'

        ```
    """
    _session_id.set(session_id)


def clear_session_id() -> None:
    """Clear the retry session id for the current context."""
    _session_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC, millisecond precision)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - session_id: Optional retry session id
        - module, function, line: Where the record originated

    Extra fields passed through the ``extra`` parameter of a logging
    call (for example ``attempt`` or ``delay``) are added as top-level
    keys. Values that are not JSON serializable are rendered with
    ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from tryagain.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Retrying", extra={"attempt": 2})
        >>> json.loads(stream.getvalue())["attempt"]
        2

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        session_id = get_session_id()
        if session_id is not None:
            log_data["session_id"] = session_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        """Format timestamp as ISO 8601, ignoring ``datefmt``."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The extra fields are included in the JSON output when using
    ``StructuredFormatter`` and are ignored by plain formatters.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)

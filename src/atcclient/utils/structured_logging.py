r"""Structured logging utilities for machine-readable log output.

The client logs every request it sends at DEBUG level with structured
fields (operation, method, url, status code, duration). The fields are
attached through the ``extra`` parameter of the standard logging calls,
so they are ignored by the default formatters and rendered as JSON keys
by ``StructuredFormatter``.

Example:
    Enable structured logging for atcclient:

    ```python
    import logging
    from atcclient.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("atcclient")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```
"""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

import json
import logging
import time
from typing import Any

# Attributes set on every LogRecord, which are not extra fields
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, followed by any field added through the
    ``extra`` parameter of the logging call.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from atcclient.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("atcclient", logging.INFO, "", 1, "hello", (), None)
        >>> record.status_code = 200
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["message"], data["status_code"]
        ('hello', 200)

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
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp as ISO 8601 (``datefmt`` is ignored)."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Additional structured fields to include in the log.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra)

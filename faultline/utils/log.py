"""Package logger for faultline.

Diagnostics go to stderr. The level comes from ``FAULTLINE_LOG_LEVEL``
(``WARNING`` unless set) and ``faultline -v`` lowers it to ``DEBUG``.
"""

import logging
import os
import sys
from typing import Any, Optional

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Append ``extra=`` fields to the message as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={value!r}"
            for key, value in sorted(vars(record).items())
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return f"{message} ({context})" if context else message


class FaultlineLogger:
    """Thin wrapper around the ``faultline`` stdlib logger."""

    def __init__(self, name: str = "faultline"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(ContextFormatter("%(levelname)s: %(message)s"))
            self.logger.addHandler(handler)
        self.set_console_level(_level_from_env())

    def set_console_level(self, level: int) -> None:
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(message, *args, **kwargs)


def _level_from_env() -> int:
    name = os.getenv("FAULTLINE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


_logger: Optional[FaultlineLogger] = None


def get_logger() -> FaultlineLogger:
    """Get the process-wide logger."""
    global _logger
    if _logger is None:
        _logger = FaultlineLogger()
    return _logger

"""
Logging utilities for internal use.

Usage:
    from diagtrace.internal.logger import get_logger

    log = get_logger(__name__)
    log.debug("registered observer %s", observer_type.__name__)

Every logger returned by ``get_logger`` carries a rate limiting filter: a given
call site (pathname and line number) is emitted at most once per
``DIAGTRACE_LOGGING_RATE`` seconds (applied by ``diagtrace._logger``), and the next emitted record reports how many
were skipped in between. ``DIAGTRACE_LOGGING_RATE=0`` disables the limit, and
loggers set to DEBUG are never limited.
"""

import collections
import logging
import time
from typing import DefaultDict
from typing import Tuple


SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve or create a ``Logger`` instance with consistent behavior for internal use.

    Configure all loggers with a rate limiter filter to prevent excessive logging.
    """
    logger = logging.getLogger(name)
    # addFilter will only add the filter if it is not already present
    logger.addFilter(log_filter)
    logger.propagate = True
    return logger


# Tracks the current time bucket of a call site and the number of records skipped in it
class LoggingBucket:
    def __init__(self, bucket: float, skipped: int):
        self.bucket = bucket
        self.skipped = skipped

    def __repr__(self):
        return f"LoggingBucket({self.bucket}, {self.skipped})"

    def is_sampled(self, record: logging.LogRecord, rate: float) -> bool:
        """Determine if the record should be emitted given the rate limit."""
        current = time.monotonic()
        if current - self.bucket >= rate:
            self.bucket = current
            record.skipped = self.skipped
            self.skipped = 0
            return True
        self.skipped += 1
        return False


_MINF = float("-inf")

_buckets: DefaultDict[Tuple[str, int], LoggingBucket] = collections.defaultdict(lambda: LoggingBucket(_MINF, 0))

# Allow 1 log record per pathname/lineno every 60 seconds by default
# DEV: `DIAGTRACE_LOGGING_RATE=0` means to disable all rate limiting, see `diagtrace._logger`
_rate_limit = MINUTE


def set_rate_limit(rate: int) -> None:
    global _rate_limit
    _rate_limit = rate


def log_filter(record: logging.LogRecord) -> bool:
    """
    Function used to determine if a log record should be outputted or not (True = output, False = skip).

    Records are rate limited by the filename and line number of the log call.
    """
    logger = logging.getLogger(record.name)
    if not _rate_limit or logger.getEffectiveLevel() == logging.DEBUG:
        return True
    key = (record.pathname, record.lineno)
    return _buckets[key].is_sampled(record, _rate_limit)


class DiagtraceFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        skipped = getattr(record, "skipped", 0)
        skip_str = f" [{skipped} skipped]" if skipped else ""
        return f"{record.levelname} {super().format(record)}{skip_str}"

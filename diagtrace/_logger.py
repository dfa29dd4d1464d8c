import logging
from logging.handlers import RotatingFileHandler
from os import path
from typing import Optional

from .internal import logger as _internal_logger
from .internal.logger import DiagtraceFormatter
from .settings._config import config


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [%(filename)s:%(lineno)d] - %(message)s"


def configure_diagtrace_logger():
    # type: () -> None
    """Configures diagtrace log levels, rate limiting and file paths.

    Customization is possible with the environment variables:
        ``DIAGTRACE_DEBUG``, ``DIAGTRACE_LOGGING_RATE``, ``DIAGTRACE_LOG_FILE_LEVEL``
        and ``DIAGTRACE_LOG_FILE``

    By default diagtrace loggers inherit from the root logger and no logs are
    written to a file.

    When DIAGTRACE_DEBUG has been enabled the ``diagtrace`` logger is set to DEBUG,
    which also lifts rate limiting. When DIAGTRACE_LOG_FILE is specified, records
    are additionally routed to a rotating file using DIAGTRACE_LOG_FILE_LEVEL.
    """
    diagtrace_logger = logging.getLogger("diagtrace")
    _internal_logger.set_rate_limit(config.logging_rate)

    if config.log_stream_handler and not any(
        isinstance(h.formatter, DiagtraceFormatter) for h in diagtrace_logger.handlers
    ):
        handler = logging.StreamHandler()
        handler.setFormatter(DiagtraceFormatter())
        diagtrace_logger.addHandler(handler)

    _configure_diagtrace_debug_logger(diagtrace_logger)
    _configure_diagtrace_file_logger(diagtrace_logger)


def _configure_diagtrace_debug_logger(logger):
    if config.debug:
        logger.setLevel(logging.DEBUG)


def _configure_diagtrace_file_logger(logger):
    log_file_level = config.log_file_level
    try:
        file_log_level_value = getattr(logging, log_file_level)
    except AttributeError:
        raise ValueError(
            "DIAGTRACE_LOG_FILE_LEVEL is invalid. Log level must be CRITICAL/ERROR/WARNING/INFO/DEBUG.",
            log_file_level,
        )
    _add_file_handler(
        logger=logger,
        log_path=config.log_file,
        log_level=file_log_level_value,
        max_file_bytes=config.log_file_size_bytes,
    )


def _add_file_handler(
    logger: logging.Logger,
    log_path: Optional[str],
    log_level: int,
    max_file_bytes: int,
) -> Optional[RotatingFileHandler]:
    if log_path is None:
        return None

    log_path = path.abspath(log_path)
    file_handler = RotatingFileHandler(filename=log_path, mode="a", maxBytes=max_file_bytes, backupCount=1)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    logger.debug("diagtrace logs will be routed to %s", log_path)
    return file_handler

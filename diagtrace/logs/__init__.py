from ._filters import LOG_LEVEL_NONE
from ._filters import CategoryLevelFilter
from ._filters import FilterRule
from ._filters import LoggerFilterOptions
from ._filters import install_filters
from .handler import SpanEventLogHandler


__all__ = [
    "LOG_LEVEL_NONE",
    "CategoryLevelFilter",
    "FilterRule",
    "LoggerFilterOptions",
    "SpanEventLogHandler",
    "install_filters",
]

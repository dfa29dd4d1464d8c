import logging
from typing import Optional
from typing import Type

import attr

from ..internal._exceptions import OptionsFrozenError
from ..internal.logger import get_logger


log = get_logger(__name__)

# Level of a rule that suppresses every record of its category
LOG_LEVEL_NONE = logging.CRITICAL + 10


@attr.s(frozen=True, slots=True)
class FilterRule(object):
    """Minimum level for records of ``category`` handled by ``provider``.

    ``category`` is a logger name; it also applies to every child logger
    (``"Microsoft.AspNetCore"`` covers ``"Microsoft.AspNetCore.Routing"``).
    """

    provider = attr.ib()  # type: Type[logging.Handler]
    category = attr.ib()  # type: str
    level = attr.ib()  # type: int

    def matches(self, provider, category):
        # type: (Type[logging.Handler], str) -> bool
        if not issubclass(provider, self.provider):
            return False
        return category == self.category or category.startswith(self.category + ".")


@attr.s(slots=True)
class LoggerFilterOptions(object):
    """
    Filter rules applied to log handlers registered by the builder.

    The rule with the longest matching category wins; between rules with the
    same category the last one added wins. Records of categories without any
    rule are checked against ``min_level``.
    """

    min_level = attr.ib(default=logging.NOTSET)  # type: int
    rules = attr.ib(factory=list)
    _frozen = attr.ib(default=False, init=False)

    def add_filter(self, provider, category, level):
        # type: (Type[logging.Handler], str, int) -> None
        if self._frozen:
            raise OptionsFrozenError("logger filter rules can no longer be modified")
        self.rules.append(FilterRule(provider, category, level))

    def select(self, provider, category):
        # type: (Type[logging.Handler], str) -> int
        selected = None  # type: Optional[FilterRule]
        for rule in self.rules:
            if not rule.matches(provider, category):
                continue
            if selected is None or len(rule.category) >= len(selected.category):
                selected = rule
        if selected is None:
            return self.min_level
        return selected.level

    def freeze(self):
        # type: () -> None
        self.rules = tuple(self.rules)
        self._frozen = True


class CategoryLevelFilter(logging.Filter):
    """Applies ``LoggerFilterOptions`` to the records reaching one handler."""

    def __init__(self, provider, options):
        # type: (Type[logging.Handler], LoggerFilterOptions) -> None
        super(CategoryLevelFilter, self).__init__()
        self.provider = provider
        self.options = options

    def filter(self, record):
        # type: (logging.LogRecord) -> bool
        return record.levelno >= self.options.select(self.provider, record.name)


def install_filters(handler, options):
    # type: (logging.Handler, LoggerFilterOptions) -> CategoryLevelFilter
    """Attach ``options`` to ``handler``. Only rules for the handler type take effect."""
    level_filter = CategoryLevelFilter(type(handler), options)
    handler.addFilter(level_filter)
    log.debug("installed %d filter rule(s) on %s", len(options.rules), type(handler).__name__)
    return level_filter

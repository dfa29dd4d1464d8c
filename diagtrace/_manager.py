import logging
from typing import Any  # noqa:F401
from typing import List  # noqa:F401
from typing import Optional  # noqa:F401
from typing import Sequence  # noqa:F401

from .contrib.observer import DiagnosticObserver  # noqa:F401
from .internal.logger import get_logger


log = get_logger(__name__)


class DiagnosticManager(object):
    """
    Observers and log handlers built from a :class:`TracingBuilder`.

    Event producers call :meth:`dispatch` with the name of their listener;
    the event is handed to every observer subscribed to that listener.
    :meth:`start` attaches the log handlers to the root logger and
    :meth:`stop` detaches them.
    """

    def __init__(self, observers, log_handlers):
        # type: (Sequence[DiagnosticObserver], Sequence[logging.Handler]) -> None
        self.observers = tuple(observers)
        self.log_handlers = tuple(log_handlers)
        self._logger = None  # type: Optional[logging.Logger]

    def __repr__(self):
        return "<{} observers={} log_handlers={}>".format(
            self.__class__.__name__,
            [type(o).__name__ for o in self.observers],
            [type(h).__name__ for h in self.log_handlers],
        )

    @property
    def started(self):
        # type: () -> bool
        return self._logger is not None

    def observers_for(self, listener_name):
        # type: (str) -> List[DiagnosticObserver]
        return [o for o in self.observers if o.is_subscriber_enabled() and o.subscribes_to(listener_name)]

    def dispatch(self, listener_name, event_name, payload=None):
        # type: (str, str, Any) -> None
        for observer in self.observers_for(listener_name):
            observer.on_event(listener_name, event_name, payload)

    def start(self, logger=None):
        # type: (Optional[logging.Logger]) -> None
        if self.started:
            return
        self._logger = logger if logger is not None else logging.getLogger()
        for handler in self.log_handlers:
            self._logger.addHandler(handler)
        log.debug("started %r", self)

    def stop(self):
        # type: () -> None
        if self._logger is None:
            return
        for handler in self.log_handlers:
            self._logger.removeHandler(handler)
        self._logger = None
        log.debug("stopped %r", self)

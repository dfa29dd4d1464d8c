from typing import Any
from typing import Optional
from typing import Type

from opentelemetry import trace

from ..constants import COMPONENT_KEY
from ..constants import EVENT_KEY
from ..internal.logger import get_logger
from ..settings.options import ModuleOptions


log = get_logger(__name__)


class DiagnosticObserver(object):
    """
    Base class of the observers fed by diagnostic listeners.

    An observer is created once at startup with the tracer and the frozen
    options of its module. It decides which listeners it subscribes to and
    turns the events it receives into spans. Observers are called
    concurrently by event producers, so they keep no per-event state.

    Subclasses set ``listener_name`` to the listener they own and
    ``options_type`` to the options class of their module.
    """

    listener_name = None  # type: Optional[str]
    options_type = ModuleOptions  # type: Type[ModuleOptions]

    def __init__(self, tracer, options):
        # type: (trace.Tracer, ModuleOptions) -> None
        self.tracer = tracer
        self.options = options

    def __repr__(self):
        return "<{} listener={}>".format(self.__class__.__name__, self.listener_name)

    def is_subscriber_enabled(self):
        # type: () -> bool
        return True

    def subscribes_to(self, listener_name):
        # type: (str) -> bool
        return listener_name == self.listener_name

    def on_event(self, listener_name, event_name, payload=None):
        # type: (str, str, Any) -> Optional[trace.Span]
        """Handle one event, returning the recorded span if any.

        Errors are logged and never propagated to the event producer.
        """
        try:
            if self.is_event_ignored(listener_name, event_name, payload):
                return None
            if not self.options.start_root_spans and not _has_active_parent():
                log.debug("ignoring %s: no active span and root spans are disabled", event_name)
                return None
            return self.record_event(listener_name, event_name, payload)
        except Exception:
            log.error("failed to handle event %s of listener %s", event_name, listener_name, exc_info=True)
            return None

    def is_event_ignored(self, listener_name, event_name, payload):
        # type: (str, str, Any) -> bool
        return any(pattern(event_name, payload) for pattern in self.options.ignore_patterns)

    def operation_name(self, event_name, payload):
        # type: (str, Any) -> str
        resolver = self.options.operation_name_resolver
        if resolver is None:
            return event_name
        return resolver(event_name, payload)

    def record_event(self, listener_name, event_name, payload):
        # type: (str, str, Any) -> trace.Span
        span = self.tracer.start_span(
            self.operation_name(event_name, payload),
            attributes={COMPONENT_KEY: listener_name, EVENT_KEY: event_name},
        )
        span.end()
        return span


def _has_active_parent():
    # type: () -> bool
    return trace.get_current_span().get_span_context().is_valid

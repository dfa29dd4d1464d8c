from typing import Any

from ...settings.options import GenericDiagnosticOptions
from ..observer import DiagnosticObserver


class GenericDiagnostics(DiagnosticObserver):
    """Catch-all observer subscribing to every listener without a dedicated module."""

    options_type = GenericDiagnosticOptions

    def subscribes_to(self, listener_name):
        # type: (str) -> bool
        return listener_name not in self.options.ignored_listener_names

    def is_event_ignored(self, listener_name, event_name, payload):
        # type: (str, str, Any) -> bool
        if self.options.is_event_ignored(listener_name, event_name):
            return True
        return super(GenericDiagnostics, self).is_event_ignored(listener_name, event_name, payload)

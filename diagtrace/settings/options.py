from types import MappingProxyType
from typing import Any  # noqa:F401

from ..internal._exceptions import OptionsFrozenError
from ..internal.utils.attrdict import AttrDict
from ._config import config


class ModuleOptions(AttrDict):
    """
    Options of one instrumentation module.

    This is what a configuration patch receives::

        builder.configure_http_handler(lambda options: setattr(options, "start_root_spans", False))

        # `ModuleOptions` supports both attribute and item accessors
        def configure(options):
            options["start_root_spans"] = False
            options.operation_name_resolver = lambda event_name, payload: payload["route"]

    Keys that are not known here are kept as they are: modules may carry
    settings of their own that are only read by their observer.

    Options are frozen when the observers are built; any modification after
    that raises :class:`OptionsFrozenError`.
    """

    def __init__(self, *args, **kwargs):
        super(ModuleOptions, self).__init__(*args, **kwargs)
        # DEV: By-pass `AttrDict.__setattr__` to set a real property
        object.__setattr__(self, "_frozen", False)

        # Create spans for events without an active parent span
        self.setdefault("start_root_spans", True)
        # Predicates called with (event_name, payload); a match drops the event
        self.setdefault("ignore_patterns", [])
        # Called with (event_name, payload), returns the span name
        self.setdefault("operation_name_resolver", None)

    @property
    def frozen(self):
        # type: () -> bool
        return self._frozen

    def _check_mutable(self):
        if self._frozen:
            raise OptionsFrozenError(f"{type(self).__name__} can no longer be modified")

    def __setitem__(self, name, value):
        # type: (str, Any) -> None
        self._check_mutable()
        super(ModuleOptions, self).__setitem__(name, value)

    def __delitem__(self, name):
        # type: (str) -> None
        self._check_mutable()
        super(ModuleOptions, self).__delitem__(name)

    def freeze(self):
        # type: () -> None
        """Make these options read-only, including the collections they hold."""
        if self._frozen:
            return
        for key, value in list(self.items()):
            self[key] = _freeze_value(value)
        object.__setattr__(self, "_frozen", True)

    def __repr__(self):
        cls = self.__class__
        return "{}.{}({})".format(cls.__module__, cls.__name__, ", ".join(self.keys()))


def _freeze_value(value):
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, dict):
        return MappingProxyType({k: _freeze_value(v) for k, v in value.items()})
    return value


class AspNetCoreDiagnosticOptions(ModuleOptions):
    """Options of the incoming request instrumentation."""


class HttpHandlerDiagnosticOptions(ModuleOptions):
    """Options of the outgoing HTTP request instrumentation."""


class GenericDiagnosticOptions(ModuleOptions):
    """Options of the catch-all instrumentation.

    ``ignored_listener_names`` lists the listeners the catch-all module never
    subscribes to. Enabling a specific module adds its own listener name here.
    ``ignored_events`` maps a listener name to the event names dropped for it.
    """

    def __init__(self, *args, **kwargs):
        super(GenericDiagnosticOptions, self).__init__(*args, **kwargs)
        self.setdefault("ignored_listener_names", set(config.ignored_listener_names))
        self.setdefault("ignored_events", {})

    def ignore_event(self, listener_name, event_name):
        # type: (str, str) -> None
        self._check_mutable()
        self.ignored_events.setdefault(listener_name, set()).add(event_name)

    def is_event_ignored(self, listener_name, event_name):
        # type: (str, str) -> bool
        return event_name in self.ignored_events.get(listener_name, ())

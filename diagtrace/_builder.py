import logging
from typing import Callable
from typing import Optional
from typing import Type
from typing import TypeVar

from opentelemetry import trace

from ._manager import DiagnosticManager
from ._registry import Registry
from .constants import HOST_FRAMEWORK_LOG_CATEGORY
from .constants import HOSTING_LOG_CATEGORY
from .constants import ORM_LOG_CATEGORY
from .contrib.aspnetcore import AspNetCoreDiagnostics
from .contrib.generic import GenericDiagnostics
from .contrib.httphandler import HttpHandlerDiagnostics
from .contrib.observer import DiagnosticObserver
from .internal._exceptions import InvalidArgumentError
from .internal._exceptions import OptionsFrozenError
from .internal.logger import get_logger
from .logs import LOG_LEVEL_NONE
from .logs import LoggerFilterOptions
from .logs import SpanEventLogHandler
from .logs import install_filters
from .settings._config import config
from .settings._store import OptionStore
from .settings.options import AspNetCoreDiagnosticOptions
from .settings.options import GenericDiagnosticOptions
from .settings.options import HttpHandlerDiagnosticOptions
from .settings.options import ModuleOptions


log = get_logger(__name__)

OptionsT = TypeVar("OptionsT", bound=ModuleOptions)
Configure = Optional[Callable[[OptionsT], object]]


class TracingBuilder(object):
    """
    Entry point used to enable diagnostic instrumentation.

    Every operation is available as a chained method::

        manager = (
            TracingBuilder()
            .add_http_handler()
            .add_aspnetcore(lambda options: options.ignore_patterns.append(is_health_check))
            .add_logger_provider()
            .build()
        )

    and as a module level function taking the builder as first argument
    (``diagtrace.add_aspnetcore(builder)``).

    The builder owns the option store shared by every module and the
    registries of observers and log providers. It is meant to be configured
    from a single thread during startup; :meth:`build` freezes the options.
    """

    def __init__(self, options=None):
        # type: (Optional[OptionStore]) -> None
        self.options = options if options is not None else OptionStore()
        self.observers = Registry("observer")  # type: Registry[DiagnosticObserver]
        self.log_providers = Registry("log provider")  # type: Registry[logging.Handler]

    def __repr__(self):
        return "<{} observers={!r} log_providers={!r}>".format(
            self.__class__.__name__, self.observers, self.log_providers
        )

    def add_aspnetcore(self, options=None):
        # type: (Configure[AspNetCoreDiagnosticOptions]) -> TracingBuilder
        return add_aspnetcore(self, options)

    def configure_aspnetcore(self, options):
        # type: (Configure[AspNetCoreDiagnosticOptions]) -> TracingBuilder
        return configure_aspnetcore(self, options)

    def add_http_handler(self, options=None):
        # type: (Configure[HttpHandlerDiagnosticOptions]) -> TracingBuilder
        return add_http_handler(self, options)

    def configure_http_handler(self, options):
        # type: (Configure[HttpHandlerDiagnosticOptions]) -> TracingBuilder
        return configure_http_handler(self, options)

    def add_generic_diagnostics(self, options=None):
        # type: (Configure[GenericDiagnosticOptions]) -> TracingBuilder
        return add_generic_diagnostics(self, options)

    def configure_generic_diagnostics(self, options):
        # type: (Configure[GenericDiagnosticOptions]) -> TracingBuilder
        return configure_generic_diagnostics(self, options)

    def remove_generic_diagnostics(self):
        # type: () -> TracingBuilder
        return remove_generic_diagnostics(self)

    def add_logger_provider(self):
        # type: () -> TracingBuilder
        return add_logger_provider(self)

    def add_default_instrumentation(self):
        # type: () -> TracingBuilder
        return add_default_instrumentation(self)

    def build(self, tracer=None):
        # type: (Optional[trace.Tracer]) -> DiagnosticManager
        """Freeze the options and create the registered observers and log handlers.

        :param tracer: tracer used by the observers, defaults to the tracer
            of the global OpenTelemetry tracer provider.
        """
        if tracer is None:
            tracer = trace.get_tracer("diagtrace")

        self.options.freeze()

        observers = [
            observer_type(tracer, self.options.get_or_create(observer_type.options_type))
            for observer_type in self.observers
        ]

        filter_options = self.options.get_or_create(LoggerFilterOptions)
        log_handlers = []
        for provider_type in self.log_providers:
            handler = provider_type()
            install_filters(handler, filter_options)
            log_handlers.append(handler)

        manager = DiagnosticManager(observers, log_handlers)
        log.debug("built %r", manager)
        return manager


def _check_builder(builder):
    # type: (Optional[TracingBuilder]) -> TracingBuilder
    if builder is None:
        raise InvalidArgumentError("builder")
    return builder


def _check_not_built(builder):
    # type: (Optional[TracingBuilder]) -> TracingBuilder
    """Refuse to change the enabled modules once the options are frozen.

    Checked before anything is registered: a failed call leaves the builder
    as it was.
    """
    if _check_builder(builder).options.frozen:
        raise OptionsFrozenError("modules can no longer be changed once the builder was built")
    return builder


def _add_diagnostic_subscriber(builder, observer_type):
    # type: (TracingBuilder, Type[DiagnosticObserver]) -> TracingBuilder
    _check_not_built(builder).observers.add(observer_type)
    return builder


def _configure(builder, options_type, options):
    # type: (TracingBuilder, Type[OptionsT], Configure[OptionsT]) -> TracingBuilder
    _check_builder(builder)
    if options is not None:
        builder.options.patch(options_type, options)
    return builder


def _ignore_in_generic_diagnostics(builder, listener_name):
    # type: (TracingBuilder, str) -> None
    """Exclude the listener of a dedicated module from the generic module.

    Applied whether or not the generic module is enabled, so the order in
    which modules are added does not matter. Listener names are only ever
    added to the ignore list.
    """
    builder.options.patch(GenericDiagnosticOptions, lambda o: o.ignored_listener_names.add(listener_name))
    log.debug("generic diagnostics will ignore listener %s", listener_name)


def _disable_root_spans(options):
    # type: (ModuleOptions) -> None
    options.start_root_spans = False


def add_aspnetcore(builder, options=None):
    # type: (TracingBuilder, Configure[AspNetCoreDiagnosticOptions]) -> TracingBuilder
    """Adds instrumentation for ASP.NET Core.

    :param options: function called with the ``AspNetCoreDiagnosticOptions``
        after the defaults of the module were applied.
    """
    _check_not_built(builder)

    _add_diagnostic_subscriber(builder, AspNetCoreDiagnostics)

    # Only trace requests that are part of an existing trace by default
    configure_aspnetcore(builder, _disable_root_spans)

    _ignore_in_generic_diagnostics(builder, AspNetCoreDiagnostics.listener_name)

    return configure_aspnetcore(builder, options)


def configure_aspnetcore(builder, options):
    # type: (TracingBuilder, Configure[AspNetCoreDiagnosticOptions]) -> TracingBuilder
    return _configure(builder, AspNetCoreDiagnosticOptions, options)


def add_http_handler(builder, options=None):
    # type: (TracingBuilder, Configure[HttpHandlerDiagnosticOptions]) -> TracingBuilder
    """Adds instrumentation for outgoing HTTP requests."""
    _check_not_built(builder)

    _add_diagnostic_subscriber(builder, HttpHandlerDiagnostics)
    _ignore_in_generic_diagnostics(builder, HttpHandlerDiagnostics.listener_name)

    return configure_http_handler(builder, options)


def configure_http_handler(builder, options):
    # type: (TracingBuilder, Configure[HttpHandlerDiagnosticOptions]) -> TracingBuilder
    return _configure(builder, HttpHandlerDiagnosticOptions, options)


def add_generic_diagnostics(builder, options=None):
    # type: (TracingBuilder, Configure[GenericDiagnosticOptions]) -> TracingBuilder
    """Adds instrumentation for the diagnostic listeners without a dedicated module."""
    _add_diagnostic_subscriber(builder, GenericDiagnostics)

    return configure_generic_diagnostics(builder, options)


def configure_generic_diagnostics(builder, options):
    # type: (TracingBuilder, Configure[GenericDiagnosticOptions]) -> TracingBuilder
    return _configure(builder, GenericDiagnosticOptions, options)


def remove_generic_diagnostics(builder):
    # type: (TracingBuilder) -> TracingBuilder
    """Disables tracing for all diagnostic listeners that don't have a dedicated module."""
    if not _check_not_built(builder).observers.remove(GenericDiagnostics):
        log.debug("generic diagnostics were not enabled, nothing to remove")
    return builder


def _add_default_log_filters(options):
    # type: (LoggerFilterOptions) -> None
    # Request logs of the host are captured from its diagnostic listener
    options.add_filter(SpanEventLogHandler, HOSTING_LOG_CATEGORY, LOG_LEVEL_NONE)

    # The information level of the host framework is too verbose
    options.add_filter(SpanEventLogHandler, HOST_FRAMEWORK_LOG_CATEGORY, logging.WARNING)

    # The ORM reports everything to its diagnostic listener and to its loggers
    options.add_filter(SpanEventLogHandler, ORM_LOG_CATEGORY, LOG_LEVEL_NONE)


def add_logger_provider(builder):
    # type: (TracingBuilder) -> TracingBuilder
    """Records log records as span events, except for categories traced by diagnostic listeners.

    The filter rules only apply to :class:`SpanEventLogHandler`. Calling this
    twice registers the handler once but adds the rules twice; duplicate
    rules select the same level.
    """
    _check_not_built(builder)

    builder.log_providers.add(SpanEventLogHandler)
    builder.options.patch(LoggerFilterOptions, _add_default_log_filters)

    return builder


def add_default_instrumentation(builder):
    # type: (TracingBuilder) -> TracingBuilder
    """Enables every module shipped with diagtrace.

    The generic module is skipped when ``DIAGTRACE_GENERIC_DIAGNOSTICS_ENABLED``
    is false.
    """
    _check_not_built(builder)

    add_http_handler(builder)
    add_aspnetcore(builder)
    if config.generic_diagnostics_enabled:
        add_generic_diagnostics(builder)
    add_logger_provider(builder)

    return builder

from opentelemetry import trace

from diagtrace.constants import ASPNETCORE_LISTENER_NAME
from diagtrace.constants import HTTP_HANDLER_LISTENER_NAME
from diagtrace.contrib.aspnetcore import AspNetCoreDiagnostics
from diagtrace.contrib.generic import GenericDiagnostics
from diagtrace.contrib.httphandler import HttpHandlerDiagnostics
from diagtrace.settings.options import AspNetCoreDiagnosticOptions
from diagtrace.settings.options import GenericDiagnosticOptions
from diagtrace.settings.options import HttpHandlerDiagnosticOptions


def test_specific_observers_subscribe_to_their_listener(tracer):
    aspnetcore = AspNetCoreDiagnostics(tracer, AspNetCoreDiagnosticOptions())
    http_handler = HttpHandlerDiagnostics(tracer, HttpHandlerDiagnosticOptions())

    assert aspnetcore.subscribes_to(ASPNETCORE_LISTENER_NAME)
    assert not aspnetcore.subscribes_to(HTTP_HANDLER_LISTENER_NAME)
    assert http_handler.subscribes_to(HTTP_HANDLER_LISTENER_NAME)
    assert not http_handler.subscribes_to("Npgsql")


def test_generic_observer_skips_ignored_listeners(tracer):
    options = GenericDiagnosticOptions()
    options.ignored_listener_names.add(HTTP_HANDLER_LISTENER_NAME)
    observer = GenericDiagnostics(tracer, options)

    assert observer.subscribes_to("Npgsql")
    assert observer.subscribes_to(ASPNETCORE_LISTENER_NAME)
    assert not observer.subscribes_to(HTTP_HANDLER_LISTENER_NAME)


def test_event_is_recorded_as_span(tracer, span_exporter):
    observer = HttpHandlerDiagnostics(tracer, HttpHandlerDiagnosticOptions())

    span = observer.on_event(HTTP_HANDLER_LISTENER_NAME, "System.Net.Http.Request", {"url": "http://example.com"})

    assert span is not None
    (finished,) = span_exporter.get_finished_spans()
    assert finished.name == "System.Net.Http.Request"
    assert finished.attributes["component"] == HTTP_HANDLER_LISTENER_NAME
    assert finished.attributes["event"] == "System.Net.Http.Request"


def test_operation_name_resolver(tracer, span_exporter):
    options = HttpHandlerDiagnosticOptions()
    options.operation_name_resolver = lambda event_name, payload: "HTTP " + payload["method"]
    observer = HttpHandlerDiagnostics(tracer, options)

    observer.on_event(HTTP_HANDLER_LISTENER_NAME, "System.Net.Http.Request", {"method": "GET"})

    assert [s.name for s in span_exporter.get_finished_spans()] == ["HTTP GET"]


def test_ignore_patterns(tracer, span_exporter):
    options = AspNetCoreDiagnosticOptions()
    options.ignore_patterns.append(lambda event_name, payload: payload == "/health")
    observer = AspNetCoreDiagnostics(tracer, options)

    assert observer.on_event(ASPNETCORE_LISTENER_NAME, "Hosting.Begin", "/health") is None
    assert observer.on_event(ASPNETCORE_LISTENER_NAME, "Hosting.Begin", "/orders") is not None
    assert len(span_exporter.get_finished_spans()) == 1


def test_root_spans_disabled_requires_a_parent(tracer, span_exporter):
    options = AspNetCoreDiagnosticOptions(start_root_spans=False)
    observer = AspNetCoreDiagnostics(tracer, options)

    assert observer.on_event(ASPNETCORE_LISTENER_NAME, "Hosting.Begin") is None
    assert span_exporter.get_finished_spans() == ()

    with tracer.start_as_current_span("parent") as parent:
        span = observer.on_event(ASPNETCORE_LISTENER_NAME, "Hosting.Begin")

    assert span is not None
    child, root = span_exporter.get_finished_spans()
    assert root.name == "parent"
    assert child.parent.span_id == parent.get_span_context().span_id


def test_root_spans_disabled_ignores_invalid_parent(tracer, span_exporter):
    observer = AspNetCoreDiagnostics(tracer, AspNetCoreDiagnosticOptions(start_root_spans=False))

    with trace.use_span(trace.INVALID_SPAN):
        assert observer.on_event(ASPNETCORE_LISTENER_NAME, "Hosting.Begin") is None


def test_generic_ignored_events(tracer, span_exporter):
    options = GenericDiagnosticOptions()
    options.ignore_event("Npgsql", "Command.Start")
    observer = GenericDiagnostics(tracer, options)

    assert observer.on_event("Npgsql", "Command.Start") is None
    assert observer.on_event("Npgsql", "Command.Stop") is not None
    assert observer.on_event("Other", "Command.Start") is not None
    assert len(span_exporter.get_finished_spans()) == 2


def test_observer_errors_are_not_propagated(tracer, span_exporter, caplog):
    def resolver(event_name, payload):
        raise KeyError("route")

    options = HttpHandlerDiagnosticOptions(operation_name_resolver=resolver)
    observer = HttpHandlerDiagnostics(tracer, options)

    assert observer.on_event(HTTP_HANDLER_LISTENER_NAME, "System.Net.Http.Request") is None
    assert span_exporter.get_finished_spans() == ()
    assert "failed to handle event System.Net.Http.Request" in caplog.text


def test_repr(tracer):
    observer = AspNetCoreDiagnostics(tracer, AspNetCoreDiagnosticOptions())

    assert repr(observer) == "<AspNetCoreDiagnostics listener=Microsoft.AspNetCore>"

import logging
import sys

from opentelemetry import trace

from diagtrace.logs import SpanEventLogHandler


def _record(level, msg, args=None, exc_info=None):
    return logging.LogRecord("myapp.orders", level, __file__, 10, msg, args, exc_info)


def test_records_are_added_to_the_current_span(tracer, span_exporter):
    handler = SpanEventLogHandler()

    with tracer.start_as_current_span("request"):
        handler.handle(_record(logging.WARNING, "order %s not found", ("42",)))

    (span,) = span_exporter.get_finished_spans()
    (event,) = span.events
    assert event.name == "log"
    assert dict(event.attributes) == {
        "event": "log",
        "level": "WARNING",
        "component": "myapp.orders",
        "message": "order 42 not found",
    }


def test_exception_kind(tracer, span_exporter):
    handler = SpanEventLogHandler()

    try:
        raise KeyError("42")
    except KeyError:
        exc_info = sys.exc_info()

    with tracer.start_as_current_span("request"):
        handler.handle(_record(logging.ERROR, "lookup failed", exc_info=exc_info))

    (span,) = span_exporter.get_finished_spans()
    assert span.events[0].attributes["error.kind"] == "KeyError"


def test_records_without_span_are_dropped(span_exporter):
    handler = SpanEventLogHandler()

    handler.handle(_record(logging.ERROR, "outside of any request"))

    assert span_exporter.get_finished_spans() == ()


def test_records_of_ended_spans_are_dropped(tracer, span_exporter):
    handler = SpanEventLogHandler()
    span = tracer.start_span("request")
    span.end()

    with trace.use_span(span):
        handler.handle(_record(logging.ERROR, "too late"))

    (finished,) = span_exporter.get_finished_spans()
    assert len(finished.events) == 0

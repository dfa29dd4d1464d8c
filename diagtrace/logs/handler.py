import logging

from opentelemetry import trace


class SpanEventLogHandler(logging.Handler):
    """
    Log handler that records log records as events of the current span.

    Records emitted outside of a recording span are dropped: the handler only
    enriches traces, it does not store logs. Categories already covered by
    diagnostic listeners are filtered out by the rules installed with
    :func:`diagtrace.add_logger_provider`.
    """

    def emit(self, record):
        # type: (logging.LogRecord) -> None
        span = trace.get_current_span()
        if not span.is_recording():
            return
        try:
            attributes = {
                "event": "log",
                "level": record.levelname,
                "component": record.name,
                "message": record.getMessage(),
            }
            if record.exc_info and record.exc_info[1] is not None:
                attributes["error.kind"] = type(record.exc_info[1]).__name__
            span.add_event("log", attributes=attributes)
        except Exception:
            self.handleError(record)

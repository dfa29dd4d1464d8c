import logging

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
import pytest

from diagtrace import TracingBuilder


@pytest.fixture
def span_exporter():
    exporter = InMemorySpanExporter()
    yield exporter
    exporter.clear()


@pytest.fixture
def tracer_provider(span_exporter):
    # DEV: not installed globally, set_tracer_provider can only be called once per process
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    yield provider
    provider.shutdown()


@pytest.fixture
def tracer(tracer_provider):
    return tracer_provider.get_tracer(__name__)


@pytest.fixture
def builder():
    return TracingBuilder()


@pytest.fixture
def test_logger():
    logger = logging.getLogger("tests.diagtrace")
    original_level = logger.level
    original_handlers = list(logger.handlers)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    logger.setLevel(original_level)
    logger.propagate = True
    for handler in list(logger.handlers):
        if handler not in original_handlers:
            logger.removeHandler(handler)

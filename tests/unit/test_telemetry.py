"""Tracing helpers and telemetry setup."""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from colletro.shared.telemetry import TelemetryConfig, add_span_attributes, traced


@pytest.fixture
def spans():
    """Tracer provider local to the test. Decorate after patching get_tracer."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider, exporter


def test_disabled_config_creates_no_provider() -> None:
    config = TelemetryConfig("colletro", "1.0.0", enabled=False)
    assert config.setup_telemetry() is None
    assert config.tracer_provider is None
    # Instrumentation is a no-op without a provider.
    config.instrument_logging()
    config.instrument_sqlalchemy(None)


async def test_traced_records_span_with_safe_kwargs(spans, monkeypatch) -> None:
    provider, exporter = spans
    monkeypatch.setattr(trace, "get_tracer", provider.get_tracer)

    @traced("collections.test_op")
    async def operation(*, collection_id: str, token: str) -> int:
        add_span_attributes(items=3)
        return 7

    assert await operation(collection_id="c1", token="secret") == 7

    (span,) = exporter.get_finished_spans()
    assert span.name == "collections.test_op"
    assert span.attributes["arg.collection_id"] == "c1"
    assert "arg.token" not in span.attributes
    assert span.status.status_code is StatusCode.OK


def test_traced_marks_failures_and_reraises(spans, monkeypatch) -> None:
    provider, exporter = spans
    monkeypatch.setattr(trace, "get_tracer", provider.get_tracer)

    @traced()
    def failing() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        failing()

    (span,) = exporter.get_finished_spans()
    assert span.name.endswith(".failing")
    assert span.status.status_code is StatusCode.ERROR
    assert span.events[0].name == "exception"


def test_add_span_attributes_outside_a_span_is_a_no_op() -> None:
    add_span_attributes(anything=1)

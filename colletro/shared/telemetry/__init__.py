"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from colletro.shared.telemetry.logging import (
    RequestIDLogFilter,
    get_logger,
    get_request_id,
    setup_logging,
)
from colletro.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    get_tracer,
    set_telemetry,
)
from colletro.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    get_trace_id,
    traced,
)

__all__ = [
    "RequestIDLogFilter",
    "get_logger",
    "get_request_id",
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "get_tracer",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "get_trace_id",
]

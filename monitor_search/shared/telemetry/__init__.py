"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from monitor_search.shared.telemetry.logging import setup_logging
from monitor_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    build_span_exporter,
    get_telemetry,
    set_telemetry,
)
from monitor_search.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "build_span_exporter",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]

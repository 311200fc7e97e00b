"""
Detects whether OpenTelemetry is importable.

eventair runs without OpenTelemetry; the ``telemetry`` extra installs it.
"""

from __future__ import annotations

try:
    import opentelemetry.trace  # noqa: F401

    OTEL_AVAILABLE = True
except ImportError:
    OTEL_AVAILABLE = False


def should_trace(enable_tracing: bool) -> bool:
    """True when the dispatcher asked for tracing and OpenTelemetry is present."""
    return enable_tracing and OTEL_AVAILABLE


__all__ = [
    "OTEL_AVAILABLE",
    "should_trace",
]

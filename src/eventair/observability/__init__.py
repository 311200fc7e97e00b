"""
Observability utilities for eventair.

Tracing is optional: when OpenTelemetry is not installed every dispatcher
falls back to a NullTracer and spans cost nothing.

Example:
    >>> from eventair.observability import OTEL_AVAILABLE, MockTracer, create_tracer
    >>>
    >>> tracer = create_tracer(__name__, enable_tracing=OTEL_AVAILABLE)
    >>> dispatcher = Dispatcher(tracer=tracer)
"""

from eventair.observability.attributes import (
    ATTR_ENTRY_KIND,
    ATTR_EVENT_NAME,
    ATTR_LISTENER_COUNT,
    ATTR_LISTENER_NAMES,
    ATTR_STATUS_CODE,
)
from eventair.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)
from eventair.observability.tracing import (
    OTEL_AVAILABLE,
    should_trace,
)

__all__ = [
    # Tracing utilities
    "OTEL_AVAILABLE",
    "should_trace",
    # Tracer (composition-based API)
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    # Attributes
    "ATTR_EVENT_NAME",
    "ATTR_ENTRY_KIND",
    "ATTR_LISTENER_COUNT",
    "ATTR_LISTENER_NAMES",
    "ATTR_STATUS_CODE",
]

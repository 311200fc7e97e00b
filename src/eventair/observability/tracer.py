"""
Tracers the dispatcher can be given.

``Dispatcher.emit`` wraps each dispatch in ``tracer.span(...)`` and checks
``tracer.enabled`` before collecting listener names for span attributes.
Anything with those two members can be passed as ``tracer=``.

Example:
    >>> from eventair import Dispatcher
    >>> from eventair.observability import MockTracer
    >>>
    >>> tracer = MockTracer()
    >>> events = Dispatcher(tracer=tracer).on("ready", refresh)
    >>> events.emit("ready")
    >>> tracer.span_names
    ['eventair.dispatcher.emit']
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from opentelemetry.trace import Span

from eventair.observability.tracing import should_trace


@runtime_checkable
class Tracer(Protocol):
    """What a dispatcher needs from its tracer."""

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        """Open a span around one dispatch."""
        ...

    @property
    def enabled(self) -> bool:
        """False lets the dispatcher skip listener-name attributes."""
        ...


class NullTracer:
    """Tracer used when tracing is off or OpenTelemetry is missing."""

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Iterator[None]:
        yield None

    @property
    def enabled(self) -> bool:
        return False


class OpenTelemetryTracer:
    """
    Emits dispatch spans through the global OpenTelemetry tracer provider.

    Args:
        tracer_name: Instrumentation scope, usually the dispatcher module

    Raises:
        ImportError: If opentelemetry-api is not installed
    """

    def __init__(self, tracer_name: str) -> None:
        from opentelemetry import trace

        self._tracer = trace.get_tracer(tracer_name)

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        return self._tracer.start_as_current_span(name, attributes=attributes or {})

    @property
    def enabled(self) -> bool:
        return True


class MockTracer:
    """
    Records every span a dispatcher opens, for assertions in tests.

    ``spans`` holds ``(name, attributes)`` pairs in the order the spans
    were opened. ``enabled`` is True so listener names are recorded too.
    """

    def __init__(self) -> None:
        self.spans: list[tuple[str, dict[str, Any] | None]] = []

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Iterator[None]:
        self.spans.append((name, attributes))
        yield None

    @property
    def enabled(self) -> bool:
        return True

    @property
    def span_names(self) -> list[str]:
        return [name for name, _ in self.spans]

    def clear(self) -> None:
        self.spans.clear()


def create_tracer(name: str, enable_tracing: bool = True) -> Tracer:
    """
    Pick the tracer a dispatcher gets when none is injected.

    Returns an OpenTelemetryTracer when ``enable_tracing`` is set and
    OpenTelemetry can be imported, otherwise a NullTracer.
    """
    if should_trace(enable_tracing):
        return OpenTelemetryTracer(name)
    return NullTracer()


__all__ = [
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
]

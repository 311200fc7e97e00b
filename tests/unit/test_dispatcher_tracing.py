"""
Tests for Dispatcher tracing.

Uses MockTracer to check the span emitted for each dispatch and its
attributes.
"""

from __future__ import annotations

import pytest

from eventair import Dispatcher, DispatcherConfig
from eventair.observability import (
    ATTR_ENTRY_KIND,
    ATTR_EVENT_NAME,
    ATTR_LISTENER_COUNT,
    ATTR_LISTENER_NAMES,
    ATTR_STATUS_CODE,
    OTEL_AVAILABLE,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
)
from tests.fixtures import CallRecorder


class TestEmitSpans:
    """Tests for spans created by emit()."""

    def test_one_span_per_emit(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer, recorder: CallRecorder
    ):
        traced_dispatcher.on("ready", recorder.listener("a"))
        traced_dispatcher.emit("ready").emit("ready")
        assert mock_tracer.span_names == [
            "eventair.dispatcher.emit",
            "eventair.dispatcher.emit",
        ]

    def test_registration_is_not_traced(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer, recorder: CallRecorder
    ):
        traced_dispatcher.on("ready", recorder.listener("a")).once("boot", recorder.listener("b"))
        traced_dispatcher.remove_all_listeners()
        assert mock_tracer.spans == []

    def test_attributes_for_dispatch(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer, recorder: CallRecorder
    ):
        traced_dispatcher.once("boot", recorder.listener("a")).once("boot", recorder.listener("b"))
        traced_dispatcher.emit("boot")

        (_, attributes) = mock_tracer.spans[0]
        assert attributes == {
            ATTR_EVENT_NAME: "boot",
            ATTR_ENTRY_KIND: "one_shot",
            ATTR_LISTENER_COUNT: 2,
            ATTR_LISTENER_NAMES: ["listener_a", "listener_b"],
        }

    def test_attributes_for_unknown_event(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer
    ):
        traced_dispatcher.emit("missing")

        (_, attributes) = mock_tracer.spans[0]
        assert attributes == {ATTR_EVENT_NAME: "missing", ATTR_STATUS_CODE: 404}

    def test_attributes_for_empty_entry(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer, recorder: CallRecorder
    ):
        traced_dispatcher.on("ready", recorder.listener("a")).remove_all_listeners()
        traced_dispatcher.emit("ready")

        (_, attributes) = mock_tracer.spans[0]
        assert attributes == {
            ATTR_EVENT_NAME: "ready",
            ATTR_ENTRY_KIND: "persistent",
            ATTR_LISTENER_COUNT: 0,
            ATTR_STATUS_CODE: 405,
        }

    def test_span_recorded_when_listener_raises(
        self, traced_dispatcher: Dispatcher, mock_tracer: MockTracer
    ):
        def failing() -> None:
            raise ValueError("boom")

        traced_dispatcher.on("ready", failing)
        with pytest.raises(ValueError):
            traced_dispatcher.emit("ready")
        assert mock_tracer.span_names == ["eventair.dispatcher.emit"]


class TestTracerSelection:
    """Tests for how a dispatcher picks its tracer."""

    def test_explicit_tracer_is_used(self, mock_tracer: MockTracer):
        dispatcher = Dispatcher(tracer=mock_tracer)
        dispatcher.emit("missing")
        assert len(mock_tracer.spans) == 1

    def test_tracing_disabled_uses_null_tracer(self):
        dispatcher = Dispatcher.from_config(DispatcherConfig(enable_tracing=False))
        assert isinstance(dispatcher._tracer, NullTracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_tracing_enabled_uses_otel(self):
        dispatcher = Dispatcher()
        assert isinstance(dispatcher._tracer, OpenTelemetryTracer)

    @pytest.mark.skipif(not OTEL_AVAILABLE, reason="OTEL not installed")
    def test_emit_with_real_tracer(self, recorder: CallRecorder):
        dispatcher = Dispatcher()
        dispatcher.on("ready", recorder.listener("a")).emit("ready").emit("missing")
        assert recorder.calls == ["a"]

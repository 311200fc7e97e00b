"""
Shared pytest fixtures for the eventair library tests.

This module provides:
- Dispatcher fixtures (dispatcher, silent_dispatcher, traced_dispatcher)
- Recording fixtures (recorder, statuses, mock_tracer)
"""

from __future__ import annotations

import pytest

from eventair import SILENT_MODE, Dispatcher, DispatcherConfig
from eventair.observability import MockTracer, NullTracer
from tests.fixtures import CallRecorder, StatusRecorder


@pytest.fixture
def dispatcher() -> Dispatcher:
    """Create a fresh dispatcher with tracing disabled."""
    return Dispatcher(tracer=NullTracer())


@pytest.fixture
def silent_dispatcher() -> Dispatcher:
    """Create a dispatcher in silent mode."""
    return Dispatcher(SILENT_MODE, tracer=NullTracer())


@pytest.fixture
def mock_tracer() -> MockTracer:
    return MockTracer()


@pytest.fixture
def traced_dispatcher(mock_tracer: MockTracer) -> Dispatcher:
    """Create a dispatcher that records spans into mock_tracer."""
    return Dispatcher.from_config(DispatcherConfig(), tracer=mock_tracer)


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def statuses(dispatcher: Dispatcher) -> StatusRecorder:
    """Status recorder already installed as the dispatcher's error handler."""
    handler = StatusRecorder()
    dispatcher.catch(handler)
    return handler

"""
eventair - Minimal synchronous publish/subscribe dispatcher.

This library provides:
- Dispatcher with persistent (``on``) and one-shot (``once``) listeners
- Advisory per-event listener caps with logged warnings
- Status-code error reporting through an optional error handler
- Optional OpenTelemetry tracing of dispatches
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eventair")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from eventair.config import DEFAULT_MAX_LISTENERS, SILENT_MODE, DispatcherConfig
from eventair.diagnostics import DiagnosticLog
from eventair.dispatcher import Dispatcher, EventEntry, get_listener_name
from eventair.exceptions import (
    EventAirError,
    EventNotFoundError,
    NoListenersError,
    StatusError,
    raise_for_status,
)
from eventair.types import EntryKind, ErrorHandler, Listener, StatusCode

__all__ = [
    "__version__",
    # Dispatcher
    "Dispatcher",
    "EventEntry",
    "get_listener_name",
    # Configuration
    "DispatcherConfig",
    "DEFAULT_MAX_LISTENERS",
    "SILENT_MODE",
    # Diagnostics
    "DiagnosticLog",
    # Types
    "EntryKind",
    "ErrorHandler",
    "Listener",
    "StatusCode",
    # Exceptions
    "EventAirError",
    "StatusError",
    "EventNotFoundError",
    "NoListenersError",
    "raise_for_status",
]

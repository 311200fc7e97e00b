"""
Synchronous named-event dispatcher.

This module provides the Dispatcher class, which keeps an ordered collection
of event entries and invokes every listener registered under a name when
that name is emitted.

Example:
    >>> dispatcher = Dispatcher()
    >>> dispatcher.on("ready", start_server).once("boot", load_plugins)
    >>> dispatcher.emit("boot").emit("ready")

Thread Safety:
    Dispatcher does no locking. Callers sharing one instance across threads
    must serialize access themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from eventair.config import DispatcherConfig
from eventair.diagnostics import DiagnosticLog
from eventair.observability import Tracer, create_tracer
from eventair.observability.attributes import (
    ATTR_ENTRY_KIND,
    ATTR_EVENT_NAME,
    ATTR_LISTENER_COUNT,
    ATTR_LISTENER_NAMES,
    ATTR_STATUS_CODE,
)
from eventair.types import EntryKind, ErrorHandler, Listener, StatusCode


def get_listener_name(listener: Any) -> str:
    """
    Get a descriptive name for a listener for logging and tracing.

    Args:
        listener: Any callable (function, bound method, lambda, instance)

    Returns:
        String name for the listener
    """
    name = getattr(listener, "__qualname__", None) or getattr(listener, "__name__", None)
    if name:
        return str(name)
    return type(listener).__name__


@dataclass
class EventEntry:
    """
    Subscription state for one event name.

    Attributes:
        name: Event name, unique within its dispatcher
        listeners: Listeners in registration order, without duplicates
        kind: Whether the entry survives dispatch. Set when the entry is
            created and never changed afterwards.
    """

    name: str
    listeners: list[Listener] = field(default_factory=list)
    kind: EntryKind = EntryKind.PERSISTENT


class Dispatcher:
    """
    Registers named listeners and invokes them synchronously on emit.

    Lookup failures are reported as StatusCode values to an optional error
    handler set with ``catch()``; without a handler they are silent.
    Diagnostics (unknown event on emit, listener cap exceeded) go to a
    DiagnosticLog unless the dispatcher was created in silent mode.

    Most mutating methods return the dispatcher so calls can be chained.
    ``catch()`` returns None.

    Args:
        mode: Construction mode flag. SILENT_MODE disables diagnostics.
        config: Explicit configuration. Overrides settings derived from mode.
        tracer: Optional Tracer. If not provided, one is created based on
            config.enable_tracing.
        log: Diagnostic sink. Defaults to DiagnosticLog().

    Example:
        >>> events = Dispatcher()
        >>> events.catch(lambda code: print("status", code))
        >>> events.emit("missing")
        status 404
    """

    def __init__(
        self,
        mode: str | None = None,
        *,
        config: DispatcherConfig | None = None,
        tracer: Tracer | None = None,
        log: DiagnosticLog | None = None,
    ) -> None:
        config = config or DispatcherConfig.from_mode(mode)
        self._entries: dict[str, EventEntry] = {}
        self._max_listeners = config.max_listeners
        self._logging_enabled = config.logging_enabled
        self._error_handler: ErrorHandler | None = None
        self._log = log or DiagnosticLog()
        self._tracer = tracer or create_tracer(__name__, config.enable_tracing)

    @classmethod
    def from_config(cls, config: DispatcherConfig, **kwargs: Any) -> Dispatcher:
        """Create a dispatcher from a DispatcherConfig."""
        return cls(config=config, **kwargs)

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> list[EventEntry]:
        """Current entries in insertion order (a new list on each access)."""
        return list(self._entries.values())

    @property
    def max_listeners(self) -> int:
        return self._max_listeners

    @property
    def logging_enabled(self) -> bool:
        return self._logging_enabled

    @property
    def error_handler(self) -> ErrorHandler | None:
        return self._error_handler

    def event_names(self) -> list[str]:
        """Names of all registered events in insertion order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(events={len(self._entries)}, "
            f"max_listeners={self._max_listeners}, "
            f"logging_enabled={self._logging_enabled})"
        )

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def set_max_listeners(self, n: int) -> Dispatcher:
        """Set the advisory listener cap. The value is not validated."""
        self._max_listeners = n
        return self

    def on(self, name: str, listener: Listener) -> Dispatcher:
        """Register a listener that runs on every emit of ``name``."""
        return self._register(name, listener, EntryKind.PERSISTENT)

    def once(self, name: str, listener: Listener) -> Dispatcher:
        """
        Register a listener for a single emit of ``name``.

        The whole entry is dropped after its first dispatch. If ``name`` was
        first registered with ``on()``, the entry stays persistent and this
        behaves like ``on()``.
        """
        return self._register(name, listener, EntryKind.ONE_SHOT)

    def _register(self, name: str, listener: Listener, kind: EntryKind) -> Dispatcher:
        entry = self._entries.get(name)

        if entry is None:
            self._entries[name] = EventEntry(name=name, listeners=[listener], kind=kind)
        elif listener not in entry.listeners:
            entry.listeners.append(listener)
            if len(entry.listeners) > self._max_listeners and self._logging_enabled:
                self._log.max_limit(name, self._max_listeners)

        return self

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def emit(self, name: str, *args: Any, **kwargs: Any) -> Dispatcher:
        """
        Invoke every listener registered under ``name`` in registration order.

        Listeners are called without arguments; ``args`` and ``kwargs`` are
        accepted and ignored. Exceptions raised by a listener are not caught:
        the remaining listeners are skipped and a one-shot entry is kept.

        Reports StatusCode.NOT_FOUND if ``name`` is not registered and
        StatusCode.NO_LISTENERS if its entry has no listeners.
        """
        entry = self._entries.get(name)

        with self._tracer.span("eventair.dispatcher.emit", self._emit_attributes(name, entry)):
            if entry is None:
                if self._logging_enabled:
                    self._log.not_found(name)
                self._report(StatusCode.NOT_FOUND)
                return self

            if not entry.listeners:
                self._report(StatusCode.NO_LISTENERS)

            # Live list: listeners appended during dispatch run in this dispatch.
            for listener in entry.listeners:
                listener()

            if entry.kind is EntryKind.ONE_SHOT and self._entries.get(name) is entry:
                del self._entries[name]

        return self

    def _emit_attributes(self, name: str, entry: EventEntry | None) -> dict[str, Any]:
        attributes: dict[str, Any] = {ATTR_EVENT_NAME: name}
        if entry is None:
            attributes[ATTR_STATUS_CODE] = int(StatusCode.NOT_FOUND)
            return attributes

        attributes[ATTR_ENTRY_KIND] = entry.kind.value
        attributes[ATTR_LISTENER_COUNT] = len(entry.listeners)
        if not entry.listeners:
            attributes[ATTR_STATUS_CODE] = int(StatusCode.NO_LISTENERS)
        elif self._tracer.enabled:
            attributes[ATTR_LISTENER_NAMES] = [get_listener_name(lsn) for lsn in entry.listeners]
        return attributes

    # -------------------------------------------------------------------------
    # Removal
    # -------------------------------------------------------------------------

    def remove_listener(self, name: str, listener: Listener) -> Dispatcher:
        """
        Remove one listener from an event.

        The entry is kept even when its last listener is removed. Reports
        StatusCode.NOT_FOUND for an unknown event and StatusCode.NO_LISTENERS
        if the listener is not registered for it.
        """
        entry = self._entries.get(name)

        if entry is None:
            self._report(StatusCode.NOT_FOUND)
            return self
        if listener not in entry.listeners:
            self._report(StatusCode.NO_LISTENERS)
            return self

        entry.listeners.remove(listener)
        return self

    def remove_all_listeners(self, *names: Any) -> Dispatcher:
        """
        Clear listeners while keeping the entries.

        Each cleared entry gets a new empty list, so lists previously
        returned by ``listeners()`` keep their old contents. With no
        arguments every entry is cleared. Otherwise only the named
        entries are; non-string arguments and unknown names are ignored
        without reporting.
        """
        if not names:
            for entry in self._entries.values():
                entry.listeners = []
            return self

        for name in names:
            if not isinstance(name, str):
                continue
            entry = self._entries.get(name)
            if entry is not None:
                entry.listeners = []

        return self

    # -------------------------------------------------------------------------
    # Inspection and error reporting
    # -------------------------------------------------------------------------

    def listeners(self, name: str) -> list[Listener] | Any:
        """
        Return the live listener list for ``name``.

        The list is the one ``on()``, ``once()`` and ``remove_listener()``
        mutate, not a copy. For an unknown name, reports
        StatusCode.NO_LISTENERS and returns the error handler's result
        (None when no handler is set).
        """
        entry = self._entries.get(name)
        if entry is None:
            return self._report(StatusCode.NO_LISTENERS)
        return entry.listeners

    def catch(self, handler: ErrorHandler | None) -> None:
        """Set the error handler, or clear it if ``handler`` is not callable."""
        self._error_handler = handler if callable(handler) else None

    def _report(self, status_code: StatusCode) -> Any:
        if self._error_handler is None:
            return None
        return self._error_handler(status_code)


__all__ = [
    "Dispatcher",
    "EventEntry",
    "get_listener_name",
]

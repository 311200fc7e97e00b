"""
Standard span attributes for eventair.

Example:
    >>> with tracer.span(
    ...     "eventair.dispatcher.emit",
    ...     {ATTR_EVENT_NAME: "ready", ATTR_LISTENER_COUNT: 2},
    ... ):
    ...     pass
"""

ATTR_EVENT_NAME = "eventair.event.name"
"""Name the event was emitted under (string)."""

ATTR_ENTRY_KIND = "eventair.entry.kind"
"""Lifetime of the entry: 'persistent' or 'one_shot' (string)."""

ATTR_LISTENER_COUNT = "eventair.listener.count"
"""Number of listeners invoked by a dispatch (integer)."""

ATTR_LISTENER_NAMES = "eventair.listener.names"
"""Names of the listeners invoked, in order (list of strings)."""

ATTR_STATUS_CODE = "eventair.status_code"
"""Status code reported to the error handler (integer)."""

__all__ = [
    "ATTR_EVENT_NAME",
    "ATTR_ENTRY_KIND",
    "ATTR_LISTENER_COUNT",
    "ATTR_LISTENER_NAMES",
    "ATTR_STATUS_CODE",
]

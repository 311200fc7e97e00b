"""
Shared test helpers for the eventair library.

Usage:
    from tests.fixtures import CallRecorder, StatusRecorder
"""

from __future__ import annotations

from collections.abc import Callable

from eventair import StatusCode


class CallRecorder:
    """Creates listeners that append their label to a shared call log."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def listener(self, label: str) -> Callable[[], None]:
        def _listener() -> None:
            self.calls.append(label)

        _listener.__qualname__ = f"listener_{label}"
        return _listener


class StatusRecorder:
    """Error handler that records every status code it receives."""

    def __init__(self, result: object = None) -> None:
        self.codes: list[StatusCode] = []
        self.result = result

    def __call__(self, code: StatusCode) -> object:
        self.codes.append(code)
        return self.result


__all__ = [
    "CallRecorder",
    "StatusRecorder",
]

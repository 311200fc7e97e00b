"""Common type definitions for the eventair library."""

from collections.abc import Callable
from enum import Enum, IntEnum
from typing import Any

# A listener takes no arguments; its return value is ignored.
Listener = Callable[[], Any]

# Error handlers receive a StatusCode and may return anything.
ErrorHandler = Callable[["StatusCode"], Any]


class EntryKind(Enum):
    """
    Lifetime of an event entry.

    Values:
        PERSISTENT: Entry stays registered across dispatches (``on``)
        ONE_SHOT: Entry is dropped after its first dispatch (``once``)
    """

    PERSISTENT = "persistent"
    ONE_SHOT = "one_shot"


class StatusCode(IntEnum):
    """Codes reported to the error handler on lookup failures."""

    NOT_FOUND = 404
    NO_LISTENERS = 405

"""Library exceptions for the eventair package."""

from eventair.types import StatusCode


class EventAirError(Exception):
    """Base exception for eventair library."""

    pass


class StatusError(EventAirError):
    """Raised for a status code reported by a dispatcher."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or f"Dispatcher reported status {status_code}")


class EventNotFoundError(StatusError):
    """Raised when no entry is registered under the requested name."""

    def __init__(self) -> None:
        super().__init__(StatusCode.NOT_FOUND, "Event is not registered (status 404)")


class NoListenersError(StatusError):
    """Raised when an entry has no listeners or a listener lookup failed."""

    def __init__(self) -> None:
        super().__init__(StatusCode.NO_LISTENERS, "No matching listeners (status 405)")


def raise_for_status(status_code: int) -> None:
    """
    Error handler that turns reported status codes into exceptions.

    Install it with ``dispatcher.catch(raise_for_status)`` to get exceptions
    instead of silent status reports.

    Raises:
        EventNotFoundError: For StatusCode.NOT_FOUND
        NoListenersError: For StatusCode.NO_LISTENERS
        StatusError: For any other code
    """
    if status_code == StatusCode.NOT_FOUND:
        raise EventNotFoundError()
    if status_code == StatusCode.NO_LISTENERS:
        raise NoListenersError()
    raise StatusError(status_code)

"""
Diagnostic log sink for the dispatcher.

Diagnostics are one-way notifications written through the standard logging
module. They never raise and never affect dispatch; a dispatcher in silent
mode does not call them at all.
"""

import logging

logger = logging.getLogger("eventair")


class DiagnosticLog:
    """
    Writes dispatcher diagnostics to a logger.

    Args:
        log: Logger to write to. Defaults to the ``eventair`` logger.

    Example:
        >>> log = DiagnosticLog(logging.getLogger("myapp.events"))
        >>> dispatcher = Dispatcher(log=log)
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def repeat_register(self, name: str) -> None:
        """A listener was registered again. The dispatcher itself never calls this."""
        self._logger.debug(
            f"Listener already registered for event '{name}'",
            extra={"event_name": name},
        )

    def not_found(self, name: str) -> None:
        """An event was emitted that has never been registered."""
        self._logger.warning(
            f"Event '{name}' is not registered",
            extra={"event_name": name, "status_code": 404},
        )

    def max_limit(self, name: str, cap: int) -> None:
        """An event's listener count went past the advisory cap."""
        self._logger.warning(
            f"Listeners of event '{name}' exceed the maximum limit {cap}",
            extra={"event_name": name, "max_listeners": cap},
        )


__all__ = ["DiagnosticLog"]

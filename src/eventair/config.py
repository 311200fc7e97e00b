"""
Configuration for dispatcher instances.

This module provides:
- DispatcherConfig: Settings for a single Dispatcher
- SILENT_MODE: Construction mode flag that disables diagnostics
- DEFAULT_MAX_LISTENERS: Default advisory listener cap per event
"""

from __future__ import annotations

from dataclasses import dataclass

SILENT_MODE = "silent"
"""Mode flag that turns off diagnostic logging for a dispatcher."""

DEFAULT_MAX_LISTENERS = 5
"""Listener count above which registration logs a warning."""


@dataclass(frozen=True)
class DispatcherConfig:
    """
    Configuration for a Dispatcher.

    Attributes:
        max_listeners: Advisory cap on listeners per event. Exceeding it only
            logs a warning; registration always succeeds.
        logging_enabled: Whether diagnostics are written to the log sink
        enable_tracing: Emit OpenTelemetry spans when OpenTelemetry is
            installed. Ignored if a tracer is passed to the dispatcher.

    Example:
        >>> config = DispatcherConfig(max_listeners=10)
        >>> dispatcher = Dispatcher.from_config(config)
        >>>
        >>> # Equivalent to Dispatcher("silent")
        >>> quiet = DispatcherConfig.from_mode(SILENT_MODE)
    """

    max_listeners: int = DEFAULT_MAX_LISTENERS
    logging_enabled: bool = True
    enable_tracing: bool = True

    @classmethod
    def from_mode(cls, mode: str | None = None) -> DispatcherConfig:
        """
        Build a config from a construction mode flag.

        Any value other than SILENT_MODE leaves logging enabled.
        """
        return cls(logging_enabled=mode != SILENT_MODE)


__all__ = [
    "DEFAULT_MAX_LISTENERS",
    "DispatcherConfig",
    "SILENT_MODE",
]

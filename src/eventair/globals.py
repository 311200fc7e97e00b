"""
Optional glue for exposing the Dispatcher type under a global name.

Nothing in eventair calls this on import. Hosts that want a process-wide
binding call ``install_global()`` once during startup; library consumers
import ``eventair.Dispatcher`` directly instead.

Example:
    >>> from eventair.globals import install_global
    >>> install_global()
    >>> events = EventAir()  # now resolvable from any module
"""

import builtins
import logging
from collections.abc import MutableMapping
from typing import Any

from eventair.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

DEFAULT_BINDING = "EventAir"


def install_global(
    namespace: MutableMapping[str, Any] | None = None,
    binding: str = DEFAULT_BINDING,
) -> Any:
    """
    Bind the Dispatcher type under ``binding`` unless the name is taken.

    Args:
        namespace: Mapping to install into. Defaults to the builtins
            namespace, which makes the name visible in every module.
        binding: Name to install under.

    Returns:
        The object the binding refers to afterwards: Dispatcher if it was
        installed, otherwise whatever was already bound.
    """
    target = vars(builtins) if namespace is None else namespace
    if binding in target:
        logger.debug(
            f"Global binding '{binding}' already present, leaving it untouched",
            extra={"binding": binding},
        )
        return target[binding]

    target[binding] = Dispatcher
    return Dispatcher


__all__ = ["DEFAULT_BINDING", "install_global"]

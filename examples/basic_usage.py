"""
Basic Usage Example

This example walks through the dispatcher API:
- Persistent and one-shot listeners
- The advisory listener cap
- Status codes reported to an error handler
- Removing listeners

Run with: python examples/basic_usage.py
"""

import logging

from eventair import Dispatcher, StatusCode

# =============================================================================
# Step 1: Create a dispatcher and an error handler
# =============================================================================
# Lookup failures are reported as status codes; without a handler they are
# silent. Diagnostics go through the standard logging module.

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

events = Dispatcher()


def on_status(code: StatusCode) -> None:
    print(f"  error handler received {code.name} ({int(code)})")


events.catch(on_status)

# =============================================================================
# Step 2: Register listeners
# =============================================================================


def connect_database() -> None:
    print("  connecting database")


def start_http() -> None:
    print("  starting http server")


def load_plugins() -> None:
    print("  loading plugins (runs once)")


events.on("ready", connect_database).on("ready", start_http)
events.once("boot", load_plugins)

# Registering the same listener again is a no-op
events.on("ready", start_http)

# =============================================================================
# Step 3: Emit
# =============================================================================

print("emit boot")
events.emit("boot")

print("emit boot again")
events.emit("boot")

print("emit ready")
events.emit("ready")

# =============================================================================
# Step 4: Listener cap and removal
# =============================================================================

print("exceed the cap of 2")
events.set_max_listeners(2).on("ready", lambda: print("  third listener still runs"))
events.emit("ready")

print("remove start_http")
events.remove_listener("ready", start_http)
print(f"  remaining: {len(events.listeners('ready'))} listener(s)")

print("remove a listener that was never added")
events.remove_listener("ready", load_plugins)

print("clear everything")
events.remove_all_listeners()
events.emit("ready")

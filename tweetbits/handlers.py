"""
handlers.py - Ready-Made Callbacks

Small builders for the callbacks the tutorial keeps writing by hand:
"Sent!" confirmations, per-tweet printers, and an error slot that raises.

No handler classes, just functions returning Callbacks.
"""

from __future__ import annotations
from typing import Any, Callable, Dict

from .core import AuthenticationError, Callback, OutputSink


# ============================================================================
# HANDLER BUILDERS
# ============================================================================

def announce(message: str, sink: OutputSink = print) -> Callback:
    """Zero-argument callback that writes a fixed message."""
    return Callback(lambda: sink(message), name=f"announce({message!r})")


def printer(sink: OutputSink = print) -> Callback:
    """One-argument callback that writes each value it receives."""
    return Callback(lambda value: sink(str(value)), name="printer")


def raise_auth_error(identity: Any = None) -> Callback:
    """
    Zero-argument error callback that raises AuthenticationError.

    Passing this as the error slot behaves like omitting it, except the
    failure comes from the callback rather than the gate.
    """
    def fail() -> None:
        raise AuthenticationError(identity)

    return Callback(fail, name="raise_auth_error")


def sent(sink: OutputSink = print) -> Callback:
    """The tutorial's success callback: writes "Sent!"."""
    return announce("Sent!", sink)


# ============================================================================
# HANDLER REGISTRY
# ============================================================================

# Name -> builder, for callers that pick handlers by name
DEFAULT_HANDLERS: Dict[str, Callable[..., Callback]] = {
    "announce": announce,
    "printer": printer,
    "raise_auth_error": raise_auth_error,
    "sent": sent,
}

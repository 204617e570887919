"""
gated_action.py - Authentication-Gated Dispatch

A GatedAction runs a predicate and continues into exactly one of two
callbacks. Success and error are independent slots, so a caller can supply
an error handler without a custom success handler and vice versa.

Outcomes:
    predicate true               -> success() called, Outcome.SUCCESS
    predicate false, error given -> error() called, Outcome.HANDLED
    predicate false, no error    -> AuthenticationError, nothing called
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from .core import AuthenticationError, Callback, OutputSink, as_callback


class Outcome(Enum):
    """Result of GatedAction.execute()."""
    SUCCESS = "success"     # Authenticated, success callback ran
    HANDLED = "handled"     # Denied, error callback ran


CallbackLike = Union[Callback, Callable[..., Any]]


@dataclass(frozen=True)
class GatedAction:
    """
    Predicate-gated dispatch to a success or error callback.

    Attributes:
        authenticate: Predicate (identity, credential) -> bool
        success: Zero-argument callback run when authenticated
        error: Optional zero-argument callback run when denied
        sink: Output sink for verbose messages
        verbose: Write an AUTHENTICATED / REJECTED line per execute()

    All three callables are converted and arity-checked on construction, so
    an incompatible callback raises ArityMismatch here rather than during
    execute(). The object is frozen: callbacks cannot swap out its slots
    mid-dispatch.

    Example:
        action = GatedAction(
            authenticate=lambda user, pw: pw == "secret",
            success=lambda: print("Sent!"),
        )
        action.execute("gregg", "secret")   # Outcome.SUCCESS
    """
    authenticate: CallbackLike
    success: CallbackLike
    error: Optional[CallbackLike] = None
    sink: OutputSink = field(default=print, repr=False)
    verbose: bool = False

    def __post_init__(self):
        # frozen=True, so normalise through object.__setattr__
        object.__setattr__(self, "authenticate", as_callback(self.authenticate, 2, "authenticate"))
        object.__setattr__(self, "success", as_callback(self.success, 0, "success"))
        if self.error is not None:
            object.__setattr__(self, "error", as_callback(self.error, 0, "error"))

    def execute(self, identity: Any, credential: Any) -> Outcome:
        """
        Authenticate once and dispatch.

        Raises:
            AuthenticationError: Predicate returned false and no error callback
            Exception: Anything raised by the predicate or a callback propagates unchanged
        """
        if self.authenticate.invoke(identity, credential):
            if self.verbose:
                self.sink(f"✓ AUTHENTICATED: {identity}")
            self.success.invoke()
            return Outcome.SUCCESS

        if self.verbose:
            self.sink(f"✗ REJECTED: {identity}")
        if self.error is None:
            raise AuthenticationError(identity)
        self.error.invoke()
        return Outcome.HANDLED


def run_gated(
    authenticate: CallbackLike,
    identity: Any,
    credential: Any,
    success: CallbackLike,
    error: Optional[CallbackLike] = None,
) -> Outcome:
    """Build a one-shot GatedAction and execute it."""
    return GatedAction(authenticate, success, error).execute(identity, credential)

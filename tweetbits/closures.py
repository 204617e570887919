"""
closures.py - Closure-Producing Factories

A ClosureFactory turns a body `(context, *args)` into Callbacks that carry
their context with them. Each produced Callback holds the context in its own
bound tuple, so Callbacks from the same factory never share a cell: binding
"gregg" and then "eric" yields two Callbacks that see "gregg" and "eric".

The context is bound by reference. Collaborators such as an output sink stay
the caller's objects. Pass snapshot=True to bind a deep copy instead, when a
mutable value must be frozen as it was at factory-call time.
"""

from __future__ import annotations
import copy
from typing import Any, Callable, Optional

from .core import ArityMismatch, Callback, OutputSink, _signature


class ClosureFactory:
    """
    Produces Callbacks bound to a context value.

    Attributes:
        body: Callable taking the context first, then the call arguments
        name: Optional label for the produced Callbacks
        snapshot: Deep-copy the context when binding

    The body must accept the context as its first positional argument; a
    body that cannot raises ArityMismatch from make_bound_callback().

    Example:
        greet = ClosureFactory(lambda user, msg: f"{user}: {msg}")
        gregg = greet.make_bound_callback("greggpollack")
        gregg("Closure tweet!")   # "greggpollack: Closure tweet!"
    """

    def __init__(self, body: Callable[..., Any], name: Optional[str] = None, snapshot: bool = False):
        if not callable(body):
            raise TypeError(f"ClosureFactory body must be callable, got {type(body).__name__}")
        self.body = body
        self.name = name
        self.snapshot = snapshot

    def make_bound_callback(self, context: Any) -> Callback:
        """
        Return a new Callback with context bound as its first argument.

        Raises:
            ArityMismatch: body cannot take the context argument
        """
        if self.snapshot:
            context = copy.deepcopy(context)
        cb = Callback(self.body, bound=(context,), name=self.name)
        sig = _signature(self.body)
        if sig is not None:
            try:
                sig.bind_partial(context)
            except TypeError as e:
                raise ArityMismatch(
                    cb.label, 1, f"ClosureFactory body {cb.label!r} must accept a context argument"
                ) from e
        return cb

    def __call__(self, context: Any) -> Callback:
        return self.make_bound_callback(context)


def make_bound_callback(
    body: Callable[..., Any],
    context: Any,
    name: Optional[str] = None,
    snapshot: bool = False,
) -> Callback:
    """One-off form of ClosureFactory(body).make_bound_callback(context)."""
    return ClosureFactory(body, name=name, snapshot=snapshot).make_bound_callback(context)


def tweet_as(user: str, sink: OutputSink = print) -> Callback:
    """
    Callback that posts a status as `user`.

    The user is remembered, so later calls only pass the message:

        gregg_tweet = tweet_as("greggpollack")
        gregg_tweet("Closure tweet!")   # writes "greggpollack: Closure tweet!"
    """
    def write(bound_user: str, status: Any) -> None:
        sink(f"{bound_user}: {status}")

    return make_bound_callback(write, user, name=f"tweet_as({user})")

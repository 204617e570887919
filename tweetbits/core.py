"""
Core types and pure functions for tweetbits.

This module provides the foundational pieces everything else builds on:
1. Exceptions: CallbackError and the specific dispatch failures
2. Callback: the single first-class function-value type
3. Boundary conversion: callback() and as_callback()
4. Type aliases: OutputSink, Predicate

A Callback is immutable. Anything it captured from its creation environment
lives in an explicit `bound` tuple, never in shared mutable state.
"""

from __future__ import annotations
from dataclasses import dataclass
import inspect
from typing import Any, Callable, Optional, Tuple


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Where callbacks (and verbose components) write lines of text.
OutputSink = Callable[[str], None]

# Authentication predicate: (identity, credential) -> bool
Predicate = Callable[[Any, Any], bool]


# ============================================================================
# EXCEPTIONS
# ============================================================================

class CallbackError(Exception):
    """Base exception for all tweetbits errors."""
    pass


class AuthenticationError(CallbackError):
    """Raised when a gated action is denied and no error callback was supplied."""

    def __init__(self, identity: Any, message: Optional[str] = None):
        self.identity = identity
        super().__init__(message or f"Auth Error: authentication failed for {identity!r}")


class ArityMismatch(CallbackError, TypeError):
    """Raised when a callback cannot accept the argument set it is given."""

    def __init__(self, name: str, arg_count: int, message: Optional[str] = None):
        self.name = name
        self.arg_count = arg_count
        super().__init__(
            message or f"Callback {name!r} cannot be called with {arg_count} argument(s)"
        )


class UnresolvedName(CallbackError, AttributeError):
    """Raised when a symbolic attribute name cannot be resolved on an element."""

    def __init__(self, name: str, element: Any, index: int):
        # AttributeError.__init__ resets name/obj, so it must run first
        super().__init__(
            f"Element {index} ({type(element).__name__}) has no attribute or method {name!r}",
            name=name,
            obj=element,
        )
        self.name = name
        self.element = element
        self.index = index


# ============================================================================
# SIGNATURE HELPERS
# ============================================================================

def _signature(fn: Callable) -> Optional[inspect.Signature]:
    """Signature of fn, or None if it cannot be introspected (some builtins)."""
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def _describe(fn: Callable) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


# ============================================================================
# CALLBACK
# ============================================================================

@dataclass(frozen=True, slots=True)
class Callback:
    """
    An invocable unit of deferred behaviour.

    Attributes:
        fn: The underlying Python callable.
        bound: Arguments captured at creation time, prepended to every call.
        name: Optional label used in error messages and reprs.

    Construction from a lambda needs no name:

        printer = Callback(lambda tweet: print(tweet))
        printer("First tweet")

    Invoking with an argument set the signature cannot accept raises
    ArityMismatch before the body runs. Exceptions raised by the body itself
    propagate unchanged.
    """
    fn: Callable[..., Any]
    bound: Tuple[Any, ...] = ()
    name: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.fn, Callback):
            raise TypeError("Callback cannot wrap another Callback; use it directly")
        if not callable(self.fn):
            raise TypeError(f"Callback requires a callable, got {type(self.fn).__name__}")
        if not isinstance(self.bound, tuple):
            raise TypeError(f"Callback bound arguments must be a tuple, got {type(self.bound).__name__}")

    @property
    def label(self) -> str:
        """Name if given, otherwise the wrapped function's qualified name."""
        return self.name or _describe(self.fn)

    def accepts(self, arg_count: int) -> bool:
        """True if the callback can be invoked with arg_count positional arguments."""
        sig = _signature(self.fn)
        if sig is None:
            return True
        try:
            sig.bind(*self.bound, *([None] * arg_count))
        except TypeError:
            return False
        return True

    def require_arity(self, arg_count: int, role: str = "callback") -> "Callback":
        """Return self, or raise ArityMismatch if arg_count arguments are not accepted."""
        if not self.accepts(arg_count):
            raise ArityMismatch(
                self.label,
                arg_count,
                f"{role} {self.label!r} must accept {arg_count} argument(s)",
            )
        return self

    def invoke(self, *args: Any) -> Any:
        """Run the callback with args after the bound arguments."""
        sig = _signature(self.fn)
        if sig is not None:
            try:
                sig.bind(*self.bound, *args)
            except TypeError as e:
                raise ArityMismatch(self.label, len(args)) from e
        return self.fn(*self.bound, *args)

    def __call__(self, *args: Any) -> Any:
        return self.invoke(*args)

    def __repr__(self) -> str:
        if self.bound:
            return f"Callback({self.label}, bound={self.bound!r})"
        return f"Callback({self.label})"


# ============================================================================
# BOUNDARY CONVERSION
# ============================================================================

def callback(fn: Optional[Callable] = None, *, name: Optional[str] = None):
    """
    Build a Callback from a plain callable.

    Works directly on a lambda or as a decorator on a named function:

        sent = callback(lambda: print("Sent!"))

        @callback
        def printer(tweet):
            print(tweet)
    """
    if fn is None:
        return lambda f: Callback(f, name=name)
    return Callback(fn, name=name)


def as_callback(
    obj: Any,
    arity: Optional[int] = None,
    role: str = "callback",
) -> Callback:
    """
    Convert obj to a Callback at an API boundary.

    Accepts an existing Callback (returned as-is) or any plain callable.
    When arity is given, the argument count is checked here so that a bad
    callback fails where it is accepted rather than deep inside dispatch.

    Raises:
        TypeError: obj is not callable
        ArityMismatch: obj cannot accept `arity` positional arguments
    """
    if isinstance(obj, Callback):
        cb = obj
    elif callable(obj):
        cb = Callback(obj)
    else:
        raise TypeError(f"{role} must be callable, got {type(obj).__name__}")
    if arity is not None:
        cb.require_arity(arity, role)
    return cb

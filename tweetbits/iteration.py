"""
iteration.py - Iteration Delegation

IterationDelegate owns no data. It forwards traversal to a sequence it holds
by reference (or re-reads from an owner attribute on every call), so any
change to the source is visible to the next for_each() or map().

Transforms are a tagged variant:
    - Callback: called with each element
    - AttrName: a single attribute/method name looked up on each element

AttrName is resolved lazily, element by element. The first element that
lacks the name raises UnresolvedName and traversal stops there.
"""

from __future__ import annotations
from dataclasses import dataclass
import inspect
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, TypeVar, Union

from .core import Callback, UnresolvedName, as_callback

T = TypeVar("T")

_MISSING = object()


# ============================================================================
# SYMBOLIC SHORTCUT
# ============================================================================

@dataclass(frozen=True, slots=True)
class AttrName:
    """
    Symbolic "look up this attribute on each element" transform.

    Exactly one level of access: AttrName("user") is valid,
    AttrName("user.name") is rejected at construction.
    """
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"AttrName requires a str, got {type(self.name).__name__}")
        if not self.name.isidentifier():
            raise ValueError(
                f"AttrName must be a single attribute or method name, got {self.name!r}"
            )

    def resolve(self, element: Any, index: int = 0) -> Any:
        """
        Look up the name on element.

        Data attributes return their value; methods (and any other routine
        found on the element) are called with no arguments. An
        AttributeError raised inside a property that does exist propagates
        as-is.

        Raises:
            UnresolvedName: element has no such attribute or method
        """
        try:
            value = getattr(element, self.name)
        except AttributeError as e:
            if inspect.getattr_static(element, self.name, _MISSING) is not _MISSING:
                raise
            raise UnresolvedName(self.name, element, index) from e
        if inspect.isroutine(value):
            return value()
        return value


Transform = Union[Callback, AttrName]


def as_transform(obj: Any, role: str = "transform") -> Transform:
    """
    Convert obj to a Transform at an API boundary.

    A str becomes AttrName, an AttrName or Callback passes through, any other
    callable is wrapped and must accept one argument.
    """
    if isinstance(obj, AttrName):
        return obj
    if isinstance(obj, str):
        return AttrName(obj)
    return as_callback(obj, 1, role)


def _apply(transform: Transform, element: Any, index: int) -> Any:
    if isinstance(transform, AttrName):
        return transform.resolve(element, index)
    return transform.invoke(element)


# ============================================================================
# ITERATION DELEGATE
# ============================================================================

class IterationDelegate(Generic[T]):
    """
    Forwards traversal and mapping to an underlying sequence.

    The delegate never copies or mutates the source.

    Example:
        tweets = ["First tweet", "Second tweet"]
        delegate = IterationDelegate(tweets)
        delegate.for_each(print)
        delegate.map(AttrName("upper"))   # ["FIRST TWEET", "SECOND TWEET"]
        tweets.append("Third tweet")      # visible to the next call
    """

    def __init__(
        self,
        source: Sequence[T],
        transform: Optional[Union[Transform, Callable[[T], Any], str]] = None,
    ):
        self._source: Optional[Sequence[T]] = source
        self._getter: Optional[Callable[[], Sequence[T]]] = None
        self.transform: Optional[Transform] = (
            as_transform(transform) if transform is not None else None
        )

    @classmethod
    def of_attribute(
        cls,
        owner: Any,
        attr: str,
        transform: Optional[Union[Transform, Callable[[Any], Any], str]] = None,
    ) -> "IterationDelegate":
        """
        Delegate to owner.<attr>, re-read on every call.

        Use this when the owner may reassign the attribute rather than mutate
        the sequence in place.
        """
        delegate = cls((), transform)
        delegate._source = None
        delegate._getter = lambda: getattr(owner, attr)
        return delegate

    @property
    def source(self) -> Sequence[T]:
        """The sequence traversal is currently forwarded to."""
        if self._getter is not None:
            return self._getter()
        return self._source

    def for_each(self, action: Union[Transform, Callable[[T], Any], str]) -> None:
        """
        Invoke action once per element, in order.

        Returns only after the last element. An ArityMismatch for a bad
        action is raised before any element is visited.
        """
        action = as_transform(action, "action")
        for index, element in enumerate(self.source):
            _apply(action, element, index)

    def map(
        self,
        transform: Optional[Union[Transform, Callable[[T], Any], str]] = None,
    ) -> List[Any]:
        """
        Return a new list with one transformed value per element, in order.

        Falls back to the delegate's default transform, then to identity.
        If any element fails, the error propagates and no list is returned.
        """
        if transform is not None:
            chosen: Optional[Transform] = as_transform(transform)
        else:
            chosen = self.transform
        if chosen is None:
            return list(self.source)
        return [_apply(chosen, element, index) for index, element in enumerate(self.source)]

    def __iter__(self) -> Iterator[T]:
        return iter(self.source)

    def __len__(self) -> int:
        return len(self.source)

    def __repr__(self) -> str:
        return f"IterationDelegate({len(self)} elements)"

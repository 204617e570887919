"""
timeline.py - Tweets and Timelines

The domain objects the callable idioms are applied to:

    Tweet     - posts itself through a GatedAction using its own credentials
    Timeline  - owns a list of tweets and delegates traversal to it

Neither class stores behaviour of its own beyond wiring: authentication is
a predicate handed in by the caller, and everything a post or traversal
"does" is a caller-supplied callback.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Callable, Iterator, List, Optional, Union

from .core import Callback, OutputSink, Predicate, as_callback
from .gated_action import CallbackLike, GatedAction, Outcome
from .iteration import IterationDelegate, Transform


def _deny(identity: Any, credential: Any) -> bool:
    return False


# ============================================================================
# TWEET
# ============================================================================

class Tweet:
    """
    A status update that can be posted through an authentication gate.

    Attributes:
        status: Tweet text
        user: Identity passed to the authenticator
        password: Credential passed to the authenticator
        created_at: Optional timestamp, typically set by a configure callback

    The optional configure callback receives the new tweet during
    construction:

        tweet = Tweet(configure=lambda t: setattr(t, "status", "Set in initialize"))
    """

    def __init__(
        self,
        status: str = "",
        user: Optional[str] = None,
        password: Optional[str] = None,
        authenticate: Optional[Union[Predicate, Callback]] = None,
        configure: Optional[CallbackLike] = None,
    ):
        self.status = status
        self.user = user
        self.password = password
        self.created_at: Optional[datetime] = None
        self._authenticate = (
            as_callback(authenticate, 2, "authenticate") if authenticate is not None else None
        )
        if configure is not None:
            as_callback(configure, 1, "configure").invoke(self)

    def post(self, success: CallbackLike, error: Optional[CallbackLike] = None) -> Outcome:
        """
        Post the tweet if the user authenticates.

        Args:
            success: Zero-argument callback run once on success
            error: Optional zero-argument callback run once on failure

        Returns:
            Outcome.SUCCESS or Outcome.HANDLED

        A tweet with no authenticator is denied, so the error callback (or
        AuthenticationError) applies exactly as for a wrong password.

        Raises:
            AuthenticationError: Authentication failed and no error callback
                was given
        """
        authenticate = self._authenticate if self._authenticate is not None else _deny
        action = GatedAction(authenticate, success, error)
        return action.execute(self.user, self.password)

    def __str__(self) -> str:
        return self.status

    def __repr__(self) -> str:
        return f"Tweet({self.status!r}, user={self.user!r})"


# ============================================================================
# TIMELINE
# ============================================================================

class Timeline:
    """
    An ordered collection of tweets.

    Traversal is delegated to the `tweets` list through an IterationDelegate
    bound to the attribute, so both in-place mutation and reassignment of
    `tweets` are seen by later calls.

    Example:
        timeline = Timeline(["First tweet", "Second tweet"])
        timeline.each(print)
        timeline.map("upper")          # ["FIRST TWEET", "SECOND TWEET"]
        timeline.render()              # prints "First tweet, Second tweet"
    """

    def __init__(
        self,
        tweets: Optional[List[Any]] = None,
        sink: OutputSink = print,
        verbose: bool = False,
    ):
        self.tweets: List[Any] = tweets if tweets is not None else []
        self.sink = sink
        self.verbose = verbose
        self._delegate: IterationDelegate = IterationDelegate.of_attribute(self, "tweets")

    def add(self, tweet: Any) -> None:
        """Append a tweet."""
        self.tweets.append(tweet)
        if self.verbose:
            self.sink(f"📝 Added: {tweet}")

    def each(self, action: Union[Transform, Callable[[Any], Any], str]) -> None:
        """Invoke action once per tweet, in order."""
        self._delegate.for_each(action)

    def map(self, transform: Union[Transform, Callable[[Any], Any], str]) -> List[Any]:
        """Transform each tweet; see IterationDelegate.map()."""
        return self._delegate.map(transform)

    def render(self, formatter: Optional[Union[Transform, Callable[[Any], Any], str]] = None) -> None:
        """
        Write the timeline to the sink.

        With a formatter, one line per tweet: formatter(tweet).
        Without one, a single line of all tweets joined with ", ".
        Every tweet is formatted before the first write.
        """
        if formatter is not None:
            for line in self._delegate.map(formatter):
                self.sink(str(line))
        else:
            self.sink(", ".join(str(tweet) for tweet in self._delegate))

    def __iter__(self) -> Iterator[Any]:
        return iter(self._delegate)

    def __len__(self) -> int:
        return len(self._delegate)

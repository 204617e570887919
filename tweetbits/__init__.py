"""
tweetbits - Callable-Value Idioms

Callbacks, closures, gated actions and iteration delegation, applied to a
tiny tweet/timeline domain.

Usage:
    from tweetbits import Tweet, Timeline, tweet_as, callback

    tweet = Tweet("Ruby Bits!", user="gregg", password="secret",
                  authenticate=lambda user, pw: pw == "secret")
    tweet.post(success=callback(lambda: print("Sent!")),
               error=lambda: print("Auth Error"))

    timeline = Timeline(["First tweet", "Second tweet"])
    timeline.each(print)
    timeline.map("upper")

    gregg_tweet = tweet_as("greggpollack")
    gregg_tweet("Closure tweet!")
"""

# Core types
from .core import (
    Callback,
    callback,
    as_callback,
    OutputSink,
    Predicate,
    CallbackError,
    AuthenticationError,
    ArityMismatch,
    UnresolvedName,
)

# Closures
from .closures import (
    ClosureFactory,
    make_bound_callback,
    tweet_as,
)

# Gated dispatch
from .gated_action import (
    GatedAction,
    Outcome,
    run_gated,
)

# Iteration
from .iteration import (
    AttrName,
    Transform,
    IterationDelegate,
    as_transform,
)

# Handlers
from .handlers import (
    announce,
    printer,
    sent,
    raise_auth_error,
    DEFAULT_HANDLERS,
)

# Domain
from .timeline import (
    Tweet,
    Timeline,
)

__all__ = [
    # Core
    'Callback', 'callback', 'as_callback', 'OutputSink', 'Predicate',
    'CallbackError', 'AuthenticationError', 'ArityMismatch', 'UnresolvedName',
    # Closures
    'ClosureFactory', 'make_bound_callback', 'tweet_as',
    # Gated dispatch
    'GatedAction', 'Outcome', 'run_gated',
    # Iteration
    'AttrName', 'Transform', 'IterationDelegate', 'as_transform',
    # Handlers
    'announce', 'printer', 'sent', 'raise_auth_error', 'DEFAULT_HANDLERS',
    # Domain
    'Tweet', 'Timeline',
]

__version__ = '0.1.0'

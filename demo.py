#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Callable Values Step by Step

A pedagogical walkthrough of tweetbits. Each step builds on the previous one.
Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2:  Callbacks      - Storing behaviour in a value, invoking it later
  3-5:  Gated Actions  - One block, one callback, then success + error
  6-8:  Iteration      - Handing callbacks to a timeline, attribute shortcuts
  9:    Configuration  - Optional callback on construction
  10:   Closures       - Factories that remember context

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List
import sys

from tweetbits import (
    # Core
    Callback, callback, ArityMismatch, AuthenticationError, UnresolvedName,
    # Gated dispatch
    GatedAction,
    # Iteration
    AttrName, IterationDelegate,
    # Domain
    Tweet, Timeline,
    # Closures and handlers
    ClosureFactory, tweet_as, sent, printer,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    user: str = "greggpollack"
    password: str = "secret"
    wrong_password: str = "letmein"
    status: str = "Ruby Bits!"
    tweets: List[str] = field(default_factory=lambda: ["First tweet", "Second tweet"])
    created_at: datetime = datetime(2025, 1, 1, 9, 0, 0)
    verbose: bool = True


CONFIG = DemoConfig()

# Global state for interactive mode
QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    """Print a section header within a step."""
    print(f"\n--- {text} ---\n")


def authenticator(credentials: Dict[str, str]):
    """Tutorial stand-in for real authentication."""
    def authenticate(user, password) -> bool:
        return credentials.get(user) == password
    return authenticate


AUTHENTICATE = authenticator({CONFIG.user: CONFIG.password})


# ============================================================================
# PHASE 1: CALLBACKS (Steps 1-2)
# ============================================================================

def step_01_stored_callback():
    """Keep a block of code in a variable and run it later."""
    step_header(1, "Stored Callbacks",
        "A Callback is a value: build it now, invoke it whenever you like.")

    print(">>> my_callback = Callback(lambda: print('tweet'))")
    my_callback = Callback(lambda: print("tweet"))
    print(">>> my_callback()")
    my_callback()

    section_header("Same thing, three spellings")
    print(">>> callback(lambda: print('tweet'))()")
    callback(lambda: print("tweet"))()

    @callback
    def tweet():
        print("tweet")

    print(">>> @callback\n... def tweet(): print('tweet')\n>>> tweet()")
    tweet()


def step_02_arity():
    """Callbacks have a fixed signature, checked where they are accepted."""
    step_header(2, "Signatures",
        "Calling a callback with the wrong arguments fails immediately.")

    cb = Callback(lambda tweet: print(tweet), name="printer")
    print(f"printer.accepts(1) = {cb.accepts(1)}")
    print(f"printer.accepts(0) = {cb.accepts(0)}")

    print("\n>>> printer()")
    try:
        cb()
    except ArityMismatch as e:
        print(f"✗ ArityMismatch: {e}")


# ============================================================================
# PHASE 2: GATED ACTIONS (Steps 3-5)
# ============================================================================

def step_03_post_with_success():
    """Post with a single success callback."""
    step_header(3, "Posting With a Success Callback",
        "Authentication decides whether the callback runs.")

    tweet = Tweet(CONFIG.status, user=CONFIG.user, password=CONFIG.password,
                  authenticate=AUTHENTICATE)
    print(">>> tweet.post(sent())")
    outcome = tweet.post(sent())
    print(f"Outcome: {outcome.value}")

    section_header("Wrong password, no error callback")
    bad = Tweet(CONFIG.status, user=CONFIG.user, password=CONFIG.wrong_password,
                authenticate=AUTHENTICATE)
    try:
        bad.post(sent())
    except AuthenticationError as e:
        print(f"✗ {e}")


def step_04_success_and_error():
    """Two independent callbacks."""
    step_header(4, "Success and Error Callbacks",
        "Either slot can be supplied on its own.")

    bad = Tweet(CONFIG.status, user=CONFIG.user, password=CONFIG.wrong_password,
                authenticate=AUTHENTICATE)
    error = lambda: print("Auth Error (handled)")
    print(">>> bad.post(sent(), error)")
    outcome = bad.post(sent(), error)
    print(f"Outcome: {outcome.value}")


def step_05_gated_action():
    """GatedAction directly, with verbose output."""
    step_header(5, "GatedAction",
        "The gate behind Tweet.post, usable on its own.")

    action = GatedAction(AUTHENTICATE, sent(), lambda: print("Try again"),
                         verbose=CONFIG.verbose)
    for password in (CONFIG.password, CONFIG.wrong_password):
        outcome = action.execute(CONFIG.user, password)
        print(f"  -> {outcome.value}")

    section_header("Key Insight")
    print("""
    Outcome.SUCCESS  - authenticated, success ran
    Outcome.HANDLED  - denied, error ran
    (exception)      - denied, no error callback
    """)


# ============================================================================
# PHASE 3: ITERATION (Steps 6-8)
# ============================================================================

def step_06_each(timeline: Timeline):
    """Hand a stored callback to a timeline."""
    step_header(6, "Each",
        "Timeline forwards traversal to its tweets list.")

    print(">>> timeline.each(printer())")
    timeline.each(printer())

    section_header("Delegation, not copying")
    print(">>> timeline.add('Third tweet'); timeline.each(printer())")
    timeline.add("Third tweet")
    timeline.each(printer())


def step_07_map(timeline: Timeline):
    """Transform each tweet."""
    step_header(7, "Map and Attribute Shortcuts",
        "Pass a name instead of a callback to look it up on each element.")

    print(f">>> timeline.map('upper') = {timeline.map('upper')}")

    section_header("A name the elements don't have")
    try:
        timeline.map(AttrName("user"))
    except UnresolvedName as e:
        print(f"✗ UnresolvedName: {e}")

    section_header("Chains are not shortcuts")
    try:
        AttrName("user.name")
    except ValueError as e:
        print(f"✗ {e}")

    tweets = [Tweet("Hello", user="gregg"), Tweet("World", user="eric")]
    print(f"\n>>> IterationDelegate(tweets).map('user') = {IterationDelegate(tweets).map('user')}")


def step_08_render(timeline: Timeline):
    """Optional formatter."""
    step_header(8, "Optional Formatter",
        "With a formatter, one line per tweet. Without, one joined line.")

    print(">>> timeline.render()")
    timeline.render()
    print(">>> timeline.render(lambda t: f'* {t}')")
    timeline.render(lambda t: f"* {t}")


# ============================================================================
# PHASE 4: CONFIGURATION AND CLOSURES (Steps 9-10)
# ============================================================================

def step_09_configure():
    """Callback run during construction."""
    step_header(9, "Configure on Construction",
        "An optional callback receives the new object.")

    def configure(tweet):
        tweet.status = "Set in initialize"
        tweet.created_at = CONFIG.created_at

    tweet = Tweet(configure=configure)
    print(f"status:     {tweet.status}")
    print(f"created_at: {tweet.created_at}")


def step_10_closures():
    """Factories that remember context."""
    step_header(10, "Closures",
        "A factory binds context now; the callback uses it later.")

    gregg_tweet = tweet_as(CONFIG.user)
    print(f">>> gregg_tweet = tweet_as({CONFIG.user!r})")
    print(">>> gregg_tweet('Closure tweet!')")
    gregg_tweet("Closure tweet!")

    section_header("Snapshots")
    tags = ["ruby"]
    tagged = ClosureFactory(lambda captured, status: print(f"{status} #{' #'.join(captured)}"),
                            snapshot=True)
    cb = tagged.make_bound_callback(tags)
    tags.append("python")
    print(">>> tags.append('python'); cb('hello')")
    cb("hello")


def main():
    """Run the complete tutorial."""
    print("=" * 70)
    print("       TWEETBITS - INTERACTIVE TUTORIAL")
    print("=" * 70)
    print("""
    Welcome! This tutorial walks through callable values.

    PHASES:
      1-2:  Callbacks      - Stored behaviour, signatures
      3-5:  Gated Actions  - Success and error continuations
      6-8:  Iteration      - each, map, attribute shortcuts, render
      9-10: Construction and Closures
    """)

    if QUICK_MODE:
        print("Running in QUICK mode (no pauses)")
    else:
        print("Running in INTERACTIVE mode (press Enter to advance)")

    wait_for_enter()

    step_01_stored_callback()
    wait_for_enter()
    step_02_arity()
    wait_for_enter()

    step_03_post_with_success()
    wait_for_enter()
    step_04_success_and_error()
    wait_for_enter()
    step_05_gated_action()
    wait_for_enter()

    timeline = Timeline(list(CONFIG.tweets), verbose=CONFIG.verbose)
    step_06_each(timeline)
    wait_for_enter()
    step_07_map(timeline)
    wait_for_enter()
    step_08_render(timeline)
    wait_for_enter()

    step_09_configure()
    wait_for_enter()
    step_10_closures()

    print(f"\n{'='*70}")
    print("TUTORIAL COMPLETE")
    print(f"{'='*70}")
    print("""
    Next steps:
      - See tweetbits/*.py for the implementations
      - Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()

"""
test_timeline.py - Unit tests for Tweet and Timeline

Tests cover:
1. Tweet construction and the configure callback
2. Tweet.post through the authentication gate
3. Timeline traversal, mapping and rendering
"""

import pytest
from datetime import datetime

from tweetbits import (
    Tweet, Timeline, Outcome, AttrName, IterationDelegate,
    AuthenticationError, ArityMismatch, UnresolvedName,
)

from tests.fakes import CallCounter, Status, allow_all


class TestTweetCreation:
    """Tests for Tweet construction."""

    def test_defaults(self):
        tweet = Tweet("Ruby Bits!")
        assert tweet.status == "Ruby Bits!"
        assert tweet.user is None
        assert tweet.created_at is None

    def test_configure_receives_new_tweet(self):
        stamp = datetime(2025, 1, 1, 9, 0)

        def configure(tweet):
            tweet.status = "Set in initialize"
            tweet.created_at = stamp

        tweet = Tweet(configure=configure)
        assert tweet.status == "Set in initialize"
        assert tweet.created_at == stamp

    def test_configure_runs_once(self):
        counter = CallCounter()
        tweet = Tweet("x", configure=counter)
        assert counter.calls == [(tweet,)]

    def test_configure_with_wrong_arity_rejected(self):
        with pytest.raises(ArityMismatch, match="configure"):
            Tweet("x", configure=lambda: None)

    def test_authenticator_arity_checked_on_construction(self):
        with pytest.raises(ArityMismatch, match="authenticate"):
            Tweet("x", authenticate=lambda user: True)

    def test_str_and_repr(self):
        tweet = Tweet("Ruby Bits!", user="gregg")
        assert str(tweet) == "Ruby Bits!"
        assert repr(tweet) == "Tweet('Ruby Bits!', user='gregg')"


class TestTweetPost:
    """Tests for Tweet.post()."""

    def test_post_success(self, tweet, sink):
        outcome = tweet.post(lambda: sink("Sent!"))
        assert outcome == Outcome.SUCCESS
        assert sink.lines == ["Sent!"]

    def test_post_denied_with_error_callback(self, bad_tweet, sink):
        outcome = bad_tweet.post(lambda: sink("Sent!"), lambda: sink("Auth Error"))
        assert outcome == Outcome.HANDLED
        assert sink.lines == ["Auth Error"]

    def test_post_denied_without_error_callback(self, bad_tweet, sink):
        with pytest.raises(AuthenticationError) as exc_info:
            bad_tweet.post(lambda: sink("Sent!"))
        assert exc_info.value.identity == "gregg"
        assert sink.lines == []

    def test_post_without_authenticator_is_denied(self, sink):
        tweet = Tweet("Ruby Bits!", user="gregg")
        with pytest.raises(AuthenticationError):
            tweet.post(lambda: sink("Sent!"))
        assert sink.lines == []

    def test_post_without_authenticator_runs_error_callback(self, sink):
        tweet = Tweet("Ruby Bits!", user="gregg")
        outcome = tweet.post(lambda: sink("Sent!"), lambda: sink("Auth Error"))
        assert outcome == Outcome.HANDLED
        assert sink.lines == ["Auth Error"]

    def test_post_passes_user_and_password(self):
        seen = []

        def authenticate(user, password):
            seen.append((user, password))
            return True

        Tweet("x", user="eric", password="hunter2", authenticate=authenticate).post(lambda: None)
        assert seen == [("eric", "hunter2")]

    def test_post_checks_success_arity(self):
        tweet = Tweet("x", authenticate=allow_all)
        with pytest.raises(ArityMismatch):
            tweet.post(lambda status: None)


class TestTimeline:
    """Tests for Timeline traversal."""

    def test_each_in_order(self, timeline, sink):
        timeline.each(sink)
        assert sink.lines == ["First tweet", "Second tweet"]

    def test_map(self, timeline):
        assert timeline.map("upper") == ["FIRST TWEET", "SECOND TWEET"]

    def test_map_user_on_text_tweets_fails(self, timeline):
        with pytest.raises(UnresolvedName):
            timeline.map(AttrName("user"))

    def test_map_user_on_tweet_objects(self):
        timeline = Timeline([Tweet("a", user="gregg"), Tweet("b", user="eric")])
        assert timeline.map("user") == ["gregg", "eric"]

    def test_empty_by_default(self):
        timeline = Timeline()
        assert len(timeline) == 0
        assert list(timeline) == []

    def test_add_is_visible(self, timeline, sink):
        timeline.add("Third tweet")
        timeline.each(sink)
        assert sink.lines == ["First tweet", "Second tweet", "Third tweet"]

    def test_reassigning_tweets_is_visible(self, timeline):
        timeline.tweets = ["Replaced"]
        assert list(timeline) == ["Replaced"]
        assert timeline.map("lower") == ["replaced"]

    def test_shares_list_passed_in(self):
        tweets = ["one"]
        timeline = Timeline(tweets)
        tweets.append("two")
        assert len(timeline) == 2

    def test_verbose_add(self, sink):
        timeline = Timeline(sink=sink, verbose=True)
        timeline.add("hello")
        assert sink.lines == ["📝 Added: hello"]


class TestTimelineRender:
    """Tests for Timeline.render()."""

    def test_without_formatter_joins_tweets(self, timeline, sink):
        timeline.render()
        assert sink.lines == ["First tweet, Second tweet"]

    def test_with_formatter_writes_each(self, timeline, sink):
        timeline.render(lambda tweet: f"* {tweet}")
        assert sink.lines == ["* First tweet", "* Second tweet"]

    def test_with_attribute_formatter(self, sink):
        timeline = Timeline([Status("hi", "gregg"), Status("yo", "eric")], sink=sink)
        timeline.render("user")
        assert sink.lines == ["gregg", "eric"]

    def test_formatter_failure_writes_nothing(self, sink):
        timeline = Timeline([Status("hi", "gregg"), "plain"], sink=sink)
        with pytest.raises(UnresolvedName):
            timeline.render("user")
        assert sink.lines == []

    def test_tweet_objects_render_by_status(self, sink):
        timeline = Timeline([Tweet("a"), Tweet("b")], sink=sink)
        timeline.render()
        assert sink.lines == ["a, b"]

    def test_without_formatter_sees_reassigned_tweets(self, timeline, sink):
        timeline.tweets = ["Replaced"]
        timeline.render()
        assert sink.lines == ["Replaced"]

    def test_without_formatter_reads_through_delegate(self, timeline, sink):
        timeline._delegate = IterationDelegate(["From delegate"])
        timeline.render()
        assert sink.lines == ["From delegate"]

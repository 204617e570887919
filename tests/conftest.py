"""
conftest.py - Shared pytest fixtures for tweetbits tests

Provides common fixtures used across unit, functional and conformance tests:
- Recording sinks
- Credential-table authenticator
- Sample tweets, timelines and attribute-bearing elements
"""

import pytest

from tweetbits import Tweet, Timeline

from tests.fakes import RecordingSink, Status, credential_table


@pytest.fixture
def sink():
    """A fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def passwords():
    """Authenticator accepting gregg/secret and eric/hunter2."""
    return credential_table({"gregg": "secret", "eric": "hunter2"})


@pytest.fixture
def tweet(passwords):
    """A tweet by gregg with correct credentials."""
    return Tweet("Ruby Bits!", user="gregg", password="secret", authenticate=passwords)


@pytest.fixture
def bad_tweet(passwords):
    """A tweet by gregg with the wrong password."""
    return Tweet("Ruby Bits!", user="gregg", password="wrong", authenticate=passwords)


@pytest.fixture
def timeline(sink):
    """Timeline with the tutorial's two text tweets."""
    return Timeline(["First tweet", "Second tweet"], sink=sink)


@pytest.fixture
def statuses():
    """Elements exposing a `user` attribute."""
    return [
        Status("First tweet", "gregg"),
        Status("Second tweet", "eric"),
        Status("Third tweet", "gregg"),
    ]

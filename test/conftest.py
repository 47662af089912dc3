"""
Pytest configuration and fixtures for testing.
"""
import pytest

from heloq.utils import time as clock

SECRET = "this-is-a-very-secure-secret-key-for-testing"
OTHER_SECRET = "another-very-secure-secret-key-for-testing"
FROZEN_NOW = 1_700_000_000


@pytest.fixture
def secret():
    """Secret long enough to sign with."""
    return SECRET


@pytest.fixture
def other_secret():
    """A second valid secret, different from `secret`."""
    return OTHER_SECRET


@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Pin the token clock to a fixed second.

    Tests move the clock by assigning frozen_clock["now"].
    """
    state = {"now": FROZEN_NOW}
    monkeypatch.setattr(clock, "now", lambda: state["now"])
    return state

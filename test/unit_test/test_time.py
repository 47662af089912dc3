"""
Tests for token clock helpers.
"""
import time

from heloq.utils.time import DEFAULT_TTL, expiration, now


class TestNow:
    """Tests for now()."""

    def test_returns_int(self):
        """Test that now() returns whole seconds."""
        assert isinstance(now(), int)

    def test_floors_fractional_seconds(self, monkeypatch):
        """Test that a fractional second never rounds forward."""
        monkeypatch.setattr(time, "time", lambda: 1_700_000_000.999)
        assert now() == 1_700_000_000

    def test_close_to_wall_clock(self):
        """Test that now() tracks the wall clock."""
        assert abs(now() - time.time()) < 2


class TestExpiration:
    """Tests for expiration()."""

    def test_default_ttl(self):
        """Test that a missing ttl uses one hour."""
        assert DEFAULT_TTL == 3600
        assert expiration(1000) == 1000 + 3600

    def test_custom_ttl(self):
        """Test explicit ttl values."""
        assert expiration(1000, 60) == 1060

    def test_zero_and_negative_ttl_not_clamped(self):
        """Test that zero and negative ttl are used as given."""
        assert expiration(1000, 0) == 1000
        assert expiration(1000, -1) == 999

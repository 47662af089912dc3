"""
Tests for HMAC-SHA512 signing.
"""
import base64
import hashlib
import hmac

from heloq.security import mac


class TestSign:
    """Tests for mac.sign()."""

    def test_matches_hmac_sha512(self, secret):
        """Test that the tag is unpadded base64url HMAC-SHA512."""
        digest = hmac.new(secret.encode(), b"header.payload", hashlib.sha512).digest()
        expected = base64.urlsafe_b64encode(digest).decode().rstrip("=")
        assert mac.sign("header.payload", secret) == expected

    def test_deterministic(self, secret):
        """Test that identical inputs give identical tags."""
        assert mac.sign(b"msg", secret) == mac.sign(b"msg", secret)

    def test_text_and_bytes_agree(self, secret):
        """Test that text inputs are treated as their UTF-8 bytes."""
        assert mac.sign("msg", secret) == mac.sign(b"msg", secret.encode("utf-8"))

    def test_key_sensitivity(self, secret, other_secret):
        """Test that different secrets give different tags."""
        assert mac.sign("msg", secret) != mac.sign("msg", other_secret)


class TestVerify:
    """Tests for mac.verify()."""

    def test_accepts_valid_tag(self, secret):
        """Test that a freshly computed tag verifies."""
        tag = mac.sign("msg", secret)
        assert mac.verify("msg", tag, secret)

    def test_rejects_altered_message(self, secret):
        """Test that a different message does not verify."""
        tag = mac.sign("msg", secret)
        assert not mac.verify("msg2", tag, secret)

    def test_rejects_truncated_tag(self, secret):
        """Test that a prefix of the tag does not verify."""
        tag = mac.sign("msg", secret)
        assert not mac.verify("msg", tag[:-1], secret)

    def test_rejects_non_ascii_tag(self, secret):
        """Test that arbitrary text is rejected rather than raising."""
        assert not mac.verify("msg", "ünïcode", secret)

    def test_rejects_non_string_tag(self, secret):
        """Test that a non-text tag is rejected."""
        assert not mac.verify("msg", None, secret)

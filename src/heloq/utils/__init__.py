"""Encoding and time helpers shared by token creation and verification."""
from .base64url import decode, decode_json, encode
from .time import DEFAULT_TTL, expiration, now

__all__ = ["encode", "decode", "decode_json", "now", "expiration", "DEFAULT_TTL"]

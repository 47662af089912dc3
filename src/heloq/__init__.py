"""
Heloq: compact signed tokens with HMAC-SHA512.
"""

from .security import (
    TokenError,
    ValidationError,
    FormatError,
    DecodeError,
    SignatureError,
    ExpiredError,
    CreateOptions,
    TokenHeader,
    TokenPayload,
    TokenOperations,
    create_token,
    verify_token,
    decode_token,
    decode_header,
)

__all__ = [
    "create_token",
    "verify_token",
    "decode_token",
    "decode_header",
    "CreateOptions",
    "TokenHeader",
    "TokenPayload",
    "TokenOperations",
    "TokenError",
    "ValidationError",
    "FormatError",
    "DecodeError",
    "SignatureError",
    "ExpiredError",
]

"""
Signed token creation and verification with HMAC-SHA512.

Example usage:
    from heloq.security import CreateOptions, ExpiredError, create_token, verify_token

    token = create_token({"userId": 42}, secret, CreateOptions(ttl_seconds=7200))

    try:
        claims = verify_token(token, secret)
        print(f"User ID: {claims['userId']}")
    except ExpiredError:
        print("Token has expired")
"""

from .exceptions import (
    TokenError,
    ValidationError,
    FormatError,
    DecodeError,
    SignatureError,
    ExpiredError,
)
from .types import CreateOptions, TokenHeader, TokenPayload
from .token_operations import (
    TokenOperations,
    create_token,
    decode_header,
    decode_token,
    get_token_operations,
    verify_token,
)

__all__ = [
    "TokenError",
    "ValidationError",
    "FormatError",
    "DecodeError",
    "SignatureError",
    "ExpiredError",
    "CreateOptions",
    "TokenHeader",
    "TokenPayload",
    "TokenOperations",
    "create_token",
    "verify_token",
    "decode_token",
    "decode_header",
    "get_token_operations",
]

"""
Custom exceptions for token creation and verification.
"""


class TokenError(Exception):
    """Base exception for token-related errors."""
    pass


class ValidationError(TokenError):
    """Secret or payload is unusable for creating a token."""
    pass


class FormatError(TokenError):
    """Token or secret is missing, or the token is not three segments."""
    pass


class DecodeError(TokenError):
    """Token segment is not valid base64url or JSON."""
    pass


class SignatureError(TokenError):
    """Token signature is invalid."""
    pass


class ExpiredError(TokenError):
    """Token has expired."""
    pass

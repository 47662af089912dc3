"""
Token operations for creation, verification, and decoding.
"""
import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..config.token_config import MIN_SECRET_LENGTH, TokenConfig, get_token_config
from ..utils import base64url
from ..utils import time as clock
from . import mac
from .exceptions import (
    DecodeError,
    ExpiredError,
    FormatError,
    SignatureError,
    ValidationError,
)
from .types import CreateOptions

logger = logging.getLogger(__name__)

TOKEN_TYPE = "HLQ"

HEADER = {
    "alg": mac.ALGORITHM,
    "typ": TOKEN_TYPE,
}


def create_token(
    payload: Mapping[str, Any],
    secret: Union[str, bytes],
    options: Optional[Union[CreateOptions, Mapping[str, Any]]] = None,
) -> str:
    """
    Create a signed token carrying the given claims.

    Args:
        payload: Claims to include; 'iat' and 'exp' are always overwritten
        secret: Shared secret, at least 32 characters
        options: Optional creation options, a CreateOptions or a mapping
            such as {"ttl_seconds": 60}

    Returns:
        Token string 'header.payload.signature'

    Raises:
        ValidationError: If the secret is too short, or the options or payload
            cannot be used
    """
    if not secret or not isinstance(secret, (str, bytes)) or len(secret) < MIN_SECRET_LENGTH:
        raise ValidationError(f"Secret must be at least {MIN_SECRET_LENGTH} characters")
    if not isinstance(payload, Mapping):
        raise ValidationError("Payload must be a mapping")

    ttl_seconds = None
    if options is not None:
        try:
            ttl_seconds = CreateOptions.model_validate(options).ttl_seconds
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid options: {e}") from e
    iat = clock.now()
    exp = clock.expiration(iat, ttl_seconds)

    # Copy so the caller's mapping is left alone, then force the reserved claims
    claims: Dict[str, Any] = dict(payload)
    claims.pop("iat", None)
    claims.pop("exp", None)
    claims["iat"] = iat
    claims["exp"] = exp

    h = base64url.encode(HEADER)
    try:
        p = base64url.encode(claims)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Payload is not JSON-serializable: {e}") from e

    try:
        signature = mac.sign(f"{h}.{p}", secret)
    except UnicodeEncodeError as e:
        raise ValidationError("Secret must be encodable as UTF-8") from e
    logger.debug("Issued token expiring at %s", exp)

    return f"{h}.{p}.{signature}"


def verify_token(token: str, secret: Union[str, bytes]) -> Dict[str, Any]:
    """
    Verify a token's signature and expiration and return its claims.

    The signature is checked before the payload is decoded, so claims are
    only ever read from authentic tokens.

    Args:
        token: Token string to verify
        secret: Shared secret the token was signed with

    Returns:
        Decoded claims

    Raises:
        FormatError: If the token or secret is missing or not UTF-8 encodable, or
            the token is not three segments
        SignatureError: If the signature does not match
        DecodeError: If the payload cannot be decoded
        ExpiredError: If the token has expired
    """
    if not token or not isinstance(token, str):
        raise FormatError("Token must be a non-empty string")
    if not secret or not isinstance(secret, (str, bytes)):
        raise FormatError("Secret must be a non-empty string")

    header, payload, signature = _split(token)

    try:
        authentic = mac.verify(f"{header}.{payload}", signature, secret)
    except UnicodeEncodeError as e:
        raise FormatError("Token and secret must be encodable as UTF-8") from e
    if not authentic:
        logger.info("Token rejected: invalid signature")
        raise SignatureError("Invalid signature")

    try:
        claims = base64url.decode_json(payload)
    except DecodeError:
        logger.warning("Token has a valid signature but an undecodable payload")
        raise

    exp = claims.get("exp")
    if isinstance(exp, (int, float)) and not isinstance(exp, bool) and exp < clock.now():
        logger.info("Token rejected: expired at %s", exp)
        raise ExpiredError("Token expired")

    return claims


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decode a token's claims WITHOUT verifying it.

    WARNING: the result is not authenticated. Use it only to inspect claims,
    e.g. to choose which secret to verify with.

    Raises:
        FormatError: If the token is missing or not three segments
        DecodeError: If the payload cannot be decoded
    """
    _, payload, _ = _split(_require_token(token))
    return base64url.decode_json(payload)


def decode_header(token: str) -> Dict[str, Any]:
    """Decode a token's header WITHOUT verifying it."""
    header, _, _ = _split(_require_token(token))
    return base64url.decode_json(header)


def _require_token(token: Any) -> str:
    if not token or not isinstance(token, str):
        raise FormatError("Token must be a non-empty string")
    return token


def _split(token: str):
    parts = token.split(".")
    if len(parts) != 3:
        raise FormatError("Invalid token format: expected 3 parts")
    return parts


class TokenOperations:
    """
    Token creation and verification bound to a configured secret.
    """

    def __init__(self, config: TokenConfig):
        """
        Initialize token operations.

        Args:
            config: TokenConfig holding the secret and default lifetime
        """
        self._secret = config.secret.get_secret_value()
        self.ttl_seconds = config.ttl_seconds

    def generate_token(
        self,
        payload: Mapping[str, Any],
        ttl_seconds: Optional[int] = None,
    ) -> str:
        """
        Generate a signed token.

        Args:
            payload: Claims to include
            ttl_seconds: Lifetime in seconds; falls back to the configured default

        Returns:
            Signed token string
        """
        if ttl_seconds is None:
            ttl_seconds = self.ttl_seconds
        return create_token(payload, self._secret, CreateOptions(ttl_seconds=ttl_seconds))

    def verify_and_decode_token(self, token: str) -> Dict[str, Any]:
        """Verify a token with the configured secret and return its claims."""
        return verify_token(token, self._secret)

    def decode_token_unsafe(self, token: str) -> Dict[str, Any]:
        """
        Decode a token WITHOUT verification.

        WARNING: This method does NOT verify the token signature or expiration.
        """
        return decode_token(token)


@lru_cache()
def get_token_operations() -> TokenOperations:
    """
    Get a cached TokenOperations instance loaded from environment variables.
    """
    return TokenOperations(get_token_config())

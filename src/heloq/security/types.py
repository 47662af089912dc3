"""
Token header, payload and option types.
"""
from typing import Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field


class CreateOptions(BaseModel):
    """Options for token creation."""

    model_config = ConfigDict(frozen=True)

    ttl_seconds: Optional[int] = Field(
        default=None,
        description="Token lifetime in seconds (default: 3600). Zero or negative gives an expired token",
    )


class TokenHeader(TypedDict):
    alg: str
    typ: str


class TokenPayload(TypedDict, total=False):
    """
    Decoded claims. Caller fields sit next to the reserved timestamps.
    """
    # Issued at, seconds since Unix epoch
    iat: int
    # Expiration, seconds since Unix epoch
    exp: int

"""Clock helpers for token timestamps."""
import math
import time
from typing import Optional

# Default token lifetime: 1 hour in seconds
DEFAULT_TTL = 3600


def now() -> int:
    """Return the current Unix time in whole seconds, rounded down."""
    return math.floor(time.time())


def expiration(issued_at: int, ttl: Optional[int] = None) -> int:
    """
    Compute the expiration timestamp for a token.

    Zero and negative values are allowed and produce a token that is
    already expired.

    Args:
        issued_at: Issue time in Unix seconds
        ttl: Lifetime in seconds (default: DEFAULT_TTL)

    Returns:
        Expiration time in Unix seconds
    """
    if ttl is None:
        return issued_at + DEFAULT_TTL
    return issued_at + ttl

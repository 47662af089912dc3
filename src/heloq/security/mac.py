"""
HMAC-SHA512 signing of token segments.
"""
import hmac
from typing import Union

from jwt.algorithms import HMACAlgorithm
from jwt.utils import base64url_encode, force_bytes

ALGORITHM = "HS512"

_hmac_sha512 = HMACAlgorithm(HMACAlgorithm.SHA512)


def sign(message: Union[str, bytes], secret: Union[str, bytes]) -> str:
    """
    Compute the base64url (unpadded) HMAC-SHA512 tag of a message.

    Args:
        message: Bytes to authenticate; text is UTF-8 encoded
        secret: Shared key; text is UTF-8 encoded

    Returns:
        The tag as base64url text
    """
    digest = _hmac_sha512.sign(force_bytes(message), force_bytes(secret))
    return base64url_encode(digest).decode("ascii")


def verify(message: Union[str, bytes], tag: str, secret: Union[str, bytes]) -> bool:
    """
    Check a tag against a message in constant time.

    Args:
        message: Bytes that were signed
        tag: Tag taken from the token
        secret: Shared key

    Returns:
        True if the tag matches, False otherwise
    """
    if not isinstance(tag, str):
        return False
    expected = sign(message, secret)
    return hmac.compare_digest(expected.encode("utf-8"), tag.encode("utf-8"))

"""
URL-safe, padding-free encoding of token segments.
"""
import binascii
import json
import re
from typing import Any, Dict

from jwt.utils import base64url_decode, base64url_encode

from ..security.exceptions import DecodeError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode(value: Any) -> str:
    """
    Encode a value as a base64url segment without padding.

    Strings are encoded as-is; anything else is first serialized to compact
    JSON with sorted keys, so equal values always give the same segment.

    Args:
        value: A string or any JSON-representable value

    Returns:
        Base64url text with trailing '=' removed

    Raises:
        TypeError: If the value contains something JSON cannot represent
        ValueError: If the value contains NaN or infinity
    """
    if isinstance(value, str):
        text = value
    else:
        text = json.dumps(
            value,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    return base64url_encode(text.encode("utf-8")).decode("ascii")


def decode(segment: str) -> str:
    """
    Decode a base64url segment back to text.

    Args:
        segment: Base64url text, with or without padding stripped

    Returns:
        The decoded UTF-8 text

    Raises:
        DecodeError: If the segment uses characters outside the URL-safe
            alphabet, has an impossible length, or is not UTF-8
    """
    if not isinstance(segment, str) or not _SEGMENT_RE.fullmatch(segment):
        raise DecodeError("Segment contains characters outside the base64url alphabet")
    # A remainder of 1 can never come out of the encoder
    if len(segment) % 4 == 1:
        raise DecodeError("Segment has an invalid base64url length")

    try:
        raw = base64url_decode(segment)
    except (binascii.Error, ValueError) as e:
        raise DecodeError("Segment is not valid base64url") from e

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Segment is not valid UTF-8") from e


def decode_json(segment: str) -> Dict[str, Any]:
    """Decode a base64url segment holding a JSON object."""
    text = decode(segment)
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError("Segment is not valid JSON") from e

    if not isinstance(value, dict):
        raise DecodeError("Segment does not hold a JSON object")
    return value


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")

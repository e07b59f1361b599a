"""Base64 encoding/decoding utilities for onionlayer."""

import base64
import binascii

from ..errors import OnionLayerError


class InvalidEncodingError(OnionLayerError, ValueError):
    """Raised when a string is not valid standard base64."""

    pass


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode a standard base64 string to bytes.

    Decoding is strict: characters outside the base64 alphabet and
    incorrect padding are rejected instead of silently discarded.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        InvalidEncodingError: If the input is not a valid base64 string.
    """
    if not isinstance(s, str):
        raise InvalidEncodingError(f"Expected a base64 string, got {type(s).__name__}")
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncodingError(f"Invalid base64 data: {e}") from e

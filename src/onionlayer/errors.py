"""Error hierarchy for onionlayer."""

from __future__ import annotations


class OnionLayerError(Exception):
    """Base exception for all onionlayer errors."""

    pass


class KeyFormatError(OnionLayerError):
    """Key material could not be imported.

    Raised for malformed base64, a wrong raw key length, or a DER structure
    that is not an RSA SPKI/PKCS8 key.
    """

    pass


class DecryptionError(OnionLayerError):
    """Cryptographic decryption failure.

    The message is the same whatever the cause (wrong key, tampered or
    truncated ciphertext) so callers cannot be used as a padding oracle.
    """

    pass


class PlaintextTooLargeError(OnionLayerError):
    """Plaintext exceeds the RSA-OAEP capacity of the key.

    Attributes:
        size: Length of the rejected plaintext in bytes.
        limit: Maximum plaintext length for the key in bytes.
    """

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Plaintext too large for RSA-OAEP: {size} bytes, maximum is {limit}")


class DuplicateNodeError(OnionLayerError):
    """A node with the same id is already registered (409)."""

    pass


class NodeNotFoundError(OnionLayerError):
    """Node not found (404)."""

    pass


NotFoundError = NodeNotFoundError


class InvalidRequestError(OnionLayerError):
    """Malformed request rejected by the directory (400/422)."""

    pass


class ApiError(OnionLayerError):
    """HTTP API error with status code.

    Attributes:
        status_code: The HTTP status code.
        message: The error message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class NetworkError(OnionLayerError):
    """Network communication failure."""

    pass

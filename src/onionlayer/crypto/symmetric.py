"""AES-256-GCM symmetric keys and encryption for onionlayer.

Ciphertext blobs are laid out as ``IV (12 bytes) || ciphertext || tag (16 bytes)``
and travel as a single base64 string.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionError, KeyFormatError
from .constants import (
    AES_GCM_NONCE_SIZE,
    AES_GCM_TAG_SIZE,
    AES_KEY_SIZE,
    DECRYPTION_FAILED_MESSAGE,
)
from .utils import InvalidEncodingError, from_base64, to_base64


@dataclass(frozen=True)
class SymmetricKey:
    """A 256-bit AES-GCM key.

    Attributes:
        key: The raw key bytes (32 bytes).
    """

    key: bytes

    def __post_init__(self) -> None:
        if len(self.key) != AES_KEY_SIZE:
            raise KeyFormatError(
                f"Invalid symmetric key length: {len(self.key)}, expected {AES_KEY_SIZE}"
            )

    def __repr__(self) -> str:
        return "SymmetricKey(<redacted>)"


def generate_symmetric_key() -> SymmetricKey:
    """Generate a fresh random AES-256-GCM key.

    Returns:
        A new SymmetricKey.
    """
    return SymmetricKey(AESGCM.generate_key(bit_length=AES_KEY_SIZE * 8))


def export_symmetric_key(key: SymmetricKey) -> str:
    """Export a symmetric key as base64 of its raw bytes.

    Args:
        key: The key to export.

    Returns:
        Base64 string of the 32 raw key bytes.
    """
    return to_base64(key.key)


def import_symmetric_key(key_b64: str) -> SymmetricKey:
    """Import a symmetric key from its base64 export.

    Args:
        key_b64: Base64 string of exactly 32 raw key bytes.

    Returns:
        The SymmetricKey.

    Raises:
        KeyFormatError: If the string is not base64 or has the wrong length.
    """
    try:
        raw = from_base64(key_b64)
    except InvalidEncodingError as e:
        raise KeyFormatError(f"Invalid symmetric key: {e}") from e
    return SymmetricKey(raw)


def _as_key(key: SymmetricKey | str) -> SymmetricKey:
    if isinstance(key, str):
        return import_symmetric_key(key)
    return key


def sym_encrypt(key: SymmetricKey | str, plaintext: str) -> str:
    """Encrypt a string with AES-256-GCM under a fresh random IV.

    Args:
        key: The symmetric key, or its base64 export.
        plaintext: The text to encrypt (encoded as UTF-8).

    Returns:
        Base64 string of IV || ciphertext || tag.

    Raises:
        KeyFormatError: If a key string cannot be imported.
    """
    key = _as_key(key)
    iv = os.urandom(AES_GCM_NONCE_SIZE)
    ciphertext = AESGCM(key.key).encrypt(iv, plaintext.encode("utf-8"), None)
    return to_base64(iv + ciphertext)


def sym_decrypt(key: SymmetricKey | str, blob_b64: str) -> str:
    """Decrypt a blob produced by sym_encrypt.

    Args:
        key: The symmetric key, or its base64 export.
        blob_b64: Base64 string of IV || ciphertext || tag.

    Returns:
        The decrypted plaintext as a string.

    Raises:
        KeyFormatError: If a key string cannot be imported.
        DecryptionError: If the blob is malformed, truncated or fails authentication.
    """
    key = _as_key(key)
    try:
        blob = from_base64(blob_b64)
    except InvalidEncodingError as e:
        raise DecryptionError(DECRYPTION_FAILED_MESSAGE) from e

    if len(blob) < AES_GCM_NONCE_SIZE + AES_GCM_TAG_SIZE:
        raise DecryptionError(DECRYPTION_FAILED_MESSAGE)

    iv, ciphertext = blob[:AES_GCM_NONCE_SIZE], blob[AES_GCM_NONCE_SIZE:]
    try:
        plaintext = AESGCM(key.key).decrypt(iv, ciphertext, None)
        return plaintext.decode("utf-8")
    except (InvalidTag, UnicodeDecodeError) as e:
        raise DecryptionError(DECRYPTION_FAILED_MESSAGE) from e

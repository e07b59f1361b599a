"""RSA-OAEP key pair generation, export and import for onionlayer."""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import KeyFormatError
from .constants import RSA_KEY_SIZE, RSA_PUBLIC_EXPONENT
from .utils import InvalidEncodingError, from_base64, to_base64


@dataclass
class KeyPair:
    """RSA key pair used to wrap and unwrap symmetric keys.

    Attributes:
        public_key: The public half, shareable through the directory.
        private_key: The private half, which never leaves the owning node.
    """

    public_key: rsa.RSAPublicKey
    private_key: rsa.RSAPrivateKey

    def __repr__(self) -> str:
        return f"KeyPair(key_size={self.public_key.key_size})"


def generate_key_pair() -> KeyPair:
    """Generate a new 2048-bit RSA key pair for OAEP/SHA-256.

    Returns:
        A new KeyPair instance.
    """
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_SIZE,
    )
    return KeyPair(public_key=private_key.public_key(), private_key=private_key)


def validate_key_pair(key_pair: KeyPair) -> bool:
    """Check that both halves are RSA keys and belong together.

    Args:
        key_pair: The key pair to validate.

    Returns:
        True if valid, False otherwise.
    """
    if not isinstance(key_pair.public_key, rsa.RSAPublicKey):
        return False
    if not isinstance(key_pair.private_key, rsa.RSAPrivateKey):
        return False
    return key_pair.private_key.public_key().public_numbers() == key_pair.public_key.public_numbers()


def export_public_key(key: rsa.RSAPublicKey) -> str:
    """Export a public key as base64-encoded SPKI (DER).

    Args:
        key: The public key to export.

    Returns:
        Base64 string of the SubjectPublicKeyInfo structure.
    """
    der = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return to_base64(der)


def export_private_key(key: rsa.RSAPrivateKey | None) -> str | None:
    """Export a private key as base64-encoded PKCS8 (DER).

    Args:
        key: The private key to export, or None when only a public key is known.

    Returns:
        Base64 string of the unencrypted PKCS8 structure, or None if key is None.
    """
    if key is None:
        return None
    der = key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return to_base64(der)


def import_public_key(key_b64: str) -> rsa.RSAPublicKey:
    """Import a base64 SPKI string as an encrypt-only RSA public key.

    Args:
        key_b64: Base64-encoded SPKI public key.

    Returns:
        The RSA public key.

    Raises:
        KeyFormatError: If the string is not base64 or not an RSA SPKI key.
    """
    try:
        der = from_base64(key_b64)
        key = serialization.load_der_public_key(der)
    except (InvalidEncodingError, ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(f"Invalid public key: {e}") from e

    if not isinstance(key, rsa.RSAPublicKey):
        raise KeyFormatError(f"Invalid public key: expected RSA, got {type(key).__name__}")
    return key


def import_private_key(key_b64: str) -> rsa.RSAPrivateKey:
    """Import a base64 PKCS8 string as a decrypt-only RSA private key.

    Args:
        key_b64: Base64-encoded PKCS8 private key (unencrypted).

    Returns:
        The RSA private key.

    Raises:
        KeyFormatError: If the string is not base64 or not an RSA PKCS8 key.
    """
    try:
        der = from_base64(key_b64)
        key = serialization.load_der_private_key(der, password=None)
    except (InvalidEncodingError, ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyFormatError(f"Invalid private key: {e}") from e

    if not isinstance(key, rsa.RSAPrivateKey):
        raise KeyFormatError(f"Invalid private key: expected RSA, got {type(key).__name__}")
    return key

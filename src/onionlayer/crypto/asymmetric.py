"""RSA-OAEP encryption and decryption for onionlayer."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from ..errors import DecryptionError, PlaintextTooLargeError
from .constants import DECRYPTION_FAILED_MESSAGE, SHA256_DIGEST_SIZE
from .keypair import import_private_key, import_public_key
from .utils import InvalidEncodingError, from_base64, to_base64


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def max_plaintext_size(public_key: rsa.RSAPublicKey) -> int:
    """Return the largest plaintext RSA-OAEP/SHA-256 can encrypt under a key.

    Args:
        public_key: The RSA public key.

    Returns:
        Maximum plaintext length in bytes (190 for a 2048-bit modulus).
    """
    modulus_bytes = (public_key.key_size + 7) // 8
    return modulus_bytes - 2 * SHA256_DIGEST_SIZE - 2


def rsa_encrypt(data_b64: str, public_key: str | rsa.RSAPublicKey) -> str:
    """Encrypt base64-encoded data for the holder of a public key.

    Args:
        data_b64: The plaintext, base64-encoded.
        public_key: Base64 SPKI public key, or an already imported key.

    Returns:
        Base64 string of the raw RSA-OAEP ciphertext.

    Raises:
        KeyFormatError: If the public key cannot be imported.
        InvalidEncodingError: If data_b64 is not valid base64.
        PlaintextTooLargeError: If the plaintext exceeds the OAEP capacity.
    """
    if isinstance(public_key, str):
        public_key = import_public_key(public_key)

    data = from_base64(data_b64)
    limit = max_plaintext_size(public_key)
    if len(data) > limit:
        raise PlaintextTooLargeError(len(data), limit)

    return to_base64(public_key.encrypt(data, _oaep()))


def rsa_decrypt(ciphertext_b64: str, private_key: rsa.RSAPrivateKey | str) -> str:
    """Decrypt an RSA-OAEP ciphertext and decode the result as UTF-8.

    The caller is expected to hold the live private key object; an exported
    PKCS8 string is imported first.

    Args:
        ciphertext_b64: Base64 string produced by rsa_encrypt.
        private_key: The RSA private key, or its base64 PKCS8 export.

    Returns:
        The decrypted plaintext as a string.

    Raises:
        KeyFormatError: If a private key string cannot be imported.
        DecryptionError: If decryption fails for any reason.
    """
    if isinstance(private_key, str):
        private_key = import_private_key(private_key)

    try:
        ciphertext = from_base64(ciphertext_b64)
        plaintext = private_key.decrypt(ciphertext, _oaep())
        return plaintext.decode("utf-8")
    except (InvalidEncodingError, ValueError) as e:
        raise DecryptionError(DECRYPTION_FAILED_MESSAGE) from e

"""Hybrid encryption: an RSA-wrapped symmetric key sealing an AES-GCM payload.

RSA-OAEP/SHA-256 under a 2048-bit key carries at most 190 bytes, so payloads
are never RSA-encrypted directly. Each hop gets a fresh symmetric key, the key
is wrapped under the hop's public key, and the payload is sealed with the key.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import rsa

from ..errors import DecryptionError, KeyFormatError
from .asymmetric import rsa_decrypt, rsa_encrypt
from .constants import DECRYPTION_FAILED_MESSAGE
from .symmetric import (
    SymmetricKey,
    export_symmetric_key,
    generate_symmetric_key,
    import_symmetric_key,
    sym_decrypt,
    sym_encrypt,
)
from .utils import to_base64


@dataclass
class HybridCiphertext:
    """A payload sealed for one hop.

    Attributes:
        encrypted_key: Base64 RSA-OAEP ciphertext of the exported symmetric key.
        ciphertext: Base64 symmetric blob (IV || ciphertext || tag).
    """

    encrypted_key: str
    ciphertext: str


def wrap_symmetric_key(key: SymmetricKey, public_key: str | rsa.RSAPublicKey) -> str:
    """Encrypt a symmetric key for the holder of a public key.

    The RSA plaintext is the UTF-8 text of the key's base64 export, so the
    recipient recovers it through rsa_decrypt unchanged.

    Args:
        key: The symmetric key to wrap.
        public_key: Base64 SPKI public key, or an already imported key.

    Returns:
        Base64 RSA-OAEP ciphertext.
    """
    exported = export_symmetric_key(key)
    return rsa_encrypt(to_base64(exported.encode("ascii")), public_key)


def unwrap_symmetric_key(wrapped_b64: str, private_key: rsa.RSAPrivateKey | str) -> SymmetricKey:
    """Recover a symmetric key wrapped by wrap_symmetric_key.

    Args:
        wrapped_b64: Base64 RSA-OAEP ciphertext.
        private_key: The recipient's RSA private key, or its base64 PKCS8 export.

    Returns:
        The unwrapped SymmetricKey.

    Raises:
        DecryptionError: If the key cannot be decrypted or is not a valid key.
    """
    exported = rsa_decrypt(wrapped_b64, private_key)
    try:
        return import_symmetric_key(exported)
    except KeyFormatError as e:
        raise DecryptionError(DECRYPTION_FAILED_MESSAGE) from e


def hybrid_encrypt(plaintext: str, public_key: str | rsa.RSAPublicKey) -> HybridCiphertext:
    """Seal a payload of any length for the holder of a public key.

    Args:
        plaintext: The text to encrypt.
        public_key: Base64 SPKI public key, or an already imported key.

    Returns:
        The wrapped key and the symmetric blob.
    """
    key = generate_symmetric_key()
    return HybridCiphertext(
        encrypted_key=wrap_symmetric_key(key, public_key),
        ciphertext=sym_encrypt(key, plaintext),
    )


def hybrid_decrypt(sealed: HybridCiphertext, private_key: rsa.RSAPrivateKey | str) -> str:
    """Open a payload sealed by hybrid_encrypt.

    Args:
        sealed: The wrapped key and symmetric blob.
        private_key: The recipient's RSA private key, or its base64 PKCS8 export.

    Returns:
        The decrypted plaintext.

    Raises:
        DecryptionError: If either layer fails to decrypt.
    """
    key = unwrap_symmetric_key(sealed.encrypted_key, private_key)
    return sym_decrypt(key, sealed.ciphertext)

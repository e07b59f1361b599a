"""Node identity: a node id bound to its RSA key pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from .crypto import (
    HybridCiphertext,
    KeyPair,
    SymmetricKey,
    export_private_key,
    export_public_key,
    generate_key_pair,
    hybrid_decrypt,
    import_private_key,
    import_public_key,
    rsa_decrypt,
    unwrap_symmetric_key,
    validate_key_pair,
)
from .errors import KeyFormatError


@dataclass
class NodeIdentity:
    """A routing node's identity.

    The private key stays inside this object; only the public half is meant
    to be published to the directory.

    Attributes:
        node_id: Unique node identifier.
        key_pair: The node's RSA key pair.
    """

    node_id: int
    key_pair: KeyPair

    @classmethod
    def generate(cls, node_id: int) -> NodeIdentity:
        """Create an identity with a freshly generated key pair."""
        return cls(node_id=node_id, key_pair=generate_key_pair())

    @classmethod
    def from_exported(cls, node_id: int, public_key: str, private_key: str) -> NodeIdentity:
        """Rebuild an identity from exported SPKI and PKCS8 strings.

        Raises:
            KeyFormatError: If either key is malformed or they do not match.
        """
        key_pair = KeyPair(
            public_key=import_public_key(public_key),
            private_key=import_private_key(private_key),
        )
        if not validate_key_pair(key_pair):
            raise KeyFormatError(f"Public and private key of node {node_id} do not match")
        return cls(node_id=node_id, key_pair=key_pair)

    @property
    def public_key_b64(self) -> str:
        """Base64 SPKI public key, as registered in the directory."""
        return export_public_key(self.key_pair.public_key)

    @property
    def private_key_b64(self) -> str:
        """Base64 PKCS8 private key."""
        return cast(str, export_private_key(self.key_pair.private_key))

    def decrypt(self, ciphertext_b64: str) -> str:
        """Decrypt an RSA-OAEP ciphertext addressed to this node."""
        return rsa_decrypt(ciphertext_b64, self.key_pair.private_key)

    def unwrap(self, wrapped_b64: str) -> SymmetricKey:
        """Recover a symmetric key wrapped for this node."""
        return unwrap_symmetric_key(wrapped_b64, self.key_pair.private_key)

    def open(self, sealed: HybridCiphertext) -> str:
        """Open a hybrid payload sealed for this node."""
        return hybrid_decrypt(sealed, self.key_pair.private_key)

    def __repr__(self) -> str:
        return f"NodeIdentity(node_id={self.node_id})"

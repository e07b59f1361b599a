"""Cryptographic operations for onionlayer."""

from .asymmetric import max_plaintext_size, rsa_decrypt, rsa_encrypt
from .constants import RSA_KEY_SIZE, RSA_OAEP_MAX_PLAINTEXT_SIZE
from .hybrid import (
    HybridCiphertext,
    hybrid_decrypt,
    hybrid_encrypt,
    unwrap_symmetric_key,
    wrap_symmetric_key,
)
from .keypair import (
    KeyPair,
    export_private_key,
    export_public_key,
    generate_key_pair,
    import_private_key,
    import_public_key,
    validate_key_pair,
)
from .symmetric import (
    SymmetricKey,
    export_symmetric_key,
    generate_symmetric_key,
    import_symmetric_key,
    sym_decrypt,
    sym_encrypt,
)
from .utils import InvalidEncodingError, from_base64, to_base64

__all__ = [
    "RSA_KEY_SIZE",
    "RSA_OAEP_MAX_PLAINTEXT_SIZE",
    "HybridCiphertext",
    "InvalidEncodingError",
    "KeyPair",
    "SymmetricKey",
    "export_private_key",
    "export_public_key",
    "export_symmetric_key",
    "from_base64",
    "generate_key_pair",
    "generate_symmetric_key",
    "hybrid_decrypt",
    "hybrid_encrypt",
    "import_private_key",
    "import_public_key",
    "import_symmetric_key",
    "max_plaintext_size",
    "rsa_decrypt",
    "rsa_encrypt",
    "sym_decrypt",
    "sym_encrypt",
    "to_base64",
    "unwrap_symmetric_key",
    "validate_key_pair",
    "wrap_symmetric_key",
]

"""onionlayer.

Cryptographic layering primitives for a simulated onion-routing network,
plus the node directory that publishes each node's public key.

Example:
    ```python
    from onionlayer import (
        NodeIdentity,
        export_symmetric_key,
        generate_symmetric_key,
        sym_decrypt,
        sym_encrypt,
        wrap_symmetric_key,
    )

    node = NodeIdentity.generate(1)
    key = generate_symmetric_key()
    wrapped = wrap_symmetric_key(key, node.public_key_b64)
    blob = sym_encrypt(key, "hello")
    assert sym_decrypt(node.unwrap(wrapped), blob) == "hello"
    ```
"""

from .client import RegistryClient
from .constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REGISTRY_PORT,
    DEFAULT_REGISTRY_URL,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_TIMEOUT_MS,
)
from .crypto import (
    HybridCiphertext,
    KeyPair,
    SymmetricKey,
    export_private_key,
    export_public_key,
    export_symmetric_key,
    generate_key_pair,
    generate_symmetric_key,
    hybrid_decrypt,
    hybrid_encrypt,
    import_private_key,
    import_public_key,
    import_symmetric_key,
    rsa_decrypt,
    rsa_encrypt,
    sym_decrypt,
    sym_encrypt,
    unwrap_symmetric_key,
    wrap_symmetric_key,
)
from .errors import (
    ApiError,
    DecryptionError,
    DuplicateNodeError,
    InvalidRequestError,
    KeyFormatError,
    NetworkError,
    NodeNotFoundError,
    NotFoundError,
    OnionLayerError,
    PlaintextTooLargeError,
)
from .node import NodeIdentity
from .types import ClientConfig, RegisteredNode, RegistrySettings

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "RegistryClient",
    "NodeIdentity",
    # Constants
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_REGISTRY_PORT",
    "DEFAULT_REGISTRY_URL",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_RETRY_STATUS_CODES",
    "DEFAULT_TIMEOUT_MS",
    # Configuration
    "ClientConfig",
    "RegistrySettings",
    # Data types
    "HybridCiphertext",
    "KeyPair",
    "RegisteredNode",
    "SymmetricKey",
    # Crypto
    "export_private_key",
    "export_public_key",
    "export_symmetric_key",
    "generate_key_pair",
    "generate_symmetric_key",
    "hybrid_decrypt",
    "hybrid_encrypt",
    "import_private_key",
    "import_public_key",
    "import_symmetric_key",
    "rsa_decrypt",
    "rsa_encrypt",
    "sym_decrypt",
    "sym_encrypt",
    "unwrap_symmetric_key",
    "wrap_symmetric_key",
    # Errors
    "OnionLayerError",
    "ApiError",
    "DecryptionError",
    "DuplicateNodeError",
    "InvalidRequestError",
    "KeyFormatError",
    "NetworkError",
    "NodeNotFoundError",
    "NotFoundError",
    "PlaintextTooLargeError",
    # Version
    "__version__",
]

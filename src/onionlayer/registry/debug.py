"""Debug-only private key store.

UNSAFE: this hands out private keys to anyone who asks and defeats the whole
key secrecy model. It exists so integration tests can decrypt what a node
received. The directory app only exposes it when explicitly enabled.
"""

from __future__ import annotations

import logging
import threading
from typing import cast

from ..crypto import KeyPair, export_private_key
from ..errors import NodeNotFoundError

logger = logging.getLogger("onionlayer")


class DebugKeyStore:
    """Maps node ids to their full key pairs, for tests only."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keys: dict[int, KeyPair] = {}

    def __len__(self) -> int:
        return len(self._keys)

    def remember(self, node_id: int, key_pair: KeyPair) -> None:
        """Store a node's key pair, replacing any previous one."""
        with self._lock:
            self._keys[node_id] = key_pair

    def get_private_key(self, node_id: int) -> str:
        """Return a node's private key as base64 PKCS8.

        Raises:
            NodeNotFoundError: If no key pair is stored for node_id.
        """
        key_pair = self._keys.get(node_id)
        if key_pair is None:
            raise NodeNotFoundError(f"Node {node_id} not found or key not generated")

        logger.warning("Private key of node %s read through the debug key store", node_id)
        return cast(str, export_private_key(key_pair.private_key))

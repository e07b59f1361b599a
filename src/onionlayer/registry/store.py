"""In-memory node directory for onionlayer."""

from __future__ import annotations

import logging
import threading

from ..errors import DuplicateNodeError, NodeNotFoundError
from ..types import RegisteredNode

logger = logging.getLogger("onionlayer")


class NodeRegistry:
    """Registry of nodes and their public keys.

    Entries live for the lifetime of the registry and are never replaced:
    a second registration for the same id is rejected. Registration is
    serialized by a lock; listing and lookups read without locking.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._nodes: list[RegisteredNode] = []
        self._by_id: dict[int, RegisteredNode] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._by_id

    def register(self, node_id: int, public_key: str) -> RegisteredNode:
        """Register a node.

        Args:
            node_id: Unique node identifier.
            public_key: Base64 SPKI public key.

        Returns:
            The registered entry.

        Raises:
            DuplicateNodeError: If node_id is already registered.
        """
        with self._lock:
            if node_id in self._by_id:
                logger.warning("Rejected duplicate registration for node %s", node_id)
                raise DuplicateNodeError(f"Node {node_id} already registered")
            node = RegisteredNode(node_id=node_id, public_key=public_key)
            self._by_id[node_id] = node
            self._nodes.append(node)

        logger.info("Registered node %s", node_id)
        return node

    def list_nodes(self) -> list[RegisteredNode]:
        """Return a snapshot of all nodes in registration order."""
        return list(self._nodes)

    def get_node(self, node_id: int) -> RegisteredNode:
        """Look up a node by id.

        Raises:
            NodeNotFoundError: If no node has this id.
        """
        node = self._by_id.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node {node_id} not found")
        return node

"""Directory API client for onionlayer."""

from __future__ import annotations

from ..types import RegisteredNode
from .base_client import BaseApiClient


class RegistryApiClient(BaseApiClient):
    """API client for directory operations.

    Provides methods for registering nodes and reading the node directory.
    """

    async def get_status(self) -> str:
        """Probe the directory's liveness endpoint.

        Returns:
            The status text ("live" when healthy).
        """
        response = await self._request("GET", "/status")
        return response.text

    async def register_node(self, node_id: int, public_key: str) -> None:
        """Register a node and its public key.

        Args:
            node_id: Unique node identifier.
            public_key: Base64 SPKI public key.

        Raises:
            DuplicateNodeError: If the id is already registered.
            InvalidRequestError: If the id or key is malformed.
        """
        await self._request(
            "POST",
            "/registerNode",
            json={"nodeId": node_id, "pubKey": public_key},
        )

    async def get_node_registry(self) -> list[RegisteredNode]:
        """List registered nodes in registration order.

        Returns:
            The registered nodes.
        """
        response = await self._request("GET", "/getNodeRegistry")
        data = response.json()
        return [
            RegisteredNode(node_id=node["nodeId"], public_key=node["pubKey"])
            for node in data.get("nodes", [])
        ]

    async def register_key_pair(self, node_id: int, private_key: str) -> None:
        """UNSAFE: deposit a registered node's private key on the debug route.

        Only works against a directory started with debug routes enabled.

        Args:
            node_id: A node already registered with its public key.
            private_key: Base64 PKCS8 private key matching that public key.

        Raises:
            NodeNotFoundError: If the node is unknown or the route is disabled.
            InvalidRequestError: If the key is malformed or does not match.
        """
        await self._request(
            "POST",
            "/debug/registerKeyPair",
            json={"nodeId": node_id, "prvKey": private_key},
        )

    async def get_private_key(self, node_id: int) -> str:
        """UNSAFE: fetch a node's private key from the debug route.

        Only works against a directory started with debug routes enabled.

        Args:
            node_id: The node whose key to fetch.

        Returns:
            Base64 PKCS8 private key.

        Raises:
            NodeNotFoundError: If the node is unknown or the route is disabled.
        """
        response = await self._request("GET", "/debug/getPrivateKey", params={"nodeId": node_id})
        data = response.json()
        return str(data["result"])

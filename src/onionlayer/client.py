"""RegistryClient - Main entry point for talking to the node directory."""

from __future__ import annotations

import logging
from typing import Any

from .constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REGISTRY_URL,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_TIMEOUT_MS,
)
from .errors import NodeNotFoundError
from .http import RegistryApiClient
from .node import NodeIdentity
from .types import ClientConfig, RegisteredNode

logger = logging.getLogger("onionlayer")


class RegistryClient:
    """Client for the node directory service.

    Example:
        ```python
        async with RegistryClient(base_url="http://localhost:8080") as client:
            identity = NodeIdentity.generate(1)
            await client.register_identity(identity)
            nodes = await client.list_nodes()
        ```
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_REGISTRY_URL,
        timeout: int = DEFAULT_TIMEOUT_MS,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: int = DEFAULT_RETRY_DELAY_MS,
        retry_on_status_codes: tuple[int, ...] | None = None,
        transport: Any = None,
    ) -> None:
        """Initialize the registry client.

        Args:
            base_url: Base URL of the directory service.
            timeout: HTTP request timeout in milliseconds.
            max_retries: Maximum number of retry attempts.
            retry_delay: Initial retry delay in milliseconds.
            retry_on_status_codes: HTTP status codes that trigger retries.
                Default: (408, 429, 500, 502, 503, 504)
            transport: Optional httpx async transport.
        """
        self._config = ClientConfig(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            retry_delay=retry_delay,
            retry_on_status_codes=retry_on_status_codes or DEFAULT_RETRY_STATUS_CODES,
            transport=transport,
        )
        self._api_client = RegistryApiClient(self._config)

    async def __aenter__(self) -> RegistryClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        await self._api_client.close()

    async def is_alive(self) -> bool:
        """Return True if the directory answers its status probe with "live"."""
        return (await self._api_client.get_status()).strip() == "live"

    async def register(self, node_id: int, public_key: str) -> None:
        """Register a node id and base64 SPKI public key.

        Raises:
            DuplicateNodeError: If the id is already registered.
            InvalidRequestError: If the id or key is malformed.
        """
        await self._api_client.register_node(node_id, public_key)
        logger.debug("Registered node %s with the directory", node_id)

    async def register_identity(self, identity: NodeIdentity) -> None:
        """Publish a node identity's public key to the directory."""
        await self.register(identity.node_id, identity.public_key_b64)

    async def list_nodes(self) -> list[RegisteredNode]:
        """List registered nodes in registration order."""
        return await self._api_client.get_node_registry()

    async def get_public_key(self, node_id: int) -> str:
        """Look up a node's public key in the directory listing.

        Raises:
            NodeNotFoundError: If no node has this id.
        """
        for node in await self.list_nodes():
            if node.node_id == node_id:
                return node.public_key
        raise NodeNotFoundError(f"Node {node_id} not found")

    async def debug_register_key_pair(self, identity: NodeIdentity) -> None:
        """UNSAFE: hand a registered identity's private key to the debug key store.

        Raises:
            NodeNotFoundError: If the node is unknown or debug routes are disabled.
            InvalidRequestError: If the key does not match the registered public key.
        """
        logger.warning(
            "Depositing private key of node %s through the debug route", identity.node_id
        )
        await self._api_client.register_key_pair(identity.node_id, identity.private_key_b64)

    async def debug_get_private_key(self, node_id: int) -> str:
        """UNSAFE: fetch a node's private key through the debug route.

        Raises:
            NodeNotFoundError: If the node is unknown or debug routes are disabled.
        """
        logger.warning("Fetching private key of node %s through the debug route", node_id)
        return await self._api_client.get_private_key(node_id)

"""Type definitions for onionlayer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

from .constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REGISTRY_HOST,
    DEFAULT_REGISTRY_PORT,
    DEFAULT_REGISTRY_URL,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_TIMEOUT_MS,
)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ClientConfig:
    """Configuration for the directory client.

    Attributes:
        base_url: Base URL of the directory service.
        timeout: HTTP request timeout in milliseconds.
        max_retries: Maximum number of retry attempts.
        retry_delay: Initial retry delay in milliseconds.
        retry_on_status_codes: HTTP status codes to retry on.
        transport: Optional httpx async transport (e.g. httpx.ASGITransport
            to talk to an in-process app).
    """

    base_url: str = DEFAULT_REGISTRY_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: int = DEFAULT_RETRY_DELAY_MS
    retry_on_status_codes: tuple[int, ...] = DEFAULT_RETRY_STATUS_CODES
    transport: Any = None


@dataclass
class RegistrySettings:
    """Settings for the directory service process.

    Attributes:
        host: Interface to bind.
        port: Port to listen on.
        enable_debug_routes: Mount the unsafe private-key lookup route.
            Never enable outside of tests.
        log_level: Logging level name for the server process.
    """

    host: str = DEFAULT_REGISTRY_HOST
    port: int = DEFAULT_REGISTRY_PORT
    enable_debug_routes: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> RegistrySettings:
        """Build settings from ONIONLAYER_* environment variables.

        Args:
            dotenv: Load a local .env file first (existing variables win).

        Returns:
            The settings, with defaults for anything unset.

        Raises:
            ValueError: If ONIONLAYER_REGISTRY_PORT is not an integer.
        """
        if dotenv:
            load_dotenv()
        port = os.environ.get("ONIONLAYER_REGISTRY_PORT")
        return cls(
            host=os.environ.get("ONIONLAYER_REGISTRY_HOST", DEFAULT_REGISTRY_HOST),
            port=int(port) if port else DEFAULT_REGISTRY_PORT,
            enable_debug_routes=os.environ.get("ONIONLAYER_ENABLE_DEBUG_ROUTES", "").lower()
            in _TRUE_VALUES,
            log_level=os.environ.get("ONIONLAYER_LOG_LEVEL", "INFO").upper(),
        )


@dataclass
class RegisteredNode:
    """A node entry in the directory.

    Attributes:
        node_id: Unique node identifier.
        public_key: Base64 SPKI public key of the node.
    """

    node_id: int
    public_key: str

    def to_dict(self) -> dict[str, Any]:
        """Render the wire shape ``{"nodeId", "pubKey"}``."""
        return {"nodeId": self.node_id, "pubKey": self.public_key}

"""HTTP client for onionlayer.

This module provides HTTP clients for the directory API:
- BaseApiClient: Common HTTP operations, retries and error mapping
- RegistryApiClient: Node registration and directory listing
"""

from .base_client import BaseApiClient
from .registry_client import RegistryApiClient

__all__ = [
    "BaseApiClient",
    "RegistryApiClient",
]

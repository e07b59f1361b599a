"""Node directory service for onionlayer.

This package provides:
- NodeRegistry: lock-guarded store of node ids and public keys
- DebugKeyStore: UNSAFE, test-only store of full key pairs
- create_app: FastAPI application serving the directory
"""

from .app import create_app
from .debug import DebugKeyStore
from .store import NodeRegistry

__all__ = [
    "DebugKeyStore",
    "NodeRegistry",
    "create_app",
]

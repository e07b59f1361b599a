"""
Directory service - FastAPI application.

Endpoints:
- GET  /status                         - Liveness probe
- POST /registerNode                   - Register a node id and public key
- GET  /getNodeRegistry                - List registered nodes
- POST /debug/registerKeyPair          - UNSAFE, test-only key pair deposit
- GET  /debug/getPrivateKey?nodeId=N   - UNSAFE, test-only private key lookup
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from ..crypto import KeyPair, import_private_key, import_public_key, validate_key_pair
from ..errors import DuplicateNodeError, InvalidRequestError, NodeNotFoundError
from ..types import RegistrySettings
from .debug import DebugKeyStore
from .models import (
    ErrorResponse,
    GetNodeRegistryResponse,
    NodeModel,
    PrivateKeyResponse,
    RegisterKeyPairRequest,
    RegisterKeyPairResponse,
    RegisterNodeRequest,
    RegisterNodeResponse,
)
from .store import NodeRegistry

logger = logging.getLogger("onionlayer")


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


# ============================================================================
# Routes
# ============================================================================

router = APIRouter(tags=["registry"])


@router.get("/status", response_class=PlainTextResponse)
def get_status() -> str:
    """Liveness probe."""
    return "live"


@router.post("/registerNode", response_model=RegisterNodeResponse, status_code=201)
def register_node(body: RegisterNodeRequest, request: Request) -> RegisterNodeResponse:
    """Register a node. Duplicate ids are rejected with 409."""
    registry: NodeRegistry = request.app.state.registry
    registry.register(body.node_id, body.public_key)
    return RegisterNodeResponse()


@router.get("/getNodeRegistry", response_model=GetNodeRegistryResponse)
def get_node_registry(request: Request) -> GetNodeRegistryResponse:
    """List registered nodes in registration order."""
    registry: NodeRegistry = request.app.state.registry
    return GetNodeRegistryResponse(nodes=[NodeModel.from_node(n) for n in registry.list_nodes()])


debug_router = APIRouter(prefix="/debug", tags=["debug"])


@debug_router.post("/registerKeyPair", response_model=RegisterKeyPairResponse, status_code=201)
def register_key_pair(body: RegisterKeyPairRequest, request: Request) -> RegisterKeyPairResponse:
    """UNSAFE: deposit the private key of a registered node. Test use only.

    The key must belong to the public key the node registered with.
    """
    registry: NodeRegistry = request.app.state.registry
    debug_store: DebugKeyStore = request.app.state.debug_store

    node = registry.get_node(body.node_id)
    key_pair = KeyPair(
        public_key=import_public_key(node.public_key),
        private_key=import_private_key(body.private_key),
    )
    if not validate_key_pair(key_pair):
        raise InvalidRequestError(
            f"Private key does not match the public key of node {body.node_id}"
        )

    debug_store.remember(body.node_id, key_pair)
    logger.warning("Stored private key of node %s in the debug key store", body.node_id)
    return RegisterKeyPairResponse()


@debug_router.get("/getPrivateKey", response_model=PrivateKeyResponse)
def get_private_key(
    request: Request,
    node_id: int = Query(..., alias="nodeId", ge=0),
) -> PrivateKeyResponse:
    """UNSAFE: return a node's private key. Test use only."""
    debug_store: DebugKeyStore = request.app.state.debug_store
    return PrivateKeyResponse(result=debug_store.get_private_key(node_id))


# ============================================================================
# Application factory
# ============================================================================

def create_app(
    registry: NodeRegistry | None = None,
    debug_store: DebugKeyStore | None = None,
    settings: RegistrySettings | None = None,
) -> FastAPI:
    """Build the directory service application.

    The debug key routes are only mounted when a debug store is given
    AND settings.enable_debug_routes is true.

    Args:
        registry: Node registry to serve. A fresh one is created if omitted.
        debug_store: Key store backing the debug route.
        settings: Service settings. Defaults are used if omitted.

    Returns:
        The FastAPI application.
    """
    settings = settings or RegistrySettings()
    app = FastAPI(title="onionlayer directory")
    app.state.registry = registry if registry is not None else NodeRegistry()
    app.state.debug_store = debug_store
    app.include_router(router)

    if debug_store is not None and settings.enable_debug_routes:
        logger.warning("Debug private key route enabled; never use this in production")
        app.include_router(debug_router)

    @app.exception_handler(DuplicateNodeError)
    async def _duplicate(request: Request, exc: DuplicateNodeError) -> JSONResponse:
        return _error(409, "duplicate_node", "Node already registered.")

    @app.exception_handler(NodeNotFoundError)
    async def _not_found(request: Request, exc: NodeNotFoundError) -> JSONResponse:
        return _error(404, "node_not_found", "Node not found or key not generated.")

    @app.exception_handler(InvalidRequestError)
    async def _rejected(request: Request, exc: InvalidRequestError) -> JSONResponse:
        return _error(400, "invalid_request", str(exc))

    @app.exception_handler(RequestValidationError)
    async def _invalid(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
            for err in exc.errors()
        )
        return _error(400, "invalid_request", details or "Invalid request")

    return app

"""Request/response models for the directory service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..crypto import import_private_key, import_public_key
from ..errors import KeyFormatError
from ..types import RegisteredNode


class RegisterNodeRequest(BaseModel):
    """Body of POST /registerNode."""

    model_config = ConfigDict(populate_by_name=True)

    node_id: int = Field(..., alias="nodeId", strict=True, ge=0, description="Unique node id")
    public_key: str = Field(
        ..., alias="pubKey", min_length=1, description="Base64 SPKI RSA public key"
    )

    @field_validator("public_key")
    @classmethod
    def _check_public_key(cls, value: str) -> str:
        try:
            import_public_key(value)
        except KeyFormatError as e:
            raise ValueError(str(e)) from e
        return value


class RegisterNodeResponse(BaseModel):
    """Acknowledgment of a successful registration."""

    message: str = "Node registered successfully."


class NodeModel(BaseModel):
    """A registered node on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    node_id: int = Field(..., alias="nodeId")
    public_key: str = Field(..., alias="pubKey")

    @classmethod
    def from_node(cls, node: RegisteredNode) -> NodeModel:
        return cls(node_id=node.node_id, public_key=node.public_key)


class GetNodeRegistryResponse(BaseModel):
    """Body of GET /getNodeRegistry."""

    nodes: list[NodeModel]


class RegisterKeyPairRequest(BaseModel):
    """Body of POST /debug/registerKeyPair."""

    model_config = ConfigDict(populate_by_name=True)

    node_id: int = Field(..., alias="nodeId", strict=True, ge=0, description="Registered node id")
    private_key: str = Field(
        ..., alias="prvKey", min_length=1, description="Base64 PKCS8 RSA private key"
    )

    @field_validator("private_key")
    @classmethod
    def _check_private_key(cls, value: str) -> str:
        try:
            import_private_key(value)
        except KeyFormatError as e:
            raise ValueError(str(e)) from e
        return value


class RegisterKeyPairResponse(BaseModel):
    """Acknowledgment of a stored debug key pair."""

    message: str = "Key pair stored."


class PrivateKeyResponse(BaseModel):
    """Body of GET /debug/getPrivateKey."""

    result: str


class ErrorResponse(BaseModel):
    """Error body returned for every non-success status."""

    error: str
    message: str

"""Tests for configuration types and the error hierarchy."""

import pytest

from onionlayer import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REGISTRY_URL,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_TIMEOUT_MS,
    RegistryClient,
)
from onionlayer.errors import (
    ApiError,
    DecryptionError,
    DuplicateNodeError,
    KeyFormatError,
    NodeNotFoundError,
    NotFoundError,
    OnionLayerError,
    PlaintextTooLargeError,
)
from onionlayer.types import RegisteredNode, RegistrySettings

ENV_VARS = (
    "ONIONLAYER_REGISTRY_HOST",
    "ONIONLAYER_REGISTRY_PORT",
    "ONIONLAYER_ENABLE_DEBUG_ROUTES",
    "ONIONLAYER_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all onionlayer settings from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRegistrySettings:
    """Tests for RegistrySettings.from_env."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        """Unset variables fall back to defaults; debug routes stay off."""
        settings = RegistrySettings.from_env(dotenv=False)
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.enable_debug_routes is False
        assert settings.log_level == "INFO"

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        """Variables override defaults."""
        clean_env.setenv("ONIONLAYER_REGISTRY_HOST", "0.0.0.0")
        clean_env.setenv("ONIONLAYER_REGISTRY_PORT", "9090")
        clean_env.setenv("ONIONLAYER_ENABLE_DEBUG_ROUTES", "true")
        clean_env.setenv("ONIONLAYER_LOG_LEVEL", "debug")
        settings = RegistrySettings.from_env(dotenv=False)
        assert settings.host == "0.0.0.0"
        assert settings.port == 9090
        assert settings.enable_debug_routes is True
        assert settings.log_level == "DEBUG"

    def test_invalid_port(self, clean_env: pytest.MonkeyPatch) -> None:
        """A non-integer port is rejected."""
        clean_env.setenv("ONIONLAYER_REGISTRY_PORT", "eighty")
        with pytest.raises(ValueError):
            RegistrySettings.from_env(dotenv=False)

    def test_debug_flag_requires_truthy_value(self, clean_env: pytest.MonkeyPatch) -> None:
        """Only explicit truthy values enable debug routes."""
        clean_env.setenv("ONIONLAYER_ENABLE_DEBUG_ROUTES", "0")
        assert RegistrySettings.from_env(dotenv=False).enable_debug_routes is False


class TestRegistryClientInit:
    """Tests for RegistryClient configuration."""

    def test_default_configuration(self) -> None:
        """Test client initializes with default configuration values."""
        client = RegistryClient()
        assert client._config.base_url == DEFAULT_REGISTRY_URL
        assert client._config.timeout == DEFAULT_TIMEOUT_MS
        assert client._config.max_retries == DEFAULT_MAX_RETRIES
        assert client._config.retry_delay == DEFAULT_RETRY_DELAY_MS
        assert client._config.retry_on_status_codes == DEFAULT_RETRY_STATUS_CODES

    def test_custom_configuration(self) -> None:
        """Test client initializes with custom configuration values."""
        client = RegistryClient(
            base_url="http://directory:8080",
            timeout=1000,
            max_retries=0,
            retry_delay=50,
            retry_on_status_codes=(503,),
        )
        assert client._config.base_url == "http://directory:8080"
        assert client._config.timeout == 1000
        assert client._config.max_retries == 0
        assert client._config.retry_delay == 50
        assert client._config.retry_on_status_codes == (503,)


class TestErrors:
    """Tests for the error hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [KeyFormatError, DecryptionError, DuplicateNodeError, NodeNotFoundError],
    )
    def test_base_class(self, error_type: type[Exception]) -> None:
        """All errors derive from OnionLayerError."""
        assert issubclass(error_type, OnionLayerError)

    def test_not_found_alias(self) -> None:
        """NotFoundError is NodeNotFoundError."""
        assert NotFoundError is NodeNotFoundError

    def test_plaintext_too_large_attributes(self) -> None:
        """PlaintextTooLargeError carries size and limit."""
        error = PlaintextTooLargeError(200, 190)
        assert (error.size, error.limit) == (200, 190)
        assert "200 bytes, maximum is 190" in str(error)

    def test_api_error_attributes(self) -> None:
        """ApiError carries status code and message."""
        error = ApiError(500, "boom")
        assert error.status_code == 500
        assert str(error) == "API Error (500): boom"


class TestRegisteredNode:
    """Tests for RegisteredNode."""

    def test_to_dict(self) -> None:
        """The wire shape uses nodeId and pubKey."""
        assert RegisteredNode(node_id=1, public_key="k").to_dict() == {"nodeId": 1, "pubKey": "k"}

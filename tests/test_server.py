"""Tests for the directory service entry point."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
from fastapi import FastAPI

from onionlayer import NodeIdentity
from onionlayer.registry import server
from onionlayer.registry.debug import DebugKeyStore
from onionlayer.types import RegistrySettings


class TestRun:
    """Tests for server.run."""

    def test_run_starts_uvicorn(self) -> None:
        """run() hands a directory app to uvicorn with the configured address."""
        settings = RegistrySettings(host="0.0.0.0", port=9000, log_level="WARNING")
        with patch.object(server.uvicorn, "run") as mock_run, patch.object(
            server, "setup_logging"
        ) as mock_logging:
            server.run(settings)

        mock_logging.assert_called_once_with("WARNING")
        app = mock_run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert mock_run.call_args.kwargs == {
            "host": "0.0.0.0",
            "port": 9000,
            "log_level": "warning",
        }
        assert app.state.debug_store is None

    @pytest.mark.asyncio
    async def test_run_with_debug_routes(self) -> None:
        """With debug routes on, a served node's key can be deposited and read back."""
        settings = RegistrySettings(enable_debug_routes=True)
        with patch.object(server.uvicorn, "run") as mock_run, patch.object(server, "setup_logging"):
            server.run(settings)

        app = mock_run.call_args.args[0]
        assert isinstance(app.state.debug_store, DebugKeyStore)

        identity = NodeIdentity.generate(5)
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            registered = await client.post(
                "/registerNode", json={"nodeId": 5, "pubKey": identity.public_key_b64}
            )
            deposited = await client.post(
                "/debug/registerKeyPair",
                json={"nodeId": 5, "prvKey": identity.private_key_b64},
            )
            fetched = await client.get("/debug/getPrivateKey", params={"nodeId": 5})

        assert registered.status_code == 201
        assert deposited.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json() == {"result": identity.private_key_b64}

    @pytest.mark.asyncio
    async def test_run_without_debug_routes(self) -> None:
        """With debug routes off, the debug paths are not served."""
        with patch.object(server.uvicorn, "run") as mock_run, patch.object(server, "setup_logging"):
            server.run(RegistrySettings())

        app = mock_run.call_args.args[0]
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            response = await client.get("/debug/getPrivateKey", params={"nodeId": 5})
        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_run_reads_environment(self, monkeypatch) -> None:
        """Without explicit settings, run() reads them from the environment."""
        monkeypatch.setenv("ONIONLAYER_REGISTRY_PORT", "8181")
        with patch.object(server.uvicorn, "run") as mock_run, patch.object(server, "setup_logging"):
            server.run()

        assert mock_run.call_args.kwargs["port"] == 8181

"""Tests for the node registry and debug key store."""

from __future__ import annotations

import threading

import pytest

from onionlayer.crypto import export_private_key, generate_key_pair, import_private_key
from onionlayer.errors import DuplicateNodeError, NodeNotFoundError, NotFoundError
from onionlayer.registry import DebugKeyStore, NodeRegistry
from onionlayer.types import RegisteredNode


class TestNodeRegistry:
    """Tests for NodeRegistry."""

    def test_register_and_list(self) -> None:
        """Registered nodes are listed in registration order."""
        registry = NodeRegistry()
        registry.register(3, "key-3")
        registry.register(1, "key-1")
        registry.register(2, "key-2")
        assert [n.node_id for n in registry.list_nodes()] == [3, 1, 2]
        assert len(registry) == 3

    def test_register_returns_entry(self) -> None:
        """register returns the stored entry."""
        node = NodeRegistry().register(7, "key")
        assert node == RegisteredNode(node_id=7, public_key="key")

    def test_duplicate_rejected(self) -> None:
        """A second registration for the same id is rejected, not merged."""
        registry = NodeRegistry()
        registry.register(5, "original")
        with pytest.raises(DuplicateNodeError, match="Node 5 already registered"):
            registry.register(5, "replacement")
        assert registry.list_nodes() == [RegisteredNode(node_id=5, public_key="original")]

    def test_get_node(self) -> None:
        """Nodes can be looked up by id."""
        registry = NodeRegistry()
        registry.register(9, "key-9")
        assert registry.get_node(9).public_key == "key-9"
        assert 9 in registry
        assert 10 not in registry

    def test_get_node_missing(self) -> None:
        """An unknown id raises NodeNotFoundError."""
        with pytest.raises(NotFoundError):
            NodeRegistry().get_node(42)

    def test_list_is_snapshot(self) -> None:
        """Mutating the returned list does not touch the registry."""
        registry = NodeRegistry()
        registry.register(1, "key")
        registry.list_nodes().clear()
        assert len(registry.list_nodes()) == 1

    def test_registries_are_independent(self) -> None:
        """Each registry owns its own state."""
        first = NodeRegistry()
        first.register(1, "key")
        assert NodeRegistry().list_nodes() == []

    def test_concurrent_duplicate_registration(self) -> None:
        """Only one of many concurrent registrations for an id succeeds."""
        registry = NodeRegistry()
        barrier = threading.Barrier(16)
        successes: list[str] = []
        failures: list[Exception] = []

        def attempt(index: int) -> None:
            barrier.wait()
            try:
                registry.register(1, f"key-{index}")
                successes.append(f"key-{index}")
            except DuplicateNodeError as e:
                failures.append(e)

        threads = [threading.Thread(target=attempt, args=(i,)) for i in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(successes) == 1
        assert len(failures) == 15
        assert registry.get_node(1).public_key == successes[0]


class TestDebugKeyStore:
    """Tests for DebugKeyStore."""

    def test_get_private_key(self) -> None:
        """A remembered key pair's private key is returned as PKCS8 base64."""
        store = DebugKeyStore()
        key_pair = generate_key_pair()
        store.remember(4, key_pair)
        exported = store.get_private_key(4)
        assert exported == export_private_key(key_pair.private_key)
        assert import_private_key(exported).private_numbers() == (
            key_pair.private_key.private_numbers()
        )

    def test_missing_node(self) -> None:
        """An unknown node raises NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError, match="not found"):
            DebugKeyStore().get_private_key(1)

    def test_lookup_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Every private key read is logged as a warning."""
        store = DebugKeyStore()
        store.remember(8, generate_key_pair())
        with caplog.at_level("WARNING", logger="onionlayer"):
            store.get_private_key(8)
        assert "node 8" in caplog.text

"""Unit tests for the transport registry."""

import threading

import pytest

from cqconfig.registry import ServerRegistry, TransportDescriptor
from cqconfig.servers import builtin_registry, register_builtin


class TestServerRegistry:
    """Test registration order and snapshot semantics."""

    def test_register_returns_ordinals_in_order(self) -> None:
        registry = ServerRegistry()
        first = registry.register(TransportDescriptor("a", "A"))
        second = registry.register(TransportDescriptor("b", "B"))

        assert (first, second) == (0, 1)
        assert [d.brief for d in registry.list()] == ["a", "b"]

    def test_duplicates_are_kept(self) -> None:
        """Registration never deduplicates."""
        registry = ServerRegistry()
        descriptor = TransportDescriptor("same", "X")
        registry.register(descriptor)
        registry.register(descriptor)

        assert len(registry) == 2
        assert registry[0] is registry[1]

    def test_list_is_a_snapshot(self) -> None:
        """Later registrations do not change a previously returned listing."""
        registry = ServerRegistry()
        registry.register(TransportDescriptor("a", "A"))
        snapshot = registry.list()
        registry.register(TransportDescriptor("b", "B"))

        assert len(snapshot) == 1
        assert len(registry) == 2

    def test_descriptor_is_immutable(self) -> None:
        descriptor = TransportDescriptor("a", "A")
        with pytest.raises(AttributeError):
            descriptor.brief = "changed"  # type: ignore[misc]

    def test_concurrent_registration_loses_nothing(self) -> None:
        """Registrations from several threads are all recorded."""
        registry = ServerRegistry()

        def worker(tag: int) -> None:
            for i in range(200):
                registry.register(TransportDescriptor(f"{tag}-{i}", ""))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 8 * 200


class TestBuiltinTransports:
    """Test the built-in transport registration order."""

    def test_builtin_order(self) -> None:
        registry = builtin_registry()

        assert [d.brief for d in registry] == [
            "HTTP",
            "Cloud function",
            "Forward WebSocket",
            "Reverse WebSocket",
        ]

    def test_default_ordinal_three_is_reverse_websocket(self) -> None:
        registry = builtin_registry()
        assert "ws-reverse:" in registry[3].default

    def test_register_builtin_appends_to_existing(self) -> None:
        registry = ServerRegistry()
        registry.register(TransportDescriptor("custom", "  - custom: {}\n"))
        register_builtin(registry)

        assert len(registry) == 5
        assert registry[0].brief == "custom"
        assert registry[1].brief == "HTTP"

    def test_snippets_are_indented_sequence_items(self) -> None:
        """Snippets continue the template's trailing ``servers:`` key."""
        for descriptor in builtin_registry():
            first_line = next(line for line in descriptor.default.splitlines() if line.strip().startswith("-"))
            assert first_line.startswith("  - ")
            assert descriptor.default.endswith("\n")

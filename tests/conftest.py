"""Shared pytest fixtures for cqconfig tests."""

from pathlib import Path

import pytest

from cqconfig.registry import ServerRegistry, TransportDescriptor

TEMPLATE = """account:
  uin: 10001
  password: ''
heartbeat:
  interval: 5
servers:
"""


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def template() -> str:
    """Provide a small base template ending in an open ``servers:`` key."""
    return TEMPLATE


@pytest.fixture
def three_transports() -> ServerRegistry:
    """Provide a registry with three transports at ordinals 0, 1 and 2."""
    registry = ServerRegistry()
    registry.register(TransportDescriptor(brief="alpha", default="  - alpha:\n      port: 1\n"))
    registry.register(TransportDescriptor(brief="beta", default="  - beta:\n      port: 2\n"))
    registry.register(TransportDescriptor(brief="gamma", default="  - gamma:\n      port: 3\n"))
    return registry

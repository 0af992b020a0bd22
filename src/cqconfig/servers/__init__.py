"""Built-in transport modules.

Each module contributes a menu label and a default YAML snippet. Ordinals
follow the registration order in :func:`builtin_registry`.
"""

from __future__ import annotations

from ..registry import ServerRegistry
from . import cloud_function, http, websocket


def register_builtin(registry: ServerRegistry) -> ServerRegistry:
    """Register the built-in transports: HTTP, cloud function, forward WS, reverse WS."""

    http.register(registry)
    cloud_function.register(registry)
    websocket.register_forward(registry)
    websocket.register_reverse(registry)
    return registry


def builtin_registry() -> ServerRegistry:
    return register_builtin(ServerRegistry())


__all__ = ["builtin_registry", "register_builtin"]

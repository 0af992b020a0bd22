"""Forward and reverse WebSocket transports."""

from __future__ import annotations

from ..registry import ServerRegistry, TransportDescriptor

FORWARD_BRIEF = "Forward WebSocket"

FORWARD_DEFAULT = """  # Forward WebSocket settings
  - ws:
      # Listen address
      address: 0.0.0.0:8080
      middlewares:
        <<: *default # Reference the default middlewares
"""

REVERSE_BRIEF = "Reverse WebSocket"

REVERSE_DEFAULT = """  # Reverse WebSocket settings
  - ws-reverse:
      # Universal reverse WebSocket address
      # The api and event addresses below are ignored when this one is set
      universal: ws://your_websocket_universal.server
      # Reverse WebSocket API address
      api: ws://your_websocket_api.server
      # Reverse WebSocket event address
      event: ws://your_websocket_event.server
      # Reconnection interval in milliseconds
      reconnect-interval: 3000
      middlewares:
        <<: *default # Reference the default middlewares
"""


def register_forward(registry: ServerRegistry) -> int:
    return registry.register(TransportDescriptor(brief=FORWARD_BRIEF, default=FORWARD_DEFAULT))


def register_reverse(registry: ServerRegistry) -> int:
    return registry.register(TransportDescriptor(brief=REVERSE_BRIEF, default=REVERSE_DEFAULT))

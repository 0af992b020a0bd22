"""HTTP API server and HTTP event post transport."""

from __future__ import annotations

from ..registry import ServerRegistry, TransportDescriptor

BRIEF = "HTTP"

DEFAULT = """  # HTTP server settings
  - http:
      # Listen address
      address: 0.0.0.0:5700
      # Reverse HTTP timeout in seconds, 0 disables it
      timeout: 5
      # Long polling extension
      long-polling:
        # Enable long polling
        enabled: false
        # Event queue size, 0 means unlimited
        max-queue-size: 2000
      middlewares:
        <<: *default # Reference the default middlewares
      # Reverse HTTP POST targets
      post:
      #- url: '' # Target address
      #  secret: '' # Signing secret
      #  max-retries: 3 # Maximum retries, 0 disables retrying
      #  retries-interval: 1500 # Retry interval in milliseconds, 0 retries immediately
"""


def register(registry: ServerRegistry) -> int:
    return registry.register(TransportDescriptor(brief=BRIEF, default=DEFAULT))

"""Serverless cloud function transport."""

from __future__ import annotations

from ..registry import ServerRegistry, TransportDescriptor

BRIEF = "Cloud function"

DEFAULT = """  # Cloud function settings
  - lambda:
      # Cloud provider type: scf, aliyun
      type: scf
      middlewares:
        <<: *default # Reference the default middlewares
"""


def register(registry: ServerRegistry) -> int:
    return registry.register(TransportDescriptor(brief=BRIEF, default=DEFAULT))

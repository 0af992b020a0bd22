"""Ordered registry of transport modules and their default YAML snippets."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportDescriptor:
    """A transport's menu label and the YAML fragment appended when it is selected."""

    brief: str
    default: str


class ServerRegistry:
    """Append-only sequence of transport descriptors.

    Ordinals are assigned in registration order. Transport modules register
    during startup, before the registry is handed to the config generator.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._servers: list[TransportDescriptor] = []

    def register(self, descriptor: TransportDescriptor) -> int:
        """Append ``descriptor`` and return its ordinal."""

        with self._lock:
            self._servers.append(descriptor)
            ordinal = len(self._servers) - 1
        logger.debug(f"Registered transport {ordinal}: {descriptor.brief}")
        return ordinal

    def list(self) -> tuple[TransportDescriptor, ...]:
        with self._lock:
            return tuple(self._servers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._servers)

    def __iter__(self) -> Iterator[TransportDescriptor]:
        return iter(self.list())

    def __getitem__(self, ordinal: int) -> TransportDescriptor:
        with self._lock:
            return self._servers[ordinal]


__all__ = ["ServerRegistry", "TransportDescriptor"]

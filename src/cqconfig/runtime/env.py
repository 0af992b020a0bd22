"""Bootstrapper settings read from ``CQ_*`` environment variables."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..generator import DEFAULT_FILENAME, DEFAULT_SELECTION
from ..launcher import DEFAULT_COMPANION

EnvMapping = Mapping[str, str]

CONFIG_PATH = "CQ_CONFIG_PATH"
SERVER_SELECTION = "CQ_SERVER_SELECTION"
COMPANION_NAME = "CQ_COMPANION_NAME"
LOG_LEVEL = "CQ_LOG_LEVEL"
LOG_JSON = "CQ_LOG_JSON"


class BootstrapSettings(BaseModel):
    """Environment-driven settings for the ``cqconfig`` entry point."""

    model_config = ConfigDict(frozen=True)

    config_path: str = Field(default=DEFAULT_FILENAME)
    selection: str = Field(default=DEFAULT_SELECTION)
    companion_name: str = Field(default=DEFAULT_COMPANION)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False, description="JSON log lines instead of plain text")

    @classmethod
    def from_env(cls, env: EnvMapping | None = None) -> "BootstrapSettings":
        """Read settings from ``env`` (default: ``os.environ``).

        Unset variables keep their defaults; a set but empty value is kept.

        Raises:
            pydantic.ValidationError: If ``CQ_LOG_JSON`` is not a boolean
        """
        mapping = env if env is not None else os.environ
        data: dict[str, str | None] = {
            "config_path": mapping.get(CONFIG_PATH),
            "selection": mapping.get(SERVER_SELECTION),
            "companion_name": mapping.get(COMPANION_NAME),
            "log_level": mapping.get(LOG_LEVEL),
            "log_json": mapping.get(LOG_JSON),
        }
        filtered = {k: v for k, v in data.items() if v is not None}
        return cls.model_validate(filtered)


__all__ = [
    "COMPANION_NAME",
    "CONFIG_PATH",
    "BootstrapSettings",
    "EnvMapping",
    "LOG_JSON",
    "LOG_LEVEL",
    "SERVER_SELECTION",
]

"""Pydantic models for the decoded configuration document.

YAML keys are kebab-case and map onto snake_case attributes through aliases.
The ``servers`` and ``database`` sections belong to the transport and
storage modules, so they are kept as plain decoded YAML values and survive
re-serialization untouched.
"""

from __future__ import annotations

from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Decoded YAML value: None, bool, int, float, str, list or dict of YamlNode.
YamlNode = Any


class _Section(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # "key:" with no value keeps the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ReconnectPolicy(_Section):
    """Reconnection settings."""

    disabled: bool = False
    delay: int = 0
    max_times: int = Field(default=0, alias="max-times")
    interval: int = 0


class SignServer(_Section):
    """Packet signing server endpoint."""

    url: str = ""
    key: str = ""
    authorization: str = ""


class Account(_Section):
    """Login credentials and signing server policy."""

    uin: int = 0
    password: str = ""
    encrypt: bool = False
    status: int = 0
    relogin: Optional[ReconnectPolicy] = None
    use_sso_address: bool = Field(default=False, alias="use-sso-address")
    allow_temp_session: bool = Field(default=False, alias="allow-temp-session")
    sign_servers: list[SignServer] = Field(default_factory=list, alias="sign-servers")
    rule_change_sign_server: int = Field(default=0, alias="rule-change-sign-server")
    max_check_count: int = Field(default=0, alias="max-check-count")
    sign_server_timeout: int = Field(default=0, alias="sign-server-timeout")
    is_below_110: bool = Field(default=False, alias="is-below-110")
    auto_register: bool = Field(default=False, alias="auto-register")
    auto_refresh_token: bool = Field(default=False, alias="auto-refresh-token")
    refresh_interval: int = Field(default=0, alias="refresh-interval")


class Heartbeat(_Section):
    disabled: bool = False
    interval: int = 0


class Message(_Section):
    """Message processing flags."""

    post_format: str = Field(default="", alias="post-format")
    proxy_rewrite: str = Field(default="", alias="proxy-rewrite")
    ignore_invalid_cqcode: bool = Field(default=False, alias="ignore-invalid-cqcode")
    force_fragment: bool = Field(default=False, alias="force-fragment")
    fix_url: bool = Field(default=False, alias="fix-url")
    report_self_message: bool = Field(default=False, alias="report-self-message")
    remove_reply_at: bool = Field(default=False, alias="remove-reply-at")
    extra_reply_data: bool = Field(default=False, alias="extra-reply-data")
    skip_mime_scan: bool = Field(default=False, alias="skip-mime-scan")
    convert_webp_image: bool = Field(default=False, alias="convert-webp-image")
    http_timeout: int = Field(default=0, alias="http-timeout")


class Output(_Section):
    """Log output policy."""

    log_level: str = Field(default="", alias="log-level")
    log_aging: int = Field(default=0, alias="log-aging")
    log_force_new: bool = Field(default=False, alias="log-force-new")
    log_colorful: Optional[bool] = Field(default=None, alias="log-colorful")
    debug: bool = False


class Settings(BaseModel):
    """Complete decoded configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    account: Optional[Account] = None
    heartbeat: Heartbeat = Field(default_factory=Heartbeat)
    message: Message = Field(default_factory=Message)
    output: Output = Field(default_factory=Output)
    servers: list[dict[str, YamlNode]] = Field(default_factory=list)
    database: dict[str, YamlNode] = Field(default_factory=dict)

    @field_validator("heartbeat", "message", "output", "database", mode="before")
    @classmethod
    def _empty_mapping(cls, value: Any) -> Any:
        # A key with no body ("database:") decodes as None
        return {} if value is None else value

    @field_validator("servers", mode="before")
    @classmethod
    def _empty_sequence(cls, value: Any) -> Any:
        return [] if value is None else value

    def server_types(self) -> list[str]:
        """Return the transport key of each ``servers`` entry, in order."""
        return [name for entry in self.servers for name in entry]

    def to_yaml(self) -> str:
        """Serialize back to YAML using the original kebab-case keys."""
        payload = self.model_dump(by_alias=True)
        return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)


__all__ = [
    "Account",
    "Heartbeat",
    "Message",
    "Output",
    "ReconnectPolicy",
    "Settings",
    "SignServer",
    "YamlNode",
]

"""Configuration bootstrap for the cqhttp bot service.

Loads ``config.yml`` with ``${NAME}`` / ``${NAME:default}`` environment
expansion, or generates a fresh file from the packaged template and the
registered transport snippets on first run.
"""

from cqconfig.errors import (
    CompanionNotFoundError,
    ConfigError,
    LaunchError,
    MalformedConfigError,
)
from cqconfig.expand import expand, expand_env
from cqconfig.generator import ConfigGenerator
from cqconfig.launcher import CompanionLauncher, LaunchResult, PlatformFamily
from cqconfig.loader import decode_settings, load_settings, parse
from cqconfig.models import Settings
from cqconfig.registry import ServerRegistry, TransportDescriptor
from cqconfig.servers import builtin_registry

__all__ = [
    "CompanionLauncher",
    "CompanionNotFoundError",
    "ConfigError",
    "ConfigGenerator",
    "LaunchError",
    "LaunchResult",
    "MalformedConfigError",
    "PlatformFamily",
    "ServerRegistry",
    "Settings",
    "TransportDescriptor",
    "builtin_registry",
    "decode_settings",
    "expand",
    "expand_env",
    "load_settings",
    "parse",
]

"""Configuration loading entry point.

``parse`` either returns decoded :class:`Settings` or, when the file is
missing, generates one, hands off to the companion executable and exits.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from .errors import CompanionNotFoundError, MalformedConfigError
from .expand import expand_env
from .generator import DEFAULT_FILENAME, DEFAULT_SELECTION, ConfigGenerator
from .launcher import CompanionLauncher, LaunchStatus, PlatformFamily
from .models import Settings
from .registry import ServerRegistry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def decode_settings(text: str, path: Path | str | None = None) -> Settings:
    """Decode expanded YAML text into :class:`Settings`.

    Raises:
        MalformedConfigError: On YAML syntax errors, an empty document, a
            non-mapping root, or values the schema rejects
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedConfigError(path, str(e)) from e

    if document is None:
        raise MalformedConfigError(path, "document is empty")
    if not isinstance(document, dict):
        raise MalformedConfigError(path, f"expected a mapping at the top level, got {type(document).__name__}")

    try:
        return Settings.model_validate(document)
    except ValidationError as e:
        raise MalformedConfigError(path, str(e)) from e


def load_settings(path: Path | str, *, env: Mapping[str, str] | None = None) -> Settings:
    """Read, expand and decode the configuration file at ``path``.

    Args:
        path: Configuration file path
        env: Placeholder lookup source (default: ``os.environ``)

    Raises:
        FileNotFoundError: If the file does not exist
        MalformedConfigError: If the file is not UTF-8 or the expanded
            text does not decode
    """
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedConfigError(config_path, str(e)) from e
    return decode_settings(expand_env(raw, env), config_path)


def parse(
    path: Path | str = DEFAULT_FILENAME,
    registry: ServerRegistry | None = None,
    *,
    selection: str = DEFAULT_SELECTION,
    platform: PlatformFamily | None = None,
    launcher: CompanionLauncher | None = None,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Load the configuration, or bootstrap one on first run.

    Args:
        path: Configuration file path (default: config.yml)
        registry: Transport registry used when generating (default: empty)
        selection: Transport digits used when generating (default: "3")
        platform: Platform family for the hand-off (default: detected)
        launcher: Companion launcher (default: ``CompanionLauncher()``)
        env: Placeholder lookup source (default: ``os.environ``)

    Returns:
        Decoded settings when the file exists

    Raises:
        SystemExit: 1 when the file is malformed; 0 after first-run
            generation and hand-off; 1 when the companion executable is
            required but missing
    """
    config_path = Path(path)
    try:
        return load_settings(config_path, env=env)
    except FileNotFoundError:
        logger.debug(f"Configuration file not found: {config_path}")
    except MalformedConfigError as e:
        logger.critical(f"Configuration file is invalid! {e.reason}")
        sys.exit(EXIT_FAILURE)

    bootstrap(
        config_path,
        registry if registry is not None else ServerRegistry(),
        selection=selection,
        platform=platform,
        launcher=launcher,
    )
    sys.exit(EXIT_OK)


def bootstrap(
    path: Path,
    registry: ServerRegistry,
    *,
    selection: str = DEFAULT_SELECTION,
    platform: PlatformFamily | None = None,
    launcher: CompanionLauncher | None = None,
) -> None:
    """Generate the configuration file and hand off to the companion."""
    generator = ConfigGenerator(registry, selection=selection, filename=path.name)
    generator.generate(path.parent)

    companion = launcher if launcher is not None else CompanionLauncher()
    try:
        result = companion.launch(platform)
    except CompanionNotFoundError as e:
        logger.critical(str(e))
        sys.exit(EXIT_FAILURE)

    if result.status == LaunchStatus.FAILED:
        logger.error(f"Companion hand-off failed, {path.name} was still generated: {result.error_message}")


__all__ = ["bootstrap", "decode_settings", "load_settings", "parse"]

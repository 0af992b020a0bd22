"""First-run configuration generation.

Builds ``config.yml`` from the packaged template followed by the YAML
snippets of the selected transports, then writes it to disk atomically.
"""

from __future__ import annotations

import logging
import os
import tempfile
from importlib import resources
from pathlib import Path

from .registry import ServerRegistry, TransportDescriptor

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "config.yml"
DEFAULT_SELECTION = "3"
TEMPLATE_RESOURCE = "default_config.yml"
# Selections are single ASCII digits, so only the first ten transports are reachable.
MAX_SELECTABLE = 10
FILE_MODE = 0o644


def load_template() -> str:
    """Return the packaged default configuration template."""

    return resources.files("cqconfig").joinpath(TEMPLATE_RESOURCE).read_text(encoding="utf-8")


class ConfigGenerator:
    """Generates a configuration file from a template and registered transports."""

    def __init__(
        self,
        registry: ServerRegistry,
        template: str | None = None,
        *,
        selection: str = DEFAULT_SELECTION,
        filename: str = DEFAULT_FILENAME,
    ) -> None:
        """Initialize generator.

        Args:
            registry: Registry populated with transport descriptors
            template: Base YAML document (default: packaged template)
            selection: Digit string selecting transports by ordinal (default: "3")
            filename: Name of the generated file (default: config.yml)
        """
        self.registry = registry
        self.template = template if template is not None else load_template()
        self.selection = selection
        self.filename = filename

    def menu(self, selection: str | None = None) -> str:
        """Build the operator-facing transport list.

        Display only; the selection itself comes from ``selection``.
        """
        chosen = self.selection if selection is None else selection
        lines = ["Select the transports you need:"]
        for ordinal, descriptor in enumerate(self.registry.list()):
            lines.append(f"> {ordinal}: {descriptor.brief}")
        lines.append(f"Default selection applied: {chosen}")
        return "\n".join(lines)

    def selected(self, selection: str | None = None) -> list[TransportDescriptor]:
        """Resolve a digit string to descriptors.

        Characters that are not digits in ``[0, min(10, len(registry)))`` are
        ignored. Order and repeats are preserved.
        """
        chosen = self.selection if selection is None else selection
        servers = self.registry.list()
        limit = min(MAX_SELECTABLE, len(servers))
        result: list[TransportDescriptor] = []
        for char in chosen:
            if not ("0" <= char <= "9"):
                continue
            ordinal = ord(char) - ord("0")
            if ordinal < limit:
                result.append(servers[ordinal])
        return result

    def render(self, selection: str | None = None) -> str:
        """Concatenate the template with the selected transport snippets."""
        parts = [self.template]
        parts.extend(descriptor.default for descriptor in self.selected(selection))
        return "".join(parts)

    def write(self, content: str, directory: Path | str = ".") -> Path:
        """Write ``content`` to ``directory/filename`` atomically.

        Args:
            content: Configuration text
            directory: Target directory (default: working directory)

        Returns:
            Path to the written file

        Raises:
            OSError: If the file cannot be written
        """
        output_dir = Path(directory)
        output_path = output_dir / self.filename
        temp_path = None

        try:
            # Temp file in the same directory keeps os.replace atomic
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=output_dir,
                prefix=f".{self.filename}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_path = temp_file.name
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())

            # NamedTemporaryFile creates 0600
            os.chmod(temp_path, FILE_MODE)
            os.replace(temp_path, output_path)
            temp_path = None
        finally:
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)

        return output_path

    def generate(self, directory: Path | str = ".") -> Path | None:
        """Render and write a fresh configuration file.

        Returns:
            Path to the generated file, or None if writing failed
        """
        logger.info("No configuration file found, generating one")
        logger.info(self.menu())

        content = self.render()
        try:
            output_path = self.write(content, directory)
        except OSError as e:
            logger.error(f"Failed to write {self.filename}: {e}")
            return None

        logger.info(f"Default configuration written to {output_path}, edit it and restart the program")
        return output_path


__all__ = [
    "ConfigGenerator",
    "DEFAULT_FILENAME",
    "DEFAULT_SELECTION",
    "MAX_SELECTABLE",
    "load_template",
]

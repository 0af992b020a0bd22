"""Hand-off to the platform companion executable after first-run generation."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from .errors import CompanionNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_COMPANION = "cqhttp"


class PlatformFamily(str, Enum):
    """Platform families with a known companion layout."""

    WINDOWS = "windows"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"


class LaunchStatus(str, Enum):
    """Outcome of a hand-off attempt."""

    COMPLETED = "completed"  # Spawned and waited, any exit code
    FAILED = "failed"  # Spawn or wait raised
    SKIPPED = "skipped"  # No launcher for this platform


def detect_platform(sys_platform: str | None = None) -> PlatformFamily:
    """Map ``sys.platform`` to a :class:`PlatformFamily`."""

    name = sys.platform if sys_platform is None else sys_platform
    if name == "win32":
        return PlatformFamily.WINDOWS
    if name.startswith("linux"):
        return PlatformFamily.LINUX
    return PlatformFamily.UNSUPPORTED


@dataclass(frozen=True, slots=True)
class CompanionSpec:
    """How to find and start the companion on one platform family."""

    path_template: str
    """Executable path relative to the working directory; ``{name}`` is substituted."""

    require_exists: bool = False
    """Check the executable exists before spawning."""

    command_prefix: tuple[str, ...] = ()
    """Arguments placed before the executable (e.g. a shell)."""

    def executable(self, name: str) -> str:
        return self.path_template.format(name=name)

    def command(self, name: str) -> list[str]:
        return [*self.command_prefix, self.executable(name)]


DEFAULT_SPECS: Mapping[PlatformFamily, CompanionSpec] = {
    PlatformFamily.WINDOWS: CompanionSpec(
        path_template="{name}.exe",
        require_exists=True,
        command_prefix=("cmd.exe", "/C"),
    ),
    PlatformFamily.LINUX: CompanionSpec(path_template="./{name}"),
}


@dataclass
class LaunchResult:
    """Result of a companion launch."""

    status: LaunchStatus
    """What happened."""

    platform: PlatformFamily
    """Platform family the launch was attempted for."""

    executable: str | None = None
    """Executable that was (or would have been) started."""

    return_code: int | None = None
    """Companion exit code when it ran to completion."""

    error_message: Optional[str] = None
    """Human-readable error message if the spawn failed."""

    @property
    def success(self) -> bool:
        return self.status == LaunchStatus.COMPLETED and self.return_code == 0


class CompanionLauncher:
    """Starts the companion executable and waits for it.

    The companion inherits this process's stdout and stderr. Its exit code is
    recorded but never becomes this process's exit code.
    """

    def __init__(
        self,
        name: str = DEFAULT_COMPANION,
        specs: Mapping[PlatformFamily, CompanionSpec] | None = None,
        cwd: Path | str | None = None,
    ) -> None:
        """Initialize launcher.

        Args:
            name: Companion base name (default: "cqhttp")
            specs: Platform variants (default: Windows and Linux layouts)
            cwd: Directory the executable path is resolved against (default: working directory)
        """
        self.name = name
        self.specs = dict(DEFAULT_SPECS if specs is None else specs)
        self.cwd = Path(cwd) if cwd is not None else None

    def launch(self, platform: PlatformFamily | None = None) -> LaunchResult:
        """Start the companion for ``platform`` and wait for it to exit.

        Args:
            platform: Platform family (default: detected from ``sys.platform``)

        Returns:
            LaunchResult describing the outcome

        Raises:
            CompanionNotFoundError: If the platform requires the executable to
                exist and it does not
        """
        family = detect_platform() if platform is None else platform
        spec = self.specs.get(family)
        if spec is None:
            logger.info(f"Unsupported platform for companion launch: {sys.platform} ({family.value})")
            return LaunchResult(status=LaunchStatus.SKIPPED, platform=family)

        logger.info(f"Current platform: {family.value}")
        executable = spec.executable(self.name)

        if spec.require_exists:
            base = self.cwd if self.cwd is not None else Path.cwd()
            if not (base / executable).exists():
                raise CompanionNotFoundError(executable)

        cmd = spec.command(self.name)
        logger.info(f"Running companion: {' '.join(cmd)}")

        try:
            # stdout/stderr left as None so the child inherits our streams
            completed = subprocess.run(cmd, cwd=self.cwd, check=False)
        except OSError as e:
            logger.error(f"Failed to run {executable}: {e}")
            return LaunchResult(
                status=LaunchStatus.FAILED,
                platform=family,
                executable=executable,
                error_message=str(e),
            )

        if completed.returncode == 0:
            logger.info(f"{executable} finished successfully")
        else:
            logger.warning(f"{executable} exited with code {completed.returncode}")

        return LaunchResult(
            status=LaunchStatus.COMPLETED,
            platform=family,
            executable=executable,
            return_code=completed.returncode,
        )


__all__ = [
    "CompanionLauncher",
    "CompanionSpec",
    "DEFAULT_COMPANION",
    "DEFAULT_SPECS",
    "LaunchResult",
    "LaunchStatus",
    "PlatformFamily",
    "detect_platform",
]

"""Entry point for the configuration bootstrap.

Usage:
    python -m cqconfig
"""

from __future__ import annotations

import sys

from .launcher import CompanionLauncher
from .loader import parse
from .runtime.env import BootstrapSettings
from .runtime.logging import configure_logging
from .servers import builtin_registry


def main() -> int:
    options = BootstrapSettings.from_env()
    logger = configure_logging(options.log_level, json=options.log_json)

    registry = builtin_registry()
    settings = parse(
        options.config_path,
        registry,
        selection=options.selection,
        launcher=CompanionLauncher(options.companion_name),
    )

    account = settings.account.uin if settings.account else "-"
    logger.info(f"Configuration loaded: account={account} servers={settings.server_types()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

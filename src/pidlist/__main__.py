"""Print ``parent_pid pid`` for every running process."""

from __future__ import annotations

import logging
import sys

from .config import ConfigurationError, load_powershell_config
from .exceptions import ProcessQueryError
from .logging_config import setup_logging
from .powershell import get_processes_sync

logger = logging.getLogger("pidlist")


def main() -> int:
    try:
        setup_logging()
        config = load_powershell_config()
        links = get_processes_sync(config=config)
    except (ProcessQueryError, ConfigurationError) as exc:
        logger.error("%s", exc)
        return 1

    for link in links:
        print(f"{link.parent_pid} {link.pid}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Entry point: `python -m cmdbar` or the `cmdbar` console script.

Reads (or creates) the config, opens the X display and publishes the status
string until the process is killed.

Environment:
    CMDBAR_CONFIG     path of the JSON config (default: ./config.json)
    CMDBAR_LOG_LEVEL  console log level (default: INFO)
                      The "Command ... was not successful!" lines are
                      WARNING records; a level above WARNING hides them.
    DISPLAY           X display to publish to
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from .exceptions import CmdbarError, ConfigError, PublishError
from .load_config import DEFAULT_CONFIG_PATH, read_config
from .logging_config import setup_logging
from .publisher import XRootPublisher
from .status_bar import StatusBar

logger = logging.getLogger("cmdbar.main")

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_CONFIG = 2


async def _run(bar: StatusBar) -> None:
    try:
        await bar.run_forever()
    finally:
        await bar.shutdown()


def main() -> int:
    setup_logging(os.environ.get("CMDBAR_LOG_LEVEL", "INFO"))

    config_path = os.environ.get("CMDBAR_CONFIG", str(DEFAULT_CONFIG_PATH))
    try:
        config = read_config(config_path)
    except ConfigError as e:
        logger.critical(f"Configuration error: {e}")
        return EXIT_CONFIG

    try:
        publisher = XRootPublisher()
    except PublishError as e:
        logger.critical(str(e))
        return EXIT_FATAL

    bar = StatusBar(config, publisher)
    try:
        asyncio.run(_run(bar))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return EXIT_OK
    except CmdbarError as e:
        logger.critical(f"Fatal: {e}")
        return EXIT_FATAL

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

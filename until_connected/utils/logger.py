import importlib.resources
import logging
import logging.config
import os

logger = logging.getLogger("until_connected")


def configure_logging() -> None:
    """Load "logging.conf" from the working directory, or the one shipped with the package."""
    try:
        logging.config.fileConfig(
            "logging.conf"
            if os.path.exists("logging.conf")
            else str(importlib.resources.files("until_connected") / "logging.conf"),
            disable_existing_loggers=False,
        )
    except (FileNotFoundError, KeyError):
        pass

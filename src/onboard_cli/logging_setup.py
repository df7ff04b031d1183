"""Logging configuration for onboard-cli."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config.settings import LoggingConfig


def configure_logging(config: LoggingConfig, debug: bool = False) -> None:
    """
    Configure root logging from settings.

    Args:
        config: Logging section of the settings
        debug: Force DEBUG level (``--debug``)
    """
    level = logging.DEBUG if debug else getattr(logging, config.level)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=config.max_size,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        )

    logging.basicConfig(level=level, format=config.format, handlers=handlers, force=True)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler


@dataclass
class LogConfig:
    log_level: int = logging.WARNING
    rich_tracebacks: bool = True
    show_time: bool = False
    format: str = "%(message)s"


def configure_logging(
    config: LogConfig | None = None, console: Console | None = None
) -> logging.Logger:
    if config is None:
        config = LogConfig()

    logger = logging.getLogger("wire_linter")
    logger.setLevel(config.log_level)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=config.rich_tracebacks,
        show_time=config.show_time,
    )
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)

    return logger

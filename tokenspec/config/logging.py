"""Logging configuration for the tokenspec package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from rich.console import Console
from rich.logging import RichHandler


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Parameters
    ----------
    level : str
        Log level.
    format : str
        Log format string.
    file : Path | None
        Log file path.
    console : bool
        Whether to log to the console (stderr).

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'WARNING'
    >>> config.console
    True
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level"
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    file: Path | None = Field(default=None, description="Log file path")
    console: bool = Field(default=True, description="Log to console")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Attach handlers described by ``config`` to the package logger.

    Existing handlers on the ``tokenspec`` logger are replaced, so calling
    this repeatedly does not duplicate output.

    Parameters
    ----------
    config : LoggingConfig
        Logging configuration.

    Returns
    -------
    logging.Logger
        The configured ``tokenspec`` logger.
    """
    logger = logging.getLogger("tokenspec")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(config.level)
    logger.propagate = False

    if config.console:
        # stdout carries tokens, so log records go to stderr
        console_handler = RichHandler(
            console=Console(stderr=True), show_path=False, markup=False
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(console_handler)

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger

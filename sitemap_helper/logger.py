"""Logging setup for sitemap_helper.

Everything logs under the ``SitemapHelper`` logger. Records go to stderr,
since stdout carries command output, and optionally to a rotating file.
The CLI calls :func:`configure` with ``--log-level`` / ``--log-file``.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SitemapHelper"

_MAX_LOG_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3


def configure(
    *,
    level: Union[int, str] = "WARNING",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Set level and handlers of the ``SitemapHelper`` logger and return it.

    With *replace_handlers* the previous handlers are closed first, so calling
    this again (as the CLI does) does not duplicate output.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    if replace_handlers:
        for handler in list(lg.handlers):
            lg.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file), maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
            )
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def get_logger(name: str | None = None) -> logging.Logger:
    """``SitemapHelper`` itself, or its child ``SitemapHelper.<name>``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "get_logger", "LOGGER_NAME", "DEFAULT_FORMAT"]

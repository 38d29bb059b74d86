# Argweave Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py

Logging helpers for the "argweave" logger.

Argweave is embedded in other programs, so these helpers only ever touch the
"argweave" logger. Handlers on the root logger belong to the application and are
left alone.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argweave.console import console
from argweave.logger import logger

LOG_MODES = ("cli", "json")
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_OWNED = "_argweave_owned"


def _owned_handlers() -> list[logging.Handler]:
    return [handler for handler in logger.handlers if getattr(handler, _OWNED, False)]


def teardown_logging() -> None:
    """Remove and close the handlers installed by `setup_logging`."""
    for handler in _owned_handlers():
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            console=console,
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
    propagate: bool = False,
) -> list[logging.Handler]:
    """
    Attach console (and optionally file) handlers to the "argweave" logger.

    Calling it again replaces the handlers from the previous call. Handlers added
    to the "argweave" logger by anyone else are kept.

    Args:
        mode (str | None):
            "cli" for Rich output on the shared Argweave console, or "json" for
            one JSON object per record. Defaults to the `ARGWEAVE_LOG_MODE`
            environment variable, then "cli".
        log_filename (str | None): Also write records to this file.
        json_log_to_file (bool): Format file records as JSON instead of plain text.
        file_log_level (int): Level for the file handler.
        console_log_level (int): Level for the console handler.
        propagate (bool): Whether records also reach the application's handlers.

    Returns:
        list[logging.Handler]: The handlers that were installed.

    Raises:
        ValueError: If `mode` is not one of "cli" or "json".
    """
    mode = mode or os.getenv("ARGWEAVE_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    teardown_logging()

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    handlers = [console_handler]
    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)
    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = propagate
    logger.debug("Logging initialized in '%s' mode.", mode)
    return handlers

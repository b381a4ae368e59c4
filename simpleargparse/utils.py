# SimpleArgParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Logging helper for host programs."""
from __future__ import annotations

import logging

import pythonjsonlogger.json
from rich.logging import RichHandler

from simpleargparse.logger import logger

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    json_format: bool = False,
    log_file: str | None = None,
) -> list[logging.Handler]:
    """
    Attach handlers to the "simpleargparse" logger so parser diagnostics show up.

    Only the package logger is touched; the root logger and any handlers the
    host installed elsewhere are left alone. Calling it again replaces the
    handlers from the previous call.

    Args:
        level (int): Minimum level emitted by the parser.
        json_format (bool): Write one JSON object per record instead of a
            Rich console line.
        log_file (str | None): Also append records to this file, using the
            same format choice.

    Returns:
        list[logging.Handler]: The handlers that were installed.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = []
    if json_format:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        handlers.append(stream_handler)
    else:
        handlers.append(RichHandler(show_path=False, markup=False))

    if log_file:
        file_handler = logging.FileHandler(log_file, "a", "UTF-8")
        if json_format:
            file_handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        else:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
        handlers.append(file_handler)

    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handlers

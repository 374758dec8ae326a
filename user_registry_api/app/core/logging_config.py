"""
Logging configuration for the registry service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called, then aligns
the loggers of the libraries the service runs on: uvicorn follows the
configured level, while python-multipart, which logs every parsed
form part at DEBUG, is kept at INFO or above so photo uploads do not
flood debug output.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Older python-multipart releases log under ``multipart``.
FORM_PARSER_LOGGERS = ("python_multipart", "multipart")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the library loggers.

    Handlers are attached only if the root logger has none yet, so
    building several applications in one process does not duplicate
    output.  Library logger levels are applied on every call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, no
        file handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
    for name in FORM_PARSER_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.INFO))

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

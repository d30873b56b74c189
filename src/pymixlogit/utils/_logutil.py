"""Logging helpers for the ``pymixlogit`` logger hierarchy."""

from __future__ import annotations

import contextlib
import logging

LOG_FMT = "%(asctime)s|%(levelname)s|%(name)s|%(funcName)s|%(lineno)s|%(message)s"
LOG_DATE_FMT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "pymixlogit"


@contextlib.contextmanager
def log_start_finish(msg: str, logger: logging.Logger, level: int = logging.DEBUG):
    """Log ``start: msg`` and ``finish: msg`` around a block.

    Parameters
    ----------
    msg : str
        Will be prefixed with "start: " and "finish: ".
    logger : logging.Logger
    level : int
        Level at which to log, passed to ``logger.log``.
    """
    logger.log(level, "start: " + msg)
    yield
    logger.log(level, "finish: " + msg)


def set_log_level(level: int) -> None:
    """Set the logging level for pymixlogit."""
    logging.getLogger(ROOT_LOGGER).setLevel(level)


def log_to_stream(level: int | None = None, fmt: str | None = None,
                  datefmt: str | None = None) -> logging.Handler:
    """Send pymixlogit log messages to stderr.

    Parameters
    ----------
    level : int or None
        Optional level applied to the new handler only.
    fmt, datefmt : str or None
        Format strings; default to ``LOG_FMT`` and ``LOG_DATE_FMT``.

    Returns
    -------
    handler : logging.StreamHandler
        The attached handler, so callers can detach it again.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(fmt=fmt or LOG_FMT, datefmt=datefmt or LOG_DATE_FMT)
    )
    if level is not None:
        handler.setLevel(level)
    logging.getLogger(ROOT_LOGGER).addHandler(handler)
    return handler

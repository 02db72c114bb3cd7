#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdbook_frontmatter/logging_utils.py
"""Log level resolution and stderr handler setup.

mdbook reads the processed book from stdout, so log records go to stderr and
optionally to a file. Handlers installed here carry the name
:data:`HANDLER_NAME`; a second call replaces them and leaves any other root
handler alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

HANDLER_NAME = "mdbook-frontmatter"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(levelname)s] %(name)s:%(lineno)d: %(message)s"


def resolve_log_level(
    log_level: Optional[str] = None,
    verbose: bool = False,
    trace: bool = False,
    env_level: Optional[str] = None,
    default: str = "WARNING",
) -> int:
    """Pick the effective log level from CLI flags and the environment.

    Precedence is ``trace`` > ``verbose`` > ``log_level`` > ``env_level`` >
    ``default``. Unknown level names fall back to ``default``.

    Parameters
    ----------
    log_level : str, optional
        Level name given on the command line
    verbose : bool, default False
        Whether ``--verbose`` was given (INFO)
    trace : bool, default False
        Whether ``--trace`` was given (DEBUG)
    env_level : str, optional
        Level name from the environment
    default : str, default "WARNING"
        Level used when nothing else is set

    Returns
    -------
    int
        Numeric logging level

    """
    if trace:
        return logging.DEBUG
    if verbose:
        return logging.INFO

    for candidate in (log_level, env_level):
        if candidate:
            level = logging.getLevelName(candidate.strip().upper())
            if isinstance(level, int):
                return level

    return getattr(logging, default.upper(), logging.WARNING)


def _add_handler(root_logger: logging.Logger, handler: logging.Handler, trace: bool) -> None:
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(TRACE_FORMAT if trace else PLAIN_FORMAT))
    root_logger.addHandler(handler)


def configure_logging(level: int, log_file: Optional[str] = None, trace: bool = False) -> logging.Logger:
    """Route log records at ``level`` and above to stderr.

    Parameters
    ----------
    level : int
        Numeric level, usually from :func:`resolve_log_level`
    log_file : str, optional
        File that also receives every record. If it cannot be opened a
        warning is logged and stderr logging carries on.
    trace : bool, default False
        Prefix records with the logger name and line number

    Returns
    -------
    logging.Logger
        The root logger

    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)

    _add_handler(root_logger, logging.StreamHandler(sys.stderr), trace)
    if log_file:
        try:
            _add_handler(root_logger, logging.FileHandler(log_file, encoding="utf-8"), trace)
        except OSError as e:
            root_logger.warning("Could not open log file %s: %s", log_file, e)

    return root_logger


__all__ = ["HANDLER_NAME", "PLAIN_FORMAT", "TRACE_FORMAT", "configure_logging", "resolve_log_level"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fastcat/logging_utils.py
"""Logging setup for the fastcat command line.

Log records always go to stderr so they never interleave with rendered lines
on stdout. The effective level comes from three switches: ``--trace`` wins
over ``--verbose``, and ``--verbose`` only applies while ``--log-level`` is
left at its default.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s: %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def resolve_log_level(log_level: int | str = DEFAULT_LOG_LEVEL, verbose: bool = False, trace: bool = False) -> int:
    """Pick the effective level from the command line switches.

    Parameters
    ----------
    log_level : int | str, default "WARNING"
        Numeric level or level name from ``--log-level``
    verbose : bool, default False
        ``--verbose``; lowers an unchanged WARNING level to DEBUG
    trace : bool, default False
        ``--trace``; always DEBUG

    Returns
    -------
    int
        Numeric logging level

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if trace:
        return logging.DEBUG

    if isinstance(log_level, int):
        level = log_level
    else:
        level = logging.getLevelName(log_level.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level!r}")

    if verbose and level == logging.WARNING:
        return logging.DEBUG
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    verbose: bool = False,
) -> logging.Logger:
    """Replace the root logger handlers with a stderr handler and optional file.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name
    log_file : str, optional
        Path of a file that receives a copy of every record
    trace_mode : bool, default False
        Force DEBUG and add timestamps and logger names
    verbose : bool, default False
        Lower an unchanged WARNING level to DEBUG

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level, verbose=verbose, trace=trace_mode)
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            file_error = e

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if file_error is not None:
        root.warning(f"Could not open log file {log_file}: {file_error}")
    elif log_file:
        root.debug(f"Also logging to {log_file}")
    return root

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/plaintify/logging_utils.py
"""Logging setup for the ``plaintify`` command.

Library modules only create module-level loggers under the ``plaintify``
namespace. Handlers are attached by the command line tool alone, and only to
the ``plaintify`` package logger, so an application embedding the library
keeps full control of its root logger.

"""

from __future__ import annotations

import argparse
import logging
import sys

PACKAGE_LOGGER = "plaintify"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _formatter(trace: bool) -> logging.Formatter:
    if trace:
        return logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    return logging.Formatter(_PLAIN_FORMAT)


def configure_logging(args: argparse.Namespace) -> logging.Logger:
    """Attach handlers to the package logger from parsed command line options.

    Handlers installed by an earlier call are removed first, so calling this
    more than once (as the tests do) never duplicates output.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed options carrying ``log_level`` (a level name, already
        defaulted from ``PLAINTIFY_LOG_LEVEL``), ``log_file`` (defaulted from
        ``PLAINTIFY_LOG_FILE``) and ``trace``

    Returns
    -------
    logging.Logger
        The configured ``plaintify`` logger

    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    level = logging.getLevelName(args.log_level)
    package_logger.setLevel(level)
    formatter = _formatter(args.trace)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    open_error = None
    if args.log_file:
        try:
            handlers.append(logging.FileHandler(args.log_file, mode="a", encoding="utf-8"))
        except OSError as e:
            open_error = e

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if open_error is not None:
        package_logger.warning("Could not open log file %s: %s", args.log_file, open_error)
    elif args.log_file:
        package_logger.debug("Logging to file: %s", args.log_file)

    return package_logger

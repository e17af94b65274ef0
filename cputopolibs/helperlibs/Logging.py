# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Logging for the cputopo project.

Every project module logs to a child of the '<MAIN_LOGGER_NAME>.cputopo' logger, which the tool
configures once. Info messages are the tool output: they go to stdout as is. Everything else goes
to stderr with a level prefix.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import logging
from typing import NoReturn, Any, IO, cast
import colorama

# An info message that deserves attention: printed to stderr, with a prefix.
NOTICE = logging.INFO + 1

MAIN_LOGGER_NAME = "main"

_LEVEL_NAMES = {logging.DEBUG: "debug", NOTICE: "notice", logging.WARNING: "warning",
                logging.ERROR: "error", logging.CRITICAL: "critical error"}

_LEVEL_COLORS = {logging.DEBUG: colorama.Fore.GREEN,
                 NOTICE: colorama.Fore.CYAN + colorama.Style.BRIGHT,
                 logging.WARNING: colorama.Fore.YELLOW + colorama.Style.BRIGHT,
                 logging.ERROR: colorama.Fore.RED + colorama.Style.BRIGHT,
                 logging.CRITICAL: colorama.Fore.RED + colorama.Style.BRIGHT}

class _Formatter(logging.Formatter):
    """Format info messages as is, and prefix all other messages with the tool and level names."""

    def __init__(self, prefix: str, colored: bool):
        """
        Initialize the formatter.

        Args:
            prefix: The tool name to start non-info messages with.
            colored: Whether to color the level names.
        """

        super().__init__("%(message)s")

        self._prefixes: dict[int, str] = {}
        for level, name in _LEVEL_NAMES.items():
            if colored:
                name = f"{_LEVEL_COLORS[level]}{name}{colorama.Style.RESET_ALL}"
            if prefix:
                self._prefixes[level] = f"{prefix}: {name}: "
            else:
                self._prefixes[level] = f"{name.title()}: "

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted message of 'record'."""

        msg = super().format(record)
        pfx = self._prefixes.get(record.levelno, "")
        if record.levelno == logging.DEBUG:
            pfx += f"[{record.module},{record.lineno}] "
        return pfx + msg

class Logger(logging.Logger):
    """A logger with the 'NOTICE' level and the 'error_out()' method."""

    def configure(self,
                  prefix: str = "",
                  level: int | None = None,
                  colored: bool | None = None,
                  info_stream: IO[str] = sys.stdout,
                  error_stream: IO[str] = sys.stderr) -> Logger:
        """
        Configure the logger and return it.

        Args:
            prefix: The tool name to start non-info messages with.
            level: The log level. By default, 'WARNING' if '-q' is on the command line, 'DEBUG' if
                   '-d' is, and 'INFO' otherwise.
            colored: Whether to color the level names. By default, only if both streams are
                     terminals or '--force-color' is on the command line.
            info_stream: The stream for info messages.
            error_stream: The stream for messages of all other levels.
        """

        if level is None:
            if "-q" in sys.argv:
                level = logging.WARNING
            elif "-d" in sys.argv:
                level = logging.DEBUG
            else:
                level = logging.INFO
        self.setLevel(level)

        if colored is None:
            colored = "--force-color" in sys.argv or \
                      (info_stream.isatty() and error_stream.isatty())

        formatter = _Formatter(prefix, colored)

        info_handler = logging.StreamHandler(info_stream)
        info_handler.addFilter(lambda record: record.levelno == logging.INFO)
        error_handler = logging.StreamHandler(error_stream)
        error_handler.addFilter(lambda record: record.levelno != logging.INFO)

        self.handlers = []
        for handler in (info_handler, error_handler):
            handler.setFormatter(formatter)
            self.addHandler(handler)

        return self

    def notice(self, fmt: str, *args: Any):
        """Log a message with the 'NOTICE' level."""
        self.log(NOTICE, fmt, *args)

    def error_out(self, fmt: Any, *args: Any) -> NoReturn:
        """
        Log an error message and exit with code 1.

        Args:
            fmt: The error message or its format string.
            *args: The format string arguments.
        """

        self.error(str(fmt) if not args else fmt, *args)
        raise SystemExit(1)

logging.setLoggerClass(Logger)

def getLogger(name: str) -> Logger: # pylint: disable=invalid-name
    """Return a project logger by name, same as 'logging.getLogger()'."""
    return cast(Logger, logging.getLogger(name))

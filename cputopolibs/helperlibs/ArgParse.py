# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Command-line arguments parsing helpers: the SSH options and an 'argparse.ArgumentParser' subclass
with the standard options of the project tools.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
import argparse
import argcomplete
from cputopolibs.helperlibs.Exceptions import Error

if typing.TYPE_CHECKING:
    from typing import TypedDict, Iterable, Any

    class ArgTypedDict(TypedDict, total=False):
        """
        An option definition.

        Attributes:
            short: The short option name, or 'None'.
            long: The long option name.
            argcomplete: Name of the 'argcomplete.completers' class for tab completion, or 'None'.
            kwargs: Keyword arguments for 'argparse.ArgumentParser.add_argument()'.
        """

        short: str | None
        long: str
        argcomplete: str | None
        kwargs: dict[str, Any]

    class SSHArgsTypedDict(TypedDict):
        """
        The validated SSH options.

        Attributes:
            hostname: The host to read the topology of, "localhost" by default.
            username: The SSH user name, "root" by default for remote hosts.
            privkey: The private SSH key path, or 'None'.
            timeout: The SSH connection timeout in seconds, or 'None' for the local host.
        """

        hostname: str
        username: str
        privkey: str | None
        timeout: float | None

# The SSH connection timeout used when '--timeout' is not specified.
_DEFAULT_TIMEOUT = 8.0

SSH_OPTIONS: list[ArgTypedDict] = [
    {
        "short": "-H",
        "long": "--host",
        "argcomplete": None,
        "kwargs": {
            "dest": "hostname",
            "default": "localhost",
            "help": "Host name or IP address of the remote host to connect to over SSH and read "
                    "the topology of. Use the local host if not specified."
        },
    },
    {
        "short": "-U",
        "long": "--username",
        "argcomplete": None,
        "kwargs": {
            "dest": "username",
            "default": "",
            "help": "Name of the user to use for logging into the remote host over SSH. The "
                    "default user name is 'root'."
        },
    },
    {
        "short": "-K",
        "long": "--priv-key",
        "argcomplete": "FilesCompleter",
        "kwargs": {
            "dest": "privkey",
            "default": "",
            "help": "Path to the private SSH key for logging into the remote host. Defaults to "
                    "keys in standard paths like '$HOME/.ssh'."
        },
    },
    {
        "short": "-T",
        "long": "--timeout",
        "argcomplete": None,
        "kwargs": {
            "dest": "timeout",
            "default": "",
            "help": f"Timeout for establishing an SSH connection in seconds. Defaults to "
                    f"{_DEFAULT_TIMEOUT:g}."
        },
    },
]

def add_options(parser: argparse.ArgumentParser,
                options: Iterable[ArgTypedDict],
                suppress_defaults: bool = False):
    """
    Add options to an arguments parser.

    Args:
        parser: The arguments parser to add the options to.
        options: The option definitions.
        suppress_defaults: Do not set the option attributes when the options are not on the
                           command line. Use it for the copies of the options in sub-command
                           parsers, so that they do not override the values parsed by the main
                           parser.
    """

    for opt in options:
        names = [name for name in (opt.get("short"), opt["long"]) if name]

        kwargs = dict(opt["kwargs"])
        if suppress_defaults:
            kwargs["default"] = argparse.SUPPRESS

        arg = parser.add_argument(*names, **kwargs)
        if opt.get("argcomplete"):
            setattr(arg, "completer", getattr(argcomplete.completers, opt["argcomplete"]))

def format_ssh_args(args: argparse.Namespace) -> SSHArgsTypedDict:
    """
    Validate the SSH options in 'args' and return them with the defaults applied.

    Raises:
        Error: If an SSH option is used without '--host', or the timeout is not a positive number.
    """

    hostname = getattr(args, "hostname", "localhost")
    username = getattr(args, "username", "")
    privkey = getattr(args, "privkey", "") or None
    timeout = getattr(args, "timeout", "") or None

    if hostname == "localhost":
        for value, optname in ((username, "--username"), (privkey, "--priv-key"),
                               (timeout, "--timeout")):
            if value:
                raise Error(f"The '{optname}' option requires the '--host' option")
        return {"hostname": hostname, "username": "", "privkey": None, "timeout": None}

    if timeout is None:
        seconds = _DEFAULT_TIMEOUT
    else:
        try:
            seconds = float(timeout)
        except ValueError:
            raise Error(f"Bad '--timeout' option value '{timeout}': should be a number of "
                        f"seconds") from None
        if seconds <= 0:
            raise Error(f"Bad '--timeout' option value '{timeout}': should be positive")

    return {"hostname": hostname, "username": username or "root", "privkey": privkey,
            "timeout": seconds}

class ArgsParser(argparse.ArgumentParser):
    """
    An arguments parser with the '-h', '-q', '-d', '--force-color' options, and with the
    '--version' option if the 'ver' keyword argument is given. Sub-command parsers are of the same
    class, so the standard options are accepted after the sub-command names too.

    Errors raise 'Error' instead of exiting the program.
    """

    def __init__(self, *args: Any, ver: str | None = None, **kwargs: Any):
        """Initialize the parser. The 'ver' argument is the version to print for '--version'."""

        kwargs["add_help"] = False
        super().__init__(*args, **kwargs)

        self.add_argument("-h", "--help", action="help", help="Show this help message and exit.")

        # The defaults are suppressed so that a sub-command parser does not reset an option given
        # before the sub-command name.
        text = "Be quiet (print only important messages like warnings)."
        self.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS,
                          help=text)
        text = "Print debugging information."
        self.add_argument("-d", "--debug", action="store_true", default=argparse.SUPPRESS,
                          help=text)
        text = "Force colorized output even if the output stream is not a terminal."
        self.add_argument("--force-color", action="store_true", default=argparse.SUPPRESS,
                          help=text)

        if ver:
            self.add_argument("--version", action="version", version=ver,
                              help="Print the version number and exit.")

    def parse_args(self, *args: Any, **kwargs: Any) -> argparse.Namespace: # type: ignore[override]
        """Parse the command line and validate the standard options."""

        _args = super().parse_args(*args, **kwargs)

        if getattr(_args, "quiet", False) and getattr(_args, "debug", False):
            raise Error("The '-q' and '-d' options cannot be used together")

        return _args

    def error(self, message: str):
        """Raise 'Error' with 'message' and a hint to use '-h'."""
        raise Error(f"{message}\nUse '{self.prog} -h' for help.")

# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
The base class for host file-system objects.

A host file-system object ("hfs") reads files on a host, which may be the local host, a remote
host reached over SSH, or an emulated host. The API is the same in all cases, so the topology code
does not care where the sysfs files actually live.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
from cputopolibs.helperlibs import ClassHelpers
from cputopolibs.helperlibs.Exceptions import Error, ErrorNotFound, ErrorPermissionDenied

def oserror_to_error(err: OSError, msg: str) -> Error:
    """
    Translate an 'OSError' into a project exception.

    Args:
        err: The exception to translate.
        msg: The message of the new exception, the 'err' message is appended to it.

    Returns:
        'ErrorNotFound' for a missing file, 'ErrorPermissionDenied' for a permission problem, and
        'Error' for anything else.
    """

    exc_type: type[Error] = Error
    if isinstance(err, FileNotFoundError):
        exc_type = ErrorNotFound
    elif isinstance(err, PermissionError):
        exc_type = ErrorPermissionDenied

    return exc_type(f"{msg}:\n{Error(str(err)).indent(2)}")

class HostFSBase(ClassHelpers.SimpleCloseContext):
    """
    Base class for host file-system objects. Subclasses implement '_read()', which may raise
    'OSError'.
    """

    def __init__(self, hostname: str, hostmsg: str):
        """
        Initialize the class instance.

        Args:
            hostname: Name of the host.
            hostmsg: The host description to append to messages, empty for the local host.
        """

        self.hostname = hostname
        self.hostmsg = hostmsg

    def _read(self, path: str) -> str:
        """Return the contents of file 'path'."""
        raise NotImplementedError("HostFSBase._read()")

    def read_file(self, path: str | Path) -> str:
        """
        Read a file.

        Args:
            path: The path to the file to read.

        Returns:
            The contents of the file.

        Raises:
            ErrorNotFound: If the file does not exist.
            ErrorPermissionDenied: If the file cannot be read because of permissions.
        """

        try:
            return self._read(str(path))
        except OSError as err:
            raise oserror_to_error(err, f"Failed to read file '{path}'{self.hostmsg}") from err

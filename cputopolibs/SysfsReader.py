# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2023-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>
#          Antti Laakso <antti.laakso@linux.intel.com>
#          Niklas Neronin <niklas.neronin@intel.com>

"""
Provide API for reading and decoding sysfs files relative to a sysfs root directory.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cputopolibs.helperlibs import Logging, LocalHostFS, ClassHelpers, Trivial
from cputopolibs.helperlibs.Exceptions import Error, ErrorBadFormat

if typing.TYPE_CHECKING:
    from cputopolibs.helperlibs.HostFS import HostFSType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

# The default sysfs mount point.
SYSFS_ROOT = Path("/sys")
# CPU and NUMA node sub-directories, relative to the sysfs root.
CPU_SUBDIR = Path("devices/system/cpu")
NODE_SUBDIR = Path("devices/system/node")

class SysfsReader(ClassHelpers.SimpleCloseContext):
    """
    Provide API for reading and decoding sysfs files.

    Public methods overview.
        * 'read()' - read a string.
        * 'read_int()' - read an integer.
        * 'read_range()' - read a list of integers in range notation (e.g., "0,2,4-7").
        * 'read_ints()' - read a white-space separated list of integers (e.g., "10 21").

    All methods take a path relative to the sysfs root directory.
    """

    def __init__(self, root: str | Path = SYSFS_ROOT, hfs: HostFSType | None = None):
        """
        Initialize a class instance.

        Args:
            root: Path to the sysfs root directory on the target host.
            hfs: The host file-system object that defines the target host. Use the local host if
                 not provided.
        """

        self.root = Path(root)

        self._close_hfs = hfs is None

        self._hfs: HostFSType
        if hfs:
            self._hfs = hfs
        else:
            self._hfs = LocalHostFS.LocalHostFS()

        self.hostmsg = self._hfs.hostmsg

    def close(self):
        """Uninitialize the class object."""
        ClassHelpers.close(self, close_attrs=("_hfs",))

    def _format_what(self, subpath: Path, what: str) -> str:
        """Return the description of file 'subpath' for messages."""

        if what:
            return f"{what} (file '{self.root / subpath}'{self.hostmsg})"
        return f"contents of file '{self.root / subpath}'{self.hostmsg}"

    def read(self, subpath: str | Path, what: str = "") -> str:
        """
        Read a sysfs file.

        Args:
            subpath: Path to the file, relative to the sysfs root directory.
            what: Optional short description of what is being read, included in exception messages.

        Returns:
            The contents of the file with the surrounding white-spaces stripped.

        Raises:
            ErrorNotFound: If the file does not exist.
            ErrorPermissionDenied: If the file cannot be read because of permissions.
        """

        path = self.root / subpath

        try:
            val = self._hfs.read_file(path).strip()
        except Error as err:
            if what:
                what = f" {what}"
            raise type(err)(f"Failed to read{what} from '{path}'{self.hostmsg}:\n"
                            f"{err.indent(2)}") from err

        _LOG.debug("Read '%s'%s: %s", path, self.hostmsg, val)
        return val

    def read_int(self, subpath: str | Path, what: str = "") -> int:
        """
        Read a sysfs file and return its contents as an integer.

        Args:
            subpath: Path to the file, relative to the sysfs root directory.
            what: Optional short description of what is being read, included in exception messages.

        Returns:
            The integer value read from the file.

        Raises:
            ErrorBadFormat: If the file contents cannot be parsed as an integer.
        """

        val = self.read(subpath, what=what)
        return Trivial.str_to_int(val, base=10, what=self._format_what(Path(subpath), what))

    def read_range(self, subpath: str | Path, what: str = "") -> list[int]:
        """
        Read a sysfs file containing a comma-separated list of integers or integer ranges.

        Args:
            subpath: Path to the file, relative to the sysfs root directory.
            what: Optional short description of what is being read, included in exception messages.

        Returns:
            List of integers in ascending order, without duplicates. An empty file results in an
            empty list.

        Raises:
            ErrorBadFormat: If the file contents is not a valid list of integers and ranges.
        """

        val = self.read(subpath, what=what)
        return Trivial.parse_ranges(val, what=self._format_what(Path(subpath), what))

    def read_ints(self, subpath: str | Path, what: str = "") -> list[int]:
        """
        Read a sysfs file containing white-space separated integers.

        Args:
            subpath: Path to the file, relative to the sysfs root directory.
            what: Optional short description of what is being read, included in exception messages.

        Returns:
            List of integers in the order they appear in the file.

        Raises:
            ErrorBadFormat: If the file contents cannot be parsed as a list of integers.
        """

        val = self.read(subpath, what=what)
        fwhat = self._format_what(Path(subpath), what)

        try:
            return [Trivial.str_to_int(num, base=10, what=fwhat) for num in val.split()]
        except ErrorBadFormat as err:
            raise ErrorBadFormat(f"Bad {fwhat} '{val}': should be white-space separated "
                                 f"integers:\n{err.indent(2)}") from err

# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2022-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Antti Laakso <antti.laakso@linux.intel.com>
#          Niklas Neronin <niklas.neronin@intel.com>
#          Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
A host file-system object that emulates a host for testing purposes.

Terminology:
    - Data Set: A directory containing emulation data for a single host, one or more YAML files.
    - Emulation Data (emd): The files of the emulated host, kept in memory.

Each YAML file of a dataset has the following format.

    base: /sys/devices/system
    files:
      cpu/present: 0-3
      cpu/online: 0-3
      node/node0/distance: 10 21

The 'base' key is optional, it is prepended to relative paths in 'files'.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
from cputopolibs.helperlibs import Logging, _HostFSBase, YAML
from cputopolibs.helperlibs.Exceptions import Error, ErrorNotFound, ErrorBadFormat

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

class EmulHostFS(_HostFSBase.HostFSBase):
    """Emulate a host with files from a dataset."""

    def __init__(self, hostname: str = "emulation"):
        """
        Initialize a class instance.

        Args:
            hostname: Name of the emulated host to use in messages.
        """

        super().__init__(hostname, f" on '{hostname}'")

        # The emulation data: file path -> file contents.
        self._emd: dict[str, str] = {}

    def add_file(self, path: str | Path, data: str | int):
        """
        Add an emulated file.

        Args:
            path: Absolute path of the file on the emulated host.
            data: The file contents.
        """

        path = str(path)
        if not path.startswith("/"):
            raise Error(f"BUG: emulated file path '{path}' is not absolute")

        self._emd[path] = str(data)

    def remove_file(self, path: str | Path):
        """Remove emulated file 'path'."""

        path = str(path)
        if path not in self._emd:
            raise ErrorNotFound(f"Emulated file '{path}' does not exist{self.hostmsg}")
        del self._emd[path]

    def init_emul_data(self, dspath: str | Path):
        """
        Load the dataset at 'dspath': add the files described by all the '*.yaml' files in the
        dataset directory.
        """

        dspath = Path(dspath)
        _LOG.debug("Loading emulation dataset '%s'", dspath)

        try:
            yaml_paths = sorted(path for path in dspath.iterdir() if path.suffix == ".yaml")
        except OSError as err:
            raise _HostFSBase.oserror_to_error(err, f"Failed to list emulation dataset directory "
                                                    f"'{dspath}'") from err

        if not yaml_paths:
            raise ErrorNotFound(f"No emulation data found in '{dspath}'")

        for yaml_path in yaml_paths:
            info = YAML.load(yaml_path)

            base = Path(str(info.get("base", "/")))
            files = info.get("files", {})
            if not isinstance(files, dict):
                raise ErrorBadFormat(f"Bad emulation data file '{yaml_path}': the 'files' key "
                                     f"should be a dictionary")

            for path, data in files.items():
                self.add_file(base / str(path), "" if data is None else data)

    def _read(self, path: str) -> str:
        """Refer to 'HostFSBase._read()'."""

        if path not in self._emd:
            raise FileNotFoundError(f"No such emulated file: '{path}'")
        return self._emd[path]

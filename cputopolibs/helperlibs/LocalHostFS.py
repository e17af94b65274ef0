# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Read files on the local host.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from cputopolibs.helperlibs import Logging, _HostFSBase

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

class LocalHostFS(_HostFSBase.HostFSBase):
    """Read files on the local host."""

    def __init__(self):
        """Initialize the class instance."""
        super().__init__("localhost", "")

    def _read(self, path: str) -> str:
        """Refer to 'HostFSBase._read()'."""

        _LOG.debug("Reading file '%s'", path)

        with open(path, "r", encoding="utf-8") as fobj:
            return fobj.read()

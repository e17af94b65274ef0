#!/usr/bin/env python3
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Antti Laakso <antti.laakso@linux.intel.com>
#         Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""Common functions for cputopo tests."""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path
import typing
from cputopolibs.helperlibs import HostFS, EmulHostFS

if typing.TYPE_CHECKING:
    from typing import TypedDict
    from cputopolibs.helperlibs.HostFS import HostFSType

    class CommonTestParamsTypedDict(TypedDict):
        """
        A dictionary of common test parameters.

        Attributes:
            hostname: The hostname of the target system.
            hfs: The host file-system object for the target system.
        """

        hostname: str
        hfs: HostFSType

DATA_PATH = Path(__file__).parent.resolve() / "data"

def get_hfs(hostspec: str) -> HostFSType:
    """
    Create and return a host file-system object for 'hostspec'. A "emulation:<dataset>" hostspec
    gives an 'EmulHostFS' object with the dataset loaded, anything else is passed to
    'HostFS.get_hfs()'.
    """

    if not hostspec.startswith("emulation:"):
        return HostFS.get_hfs(hostspec)

    hfs = EmulHostFS.EmulHostFS(hostname=hostspec)
    try:
        hfs.init_emul_data(DATA_PATH / hostspec.split(":", maxsplit=1)[1])
    except BaseException:
        hfs.close()
        raise

    return hfs

def build_params(hfs: HostFSType) -> CommonTestParamsTypedDict:
    """Return a dictionary of the common test parameters for host 'hfs'."""
    return {"hostname": hfs.hostname, "hfs": hfs}

# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Provide a unified way of creating a host file-system object for local, remote, or emulated hosts.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from pathlib import Path
from cputopolibs.helperlibs import LocalHostFS, SSHHostFS, EmulHostFS

if typing.TYPE_CHECKING:
    from typing import Union

    HostFSType = Union[LocalHostFS.LocalHostFS, SSHHostFS.SSHHostFS, EmulHostFS.EmulHostFS]

def get_hfs(hostname: str = "localhost",
            username: str = "",
            privkeypath: str | Path | None = None,
            timeout: int | float | None = None) -> HostFSType:
    """
    Create and return a host file-system object: a 'LocalHostFS' for "localhost", an 'EmulHostFS'
    without any files for "emulation..." host names (load a dataset with 'init_emul_data()'), and
    an 'SSHHostFS' connected to the host otherwise. The SSH arguments are the same as in
    'SSHHostFS'.
    """

    if hostname == "localhost" and not username:
        return LocalHostFS.LocalHostFS()
    if hostname.startswith("emulation"):
        return EmulHostFS.EmulHostFS(hostname=hostname)

    return SSHHostFS.SSHHostFS(hostname, username=username, privkeypath=privkeypath,
                               timeout=timeout)

#!/usr/bin/env python3
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2023-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""Test the 'SysfsReader' module."""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
import pytest
from cputopolibs import SysfsReader
from cputopolibs.helperlibs import EmulHostFS
from cputopolibs.helperlibs.Exceptions import ErrorNotFound, ErrorBadFormat

if typing.TYPE_CHECKING:
    from typing import Generator

@pytest.fixture(name="hfs")
def get_hfs() -> Generator[EmulHostFS.EmulHostFS, None, None]:
    """Create and yield an emulated host with a few sysfs files."""

    with EmulHostFS.EmulHostFS(hostname="emulation:test") as hfs:
        hfs.add_file("/sys/devices/system/cpu/online", "0-3,8,10-11\n")
        hfs.add_file("/sys/devices/system/cpu/possible", "3,1,2-3\n")
        hfs.add_file("/sys/devices/system/cpu/offline", "\n")
        hfs.add_file("/sys/devices/system/cpu/cpu0/topology/physical_package_id", " 1\n")
        hfs.add_file("/sys/devices/system/node/node0/distance", "10 21  12\n")
        hfs.add_file("/sys/devices/system/node/node1/distance", "21 x\n")
        yield hfs

def test_read(hfs: EmulHostFS.EmulHostFS):
    """Verify reading sysfs files relative to the sysfs root."""

    with SysfsReader.SysfsReader(hfs=hfs) as sysfs:
        assert sysfs.read(SysfsReader.CPU_SUBDIR / "online") == "0-3,8,10-11"
        assert sysfs.read_int("devices/system/cpu/cpu0/topology/physical_package_id") == 1
        assert sysfs.read_range(SysfsReader.CPU_SUBDIR / "online") == [0, 1, 2, 3, 8, 10, 11]
        assert sysfs.read_range(SysfsReader.CPU_SUBDIR / "possible") == [1, 2, 3]
        assert sysfs.read_range(SysfsReader.CPU_SUBDIR / "offline") == []
        assert sysfs.read_ints(SysfsReader.NODE_SUBDIR / "node0" / "distance") == [10, 21, 12]

    # The host file-system object belongs to the caller and stays usable.
    assert hfs.read_file("/sys/devices/system/cpu/offline") == "\n"

def test_read_root(hfs: EmulHostFS.EmulHostFS):
    """Verify that paths are relative to the sysfs root directory."""

    hfs.add_file("/tmp/sysfs/devices/system/cpu/online", "0\n")

    with SysfsReader.SysfsReader(root="/tmp/sysfs", hfs=hfs) as sysfs:
        assert sysfs.read_range(SysfsReader.CPU_SUBDIR / "online") == [0]

def test_read_errors(hfs: EmulHostFS.EmulHostFS):
    """Verify the exceptions raised by the read methods."""

    with SysfsReader.SysfsReader(hfs=hfs) as sysfs:
        with pytest.raises(ErrorNotFound) as excinfo:
            sysfs.read("devices/system/cpu/present", what="present CPUs")
        assert "present CPUs" in str(excinfo.value)
        assert "/sys/devices/system/cpu/present" in str(excinfo.value)
        assert "emulation:test" in str(excinfo.value)

        with pytest.raises(ErrorBadFormat):
            sysfs.read_int(SysfsReader.CPU_SUBDIR / "online")

        with pytest.raises(ErrorBadFormat):
            sysfs.read_range(SysfsReader.NODE_SUBDIR / "node0" / "distance")

        with pytest.raises(ErrorBadFormat) as excinfo:
            sysfs.read_ints(SysfsReader.NODE_SUBDIR / "node1" / "distance", what="distances")
        assert "/sys/devices/system/node/node1/distance" in str(excinfo.value)

def test_local(tmp_path):
    """Verify reading files on the local host when no host file-system object is provided."""

    cpu_dir = tmp_path / SysfsReader.CPU_SUBDIR
    cpu_dir.mkdir(parents=True)
    (cpu_dir / "present").write_text("0-1\n", encoding="utf-8")

    with SysfsReader.SysfsReader(root=tmp_path) as sysfs:
        assert sysfs.hostmsg == ""
        assert sysfs.read_range(SysfsReader.CPU_SUBDIR / "present") == [0, 1]
        with pytest.raises(ErrorNotFound):
            sysfs.read(SysfsReader.CPU_SUBDIR / "online")

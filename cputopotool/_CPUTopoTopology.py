# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2022-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Niklas Neronin <niklas.neronin@intel.com>

"""
Implement the 'cputopo topology info' command.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import typing
from cputopolibs import CPUTopology
from cputopolibs.helperlibs import Logging, Trivial, YAML

if typing.TYPE_CHECKING:
    import argparse
    from cputopolibs.helperlibs.HostFS import HostFSType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

_HEADERS = ("CPU", "Core siblings", "Package siblings", "Package", "Node")

def _fmt_nums(nums) -> str:
    """Format a list of numbers in range notation, or "none" if the list is empty."""

    if not nums:
        return "none"
    return Trivial.rangify(nums)

def _print_cpus(topo: CPUTopology.CPUTopology):
    """Print the lists of present, online, and offline CPUs."""

    _LOG.info("Present CPUs: %s", _fmt_nums(topo.present))
    _LOG.info("Online CPUs:  %s", _fmt_nums(topo.online))
    _LOG.info("Offline CPUs: %s", _fmt_nums(topo.get_offline_cpus()))

def _print_table(topo: CPUTopology.CPUTopology):
    """Print the per-CPU topology table."""

    tlines = []
    for cpu in topo.online:
        node = topo.node_for_cpu(cpu)
        tlines.append((str(cpu),
                       Trivial.rangify(topo.core_siblings[cpu]),
                       Trivial.rangify(topo.package_siblings[cpu]),
                       str(topo.get_cpu_package(cpu)),
                       "-" if node is None else str(node)))

    # Create format string, example: '%3s    %13s    %16s    %7s    %4s'.
    widths = [len(hdr) for hdr in _HEADERS]
    for tline in tlines:
        widths = [max(width, len(val)) for width, val in zip(widths, tline)]
    fmt = "    ".join([f"%{width}s" for width in widths])

    _LOG.info(fmt, *_HEADERS)
    for tline in tlines:
        _LOG.info(fmt, *tline)

def topology_info_command(args: argparse.Namespace, hfs: HostFSType):
    """
    Implement the 'topology info' command. The arguments are as follows.
      * args - command line arguments dictionary
      * hfs - the host file-system object for the target host
    """

    topo = CPUTopology.CPUTopology.build(root=args.sysfs_root, hfs=hfs)

    if args.yaml:
        info = topo.to_dict()
        if args.cpus_only:
            info = {key: info[key] for key in ("present", "online", "offline")}
        YAML.dump(dict(info), sys.stdout, flow_lists=True)
        return

    _print_cpus(topo)
    if args.cpus_only:
        return

    _LOG.info("Packages:     %s", _fmt_nums(topo.get_unique_packages()))
    _LOG.info("NUMA nodes:   %s", _fmt_nums(topo.numa_nodes))
    _LOG.info("")
    _print_table(topo)

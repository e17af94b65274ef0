# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2022-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Implement the 'cputopo distances info' command.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import typing
from cputopolibs import NUMADistances
from cputopolibs.helperlibs import Logging, YAML

if typing.TYPE_CHECKING:
    import argparse
    from cputopolibs.helperlibs.HostFS import HostFSType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

def distances_info_command(args: argparse.Namespace, hfs: HostFSType):
    """
    Implement the 'distances info' command. The arguments are as follows.
      * args - command line arguments dictionary
      * hfs - the host file-system object for the target host
    """

    dists = NUMADistances.NUMADistances.build(root=args.sysfs_root, hfs=hfs)

    if args.yaml:
        YAML.dump({"distances": dists.to_dict()}, sys.stdout, flow_lists=True)
        return

    if not dists.nodes:
        _LOG.info("No online NUMA nodes%s", hfs.hostmsg)
        return

    vals = ["Node"] + [str(node) for node in dists.nodes]
    for node in dists.nodes:
        vals += [str(dist) for dist in dists.get_row(node)]

    width = max(len(val) for val in vals)
    fmt = "    ".join([f"%{width}s"] * (len(dists.nodes) + 1))

    _LOG.info(fmt, "Node", *dists.nodes)
    for node in dists.nodes:
        _LOG.info(fmt, node, *dists.get_row(node))

    if not dists.is_symmetric():
        _LOG.notice("The NUMA distance matrix is not symmetric")

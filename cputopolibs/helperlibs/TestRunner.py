# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2023-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Antti Laakso <antti.laakso@intel.com>
#          Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""Run tool commands in-process from tests."""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import types
import typing
from cputopolibs.helperlibs import Logging

if typing.TYPE_CHECKING:
    from cputopolibs.helperlibs.HostFS import HostFSType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

def run_tool(tool: types.ModuleType,
             arguments: str,
             hfs: HostFSType,
             exp_exc: type[Exception] | None = None):
    """
    Run a tool command and verify the outcome.

    Args:
        tool: The main module of the tool. It provides 'TOOLNAME' and 'parse_arguments()', and
              the parsed arguments provide the command function in 'func'.
        arguments: The command-line arguments, e.g. 'topology info --yaml'.
        hfs: The host file-system object to run the command on.
        exp_exc: The exception the command is expected to raise. By default, the command is
                 expected to succeed.
    """

    sys.argv = [tool.TOOLNAME] + arguments.split()
    cmd = " ".join(sys.argv)
    _LOG.debug("running: %s%s", cmd, hfs.hostmsg)

    try:
        args = tool.parse_arguments()
        args.func(args, hfs)
    except Exception as err: # pylint: disable=broad-except
        errmsg = f"command '{cmd}' raised the following exception:\n- {type(err).__name__}({err})"
        if exp_exc is None:
            assert False, errmsg
        assert isinstance(err, exp_exc), \
               f"{errmsg}\nbut it was expected to raise '{exp_exc.__name__}'"
        return

    assert exp_exc is None, f"command '{cmd}' did not raise '{exp_exc.__name__}'"

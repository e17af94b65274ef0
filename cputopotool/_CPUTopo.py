# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Authors: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>
#          Niklas Neronin <niklas.neronin@intel.com>

"""
cputopo - print CPU and NUMA topology of a Linux host.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import sys
import typing
import argparse
from pathlib import Path
import argcomplete
from cputopolibs import SysfsReader
from cputopolibs.helperlibs import ArgParse, HostFS, Logging
from cputopolibs.helperlibs.Exceptions import Error

if typing.TYPE_CHECKING:
    from cputopolibs.helperlibs.ArgParse import ArgTypedDict
    from cputopolibs.helperlibs.HostFS import HostFSType

_VERSION = "1.0.0"
TOOLNAME = "cputopo"

# Dataset names are looked up in this directory. It exists only in the source tree: an installed
# 'cputopo' accepts only dataset directory paths.
_DATASETS_PATH = Path(__file__).resolve().parent.parent / "tests" / "data"

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.{TOOLNAME}").configure(prefix=TOOLNAME)

_DATASET_OPTION: ArgTypedDict = {
    "short": "-D",
    "long": "--dataset",
    "argcomplete": "DirectoriesCompleter",
    "kwargs": {
        "dest": "dataset",
        "default": None,
        "help": f"""This option is for debugging and testing. It specifies the dataset to emulate a
                    host for running the command. The argument is a dataset directory path, or,
                    when running from the source tree, a dataset name in '{_DATASETS_PATH}'."""
    },
}

_SYSFS_ROOT_OPTION: ArgTypedDict = {
    "short": None,
    "long": "--sysfs-root",
    "argcomplete": "DirectoriesCompleter",
    "kwargs": {
        "dest": "sysfs_root",
        "default": str(SysfsReader.SYSFS_ROOT),
        "metavar": "PATH",
        "help": f"""Path to the sysfs root directory on the target host. The default is
                    '{SysfsReader.SYSFS_ROOT}'."""
    },
}

# Options accepted both before and after the command name.
_GLOBAL_OPTIONS: list[ArgTypedDict] = ArgParse.SSH_OPTIONS + [_DATASET_OPTION, _SYSFS_ROOT_OPTION]

def build_arguments_parser() -> ArgParse.ArgsParser:
    """Build and return the command-line arguments parser object."""

    text = f"{TOOLNAME} - print CPU and NUMA topology of a Linux host."
    parser = ArgParse.ArgsParser(description=text, prog=TOOLNAME, ver=_VERSION)
    ArgParse.add_options(parser, _GLOBAL_OPTIONS)

    # The command parsers inherit the global options from this parser.
    gparser = argparse.ArgumentParser(add_help=False)
    ArgParse.add_options(gparser, _GLOBAL_OPTIONS, suppress_defaults=True)

    subparsers = parser.add_subparsers(title="commands", dest="a command")
    subparsers.required = True

    #
    # The 'topology' command.
    #
    text = "CPU topology commands."
    descr = """CPU topology commands: present and online CPUs, core and package siblings, and
               NUMA nodes."""
    subpars = subparsers.add_parser("topology", help=text, description=descr)
    subparsers2 = subpars.add_subparsers(title="further sub-commands", dest="a sub-command")
    subparsers2.required = True

    text = "Print CPU topology."
    descr = """Print CPU topology: core siblings, package siblings, package number and NUMA node
               number of every online CPU, as well as the lists of present, online, and offline
               CPUs."""
    subpars2 = subparsers2.add_parser("info", help=text, description=descr, parents=[gparser])
    subpars2.set_defaults(func=_topology_info_command)

    text = "Print only the lists of present, online, and offline CPUs."
    subpars2.add_argument("--cpus-only", action="store_true", help=text)
    text = "Print the topology in YAML format."
    subpars2.add_argument("--yaml", action="store_true", help=text)

    #
    # The 'distances' command.
    #
    text = "NUMA distances commands."
    descr = "NUMA distances commands: relative memory access cost between NUMA nodes."
    subpars = subparsers.add_parser("distances", help=text, description=descr)
    subparsers2 = subpars.add_subparsers(title="further sub-commands", dest="a sub-command")
    subparsers2.required = True

    text = "Print the NUMA distance matrix."
    descr = """Print the NUMA distance matrix: the distance between every pair of online NUMA
               nodes."""
    subpars2 = subparsers2.add_parser("info", help=text, description=descr, parents=[gparser])
    subpars2.set_defaults(func=_distances_info_command)

    text = "Print the distance matrix in YAML format."
    subpars2.add_argument("--yaml", action="store_true", help=text)

    argcomplete.autocomplete(parser)

    return parser

def parse_arguments() -> argparse.Namespace:
    """Parse and validate the command-line arguments."""

    args = build_arguments_parser().parse_args()

    if args.dataset and args.hostname != "localhost":
        raise Error("The '--dataset' and '--host' options cannot be used together")

    return args

# pylint: disable=import-outside-toplevel

def _topology_info_command(args: argparse.Namespace, hfs: HostFSType):
    """Implement the 'topology info' command."""

    from cputopotool import _CPUTopoTopology

    _CPUTopoTopology.topology_info_command(args, hfs)

def _distances_info_command(args: argparse.Namespace, hfs: HostFSType):
    """Implement the 'distances info' command."""

    from cputopotool import _CPUTopoDistances

    _CPUTopoDistances.distances_info_command(args, hfs)

def _get_emul_hfs(dataset: str) -> HostFSType:
    """Return an emulated host file-system object for the dataset specified with '-D'."""

    from cputopolibs.helperlibs import EmulHostFS

    path = Path(dataset)
    if not path.is_dir():
        path = _DATASETS_PATH / dataset
        if not path.is_dir():
            raise Error(f"Dataset '{dataset}' not found: it is neither a directory path nor a "
                        f"dataset name in '{_DATASETS_PATH}'")

    hfs = EmulHostFS.EmulHostFS(hostname=f"emulation:{path.name}")
    try:
        hfs.init_emul_data(path)
    except Error:
        hfs.close()
        raise

    return hfs

def main() -> int:
    """Script entry point."""

    try:
        args = parse_arguments()

        if args.dataset:
            hfs = _get_emul_hfs(args.dataset)
        else:
            sshargs = ArgParse.format_ssh_args(args)
            hfs = HostFS.get_hfs(sshargs["hostname"], username=sshargs["username"],
                                 privkeypath=sshargs["privkey"], timeout=sshargs["timeout"])
        with hfs:
            args.func(args, hfs)
    except KeyboardInterrupt:
        _LOG.info("\nInterrupted, exiting")
        return -1
    except Error as err:
        _LOG.error_out(err)

    return 0

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
#
# Copyright (C) 2022-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Author: Antti Laakso <antti.laakso@linux.intel.com>
#         Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Select the hosts to run the host-dependent tests on.

Tests requesting the 'hostspec' fixture run once per emulation dataset in 'tests/data', or once on
the host given with '--host'.
"""

from pathlib import Path
import pytest

DATA_PATH = Path(__file__).parent.resolve() / "data"

def pytest_addoption(parser):
    """Add the '--host' and '--dataset' options."""

    text = """The host to run the tests on: "emulation" (default) to use the emulation datasets,
              "localhost" to read the local sysfs, or a host name to read sysfs over SSH."""
    parser.addoption("-H", "--host", dest="hostname", default="emulation", help=text)

    text = """The emulation dataset name to use, all datasets by default."""
    parser.addoption("-D", "--dataset", dest="dataset", default="all", help=text)

def pytest_configure(config):
    """Verify that the requested dataset exists."""

    dataset = config.getoption("dataset")
    if dataset != "all" and not (DATA_PATH / dataset).is_dir():
        pytest.exit(f"Dataset '{dataset}' not found in '{DATA_PATH}'")

def pytest_generate_tests(metafunc):
    """Parametrize the 'hostspec' fixture."""

    if "hostspec" not in metafunc.fixturenames:
        return

    hostname = metafunc.config.getoption("hostname")
    if hostname != "emulation":
        hostspecs = [hostname]
    else:
        dataset = metafunc.config.getoption("dataset")
        if dataset == "all":
            datasets = sorted(path.name for path in DATA_PATH.iterdir() if path.is_dir())
        else:
            datasets = [dataset]
        hostspecs = [f"emulation:{name}" for name in datasets]

    metafunc.parametrize("hostspec", hostspecs, scope="module")

# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Tests for the 'YAML' module.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

import io
from pathlib import Path
import pytest
from cputopolibs.helperlibs import YAML
from cputopolibs.helperlibs.Exceptions import Error, ErrorBadFormat

def test_dump_load(tmp_path):
    """Verify that dumped data loads back."""

    data = {"online": (0, 1, 2), "node_cpus": {0: [0, 1], 1: []}, "root": Path("/sys"),
            "comment": None}
    path = tmp_path / "topo.yaml"

    YAML.dump(data, path)
    loaded = YAML.load(path)

    assert loaded == {"online": [0, 1, 2], "node_cpus": {0: [0, 1], 1: []}, "root": "/sys",
                      "comment": None}

def test_dump_stream():
    """Verify dumping to a file object, keys order, and the flow style of lists."""

    stream = io.StringIO()
    YAML.dump({"present": [0, 1], "online": [0]}, stream, flow_lists=True)

    assert stream.getvalue() == "present: [0, 1]\nonline: [0]\n"

    stream = io.StringIO()
    YAML.dump({"online": [0]}, stream)

    assert stream.getvalue() == "online:\n- 0\n"

def test_load_errors(tmp_path):
    """Verify the exceptions raised by 'load()'."""

    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert not YAML.load(path)

    path = tmp_path / "list.yaml"
    path.write_text("- 0\n- 1\n", encoding="utf-8")
    with pytest.raises(ErrorBadFormat):
        YAML.load(path)

    path = tmp_path / "bad.yaml"
    path.write_text("files: [0\n", encoding="utf-8")
    with pytest.raises(ErrorBadFormat):
        YAML.load(path)

    with pytest.raises(Error):
        YAML.load(tmp_path / "nonexistent.yaml")

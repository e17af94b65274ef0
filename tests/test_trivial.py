# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Tests for the 'Trivial' module.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from typing import TypedDict
import pytest
from cputopolibs.helperlibs import Trivial
from cputopolibs.helperlibs.Exceptions import ErrorBadFormat

class _RangesTestDataType(TypedDict):
    """Type for the '_RANGES_TEST_DATA' list."""
    text: str
    nums: list[int]

_RANGES_TEST_DATA: list[_RangesTestDataType] = [
    {"text": "", "nums": []},
    {"text": "\n", "nums": []},
    {"text": "0", "nums": [0]},
    {"text": "0-3", "nums": [0, 1, 2, 3]},
    {"text": "0,2,4-7", "nums": [0, 2, 4, 5, 6, 7]},
    {"text": " 0 , 2 ,4 - 7 ", "nums": [0, 2, 4, 5, 6, 7]},
    {"text": "5-5", "nums": [5]},
    {"text": "8,0-1", "nums": [0, 1, 8]},
    {"text": "1,0-2,2", "nums": [0, 1, 2]},
    {"text": "0,,1,", "nums": [0, 1]},
    {"text": "010", "nums": [10]},
]

_RANGES_BAD_DATA: list[str] = ["a", "0-a", "-1", "1-", "3-1", "1-2-3", "0x1", "1 2", "1.5"]

def test_parse_ranges():
    """Test the 'parse_ranges()' function."""

    for entry in _RANGES_TEST_DATA:
        text = entry["text"]
        expected = entry["nums"]

        result = Trivial.parse_ranges(text)
        assert result == expected, \
               f"Bad result of parse_ranges('{text}'):\nexpected '{expected}', got '{result}'"

    for text in _RANGES_BAD_DATA:
        with pytest.raises(ErrorBadFormat) as excinfo:
            Trivial.parse_ranges(text, what="CPU numbers")
        assert "CPU numbers" in str(excinfo.value)

class _RangifyTestDataType(TypedDict):
    """Type for the '_RANGIFY_TEST_DATA' list."""
    nums: list[int]
    text: str

_RANGIFY_TEST_DATA: list[_RangifyTestDataType] = [
    {"nums": [], "text": ""},
    {"nums": [0], "text": "0"},
    {"nums": [0, 1], "text": "0,1"},
    {"nums": [0, 1, 2], "text": "0-2"},
    {"nums": [3, 2, 1, 0], "text": "0-3"},
    {"nums": [0, 2, 4, 5, 6, 7], "text": "0,2,4-7"},
    {"nums": [5, 6, 7, 8, 10, 11, 13], "text": "5-8,10,11,13"},
    {"nums": [1, 1, 2, 3], "text": "1-3"},
]

def test_rangify():
    """Test the 'rangify()' function."""

    for entry in _RANGIFY_TEST_DATA:
        nums = entry["nums"]
        expected = entry["text"]

        result = Trivial.rangify(nums)
        assert result == expected, \
               f"Bad result of rangify({nums}):\nexpected '{expected}', got '{result}'"

        # The range list decodes back to the sorted unique numbers.
        assert Trivial.parse_ranges(result) == sorted(set(nums))

def test_str_to_int():
    """Test the 'str_to_int()' function."""

    assert Trivial.str_to_int("10") == 10
    assert Trivial.str_to_int(" 10\n") == 10
    assert Trivial.str_to_int("0x10", base=0) == 16
    assert Trivial.str_to_int("-3") == -3
    assert Trivial.str_to_int(7) == 7

    for snum in ("", "ten", "1.0", "1 2", "0x10"):
        with pytest.raises(ErrorBadFormat):
            Trivial.str_to_int(snum)

    with pytest.raises(ErrorBadFormat) as excinfo:
        Trivial.str_to_int("x", what="package number")
    assert "package number" in str(excinfo.value)

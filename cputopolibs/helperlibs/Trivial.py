# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Decode integers and CPU/node range lists, such as "0-3,8", and encode them back.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from cputopolibs.helperlibs.Exceptions import ErrorBadFormat

if typing.TYPE_CHECKING:
    from typing import Iterable

def str_to_int(snum: str | int, base: int = 10, what: str = "value") -> int:
    """
    Convert a string to an integer. Surrounding white-spaces are allowed.

    Args:
        snum: The string to convert.
        base: Base of 'snum', 0 means auto-detect by the prefix (e.g., '0x').
        what: Description of the value for the error message.

    Raises:
        ErrorBadFormat: If 'snum' is not an integer.
    """

    try:
        return int(str(snum).strip(), base)
    except ValueError:
        kind = "an integer" if base in (0, 10) else f"a base {base} integer"
        raise ErrorBadFormat(f"Bad {what} '{snum}': should be {kind}") from None

def parse_ranges(text: str, what: str = "value") -> list[int]:
    """
    Decode a comma-separated list of non-negative integers and integer ranges.

    Args:
        text: The text to decode, e.g., "0,2,4-7". An empty string is an empty list.
        what: Description of the list for the error message.

    Returns:
        The integers in ascending order, without duplicates. For example, "8,0-2,1" gives
        [0, 1, 2, 8].

    Raises:
        ErrorBadFormat: If 'text' is not a valid range list.
    """

    nums: set[int] = set()

    for item in text.split(","):
        item = item.strip()
        if not item:
            continue

        first, dash, last = item.partition("-")
        if not dash:
            nums.add(str_to_int(first, what=what))
            continue

        if not first.strip() or not last.strip():
            raise ErrorBadFormat(f"Bad {what} '{text.strip()}': bad range '{item}', should be "
                                 f"two integers separated by '-'")

        start = str_to_int(first, what=what)
        end = str_to_int(last, what=what)
        if start > end:
            raise ErrorBadFormat(f"Bad {what} '{text.strip()}': bad range '{item}', the first "
                                 f"number is greater than the second one")
        nums.update(range(start, end + 1))

    return sorted(nums)

def rangify(nums: Iterable[int]) -> str:
    """
    Encode integers as a comma-separated range list, the reverse of 'parse_ranges()'. Runs of 3
    or more consecutive numbers become ranges, e.g., [0, 1, 2, 4, 5] gives "0-2,4,5".
    """

    runs: list[list[int]] = []
    for num in sorted(set(nums)):
        if runs and runs[-1][-1] == num - 1:
            runs[-1].append(num)
        else:
            runs.append([num])

    items = []
    for run in runs:
        if len(run) > 2:
            items.append(f"{run[0]}-{run[-1]}")
        else:
            items += [str(num) for num in run]

    return ",".join(items)

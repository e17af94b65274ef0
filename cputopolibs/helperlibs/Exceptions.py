# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Exception types used in this project.

The exception kinds follow the stages a topology object goes through:
    * Reading sysfs files fails: 'ErrorNotFound', 'ErrorPermissionDenied', or plain 'Error'.
    * Decoding the read text fails: 'ErrorBadFormat'.
    * Decoded data is structurally inconsistent: 'ErrorBadRow'.
    * A query refers to an ID the object does not know about: 'ErrorUnknownID'.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

class Error(Exception):
    """The base class for all exceptions raised by this project."""

    def __init__(self, msg: str):
        """Initialize the exception object with message 'msg'."""

        self.msg = str(msg)
        super().__init__(self.msg)

    def indent(self, indent: int) -> str:
        """
        Return the error message with every line indented by 'indent' spaces and the first letter
        capitalized. Used for nesting an error message into another one.
        """

        pfx = " " * indent
        msg = self.msg[:1].upper() + self.msg[1:]
        return pfx + msg.replace("\n", f"\n{pfx}")

    def __str__(self):
        """The string representation of the exception."""
        return self.msg

class ErrorNotFound(Error):
    """Something was not found."""

class ErrorPermissionDenied(Error):
    """Access to something was denied."""

class ErrorBadFormat(Error):
    """Bad format of something, e.g., file contents."""

class ErrorBadRow(Error):
    """A distance row is inconsistent with the set of NUMA nodes."""

    def __init__(self,
                 msg: str,
                 node: int | None = None,
                 expected: int | None = None,
                 actual: int | None = None):
        """
        Initialize the exception object.

        Args:
            msg: The exception message.
            node: The NUMA node number the bad row belongs to.
            expected: The expected row length.
            actual: The actual row length.
        """

        super().__init__(msg)

        self.node = node
        self.expected = expected
        self.actual = actual

class ErrorUnknownID(Error):
    """A query refers to a CPU or NUMA node number which is not known."""

class ErrorConnect(Error):
    """Failed to connect to a remote host."""

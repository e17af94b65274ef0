# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Helpers for classes that own closable objects.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from typing import Any, Iterable

class SimpleCloseContext:
    """
    A context manager for classes with a 'close()' method. Subclass it to avoid duplicating the
    '__enter__()' and '__exit__()' methods.
    """

    def close(self):
        """Uninitialize the class object. Supposed to be implemented by the subclass."""

    def __enter__(self):
        """Enter the run-time context."""
        return self

    def __exit__(self, *_: Any):
        """Exit from the runtime context."""
        self.close()

def close(cls_obj: Any, close_attrs: Iterable[str]):
    """
    Close the objects referred to by attributes 'close_attrs' of 'cls_obj' and set the attributes
    to 'None'. An object borrowed from the caller is not closed: 'cls_obj' marks it by setting the
    '_close_<name>' attribute to 'False', where '<name>' is the attribute name without the leading
    underscores. For example, '_close_hfs = False' for attribute '_hfs'.
    """

    for attr in close_attrs:
        obj = getattr(cls_obj, attr, None)
        if obj is None:
            continue

        if getattr(cls_obj, f"_close_{attr.lstrip('_')}", True):
            obj.close()
        setattr(cls_obj, attr, None)

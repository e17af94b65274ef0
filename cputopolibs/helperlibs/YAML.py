# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Provide YAML file reading and writing capabilities.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

from pathlib import Path, PosixPath
from typing import Any, IO
import yaml
from cputopolibs.helperlibs import Logging
from cputopolibs.helperlibs.Exceptions import Error, ErrorBadFormat

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

class _Dumper(yaml.SafeDumper):
    """A YAML dumper with representers for 'None' and 'Path' objects."""

def _represent_none(dumper: yaml.SafeDumper, _) -> yaml.ScalarNode:
    """Represent 'None' values as empty strings in YAML output."""
    return dumper.represent_scalar("tag:yaml.org,2002:null", "")

def _represent_posixpath(dumper: yaml.SafeDumper, value: PosixPath) -> yaml.ScalarNode:
    """Represent a 'PosixPath' object as a YAML string."""
    return dumper.represent_scalar("tag:yaml.org,2002:str", str(value))

def _represent_tuple(dumper: yaml.SafeDumper, value: tuple) -> yaml.SequenceNode:
    """Represent a tuple as a plain YAML sequence."""
    return dumper.represent_list(list(value))

_Dumper.add_representer(type(None), _represent_none)
_Dumper.add_representer(PosixPath, _represent_posixpath)
_Dumper.add_representer(tuple, _represent_tuple)

def dump(data: dict[Any, Any], path: Path | IO[str], flow_lists: bool = False):
    """
    Dump a dictionary to a YAML file.

    Args:
        data: The dictionary to dump.
        path: The file path or file object to write the YAML data to.
        flow_lists: If True, use the flow style for the innermost lists (e.g., "[0, 1, 2]"), which
                    is more compact for lists of CPU numbers.
    """

    kwargs: dict[str, Any] = {"Dumper": _Dumper, "sort_keys": False}
    kwargs["default_flow_style"] = None if flow_lists else False

    try:
        if hasattr(path, "write"):
            yaml.dump(data, path, **kwargs)
            _LOG.debug("Wrote YAML file at '%s'", getattr(path, "name", "<stream>"))
        else:
            with open(path, "w", encoding="utf-8") as fobj:
                yaml.dump(data, fobj, **kwargs)
            _LOG.debug("Wrote YAML file at '%s'", path)
    except OSError as err:
        msg = Error(str(err)).indent(2)
        raise Error(f"Failed to write YAML file '{path}':\n{msg}") from err

def load(path: str | Path) -> dict[Any, Any]:
    """
    Load a YAML file.

    Args:
        path: Path to the YAML file to load.

    Returns:
        A dictionary representing the contents of the loaded YAML file. An empty dictionary if the
        file is empty.

    Raises:
        ErrorBadFormat: If the file is not valid YAML or does not describe a dictionary.
    """

    try:
        with open(path, "r", encoding="utf-8") as fobj:
            loaded = yaml.safe_load(fobj)
    except yaml.YAMLError as err:
        msg = Error(str(err)).indent(2)
        raise ErrorBadFormat(f"Failed to parse YAML file '{path}':\n{msg}") from None
    except OSError as err:
        msg = Error(str(err)).indent(2)
        raise Error(f"Failed to read YAML file '{path}':\n{msg}") from None

    if not loaded:
        return {}

    if not isinstance(loaded, dict):
        raise ErrorBadFormat(f"Bad YAML file '{path}': expected a dictionary at the top level, "
                             f"got '{type(loaded).__name__}'")

    _LOG.debug("Loaded YAML file at '%s'", path)
    return loaded

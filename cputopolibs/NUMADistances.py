# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Provide the NUMA distance matrix: the relative memory access cost between every pair of online
NUMA nodes.

The matrix is read from the 'node<N>/distance' sysfs files, one row per online NUMA node. Each row
has one integer per online NUMA node, in ascending node number order, the self-distance being the
intra-node baseline (typically 10).
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from types import MappingProxyType
from cputopolibs import SysfsReader
from cputopolibs.helperlibs import Logging, Trivial
from cputopolibs.helperlibs.Exceptions import ErrorBadFormat, ErrorBadRow, ErrorUnknownID

if typing.TYPE_CHECKING:
    from typing import Iterable, Mapping
    from pathlib import Path
    from cputopolibs.helperlibs.HostFS import HostFSType

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

class NUMADistances:
    """
    The NUMA distance matrix.

    Public methods overview.
        * 'between_nodes()' - distance between two NUMA nodes.
        * 'get_row()' - distances from a NUMA node to all online NUMA nodes.
        * 'is_symmetric()' - check whether the matrix is symmetric.
        * 'to_dict()' - plain dictionary view of the matrix.

    Use 'build()' to read the matrix from sysfs, or 'from_rows()' to create it from text rows.
    Symmetry is not required: an asymmetric matrix is reported as is.
    """

    def __init__(self, rows: Mapping[int, Iterable[int]]):
        """
        Initialize a class instance and validate the matrix.

        Args:
            rows: NUMA node number -> distances from this node to all nodes in 'rows', in ascending
                  node number order.

        Raises:
            ErrorBadRow: If a row does not have exactly one entry per NUMA node, or has a negative
                         entry.
        """

        self._nodes = tuple(sorted(rows))

        frozen: dict[int, tuple[int, ...]] = {}
        for node in self._nodes:
            row = tuple(rows[node])

            if len(row) != len(self._nodes):
                raise ErrorBadRow(f"Bad distance row of NUMA node {node}: has {len(row)} "
                                  f"entries, but there are {len(self._nodes)} online NUMA nodes",
                                  node=node, expected=len(self._nodes), actual=len(row))

            for dist in row:
                if dist < 0:
                    raise ErrorBadRow(f"Bad distance row of NUMA node {node}: negative distance "
                                      f"'{dist}'", node=node)

            frozen[node] = row

        self._rows = MappingProxyType(frozen)
        self._idx = {node: idx for idx, node in enumerate(self._nodes)}

    @property
    def nodes(self) -> tuple[int, ...]:
        """Online NUMA node numbers, ascending."""
        return self._nodes

    def _validate_node(self, node: int, what: str):
        """Raise 'ErrorUnknownID' if 'node' is not an online NUMA node number."""

        # Booleans and floats compare equal to integers, but are not node numbers.
        if not isinstance(node, int) or isinstance(node, bool) or node not in self._idx:
            nodes = Trivial.rangify(self._nodes) if self._nodes else "none"
            raise ErrorUnknownID(f"Bad {what} NUMA node '{node}': not an online NUMA node, "
                                 f"online NUMA nodes are: {nodes}")

    def between_nodes(self, from_node: int, to_node: int) -> int:
        """
        Return the distance between two NUMA nodes.

        Args:
            from_node: The source NUMA node number.
            to_node: The destination NUMA node number.

        Returns:
            The distance from 'from_node' to 'to_node'.

        Raises:
            ErrorUnknownID: If 'from_node' or 'to_node' is not an online NUMA node number.
        """

        self._validate_node(from_node, "source")
        self._validate_node(to_node, "destination")

        return self._rows[from_node][self._idx[to_node]]

    def get_row(self, node: int) -> tuple[int, ...]:
        """
        Return the distances from NUMA node 'node' to all online NUMA nodes, in ascending node
        number order.

        Raises:
            ErrorUnknownID: If 'node' is not an online NUMA node number.
        """

        self._validate_node(node, "source")
        return self._rows[node]

    def is_symmetric(self) -> bool:
        """Return 'True' if the distance from A to B equals the distance from B to A."""

        for from_node in self._nodes:
            for to_node in self._nodes:
                if from_node >= to_node:
                    continue
                if self.between_nodes(from_node, to_node) != self.between_nodes(to_node, from_node):
                    return False
        return True

    def to_dict(self) -> dict[int, list[int]]:
        """Return the matrix as a dictionary: NUMA node number -> list of distances."""
        return {node: list(row) for node, row in self._rows.items()}

    def __repr__(self) -> str:
        """Return a short description of the matrix."""
        return f"NUMADistances(nodes={list(self._nodes)})"

    @classmethod
    def from_rows(cls, rows: Mapping[str | int, str]) -> NUMADistances:
        """
        Create the distance matrix from text rows.

        Args:
            rows: NUMA node number (e.g., "0") -> white-space separated distances (e.g., "10 21").
                  The NUMA node numbers are the online NUMA nodes. Surrounding white-spaces,
                  including the trailing newline, are allowed.

        Returns:
            The 'NUMADistances' object.

        Raises:
            ErrorBadFormat: If a NUMA node number is not a non-negative integer, or a row has a
                            non-integer entry.
            ErrorBadRow: If a row is inconsistent with the set of NUMA nodes.

        Example:
            NUMADistances.from_rows({"0": "10 21", "1": "21 10"})
        """

        decoded: dict[int, list[int]] = {}
        for key, text in rows.items():
            node = Trivial.str_to_int(str(key).strip(), base=10, what="NUMA node number")
            if node < 0:
                raise ErrorBadFormat(f"Bad NUMA node number '{key}': should be a non-negative "
                                     f"integer")
            if node in decoded:
                raise ErrorBadFormat(f"Duplicate NUMA node number '{key}'")

            what = f"NUMA node {node} distance"
            try:
                decoded[node] = [Trivial.str_to_int(dist, base=10, what=what)
                                 for dist in str(text).split()]
            except ErrorBadFormat as err:
                raise ErrorBadFormat(f"Bad {what} row '{str(text).strip()}': should be "
                                     f"white-space separated integers:\n{err.indent(2)}") from err

        return cls(decoded)

    @classmethod
    def build(cls,
              root: str | Path = SysfsReader.SYSFS_ROOT,
              hfs: HostFSType | None = None) -> NUMADistances:
        """
        Read the distance matrix from sysfs.

        Args:
            root: Path to the sysfs root directory on the target host.
            hfs: The host file-system object that defines the target host. Use the local host if not
                 provided.

        Returns:
            The 'NUMADistances' object.

        Raises:
            Error: If any of the sysfs files cannot be read or decoded.
            ErrorBadRow: If a distance row is inconsistent with the set of online NUMA nodes.
        """

        node_dir = SysfsReader.NODE_SUBDIR

        with SysfsReader.SysfsReader(root=root, hfs=hfs) as sysfs:
            _LOG.debug("Building NUMA distances from '%s'%s", sysfs.root, sysfs.hostmsg)

            nodes = sysfs.read_range(node_dir / "online", what="online NUMA nodes")

            rows: dict[int, list[int]] = {}
            for node in nodes:
                rows[node] = sysfs.read_ints(node_dir / f"node{node}" / "distance",
                                             what=f"NUMA node {node} distances")

        dists = cls(rows)
        _LOG.debug("Built %r", dists)
        return dists

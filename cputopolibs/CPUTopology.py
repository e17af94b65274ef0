# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

"""
Provide the CPU topology snapshot: present and online CPUs, core and package siblings, package
numbers, and NUMA nodes with their CPUs.

The snapshot is built once by 'CPUTopology.build()' and is read-only afterwards. Sequences are
tuples and mappings are read-only mapping proxies, so consumers cannot modify the snapshot by
accident.
"""

from __future__ import annotations # Remove when switching to Python 3.10+.

import typing
from types import MappingProxyType
from cputopolibs import SysfsReader
from cputopolibs.helperlibs import Logging
from cputopolibs.helperlibs.Exceptions import ErrorUnknownID

if typing.TYPE_CHECKING:
    from typing import Iterable, Mapping, TypedDict
    from pathlib import Path
    from cputopolibs.helperlibs.HostFS import HostFSType

    class CPUTopologyTypedDict(TypedDict):
        """
        A plain dictionary view of the CPU topology snapshot.

        Attributes:
            present: All CPU numbers known to the system (online and offline).
            online: Online CPU numbers.
            offline: Offline CPU numbers.
            packages: Package numbers of online CPUs, one entry per online CPU.
            numa_nodes: Online NUMA node numbers.
            core_siblings: CPU number -> CPUs sharing the same core.
            package_siblings: CPU number -> CPUs sharing the same package.
            node_cpus: NUMA node number -> CPUs of the node.
        """

        present: list[int]
        online: list[int]
        offline: list[int]
        packages: list[int]
        numa_nodes: list[int]
        core_siblings: dict[int, list[int]]
        package_siblings: dict[int, list[int]]
        node_cpus: dict[int, list[int]]

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

def _freeze_map(mapping: Mapping[int, Iterable[int]]) -> Mapping[int, tuple[int, ...]]:
    """Return a read-only copy of a mapping of integer lists."""
    return MappingProxyType({key: tuple(vals) for key, vals in mapping.items()})

class CPUTopology:
    """
    The CPU topology snapshot.

    Public methods overview.
        * 'node_for_cpu()' - NUMA node number of a CPU.
        * 'get_offline_cpus()' - offline CPU numbers.
        * 'get_unique_packages()' - package numbers without duplicates.
        * 'get_cpu_package()' - package number of an online CPU.
        * 'to_dict()' - plain dictionary view of the snapshot.

    Use 'build()' to read the snapshot from sysfs.
    """

    def __init__(self,
                 present: Iterable[int],
                 online: Iterable[int],
                 core_siblings: Mapping[int, Iterable[int]],
                 package_siblings: Mapping[int, Iterable[int]],
                 packages: Iterable[int],
                 numa_nodes: Iterable[int],
                 node_cpus: Mapping[int, Iterable[int]]):
        """
        Initialize a class instance from already decoded topology data.

        Args:
            present: All CPU numbers known to the system, ascending.
            online: Online CPU numbers, ascending.
            core_siblings: Online CPU number -> CPUs sharing the same core (thread siblings).
            package_siblings: Online CPU number -> CPUs sharing the same package (core siblings).
            packages: Package number of every online CPU, in online CPUs order.
            numa_nodes: Online NUMA node numbers, ascending.
            node_cpus: NUMA node number -> CPUs of the node.
        """

        self._present = tuple(present)
        self._online = tuple(online)
        self._core_siblings = _freeze_map(core_siblings)
        self._package_siblings = _freeze_map(package_siblings)
        self._packages = tuple(packages)
        self._numa_nodes = tuple(numa_nodes)
        self._node_cpus = _freeze_map(node_cpus)

        # The reverse of 'node_cpus': CPU number -> NUMA node number. If a CPU is listed under
        # several nodes, the highest node number wins.
        self._cpu2node: dict[int, int] = {}
        for node in sorted(self._node_cpus):
            for cpu in self._node_cpus[node]:
                self._cpu2node[cpu] = node

        # Online CPU number -> package number.
        self._cpu2package = dict(zip(self._online, self._packages))

    @property
    def present(self) -> tuple[int, ...]:
        """All CPU numbers known to the system (online and offline), ascending."""
        return self._present

    @property
    def online(self) -> tuple[int, ...]:
        """Online CPU numbers, ascending."""
        return self._online

    @property
    def core_siblings(self) -> Mapping[int, tuple[int, ...]]:
        """Online CPU number -> CPUs sharing the same core."""
        return self._core_siblings

    @property
    def package_siblings(self) -> Mapping[int, tuple[int, ...]]:
        """Online CPU number -> CPUs sharing the same package."""
        return self._package_siblings

    @property
    def packages(self) -> tuple[int, ...]:
        """Package numbers, one entry per online CPU, in online CPUs order."""
        return self._packages

    @property
    def numa_nodes(self) -> tuple[int, ...]:
        """Online NUMA node numbers, ascending."""
        return self._numa_nodes

    @property
    def node_cpus(self) -> Mapping[int, tuple[int, ...]]:
        """NUMA node number -> CPUs of the node."""
        return self._node_cpus

    def node_for_cpu(self, cpu: int) -> int | None:
        """
        Return the NUMA node number of a CPU.

        Args:
            cpu: The CPU number to look up.

        Returns:
            The NUMA node number, or 'None' if the CPU is not listed under any online NUMA node.
        """

        return self._cpu2node.get(cpu)

    def get_offline_cpus(self) -> list[int]:
        """Return offline CPU numbers (present, but not online), ascending."""

        online = set(self._online)
        return [cpu for cpu in self._present if cpu not in online]

    def get_unique_packages(self) -> list[int]:
        """Return package numbers of online CPUs without duplicates, ascending."""
        return sorted(set(self._packages))

    def get_cpu_package(self, cpu: int) -> int:
        """
        Return the package number of an online CPU.

        Args:
            cpu: The online CPU number.

        Returns:
            The package number.

        Raises:
            ErrorUnknownID: If 'cpu' is not an online CPU.
        """

        try:
            return self._cpu2package[cpu]
        except KeyError:
            raise ErrorUnknownID(f"CPU {cpu} is not online or does not exist") from None

    def to_dict(self) -> CPUTopologyTypedDict:
        """Return the snapshot as a dictionary of plain lists and dictionaries."""

        def _thaw(mapping: Mapping[int, tuple[int, ...]]) -> dict[int, list[int]]:
            """Return a plain dictionary copy of a frozen mapping."""
            return {key: list(vals) for key, vals in mapping.items()}

        return {"present": list(self._present),
                "online": list(self._online),
                "offline": self.get_offline_cpus(),
                "packages": list(self._packages),
                "numa_nodes": list(self._numa_nodes),
                "core_siblings": _thaw(self._core_siblings),
                "package_siblings": _thaw(self._package_siblings),
                "node_cpus": _thaw(self._node_cpus)}

    def __repr__(self) -> str:
        """Return a short description of the snapshot."""

        return f"CPUTopology(online={len(self._online)}/{len(self._present)} CPUs, " \
               f"nodes={list(self._numa_nodes)})"

    @classmethod
    def build(cls,
              root: str | Path = SysfsReader.SYSFS_ROOT,
              hfs: HostFSType | None = None) -> CPUTopology:
        """
        Read CPU topology from sysfs and build the topology snapshot.

        Args:
            root: Path to the sysfs root directory on the target host.
            hfs: The host file-system object that defines the target host. Use the local host if not
                 provided.

        Returns:
            The 'CPUTopology' object.

        Raises:
            Error: If any of the sysfs files cannot be read or decoded. Nothing is returned in this
                   case, there are no partially built snapshots.
        """

        cpu_dir = SysfsReader.CPU_SUBDIR
        node_dir = SysfsReader.NODE_SUBDIR

        with SysfsReader.SysfsReader(root=root, hfs=hfs) as sysfs:
            _LOG.debug("Building CPU topology from '%s'%s", sysfs.root, sysfs.hostmsg)

            present = sysfs.read_range(cpu_dir / "present", what="present CPUs")
            online = sysfs.read_range(cpu_dir / "online", what="online CPUs")
            numa_nodes = sysfs.read_range(node_dir / "online", what="online NUMA nodes")

            core_siblings: dict[int, list[int]] = {}
            package_siblings: dict[int, list[int]] = {}
            packages: list[int] = []

            for cpu in online:
                topo_dir = cpu_dir / f"cpu{cpu}" / "topology"

                core_siblings[cpu] = sysfs.read_range(topo_dir / "thread_siblings_list",
                                                      what=f"CPU {cpu} core siblings")
                package_siblings[cpu] = sysfs.read_range(topo_dir / "core_siblings_list",
                                                         what=f"CPU {cpu} package siblings")
                packages.append(sysfs.read_int(topo_dir / "physical_package_id",
                                               what=f"CPU {cpu} package number"))

            node_cpus: dict[int, list[int]] = {}
            for node in numa_nodes:
                node_cpus[node] = sysfs.read_range(node_dir / f"node{node}" / "cpulist",
                                                   what=f"NUMA node {node} CPUs")

        topo = cls(present, online, core_siblings, package_siblings, packages, numa_nodes,
                   node_cpus)
        _LOG.debug("Built %r", topo)
        return topo

# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# Author: Artem Bityutskiy <artem.bityutskiy@linux.intel.com>

"""
Read files on a remote host over SFTP, so that sysfs files of a remote host can be read the same
way as local ones.

SECURITY NOTICE: this module and any part of it should only be used for debugging and development
purposes. No security audit had been done. Not for production use.
"""

from  __future__ import annotations # Remove when switching to Python 3.10+.

import getpass
import logging
from pathlib import Path
import paramiko
from cputopolibs.helperlibs import Logging, _HostFSBase, ClassHelpers
from cputopolibs.helperlibs.Exceptions import Error, ErrorConnect

_LOG = Logging.getLogger(f"{Logging.MAIN_LOGGER_NAME}.cputopo.{__name__}")

# Paramiko is a bit too noisy, lower its log level.
logging.getLogger("paramiko").setLevel(logging.WARNING)

class SSHHostFS(_HostFSBase.HostFSBase):
    """Read files on a remote host over SFTP."""

    def __init__(self,
                 hostname: str,
                 username: str = "",
                 privkeypath: str | Path | None = None,
                 timeout: int | float | None = None):
        """
        Initialize a class instance and establish SSH connection to a remote host.

        Args:
            hostname: The name of the host to connect to.
            username: Username for authentication. Defaults to the current user.
            privkeypath: Path to the private key for authentication. By default, use the SSH
                         agent and the standard key locations.
            timeout: Timeout for establishing the SSH connection in seconds. Defaults to 60
                     seconds.

        Raises:
            ErrorConnect: If SSH connection cannot be established.
        """

        super().__init__(hostname, f" on host '{hostname}'")

        self.username = username or getpass.getuser()
        self.timeout = float(timeout or 60)
        self.privkeypath = str(privkeypath) if privkeypath else None

        self._sftp: paramiko.SFTPClient | None = None
        self._ssh: paramiko.SSHClient | None = paramiko.SSHClient()
        self._ssh.set_missing_host_key_policy(paramiko.AutoAddPolicy())

        _LOG.debug("Connecting to '%s' as '%s', timeout %s, private key '%s'",
                   hostname, self.username, self.timeout, self.privkeypath)

        errmsg = f"Cannot connect to host '{hostname}' as '{self.username}'"
        try:
            self._ssh.connect(hostname=hostname, username=self.username,
                              key_filename=self.privkeypath, timeout=self.timeout,
                              allow_agent=True, look_for_keys=True)
        except paramiko.AuthenticationException as err:
            self._ssh.close()
            raise ErrorConnect(f"{errmsg}: authentication failed:\n"
                               f"{Error(str(err)).indent(2)}") from err
        except (paramiko.SSHException, OSError) as err:
            self._ssh.close()
            raise ErrorConnect(f"{errmsg} with {self.timeout} secs time-out:\n"
                               f"{Error(str(err)).indent(2)}") from err

    def close(self):
        """Close the SSH connection."""

        _LOG.debug("Closing SSH connection to '%s'", self.hostname)
        ClassHelpers.close(self, close_attrs=("_sftp", "_ssh"))

    def _read(self, path: str) -> str:
        """
        Refer to 'HostFSBase._read()'. The file is read in one go, because sysfs files are small
        and may change between partial reads.
        """

        assert self._ssh is not None

        try:
            if not self._sftp:
                self._sftp = self._ssh.open_sftp()
            with self._sftp.open(path, "r") as fobj:
                data = fobj.read()
        except paramiko.SSHException as err:
            raise Error(f"Failed to read file '{path}'{self.hostmsg} over SFTP:\n"
                        f"{Error(str(err)).indent(2)}") from err

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise Error(f"Failed to decode file '{path}'{self.hostmsg}:\n"
                        f"{Error(str(err)).indent(2)}") from err

#!/usr/bin/python
#
# Copyright (C) 2020-2025 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause
#
# -*- coding: utf-8 -*-
# vim: ts=4 sw=4 tw=100 et ai si
#
# Author: Antti Laakso <antti.laakso@intel.com>

"""
The main entry point for the 'cputopo' tool, used when the source tree or a zipapp archive of it
is run with the python interpreter.
"""

import sys
from cputopotool._CPUTopo import main

if __name__ == "__main__":
    sys.exit(main())

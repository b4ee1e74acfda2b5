# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later
from kernelver.helpers.arguments import arguments
import kernelver.helpers.release
import kernelver.helpers.version

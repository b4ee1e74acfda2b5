# Copyright 2021 Erfan Abdi
# SPDX-License-Identifier: GPL-3.0-or-later
from kernelver.actions.kernel import print_release, print_version
from kernelver.actions.versions import parse, decode, compare
from kernelver.actions.configure import write_config

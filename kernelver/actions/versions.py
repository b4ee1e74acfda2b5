# Copyright 2025 Bardia Moshiri
# SPDX-License-Identifier: GPL-3.0-or-later
from kernelver.helpers.version import Version

def print_version_info(version):
    print("Version:\t{}".format(version))
    print("Kernel code:\t{} ({:#x})".format(version.kernel(), version.kernel()))

def parse(args):
    if args.release:
        version = Version.from_kernel_release(args.VERSION)
    else:
        version = Version.parse(args.VERSION)
    print_version_info(version)

def decode(args):
    try:
        code = int(args.CODE, 0)
    except ValueError:
        raise ValueError("invalid version code: " + args.CODE)
    print_version_info(Version.from_code(code))

def compare(args):
    a = Version.parse(args.A)
    b = Version.parse(args.B)
    if a.less(b):
        relation = "<"
    elif b.less(a):
        relation = ">"
    else:
        relation = "=="
    print("{} {} {}".format(args.A, relation, args.B))

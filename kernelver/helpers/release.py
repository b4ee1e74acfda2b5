# Copyright 2025 Bardia Moshiri
# SPDX-License-Identifier: GPL-3.0-or-later
import functools
import os

OSRELEASE_PATH = "/proc/sys/kernel/osrelease"


def uname_release():
    return os.uname().release


def procfs_release(path=OSRELEASE_PATH):
    with open(path, "r") as handle:
        return handle.read().strip()


SOURCES = {
    "uname": uname_release,
    "procfs": procfs_release,
}


def get_source(name, osrelease_path=None):
    """
    Look up a kernel release source by name.

    :param name: "uname" or "procfs"
    :param osrelease_path: file read by the "procfs" source
    :returns: callable without arguments returning the release string
    """
    if name not in SOURCES:
        raise ValueError("Unknown kernel release source '" + name + "'"
                         " (options: " + ", ".join(sorted(SOURCES)) + ")")
    if name == "procfs" and osrelease_path:
        return functools.partial(procfs_release, osrelease_path)
    return SOURCES[name]

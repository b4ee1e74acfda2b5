# Copyright 2025 Bardia Moshiri
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import kernelver.config
import kernelver.helpers.release
import kernelver.helpers.version

def release_source(args):
    """
    Pick the kernel release source from the command line, falling back to
    the config file.
    """
    logging.verbose("Config: " + args.config)
    cfg = kernelver.config.load(args)
    name = args.release_source or cfg["kernelver"]["release_source"]
    logging.debug("Kernel release source: " + name)
    return kernelver.helpers.release.get_source(
        name, cfg["kernelver"]["osrelease_path"])

def print_release(args):
    print(kernelver.helpers.version.kernel_release(release_source(args)))

def print_version(args):
    version = kernelver.helpers.version.kernel_version(release_source(args))
    if args.code:
        print("{}\t{}".format(version, version.kernel()))
    else:
        print(version)

# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later
import argparse

try:
    import argcomplete
except ImportError:
    argcomplete = False

import kernelver.config
import kernelver.helpers.release

""" This file is about parsing command line arguments passed to kernelver,
    as well as generating the help pages (kernelver -h). The parsed
    arguments are stored in the "args" variable, which gets passed to the
    action functions in kernelver/actions. """

def arguments_release(subparser):
    ret = subparser.add_parser("release",
                               help="print the release of the running kernel")
    return ret

def arguments_version(subparser):
    ret = subparser.add_parser("version",
                               help="print the version of the running kernel")
    ret.add_argument("--code", action="store_true",
                     help="also print the packed KERNEL_VERSION() code")
    return ret

def arguments_parse(subparser):
    ret = subparser.add_parser("parse", help="parse a version string")
    ret.add_argument("VERSION", help="dotted version, e.g. 4.9.128")
    ret.add_argument("-r", "--release", action="store_true",
                     help="treat VERSION as a kernel release string, e.g."
                          " 5.4.0-65-generic")
    return ret

def arguments_decode(subparser):
    ret = subparser.add_parser("decode",
                               help="decode a packed KERNEL_VERSION() code")
    ret.add_argument("CODE", help="decimal or 0x prefixed hex code")
    return ret

def arguments_compare(subparser):
    ret = subparser.add_parser("compare", help="compare two versions")
    ret.add_argument("A", help="first dotted version")
    ret.add_argument("B", help="second dotted version")
    return ret

def arguments_config(subparser):
    ret = subparser.add_parser("config",
                               help="write the effective configuration")
    return ret

def arguments(argv=None):
    parser = argparse.ArgumentParser(prog="kernelver")

    # Other
    parser.add_argument("-V", "--version", action="version",
                        version=kernelver.config.version)
    parser.add_argument("-c", "--config", dest="config",
                        default=kernelver.config.defaults["config"],
                        help="path to config file (default: " +
                             kernelver.config.defaults["config"] + ")")
    parser.add_argument("-s", "--source", dest="release_source",
                        choices=sorted(kernelver.helpers.release.SOURCES),
                        help="where to read the kernel release from")

    # Logging
    parser.add_argument("-l", "--log", dest="log", default=None,
                        help="path to log file")
    parser.add_argument("--details-to-stdout", dest="details_to_stdout",
                        help="print debug messages to stdout as well",
                        action="store_true")
    parser.add_argument("-v", "--verbose", dest="verbose",
                        action="store_true", help="write even more to the"
                        " log")
    parser.add_argument("-q", "--quiet", dest="quiet", action="store_true",
                        help="do not output any log messages")

    # Actions
    sub = parser.add_subparsers(title="action", dest="action")

    arguments_release(sub)
    arguments_version(sub)
    arguments_parse(sub)
    arguments_decode(sub)
    arguments_compare(sub)
    arguments_config(sub)

    if argcomplete:
        argcomplete.autocomplete(parser, always_complete_options="long")

    # Parse and extend arguments (also backup unmodified result from argparse)
    args = parser.parse_args(argv)
    return args

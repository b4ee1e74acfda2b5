# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later
# PYTHON_ARGCOMPLETE_OK
import sys
import logging
import traceback

from . import actions
from . import config
from . import helpers
from .helpers import logging as kernelver_logging
from .helpers.version import (Version, InvalidVersionError,
                              KernelReleaseError, kernel_release,
                              kernel_version)


def main(argv=None):
    # Wrap everything to display nice error messages
    args = None
    try:
        # Parse arguments, set up logging
        args = helpers.arguments(argv)
        kernelver_logging.init(args)

        if args.action == "release":
            actions.print_release(args)
        elif args.action == "version":
            actions.print_version(args)
        elif args.action == "parse":
            actions.parse(args)
        elif args.action == "decode":
            actions.decode(args)
        elif args.action == "compare":
            actions.compare(args)
        elif args.action == "config":
            actions.write_config(args)
        else:
            logging.info("Run kernelver -h for usage information.")

    except Exception as e:
        # Dump log to stdout when args (and therefore logging) init failed
        if not args:
            logging.getLogger().setLevel(logging.DEBUG)

        logging.info("ERROR: " + str(e))
        logging.debug(traceback.format_exc())
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

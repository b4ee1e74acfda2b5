# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import kernelver.config

def write_config(args):
    cfg = kernelver.config.load(args)
    if args.release_source:
        cfg["kernelver"]["release_source"] = args.release_source
    kernelver.config.save(args, cfg)
    logging.info("Config written to " + args.config)

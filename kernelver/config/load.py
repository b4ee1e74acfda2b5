# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import configparser
import os
import kernelver.config

def load(args):
    cfg = configparser.ConfigParser()
    if os.path.isfile(args.config):
        cfg.read(args.config)

    if "kernelver" not in cfg:
        cfg["kernelver"] = {}

    for key in kernelver.config.config_keys:
        if key not in cfg["kernelver"]:
            cfg["kernelver"][key] = str(kernelver.config.defaults[key])

    # Drop whatever we don't know about, e.g. keys from newer versions
    for key in list(cfg["kernelver"]):
        if key not in kernelver.config.config_keys:
            logging.debug("Ignored unknown value from config: {}={}".format(
                key, cfg["kernelver"][key]))
            del cfg["kernelver"][key]

    return cfg

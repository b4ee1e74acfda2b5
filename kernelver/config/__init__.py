# Copyright 2021 Oliver Smith
# SPDX-License-Identifier: GPL-3.0-or-later
import os

#
# Exported functions
#
from kernelver.config.load import load
from kernelver.config.save import save

#
# Exported variables (internal configuration)
#
version = "1.0.0"

# Keys saved in the config file
config_keys = ["release_source",
               "osrelease_path"]

# Config file/commandline default values
defaults = {
    "release_source": "uname",
    "osrelease_path": "/proc/sys/kernel/osrelease",
    "config_home": os.environ.get("XDG_CONFIG_HOME",
                                  os.path.expanduser("~") + "/.config"),
}
defaults["config"] = defaults["config_home"] + "/kernelver.cfg"

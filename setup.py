#!/usr/bin/env python3

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import sys

from setuptools import setup

import notitlebar

if sys.version_info < (3, 11):
    raise RuntimeError("notitlebar requires Python 3.11 or later")


#*******************************************************************************
# build options, these may get modified further down..
#
packages = [
    "notitlebar",
    "notitlebar.util",
    "notitlebar.x11",
    "notitlebar.decorations",
    "notitlebar.wnck",
    "notitlebar.scripts",
]
description = "hides the title bar of maximized X11 windows"
long_description = "notitlebar follows the windows of an X11 desktop and removes the title bar " + \
            "of maximized windows using their _MOTIF_WM_HINTS property, " + \
            "restoring it when they are unmaximized or when notitlebar exits."

NOTITLEBAR_VERSION = notitlebar.__version__
setup_options = {
    "name"              : "notitlebar",
    "version"           : NOTITLEBAR_VERSION,
    "license"           : "GPLv2+",
    "author"            : notitlebar.__author__,
    "description"       : description,
    "long_description"  : long_description,
    "packages"          : packages,
    "python_requires"   : ">=3.11",
    # the GObject introspection bindings are usually installed from system packages,
    # along with the Wnck typelib they are needed for running the daemon, not for the tests:
    "extras_require"    : {
        "gi"    : ["PyGObject"],
        "tests" : ["pytest"],
    },
    "entry_points"      : {
        "console_scripts": [
            "notitlebar = notitlebar.scripts.main:main",
        ],
    },
}


if "pkg-info" in sys.argv:
    def write_PKG_INFO():
        with open("PKG-INFO", "wb") as f:
            for k in ("Name", "Version", "Description", "License", "Author"):
                v = setup_options[k.lower()]
                f.write(("%s: %s\n" % (k, v)).encode())
    write_PKG_INFO()
    sys.exit(0)


setup(**setup_options)

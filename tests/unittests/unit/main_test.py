#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import os
import unittest

from notitlebar.exit_codes import ExitCode
from notitlebar.util.env import OSEnvContext
from notitlebar.log import is_debug_enabled, remove_debug_category, remove_disabled_category, disable_debug_for
from notitlebar.scripts.main import InitExit, parse_cmdline, configure_logging, run_daemon, main as notitlebar_main


class MainTest(unittest.TestCase):

    def test_parse_cmdline(self):
        options = parse_cmdline(["notitlebar"])
        assert options.debug == ""
        assert options.assume_titlebar is None
        assert options.xprop == ""
        options = parse_cmdline(["notitlebar", "-d", "x11,events", "--assume-titlebar", "--xprop=/opt/bin/xprop"])
        assert options.debug == "x11,events"
        assert options.assume_titlebar
        assert options.xprop == "/opt/bin/xprop"

    def test_invalid_cmdline(self):
        for cmdline in (["notitlebar", "extra"], ["notitlebar", "--no-such-option"]):
            with self.assertRaises(InitExit) as cm:
                parse_cmdline(cmdline)
            assert cm.exception.status == ExitCode.FAILURE

    def test_version(self):
        with self.assertRaises(InitExit) as cm:
            parse_cmdline(["notitlebar", "--version"])
        assert cm.exception.status == 0

    def test_debug_help(self):
        with self.assertRaises(InitExit) as cm:
            configure_logging("help")
        assert cm.exception.status == ExitCode.OK
        assert str(cm.exception).find("decorations") > 0

    def test_configure_logging(self):
        try:
            configure_logging("wnck,-screen")
            assert is_debug_enabled("wnck")
            assert not is_debug_enabled("screen")
        finally:
            remove_debug_category("wnck")
            remove_disabled_category("screen")
            disable_debug_for("wnck")

    def test_no_display(self):
        env = dict(os.environ)
        env.pop("DISPLAY", None)
        with OSEnvContext():
            os.environ.clear()
            os.environ.update(env)
            with self.assertRaises(InitExit) as cm:
                run_daemon(parse_cmdline(["notitlebar"]))
            assert cm.exception.status == ExitCode.NO_DISPLAY

    def test_missing_xprop(self):
        with OSEnvContext(DISPLAY=":99"):
            options = parse_cmdline(["notitlebar", "--xprop=/notitlebar/does-not-exist/xprop"])
            with self.assertRaises(InitExit) as cm:
                run_daemon(options)
            assert cm.exception.status == ExitCode.COMPONENT_MISSING

    def test_main_exit_code(self):
        assert notitlebar_main(["notitlebar", "--no-such-option"]) == ExitCode.FAILURE


def main():
    unittest.main()


if __name__ == '__main__':
    main()

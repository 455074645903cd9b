#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import sys
import optparse
import traceback

from notitlebar import __version__
from notitlebar.exit_codes import ExitCode, ExitValue
from notitlebar.os_util import is_X11
from notitlebar.util.io import stderr_print
from notitlebar.log import (
    Logger, parse_debug_categories,
    add_debug_category, add_disabled_category, enable_debug_for, disable_debug_for,
)


def get_logger() -> Logger:
    return Logger("util")


class InitExit(Exception):
    def __init__(self, status: ExitValue, msg):
        self.status = status
        super().__init__(msg)


class ModifiedOptionParser(optparse.OptionParser):
    def error(self, msg):
        raise InitExit(ExitCode.FAILURE, msg)

    def exit(self, status=0, msg=None):
        raise InitExit(status, msg)


def parse_cmdline(cmdline: list[str]) -> optparse.Values:
    parser = ModifiedOptionParser(
        usage="%prog [options]",
        version=f"%prog v{__version__}",
        description="Hides the title bar of maximized windows",
    )
    parser.add_option("-d", "--debug", action="store", dest="debug", default="",
                      metavar="FILTER1,FILTER2,...",
                      help="List of categories to enable debugging for"
                           " (you can also use \"all\" or \"help\", default: '%default')")
    parser.add_option("--assume-titlebar", action="store_true", dest="assume_titlebar", default=None,
                      help="Manage windows whose hints cannot be read, as if they had a title bar")
    parser.add_option("--xprop", action="store", dest="xprop", default="",
                      metavar="COMMAND",
                      help="The command used for reading and setting window properties")
    options, args = parser.parse_args(cmdline[1:])
    if args:
        raise InitExit(ExitCode.FAILURE, f"too many arguments: {args}")
    return options


def configure_logging(debug: str) -> None:
    if debug == "help":
        from notitlebar.log import STRUCT_KNOWN_FILTERS
        lines = ["logging categories:"]
        for group, categories in STRUCT_KNOWN_FILTERS.items():
            lines.append(f" {group}:")
            for category, info in categories.items():
                lines.append(f"  * {category:<16}{info}")
        raise InitExit(ExitCode.OK, "\n".join(lines))
    enabled, disabled = parse_debug_categories(debug)
    if enabled:
        add_debug_category(*enabled)
        enable_debug_for(*enabled)
    if disabled:
        add_disabled_category(*disabled)
        disable_debug_for(*disabled)


def run_daemon(options) -> ExitValue:
    log = get_logger()
    if not is_X11():
        raise InitExit(ExitCode.NO_DISPLAY, "no X11 display, the DISPLAY environment variable is not set")
    from notitlebar.x11.xprop import XPropGateway
    gateway = XPropGateway(options.xprop)
    if not gateway.is_available():
        raise InitExit(ExitCode.COMPONENT_MISSING, f"the {gateway.command!r} command was not found")
    try:
        from notitlebar.util.glib_scheduler import GLibScheduler, GLib
        from notitlebar.util.glib import register_os_signals
        from notitlebar.wnck.host import WnckHost
    except ImportError as e:
        log("import error", exc_info=True)
        raise InitExit(ExitCode.COMPONENT_MISSING, f"libwnck is required: {e}") from None
    from notitlebar.decorations.tracker import DecorationTracker, ASSUME_TITLEBAR
    from notitlebar.decorations.engine import DecorationEngine

    try:
        host = WnckHost()
    except RuntimeError as e:
        raise InitExit(ExitCode.NO_DISPLAY, str(e)) from None
    assume_titlebar = ASSUME_TITLEBAR if options.assume_titlebar is None else options.assume_titlebar
    tracker = DecorationTracker(gateway, assume_titlebar)
    engine = DecorationEngine(host, GLibScheduler(), tracker)
    main_loop = GLib.MainLoop()

    def handle_signal(signum: int) -> None:
        log("handle_signal(%i)", signum)
        main_loop.quit()

    register_os_signals(handle_signal, "notitlebar")
    host.start()
    try:
        engine.enable()
        log.info(f"notitlebar v{__version__} running")
        main_loop.run()
    finally:
        if engine.enabled:
            engine.disable()
        host.stop()
        gateway.cleanup()
        log("final state: %s", engine.get_info())
    return ExitCode.OK


def main(cmdline=None) -> ExitValue:
    cmdline = list(cmdline or sys.argv)

    def debug_exc(msg: str = "main error") -> None:
        get_logger().debug(msg, exc_info=True)

    try:
        options = parse_cmdline(cmdline)
        configure_logging(options.debug)
        return run_daemon(options)
    except InitExit as e:
        debug_exc()
        if str(e) and e.args and e.args[0]:
            stderr_print(str(e))
        return e.status
    except KeyboardInterrupt:
        return ExitCode.OK
    except Exception:
        debug_exc()
        stderr_print("notitlebar main error:\n%s" % traceback.format_exc())
        return ExitCode.INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(int(main(sys.argv)))

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import signal
from collections.abc import Callable

from notitlebar.os_util import gi_import
from notitlebar.util.io import get_util_logger

_glib_unix_signals: dict[int, int] = {}


def register_os_signals(callback: Callable[[int], None],
                        commandtype: str = "",
                        signals=(signal.SIGINT, signal.SIGTERM)) -> None:
    for signum in signals:
        register_os_signal(callback, commandtype, signum)


def register_os_signal(callback: Callable[[int], None],
                       commandtype: str = "",
                       signum: signal.Signals = signal.SIGINT) -> None:
    GLib = gi_import("GLib")
    signame = signal.Signals(signum).name
    i_signum = int(signum)

    def do_handle_signal() -> None:
        callback(i_signum)

    # replace the previous definition if we had one:
    current = _glib_unix_signals.get(signum, None)
    if current:
        GLib.source_remove(current)

    def handle_signal(_signum) -> bool:
        if commandtype:
            get_util_logger().info(f"{commandtype} got signal {signame}")
        GLib.idle_add(do_handle_signal)
        return True

    source_id = GLib.unix_signal_add(GLib.PRIORITY_HIGH, i_signum, handle_signal, signum)
    _glib_unix_signals[signum] = source_id

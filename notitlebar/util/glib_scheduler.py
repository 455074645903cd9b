# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from collections.abc import Callable

from notitlebar.util.objects import Scheduler
from notitlebar.os_util import gi_import

GLib = gi_import("GLib")


class GLibScheduler(Scheduler):

    def idle_add(self, fn: Callable, *args, **kwargs) -> int:
        return GLib.idle_add(fn, *args, **kwargs)

    def source_remove(self, tid: int) -> None:
        GLib.source_remove(tid)

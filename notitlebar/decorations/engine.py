# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from typing import Any
from collections.abc import Callable

from notitlebar.common import WINDOW_CREATED, WINDOW_CLOSED, SIZE_CHANGED
from notitlebar.util.objects import Scheduler
from notitlebar.util.debounce import DebouncedConnection, connect_debounced
from notitlebar.decorations.host import WindowHost, HostWindow, HostActor
from notitlebar.decorations.tracker import DecorationTracker, DecorationStateError
from notitlebar.log import Logger

log = Logger("decorations")
eventlog = Logger("decorations", "events")


class DecorationEngine:
    """
    Hides the title bar of maximized windows for as long as it is enabled.

    `enable` subscribes to the host's window signals and looks at all the existing windows,
    `disable` unsubscribes and puts back the title bar of every window it has managed.
    """

    def __init__(self, host: WindowHost, scheduler: Scheduler, tracker: DecorationTracker):
        self.host = host
        self.scheduler = scheduler
        self.tracker = tracker
        self.enabled = False
        self.connections: list[DebouncedConnection] = []
        self.closed_handler = 0

    def __repr__(self):
        return f"DecorationEngine({self.host}, enabled={self.enabled})"

    def enable(self) -> None:
        if self.enabled:
            raise DecorationStateError("the decoration engine is already enabled")
        log("enable()")
        self.enabled = True
        self.connections = [
            connect_debounced(self.scheduler, self.host, WINDOW_CREATED, self.sync),
            connect_debounced(self.scheduler, self.host, SIZE_CHANGED, self.size_changed),
        ]
        signals = getattr(self.host, "__signals__", ())
        if WINDOW_CLOSED in signals:
            self.closed_handler = self.host.connect(WINDOW_CLOSED, self.window_closed)
        self.for_each_window(self.sync)

    def disable(self) -> None:
        if not self.enabled:
            raise DecorationStateError("the decoration engine is not enabled")
        log("disable()")
        # no new events can be scheduled after this:
        for connection in self.connections:
            connection.disconnect()
        self.connections = []
        if self.closed_handler:
            self.host.disconnect(self.closed_handler)
            self.closed_handler = 0
        self.for_each_window(self.restore)
        self.tracker.clear()
        self.enabled = False

    def for_each_window(self, callback: Callable[[HostWindow], Any]) -> None:
        for window in self.host.list_windows():
            if window is None:
                continue
            with log.trap_error("Error processing window %s", window):
                callback(window)

    def size_changed(self, actor: HostActor) -> None:
        window = actor.get_window()
        if window is None:
            eventlog("size_changed(%s) no window", actor)
            return
        self.sync(window)

    def window_closed(self, _host, window: HostWindow) -> None:
        eventlog("window_closed(%s)", window)
        self.tracker.forget(window)

    def sync(self, window: HostWindow) -> None:
        maximized = window.get_maximized()
        eventlog("sync(%s) maximized=%s", window, maximized)
        self.tracker.sync(window, maximized)

    def restore(self, window: HostWindow) -> None:
        eventlog("restore(%s)", window)
        self.tracker.restore(window)

    def get_info(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "tracker": self.tracker.get_info(),
            "gateway": self.tracker.gateway.get_info(),
        }

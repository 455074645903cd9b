# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from typing import Any
from collections.abc import Sequence

from notitlebar.os_util import gi_import
from notitlebar.common import ClientType, WindowType, WINDOW_CREATED, WINDOW_CLOSED, SIZE_CHANGED
from notitlebar.util.signal_emitter import SignalEmitter
from notitlebar.log import Logger

# importing Gdk opens the default display, which Wnck relies on:
gi_import("Gdk")
Wnck = gi_import("Wnck")

log = Logger("wnck", "screen")

WINDOW_TYPES: dict[Any, WindowType] = {
    Wnck.WindowType.NORMAL: WindowType.NORMAL,
    Wnck.WindowType.DESKTOP: WindowType.DESKTOP,
    Wnck.WindowType.DOCK: WindowType.DOCK,
    Wnck.WindowType.DIALOG: WindowType.DIALOG,
    Wnck.WindowType.TOOLBAR: WindowType.TOOLBAR,
    Wnck.WindowType.MENU: WindowType.MENU,
    Wnck.WindowType.UTILITY: WindowType.UTILITY,
    Wnck.WindowType.SPLASHSCREEN: WindowType.SPLASHSCREEN,
}

# how many characters of the title the window manager includes in descriptions:
DESCRIPTION_TITLE_LENGTH = 10


class WnckWindowProxy:
    """
    Exposes a `Wnck.Window` using the host window interface.
    Wnck emits geometry signals on the window itself,
    so the proxy is also the "actor" of its own size-changed signals.
    """
    __slots__ = ("wnck_window", "xid", "closed", "handlers", "__weakref__")

    def __init__(self, wnck_window):
        self.wnck_window = wnck_window
        self.xid: int = wnck_window.get_xid()
        self.closed = False
        self.handlers: list[int] = []

    def __repr__(self):
        return f"WnckWindowProxy({self.xid:#x})"

    def get_client_type(self) -> ClientType:
        # libwnck only ever sees X11 windows
        return ClientType.X11

    def get_window_type(self) -> WindowType:
        return WINDOW_TYPES.get(self.wnck_window.get_window_type(), WindowType.OTHER)

    def get_title(self) -> str:
        return self.wnck_window.get_name() or ""

    def get_description(self) -> str:
        return "%#x (%s)" % (self.xid, self.get_title()[:DESCRIPTION_TITLE_LENGTH])

    def get_maximized(self) -> bool:
        return bool(self.wnck_window.is_maximized())

    def get_window(self):
        if self.closed:
            return None
        return self


class WnckHost(SignalEmitter):
    """
    A window host for any EWMH compliant X11 window manager,
    using libwnck to follow the windows.
    """
    __signals__ = (WINDOW_CREATED, WINDOW_CLOSED, SIZE_CHANGED)

    def __init__(self, screen=None):
        super().__init__()
        self.screen = screen or Wnck.Screen.get_default()
        if not self.screen:
            raise RuntimeError("no default screen, is this an X11 display?")
        self.proxies: dict[int, WnckWindowProxy] = {}
        self.screen_handlers: list[int] = []

    def __repr__(self):
        return "WnckHost"

    def start(self) -> None:
        self.screen.force_update()
        for wnck_window in self.screen.get_windows():
            self.add_window(wnck_window)
        self.screen_handlers = [
            self.screen.connect("window-opened", self.window_opened),
            self.screen.connect("window-closed", self.window_closed),
        ]
        log("start() found %i windows", len(self.proxies))

    def stop(self) -> None:
        for handler in self.screen_handlers:
            self.screen.disconnect(handler)
        self.screen_handlers = []
        for proxy in self.proxies.values():
            self.disconnect_window(proxy)
        self.proxies = {}

    def add_window(self, wnck_window) -> WnckWindowProxy:
        xid = wnck_window.get_xid()
        proxy = self.proxies.get(xid)
        if proxy:
            return proxy
        proxy = WnckWindowProxy(wnck_window)
        proxy.handlers = [
            wnck_window.connect("state-changed", self.window_geometry_changed, proxy),
            wnck_window.connect("geometry-changed", self.window_geometry_changed, proxy),
        ]
        self.proxies[xid] = proxy
        return proxy

    def disconnect_window(self, proxy: WnckWindowProxy) -> None:
        for handler in proxy.handlers:
            proxy.wnck_window.disconnect(handler)
        proxy.handlers = []

    def window_opened(self, _screen, wnck_window) -> None:
        proxy = self.add_window(wnck_window)
        log("window_opened: %s", proxy)
        self.emit(WINDOW_CREATED, proxy)

    def window_closed(self, _screen, wnck_window) -> None:
        proxy = self.proxies.pop(wnck_window.get_xid(), None)
        log("window_closed: %s", proxy)
        if not proxy:
            return
        proxy.closed = True
        self.disconnect_window(proxy)
        self.emit(WINDOW_CLOSED, proxy)

    def window_geometry_changed(self, _wnck_window, *args) -> None:
        # the proxy is the last argument, after the signal's own arguments:
        proxy = args[-1]
        self.emit(SIZE_CHANGED, proxy)

    def list_windows(self) -> Sequence[WnckWindowProxy]:
        return tuple(self.add_window(wnck_window) for wnck_window in self.screen.get_windows())

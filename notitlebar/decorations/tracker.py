# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from weakref import WeakKeyDictionary
from typing import Any

from notitlebar.util.env import envbool
from notitlebar.decorations.host import HostWindow
from notitlebar.x11.identity import resolve_xid
from notitlebar.x11.motif_hints import MotifWMHints, encode
from notitlebar.log import Logger

log = Logger("decorations")

# track windows whose hints cannot be read as if they had a title bar:
ASSUME_TITLEBAR = envbool("NOTITLEBAR_ASSUME_TITLEBAR", False)


class DecorationStateError(RuntimeError):
    pass


class TrackedWindow:
    __slots__ = ("xid", "original_hints", "last_written")

    def __init__(self, xid: str, original_hints: MotifWMHints):
        self.xid = xid
        self.original_hints = original_hints
        # what we believe the property is set to,
        # starts with the value we have read:
        self.last_written = original_hints

    def __repr__(self):
        return f"TrackedWindow({self.xid}, {encode(self.original_hints)!r}, {encode(self.last_written)!r})"


class DecorationTracker:
    """
    Remembers which windows had a title bar before we touched them,
    and hides or restores it through the property gateway.

    Windows are looked at once: the outcome, tracked or not,
    is cached for the lifetime of the window object (or until `clear`).
    """

    def __init__(self, gateway, assume_title_bar: bool = ASSUME_TITLEBAR):
        self.gateway = gateway
        self.assume_title_bar = assume_title_bar
        # `None` values are windows we have looked at and will not manage:
        self.windows: WeakKeyDictionary[HostWindow, TrackedWindow | None] = WeakKeyDictionary()

    def __repr__(self):
        return f"DecorationTracker({self.gateway})"

    def get_tracked(self, window: HostWindow) -> TrackedWindow | None:
        try:
            return self.windows[window]
        except KeyError:
            pass
        tracked = self.track(window)
        self.windows[window] = tracked
        return tracked

    def is_tracked(self, window: HostWindow) -> bool:
        return self.windows.get(window) is not None

    def track(self, window: HostWindow) -> TrackedWindow | None:
        xid = resolve_xid(window)
        if not xid:
            return None
        hints = self.gateway.read(xid)
        if hints is None:
            if not self.assume_title_bar:
                log("unable to read the hints of %s, not managing %r", xid, window.get_title())
                return None
            hints = MotifWMHints()
            log("unable to read the hints of %s, assuming %s", xid, encode(hints))
        if not hints.has_title_bar():
            log("not managing %s %r: %s", xid, window.get_title(), hints)
            return None
        tracked = TrackedWindow(xid, hints)
        log("tracking %r: %s", window.get_title(), tracked)
        return tracked

    def sync(self, window: HostWindow, maximized: bool) -> bool:
        """
        Hides the title bar of maximized windows, shows it otherwise.
        Returns True if the property was updated.
        """
        tracked = self.get_tracked(window)
        if not tracked:
            return False
        return self.set_hints(window, tracked.original_hints.with_title_bar(not maximized))

    def restore(self, window: HostWindow) -> bool:
        tracked = self.get_tracked(window)
        if not tracked:
            return False
        # we only ever track windows that started with a title bar:
        return self.set_hints(window, tracked.original_hints.with_title_bar(True))

    def set_hints(self, window: HostWindow, hints: MotifWMHints) -> bool:
        tracked = self.windows.get(window)
        if tracked is None:
            raise DecorationStateError(f"cannot set the hints of {window!r}: the window is not managed")
        if tracked.last_written == hints:
            log("%s already set to %s", tracked.xid, encode(hints))
            return False
        self.gateway.write(tracked.xid, hints)
        # the write is not waited for, assume that it succeeds:
        tracked.last_written = hints
        return True

    def forget(self, window: HostWindow) -> None:
        tracked = self.windows.pop(window, None)
        if tracked:
            log("forgetting %s", tracked)

    def clear(self) -> None:
        log("clear() dropping %i windows", len(self.windows))
        self.windows.clear()

    def get_info(self) -> dict[str, Any]:
        tracked = tuple(tw for tw in self.windows.values() if tw)
        return {
            "windows": len(self.windows),
            "tracked": len(tracked),
            "hidden": sum(1 for tw in tracked if tw.last_written.no_title_bar()),
            "assume-title-bar": self.assume_title_bar,
        }

#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import unittest

from unit.test_util import FakeWindow, FakeGateway
from notitlebar.decorations.tracker import DecorationTracker, DecorationStateError
from notitlebar.x11.motif_hints import MotifWMHints

XID = "0x3a00007"


def make_tracker(stdout="_MOTIF_WM_HINTS = 2, 0, 1, 0, 0\n", returncode=0, assume_title_bar=False):
    gateway = FakeGateway()
    gateway.set_output(XID, stdout, returncode)
    return DecorationTracker(gateway, assume_title_bar), gateway


class TrackerTest(unittest.TestCase):

    def test_maximize_cycle(self):
        tracker, gateway = make_tracker()
        window = FakeWindow(XID)
        assert not tracker.sync(window, False)
        assert tracker.is_tracked(window)
        assert gateway.writes == []
        assert tracker.sync(window, True)
        assert gateway.writes == [(XID, "2, 0, 0, 0, 0")]
        # already hidden:
        assert not tracker.sync(window, True)
        assert tracker.sync(window, False)
        assert gateway.writes[-1] == (XID, "2, 0, 1, 0, 0")
        assert len(gateway.writes) == 2
        # the property is only read once:
        assert gateway.reads == [XID]

    def test_other_fields_preserved(self):
        tracker, gateway = make_tracker("_MOTIF_WM_HINTS = 3, 6, 1, 2, 0")
        window = FakeWindow(XID)
        tracker.sync(window, True)
        assert gateway.writes == [(XID, "3, 6, 0, 2, 0")]
        tracker.restore(window)
        assert gateway.writes[-1] == (XID, "3, 6, 1, 2, 0")

    def test_no_title_bar(self):
        tracker, gateway = make_tracker("_MOTIF_WM_HINTS = 2, 0, 0, 0, 0")
        window = FakeWindow(XID)
        assert not tracker.sync(window, True)
        assert not tracker.restore(window)
        assert not tracker.is_tracked(window)
        assert not gateway.writes
        # the outcome is cached:
        tracker.sync(window, False)
        assert gateway.reads == [XID]

    def test_read_failure(self):
        tracker, gateway = make_tracker("", 1)
        window = FakeWindow(XID)
        assert not tracker.sync(window, True)
        assert not tracker.is_tracked(window)
        assert not gateway.writes

    def test_unparsable_output(self):
        for stdout in ("_MOTIF_WM_HINTS:  not found.", "_MOTIF_WM_HINTS = 2, 0, 1", "garbage"):
            tracker, gateway = make_tracker(stdout)
            window = FakeWindow(XID)
            assert not tracker.sync(window, True)
            assert not gateway.writes

    def test_assume_title_bar(self):
        tracker, gateway = make_tracker("", 1, assume_title_bar=True)
        window = FakeWindow(XID)
        assert tracker.sync(window, True)
        assert gateway.writes == [(XID, "2, 0, 0, 0, 0")]
        assert tracker.get_info()["assume-title-bar"]

    def test_unresolved_window(self):
        tracker, gateway = make_tracker()
        window = FakeWindow(description="Terminal")
        assert not tracker.sync(window, True)
        assert not gateway.reads

    def test_set_hints_untracked(self):
        tracker = make_tracker()[0]
        with self.assertRaises(DecorationStateError):
            tracker.set_hints(FakeWindow(XID), MotifWMHints())

    def test_forget(self):
        tracker, gateway = make_tracker()
        window = FakeWindow(XID)
        tracker.sync(window, True)
        tracker.forget(window)
        assert not tracker.is_tracked(window)
        # forgetting twice is harmless:
        tracker.forget(window)
        # the window is looked at again, and the title bar is now hidden:
        assert not tracker.sync(window, True)
        assert not tracker.is_tracked(window)
        assert gateway.reads == [XID, XID]

    def test_clear(self):
        tracker, gateway = make_tracker()
        window = FakeWindow(XID)
        tracker.sync(window, True)
        info = tracker.get_info()
        assert info["windows"] == info["tracked"] == info["hidden"] == 1
        tracker.clear()
        assert tracker.get_info()["windows"] == 0

    def test_weak_references(self):
        tracker = make_tracker()[0]
        window = FakeWindow(XID)
        tracker.sync(window, False)
        assert len(tracker.windows) == 1
        del window
        assert len(tracker.windows) == 0


def main():
    unittest.main()


if __name__ == '__main__':
    main()

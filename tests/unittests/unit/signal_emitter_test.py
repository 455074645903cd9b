#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import unittest

from unit.test_util import silence_error
from notitlebar.util.signal_emitter import SignalEmitter
from notitlebar.util import signal_emitter


class Emitter(SignalEmitter):
    __signals__ = ("ping", "pong")


class SignalEmitterTest(unittest.TestCase):

    def test_emit(self):
        emitter = Emitter()
        calls = []

        def cb(*args):
            calls.append(args)
        emitter.connect("ping", cb, "extra")
        emitter.emit("ping", 1, 2)
        emitter.emit("pong", 3)
        assert calls == [(emitter, 1, 2, "extra")]

    def test_disconnect(self):
        emitter = Emitter()
        calls = []
        hid = emitter.connect("ping", calls.append)
        other = emitter.connect("pong", calls.append)
        assert hid != other
        assert emitter.handler_count() == 2
        emitter.disconnect(hid)
        assert emitter.handler_count("ping") == 0
        assert emitter.handler_count("pong") == 1
        emitter.emit("ping")
        assert not calls
        with self.assertRaises(ValueError):
            emitter.disconnect(hid)

    def test_unknown_signal(self):
        emitter = Emitter()
        with self.assertRaises(ValueError):
            emitter.connect("unknown", print)
        # no declared signals means anything goes:
        SignalEmitter().connect("anything", print)

    def test_callback_errors(self):
        emitter = Emitter()
        calls = []

        def fail(*_args):
            raise RuntimeError("test callback error handling")
        emitter.connect("ping", fail)
        emitter.connect("ping", calls.append)
        with silence_error(signal_emitter):
            emitter.emit("ping")
        assert calls == [emitter]

    def test_disconnect_during_emit(self):
        emitter = Emitter()
        calls = []

        def once(source):
            calls.append(source)
            source.disconnect(hid)
        hid = emitter.connect("ping", once)
        emitter.emit("ping")
        emitter.emit("ping")
        assert len(calls) == 1


def main():
    unittest.main()


if __name__ == '__main__':
    main()

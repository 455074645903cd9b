#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import unittest

from unit.test_util import silence_error
from notitlebar.util.queue_scheduler import QueueScheduler
from notitlebar.util import queue_scheduler


class QueueSchedulerTest(unittest.TestCase):

    def test_idle(self):
        qs = QueueScheduler()
        calls = []

        def idle_add(arg):
            calls.append(arg)
        qs.idle_add(idle_add, True)
        qs.idle_add(qs.stop)
        qs.run()
        assert calls == [True]
        assert qs.exit

    def test_idle_repeat(self):
        qs = QueueScheduler()
        calls = []

        def idle_add(arg):
            calls.append(arg)
            return len(calls) < 10
        qs.idle_add(idle_add, True)
        qs.run_until_idle()
        assert len(calls) == 10
        assert qs.pending() == 0

    def test_idle_cancel(self):
        qs = QueueScheduler()
        calls = []

        def idle_add():
            calls.append(True)
            return True
        tid = qs.idle_add(idle_add)
        qs.iteration()
        qs.iteration()
        qs.source_remove(tid)
        copy = list(calls)
        qs.run_until_idle()
        assert len(calls) == len(copy) == 2, "idle_add continued to run!"

    def test_source_remove(self):
        qs = QueueScheduler()
        calls = []

        def idle_add(arg):
            calls.append(arg)
        t = qs.idle_add(idle_add, True)
        qs.source_remove(t)
        assert qs.pending() == 0
        qs.idle_add(qs.stop)
        qs.run()
        assert not calls

    def test_invalid_remove(self):
        qs = QueueScheduler()
        qs.source_remove(-1)

    def test_idle_raises_exception(self):
        qs = QueueScheduler()
        calls = []

        def raise_exception():
            raise Exception("test scheduler error handling")
        with silence_error(queue_scheduler):
            qs.idle_add(raise_exception)
            qs.idle_add(calls.append, 1)
            qs.run_until_idle()
        assert calls == [1]
        assert qs.pending() == 0

    def test_iteration_order(self):
        qs = QueueScheduler()
        calls = []

        def first():
            calls.append("first")
            qs.idle_add(calls.append, "nested")
        qs.idle_add(first)
        qs.idle_add(calls.append, "second")
        assert qs.iteration() == 2
        # callbacks added during an iteration run on the next one:
        assert calls == ["first", "second"]
        qs.iteration()
        assert calls == ["first", "second", "nested"]

    def test_stop_queue(self):
        qs = QueueScheduler()
        qs.stop()
        qs.run()
        assert qs.exit


def main():
    unittest.main()


if __name__ == '__main__':
    main()

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from collections.abc import Callable


class MutableInteger:
    __slots__ = ("counter",)

    def __init__(self, integer: int = 0):
        self.counter: int = integer

    def increase(self, inc: int = 1) -> int:
        self.counter = self.counter + inc
        return self.counter

    def get(self) -> int:
        return self.counter

    def __str__(self) -> str:
        return str(self.counter)

    def __repr__(self) -> str:
        return f"MutableInteger({self.counter})"

    def __int__(self) -> int:
        return self.counter

    def __eq__(self, other) -> bool:
        return self.counter == int(other)

    def __ne__(self, other) -> bool:
        return self.counter != int(other)


class Scheduler:
    """
    The subset of the GLib main loop API used by the event handling code:
    callbacks added with `idle_add` run on the loop's thread,
    one at a time, and are removed when they return a false value.
    """

    def idle_add(self, fn: Callable, *args, **kwargs) -> int:
        raise NotImplementedError()

    def source_remove(self, tid: int) -> None:
        raise NotImplementedError()

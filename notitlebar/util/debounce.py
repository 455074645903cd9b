# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

"""
Coalesces bursts of signals into a single idle callback per target.

Window managers emit many geometry signals for a single user action,
we only want to look at the window once things have settled down,
which is when the main loop becomes idle.
"""

from weakref import WeakSet
from typing import Any
from collections.abc import Callable

from notitlebar.util.objects import Scheduler, MutableInteger
from notitlebar.log import Logger

log = Logger("events")


class IdleDebouncer:
    __slots__ = ("scheduler", "pending")

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        # targets must support weak references:
        self.pending: WeakSet = WeakSet()

    def __repr__(self):
        return f"IdleDebouncer({len(self.pending)} pending)"

    def is_pending(self, target) -> bool:
        return target in self.pending

    def schedule(self, target, callback: Callable[[], Any]) -> bool:
        """
        Runs `callback` when the main loop is next idle,
        unless a callback is already pending for this target.
        Returns True if a new callback was scheduled.
        """
        if target in self.pending:
            log("schedule(%s, %s) already pending", target, callback)
            return False
        self.pending.add(target)
        self.scheduler.idle_add(self.idle_call, target, callback)
        return True

    def idle_call(self, target, callback: Callable[[], Any]) -> bool:
        self.pending.discard(target)
        with log.trap_error("Error processing idle callback for %s", target):
            callback()
        # always remove this function from the main loop:
        return False


class DebouncedConnection:
    """
    A signal handler connected to `source`,
    which forwards the signal's first argument to `callback`
    once the main loop is idle.
    Signals are coalesced per target,
    and callbacks already scheduled when `disconnect` is called will not fire.
    """

    def __init__(self, scheduler: Scheduler, source, signal: str, callback: Callable[[Any], Any]):
        self.source = source
        self.signal = signal
        self.callback = callback
        self.debouncer = IdleDebouncer(scheduler)
        self.generation = MutableInteger()
        self.connected = True
        self.handler_id = source.connect(signal, self.signal_fired)
        log("connected to %r on %s with handler %s", signal, source, self.handler_id)

    def __repr__(self):
        return f"DebouncedConnection({self.signal!r}, {self.callback}, connected={self.connected})"

    def signal_fired(self, _source, target, *_args) -> None:
        if not self.connected:
            return
        generation = self.generation.get()

        def deliver() -> None:
            if generation != self.generation.get():
                log("%r callback for %s suppressed: disconnected", self.signal, target)
                return
            self.callback(target)
        self.debouncer.schedule(target, deliver)

    def disconnect(self) -> None:
        if not self.connected:
            return
        log("disconnecting %r handler %s", self.signal, self.handler_id)
        self.connected = False
        self.source.disconnect(self.handler_id)
        self.generation.increase()


def connect_debounced(scheduler: Scheduler, source, signal: str, callback: Callable[[Any], Any]) -> DebouncedConnection:
    return DebouncedConnection(scheduler, source, signal, callback)

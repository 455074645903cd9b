# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from queue import SimpleQueue, Empty
from typing import Any, TypeAlias
from collections.abc import Callable, Sequence

from notitlebar.util.objects import Scheduler, MutableInteger
from notitlebar.log import Logger

log = Logger("util")

ScheduledItemType: TypeAlias = tuple[int, Callable, Sequence[Any], dict[str, Any]]


# emulate the glib main loop using a single consumer queue:
class QueueScheduler(Scheduler):
    __slots__ = ("main_queue", "exit", "source_id", "sources")

    def __init__(self):
        self.main_queue: SimpleQueue[ScheduledItemType | None] = SimpleQueue()
        self.exit = False
        self.source_id = MutableInteger()
        self.sources: set[int] = set()

    def source_remove(self, tid: int) -> None:
        log("source_remove(%i)", tid)
        self.sources.discard(tid)

    def idle_add(self, fn: Callable, *args, **kwargs) -> int:
        tid = self.source_id.increase()
        self.sources.add(tid)
        self.main_queue.put((tid, fn, args, kwargs))
        return tid

    def pending(self) -> int:
        return len(self.sources)

    def idle_call(self, item: ScheduledItemType) -> None:
        tid, fn, args, kwargs = item
        if tid not in self.sources:
            return  # cancelled
        log("idle_call %s%s%s", fn, args, kwargs)
        r = False
        with log.trap_error(f"Error during main loop callback {fn}"):
            r = fn(*args, **kwargs)
        if bool(r) and tid in self.sources:
            # re-run it on the next iteration
            self.main_queue.put(item)
        else:
            self.sources.discard(tid)

    def iteration(self) -> int:
        """
        Runs the callbacks that are already queued,
        callbacks they add are left for the next iteration.
        Returns the number of queue entries processed.
        """
        count = self.main_queue.qsize()
        for i in range(count):
            try:
                item = self.main_queue.get_nowait()
            except Empty:
                return i
            if item is None:
                self.exit = True
                return i
            self.idle_call(item)
        return count

    def run_until_idle(self, max_iterations: int = 100) -> int:
        iterations = 0
        while self.sources and not self.exit and iterations < max_iterations:
            self.iteration()
            iterations += 1
        return iterations

    def run(self) -> None:
        log("run() queue has %s items already in it", self.main_queue.qsize())
        self.exit = False
        while not self.exit:
            item = self.main_queue.get()
            if item is None:
                log("run() None exit marker")
                break
            self.idle_call(item)
        self.exit = True

    def stop(self) -> None:
        self.exit = True
        self.main_queue.put(None)

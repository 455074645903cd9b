# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from typing import Any
from collections.abc import Callable

from notitlebar.util.objects import MutableInteger
from notitlebar.log import Logger

log = Logger("events")


class SignalEmitter:
    """
    Emulates a subset of GObject signal functions.
    Enough so that window hosts can expose the same `connect` / `disconnect`
    API whether they are backed by GObject or not.
    Unlike GObject, callbacks that raise an exception are logged and
    do not prevent the other callbacks from running.
    """
    __signals__: tuple[str, ...] = ()

    def __init__(self):
        self._signal_callbacks: dict[str, list[tuple[int, Callable, list[Any]]]] = {}
        self._handler_id = MutableInteger()

    def connect(self, signal: str, cb: Callable, *args) -> int:
        """ gobject style signal registration """
        if self.__signals__ and signal not in self.__signals__:
            raise ValueError(f"unknown signal {signal!r} for {type(self).__name__}")
        handler_id = self._handler_id.increase()
        log("connect(%s, %s, %s)=%i", signal, cb, args, handler_id)
        self._signal_callbacks.setdefault(signal, []).append((handler_id, cb, list(args)))
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        for signal, callbacks in self._signal_callbacks.items():
            for i, (hid, _cb, _args) in enumerate(callbacks):
                if hid == handler_id:
                    log("disconnect(%i) from %s", handler_id, signal)
                    del callbacks[i]
                    return
        raise ValueError(f"no handler with id {handler_id}")

    def handler_count(self, signal: str = "") -> int:
        if signal:
            return len(self._signal_callbacks.get(signal, ()))
        return sum(len(callbacks) for callbacks in self._signal_callbacks.values())

    def emit(self, signal: str, *extra_args) -> None:
        log("%s.emit(%s, %s)", self, signal, extra_args)
        self._fire_callback(signal, extra_args)

    def _fire_callback(self, signal_name: str, extra_args=()) -> None:
        # copy, so callbacks can disconnect themselves:
        callbacks = tuple(self._signal_callbacks.get(signal_name, ()))
        log("firing callback for '%s': %s", signal_name, callbacks)
        for _hid, cb, args in callbacks:
            with log.trap_error(f"Error processing callback {cb} for {signal_name!r} signal"):
                cb(self, *extra_args, *args)

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

"""
The interface the decoration engine expects from the window manager side.

Hosts emit:
 * "window-created" (host, window) once when a new window appears
 * "size-changed" (host, actor) on geometry changes, including maximize / unmaximize
 * "window-closed" (host, window) when a window goes away (optional)
"""

from typing import Protocol
from collections.abc import Callable, Sequence

from notitlebar.common import ClientType, WindowType


class HostWindow(Protocol):

    def get_client_type(self) -> ClientType:
        ...

    def get_window_type(self) -> WindowType:
        ...

    def get_description(self) -> str:
        ...

    def get_maximized(self) -> bool:
        ...

    def get_title(self) -> str:
        ...


class HostActor(Protocol):

    def get_window(self) -> HostWindow | None:
        ...


class WindowHost(Protocol):

    def connect(self, signal: str, cb: Callable, *args) -> int:
        ...

    def disconnect(self, handler_id: int) -> None:
        ...

    def list_windows(self) -> Sequence[HostWindow]:
        ...

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from enum import StrEnum
from typing import Final


class ClientType(StrEnum):
    X11 = "x11"
    WAYLAND = "wayland"


# the same names as the _NET_WM_WINDOW_TYPE atoms, without the prefix:
class WindowType(StrEnum):
    NORMAL = "normal"
    DESKTOP = "desktop"
    DOCK = "dock"
    DIALOG = "dialog"
    TOOLBAR = "toolbar"
    MENU = "menu"
    UTILITY = "utility"
    SPLASHSCREEN = "splashscreen"
    DROPDOWN_MENU = "dropdown-menu"
    POPUP_MENU = "popup-menu"
    TOOLTIP = "tooltip"
    NOTIFICATION = "notification"
    COMBO = "combo"
    DND = "dnd"
    OTHER = "other"


# window host signals:
WINDOW_CREATED: Final[str] = "window-created"
WINDOW_CLOSED: Final[str] = "window-closed"
SIZE_CHANGED: Final[str] = "size-changed"

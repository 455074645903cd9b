# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import re
from notitlebar.common import ClientType, WindowType
from notitlebar.decorations.host import HostWindow
from notitlebar.log import Logger

log = Logger("x11", "window")

# window managers include the X11 window id in the window description,
# ie: "0x3a00007 (Terminal)"
XID_RE = re.compile(r"0x[0-9a-f]+")


def resolve_xid(window: HostWindow) -> str | None:
    """
    Returns the X11 window id of a normal X11 window,
    or None if the window should not be managed.
    """
    client_type = window.get_client_type()
    window_type = window.get_window_type()
    if client_type != ClientType.X11 or window_type != WindowType.NORMAL:
        log("ignoring %s window of type %s", client_type, window_type)
        return None
    description = window.get_description() or ""
    match = XID_RE.search(description)
    if not match:
        log("no window id found in description %r", description)
        return None
    return match.group(0)

# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import os
from types import ModuleType

# only minimal imports go at the top
# so that this file can be included everywhere
# without too many side effects
# pylint: disable=import-outside-toplevel
GI_BLOCK = tuple(x for x in os.environ.get("NOTITLEBAR_GI_BLOCK", "").split(",") if x)

GIR_VERSIONS: dict[str, str] = {
    "GLib": "2.0",
    "GObject": "2.0",
    "Gdk": "3.0",
    "Wnck": "3.0",
}


def gi_import(mod="GLib", version="") -> ModuleType:
    if mod in GI_BLOCK or "*" in GI_BLOCK:
        raise ImportError(f"import of {mod!r} is blocked")
    version = version or GIR_VERSIONS.get(mod, "")
    from notitlebar.util.env import SilenceWarningsContext
    with SilenceWarningsContext(DeprecationWarning, ImportWarning):
        import gi
        try:
            gi.require_version(mod, version)
        except (ValueError, AssertionError) as e:
            raise ImportError(f"unable to import {mod!r} {version=!r}: {e}") from None
        import importlib
        return importlib.import_module(f"gi.repository.{mod}")


def is_X11() -> bool:
    return bool(os.environ.get("DISPLAY", ""))

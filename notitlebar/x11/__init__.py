# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import sys
if sys.platform.startswith("win") or sys.platform == "darwin":
    raise ImportError("no X11 support on %s" % sys.platform)

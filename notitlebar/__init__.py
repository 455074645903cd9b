# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

__version__ = "1.0"
__author__ = "The notitlebar developers"

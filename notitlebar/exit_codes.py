# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

from enum import IntEnum
from typing import TypeAlias


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    INTERNAL_ERROR = 2
    NO_DISPLAY = 3
    COMPONENT_MISSING = 4


ExitValue: TypeAlias = ExitCode | int


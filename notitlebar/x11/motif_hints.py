# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

"""
Conversion of the `_MOTIF_WM_HINTS` property to and from the text format
used by xprop with the `32cccic` format:
    decode
    encode
"""

import re
from typing import Final
from collections.abc import Sequence

from notitlebar.log import Logger

log = Logger("x11", "decorations")

MOTIF_WM_HINTS: Final[str] = "_MOTIF_WM_HINTS"
# flags, functions and decorations are cardinals, input_mode is signed, status is a cardinal:
MOTIF_WM_HINTS_FORMAT: Final[str] = "32cccic"
FIELD_COUNT: Final[int] = 5
DECORATIONS_INDEX: Final[int] = 2

CARDINAL_RANGE = (0, 2**32 - 1)
INTEGER_RANGE = (-2**31, 2**31 - 1)
FIELD_RANGES = (CARDINAL_RANGE, CARDINAL_RANGE, CARDINAL_RANGE, INTEGER_RANGE, CARDINAL_RANGE)

INT_RE = re.compile(r"-?[0-9]+")

# the only two values of the "decorations" field we ever write:
TITLE_BAR: Final[int] = 1
NO_TITLE_BAR: Final[int] = 0


class MotifWMHints:
    __slots__ = ("flags", "functions", "decorations", "input_mode", "status")

    def __init__(self, flags: int = 2, functions: int = 0, decorations: int = TITLE_BAR,
                 input_mode: int = 0, status: int = 0):
        self.flags = flags
        self.functions = functions
        self.decorations = decorations
        self.input_mode = input_mode
        self.status = status

    # found in mwmh.h:
    # "flags":
    FUNCTIONS_BIT   = 0
    DECORATIONS_BIT = 1
    INPUT_MODE_BIT  = 2
    STATUS_BIT      = 3
    # "decorations":
    ALL_BIT         = 0
    BORDER_BIT      = 1
    RESIZEH_BIT     = 2
    TITLE_BIT       = 3
    MENU_BIT        = 4
    MINIMIZE_BIT    = 5
    MAXIMIZE_BIT    = 6

    FLAGS_STR: dict[int, str] = {
        FUNCTIONS_BIT      : "functions",
        DECORATIONS_BIT    : "decorations",
        INPUT_MODE_BIT     : "input",
        STATUS_BIT         : "status",
    }
    DECORATIONS_STR: dict[int, str] = {
        ALL_BIT      : "all",
        BORDER_BIT   : "border",
        RESIZEH_BIT  : "resizeh",
        TITLE_BIT    : "title",
        MENU_BIT     : "menu",
        MINIMIZE_BIT : "minimize",
        MAXIMIZE_BIT : "maximize",
    }

    def astuple(self) -> tuple[int, int, int, int, int]:
        return self.flags, self.functions, self.decorations, self.input_mode, self.status

    def __eq__(self, other) -> bool:
        if not isinstance(other, MotifWMHints):
            return NotImplemented
        return self.astuple() == other.astuple()

    def __hash__(self) -> int:
        return hash(self.astuple())

    def has_title_bar(self) -> bool:
        return self.decorations == TITLE_BAR

    def no_title_bar(self) -> bool:
        return self.decorations == NO_TITLE_BAR

    def with_title_bar(self, title_bar: bool) -> "MotifWMHints":
        """
        Returns a copy of these hints with only the "decorations" field changed.
        """
        flags, functions, _, input_mode, status = self.astuple()
        decorations = TITLE_BAR if title_bar else NO_TITLE_BAR
        return MotifWMHints(flags, functions, decorations, input_mode, status)

    def bits_to_strs(self, int_val: int, flag_bit: int, dict_str: dict) -> Sequence[str]:
        if flag_bit and not self.flags & (2**flag_bit):
            # the bit is not set, ignore this attribute
            return ()
        return tuple(v for k, v in dict_str.items() if int_val & (2**k))

    def flags_strs(self) -> Sequence[str]:
        return self.bits_to_strs(self.flags, 0, MotifWMHints.FLAGS_STR)

    def decorations_strs(self) -> Sequence[str]:
        return self.bits_to_strs(self.decorations, MotifWMHints.DECORATIONS_BIT, MotifWMHints.DECORATIONS_STR)

    def __repr__(self):
        return "MotifWMHints(%s)" % encode(self)

    def __str__(self):
        return "MotifWMHints(%s)" % ({
            "flags": self.flags_strs(),
            "decorations": self.decorations_strs(),
            "raw": encode(self),
        })


def encode(hints: MotifWMHints) -> str:
    return ", ".join(str(int(v)) for v in hints.astuple())


def parse_values(value: str) -> MotifWMHints | None:
    parts = value.split(", ")
    if len(parts) != FIELD_COUNT:
        log("expected %i values but found %i in %r", FIELD_COUNT, len(parts), value)
        return None
    values: list[int] = []
    for part, (vmin, vmax) in zip(parts, FIELD_RANGES):
        if not INT_RE.fullmatch(part):
            log("invalid integer %r in %r", part, value)
            return None
        v = int(part)
        if v < vmin or v > vmax:
            log("value %i out of range in %r", v, value)
            return None
        values.append(v)
    return MotifWMHints(*values)


def decode(raw: str) -> MotifWMHints | None:
    """
    Parses the output of `xprop -notype _MOTIF_WM_HINTS`,
    ie: "_MOTIF_WM_HINTS = 2, 0, 1, 0, 0"
    Returns None for anything else,
    including "_MOTIF_WM_HINTS:  not found." when the property is not set.
    """
    name, sep, value = raw.strip().partition(" = ")
    # make sure that we got the correct property:
    if not sep or name != MOTIF_WM_HINTS:
        log("unexpected property output: %r", raw)
        return None
    return parse_values(value)

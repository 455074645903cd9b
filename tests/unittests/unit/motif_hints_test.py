#!/usr/bin/env python3
# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import unittest

from notitlebar.x11.motif_hints import MotifWMHints, decode, encode, parse_values, MOTIF_WM_HINTS


class TestMotifHints(unittest.TestCase):

    def test_decode(self):
        hints = decode("_MOTIF_WM_HINTS = 2, 0, 1, 0, 0\n")
        assert hints == MotifWMHints(2, 0, 1, 0, 0)
        assert hints.has_title_bar()
        assert not hints.no_title_bar()
        hints = decode("_MOTIF_WM_HINTS = 2, 0, 0, 0, 0")
        assert hints.no_title_bar()
        assert not hints.has_title_bar()

    def test_encode(self):
        assert encode(MotifWMHints()) == "2, 0, 1, 0, 0"
        assert encode(MotifWMHints(3, 5, 0, -1, 7)) == "3, 5, 0, -1, 7"

    def test_roundtrip(self):
        for values in ((2, 0, 1, 0, 0), (3, 62, 0, 1, 0), (1, 2**32 - 1, 126, -2**31, 2**32 - 1)):
            hints = MotifWMHints(*values)
            assert decode(f"{MOTIF_WM_HINTS} = {encode(hints)}") == hints
            assert hints.astuple() == values

    def test_wrong_property(self):
        assert decode("_NET_WM_NAME = 2, 0, 1, 0, 0") is None
        assert decode("_MOTIF_WM_HINTS_X = 2, 0, 1, 0, 0") is None
        assert decode("_MOTIF_WM_HINTS:  not found.") is None
        assert decode("") is None

    def test_invalid_values(self):
        for value in (
            "2, 0, 1, 0",
            "2, 0, 1, 0, 0, 0",
            "2,0,1,0,0",
            "2, 0, one, 0, 0",
            "2, 0, 1.5, 0, 0",
            "2, 0, 0x1, 0, 0",
            "2, 0, +1, 0, 0",
            "2, 0, 1_0, 0, 0",
            "2, 0, -1, 0, 0",
            "2, 0, 1, 0, 4294967296",
            "2, 0, 1, 2147483648, 0",
            "",
        ):
            assert parse_values(value) is None, f"{value!r} should not be accepted"
            assert decode(f"{MOTIF_WM_HINTS} = {value}") is None

    def test_with_title_bar(self):
        hints = MotifWMHints(3, 6, 1, 2, 0)
        hidden = hints.with_title_bar(False)
        assert hidden.astuple() == (3, 6, 0, 2, 0)
        assert hidden.with_title_bar(True) == hints
        # the original is not modified:
        assert hints.has_title_bar()

    def test_equality(self):
        assert MotifWMHints() == MotifWMHints(2, 0, 1, 0, 0)
        assert MotifWMHints() != MotifWMHints(2, 0, 0, 0, 0)
        assert MotifWMHints() != (2, 0, 1, 0, 0)
        assert len({MotifWMHints(), MotifWMHints(2, 0, 1, 0, 0)}) == 1

    def test_strs(self):
        hints = MotifWMHints(2, 0, 1, 0, 0)
        assert hints.flags_strs() == ("decorations", )
        assert hints.decorations_strs() == ("all", )
        # decorations are ignored when the flag is not set:
        assert MotifWMHints(1, 0, 1, 0, 0).decorations_strs() == ()
        assert repr(hints) == "MotifWMHints(2, 0, 1, 0, 0)"
        assert str(hints).find("decorations") > 0


def main():
    unittest.main()


if __name__ == '__main__':
    main()

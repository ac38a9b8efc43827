# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for ranges.py: OS/2 Unicode range classification."""

from io import BytesIO

import pytest

from pdfunicode.ranges import (
    OS2_UNICODE_RANGES,
    UNICODE_RANGES,
    _flatten_ranges,
    get_unicode_range_bits,
    get_unicode_range_for,
)


def _make_font_with_unicode_ranges(words: tuple[int, int, int, int]) -> bytes:
    """Creates a minimal TrueType font with explicit ulUnicodeRange values."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.ttLib.tables._g_l_y_f import Glyph

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space"])
    fb.setupCharacterMap({32: "space"})
    fb.setupGlyf({".notdef": Glyph(), "space": Glyph()})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "space": (250, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "Test", "styleName": "Regular"})
    fb.setupOS2(
        ulUnicodeRange1=words[0],
        ulUnicodeRange2=words[1],
        ulUnicodeRange3=words[2],
        ulUnicodeRange4=words[3],
    )
    fb.setupPost()

    buf = BytesIO()
    fb.font.save(buf)
    return buf.getvalue()


class TestGetUnicodeRangeFor:
    """Tests for get_unicode_range_for."""

    def test_basic_latin(self):
        """'A' is in Basic Latin (bit 0)."""
        assert get_unicode_range_for(0x0041) == 0

    def test_alphabetic_presentation_forms(self):
        """The fi ligature is in Alphabetic Presentation Forms (bit 62)."""
        assert get_unicode_range_for(0xFB01) == 62

    @pytest.mark.parametrize(
        ("code", "bit"),
        [
            (0x05D0, 11),  # Hebrew
            (0x0627, 13),  # Arabic
            (0x0750, 13),  # Arabic Supplement shares the Arabic bit
            (0x1D00, 4),  # Phonetic Extensions share the IPA bit
            (0x4E00, 59),  # CJK Unified Ideographs
            (0x20000, 59),  # CJK Extension B
            (0xE000, 60),  # Private Use Area
            (0xFE70, 67),  # Arabic Presentation Forms-B
            (0x1F000, 122),  # Mahjong Tiles
        ],
    )
    def test_known_blocks(self, code, bit):
        """Code points resolve to the bit of their block."""
        assert get_unicode_range_for(code) == bit

    def test_block_end_not_covered(self):
        """The declared end of a block is exclusive."""
        assert get_unicode_range_for(0x05FF) is None
        assert get_unicode_range_for(0x05FE) == 11

    @pytest.mark.parametrize("code", [0x0800, 0x1F600, 0x30000, 0x10FFFF])
    def test_gaps(self, code):
        """Code points without an assigned bit return None."""
        assert get_unicode_range_for(code) is None

    def test_every_range_start_resolves(self):
        """The first code point of each interval maps to its bit."""
        for r in UNICODE_RANGES:
            assert get_unicode_range_for(r.start) == r.bit


class TestUnicodeRangeTable:
    """Tests for the flattened range table."""

    def test_sorted_and_disjoint(self):
        """Intervals are sorted by start and never overlap."""
        for prev, cur in zip(UNICODE_RANGES, UNICODE_RANGES[1:]):
            assert prev.start < cur.start
            assert prev.stop <= cur.start

    def test_all_bits_present(self):
        """Bits 0-122 each own at least one interval."""
        assert len(OS2_UNICODE_RANGES) == 123
        assert {r.bit for r in UNICODE_RANGES} == set(range(123))

    def test_overlap_rejected(self):
        """Overlapping blocks are reported at build time."""
        with pytest.raises(ValueError, match="overlaps"):
            _flatten_ranges((((0x0000, 0x007F),), ((0x0040, 0x00FF),)))


class TestGetUnicodeRangeBits:
    """Tests for get_unicode_range_bits."""

    def test_empty(self):
        """No code points set no bits."""
        assert get_unicode_range_bits([]) == (0, 0, 0, 0)

    def test_latin_and_ligatures(self):
        """Bits land in the right 32-bit word."""
        assert get_unicode_range_bits([0x0041, 0x0042, 0xFB01]) == (1, 1 << 30, 0, 0)

    def test_supplementary_sets_non_plane_0(self):
        """Code points beyond the BMP also set bit 57."""
        assert get_unicode_range_bits([0x1F000]) == (0, 1 << 25, 0, 1 << 26)

    def test_uncovered_code_points_ignored(self):
        """Code points in gaps contribute nothing."""
        assert get_unicode_range_bits([0x0800, 0x05FF]) == (0, 0, 0, 0)

    def test_round_trip_through_os2_table(self):
        """Computed words survive a real OS/2 table."""
        from fontTools.ttLib import TTFont

        code_points = [0x0041, 0x00E9, 0x0627, 0x05D0, 0x2701, 0xFB01]
        words = get_unicode_range_bits(code_points)
        font = TTFont(BytesIO(_make_font_with_unicode_ranges(words)))

        assert font["OS/2"].getUnicodeRanges() == {0, 1, 11, 13, 47, 62}

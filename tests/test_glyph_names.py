# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for glyph_names.py: glyph name to Unicode resolution."""

import pytest

from pdfunicode.glyph_names import get_unicode_for_glyph


class TestTableLookup:
    """Tests for direct glyph table lookups."""

    def test_standard_glyph_names(self, standard_map):
        """AGL names resolve through the standard table."""
        assert get_unicode_for_glyph("A", standard_map) == 0x0041
        assert get_unicode_for_glyph("fi", standard_map) == 0xFB01
        assert get_unicode_for_glyph("udieresis", standard_map) == 0x00FC

    def test_dingbats_glyph_names(self, dingbats_map):
        """ZapfDingbats names resolve through the dingbats table."""
        assert get_unicode_for_glyph("a1", dingbats_map) == 0x2701

    def test_table_takes_precedence(self):
        """A table entry wins over the numeric naming convention."""
        table = {"uni0041": 0x0042}
        assert get_unicode_for_glyph("uni0041", table) == 0x0042

    def test_every_table_entry(self, dingbats_map):
        """Every name in a table resolves to its table value."""
        for name, code in dingbats_map.items():
            assert get_unicode_for_glyph(name, dingbats_map) == code


class TestNumericGlyphNames:
    """Tests for uniXXXX / uXXXX{XX} glyph names."""

    def test_uni_names(self, standard_map, dingbats_map):
        """uniXXXX names recover their code point."""
        assert get_unicode_for_glyph("uni0041", standard_map) == 0x0041
        assert get_unicode_for_glyph("uni2701", dingbats_map) == 0x2701

    def test_u_names(self, standard_map, dingbats_map):
        """uXXXX names recover their code point."""
        assert get_unicode_for_glyph("u0041", standard_map) == 0x0041
        assert get_unicode_for_glyph("u2701", dingbats_map) == 0x2701

    def test_u_names_beyond_bmp(self):
        """Five and six digit uXXXXX names cover supplementary planes."""
        assert get_unicode_for_glyph("u1F600", {}) == 0x1F600
        assert get_unicode_for_glyph("u10FFFD", {}) == 0x10FFFD

    def test_lowercase_hex_digits(self):
        """Hex digits are accepted in either case."""
        assert get_unicode_for_glyph("uni00e9", {}) == 0x00E9
        assert get_unicode_for_glyph("u1f600", {}) == 0x1F600

    def test_value_beyond_unicode_rejected(self):
        """Values above U+10FFFF are not code points."""
        assert get_unicode_for_glyph("u110000", {}) is None
        assert get_unicode_for_glyph("uFFFFFF", {}) is None

    @pytest.mark.parametrize(
        "name",
        [
            "uni004",  # too few digits
            "uni00410042",  # multiple code points
            "uni004G",  # not hex
            "Uni0041",  # uppercase prefix
            "U0041",
            "u123",  # too few digits
            "u1234567",  # too many digits
            "uni 0041",
        ],
    )
    def test_malformed_names(self, name):
        """Names that do not follow the convention are unresolved."""
        assert get_unicode_for_glyph(name, {}) is None


class TestUnresolvable:
    """Tests for names that cannot be resolved."""

    def test_unknown_name(self, standard_map, dingbats_map):
        """Unknown names return None."""
        assert get_unicode_for_glyph("Qwerty", standard_map) is None
        assert get_unicode_for_glyph("Qwerty", dingbats_map) is None

    def test_empty_name(self, standard_map):
        """An empty name returns None."""
        assert get_unicode_for_glyph("", standard_map) is None

    def test_standard_name_not_in_dingbats(self, dingbats_map):
        """Tables are not merged: 'A' is not a dingbat."""
        assert get_unicode_for_glyph("A", dingbats_map) is None

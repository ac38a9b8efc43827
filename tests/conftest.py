# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the pdfunicode test suite."""

from collections.abc import Mapping

import pytest

from pdfunicode.glyphlist import get_dingbats_glyphs_unicode, get_glyphs_unicode


@pytest.fixture
def standard_map() -> Mapping[str, int]:
    """Adobe Glyph List mapping."""
    return get_glyphs_unicode()


@pytest.fixture
def dingbats_map() -> Mapping[str, int]:
    """ITC Zapf Dingbats glyph list mapping."""
    return get_dingbats_glyphs_unicode()

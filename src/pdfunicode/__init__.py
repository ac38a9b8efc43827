# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""pdfunicode - Unicode resolution of glyphs for PDF text extraction."""

from importlib.metadata import PackageNotFoundError, version

from .categories import CharCategory, get_char_unicode_category
from .exceptions import GlyphListError, PDFUnicodeError
from .glyph_names import get_unicode_for_glyph
from .glyphlist import (
    get_dingbats_glyphs_unicode,
    get_glyphs_unicode,
    parse_glyph_list,
)
from .normalize import (
    get_normalized_unicodes,
    is_rtl_char,
    normalize_glyph_text,
    reverse_if_rtl,
)
from .ranges import UnicodeRange, get_unicode_range_bits, get_unicode_range_for
from .special_values import map_special_unicode_values

try:
    __version__ = version("pdfunicode")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    # Code point remapping
    "map_special_unicode_values",
    # Character categories
    "CharCategory",
    "get_char_unicode_category",
    # Glyph names
    "get_unicode_for_glyph",
    "get_glyphs_unicode",
    "get_dingbats_glyphs_unicode",
    "parse_glyph_list",
    # OS/2 Unicode ranges
    "UnicodeRange",
    "get_unicode_range_for",
    "get_unicode_range_bits",
    # Ligatures and RTL
    "get_normalized_unicodes",
    "normalize_glyph_text",
    "reverse_if_rtl",
    "is_rtl_char",
    # Exceptions
    "PDFUnicodeError",
    "GlyphListError",
]

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Ligature decomposition and right-to-left reordering for text extraction.

A glyph for a ligature or presentation form is a single character in the
font, but the text it represents is a sequence of base characters.
Extraction replaces such characters with their decomposition. For
right-to-left scripts the decomposed sequence is stored in logical order,
so it is reversed before being appended to visually ordered output.
"""

import functools
import logging
import unicodedata
from collections.abc import Mapping
from types import MappingProxyType

from .constants import RTL_BLOCKS

logger = logging.getLogger(__name__)

# Compatibility characters whose decomposition is used for text extraction
# (inclusive bounds). Characters in these ranges that NFKC leaves alone
# are skipped.
DECOMPOSABLE_RANGES: tuple[tuple[int, int], ...] = (
    (0x00A8, 0x00A8),  # diaeresis
    (0x00AF, 0x00AF),  # macron
    (0x00B4, 0x00B5),  # acute accent, micro sign
    (0x00B8, 0x00B8),  # cedilla
    (0x0132, 0x0133),  # IJ, ij
    (0x013F, 0x0140),  # Ldot, ldot
    (0x0149, 0x0149),  # napostrophe
    (0x017F, 0x017F),  # long s
    (0x01C4, 0x01CC),  # DZcaron .. nj
    (0x01F1, 0x01F3),  # DZ .. dz
    (0x02D8, 0x02DD),  # spacing breve .. double acute
    (0x037A, 0x037A),  # Greek ypogegrammeni
    (0x0384, 0x0385),  # Greek tonos, dialytika tonos
    (0x0587, 0x0587),  # Armenian ech yiwn
    (0x0675, 0x0678),  # Arabic high hamza letters
    (0x0E33, 0x0E33),  # Thai sara am
    (0x0EB3, 0x0EB3),  # Lao vowel sign am
    (0x0EDC, 0x0EDD),  # Lao ho no, ho mo
    (0x0F77, 0x0F77),  # Tibetan vocalic rr
    (0x0F79, 0x0F79),  # Tibetan vocalic ll
    (0x1E9A, 0x1E9A),  # a with right half ring
    (0x1FBD, 0x1FC1),  # Greek spacing koronis .. dialytika perispomeni
    (0x1FCD, 0x1FCF),  # Greek psili/varia .. psili/perispomeni
    (0x1FDD, 0x1FDF),  # Greek dasia/varia .. dasia/perispomeni
    (0x1FED, 0x1FEE),  # Greek dialytika varia, dialytika oxia
    (0x1FFD, 0x1FFE),  # Greek oxia, dasia
    (0x2017, 0x2017),  # double low line
    (0x2024, 0x2026),  # one dot leader .. horizontal ellipsis
    (0x2033, 0x2037),  # double prime .. reversed triple prime
    (0x203C, 0x203C),  # double exclamation mark
    (0x203E, 0x203E),  # overline
    (0x2047, 0x2049),  # double question mark .. exclamation question mark
    (0x2057, 0x2057),  # quadruple prime
    (0x20A8, 0x20A8),  # rupee sign
    (0x2100, 0x2109),  # account of .. degree fahrenheit
    (0x2116, 0x2116),  # numero sign
    (0x2120, 0x2122),  # service mark .. trade mark sign
    (0x2153, 0x217F),  # vulgar fractions, Roman numerals
    (0x222C, 0x2230),  # double integral .. volume integral
    (0x2474, 0x24B5),  # parenthesized and full stop digits/letters
    (0x2A0C, 0x2A0C),  # quadruple integral
    (0x2A74, 0x2A76),  # double colon equal .. three equals
    (0x2E9F, 0x2E9F),  # CJK radical mother
    (0x2EF3, 0x2EF3),  # CJK radical C-simplified turtle
    (0x2F00, 0x2FD5),  # Kangxi radicals
    (0x309B, 0x309C),  # katakana-hiragana voiced sound marks
    (0x309F, 0x309F),  # hiragana digraph yori
    (0x30FF, 0x30FF),  # katakana digraph koto
    (0x3131, 0x318E),  # Hangul compatibility jamo
    (0x3200, 0x33FF),  # enclosed CJK letters, CJK compatibility
    (0xA770, 0xA770),  # modifier letter us
    (0xF900, 0xFAD9),  # CJK compatibility ideographs
    (0xFB00, 0xFB4F),  # Alphabetic Presentation Forms
    (0xFB50, 0xFDFB),  # Arabic Presentation Forms-A
    (0xFE10, 0xFE19),  # vertical forms
    (0xFE30, 0xFE6B),  # CJK compatibility forms, small form variants
    (0xFE70, 0xFEFC),  # Arabic Presentation Forms-B
)


@functools.cache
def get_normalized_unicodes() -> Mapping[str, str]:
    """Returns the ligature/presentation-form decomposition table.

    The table is built once from the Unicode character database and then
    shared; it is read-only.

    Returns:
        Mapping from a single character to its decomposed string, e.g.
        '\\ufb01' -> 'fi'. Characters without a decomposition are absent
        and should be used unchanged.
    """
    table: dict[str, str] = {}
    for first, last in DECOMPOSABLE_RANGES:
        for code in range(first, last + 1):
            char = chr(code)
            normalized = unicodedata.normalize("NFKC", char)
            if normalized != char:
                table[char] = normalized

    logger.debug(
        "Built normalized Unicode table: %d entries (Unicode %s)",
        len(table),
        unicodedata.unidata_version,
    )
    return MappingProxyType(table)


def is_rtl_char(code: int) -> bool:
    """Check if a code point belongs to a right-to-left script block."""
    return any(start <= code < stop for start, stop in RTL_BLOCKS)


def reverse_if_rtl(chars: str) -> str:
    """Reverses a string whose first character is right-to-left.

    This is not a bidi algorithm: it only reorders a single decomposed
    character sequence that is known to belong to one script.

    Args:
        chars: Text obtained for one glyph, typically a decomposition from
            :func:`get_normalized_unicodes`.

    Returns:
        The reversed string for RTL content, otherwise ``chars`` unchanged.
    """
    if len(chars) <= 1 or not is_rtl_char(ord(chars[0])):
        return chars
    return chars[::-1]


def normalize_glyph_text(char: str) -> str:
    """Returns the extraction text for a single glyph character.

    Decomposes ligatures and presentation forms, then puts RTL
    decompositions into visual order.

    Args:
        char: Character produced by a glyph.

    Returns:
        Text to emit for the glyph.
    """
    return reverse_if_rtl(get_normalized_unicodes().get(char, char))

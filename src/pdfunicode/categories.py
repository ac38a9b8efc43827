# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Whitespace and diacritic classification of single characters."""

import functools
import unicodedata
from dataclasses import dataclass

# Characters treated as whitespace during text extraction
WHITESPACE_CODE_POINTS = frozenset(
    {
        0x0009,  # CHARACTER TABULATION
        0x000A,  # LINE FEED
        0x000B,  # LINE TABULATION
        0x000C,  # FORM FEED
        0x000D,  # CARRIAGE RETURN
        0x0020,  # SPACE
        0x00A0,  # NO-BREAK SPACE
        0x1680,  # OGHAM SPACE MARK
        *range(0x2000, 0x200B),  # EN QUAD .. HAIR SPACE
        0x2028,  # LINE SEPARATOR
        0x2029,  # PARAGRAPH SEPARATOR
        0x202F,  # NARROW NO-BREAK SPACE
        0x205F,  # MEDIUM MATHEMATICAL SPACE
        0x3000,  # IDEOGRAPHIC SPACE
        0xFEFF,  # ZERO WIDTH NO-BREAK SPACE (BOM)
    }
)

# General category of nonspacing combining marks
DIACRITIC_CATEGORY = "Mn"


@dataclass(frozen=True)
class CharCategory:
    """Unicode category flags relevant to text extraction."""

    is_diacritic: bool = False
    is_whitespace: bool = False


@functools.cache
def _category_for_code(code: int) -> CharCategory:
    return CharCategory(
        is_diacritic=unicodedata.category(chr(code)) == DIACRITIC_CATEGORY,
        is_whitespace=code in WHITESPACE_CODE_POINTS,
    )


def get_char_unicode_category(char: str) -> CharCategory:
    """Classifies a single character as diacritic and/or whitespace.

    A character is a diacritic when its general category is Mn
    (nonspacing mark), which covers accents as well as Hebrew points,
    Arabic harakat and Indic vowel signs. Both flags are evaluated
    independently. Results are cached per code point.

    Args:
        char: A one-character string. Only the first character of a
            longer string is looked at.

    Returns:
        The character's CharCategory.
    """
    if not char:
        return CharCategory()

    return _category_for_code(ord(char[0]))

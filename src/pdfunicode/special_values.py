# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Remapping of nonstandard code points to their standard equivalents.

Adobe's Symbol and Expert fonts place serif/sans variants of a few signs
and the pieces of large brackets in the Private Use Area. Text extracted
through those code points is meaningless to anyone but the font, so they
are mapped back onto the standard characters they depict. Unmapped code
points in that band, and the Specials block, carry no text at all.
"""

from types import MappingProxyType

from .constants import (
    NO_CHARACTER,
    SPECIALS_END,
    SPECIALS_START,
    VENDOR_PUA_END,
    VENDOR_PUA_START,
)

SPECIAL_UNICODE_VALUES: MappingProxyType[int, int] = MappingProxyType(
    {
        0x00AD: 0x002D,  # softhyphen -> HYPHEN-MINUS
        0xF6D9: 0x00A9,  # copyrightserif -> COPYRIGHT SIGN
        0xF6DA: 0x00AE,  # registerserif -> REGISTERED SIGN
        0xF6DB: 0x2122,  # trademarkserif -> TRADE MARK SIGN
        0xF8E8: 0x00AE,  # registersans -> REGISTERED SIGN
        0xF8E9: 0x00A9,  # copyrightsans -> COPYRIGHT SIGN
        0xF8EA: 0x2122,  # trademarksans -> TRADE MARK SIGN
        0xF8EB: 0x239B,  # parenlefttp -> LEFT PARENTHESIS UPPER HOOK
        0xF8EC: 0x239C,  # parenleftex -> LEFT PARENTHESIS EXTENSION
        0xF8ED: 0x239D,  # parenleftbt -> LEFT PARENTHESIS LOWER HOOK
        0xF8EE: 0x23A1,  # bracketlefttp -> LEFT SQUARE BRACKET UPPER CORNER
        0xF8EF: 0x23A2,  # bracketleftex -> LEFT SQUARE BRACKET EXTENSION
        0xF8F0: 0x23A3,  # bracketleftbt -> LEFT SQUARE BRACKET LOWER CORNER
        0xF8F1: 0x23A7,  # bracelefttp -> LEFT CURLY BRACKET UPPER HOOK
        0xF8F2: 0x23A8,  # braceleftmid -> LEFT CURLY BRACKET MIDDLE PIECE
        0xF8F3: 0x23A9,  # braceleftbt -> LEFT CURLY BRACKET LOWER HOOK
        0xF8F4: 0x23AA,  # braceex -> CURLY BRACKET EXTENSION
        0xF8F6: 0x239E,  # parenrighttp -> RIGHT PARENTHESIS UPPER HOOK
        0xF8F7: 0x239F,  # parenrightex -> RIGHT PARENTHESIS EXTENSION
        0xF8F8: 0x23A0,  # parenrightbt -> RIGHT PARENTHESIS LOWER HOOK
        0xF8F9: 0x23A4,  # bracketrighttp -> RIGHT SQUARE BRACKET UPPER CORNER
        0xF8FA: 0x23A5,  # bracketrightex -> RIGHT SQUARE BRACKET EXTENSION
        0xF8FB: 0x23A6,  # bracketrightbt -> RIGHT SQUARE BRACKET LOWER CORNER
        0xF8FC: 0x23AB,  # bracerighttp -> RIGHT CURLY BRACKET UPPER HOOK
        0xF8FD: 0x23AC,  # bracerightmid -> RIGHT CURLY BRACKET MIDDLE PIECE
        0xF8FE: 0x23AD,  # bracerightbt -> RIGHT CURLY BRACKET LOWER HOOK
    }
)


def map_special_unicode_values(code: int) -> int:
    """Maps a code point to the standard character it stands for.

    Args:
        code: Unicode code point, typically taken from a font's cmap or
            a ToUnicode mapping.

    Returns:
        The remapped code point for known vendor PUA glyphs, ``0`` for
        unmapped vendor PUA code points and the Specials block, and
        ``code`` itself otherwise.
    """
    mapped = SPECIAL_UNICODE_VALUES.get(code)
    if mapped is not None:
        return mapped

    if VENDOR_PUA_START <= code <= VENDOR_PUA_END:
        return NO_CHARACTER

    if SPECIALS_START <= code <= SPECIALS_END:
        return NO_CHARACTER

    return code

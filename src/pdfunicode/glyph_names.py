# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name to Unicode resolution.

Fonts name their glyphs after the Adobe Glyph List, after a vendor list
such as ZapfDingbats, or synthetically after the code point itself
('uni2701', 'u1F600'). Resolution tries each convention in turn.
"""

import re
from collections.abc import Callable, Mapping

from .constants import MAX_CODE_POINT

# 'uniXXXX': exactly four hex digits
_UNI_NAME_RE = re.compile(r"uni([0-9A-Fa-f]{4})")

# 'uXXXX' through 'uXXXXXX': four to six hex digits
_U_NAME_RE = re.compile(r"u([0-9A-Fa-f]{4,6})")


def _parse_hex_name(pattern: re.Pattern[str], glyph_name: str) -> int | None:
    match = pattern.fullmatch(glyph_name)
    if match is None:
        return None

    code = int(match.group(1), 16)
    if code > MAX_CODE_POINT:
        return None
    return code


def _lookup_table(glyph_name: str, glyph_table: Mapping[str, int]) -> int | None:
    return glyph_table.get(glyph_name)


def _lookup_uni_name(glyph_name: str, glyph_table: Mapping[str, int]) -> int | None:
    return _parse_hex_name(_UNI_NAME_RE, glyph_name)


def _lookup_u_name(glyph_name: str, glyph_table: Mapping[str, int]) -> int | None:
    return _parse_hex_name(_U_NAME_RE, glyph_name)


# Resolution strategies, tried in order until one succeeds
_STRATEGIES: tuple[Callable[[str, Mapping[str, int]], int | None], ...] = (
    _lookup_table,
    _lookup_uni_name,
    _lookup_u_name,
)


def get_unicode_for_glyph(
    glyph_name: str, glyph_table: Mapping[str, int]
) -> int | None:
    """Resolves a glyph name to its Unicode code point.

    Strategies, in order:
    1. Direct lookup in ``glyph_table``
    2. 'uniXXXX' names with exactly four hex digits
    3. 'uXXXX' to 'uXXXXXX' names with four to six hex digits

    Hex digits may use either case; the 'uni'/'u' prefix must be
    lowercase. Values beyond U+10FFFF are rejected.

    Args:
        glyph_name: Glyph name as found in the font or encoding.
        glyph_table: Glyph name to code point mapping, e.g. from
            :func:`pdfunicode.glyphlist.get_glyphs_unicode`.

    Returns:
        The code point, or None if the name cannot be resolved.
    """
    if not glyph_name:
        return None

    for strategy in _STRATEGIES:
        code = strategy(glyph_name, glyph_table)
        if code is not None:
            return code
    return None

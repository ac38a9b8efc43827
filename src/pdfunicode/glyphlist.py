# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name to Unicode tables.

Provides the Adobe Glyph List (via fontTools) and the ITC Zapf Dingbats
glyph list (packaged resource) as read-only mappings, suitable as the
``glyph_table`` argument of :func:`pdfunicode.get_unicode_for_glyph`.
Both tables are built on first use and cached.
"""

import functools
import logging
from collections.abc import Mapping
from importlib.resources import files
from types import MappingProxyType

from fontTools.agl import LEGACY_AGL2UV

from .constants import ZAPFDINGBATS_RESOURCE
from .exceptions import GlyphListError

logger = logging.getLogger(__name__)


def parse_glyph_list(text: str) -> dict[str, int]:
    """Parses a glyph list in the Adobe glyph list format.

    Each data line has the form ``name;XXXX[ XXXX...]``. Lines starting
    with ``#`` and blank lines are ignored. For names mapping to a
    sequence of code points only the first is kept.

    Args:
        text: Contents of the glyph list file.

    Returns:
        Dict mapping glyph names to Unicode code points.

    Raises:
        GlyphListError: If a data line is malformed.
    """
    mapping: dict[str, int] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        name, sep, values = line.partition(";")
        name = name.strip()
        hex_values = values.split()
        if not sep or not name or not hex_values:
            raise GlyphListError(f"Malformed glyph list line {line_no}: {line!r}")

        try:
            mapping[name] = int(hex_values[0], 16)
        except ValueError as e:
            raise GlyphListError(
                f"Invalid Unicode value on glyph list line {line_no}: {line!r}"
            ) from e

    return mapping


@functools.cache
def get_glyphs_unicode() -> Mapping[str, int]:
    """Returns the Adobe Glyph List as a read-only mapping.

    Built from the full legacy list (LEGACY_AGL2UV), not the smaller AGLFN
    subset for new fonts. Each entry holds a list of code points; only
    the first is kept, as in :func:`parse_glyph_list`.

    Returns:
        Mapping from AGL glyph names (e.g. 'A', 'fi', 'afii57636') to
        Unicode code points.
    """
    table = MappingProxyType({name: uvs[0] for name, uvs in LEGACY_AGL2UV.items()})
    logger.debug("Loaded %d Adobe glyph names", len(table))
    return table


@functools.cache
def get_dingbats_glyphs_unicode() -> Mapping[str, int]:
    """Returns the ITC Zapf Dingbats glyph list as a read-only mapping.

    Returns:
        Mapping from Zapf Dingbats glyph names (e.g. 'a1') to Unicode
        code points.

    Raises:
        GlyphListError: If the packaged glyph list cannot be read or
            parsed.
    """
    try:
        resource_path = files("pdfunicode") / "resources" / ZAPFDINGBATS_RESOURCE
        text = resource_path.read_text(encoding="ascii")
    except Exception as e:
        raise GlyphListError(f"Could not load ZapfDingbats glyph list: {e}") from e

    table = MappingProxyType(parse_glyph_list(text))
    logger.debug("Loaded %d ZapfDingbats glyph names", len(table))
    return table

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Unicode block bounds and fixed lookup parameters."""

# Highest valid Unicode scalar value
MAX_CODE_POINT = 0x10FFFF

# Returned in place of a code point that should not produce any text
NO_CHARACTER = 0x0000

# Band of the BMP Private Use Area used by Adobe Symbol/Expert fonts for
# serif/sans variants and bracket construction pieces (inclusive bounds)
VENDOR_PUA_START = 0xF600
VENDOR_PUA_END = 0xF8FF

# Specials block (U+FFF0-U+FFFF): replacement char, noncharacters
SPECIALS_START = 0xFFF0
SPECIALS_END = 0xFFFF

# Scripts written right-to-left, including their presentation forms.
# Half-open intervals, like range().
RTL_BLOCKS: tuple[tuple[int, int], ...] = (
    (0x0590, 0x0600),  # Hebrew
    (0x0600, 0x0700),  # Arabic
    (0x0750, 0x0780),  # Arabic Supplement
    (0xFB1D, 0xFB50),  # Alphabetic Presentation Forms (Hebrew)
    (0xFB50, 0xFE00),  # Arabic Presentation Forms-A
    (0xFE70, 0xFF00),  # Arabic Presentation Forms-B
)

# Packaged ITC Zapf Dingbats glyph list (Adobe glyph list format)
ZAPFDINGBATS_RESOURCE = "zapfdingbats.txt"

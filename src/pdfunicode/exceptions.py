# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for pdfunicode."""


class PDFUnicodeError(Exception):
    """Base exception for all pdfunicode errors."""


class GlyphListError(PDFUnicodeError):
    """Glyph list data could not be loaded or parsed."""

"""Font I/O layer for plottext.

This module handles reading fonts using fonttools. It provides a clean
abstraction layer between fonttools and the domain models.

Key responsibilities:
- Load TTF/OTF fonts
- Map characters to glyph outlines as domain path segments
- Resolve font names to files
- Load fonts asynchronously behind the OutlineProvider protocol

Key classes:
- FontReader: Load a font and look up outlines
- FileFontProvider: Async font loading with a timeout
- CachingFontProvider: Locator-keyed handle cache
"""

from plottext.io.provider import (
    CachingFontProvider,
    FileFontProvider,
    FontHandle,
    OutlineProvider,
    resolve_locator,
)
from plottext.io.reader import FontReader

__all__ = [
    "CachingFontProvider",
    "FileFontProvider",
    "FontHandle",
    "FontReader",
    "OutlineProvider",
    "resolve_locator",
]

"""Font reader for loading TTF/OTF fonts.

This module provides the FontReader class for loading font files and
looking up character outlines as domain models.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from plottext.domain.glyph import FontMetrics, GlyphOutline
from plottext.io.converter import fonttools_glyph_to_outline


class FontReader:
    """Loads TTF/OTF fonts and maps characters to outlines.

    A loaded FontReader is the font handle the compiler works with: it
    answers ``metrics``, ``get_outline(char)`` and ``advance_width(char)``.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        outline = reader.get_outline("A")
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}

    def load(self) -> None:
        """Load the font file and its character map.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        font = TTFont(str(self._font_path))
        try:
            # Tables load lazily; touch the ones we need so corrupt data fails here.
            _ = font["head"].unitsPerEm  # type: ignore[attr-defined]
            _ = font["hmtx"].metrics  # type: ignore[attr-defined]
            self._cmap = font.getBestCmap() or {}
        except Exception:
            font.close()
            raise
        self._font = font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        if "CFF " in self._font or "CFF2" in self._font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Returns:
            Units per em value

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def metrics(self) -> FontMetrics:
        return FontMetrics(units_per_em=self.units_per_em)

    def glyph_name(self, char: str) -> str | None:
        """Get the glyph name a character maps to.

        Args:
            char: A single character

        Returns:
            Glyph name, or None if the character is not in the cmap

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._cmap.get(ord(char))

    def advance_width(self, char: str) -> float:
        """Get a character's horizontal advance in font units.

        Unmapped characters advance by the width of the fallback glyph
        (.notdef, the first glyph in glyph order), which is what a renderer
        would draw in their place.

        Args:
            char: A single character

        Returns:
            Advance width in font units (0 if no metrics exist)
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        name = self.glyph_name(char)
        if name is None:
            name = self._font.getGlyphOrder()[0]

        metrics = self._font["hmtx"].metrics  # type: ignore[attr-defined]
        if name in metrics:
            return float(metrics[name][0])
        return 0.0

    def get_outline(self, char: str) -> GlyphOutline | None:
        """Get the outline for a character.

        Args:
            char: A single character

        Returns:
            GlyphOutline domain model, or None if the character has no glyph

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        name = self.glyph_name(char)
        if name is None:
            return None

        glyph_set = self._font.getGlyphSet()
        if name not in glyph_set:
            return None

        return fonttools_glyph_to_outline(
            char=char,
            fonttools_glyph=glyph_set[name],
            glyph_set=glyph_set,
            advance_width=self.advance_width(char),
        )

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._cmap = {}

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

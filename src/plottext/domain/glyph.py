"""Glyph outline and font metric models.

This module defines the glyph domain model, which represents a single
character's outline and advance in font units, plus the font-wide metrics
and the placement the layout engine assigns to each character.
"""

from dataclasses import dataclass

from plottext.domain.segment import MoveTo, PathSegment


@dataclass(frozen=True)
class FontMetrics:
    """Font-wide metrics.

    Attributes:
        units_per_em: Resolution of the font's design grid (positive)
    """

    units_per_em: int

    def __post_init__(self) -> None:
        if self.units_per_em <= 0:
            raise ValueError(f"units_per_em must be positive, got {self.units_per_em}")

    def scale_for(self, font_size: float) -> float:
        """Get the font-unit to output-unit scale factor.

        Args:
            font_size: Em size in output units

        Returns:
            font_size / units_per_em
        """
        return font_size / self.units_per_em


@dataclass(frozen=True)
class GlyphOutline:
    """Outline of a single character.

    Attributes:
        char: The character this outline draws
        advance_width: Horizontal advance in font units
        segments: Ordered drawing commands in font units
    """

    char: str
    advance_width: float
    segments: tuple[PathSegment, ...] = ()

    def is_empty(self) -> bool:
        """Check if the outline has nothing to draw.

        Empty outlines include spaces and other non-printing characters.

        Returns:
            True if there are no segments
        """
        return len(self.segments) == 0

    def is_well_formed(self) -> bool:
        """Check that a non-empty outline starts with a MoveTo."""
        return self.is_empty() or isinstance(self.segments[0], MoveTo)

    @property
    def contour_count(self) -> int:
        return sum(1 for segment in self.segments if isinstance(segment, MoveTo))


@dataclass(frozen=True)
class GlyphPlacement:
    """Where the layout engine put one character.

    Attributes:
        char: The character
        origin_x: Pen origin X in output units
        origin_y: Baseline Y in output units
        scale: Font-unit to output-unit factor
    """

    char: str
    origin_x: float
    origin_y: float
    scale: float

    def to_output(self, x: float, y: float) -> tuple[float, float]:
        """Map a font-unit coordinate into output space.

        Font Y grows upward and output Y grows downward, so Y is inverted.

        Args:
            x: X in font units
            y: Y in font units

        Returns:
            (x, y) in output units
        """
        return (self.origin_x + x * self.scale, self.origin_y - y * self.scale)

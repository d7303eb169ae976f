"""Converters between fonttools and domain models.

This module handles the conversion between fonttools glyph drawing and our
domain models (GlyphOutline and its path segments).
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from plottext.domain.glyph import GlyphOutline
from plottext.domain.segment import ClosePath, CubicTo, LineTo, MoveTo, PathSegment, QuadTo


class SegmentPen(BasePen):
    """Pen that records a glyph as domain path segments.

    BasePen does the splitting: TrueType qCurveTo runs with several
    off-curve points arrive here as one quadratic per implied on-curve
    point, CFF curveTo runs as one cubic each, and composite glyphs are
    decomposed through the glyph set with their transforms applied.

    Open contours (endPath) are recorded without a ClosePath.

    Example:
        pen = SegmentPen(font.getGlyphSet())
        glyph_set["A"].draw(pen)
        segments = pen.segments
    """

    def __init__(self, glyph_set: Any = None) -> None:
        super().__init__(glyph_set)
        self.segments: list[PathSegment] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(MoveTo(float(pt[0]), float(pt[1])))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(LineTo(float(pt[0]), float(pt[1])))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.segments.append(
            QuadTo(float(pt1[0]), float(pt1[1]), float(pt2[0]), float(pt2[1]))
        )

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.segments.append(
            CubicTo(
                float(pt1[0]), float(pt1[1]),
                float(pt2[0]), float(pt2[1]),
                float(pt3[0]), float(pt3[1]),
            )
        )

    def _closePath(self) -> None:
        self.segments.append(ClosePath())

    def _endPath(self) -> None:
        pass


def fonttools_glyph_to_outline(
    char: str,
    fonttools_glyph: Any,
    glyph_set: Any,
    advance_width: float,
) -> GlyphOutline:
    """Convert a fonttools glyph to a domain GlyphOutline.

    Handles both TrueType (quadratic curves) and OpenType/CFF (cubic curves).
    Curves keep their native order; nothing is converted between quadratic
    and cubic.

    Args:
        char: Character the glyph is mapped from
        fonttools_glyph: The fonttools glyph object from GlyphSet
        glyph_set: The GlyphSet, used to decompose components
        advance_width: Horizontal advance in font units

    Returns:
        Domain GlyphOutline
    """
    pen = SegmentPen(glyph_set)
    fonttools_glyph.draw(pen)

    return GlyphOutline(
        char=char,
        advance_width=advance_width,
        segments=tuple(pen.segments),
    )

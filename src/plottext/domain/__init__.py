"""Domain models for plottext.

This module contains the core domain models representing glyph outlines,
layout placements, toolpath commands and motion programs. All models are
designed to be:

- Immutable (using frozen dataclasses)
- Created fresh for every compilation
- Independent of fonttools implementation details

Key classes:
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: Outline path segments
- FontMetrics: Units per em and derived scale
- GlyphOutline: A character's segments and advance width
- GlyphPlacement: A character's pen origin in output space
- MotionCommand: A travel, draw, lift or lower command
- MotionProgram: The emitted G-code program
"""

from plottext.domain.glyph import FontMetrics, GlyphOutline, GlyphPlacement
from plottext.domain.program import (
    CommandKind,
    MotionCommand,
    MotionProgram,
    ToolpathPoint,
)
from plottext.domain.segment import (
    ClosePath,
    CubicTo,
    LineTo,
    MoveTo,
    PathSegment,
    QuadTo,
    is_finite,
)

__all__: list[str] = [
    # Enums
    "CommandKind",
    # Segments
    "ClosePath",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "PathSegment",
    "QuadTo",
    "is_finite",
    # Core types
    "FontMetrics",
    "GlyphOutline",
    "GlyphPlacement",
    "MotionCommand",
    "MotionProgram",
    "ToolpathPoint",
]

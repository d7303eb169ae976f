"""Outline path segments.

This module defines the drawing commands a glyph outline is made of:
- MoveTo, LineTo, QuadTo, CubicTo, ClosePath: The segment variants
- PathSegment: Union of all variants

Coordinates are in font design units relative to the glyph origin until the
compiler maps them into output space with ``transformed``.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

Coordinate = tuple[float, float]
CoordinateMap = Callable[[float, float], Coordinate]


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new contour at (x, y)."""

    x: float
    y: float

    @property
    def end(self) -> Coordinate:
        return (self.x, self.y)

    def coordinates(self) -> tuple[float, ...]:
        return (self.x, self.y)

    def transformed(self, fn: CoordinateMap) -> "MoveTo":
        return MoveTo(*fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the current point to (x, y)."""

    x: float
    y: float

    @property
    def end(self) -> Coordinate:
        return (self.x, self.y)

    def coordinates(self) -> tuple[float, ...]:
        return (self.x, self.y)

    def transformed(self, fn: CoordinateMap) -> "LineTo":
        return LineTo(*fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class QuadTo:
    """Quadratic Bezier with control point (cx, cy) ending at (x, y)."""

    cx: float
    cy: float
    x: float
    y: float

    @property
    def end(self) -> Coordinate:
        return (self.x, self.y)

    def coordinates(self) -> tuple[float, ...]:
        return (self.cx, self.cy, self.x, self.y)

    def transformed(self, fn: CoordinateMap) -> "QuadTo":
        return QuadTo(*fn(self.cx, self.cy), *fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class CubicTo:
    """Cubic Bezier with control points (c1x, c1y), (c2x, c2y) ending at (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    @property
    def end(self) -> Coordinate:
        return (self.x, self.y)

    def coordinates(self) -> tuple[float, ...]:
        return (self.c1x, self.c1y, self.c2x, self.c2y, self.x, self.y)

    def transformed(self, fn: CoordinateMap) -> "CubicTo":
        return CubicTo(*fn(self.c1x, self.c1y), *fn(self.c2x, self.c2y), *fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current contour."""

    @property
    def end(self) -> None:
        return None

    def coordinates(self) -> tuple[float, ...]:
        return ()

    def transformed(self, fn: CoordinateMap) -> "ClosePath":  # noqa: ARG002
        return self


PathSegment = Union[MoveTo, LineTo, QuadTo, CubicTo, ClosePath]


def is_finite(segment: PathSegment) -> bool:
    """Check that every coordinate of a segment is a finite number.

    Args:
        segment: Segment to check

    Returns:
        True if no coordinate is NaN or infinite
    """
    return all(math.isfinite(value) for value in segment.coordinates())

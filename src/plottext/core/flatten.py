"""Bezier curve flattening.

Curves are sampled at a fixed number of equal parameter steps rather than
subdivided to a tolerance, so the point count per curve is predictable and
identical input always gives identical output.

All coordinates are in output space; segments are transformed out of font
units before they get here.
"""

from plottext.domain import CubicTo, LineTo, PathSegment, QuadTo, ToolpathPoint


def _lerp(a: ToolpathPoint, b: ToolpathPoint, t: float) -> ToolpathPoint:
    return ToolpathPoint(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def quadratic_point(
    p0: ToolpathPoint, c: ToolpathPoint, p1: ToolpathPoint, t: float
) -> ToolpathPoint:
    """Evaluate (1-t)^2 P0 + 2(1-t)t C + t^2 P1.

    Uses de Casteljau interpolation, which returns a point exactly when all
    three inputs coincide.
    """
    return _lerp(_lerp(p0, c, t), _lerp(c, p1, t), t)


def cubic_point(
    p0: ToolpathPoint,
    c1: ToolpathPoint,
    c2: ToolpathPoint,
    p1: ToolpathPoint,
    t: float,
) -> ToolpathPoint:
    """Evaluate the cubic Bernstein blend of four points at t."""
    a = _lerp(p0, c1, t)
    b = _lerp(c1, c2, t)
    c = _lerp(c2, p1, t)
    return _lerp(_lerp(a, b, t), _lerp(b, c, t), t)


def flatten(segment: PathSegment, start: ToolpathPoint, steps: int) -> list[ToolpathPoint]:
    """Flatten a drawing segment into line end points.

    Samples t = i / steps for i in 0..steps, so the last point is exactly the
    segment's end point. A point equal to the one emitted before it (the
    start point counts) is dropped.

    Args:
        segment: LineTo, QuadTo or CubicTo in output coordinates
        start: Current pen position, the curve's P0
        steps: Number of equal parameter steps (>= 1)

    Returns:
        Points to draw to, in order, excluding the start point

    Raises:
        ValueError: If steps < 1 or the segment does not draw
    """
    start = ToolpathPoint(*start)
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    if isinstance(segment, LineTo):
        samples = [ToolpathPoint(segment.x, segment.y)]
    elif isinstance(segment, QuadTo):
        c = ToolpathPoint(segment.cx, segment.cy)
        end = ToolpathPoint(*segment.end)
        samples = [quadratic_point(start, c, end, i / steps) for i in range(steps)]
        samples.append(end)
    elif isinstance(segment, CubicTo):
        c1 = ToolpathPoint(segment.c1x, segment.c1y)
        c2 = ToolpathPoint(segment.c2x, segment.c2y)
        end = ToolpathPoint(*segment.end)
        samples = [cubic_point(start, c1, c2, end, i / steps) for i in range(steps)]
        samples.append(end)
    else:
        raise ValueError(f"cannot flatten {type(segment).__name__}")

    points: list[ToolpathPoint] = []
    previous = start
    for point in samples:
        if point != previous:
            points.append(point)
            previous = point
    return points

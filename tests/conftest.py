"""Shared fixtures: in-memory fonts, fake providers and built TTF files."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from plottext.domain import (
    ClosePath,
    CubicTo,
    FontMetrics,
    GlyphOutline,
    LineTo,
    MoveTo,
    QuadTo,
)
from plottext.exceptions import FontLoadError


class SyntheticFont:
    """Font handle backed by a dict of outlines."""

    def __init__(
        self,
        glyphs: dict[str, GlyphOutline],
        units_per_em: int = 1000,
        fallback_advance: float = 500.0,
    ) -> None:
        self.glyphs = glyphs
        self._metrics = FontMetrics(units_per_em=units_per_em)
        self.fallback_advance = fallback_advance

    @property
    def metrics(self) -> FontMetrics:
        return self._metrics

    def get_outline(self, char: str) -> GlyphOutline | None:
        return self.glyphs.get(char)

    def advance_width(self, char: str) -> float:
        glyph = self.glyphs.get(char)
        if glyph is None:
            return self.fallback_advance
        return glyph.advance_width


class StaticProvider:
    """Provider serving fonts from a dict; unknown locators fail."""

    def __init__(self, fonts: dict[str, SyntheticFont]) -> None:
        self.fonts = fonts
        self.calls: list[str] = []

    async def load(self, locator: str) -> SyntheticFont:
        self.calls.append(locator)
        if locator not in self.fonts:
            raise FontLoadError(locator, "file not found")
        return self.fonts[locator]


def straight_i() -> GlyphOutline:
    return GlyphOutline(char="I", advance_width=600, segments=(MoveTo(0, 0), LineTo(0, 700)))


@pytest.fixture
def synthetic_font() -> SyntheticFont:
    """Font with a straight I, a two-bar '=', a quadratic O, a cubic S and a space."""
    glyphs = {
        "I": straight_i(),
        "=": GlyphOutline(
            char="=",
            advance_width=500,
            segments=(
                MoveTo(0, 200),
                LineTo(400, 200),
                LineTo(400, 300),
                LineTo(0, 300),
                ClosePath(),
                MoveTo(0, 400),
                LineTo(400, 400),
                LineTo(400, 500),
                LineTo(0, 500),
                ClosePath(),
            ),
        ),
        "O": GlyphOutline(
            char="O",
            advance_width=600,
            segments=(
                MoveTo(300, 0),
                QuadTo(600, 0, 600, 350),
                QuadTo(600, 700, 300, 700),
                QuadTo(0, 700, 0, 350),
                QuadTo(0, 0, 300, 0),
                ClosePath(),
            ),
        ),
        "S": GlyphOutline(
            char="S",
            advance_width=550,
            segments=(
                MoveTo(500, 600),
                CubicTo(400, 750, 0, 700, 100, 450),
                CubicTo(200, 250, 550, 300, 450, 50),
            ),
        ),
        " ": GlyphOutline(char=" ", advance_width=250),
    }
    return SyntheticFont(glyphs)


@pytest.fixture
def static_provider(synthetic_font: SyntheticFont) -> StaticProvider:
    """Provider that knows the synthetic font as 'fonts/Synthetic.ttf'."""
    return StaticProvider({"fonts/Synthetic.ttf": synthetic_font})


def _tt_glyph(contours: list[list[tuple[int, int]]]):
    pen = TTGlyphPen(None)
    for contour in contours:
        pen.moveTo(contour[0])
        for point in contour[1:]:
            pen.lineTo(point)
        pen.closePath()
    return pen.glyph()


def _tt_o():
    pen = TTGlyphPen(None)
    pen.moveTo((300, 0))
    pen.qCurveTo((600, 0), (600, 350))
    pen.qCurveTo((600, 700), (300, 700))
    pen.qCurveTo((0, 700), (0, 350))
    pen.qCurveTo((0, 0), (300, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path: Path) -> Path:
    """Write a small TrueType font.

    Glyphs: .notdef (box, advance 500), space (250), I (vertical stroke,
    600), equal (two bars, 500), O (quadratic ring, 600). Left side
    bearings equal each glyph's xMin so outlines are drawn unshifted.
    """
    glyph_order = [".notdef", "space", "I", "equal", "O"]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)

    glyf = {
        ".notdef": _tt_glyph([[(50, 0), (450, 0), (450, 700), (50, 700)]]),
        "space": TTGlyphPen(None).glyph(),
        "I": _tt_glyph([[(0, 0), (0, 700)]]),
        "equal": _tt_glyph(
            [
                [(0, 200), (400, 200), (400, 300), (0, 300)],
                [(0, 400), (400, 400), (400, 500), (0, 500)],
            ]
        ),
        "O": _tt_o(),
    }
    hmtx = {
        ".notdef": (500, 50),
        "space": (250, 0),
        "I": (600, 0),
        "equal": (500, 0),
        "O": (600, 0),
    }

    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics(hmtx)
    fb.setupCharacterMap({0x20: "space", ord("I"): "I", ord("="): "equal", ord("O"): "O"})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupNameTable({"familyName": "Plottest", "styleName": "Regular"})
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Path to a freshly built TrueType test font."""
    return build_test_font(tmp_path / "Plottest.ttf")


def assert_pen_invariants(lines: list[str], lift: str, lower: str) -> None:
    """Scan G-code lines and check pen-state ordering.

    No draw without a lower since the last lift, no travel with the pen
    down, and the program ends lifted.
    """
    down = False
    for line in lines:
        if line == lift:
            down = False
        elif line == lower:
            down = True
        elif line.startswith("G1 X"):
            assert down, f"draw with pen up: {line}"
        elif line.startswith("G0 X"):
            assert not down, f"travel with pen down: {line}"
    assert not down


@pytest.fixture
def pen_invariants():
    return assert_pen_invariants

"""Text layout.

Places every character of a text block at a pen origin in output space.
Lines are laid out top to bottom starting at the style's margins; blank
lines are dropped entirely and do not take up a line slot.
"""

from collections.abc import Callable, Iterator

from plottext.config import StyleProfile
from plottext.domain.glyph import FontMetrics, GlyphPlacement


def iter_lines(text: str) -> Iterator[str]:
    """Yield the non-blank lines of a text block, trimmed.

    Args:
        text: Text that may contain newlines

    Yields:
        Each line that has at least one non-whitespace character
    """
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            yield stripped


def layout(
    text: str,
    style: StyleProfile,
    metrics: FontMetrics,
    advance_of: Callable[[str], float],
) -> list[GlyphPlacement]:
    """Compute the pen origin of every character in reading order.

    Characters without an outline (spaces, unmapped characters) are placed
    like any other; the caller decides whether they draw anything.

    Args:
        text: Text block, lines separated by newlines
        style: Layout settings
        metrics: Font metrics for the font-unit scale
        advance_of: Advance width of a character in font units

    Returns:
        One GlyphPlacement per character of every retained line
    """
    scale = metrics.scale_for(style.font_size)
    line_height = style.resolved_line_height()

    placements: list[GlyphPlacement] = []
    for line_index, line in enumerate(iter_lines(text)):
        x = style.margin_x
        y = style.margin_y + line_index * line_height

        for char in line:
            placements.append(GlyphPlacement(char=char, origin_x=x, origin_y=y, scale=scale))
            x += advance_of(char) * scale * style.advance_scale + style.letter_spacing

    return placements

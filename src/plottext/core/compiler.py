"""Text-to-G-code compilation pipeline.

This module coordinates the full compilation workflow:
1. Validate the request
2. Load the font (the only awaited step)
3. Lay out the text
4. Per character: fetch the outline, map it to output space, flatten and
   sequence it
5. Emit the program

Key components:
- validate_request: Reject requests with no text or no font reference
- TextCompiler: Main orchestrator class
- compile_text: Synchronous convenience wrapper
"""

import asyncio
import time
from pathlib import Path

import structlog

from plottext.config import MachineProfile, PlottextSettings, StyleProfile
from plottext.core.emitter import GcodeEmitter
from plottext.core.layout import iter_lines, layout
from plottext.core.sequencer import ToolpathSequencer
from plottext.domain import (
    GlyphOutline,
    GlyphPlacement,
    MotionCommand,
    MotionProgram,
    PathSegment,
    is_finite,
)
from plottext.exceptions import FontLoadError, GeometryError, InvalidRequestError
from plottext.io import CachingFontProvider, FileFontProvider, FontHandle, OutlineProvider
from plottext.io.provider import resolve_locator
from plottext.utils import CompileLogger, CompileStats


def validate_request(text: str | None, style: StyleProfile | None) -> None:
    """Check that a request has something to plot and a font to plot it in.

    Args:
        text: Text to plot
        style: Style naming the font

    Raises:
        InvalidRequestError: If text is missing or blank, style is missing,
            or style names no font
    """
    if text is None:
        raise InvalidRequestError("text is required")
    if next(iter_lines(text), None) is None:
        raise InvalidRequestError("text has no non-blank line")
    if style is None:
        raise InvalidRequestError("style is required")
    if style.font_path is None and not style.font:
        raise InvalidRequestError('style must include either "font" or "font_path"')


def _output_segments(outline: GlyphOutline, placement: GlyphPlacement) -> list[PathSegment]:
    """Check an outline and map its segments into output space.

    Raises:
        GeometryError: If a coordinate is not finite or the outline does not
            start with a MoveTo
    """
    if not outline.is_well_formed():
        raise GeometryError(outline.char, "outline does not start with a MoveTo")

    segments: list[PathSegment] = []
    for index, segment in enumerate(outline.segments):
        if not is_finite(segment):
            raise GeometryError(
                outline.char,
                f"non-finite coordinate in segment {index} ({type(segment).__name__})",
            )
        mapped = segment.transformed(placement.to_output)
        if not is_finite(mapped):
            raise GeometryError(
                outline.char,
                f"segment {index} ({type(segment).__name__}) maps outside finite output space",
            )
        segments.append(mapped)
    return segments


class TextCompiler:
    """Compiles text into motion programs.

    A compiler holds no per-request state besides the statistics of its
    last run, so independent requests may use separate compilers
    concurrently.

    Example:
        compiler = TextCompiler(get_default_settings())
        program = await compiler.compile("Hello", StyleProfile(font="Quicksand"))
        print(program.text)
    """

    def __init__(
        self,
        settings: PlottextSettings,
        provider: OutlineProvider | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            settings: Application settings (default machine, font resolution)
            provider: Font provider; defaults to loading files from disk
            logger: Logger; defaults to the "plottext" structlog logger
        """
        self.settings = settings
        if provider is None:
            provider = FileFontProvider(timeout=settings.font.load_timeout)
            if settings.font.cache_fonts:
                provider = CachingFontProvider(provider)
        self.provider = provider
        self.logger = logger or structlog.get_logger("plottext")
        self.compile_logger = CompileLogger(self.logger)

    @property
    def stats(self) -> CompileStats:
        return self.compile_logger.stats

    async def load_font(self, style: StyleProfile) -> FontHandle:
        """Resolve and load the font a style names.

        Any provider is bounded by settings.font.load_timeout.

        Raises:
            FontLoadError: If the font cannot be loaded or the load timed out
        """
        locator = resolve_locator(style, Path(self.settings.font.font_dir))
        timeout = self.settings.font.load_timeout
        try:
            return await asyncio.wait_for(self.provider.load(locator), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise FontLoadError(locator, f"timed out after {timeout}s") from e

    async def compile(
        self,
        text: str,
        style: StyleProfile,
        machine: MachineProfile | None = None,
    ) -> MotionProgram:
        """Compile text to a motion program.

        Args:
            text: Text block to plot
            style: Layout and font settings
            machine: Plotter settings (settings.machine if None)

        Returns:
            The complete program

        Raises:
            InvalidRequestError: Before any work, for a bad request
            FontLoadError: If the font cannot be loaded
            GeometryError: If outline data is malformed
        """
        validate_request(text, style)
        font = await self.load_font(style)
        return self.compile_with_font(text, style, font, machine)

    def compile_with_font(
        self,
        text: str,
        style: StyleProfile,
        font: FontHandle,
        machine: MachineProfile | None = None,
    ) -> MotionProgram:
        """Compile text with an already loaded font.

        Runs entirely in memory. Either the whole program is returned or an
        exception is raised; nothing partial escapes.

        Args:
            text: Text block to plot
            style: Layout settings
            font: Loaded font handle
            machine: Plotter settings (settings.machine if None)

        Returns:
            The complete program

        Raises:
            GeometryError: If outline data is malformed
        """
        machine = machine or self.settings.machine
        self.compile_logger = CompileLogger(self.logger)
        stats = self.compile_logger.stats
        stats.start_time = time.time()

        metrics = font.metrics
        placements = layout(text, style, metrics, font.advance_width)
        self.compile_logger.log_layout(
            lines=sum(1 for _ in iter_lines(text)),
            characters=len(placements),
            scale=metrics.scale_for(style.font_size),
        )

        sequencer = ToolpathSequencer(machine)
        commands: list[MotionCommand] = []

        for placement in placements:
            outline = font.get_outline(placement.char)
            if outline is None:
                self.compile_logger.log_glyph_skipped(placement.char, "no glyph mapping")
                continue
            if outline.is_empty():
                self.compile_logger.log_glyph_skipped(placement.char, "empty outline")
                continue

            try:
                segments = _output_segments(outline, placement)
            except GeometryError as e:
                self.compile_logger.log_geometry_error(placement.char, e)
                raise

            glyph_commands = sequencer.trace(segments)
            commands.extend(glyph_commands)
            self.compile_logger.log_glyph_traced(
                placement.char,
                commands=len(glyph_commands),
                contours=outline.contour_count,
            )

        program = GcodeEmitter(machine).emit(commands)
        stats.end_time = time.time()

        self.logger.info(
            "Compilation complete",
            characters=stats.characters_placed,
            traced=stats.glyphs_traced,
            skipped=stats.glyphs_skipped,
            lines=len(program),
        )
        return program


def compile_text(
    text: str,
    style: StyleProfile,
    machine: MachineProfile | None = None,
    settings: PlottextSettings | None = None,
    provider: OutlineProvider | None = None,
) -> MotionProgram:
    """Compile text from synchronous code.

    Runs TextCompiler.compile in a fresh event loop.

    Args:
        text: Text block to plot
        style: Layout and font settings
        machine: Plotter settings (settings.machine if None)
        settings: Application settings (defaults if None)
        provider: Font provider (loads files from disk if None)

    Returns:
        The complete program
    """
    compiler = TextCompiler(settings or PlottextSettings(), provider=provider)
    return asyncio.run(compiler.compile(text, style, machine))

"""Outline providers.

An outline provider turns a font locator into a loaded font handle. Loading
is the only asynchronous step of a compilation: font parsing runs in a worker
thread and the caller awaits it with a timeout.

Key classes:
- FontHandle: What the compiler needs from a loaded font
- OutlineProvider: Protocol for anything that can load a FontHandle
- FileFontProvider: Loads fonts from disk with fontTools
- CachingFontProvider: Keeps loaded handles keyed by locator
"""

import asyncio
from pathlib import Path
from typing import Protocol

import structlog

from plottext.config import StyleProfile
from plottext.domain.glyph import FontMetrics, GlyphOutline
from plottext.exceptions import FontLoadError
from plottext.io.reader import FontReader

logger = structlog.get_logger(__name__)


class FontHandle(Protocol):
    """A loaded font."""

    @property
    def metrics(self) -> FontMetrics: ...

    def get_outline(self, char: str) -> GlyphOutline | None: ...

    def advance_width(self, char: str) -> float: ...


class OutlineProvider(Protocol):
    """Loads font handles from locators."""

    async def load(self, locator: str) -> FontHandle: ...


def resolve_locator(style: StyleProfile, font_dir: Path) -> str:
    """Turn a style's font reference into a file locator.

    An explicit font_path wins; a font name resolves to {font_dir}/{font}.ttf.

    Args:
        style: Style naming the font
        font_dir: Directory for fonts referenced by name

    Returns:
        Locator string for OutlineProvider.load

    Raises:
        ValueError: If the style names no font at all
    """
    if style.font_path is not None:
        return str(style.font_path)
    if style.font:
        return str(font_dir / f"{style.font}.ttf")
    raise ValueError("style names neither font nor font_path")


class FileFontProvider:
    """Loads fonts from the filesystem.

    Example:
        provider = FileFontProvider(timeout=10.0)
        font = await provider.load("fonts/Quicksand.ttf")
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize the provider.

        Args:
            timeout: Seconds to wait for a font to parse (None waits forever)
        """
        self._timeout = timeout

    def _read(self, locator: str) -> FontReader:
        reader = FontReader(Path(locator))
        reader.load()
        return reader

    async def load(self, locator: str) -> FontReader:
        """Load a font file.

        Args:
            locator: Path to the font file

        Returns:
            Loaded FontReader

        Raises:
            FontLoadError: If the file is missing, unreadable, corrupt or the
                load timed out
        """
        logger.debug("Loading font", locator=locator)
        try:
            reader = await asyncio.wait_for(
                asyncio.to_thread(self._read, locator),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise FontLoadError(locator, f"timed out after {self._timeout}s") from e
        except FileNotFoundError as e:
            raise FontLoadError(locator, "file not found") from e
        except Exception as e:
            raise FontLoadError(locator, str(e) or type(e).__name__) from e

        logger.info(
            "Font loaded",
            locator=locator,
            format=reader.format,
            upm=reader.units_per_em,
        )
        return reader


class CachingFontProvider:
    """Wraps another provider and reuses handles keyed by locator.

    Failed loads are not cached, so a later request retries the load.
    """

    def __init__(self, provider: OutlineProvider) -> None:
        self._provider = provider
        self._handles: dict[str, FontHandle] = {}

    async def load(self, locator: str) -> FontHandle:
        handle = self._handles.get(locator)
        if handle is None:
            handle = await self._provider.load(locator)
            self._handles[locator] = handle
        else:
            logger.debug("Font cache hit", locator=locator)
        return handle

    def __len__(self) -> int:
        return len(self._handles)

    def clear(self) -> None:
        self._handles.clear()

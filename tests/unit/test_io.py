"""Unit tests for the Font I/O layer.

Tests for FontReader, SegmentPen and the outline providers.
"""

import asyncio
from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from plottext.config import StyleProfile
from plottext.domain import ClosePath, CubicTo, LineTo, MoveTo, QuadTo
from plottext.exceptions import FontLoadError
from plottext.io import CachingFontProvider, FileFontProvider, FontReader, resolve_locator
from plottext.io.converter import SegmentPen


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.ttf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.ttf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_format_before_load(self):
        """Test accessing format before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.format

    def test_units_per_em_before_load(self):
        """Test accessing units_per_em before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.units_per_em

    def test_get_outline_before_load(self):
        """Test looking up an outline before loading raises RuntimeError."""
        reader = FontReader(Path("test.ttf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            reader.get_outline("A")

    @patch("plottext.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_format_opentype(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test format property for OpenType fonts."""
        mock_font = MagicMock()
        mock_font.__contains__ = Mock(side_effect=lambda x: x == "CFF ")
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.otf"))
        reader.load()

        assert reader.format == "OpenType"

    @patch("plottext.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_units_per_em(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test units_per_em and metrics."""
        mock_font = MagicMock()
        mock_font.__getitem__ = Mock(return_value=MagicMock(unitsPerEm=2048))
        mock_font.getBestCmap.return_value = {}
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("test.ttf"))
        reader.load()

        assert reader.units_per_em == 2048
        assert reader.metrics.units_per_em == 2048

    @patch("plottext.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_corrupt_font_closed(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test a font whose tables fail to parse is closed and re-raised."""
        mock_font = MagicMock()
        mock_font.__getitem__ = Mock(side_effect=KeyError("head"))
        mock_ttfont.return_value = mock_font

        reader = FontReader(Path("broken.ttf"))
        with pytest.raises(KeyError):
            reader.load()

        mock_font.close.assert_called_once()
        assert reader._font is None

    @patch("plottext.io.reader.TTFont")
    @patch.object(Path, "exists", return_value=True)
    def test_context_manager(self, _mock_exists, mock_ttfont):  # noqa: ARG002
        """Test FontReader as context manager."""
        mock_font = MagicMock()
        mock_ttfont.return_value = mock_font

        with FontReader(Path("test.ttf")) as reader:
            assert reader._font is not None

        mock_font.close.assert_called_once()

    def test_real_font_lookup(self, test_font_path):
        """Test cmap lookup, advances and outlines on a built font."""
        with FontReader(test_font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_name("=") == "equal"
            assert reader.glyph_name("Z") is None

            outline = reader.get_outline("I")
            assert outline is not None
            assert outline.advance_width == 600
            assert outline.segments == (MoveTo(0, 0), LineTo(0, 700), ClosePath())

            assert reader.get_outline("Z") is None
            assert reader.advance_width("Z") == 500
            assert reader.get_outline(" ").is_empty()

    def test_real_font_quadratics_kept(self, test_font_path):
        """Test TrueType curves come through as QuadTo segments."""
        with FontReader(test_font_path) as reader:
            outline = reader.get_outline("O")

        assert outline.segments[0] == MoveTo(300, 0)
        quads = [s for s in outline.segments if isinstance(s, QuadTo)]
        assert len(quads) == 4
        assert quads[-1].end == (300, 0)


class TestSegmentPen:
    """Tests for SegmentPen."""

    def test_records_lines_and_close(self):
        """Test line drawing is recorded in order."""
        pen = SegmentPen()
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.closePath()

        assert pen.segments == [MoveTo(0.0, 0.0), LineTo(10.0, 0.0), ClosePath()]

    def test_implied_on_curve_points_split(self):
        """Test a TrueType run of off-curve points becomes several quadratics."""
        pen = SegmentPen()
        pen.moveTo((0, 0))
        pen.qCurveTo((10, 10), (20, 10), (30, 0))
        pen.closePath()

        assert pen.segments[1:3] == [QuadTo(10, 10, 15, 10), QuadTo(20, 10, 30, 0)]

    def test_cubic_recorded(self):
        """Test a CFF-style curve is recorded as one cubic."""
        pen = SegmentPen()
        pen.moveTo((0, 0))
        pen.curveTo((0, 10), (10, 10), (10, 0))
        pen.endPath()

        assert pen.segments == [MoveTo(0, 0), CubicTo(0, 10, 10, 10, 10, 0)]


class TestResolveLocator:
    """Tests for font locator resolution."""

    def test_font_path_wins(self):
        """Test explicit path takes precedence over name."""
        style = StyleProfile(font="Quicksand", font_path=Path("/data/Custom.ttf"))
        assert resolve_locator(style, Path("fonts")) == "/data/Custom.ttf"

    def test_name_resolves_under_font_dir(self):
        """Test a font name maps to {font_dir}/{name}.ttf."""
        style = StyleProfile(font="Quicksand")
        assert resolve_locator(style, Path("fonts")) == "fonts/Quicksand.ttf"

    def test_no_font(self):
        """Test a style without any font reference is rejected."""
        with pytest.raises(ValueError):
            resolve_locator(StyleProfile(), Path("fonts"))


class TestProviders:
    """Tests for FileFontProvider and CachingFontProvider."""

    def test_file_provider_loads(self, test_font_path):
        """Test a font file loads into a FontReader."""
        reader = asyncio.run(FileFontProvider().load(str(test_font_path)))

        assert reader.units_per_em == 1000
        reader.close()

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FontLoadError with the locator."""
        locator = str(tmp_path / "nope.ttf")
        with pytest.raises(FontLoadError) as exc_info:
            asyncio.run(FileFontProvider().load(locator))

        assert exc_info.value.locator == locator
        assert exc_info.value.reason == "file not found"

    def test_corrupt_file(self, tmp_path):
        """Test garbage bytes raise FontLoadError."""
        path = tmp_path / "junk.ttf"
        path.write_bytes(b"not a font at all")

        with pytest.raises(FontLoadError) as exc_info:
            asyncio.run(FileFontProvider().load(str(path)))
        assert isinstance(exc_info.value.__cause__, Exception)

    def test_timeout(self):
        """Test a load that outlives the timeout raises FontLoadError."""

        class SlowProvider(FileFontProvider):
            def _read(self, locator):
                import time

                time.sleep(0.5)
                return super()._read(locator)

        with pytest.raises(FontLoadError, match="timed out"):
            asyncio.run(SlowProvider(timeout=0.01).load("whatever.ttf"))

    def test_cache_reuses_handles(self, test_font_path):
        """Test a cached locator is loaded once."""
        inner = FileFontProvider()
        inner.load = Mock(wraps=inner.load)
        provider = CachingFontProvider(inner)

        async def load_twice():
            first = await provider.load(str(test_font_path))
            second = await provider.load(str(test_font_path))
            return first, second

        first, second = asyncio.run(load_twice())

        assert first is second
        assert inner.load.call_count == 1
        assert len(provider) == 1

    def test_cache_does_not_keep_failures(self, tmp_path):
        """Test a failed load is not cached."""
        provider = CachingFontProvider(FileFontProvider())
        with pytest.raises(FontLoadError):
            asyncio.run(provider.load(str(tmp_path / "missing.ttf")))

        assert len(provider) == 0

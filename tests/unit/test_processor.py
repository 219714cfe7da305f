"""Tests for parallel processing orchestration."""

from pathlib import Path
from unittest.mock import MagicMock, Mock, patch

import pytest

from glyphbridge.config import BridgeConfig, GlyphBridgeSettings
from glyphbridge.core.processor import FontProcessor, process_glyph
from glyphbridge.domain import Glyph, GlyphMetadata, PathCommand, RenderData
from glyphbridge.exceptions import GlyphProcessingError


def polygon_path(points: list[tuple[int, int]]) -> list[PathCommand]:
    """Create a closed polygon path."""
    return [
        PathCommand.move(*points[0]),
        *(PathCommand.line(x, y) for x, y in points[1:]),
        PathCommand.line(*points[0]),
        PathCommand.close(),
    ]


@pytest.fixture
def notched_glyph() -> Glyph:
    """Create a glyph with two facing notches."""
    metadata = GlyphMetadata(name="H", unicode=ord("H"), advance_width=200, left_side_bearing=0)
    path = polygon_path(
        [
            (0, 0), (80, 0), (100, 40), (120, 0), (200, 0),
            (200, 200), (120, 200), (100, 160), (80, 200), (0, 200),
        ]
    )
    return Glyph(metadata=metadata, path=path)


@pytest.fixture
def square_glyph() -> Glyph:
    """Create a glyph with no corners."""
    metadata = GlyphMetadata(name="O", unicode=ord("O"), advance_width=100, left_side_bearing=0)
    return Glyph(metadata=metadata, path=polygon_path([(0, 0), (100, 0), (100, 100), (0, 100)]))


@pytest.fixture
def empty_glyph() -> Glyph:
    """Create a glyph without an outline."""
    metadata = GlyphMetadata(name="space", unicode=32, advance_width=250, left_side_bearing=0)
    return Glyph(metadata=metadata)


@pytest.fixture
def bridge_config() -> BridgeConfig:
    """Create default bridge configuration."""
    return BridgeConfig()


@pytest.fixture
def settings() -> GlyphBridgeSettings:
    """Create default settings."""
    return GlyphBridgeSettings()


def mock_reader_for(*glyphs: Glyph) -> MagicMock:
    """Create a mock FontReader serving the given glyphs."""
    by_name = {glyph.name: glyph for glyph in glyphs}
    mock_reader = MagicMock()
    mock_reader.__enter__.return_value = mock_reader
    mock_reader.units_per_em = 1000
    mock_reader.format = "TrueType"
    mock_reader.glyph_count = len(glyphs)
    mock_reader.glyph_names = list(by_name)
    mock_reader.get_glyph.side_effect = by_name.get
    return mock_reader


class TestProcessGlyph:
    """Tests for process_glyph function."""

    def test_process_glyph_with_bridge(self, notched_glyph: Glyph, bridge_config: BridgeConfig):
        """Test processing a glyph that gets a bridge."""
        result = process_glyph(notched_glyph.to_dict(), bridge_config.model_dump())

        assert "error" not in result
        assert result["corners"] == 2
        assert result["bridges"] == 1
        assert result["duration_ms"] >= 0

        render_data = RenderData.from_dict(result["render_data"])
        assert len(render_data.endpoints) == 10
        assert render_data.d.startswith("M 0 0 L 80 0")

    def test_process_glyph_without_corners(self, square_glyph: Glyph, bridge_config: BridgeConfig):
        """Test processing a convex glyph."""
        result = process_glyph(square_glyph.to_dict(), bridge_config.model_dump())

        assert "error" not in result
        assert result["corners"] == 0
        assert result["bridges"] == 0

    def test_process_glyph_handles_error(self, bridge_config: BridgeConfig):
        """Test that pipeline errors are returned, not raised."""
        metadata = GlyphMetadata(name="test", unicode=None, advance_width=100, left_side_bearing=0)
        glyph = Glyph(
            metadata=metadata,
            path=[PathCommand.move(0, 0), PathCommand.line(100, 0), PathCommand.close()],
        )

        result = process_glyph(glyph.to_dict(), bridge_config.model_dump())

        assert "error" in result
        assert result["error_type"] == "MalformedPathError"
        assert result["glyph_name"] == "test"
        assert "traceback" in result

    def test_process_glyph_uses_config(self, notched_glyph: Glyph):
        """Test that the configuration reaches the pipeline."""
        config = BridgeConfig(min_corner_angle=3.0)
        result = process_glyph(notched_glyph.to_dict(), config.model_dump())

        assert result["corners"] == 0
        assert result["bridges"] == 0


class TestFontProcessor:
    """Tests for FontProcessor class."""

    def test_init(self, settings: GlyphBridgeSettings):
        """Test FontProcessor initialization."""
        with patch("glyphbridge.core.processor.configure_logging") as mock_logging:
            mock_logging.return_value = Mock()
            processor = FontProcessor(settings)

            assert processor.config == settings
            mock_logging.assert_called_once()

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    def test_process_no_glyphs_to_process(
        self,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
        empty_glyph: Glyph,
    ):
        """Test processing a font with only empty glyphs."""
        mock_logging.return_value = Mock()
        mock_reader_class.return_value = mock_reader_for(empty_glyph)
        mock_writer = Mock()
        mock_writer_class.return_value = mock_writer

        processor = FontProcessor(settings)
        stats = processor.process(Path("input.ttf"), output_path=Path("output.json"))

        assert stats.processed_count == 0
        assert stats.skipped_count == 1
        assert stats.error_count == 0
        assert stats.duration_seconds >= 0
        mock_writer.save.assert_called_once()

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    @patch("glyphbridge.core.processor.ProcessPoolExecutor")
    def test_process_with_glyphs(
        self,
        mock_executor_class,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
        notched_glyph: Glyph,
    ):
        """Test processing a font with a glyph that gets a bridge."""
        mock_logging.return_value = Mock()
        mock_reader_class.return_value = mock_reader_for(notched_glyph)
        mock_writer = Mock()
        mock_writer_class.return_value = mock_writer

        render_data = {"bridges": [[[100, 40], [100, 160]]], "d": "", "endpoints": []}
        mock_executor = MagicMock()
        mock_future = MagicMock()
        mock_future.result.return_value = {
            "render_data": render_data,
            "corners": 2,
            "bridges": 1,
            "duration_ms": 1.5,
        }
        mock_executor.submit.return_value = mock_future
        mock_executor.__enter__.return_value = mock_executor
        mock_executor.__exit__.return_value = None
        mock_executor_class.return_value = mock_executor

        with patch("glyphbridge.core.processor.as_completed") as mock_as_completed:
            mock_as_completed.return_value = [mock_future]

            progress = Mock()
            processor = FontProcessor(settings)
            stats = processor.process(
                Path("input.ttf"),
                output_path=Path("output.json"),
                max_workers=1,
                progress_callback=progress,
            )

            assert stats.processed_count == 1
            assert stats.corners_found == 2
            assert stats.bridges_added == 1
            assert stats.error_count == 0
            assert stats.glyph_timings_ms == [1.5]
            mock_writer.add.assert_called_once_with(notched_glyph, render_data)
            progress.assert_called_once_with(1, 1, "H", True)

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    @patch("glyphbridge.core.processor.ProcessPoolExecutor")
    def test_process_records_glyph_errors(
        self,
        mock_executor_class,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
        notched_glyph: Glyph,
    ):
        """Test that failed glyphs are counted and not written."""
        mock_logging.return_value = Mock()
        mock_reader_class.return_value = mock_reader_for(notched_glyph)
        mock_writer = Mock()
        mock_writer_class.return_value = mock_writer

        mock_executor = MagicMock()
        mock_future = MagicMock()
        mock_future.result.return_value = {
            "error": "Open contour (command 3)",
            "error_type": "MalformedPathError",
            "glyph_name": "H",
            "traceback": "",
            "duration_ms": 0.1,
        }
        mock_executor.submit.return_value = mock_future
        mock_executor.__enter__.return_value = mock_executor
        mock_executor.__exit__.return_value = None
        mock_executor_class.return_value = mock_executor

        with patch("glyphbridge.core.processor.as_completed") as mock_as_completed:
            mock_as_completed.return_value = [mock_future]

            processor = FontProcessor(settings)
            stats = processor.process(Path("input.ttf"), output_path=Path("output.json"))

            assert stats.processed_count == 0
            assert stats.error_count == 1
            assert stats.errors == [("H", "Open contour (command 3)")]
            mock_writer.add.assert_not_called()
            mock_writer.save.assert_called_once()

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    def test_process_filters_and_skips(
        self,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
        square_glyph: Glyph,
        empty_glyph: Glyph,
    ):
        """Test glyph selection by name and skipping of composites."""
        mock_logging.return_value = Mock()
        square_glyph._is_composite = True
        mock_reader_class.return_value = mock_reader_for(square_glyph, empty_glyph)
        mock_writer_class.return_value = Mock()

        processor = FontProcessor(settings)
        stats = processor.process(
            Path("input.ttf"), output_path=Path("output.json"), glyph_names={"O"}
        )

        assert stats.skipped_count == 1
        assert stats.processed_count == 0

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    def test_process_logs_conversion_errors(
        self,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
    ):
        """Test that glyphs failing to load are counted as errors."""
        mock_logging.return_value = Mock()
        mock_reader = mock_reader_for()
        mock_reader.glyph_names = ["bad"]
        mock_reader.get_glyph.side_effect = GlyphProcessingError("bad", "Cubic curves are not supported")
        mock_reader_class.return_value = mock_reader
        mock_writer_class.return_value = Mock()

        processor = FontProcessor(settings)
        stats = processor.process(Path("input.ttf"), output_path=Path("output.json"))

        assert stats.error_count == 1
        assert stats.errors[0][0] == "bad"

    @patch("glyphbridge.core.processor.FontReader")
    @patch("glyphbridge.core.processor.RenderDataWriter")
    @patch("glyphbridge.core.processor.configure_logging")
    @patch("glyphbridge.core.processor.ProcessPoolExecutor")
    def test_cancelled_run_keeps_stats(
        self,
        mock_executor_class,
        mock_logging,
        mock_writer_class,
        mock_reader_class,
        settings: GlyphBridgeSettings,
        notched_glyph: Glyph,
    ):
        """Test that stats of an interrupted run stay readable on the processor."""
        mock_logging.return_value = Mock()
        mock_reader_class.return_value = mock_reader_for(notched_glyph)
        mock_writer = Mock()
        mock_writer_class.return_value = mock_writer

        mock_executor = MagicMock()
        mock_executor.submit.return_value = MagicMock()
        mock_executor.__enter__.return_value = mock_executor
        mock_executor.__exit__.return_value = None
        mock_executor_class.return_value = mock_executor

        with patch("glyphbridge.core.processor.as_completed") as mock_as_completed:
            mock_as_completed.side_effect = KeyboardInterrupt

            processor = FontProcessor(settings)
            with pytest.raises(KeyboardInterrupt):
                processor.process(Path("input.ttf"), output_path=Path("output.json"))

            assert processor.stats.was_cancelled
            assert processor.stats.cancelled_count == 1
            assert processor.stats.processed_count == 0
            mock_executor.shutdown.assert_called_once_with(wait=True, cancel_futures=True)
            mock_writer.save.assert_not_called()

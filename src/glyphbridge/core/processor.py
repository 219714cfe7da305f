"""Parallel processing orchestration for the render-data pipeline.

This module coordinates computing render data for a whole font, with
parallel processing of individual glyphs using ProcessPoolExecutor.

Key components:
- process_glyph: Top-level picklable function for parallel execution
- FontProcessor: Main orchestrator class for font processing
"""

import time
import traceback
from collections.abc import Callable, Collection
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from glyphbridge.config import BridgeConfig, GlyphBridgeSettings
from glyphbridge.core.assembler import RenderDataAssembler
from glyphbridge.domain import Glyph
from glyphbridge.exceptions import GlyphBridgeError, GlyphError
from glyphbridge.io import FontReader, RenderDataWriter
from glyphbridge.utils import ProcessingLogger, ProcessingStats, configure_logging


def process_glyph(
    glyph_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Compute render data for a single glyph.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes glyph, runs the pipeline, and returns the result.

    Args:
        glyph_dict: Serialized glyph (from Glyph.to_dict())
        config_dict: Serialized bridge configuration

    Returns:
        Dictionary containing either:
        - Success: {"render_data": dict, "corners": int, "bridges": int, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "glyph_name": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        glyph = Glyph.from_dict(glyph_dict)
        assembler = RenderDataAssembler(BridgeConfig(**config_dict))
        render_data = assembler.assemble(glyph.path)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "render_data": render_data.to_dict(),
            "corners": len(render_data.corners),
            "bridges": len(render_data.bridges),
            "duration_ms": duration_ms,
        }

    except GlyphBridgeError as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "glyph_name": glyph_dict.get("metadata", {}).get("name", "unknown"),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class FontProcessor:
    """Orchestrates parallel render-data computation for a font.

    Manages the complete workflow:
    1. Load font file
    2. Filter glyphs requiring processing (non-empty outlines)
    3. Process glyphs in parallel using worker processes
    4. Collect results and update statistics
    5. Save render data as JSON

    Example:
        settings = GlyphBridgeSettings()
        processor = FontProcessor(settings)
        stats = processor.process(
            font_path=Path("font.ttf"),
            output_path=Path("font-render.json"),
            max_workers=4
        )
    """

    def __init__(self, config: GlyphBridgeSettings) -> None:
        """Initialize font processor with configuration.

        Args:
            config: Settings containing bridge, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=False,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    @property
    def stats(self) -> ProcessingStats:
        """Statistics of the current or most recent run.

        Still readable after ``process`` re-raises ``KeyboardInterrupt``, with
        ``was_cancelled`` set and the number of glyphs left in the queue.
        """
        return self.processing_logger.stats

    def _select_glyphs(
        self, reader: FontReader, glyph_names: Collection[str] | None
    ) -> list[Glyph]:
        """Load the glyphs that need processing, logging the ones skipped."""
        selected: list[Glyph] = []
        skip_composite = self.config.processing.skip_composite

        for name in reader.glyph_names:
            if glyph_names is not None and name not in glyph_names:
                continue

            try:
                glyph = reader.get_glyph(name)
            except GlyphError as e:
                self.processing_logger.log_glyph_error(
                    glyph_name=name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue

            if glyph is None or glyph.is_empty():
                self.processing_logger.log_glyph_skipped(name, "empty glyph")
                continue

            if skip_composite and glyph.is_composite():
                self.processing_logger.log_glyph_skipped(name, "composite glyph")
                continue

            selected.append(glyph)

        return selected

    def process(
        self,
        font_path: Path,
        output_path: Path | None = None,
        glyph_names: Collection[str] | None = None,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> ProcessingStats:
        """Compute render data for a font with parallel glyph processing.

        Args:
            font_path: Path to input font file (TTF)
            output_path: Path for the JSON output (auto-generated if None)
            glyph_names: Only process these glyphs (all glyphs if None)
            max_workers: Maximum worker processes (None = auto-detect)
            progress_callback: Optional callback(completed, total, glyph_name, success)
                for progress updates

        Returns:
            ProcessingStats with counts, timing, and error details

        Raises:
            FileNotFoundError: If font file does not exist
            FontFormatError: If the font has no TrueType outlines
            FontSaveError: If the output cannot be written
            KeyboardInterrupt: If processing is cancelled by user
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if output_path is None:
            output_path = RenderDataWriter.get_output_path(font_path)

        self.logger.info(
            "Starting font processing",
            input=str(font_path),
            output=str(output_path),
            max_workers=max_workers,
        )

        with FontReader(font_path) as reader:
            self.logger.info(
                "Font loaded",
                format=reader.format,
                upm=reader.units_per_em,
                glyph_count=reader.glyph_count,
            )
            glyphs = self._select_glyphs(reader, glyph_names)

        self.logger.info(
            "Filtered glyphs",
            to_process=len(glyphs),
            skipped=stats.skipped_count,
            errors=stats.error_count,
        )

        writer = RenderDataWriter(output_path)
        if glyphs:
            self._process_glyphs_parallel(
                glyphs=glyphs,
                writer=writer,
                max_workers=max_workers,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No glyphs to process")

        writer.save()
        self.logger.info(
            "Render data saved",
            output=str(output_path),
            glyphs=writer.glyph_count,
        )

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            corners=stats.corners_found,
            bridges=stats.bridges_added,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return stats

    def _process_glyphs_parallel(
        self,
        glyphs: list[Glyph],
        writer: RenderDataWriter,
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> None:
        """Process glyphs in parallel using ProcessPoolExecutor.

        Args:
            glyphs: Glyphs to process
            writer: Writer collecting the render data of successful glyphs
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, glyph_name, success)
                for progress updates
        """
        stats = self.processing_logger.stats
        config_dict = self.config.bridge.model_dump()
        glyph_by_name = {glyph.name: glyph for glyph in glyphs}

        self.logger.info(
            "Starting parallel processing",
            glyph_count=len(glyph_by_name),
            max_workers=max_workers,
        )

        total = len(glyph_by_name)
        completed = 0
        pending_futures: dict[Future, str] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for name, glyph in glyph_by_name.items():
                self.processing_logger.log_glyph_start(name)
                future = executor.submit(process_glyph, glyph.to_dict(), config_dict)
                pending_futures[future] = name

            try:
                for future in as_completed(list(pending_futures)):
                    glyph_name = pending_futures.pop(future)
                    success = False

                    try:
                        result = future.result()

                        if "error" in result:
                            self.processing_logger.log_glyph_error(
                                glyph_name=result["glyph_name"],
                                error=result["error"],
                                error_type=result["error_type"],
                                traceback=result.get("traceback"),
                            )
                        else:
                            success = True
                            writer.add(glyph_by_name[glyph_name], result["render_data"])
                            self.processing_logger.log_glyph_complete(
                                glyph_name=glyph_name,
                                corners=result["corners"],
                                bridges=result["bridges"],
                                duration_ms=result.get("duration_ms", 0.0),
                            )

                    except Exception as e:
                        # Executor-level error (worker crash, pickling failure)
                        self.processing_logger.log_glyph_error(
                            glyph_name=glyph_name,
                            error=str(e),
                            error_type=type(e).__name__,
                            traceback=traceback.format_exc(),
                        )

                    completed += 1
                    if progress_callback is not None:
                        progress_callback(completed, total, glyph_name, success)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()

                stats.was_cancelled = True
                stats.cancelled_count = len(pending_futures)

                executor.shutdown(wait=True, cancel_futures=True)
                raise

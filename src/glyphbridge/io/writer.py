"""Render-data writer.

This module provides the RenderDataWriter class for writing the render data
of a font's glyphs as one JSON document.
"""

import json
from pathlib import Path
from typing import Any

from glyphbridge.domain.glyph import Glyph
from glyphbridge.exceptions import FontSaveError


class RenderDataWriter:
    """Collects per-glyph render data and writes it as JSON.

    The document maps glyph names to their unicode code point and render data:

        {"A": {"unicode": 65, "render_data": {"bridges": [...], "d": "...", ...}}}

    Example:
        writer = RenderDataWriter(Path("font-render.json"))
        writer.add(glyph, render_data.to_dict())
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the JSON document will be saved
        """
        self._output_path = output_path
        self._entries: dict[str, dict[str, Any]] = {}

    @property
    def glyph_count(self) -> int:
        return len(self._entries)

    def add(self, glyph: Glyph, render_data: dict[str, Any]) -> None:
        """Add the render data of one glyph.

        Args:
            glyph: Glyph the render data belongs to
            render_data: Serialized RenderData (from RenderData.to_dict())
        """
        self._entries[glyph.name] = {
            "unicode": glyph.metadata.unicode,
            "render_data": render_data,
        }

    def save(self) -> None:
        """Write the JSON document.

        Raises:
            FontSaveError: If the file cannot be written
        """
        try:
            with self._output_path.open("w", encoding="utf-8") as f:
                json.dump(self._entries, f, indent=2)
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_output_path(input_path: Path) -> Path:
        """Generate the default output path for a font.

        Converts: font.ttf -> font-render.json
                  Roboto-Regular.ttf -> Roboto-Regular-render.json

        Args:
            input_path: Font file path

        Returns:
            Path with -render suffix and .json extension
        """
        return input_path.parent / f"{input_path.stem}-render.json"

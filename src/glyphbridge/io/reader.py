"""Font reader for loading TrueType fonts.

This module provides the FontReader class for loading font files
and extracting glyph outlines into domain models.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont

from glyphbridge.domain.glyph import Glyph
from glyphbridge.exceptions import (
    FontFormatError,
    GeometryError,
    GlyphProcessingError,
    PathError,
)
from glyphbridge.io.converter import fonttools_glyph_to_domain


class FontReader:
    """Loads TrueType fonts and extracts glyph data.

    Only quadratic (glyf) outlines are supported; CFF fonts are rejected.

    Example:
        reader = FontReader(Path("font.ttf"))
        reader.load()
        for glyph in reader.iter_glyphs():
            print(glyph.name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontFormatError: If the font has no quadratic outlines
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        font = TTFont(str(self._font_path))
        if "glyf" not in font:
            font.close()
            raise FontFormatError(
                str(self._font_path), "only TrueType (glyf) outlines are supported"
            )
        self._font = font

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._require_font()
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def glyph_names(self) -> list[str]:
        """Glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return list(self._require_font().getGlyphOrder())

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over all glyphs, converting to domain model.

        Yields glyphs in the order they appear in the font.

        Yields:
            Glyph domain models

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphProcessingError: If a glyph outline cannot be converted
        """
        for glyph_name in self.glyph_names:
            glyph = self.get_glyph(glyph_name)
            if glyph is not None:
                yield glyph

    def get_glyph(self, name: str) -> Glyph | None:
        """Get a specific glyph by name.

        Args:
            name: Name of the glyph to retrieve

        Returns:
            Glyph domain model, or None if glyph not found

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphProcessingError: If the glyph outline cannot be converted
        """
        font = self._require_font()

        if name not in font.getGlyphOrder():
            return None

        glyph_set = font.getGlyphSet()
        fonttools_glyph = glyph_set[name]

        try:
            return fonttools_glyph_to_domain(
                name=name,
                fonttools_glyph=fonttools_glyph,
                font=font
            )
        except (PathError, GeometryError) as e:
            raise GlyphProcessingError(name, str(e)) from e

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

"""Font I/O layer for glyphbridge.

This module handles reading fonts with fonttools, serializing glyph paths,
and writing render data. It provides a clean abstraction layer between
fonttools and the domain models.

Key responsibilities:
- Load TrueType fonts
- Convert fonttools outlines to path commands
- Serialize path commands to the `d` string
- Write render data as JSON

Key classes:
- FontReader: Load fonts and extract glyphs
- RenderDataWriter: Save render data
"""

from glyphbridge.io.reader import FontReader
from glyphbridge.io.serializer import serialize_path
from glyphbridge.io.writer import RenderDataWriter

__all__ = [
    "FontReader",
    "RenderDataWriter",
    "serialize_path",
]

"""Glyph representation and metadata.

This module defines the glyph domain model, which represents a single
glyph (character) in a font with its outline path commands and metadata.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphbridge.domain.path import PathCommand


@dataclass
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of metadata
        """
        return {
            "name": self.name,
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "lsb": self.left_side_bearing
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphMetadata":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of metadata

        Returns:
            GlyphMetadata instance
        """
        return cls(
            name=data["name"],
            unicode=data["unicode"],
            advance_width=data["advance_width"],
            left_side_bearing=data["lsb"]
        )


@dataclass
class Glyph:
    """Represents a single glyph with its outline path.

    Designed for efficient serialization for parallel processing.

    Attributes:
        metadata: Glyph metadata (name, unicode, metrics)
        path: Path commands forming the glyph outline
        _is_composite: Internal flag indicating if glyph uses component references
    """

    metadata: GlyphMetadata
    path: list[PathCommand] = field(default_factory=list)
    _is_composite: bool = False

    @property
    def name(self) -> str:
        """Get glyph name from metadata."""
        return self.metadata.name

    def is_empty(self) -> bool:
        """Check if glyph has no outline.

        Empty glyphs include spaces and other non-printing characters.
        """
        return len(self.path) == 0

    def is_composite(self) -> bool:
        """Check if glyph is made of component references.

        This flag is set during font loading.
        """
        return self._is_composite

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the glyph
        """
        return {
            "metadata": self.metadata.to_dict(),
            "path": [command.to_dict() for command in self.path],
            "is_composite": self.is_composite()
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a glyph

        Returns:
            Glyph instance
        """
        metadata = GlyphMetadata.from_dict(data["metadata"])
        path = [PathCommand.from_dict(c) for c in data["path"]]
        is_composite = data.get("is_composite", False)
        return cls(metadata=metadata, path=path, _is_composite=is_composite)

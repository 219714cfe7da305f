"""Domain models for glyphbridge.

This module contains the core domain models representing glyph outlines,
their vertices and the bridges between corners. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of fonttools implementation details

Key classes:
- PathCommand: One move/line/curve/close command of a glyph path
- Point: An integer 2D point
- Segment: A line or quadratic curve
- Contour: A closed loop of segments
- Endpoint: Tangent and corner metadata at a vertex
- Bridge: A chord between two corners
- RenderData: The per-glyph output record
- Glyph: A single glyph with its path
"""

from glyphbridge.domain.bridge import Bridge, RenderData
from glyphbridge.domain.contour import Contour, Point, Segment, WindingDirection
from glyphbridge.domain.endpoint import Endpoint
from glyphbridge.domain.glyph import Glyph, GlyphMetadata
from glyphbridge.domain.path import CommandType, PathCommand

__all__: list[str] = [
    # Enums
    "CommandType",
    "WindingDirection",
    # Core types
    "PathCommand",
    "Point",
    "Segment",
    "Contour",
    "Endpoint",
    "Bridge",
    "RenderData",
    "GlyphMetadata",
    "Glyph",
]

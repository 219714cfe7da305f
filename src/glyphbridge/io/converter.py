"""Converters between fonttools and domain models.

This module handles the conversion from fonttools glyph outlines to our
domain models (Glyph, PathCommand).
"""

from typing import Any

from fontTools.misc.roundTools import otRound
from fontTools.pens.basePen import BasePen
from fontTools.ttLib import TTFont

from glyphbridge.domain import Glyph, GlyphMetadata, PathCommand
from glyphbridge.exceptions import MalformedPathError


def _round_point(pt: tuple[float, float]) -> tuple[int, int]:
    return otRound(pt[0]), otRound(pt[1])


class CommandPen(BasePen):
    """Pen that records a TrueType outline as glyphbridge path commands.

    BasePen splits qCurveTo runs with implied on-curve points into single
    quadratic segments, so every curve command carries exactly one control
    point. Coordinates are rounded to integer font units.

    Every contour is closed back to its start with an explicit line, and a
    single close command ends the whole path. Contours that never leave their
    start point are dropped.

    Example:
        pen = CommandPen(font.getGlyphSet())
        glyph_set["A"].draw(pen)
        commands = pen.path()
    """

    def __init__(self, glyphSet: Any = None) -> None:
        super().__init__(glyphSet)
        self._commands: list[PathCommand] = []
        self._contour: list[PathCommand] = []
        self._start: tuple[int, int] | None = None
        self._current: tuple[int, int] | None = None

    def _moveTo(self, pt: tuple[float, float]) -> None:
        if self._contour:
            self._closePath()
        x, y = _round_point(pt)
        self._contour = [PathCommand.move(x, y)]
        self._start = self._current = (x, y)

    def _lineTo(self, pt: tuple[float, float]) -> None:
        x, y = _round_point(pt)
        self._contour.append(PathCommand.line(x, y))
        self._current = (x, y)

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        x1, y1 = _round_point(pt1)
        x, y = _round_point(pt2)
        self._contour.append(PathCommand.curve(x, y, x1, y1))
        self._current = (x, y)

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        raise MalformedPathError("Cubic curves are not supported")

    def _closePath(self) -> None:
        if self._start is None:
            return
        if self._current != self._start:
            self._contour.append(PathCommand.line(*self._start))
        if any((c.x, c.y) != self._start for c in self._contour[1:]):
            self._commands.extend(self._contour)
        self._contour = []
        self._start = self._current = None

    def _endPath(self) -> None:
        # TrueType contours are always closed
        self._closePath()

    def path(self) -> list[PathCommand]:
        """Recorded path, terminated by a close command (empty if no outline)."""
        if self._contour:
            self._closePath()
        if not self._commands:
            return []
        return [*self._commands, PathCommand.close()]


def fonttools_glyph_to_domain(
    name: str,
    fonttools_glyph: Any,
    font: TTFont
) -> Glyph:
    """Convert fonttools glyph to domain Glyph model.

    Components of composite glyphs are decomposed through the font's glyph
    set, so a composite glyph gets the full outline of its components.

    Args:
        name: Name of the glyph
        fonttools_glyph: The fonttools glyph object from GlyphSet
        font: The TTFont object for accessing metadata

    Returns:
        Domain Glyph model

    Raises:
        MalformedPathError: If the outline uses cubic curves
    """
    pen = CommandPen(font.getGlyphSet())
    fonttools_glyph.draw(pen)

    metadata = _extract_glyph_metadata(name, font)
    glyph = Glyph(metadata=metadata, path=pen.path())

    glyf = font["glyf"] if "glyf" in font else None
    if glyf is not None and name in glyf:
        glyph._is_composite = glyf[name].isComposite()

    return glyph


def _extract_glyph_metadata(name: str, font: TTFont) -> GlyphMetadata:
    """Extract glyph metadata from font.

    Args:
        name: Glyph name
        font: The TTFont object

    Returns:
        GlyphMetadata object
    """
    hmtx = font.get("hmtx")
    advance_width = 0
    lsb = 0

    if hmtx and name in hmtx.metrics:
        advance_width, lsb = hmtx.metrics[name]

    cmap = font.getBestCmap()
    unicode_value = None

    if cmap:
        for code_point, glyph_name in sorted(cmap.items()):
            if glyph_name == name:
                unicode_value = code_point
                break

    return GlyphMetadata(
        name=name,
        unicode=unicode_value,
        advance_width=advance_width,
        left_side_bearing=lsb
    )

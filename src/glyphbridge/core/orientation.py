"""Winding normalization for glyph contours.

Glyphs are oriented so that the largest (exterior) contour is counter-clockwise
and the holes nested in it are clockwise. Corner detection relies on this: with
that orientation a concave vertex is always a clockwise turn.
"""

from collections.abc import Sequence

from glyphbridge.domain import Contour


def largest_contour(contours: Sequence[Contour]) -> Contour | None:
    """Find the contour with the largest absolute area.

    Ties go to the earliest contour.

    Args:
        contours: Contours of one glyph

    Returns:
        The largest contour, or None if every contour is degenerate
    """
    largest: Contour | None = None
    max_area = 0.0
    for contour in contours:
        area = abs(contour.signed_area_2x())
        if area > max_area:
            max_area = area
            largest = contour
    return largest


def orient_contours(contours: Sequence[Contour]) -> list[Contour]:
    """Orient contours so the largest one winds counter-clockwise.

    When the largest contour is clockwise, every contour of the glyph is
    reversed, which keeps the relative winding of exterior and interior
    contours. Applying this twice gives the same result as applying it once.

    Args:
        contours: Contours of one glyph

    Returns:
        Oriented contours, in the same order
    """
    largest = largest_contour(contours)
    if largest is not None and largest.signed_area_2x() < 0:
        return [contour.reversed() for contour in contours]
    return list(contours)

"""Shared fixtures for integration tests."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# Square with V-shaped notches cut into its bottom and top edges
NOTCHED = [
    (0, 0), (80, 0), (100, 40), (120, 0), (200, 0),
    (200, 200), (120, 200), (100, 160), (80, 200), (0, 200),
]
L_SHAPE = [(0, 0), (100, 0), (100, 50), (50, 50), (50, 100), (0, 100)]
SQUARE = [(0, 0), (100, 0), (100, 100), (0, 100)]


def _draw_polygons(polygons: list[list[tuple[int, int]]]):
    pen = TTGlyphPen(None)
    for points in polygons:
        pen.moveTo(points[0])
        for point in points[1:]:
            pen.lineTo(point)
        pen.closePath()
    return pen.glyph()


def build_font(path: Path) -> Path:
    """Build a small TrueType font.

    Glyphs:
        H: two facing notches (one bridge)
        L: one concave corner (no bridge)
        O: convex square (no corners)
        space: no outline
        H.alt: composite referencing H
    """
    glyph_order = [".notdef", "space", "H", "L", "O", "H.alt"]
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)

    h_glyph = _draw_polygons([NOTCHED])
    # The component pen looks its base glyph up in the glyph set
    composite_pen = TTGlyphPen({"H": h_glyph})
    composite_pen.addComponent("H", (1, 0, 0, 1, 0, 0))

    glyf = {
        ".notdef": _draw_polygons([SQUARE]),
        "space": TTGlyphPen(None).glyph(),
        "H": h_glyph,
        "L": _draw_polygons([L_SHAPE]),
        "O": _draw_polygons([SQUARE]),
        "H.alt": composite_pen.glyph(),
    }
    fb.setupGlyf(glyf)
    fb.setupHorizontalMetrics({name: (250, 0) for name in glyph_order})
    fb.setupCharacterMap({0x20: "space", ord("H"): "H", ord("L"): "L", ord("O"): "O"})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupNameTable({"familyName": "Bridge Test", "styleName": "Regular"})
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture
def test_font(tmp_path: Path) -> Path:
    """Path to a freshly built test font."""
    return build_font(tmp_path / "BridgeTest-Regular.ttf")

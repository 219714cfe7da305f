"""Glyphbridge - Find corner bridges for single-stroke glyph tracing.

Glyphbridge reads the quadratic outlines of TrueType glyphs, detects the sharp
concave corners along each outline and pairs them with bridges: straight chords
that let the outline plus its bridges be traced as one continuous stroke
(for engraving, plotting or single-line rendering).

Example:
    $ glyphbridge Roboto-Regular.ttf

This will create Roboto-Regular-render.json with the endpoints, bridges and
serialized path of every glyph in the font.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

"""Exception hierarchy for Glyphbridge."""


class GlyphBridgeError(Exception):
    """Base exception for all Glyphbridge errors."""

    pass


class FontError(GlyphBridgeError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error writing render data for a font."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save render data '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphError(GlyphBridgeError):
    """Errors related to glyph processing."""

    pass


class GlyphProcessingError(GlyphError):
    """Error processing a specific glyph."""

    def __init__(self, glyph_name: str, reason: str) -> None:
        self.glyph_name = glyph_name
        self.reason = reason
        super().__init__(f"Error processing glyph '{glyph_name}': {reason}")


class PathError(GlyphBridgeError):
    """Errors in a glyph's path command stream."""

    pass


class MalformedPathError(PathError):
    """Path commands do not form a sequence of closed contours."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"{message} (command {index})"
        super().__init__(message)


class GeometryError(GlyphBridgeError):
    """Errors in geometric data."""

    pass


class InvalidPointError(GeometryError):
    """A point has missing or non-finite coordinates."""

    def __init__(self, x: object, y: object) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Invalid point ({x!r}, {y!r})")


class BridgeError(GlyphBridgeError):
    """Errors related to bridge matching or extraction."""

    pass


class DegenerateBridgeError(BridgeError):
    """A bridge would connect a corner to itself."""

    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Degenerate bridge from {start} to {end}")


class AssignmentError(BridgeError):
    """The assignment solver did not return a permutation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Corner assignment failed: {reason}")


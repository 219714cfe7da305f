"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout glyphbridge:
- Point: An integer 2D point (also used as a difference vector)
- Segment: A line or quadratic curve between two points
- Contour: A closed loop of segments
- WindingDirection: Enum for contour winding direction
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from glyphbridge.exceptions import InvalidPointError


class WindingDirection(Enum):
    """Contour winding direction.

    Glyphbridge canonicalizes glyphs so that:
    - The outermost contour winds counter-clockwise
    - Contours nested inside it (holes) wind clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


def _valid_coordinate(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space, in font units.

    Immutable and hashable for use in sets/dicts. Equality is exact: there is
    no tolerance. The difference of two points is itself a Point, which is
    how tangent vectors are represented.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units

    Raises:
        InvalidPointError: If a coordinate is missing or not a finite number
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if not (_valid_coordinate(self.x) and _valid_coordinate(self.y)):
            raise InvalidPointError(self.x, self.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def angle(self) -> float:
        """Angle of this point taken as a vector from the origin.

        Returns:
            atan2(y, x) in radians
        """
        return math.atan2(self.y, self.x)

    def length(self) -> float:
        """Euclidean length of this point taken as a vector."""
        return math.hypot(self.x, self.y)

    def distance2(self, other: "Point") -> float:
        """Squared distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_list(self) -> list[int]:
        """Convert to the [x, y] form used in render data."""
        return [self.x, self.y]

    @classmethod
    def from_list(cls, data: list[Any] | tuple[Any, ...]) -> "Point":
        """Deserialize from an [x, y] pair.

        Raises:
            InvalidPointError: If the pair is incomplete
        """
        if len(data) != 2:
            padded = [*data, None, None]
            raise InvalidPointError(padded[0], padded[1])
        return cls(data[0], data[1])


@dataclass(frozen=True, slots=True)
class Segment:
    """A path segment: a line, or a quadratic curve when control is set.

    Attributes:
        start: Start point (the previous segment's end)
        end: End point
        control: Quadratic control point (None for lines)
    """

    start: Point
    end: Point
    control: Point | None = None

    @property
    def is_curve(self) -> bool:
        return self.control is not None

    def chord(self) -> Point:
        """Vector from start to end."""
        return self.end - self.start

    def reversed(self) -> "Segment":
        """Return the same segment traversed in the opposite direction."""
        return Segment(start=self.end, end=self.start, control=self.control)


@dataclass(frozen=True)
class Contour:
    """A closed loop of segments.

    Each segment starts where the previous one ends, and the last segment ends
    where the first one starts.

    Attributes:
        segments: Segments in traversal order
    """

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    @property
    def points(self) -> list[Point]:
        """On-curve vertices in traversal order."""
        return [segment.start for segment in self.segments]

    def is_closed(self) -> bool:
        """Check that consecutive segments share their endpoints cyclically."""
        n = len(self.segments)
        if n == 0:
            return False
        return all(
            self.segments[k].end == self.segments[(k + 1) % n].start for k in range(n)
        )

    def signed_area_2x(self) -> float:
        """Twice the signed area enclosed by the segment endpoints.

        The sign indicates winding direction:
        - Positive: counter-clockwise
        - Negative: clockwise

        Curve control points are ignored; the area is that of the polygon
        through the on-curve points.
        """
        area = 0
        for segment in self.segments:
            area -= (segment.end.x - segment.start.x) * (segment.end.y + segment.start.y)
        return area

    @property
    def direction(self) -> WindingDirection:
        if self.signed_area_2x() > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        return WindingDirection.CLOCKWISE

    def reversed(self) -> "Contour":
        """Return the contour traversed in the opposite direction."""
        return Contour(tuple(segment.reversed() for segment in reversed(self.segments)))

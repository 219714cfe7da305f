"""Vertex metadata along a glyph outline."""

from dataclasses import dataclass
from typing import Any

from glyphbridge.domain.contour import Point


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Angle metadata around the vertex between two consecutive segments.

    An endpoint is a corner when the outline bends sharply in the clockwise
    (concave) direction at that vertex. Only corners can be bridged.

    Attributes:
        index: (contour index, segment index) of the segment starting here
        point: The vertex
        tangents: Incoming and outgoing direction vectors
        angles: Angles of the tangents, in [-pi, pi)
        corner: True if the vertex is a sharp concave turn
    """

    index: tuple[int, int]
    point: Point
    tangents: tuple[Point, Point]
    angles: tuple[float, float]
    corner: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the render-data JSON form.

        Returns:
            Dictionary with index, point, tangents, angles and corner fields
        """
        return {
            "index": list(self.index),
            "point": self.point.to_list(),
            "tangents": [tangent.to_list() for tangent in self.tangents],
            "angles": list(self.angles),
            "corner": self.corner,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Endpoint":
        """Deserialize from the render-data JSON form."""
        tangents = data["tangents"]
        angles = data["angles"]
        return cls(
            index=(data["index"][0], data["index"][1]),
            point=Point.from_list(data["point"]),
            tangents=(Point.from_list(tangents[0]), Point.from_list(tangents[1])),
            angles=(angles[0], angles[1]),
            corner=data["corner"],
        )

"""Bridge and render-data types.

A bridge is a straight chord between two corners of a glyph outline. The
outline together with its bridges can be traced as a single stroke.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphbridge.domain.contour import Point
from glyphbridge.domain.endpoint import Endpoint


@dataclass(frozen=True, slots=True)
class Bridge:
    """A bridge between two corner points.

    Bridges are unordered: Bridge(p, q) and Bridge(q, p) describe the same
    chord, and share the same key().

    Attributes:
        start: First corner point
        end: Second corner point
    """

    start: Point
    end: Point

    def key(self) -> frozenset[Point]:
        """Order-independent identity of this bridge."""
        return frozenset((self.start, self.end))

    def length(self) -> float:
        return (self.end - self.start).length()

    def to_list(self) -> list[list[int]]:
        """Serialize to the [[x, y], [x, y]] render-data form."""
        return [self.start.to_list(), self.end.to_list()]

    @classmethod
    def from_list(cls, data: list[Any]) -> "Bridge":
        return cls(start=Point.from_list(data[0]), end=Point.from_list(data[1]))


@dataclass
class RenderData:
    """Everything needed to render a glyph as a single stroke.

    Attributes:
        bridges: Bridges between corners
        endpoints: Metadata for every vertex, corners and non-corners
        d: Serialized path of the glyph
    """

    bridges: list[Bridge] = field(default_factory=list)
    endpoints: list[Endpoint] = field(default_factory=list)
    d: str = ""

    @property
    def corners(self) -> list[Endpoint]:
        """Endpoints flagged as corners."""
        return [endpoint for endpoint in self.endpoints if endpoint.corner]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC and JSON output.

        Returns:
            Dictionary representation of the render data
        """
        return {
            "bridges": [bridge.to_list() for bridge in self.bridges],
            "d": self.d,
            "endpoints": [endpoint.to_dict() for endpoint in self.endpoints],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderData":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of render data

        Returns:
            RenderData instance
        """
        return cls(
            bridges=[Bridge.from_list(b) for b in data["bridges"]],
            endpoints=[Endpoint.from_dict(e) for e in data["endpoints"]],
            d=data["d"],
        )

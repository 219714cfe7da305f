"""Corner detection along glyph contours.

Every vertex of a contour gets an Endpoint describing the direction the
outline arrives and leaves in. A vertex where the outline turns sharply
clockwise (a concave vertex on a counter-clockwise exterior) is a corner.
"""

from collections.abc import Sequence

import structlog

from glyphbridge.config import BridgeConfig
from glyphbridge.core.geometry import angle_subtract, vector_angle
from glyphbridge.domain import Contour, Endpoint, Point, Segment
from glyphbridge.exceptions import MalformedPathError

logger = structlog.get_logger(__name__)


def turning_angle(angles: tuple[float, float]) -> float:
    """Signed turn from the incoming to the outgoing direction.

    Args:
        angles: Incoming and outgoing tangent angles

    Returns:
        Turn in [-pi, pi); negative turns are clockwise
    """
    return angle_subtract(angles[1], angles[0])


def is_corner(turn: float, min_corner_angle: float) -> bool:
    """Check whether a turn is a sharp enough clockwise bend to be a corner.

    A turn of exactly -min_corner_angle is not a corner.
    """
    return turn < -min_corner_angle


class CornerExtractor:
    """Computes endpoint metadata for every vertex of a glyph.

    The extractor is stateless and safe for use in parallel processing.
    """

    def __init__(self, config: BridgeConfig) -> None:
        """Initialize corner extractor with configuration.

        Args:
            config: Bridge configuration with corner thresholds
        """
        self.config = config

    def incoming_tangent(self, segment: Segment) -> Point:
        """Direction the segment arrives at its end point in.

        Uses the curve control point when it is far enough from the end point
        to give a stable direction, and the chord otherwise.
        """
        if (
            segment.control is not None
            and segment.end.distance2(segment.control) > self.config.min_corner_tangent_distance2
        ):
            return segment.end - segment.control
        return segment.chord()

    def outgoing_tangent(self, segment: Segment) -> Point:
        """Direction the segment leaves its start point in."""
        if (
            segment.control is not None
            and segment.start.distance2(segment.control) > self.config.min_corner_tangent_distance2
        ):
            return segment.control - segment.start
        return segment.chord()

    def endpoint(self, contour: Contour, contour_index: int, segment_index: int) -> Endpoint:
        """Build the endpoint at the start of one segment of a contour.

        Args:
            contour: Closed contour
            contour_index: Index of the contour in the glyph
            segment_index: Index of the segment that starts at the vertex

        Returns:
            Endpoint for the vertex

        Raises:
            MalformedPathError: If the previous segment does not end at the vertex
        """
        n = len(contour.segments)
        prev = contour.segments[(segment_index + n - 1) % n]
        next_segment = contour.segments[segment_index]

        point = prev.end
        if point != next_segment.start:
            raise MalformedPathError(
                f"Contour {contour_index} is not closed at segment {segment_index}"
            )

        tangents = (self.incoming_tangent(prev), self.outgoing_tangent(next_segment))
        angles = (vector_angle(tangents[0]), vector_angle(tangents[1]))
        corner = is_corner(turning_angle(angles), self.config.min_corner_angle)

        return Endpoint(
            index=(contour_index, segment_index),
            point=point,
            tangents=tangents,
            angles=angles,
            corner=corner,
        )

    def extract(self, contours: Sequence[Contour]) -> list[Endpoint]:
        """Compute endpoints for every vertex of every contour.

        Args:
            contours: Oriented contours of one glyph

        Returns:
            Endpoints in traversal order, contour by contour
        """
        endpoints = [
            self.endpoint(contour, i, j)
            for i, contour in enumerate(contours)
            for j in range(len(contour.segments))
        ]
        logger.debug(
            "Endpoints extracted",
            endpoints=len(endpoints),
            corners=sum(1 for endpoint in endpoints if endpoint.corner),
        )
        return endpoints

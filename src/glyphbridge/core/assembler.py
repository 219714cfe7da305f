"""Bridge extraction and render-data assembly.

This module runs the full per-glyph pipeline:
1. Split the path into closed contours
2. Orient the contours
3. Extract endpoints and corners
4. Match corners and turn the matching into bridges
5. Bundle bridges, endpoints and the serialized path into RenderData
"""

from collections.abc import Callable, Sequence

import structlog

from glyphbridge.config import BridgeConfig
from glyphbridge.core.corners import CornerExtractor
from glyphbridge.core.matcher import AssignmentSolver, CornerMatcher
from glyphbridge.core.orientation import orient_contours
from glyphbridge.core.splitter import split_path
from glyphbridge.domain import Bridge, Endpoint, Glyph, PathCommand, Point, RenderData
from glyphbridge.exceptions import DegenerateBridgeError
from glyphbridge.io.serializer import serialize_path

logger = structlog.get_logger(__name__)

PathSerializer = Callable[[Sequence[PathCommand]], str]


def check_bridge(bridge: Bridge) -> None:
    """Validate a bridge.

    Raises:
        DegenerateBridgeError: If an endpoint is not a point or both coincide
    """
    if not isinstance(bridge.start, Point) or not isinstance(bridge.end, Point):
        raise DegenerateBridgeError(bridge.start, bridge.end)
    if bridge.start == bridge.end:
        raise DegenerateBridgeError(bridge.start, bridge.end)


def extract_bridges(corners: Sequence[Endpoint], matching: Sequence[int]) -> list[Bridge]:
    """Turn a corner matching into a list of bridges.

    A corner matched with itself is unpaired and gets no bridge. A pair
    matched in both directions yields a single bridge.

    Args:
        corners: Corner endpoints
        matching: Permutation where matching[i] = j pairs corners[i] with corners[j]

    Returns:
        Bridges, each validated and unique as an unordered pair

    Raises:
        DegenerateBridgeError: If two paired corners share the same point
    """
    bridges: list[Bridge] = []
    seen: set[frozenset[Point]] = set()

    for i, j in enumerate(matching):
        if j == i:
            continue
        if j < i and matching[j] == i:
            continue

        bridge = Bridge(start=corners[i].point, end=corners[j].point)
        check_bridge(bridge)
        if bridge.key() in seen:
            continue
        seen.add(bridge.key())
        bridges.append(bridge)

    return bridges


class RenderDataAssembler:
    """Computes render data for glyph paths.

    The assembler holds no per-glyph state, so one instance can be reused
    across glyphs.

    Example:
        assembler = RenderDataAssembler(BridgeConfig())
        render_data = assembler.assemble(glyph.path)
    """

    def __init__(
        self,
        config: BridgeConfig,
        solver: AssignmentSolver | None = None,
        serializer: PathSerializer = serialize_path,
    ) -> None:
        """Initialize the assembler.

        Args:
            config: Bridge configuration
            solver: Assignment solver for corner matching (default: Hungarian)
            serializer: Produces the `d` string of a path
        """
        self.config = config
        self.extractor = CornerExtractor(config)
        self.matcher = CornerMatcher(config, solver)
        self.serializer = serializer

    def endpoints(self, path: Sequence[PathCommand]) -> list[Endpoint]:
        """Compute endpoint metadata for every vertex of a path."""
        contours = orient_contours(split_path(path))
        return self.extractor.extract(contours)

    def bridges(self, endpoints: Sequence[Endpoint]) -> list[Bridge]:
        """Compute bridges between the corners among endpoints."""
        corners = [endpoint for endpoint in endpoints if endpoint.corner]
        return extract_bridges(corners, self.matcher.match(corners))

    def assemble(self, path: Sequence[PathCommand]) -> RenderData:
        """Compute render data for one glyph path.

        Args:
            path: Path commands of the glyph

        Returns:
            RenderData with bridges, all endpoints and the serialized path

        Raises:
            MalformedPathError: If the path is not a set of closed contours
            InvalidPointError: If a coordinate is not a finite number
            DegenerateBridgeError: If a bridge would join coincident corners
        """
        endpoints = self.endpoints(path)
        bridges = self.bridges(endpoints)
        logger.debug("Render data assembled", endpoints=len(endpoints), bridges=len(bridges))
        return RenderData(bridges=bridges, endpoints=endpoints, d=self.serializer(path))


def get_glyph_render_data(
    glyph: Glyph,
    config: BridgeConfig | None = None,
    solver: AssignmentSolver | None = None,
) -> RenderData:
    """Compute render data for a glyph.

    Args:
        glyph: Glyph with a non-empty path
        config: Bridge configuration (defaults if None)
        solver: Assignment solver (Hungarian if None)

    Returns:
        RenderData for the glyph
    """
    assembler = RenderDataAssembler(config or BridgeConfig(), solver=solver)
    return assembler.assemble(glyph.path)

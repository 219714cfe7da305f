"""Core processing algorithms for glyphbridge.

This module contains the core algorithms for:

- Contour splitting (path commands to closed contours)
- Orientation (canonical winding via signed area)
- Corner extraction (tangents, turning angles, corner flags)
- Bridge scoring (directional features and classifier)
- Corner matching (score matrix and assignment solver)
- Render-data assembly (bridge extraction and validation)

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects)
- Deterministic for a given path and configuration

Key functions:
- split_path: Split path commands into contours
- orient_contours: Orient the largest contour counter-clockwise
- score_corners: Directed score of a bridge between two corners
- extract_bridges: Turn a corner matching into bridges
- get_glyph_render_data: Run the full pipeline for one glyph

Key classes:
- CornerExtractor: Computes endpoint metadata
- CornerMatcher: Pairs corners via an AssignmentSolver
- HungarianSolver: Default scipy-backed solver
- RenderDataAssembler: Runs the full pipeline
- FontProcessor: Processes a whole font in parallel
"""

from glyphbridge.core.assembler import (
    RenderDataAssembler,
    check_bridge,
    extract_bridges,
    get_glyph_render_data,
)
from glyphbridge.core.corners import CornerExtractor, is_corner, turning_angle
from glyphbridge.core.geometry import angle_penalty, angle_subtract, wrap_angle
from glyphbridge.core.matcher import AssignmentSolver, CornerMatcher, HungarianSolver
from glyphbridge.core.orientation import orient_contours
from glyphbridge.core.processor import FontProcessor, process_glyph
from glyphbridge.core.scoring import (
    BridgeFeatures,
    compute_features,
    run_classifier,
    score_corners,
)
from glyphbridge.core.splitter import split_path

__all__ = [
    # Matching
    "AssignmentSolver",
    "BridgeFeatures",
    "CornerExtractor",
    "CornerMatcher",
    # Processor classes
    "FontProcessor",
    "HungarianSolver",
    "RenderDataAssembler",
    # Geometry functions
    "angle_penalty",
    "angle_subtract",
    "check_bridge",
    "compute_features",
    "extract_bridges",
    "get_glyph_render_data",
    "is_corner",
    "orient_contours",
    "process_glyph",
    "run_classifier",
    "score_corners",
    "split_path",
    "turning_angle",
    "wrap_angle",
]

"""Optimal pairing of corners via weighted bipartite matching.

Every corner is matched with exactly one corner (possibly itself) so that the
total bridge score is maximal. The assignment itself is delegated to an
AssignmentSolver, which keeps the matcher independent of the solver library
and lets tests substitute a fixed permutation.
"""

from collections.abc import Sequence
from typing import Protocol

import numpy as np
import structlog
from scipy.optimize import linear_sum_assignment

from glyphbridge.config import BridgeConfig
from glyphbridge.core.scoring import score_corners
from glyphbridge.domain import Endpoint
from glyphbridge.exceptions import AssignmentError

logger = structlog.get_logger(__name__)


class AssignmentSolver(Protocol):
    """Solves the square assignment problem on a score matrix."""

    def solve(self, scores: np.ndarray) -> list[int]:
        """Find a permutation maximizing the total score.

        Args:
            scores: Square matrix of finite scores

        Returns:
            match, where match[i] = j assigns row i to column j
        """
        ...


class HungarianSolver:
    """Assignment solver backed by scipy's linear_sum_assignment."""

    def solve(self, scores: np.ndarray) -> list[int]:
        rows, cols = linear_sum_assignment(scores, maximize=True)
        match = [0] * len(rows)
        for r, c in zip(rows, cols):
            match[int(r)] = int(c)
        return match


def _check_permutation(match: Sequence[int], n: int) -> None:
    if len(match) != n:
        raise AssignmentError(f"expected {n} assignments, got {len(match)}")
    if sorted(match) != list(range(n)):
        raise AssignmentError(f"not a permutation of 0..{n - 1}: {list(match)}")


class CornerMatcher:
    """Pairs corners so that the total bridge score is maximal.

    Example:
        matcher = CornerMatcher(BridgeConfig())
        matching = matcher.match(corners)
        # matching[i] == j: bridge from corners[i] to corners[j]
    """

    def __init__(self, config: BridgeConfig, solver: AssignmentSolver | None = None) -> None:
        """Initialize corner matcher.

        Args:
            config: Bridge configuration with scoring parameters
            solver: Assignment solver (defaults to HungarianSolver)
        """
        self.config = config
        self.solver = solver if solver is not None else HungarianSolver()

    def build_score_matrix(self, corners: Sequence[Endpoint]) -> np.ndarray:
        """Build the symmetrized score matrix over corners.

        Entry [i, j] scores a bridge from corners[i] to corners[j]. A pair may
        also be bridged in its reversed direction at a fixed penalty, so each
        entry is raised to the reversed score minus reversal_penalty when that
        is higher.

        Args:
            corners: Corner endpoints

        Returns:
            N x N float matrix
        """
        n = len(corners)
        scores = np.empty((n, n), dtype=float)
        for i, ins in enumerate(corners):
            for j, out in enumerate(corners):
                scores[i, j] = score_corners(ins, out, self.config)
        return np.maximum(scores, scores.T - self.config.reversal_penalty)

    def match(self, corners: Sequence[Endpoint]) -> list[int]:
        """Match every corner with a partner corner.

        Args:
            corners: Corner endpoints

        Returns:
            Permutation of range(len(corners))

        Raises:
            AssignmentError: If the solver does not return a permutation
        """
        if not corners:
            return []

        scores = self.build_score_matrix(corners)
        match = list(self.solver.solve(scores))
        _check_permutation(match, len(corners))

        logger.debug(
            "Corners matched",
            corners=len(corners),
            total_score=round(float(sum(scores[i, j] for i, j in enumerate(match))), 4),
        )
        return match

"""Directional scoring of candidate bridges between corners.

A bridge from corner `ins` to corner `out` scores well when it continues the
direction the outline arrives at `ins` in, and leads into the direction the
outline leaves `out` in. Scores are negative penalties; higher is better.
The score is directed: scoring (a, b) need not equal scoring (b, a).
"""

import math
from dataclasses import dataclass

from glyphbridge.config import BridgeConfig
from glyphbridge.core.geometry import angle_penalty, angle_subtract, vector_angle
from glyphbridge.domain import Endpoint

# Divisor applied to the angle penalty when both corners face each other
FACING_LENIENCY = 16.0
FACING_THRESHOLD = -0.5 * math.pi


@dataclass(frozen=True, slots=True)
class BridgeFeatures:
    """Geometric features of a bridge from one corner to another.

    All angles are in [-pi, pi).

    Attributes:
        entry_offset: Bridge direction relative to the incoming tangent at ins
        exit_offset: Outgoing tangent at out relative to the bridge direction
        ins_outgoing_offset: Outgoing tangent at ins relative to the bridge direction
        out_incoming_offset: Bridge direction relative to the incoming tangent at out
        ins_turn: Turning angle of the outline at ins
        out_turn: Turning angle of the outline at out
        distance: Bridge length in font units
    """

    entry_offset: float
    exit_offset: float
    ins_outgoing_offset: float
    out_incoming_offset: float
    ins_turn: float
    out_turn: float
    distance: float

    @property
    def faces_inward(self) -> bool:
        """True when both corners open toward each other along the bridge."""
        return (
            self.entry_offset > 0
            and self.exit_offset > 0
            and self.ins_outgoing_offset + self.out_incoming_offset < FACING_THRESHOLD
        )


def compute_features(ins: Endpoint, out: Endpoint) -> BridgeFeatures:
    """Compute the features of a bridge between two distinct points.

    Args:
        ins: Corner the bridge leaves from
        out: Corner the bridge arrives at (at a different point)

    Returns:
        Named bridge features
    """
    diff = out.point - ins.point
    angle = vector_angle(diff)
    return BridgeFeatures(
        entry_offset=angle_subtract(angle, ins.angles[0]),
        exit_offset=angle_subtract(out.angles[1], angle),
        ins_outgoing_offset=angle_subtract(ins.angles[1], angle),
        out_incoming_offset=angle_subtract(angle, out.angles[0]),
        ins_turn=angle_subtract(ins.angles[1], ins.angles[0]),
        out_turn=angle_subtract(out.angles[1], out.angles[0]),
        distance=diff.length(),
    )


def run_classifier(features: BridgeFeatures, config: BridgeConfig) -> float:
    """Score a bridge from its features.

    The penalty is quadratic in how far the bridge deviates from the incoming
    direction at ins and the outgoing direction at out, plus a linear distance
    term. Corners that face each other are penalized less for misalignment.

    Args:
        features: Bridge features
        config: Bridge configuration with the distance scale

    Returns:
        Score (higher is better, never positive)
    """
    penalty = angle_penalty(features.entry_offset) + angle_penalty(features.exit_offset)
    distance_penalty = features.distance / config.max_bridge_distance
    if features.faces_inward:
        penalty /= FACING_LENIENCY
    return -(penalty + distance_penalty)


def score_corners(ins: Endpoint, out: Endpoint, config: BridgeConfig) -> float:
    """Score a bridge from corner ins to corner out.

    Two corners at the same point are scored by how well the outline would
    continue from the incoming direction at ins into the outgoing direction
    at out.

    Args:
        ins: Corner the bridge leaves from
        out: Corner the bridge arrives at
        config: Bridge configuration

    Returns:
        Directed score (higher is better)
    """
    if ins.point == out.point:
        return -angle_penalty(angle_subtract(out.angles[1], ins.angles[0]))
    return run_classifier(compute_features(ins, out), config)

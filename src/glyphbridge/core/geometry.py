"""Angle operations for corner and bridge calculations.

Angles are floats in [-pi, pi). All functions are pure, stateless, and
designed for use in parallel processing.
"""

import math

from glyphbridge.domain import Point

TWO_PI = 2 * math.pi


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi).

    A single full turn is added or removed, which covers any sum or difference
    of two angles that are already in range.

    Args:
        angle: Angle in radians, within one turn of [-pi, pi)

    Returns:
        The equivalent angle in [-pi, pi)

    Examples:
        wrap_angle(math.pi) == -math.pi
        wrap_angle(-1.5 * math.pi)  # approximately pi / 2
    """
    if angle < -math.pi:
        angle += TWO_PI
    if angle >= math.pi:
        angle -= TWO_PI
    return angle


def angle_subtract(angle1: float, angle2: float) -> float:
    """Signed rotation from angle2 to angle1, wrapped into [-pi, pi)."""
    return wrap_angle(angle1 - angle2)


def angle_penalty(diff: float) -> float:
    """Penalty for an angular misalignment (quadratic in the angle)."""
    return diff * diff


def vector_angle(vector: Point) -> float:
    """Direction of a vector, in [-pi, pi).

    Args:
        vector: Difference of two points

    Returns:
        atan2 of the vector, with +pi mapped to -pi
    """
    return wrap_angle(vector.angle())

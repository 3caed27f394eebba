"""core/geometry.py — Small 2D math helpers.

Angles are radians, measured the way ``math.atan2`` measures them in
screen space: 0 points right, π/2 points down (y grows downward).
"""

from __future__ import annotations
import math


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(bx - ax, by - ay)


def bearing(ax: float, ay: float, bx: float, by: float) -> float:
    """Angle of the vector from *a* to *b*."""
    return math.atan2(by - ay, bx - ax)


def angle_diff(target: float, facing: float) -> float:
    """Signed difference ``target - facing`` wrapped into [-π, π).

    Floor-mod keeps negative differences in range too, so a target
    directly behind the facing direction comes out as -π.
    """
    return (target - facing + math.pi) % math.tau - math.pi


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into [lo, hi].  If the range is empty, *lo* wins."""
    return max(lo, min(hi, value))


def normalize(dx: float, dy: float) -> tuple[float, float]:
    """Unit vector along (dx, dy), or (0, 0) for a zero vector."""
    mag = math.hypot(dx, dy)
    if mag == 0.0:
        return 0.0, 0.0
    return dx / mag, dy / mag

"""components.spatial — Position, Velocity, Facing."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Position:
    x: float = 0.0        # px
    y: float = 0.0        # px


@dataclass
class Velocity:
    x: float = 0.0        # px/s
    y: float = 0.0        # px/s


@dataclass
class Facing:
    """Heading in radians (0 = right, π/2 = down).

    Only the patrol system writes it, and only while the entity is
    actually walking toward a waypoint.
    """
    angle: float = 0.0

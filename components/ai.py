"""components.ai — Patrol route and vision."""

from __future__ import annotations
import math
from dataclasses import dataclass, field


@dataclass
class Patrol:
    """Cyclic waypoint route.

    ``target_index`` always indexes into ``points`` (wraps modulo
    length).  An empty route means the entity stands still.
    """
    points: list[tuple[float, float]] = field(default_factory=list)
    target_index: int = 0
    speed: float = 100.0         # px/s

    def target(self) -> tuple[float, float] | None:
        if not self.points:
            return None
        return self.points[self.target_index]

    def advance(self) -> None:
        if self.points:
            self.target_index = (self.target_index + 1) % len(self.points)


@dataclass
class VisionCone:
    """Forward vision wedge.

    The target is seen if it is within ``view_distance`` and its
    bearing differs from the facing by strictly less than half of
    ``fov_degrees``.
    """
    fov_degrees: float = 60.0        # °
    view_distance: float = 200.0     # px

    @property
    def half_fov(self) -> float:
        return math.radians(self.fov_degrees) / 2.0


@dataclass
class Detection:
    """Result of this frame's vision check.  Recomputed every update."""
    detected: bool = False

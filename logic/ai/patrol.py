"""logic/ai/patrol.py — Waypoint following.

A guard walks straight at its current waypoint.  Once it is within
the arrival threshold it spends one whole update picking the next
waypoint: no movement and no facing change on that frame.
"""

from __future__ import annotations
import math
from core.ecs import World
from core import tuning
from core.constants import ARRIVAL_THRESHOLD
from components import Position, Facing, Patrol, Enemy


def arrival_threshold() -> float:
    return tuning.get("enemy.patrol", "arrival_threshold", ARRIVAL_THRESHOLD)


def patrol_step(pos: Position, facing: Facing, patrol: Patrol, dt: float,
                arrival: float | None = None) -> bool:
    """Advance one guard along its route.

    Returns True if the guard moved this frame.  An empty route is a
    no-op.  Overshooting a waypoint is allowed; the next frame sees the
    guard within (or past) the threshold and handles it from there.
    """
    target = patrol.target()
    if target is None:
        return False
    if arrival is None:
        arrival = arrival_threshold()

    dx = target[0] - pos.x
    dy = target[1] - pos.y
    dist = math.hypot(dx, dy)
    if dist < arrival:
        patrol.advance()
        return False

    facing.angle = math.atan2(dy, dx)
    step = patrol.speed * dt
    pos.x += dx / dist * step
    pos.y += dy / dist * step
    return True


def patrol_system(world: World, dt: float):
    """Step every guard's patrol, in spawn order."""
    arrival = arrival_threshold()
    for _eid, _enemy, pos, facing, patrol in world.query(Enemy, Position, Facing, Patrol):
        patrol_step(pos, facing, patrol, dt, arrival)

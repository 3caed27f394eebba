"""logic/ai/perception.py — Vision cone checks.

    in_vision_cone(enemy_pos, facing, player_pos, cone)   # pure
    check_detection(world, enemy_eid, player_pos)          # stores result
"""

from __future__ import annotations
import math
from core.ecs import World
from core.geometry import angle_diff
from components import Position, Facing, VisionCone, Detection


def in_vision_cone(pos, facing_angle: float, target_pos,
                   cone: VisionCone) -> bool:
    """Return True if *target_pos* is visible from *pos*.

    Detection succeeds if the target is within ``cone.view_distance``
    (inclusive) AND the angular difference from *facing_angle* is
    strictly less than half the field of view.
    """
    dx = target_pos.x - pos.x
    dy = target_pos.y - pos.y
    dist = math.hypot(dx, dy)
    if dist > cone.view_distance:
        return False
    diff = angle_diff(math.atan2(dy, dx), facing_angle)
    return abs(diff) < cone.half_fov


def check_detection(world: World, eid: int, target_pos) -> bool:
    """Run the vision test for guard *eid* and record it.

    The guard's ``Detection.detected`` always equals the return value,
    so the draw step can colour the cone from it.
    """
    pos = world.get(eid, Position)
    facing = world.get(eid, Facing)
    cone = world.get(eid, VisionCone)
    det = world.get(eid, Detection)
    if det is None:
        det = Detection()
        world.add(eid, det)
    if pos is None or cone is None:
        det.detected = False
        return False
    seen = in_vision_cone(pos, facing.angle if facing else 0.0,
                          target_pos, cone)
    det.detected = seen
    return seen

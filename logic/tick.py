"""logic/tick.py — Per-frame system pipeline.

    spotters = tick_systems(world, dt)

Order matters: the player moves first, then each guard in spawn order
walks its patrol and immediately looks for the player.  Every guard's
``Detection`` is refreshed each frame, even after an earlier guard has
already spotted the player.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import (
    Position, Facing, Patrol, Player, Enemy, Viewport, Detection,
)
from logic.movement import player_movement_system
from logic.ai.patrol import patrol_step, arrival_threshold
from logic.ai.perception import check_detection

if TYPE_CHECKING:
    from core.ecs import World


def tick_systems(world: "World", dt: float,
                 viewport: Viewport | None = None) -> list[int]:
    """Advance the simulation by *dt* seconds.

    Returns the ids of the guards that see the player after the step
    (empty if there is no player).
    """
    player_movement_system(world, dt, viewport)

    res = world.query_one(Player, Position)
    player_pos = res[2] if res else None

    arrival = arrival_threshold()
    spotters: list[int] = []
    for eid, _enemy, pos, facing, patrol in world.query(Enemy, Position, Facing, Patrol):
        patrol_step(pos, facing, patrol, dt, arrival)
        if player_pos is None:
            det = world.get(eid, Detection)
            if det is not None:
                det.detected = False
            continue
        if check_detection(world, eid, player_pos):
            spotters.append(eid)
    return spotters

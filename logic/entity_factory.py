"""logic/entity_factory.py — Build player and guard entities.

Every numeric default comes from ``data/tuning.toml`` with the values
in ``core.constants`` as fallback, so tests that never load tuning get
the stock game.
"""

from __future__ import annotations
import random
from core.ecs import World
from core import tuning
from core.constants import (
    PLAYER_SPEED, PLAYER_RADIUS, COLOR_PLAYER,
    ENEMY_SPEED, ENEMY_RADIUS, ENEMY_COUNT, SPAWN_MARGIN, COLOR_ENEMY,
    VISION_FOV_DEGREES, VISION_RANGE,
)
from components import (
    Position, Velocity, Facing, Sprite, Patrol, VisionCone, Detection,
    Player, Enemy, Viewport,
)


def spawn_player(world: World, x: float, y: float) -> int:
    eid = world.spawn()
    world.add(eid, Position(x=x, y=y))
    world.add(eid, Velocity())
    world.add(eid, Sprite(radius=tuning.get("player", "radius", PLAYER_RADIUS),
                          color=COLOR_PLAYER))
    world.add(eid, Player(speed=tuning.get("player", "speed", PLAYER_SPEED)))
    return eid


def spawn_enemy(world: World, x: float, y: float,
                patrol_points: list[tuple[float, float]] | None = None,
                *, speed: float | None = None,
                fov_degrees: float | None = None,
                view_distance: float | None = None,
                facing: float = 0.0) -> int:
    """Spawn a guard at (x, y) walking *patrol_points* in order."""
    if speed is None:
        speed = tuning.get("enemy", "speed", ENEMY_SPEED)
    if fov_degrees is None:
        fov_degrees = tuning.get("enemy.vision", "fov_degrees", VISION_FOV_DEGREES)
    if view_distance is None:
        view_distance = tuning.get("enemy.vision", "range", VISION_RANGE)

    eid = world.spawn()
    world.add(eid, Position(x=x, y=y))
    world.add(eid, Facing(angle=facing))
    world.add(eid, Sprite(radius=tuning.get("enemy", "radius", ENEMY_RADIUS),
                          color=COLOR_ENEMY))
    world.add(eid, Patrol(points=list(patrol_points or []), speed=speed))
    world.add(eid, VisionCone(fov_degrees=fov_degrees,
                              view_distance=view_distance))
    world.add(eid, Detection())
    world.add(eid, Enemy(name=f"Guard {eid}"))
    return eid


def spawn_random_enemies(world: World, viewport: Viewport,
                         rng: random.Random, count: int | None = None) -> list[int]:
    """Scatter guards inside the spawn margin.

    Each guard patrols between its start point and one random point
    anywhere in the viewport.
    """
    if count is None:
        count = int(tuning.get("enemy", "count", ENEMY_COUNT))
    margin = tuning.get("enemy", "spawn_margin", SPAWN_MARGIN)
    w, h = viewport.width, viewport.height
    eids: list[int] = []
    for _ in range(count):
        x = rng.random() * (w - 2 * margin) + margin
        y = rng.random() * (h - 2 * margin) + margin
        route = [(x, y), (rng.random() * w, rng.random() * h)]
        eids.append(spawn_enemy(world, x, y, route))
    return eids

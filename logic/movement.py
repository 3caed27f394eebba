"""logic/movement.py — Player movement system.

Integrates Velocity into Position, then clamps the player's circle
into the current viewport.  The viewport is read fresh every call
because the window can be resized between frames.
"""

from __future__ import annotations
from core.ecs import World
from core.geometry import clamp
from components import Position, Velocity, Player, Sprite, Viewport


def clamp_to_viewport(pos: Position, radius: float, viewport: Viewport):
    """Keep a circle of *radius* fully inside *viewport*.

    A viewport narrower than the circle pins it at ``radius``.
    """
    pos.x = clamp(pos.x, radius, viewport.width - radius)
    pos.y = clamp(pos.y, radius, viewport.height - radius)


def player_movement_system(world: World, dt: float,
                           viewport: Viewport | None = None):
    """Advance every Player by ``velocity * dt`` and clamp to bounds."""
    if viewport is None:
        viewport = world.res(Viewport) or Viewport()
    for eid, pos, vel, _player in world.query(Position, Velocity, Player):
        pos.x += vel.x * dt
        pos.y += vel.y * dt
        sprite = world.get(eid, Sprite)
        radius = sprite.radius if sprite else 0.0
        clamp_to_viewport(pos, radius, viewport)

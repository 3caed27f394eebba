"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Velocity, Facing
rendering      Sprite
ai             Patrol, VisionCone, Detection
resources      Viewport, GameClock, Player, Enemy
dev_log        DevLog

A plain on-screen entity is ``Position`` + ``Sprite``.  The player adds
``Velocity`` + ``Player``; a guard adds ``Facing`` + ``Patrol`` +
``VisionCone`` + ``Detection`` + ``Enemy``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Velocity, Facing

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Sprite

# ── AI ───────────────────────────────────────────────────────────────
from components.ai import Patrol, VisionCone, Detection

# ── World resources / markers ────────────────────────────────────────
from components.resources import Viewport, GameClock, Player, Enemy

# ── Logging ──────────────────────────────────────────────────────────
from components.dev_log import DevLog

__all__ = [
    "Position", "Velocity", "Facing",
    "Sprite",
    "Patrol", "VisionCone", "Detection",
    "Viewport", "GameClock", "Player", "Enemy",
    "DevLog",
]

"""components.resources — World-level singletons and entity markers."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Viewport:
    """Current drawable area.  Changes whenever the window is resized.

    Player clamping and enemy spawn placement read it every time, so
    nothing caches the old size.
    """
    width: int = 960
    height: int = 640


@dataclass
class GameClock:
    """Accumulated simulation time (seconds).  Stops while paused."""
    time: float = 0.0


@dataclass
class Player:
    """Marks the player entity."""
    speed: float = 200.0       # pixels per second


@dataclass
class Enemy:
    """Marks a patrolling guard."""
    name: str = "Guard"

"""components.rendering — Drawable shape."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Sprite:
    """Filled circle drawn at the entity's Position."""
    radius: float = 15.0         # px
    color: tuple = (255, 255, 255)

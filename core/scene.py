"""
core/scene.py — Base class for screens driven by App

App forwards pygame events, resize notices, the frame's dt and the
draw call to the active scene.  Subclasses override what they need;
every hook defaults to doing nothing.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Set up world resources once the scene is pushed."""
        pass

    def handle_event(self, event: pygame.event.Event, app: App):
        pass

    def on_resize(self, width: int, height: int, app: App):
        """The Viewport resource already holds the new size."""
        pass

    def update(self, dt: float, app: App):
        """One simulation step of *dt* seconds."""
        pass

    def draw(self, surface: pygame.Surface, app: App):
        pass

"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
You don't edit this file to build your game.
You write Scenes and push them.

    app = App(title="Stealth", width=960, height=640)
    app.push_scene(MyScene())
    app.run()

Each loop iteration is one frame: drain events into the top scene,
compute dt from the frame timestamp, update once, draw once.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.ecs import World
from core.frame import FrameTimer
from components import Viewport


class App:
    def __init__(self, title: str = "Stealth", width: int = 960, height: int = 640,
                 fps: int = 60):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.timer = FrameTimer()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        # Scene stack, only the top scene is active
        self._scenes: list[Scene] = []

        # The ECS world, shared across all scenes
        self.world = World()
        self.world.set_res(Viewport(width=width, height=height))

        self.font = pygame.font.SysFont("arial", 20)
        self.font_lg = pygame.font.SysFont("arial", 24)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        self._scenes.append(scene)
        scene.on_enter(self)

    # -- Viewport --

    def resize(self, width: int, height: int):
        """Adopt a new window size and tell the active scene."""
        width, height = max(0, width), max(0, height)
        if width and height:
            # (0, 0) would ask SDL for a desktop-sized window
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        vp = self.world.res(Viewport)
        if vp is None:
            vp = Viewport()
            self.world.set_res(vp)
        vp.width, vp.height = width, height
        if self.scene:
            self.scene.on_resize(width, height, self)

    # -- Main loop --

    def run(self):
        print(f"[APP] Running at {self.fps} fps cap")
        while self.running:
            self.clock.tick(self.fps)
            self.dt = self.timer.tick(pygame.time.get_ticks())

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.resize(event.w, event.h)
                elif self.scene:
                    self.scene.handle_event(event, self)

            # Update
            if self.scene:
                self.scene.update(self.dt, self)

            # Draw
            if self.scene:
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

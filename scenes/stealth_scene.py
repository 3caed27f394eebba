"""
scenes/stealth_scene.py — The game screen

Player (green circle) sneaks around guards (red circles) whose vision
cones turn red when they see the player.  Score ticks up while unseen.

Controls: arrows / WASD or touch / left-drag to move, P or Esc to
pause, R to restart, F5 to reload tuning, Tab to show recent
detection events.
"""

from __future__ import annotations
import random
import pygame
from core.scene import Scene
from core.app import App
from core.constants import COLOR_BACKGROUND
from core.events import EventBus
from core import tuning as tuning_mod
from components import DevLog, GameClock, Viewport
from logic.game import Game
from logic.input_manager import InputManager
from scenes.stealth_draw import draw_entities, draw_hud, draw_event_log


class StealthScene(Scene):
    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.game: Game | None = None
        self.input = InputManager()
        self._subscribed = False
        self.show_events = False

    def on_enter(self, app: App):
        world = app.world
        if not world.res(GameClock):
            world.set_res(GameClock())
        if not world.res(DevLog):
            world.set_res(DevLog())
        if not world.res(EventBus):
            world.set_res(EventBus())
        if not world.res(Viewport):
            w, h = app.screen.get_size()
            world.set_res(Viewport(width=w, height=h))

        self._subscribe(world)
        if self.game is None:
            self.game = Game(world, rng=random.Random(self.seed))

    def _subscribe(self, world):
        bus = world.res(EventBus)
        log = world.res(DevLog)
        if self._subscribed:
            return
        self._subscribed = True

        def _on_spotted(ev):
            print(f"[GAME] Spotted at t={ev.t:.2f}s by guards {list(ev.enemy_eids)}")
            log.record(ev.player_eid, "detection", "spotted", t=ev.t,
                       details={"by": list(ev.enemy_eids)})

        def _on_lost(ev):
            print(f"[GAME] Lost at t={ev.t:.2f}s, score {ev.score:.1f}")
            log.record(ev.player_eid, "detection", "lost", t=ev.t,
                       details={"score": round(ev.score, 2)})

        def _on_paused(ev):
            log.record(0, "game", "paused" if ev.paused else "resumed", t=ev.t)

        bus.subscribe("PlayerSpotted", _on_spotted)
        bus.subscribe("PlayerLost", _on_lost)
        bus.subscribe("GamePaused", _on_paused)

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event, app.world)

    def on_resize(self, width: int, height: int, app: App):
        print(f"[GAME] Viewport now {width}x{height}")

    # ── update ───────────────────────────────────────────────────────

    def update(self, dt: float, app: App):
        game = self.game
        if game is None:
            return

        if self.input.just("pause"):
            game.toggle_pause()
        if self.input.just("restart"):
            self.input.reset()
            game.reset()
            log = app.world.res(DevLog)
            if log:
                log.record(0, "game", "restarted")
        if self.input.just("reload"):
            tuning_mod.reload()
        if self.input.just("events"):
            self.show_events = not self.show_events
        self.input.begin_frame()

        game.update(dt)

        bus = app.world.res(EventBus)
        if bus:
            bus.drain()

    # ── draw ─────────────────────────────────────────────────────────

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(COLOR_BACKGROUND)
        game = self.game
        if game is None:
            return
        draw_entities(surface, app.world, game.player_eid)
        draw_hud(surface, game.score, game.detected, game.paused,
                 app.font, app.font_lg)
        log = app.world.res(DevLog)
        if self.show_events and log:
            draw_event_log(surface, log, app.font)

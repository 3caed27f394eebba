"""logic/game.py — The stealth game aggregate.

Owns the player, the guards, the score and the detection state.  One
``update(dt)`` per frame; rendering reads the state afterwards.

Scoring rule: the score grows by ``dt`` only on frames where the
player was unseen both before and after the step.  The frame on which
the player slips out of sight therefore scores nothing.
"""

from __future__ import annotations
import random

from core.ecs import World
from core.events import EventBus, PlayerSpotted, PlayerLost, GamePaused
from core.constants import COLOR_PLAYER, COLOR_SPOTTED
from components import Sprite, Viewport, GameClock, Position, Player, Enemy
from logic.entity_factory import spawn_player, spawn_random_enemies
from logic.tick import tick_systems


class Game:
    def __init__(self, world: World | None = None,
                 viewport: Viewport | None = None,
                 rng: random.Random | None = None,
                 enemy_count: int | None = None,
                 populate: bool = True):
        self.world = world if world is not None else World()
        if viewport is not None:
            self.world.set_res(viewport)
        elif self.world.res(Viewport) is None:
            self.world.set_res(Viewport())
        if self.world.res(GameClock) is None:
            self.world.set_res(GameClock())
        self.rng = rng or random.Random()
        self.enemy_count = enemy_count

        self.score = 0.0
        self.detected = False
        self.paused = False
        self.player_eid: int | None = None
        self.enemy_eids: list[int] = []

        if populate:
            self.populate()

    # ── setup ────────────────────────────────────────────────────────

    @property
    def viewport(self) -> Viewport:
        return self.world.res(Viewport)

    def populate(self):
        """Spawn the player at the viewport centre plus the guards."""
        vp = self.viewport
        self.player_eid = spawn_player(self.world, vp.width / 2, vp.height / 2)
        self.enemy_eids = spawn_random_enemies(self.world, vp, self.rng,
                                               self.enemy_count)
        print(f"[GAME] Spawned player + {len(self.enemy_eids)} guards "
              f"in {vp.width}x{vp.height}")

    def adopt(self):
        """Pick up player/guards that were spawned into the world by hand."""
        res = self.world.query_one(Player, Position)
        self.player_eid = res[0] if res else None
        self.enemy_eids = [eid for eid, _ in self.world.all_of(Enemy)]

    def reset(self):
        """Start over: fresh entities, zero score, not detected, running."""
        self.world.clear()
        clock = self.world.res(GameClock)
        if clock:
            clock.time = 0.0
        self.score = 0.0
        self.detected = False
        self.paused = False
        self.populate()

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        bus = self.world.res(EventBus)
        if bus:
            bus.emit(GamePaused(paused=self.paused, t=self._now()))
        return self.paused

    # ── simulation step ──────────────────────────────────────────────

    def update(self, dt: float):
        """Advance one frame.  Does nothing while paused."""
        if self.paused:
            return
        clock = self.world.res(GameClock)
        if clock:
            clock.time += dt

        spotters = tick_systems(self.world, dt, self.viewport)
        any_detection = bool(spotters)

        sprite = self._player_sprite()
        bus = self.world.res(EventBus)
        if any_detection:
            if sprite:
                sprite.color = COLOR_SPOTTED
            if not self.detected and bus:
                bus.emit(PlayerSpotted(player_eid=self.player_eid or 0,
                                       enemy_eids=spotters, t=self._now()))
            self.detected = True
        else:
            if sprite:
                sprite.color = COLOR_PLAYER
            if self.detected is False:
                self.score += dt
            elif bus:
                bus.emit(PlayerLost(player_eid=self.player_eid or 0,
                                    t=self._now(), score=self.score))
            self.detected = False

    # ── queries ──────────────────────────────────────────────────────

    def player_color(self) -> tuple:
        sprite = self._player_sprite()
        return sprite.color if sprite else COLOR_PLAYER

    def _player_sprite(self) -> Sprite | None:
        if self.player_eid is None:
            return None
        return self.world.get(self.player_eid, Sprite)

    def _now(self) -> float:
        clock = self.world.res(GameClock)
        return clock.time if clock else 0.0

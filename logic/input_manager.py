"""logic/input_manager.py — Input layer.

Sits between raw pygame events and the player's velocity.  Keyboard
state is an explicit set of pressed key names; the velocity is derived
from it by a pure function every time the set changes.  Touch (and a
held left mouse button on desktop) steers the player toward the
pointer.  Whatever handled an event last owns the velocity until the
next event, so keys and touch never need to be merged.

Usage (in the stealth scene):

    self.input = InputManager()
    for event in events:
        self.input.feed(event, world)

    move = movement_from_keys({"left", "up"})    # → (-0.707, -0.707)
"""

from __future__ import annotations
import pygame
from core import tuning
from core.constants import TOUCH_DEADZONE
from core.ecs import World
from core.geometry import normalize
from components import Position, Player, Velocity, Viewport


# ── Key bindings (logical key names, lowercase) ─────────────────────

_MOVE_BINDS: dict[str, tuple[str, ...]] = {
    "move_up":    ("up", "w"),
    "move_down":  ("down", "s"),
    "move_left":  ("left", "a"),
    "move_right": ("right", "d"),
}
_MOVE_KEYS = {k for keys in _MOVE_BINDS.values() for k in keys}

# Discrete actions, handled by the scene
ACTION_BINDS: dict[str, tuple[str, ...]] = {
    "pause":   ("p", "escape"),
    "restart": ("r",),
    "reload":  ("f5",),
    "events":  ("tab",),
}


def key_name(key: int) -> str:
    """Logical (lowercase) name for a pygame key code."""
    return pygame.key.name(key).lower()


def movement_from_keys(pressed: set[str]) -> tuple[float, float]:
    """Return a normalised (dx, dy) direction from held key names.

    Letter keys are case-insensitive.  Opposing keys cancel out.
    """
    held = {k.lower() for k in pressed}

    def down(intent: str) -> bool:
        return any(k in held for k in _MOVE_BINDS[intent])

    dx = 0.0
    dy = 0.0
    if down("move_up"):
        dy -= 1.0
    if down("move_down"):
        dy += 1.0
    if down("move_left"):
        dx -= 1.0
    if down("move_right"):
        dx += 1.0
    # Normalise diagonal so player doesn't move √2× faster
    return normalize(dx, dy)


def velocity_toward(px: float, py: float, tx: float, ty: float,
                    speed: float, deadzone: float = TOUCH_DEADZONE) -> tuple[float, float]:
    """Velocity steering from (px, py) toward a touch at (tx, ty).

    Inside the deadzone the player stops instead of jittering.
    """
    dx = tx - px
    dy = ty - py
    if dx * dx + dy * dy <= deadzone * deadzone:
        return 0.0, 0.0
    ux, uy = normalize(dx, dy)
    return ux * speed, uy * speed


def action_for_key(name: str) -> str | None:
    """Return the action intent bound to key *name*, if any."""
    name = name.lower()
    for intent, keys in ACTION_BINDS.items():
        if name in keys:
            return intent
    return None


# ── Velocity writes ─────────────────────────────────────────────────

def input_system(world: World, move: tuple[float, float]) -> None:
    """Set Player velocity from a unit direction scaled by its speed."""
    dx, dy = move
    for _eid, player, vel in world.query(Player, Velocity):
        vel.x = dx * player.speed
        vel.y = dy * player.speed


def touch_system(world: World, tx: float, ty: float) -> None:
    """Point every Player at the touch position (x, y in pixels)."""
    deadzone = tuning.get("input", "touch_deadzone", TOUCH_DEADZONE)
    for _eid, player, pos, vel in world.query(Player, Position, Velocity):
        vel.x, vel.y = velocity_toward(pos.x, pos.y, tx, ty,
                                       player.speed, deadzone)


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Event-driven input mapper.

    ``feed(event, world)`` updates the pressed-key set / touch state and
    rewrites the player's velocity immediately.  Discrete actions
    pressed since the last ``begin_frame()`` are available through
    ``just(intent)``.
    """

    def __init__(self):
        self.pressed: set[str] = set()
        self.touch_active = False
        self._actions: set[str] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        self._actions.clear()

    def reset(self):
        """Forget held keys and touches (e.g. after a restart)."""
        self.pressed.clear()
        self.touch_active = False
        self._actions.clear()

    def feed(self, event: pygame.event.Event, world: World) -> None:
        """Feed a raw pygame event."""
        if event.type == pygame.KEYDOWN:
            name = key_name(event.key)
            action = action_for_key(name)
            if action is not None:
                self._actions.add(action)
            elif name in _MOVE_KEYS:
                self.pressed.add(name)
                input_system(world, movement_from_keys(self.pressed))

        # Only movement keys own the velocity; releasing anything else
        # must not cancel an active touch
        elif event.type == pygame.KEYUP:
            name = key_name(event.key)
            if name in self.pressed:
                self.pressed.discard(name)
                input_system(world, movement_from_keys(self.pressed))

        # Touch: finger coordinates are normalised 0..1
        elif event.type == pygame.FINGERDOWN:
            self.touch_active = True
            self._touch_normalised(event, world)
        elif event.type == pygame.FINGERMOTION:
            if self.touch_active:
                self._touch_normalised(event, world)
        elif event.type == pygame.FINGERUP:
            self._release(world)

        # Left mouse drag acts as a touch on desktop.  Mouse events that
        # SDL synthesises from touches are skipped, the finger events
        # already covered them.
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and not getattr(event, "touch", False):
                self.touch_active = True
                touch_system(world, *event.pos)
        elif event.type == pygame.MOUSEMOTION:
            if self.touch_active and not getattr(event, "touch", False):
                touch_system(world, *event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and not getattr(event, "touch", False):
                self._release(world)

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the action was triggered since ``begin_frame()``."""
        return intent in self._actions

    # ── internal ────────────────────────────────────────────────

    def _touch_normalised(self, event: pygame.event.Event, world: World):
        vp = world.res(Viewport) or Viewport()
        touch_system(world, event.x * vp.width, event.y * vp.height)

    def _release(self, world: World):
        self.touch_active = False
        input_system(world, (0.0, 0.0))

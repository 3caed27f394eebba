"""scenes/stealth_draw.py — Rendering helpers for the stealth scene.

All pure-draw functions live here so that StealthScene.draw() stays
thin.  Geometry and colour choices are split out as plain functions
so they can be checked without a display.
"""

from __future__ import annotations
import math
import pygame
from core.constants import (
    COLOR_CONE, COLOR_CONE_ALERT, COLOR_TEXT, COLOR_BANNER,
    HUD_MARGIN, BANNER_OFFSET_X,
)
from core.ecs import World
from components import (
    DevLog, Position, Sprite, Facing, VisionCone, Detection, Enemy,
)


# ── Pure helpers ────────────────────────────────────────────────────

def cone_polygon(x: float, y: float, facing: float, half_fov: float,
                 view_distance: float) -> list[tuple[float, float]]:
    """Triangle for a vision cone: apex at (x, y), pointing along *facing*.

    The far edge sits at *view_distance* straight ahead and spans
    ``±view_distance * tan(half_fov)`` sideways.
    """
    side = view_distance * math.tan(half_fov)
    cos_f = math.cos(facing)
    sin_f = math.sin(facing)
    pts = [(0.0, 0.0), (view_distance, -side), (view_distance, side)]
    return [(x + px * cos_f - py * sin_f, y + px * sin_f + py * cos_f)
            for px, py in pts]


def cone_color(detected: bool) -> tuple[int, int, int, int]:
    """Translucent red while the guard sees the player, yellow otherwise."""
    return COLOR_CONE_ALERT if detected else COLOR_CONE


def score_text(score: float) -> str:
    return f"Score: {math.floor(score)}"


def banner_pos(width: int) -> tuple[int, int]:
    """Top-left corner of the "Detected!" banner (top-right region)."""
    return width - BANNER_OFFSET_X, HUD_MARGIN


def event_line(entry: dict) -> str:
    """One overlay row, e.g. ``"  4.2s spotted by 3, 5"``."""
    text = f"{entry['t']:5.1f}s {entry['msg']}"
    details = entry.get("details") or {}
    if details.get("by"):
        text += " by " + ", ".join(str(e) for e in details["by"])
    if "score" in details:
        text += f" (score {math.floor(details['score'])})"
    return text


# ── Primitives ──────────────────────────────────────────────────────

def draw_polygon_alpha(surface: pygame.Surface, color: tuple,
                       points: list[tuple[float, float]]):
    """Fill a semi-transparent polygon via a scratch SRCALPHA surface."""
    if len(points) < 3:
        return
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    min_x, max_x = int(math.floor(min(xs))), int(math.ceil(max(xs)))
    min_y, max_y = int(math.floor(min(ys))), int(math.ceil(max(ys)))
    w = max_x - min_x + 2
    h = max_y - min_y + 2
    if w < 1 or h < 1:
        return
    s = pygame.Surface((w, h), pygame.SRCALPHA)
    local_pts = [(px - min_x + 1, py - min_y + 1) for px, py in points]
    pygame.draw.polygon(s, color, local_pts)
    surface.blit(s, (min_x - 1, min_y - 1))


def draw_circle(surface: pygame.Surface, pos: Position, sprite: Sprite):
    pygame.draw.circle(surface, sprite.color[:3],
                       (int(round(pos.x)), int(round(pos.y))),
                       max(1, int(round(sprite.radius))))


# ── Entities ────────────────────────────────────────────────────────

def draw_vision_cone(surface: pygame.Surface, world: World, eid: int):
    pos = world.get(eid, Position)
    cone = world.get(eid, VisionCone)
    if pos is None or cone is None:
        return
    facing = world.get(eid, Facing)
    det = world.get(eid, Detection)
    pts = cone_polygon(pos.x, pos.y, facing.angle if facing else 0.0,
                       cone.half_fov, cone.view_distance)
    draw_polygon_alpha(surface, cone_color(bool(det and det.detected)), pts)


def draw_entities(surface: pygame.Surface, world: World,
                  player_eid: int | None):
    """Player first, then each guard's body followed by its cone."""
    if player_eid is not None:
        pos = world.get(player_eid, Position)
        sprite = world.get(player_eid, Sprite)
        if pos and sprite:
            draw_circle(surface, pos, sprite)
    for eid, _enemy, pos, sprite in world.query(Enemy, Position, Sprite):
        draw_circle(surface, pos, sprite)
        draw_vision_cone(surface, world, eid)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, score: float, detected: bool,
             paused: bool, font: pygame.font.Font,
             banner_font: pygame.font.Font):
    surface.blit(font.render(score_text(score), True, COLOR_TEXT),
                 (HUD_MARGIN, HUD_MARGIN))
    if detected:
        surface.blit(banner_font.render("Detected!", True, COLOR_BANNER),
                     banner_pos(surface.get_width()))
    if paused:
        img = banner_font.render("Paused  [P] resume", True, COLOR_TEXT)
        sw, sh = surface.get_size()
        surface.blit(img, img.get_rect(center=(sw // 2, sh // 2)))


def draw_event_log(surface: pygame.Surface, log: DevLog,
                   font: pygame.font.Font, lines: int = 6):
    """Recent transitions stacked upward from the bottom-left corner."""
    rows = [f"Spotted {log.count('detection', 'spotted')} times"]
    rows += [event_line(e) for e in log.recent(lines)]
    step = font.get_linesize()
    y = surface.get_height() - HUD_MARGIN - step * len(rows)
    for row in rows:
        surface.blit(font.render(row, True, COLOR_TEXT), (HUD_MARGIN, y))
        y += step

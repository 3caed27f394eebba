"""test_simulation.py — Headless verification of the simulation core.

Covers geometry helpers, player clamping, patrol following, the vision
cone test and the Game step (detection aggregation + scoring).

Run: python test_simulation.py      (or: pytest test_simulation.py)
"""
from __future__ import annotations
import math, random, sys, traceback
from types import SimpleNamespace

from core import tuning
from core.ecs import World
from core.geometry import angle_diff, bearing, clamp, distance, normalize
from core.events import EventBus
from core.constants import COLOR_PLAYER, COLOR_SPOTTED
from components import (
    Position, Velocity, Facing, Patrol, VisionCone, Detection, Sprite,
    Viewport, GameClock, Enemy,
)
from logic.movement import player_movement_system
from logic.ai.patrol import patrol_step, patrol_system
from logic.ai.perception import in_vision_cone, check_detection
from logic.entity_factory import spawn_player, spawn_enemy
from logic.game import Game
from logic.tick import tick_systems

tuning.reset()


# ── Test harness ─────────────────────────────────────────────────────

passed = 0
failed = 0

def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Fixtures ─────────────────────────────────────────────────────────

def _arena(width: int = 800, height: int = 600) -> tuple[World, Viewport]:
    w = World()
    vp = Viewport(width=width, height=height)
    w.set_res(vp)
    return w, vp


def _guard_game(px: float, py: float) -> tuple[Game, int]:
    """Game with one stationary guard at (100, 100) facing right."""
    w, vp = _arena()
    w.set_res(EventBus())
    spawn_player(w, px, py)
    gid = spawn_enemy(w, 100.0, 100.0, [], fov_degrees=60.0, view_distance=200.0)
    game = Game(w, populate=False)
    game.adopt()
    return game, gid


def _move_player(game: Game, x: float, y: float):
    pos = game.world.get(game.player_eid, Position)
    pos.x, pos.y = x, y


# ════════════════════════════════════════════════════════════════════════
#  TEST 1 — Geometry helpers
# ════════════════════════════════════════════════════════════════════════

def test_distance_and_bearing():
    assert distance(0, 0, 3, 4) == 5.0
    assert bearing(0, 0, 10, 0) == 0.0
    assert math.isclose(bearing(0, 0, 0, 10), math.pi / 2)


def test_angle_diff_directly_behind_is_pi():
    diff = angle_diff(math.pi, 0.0)
    assert math.isclose(abs(diff), math.pi), diff


def test_angle_diff_wraps_large_negative():
    # -270° from facing is the same direction as +90°
    assert math.isclose(angle_diff(-3 * math.pi / 2, 0.0), math.pi / 2)
    assert math.isclose(angle_diff(0.1, 2 * math.pi), 0.1, abs_tol=1e-12)


def test_clamp_empty_range_prefers_low():
    assert clamp(5.0, 0.0, 10.0) == 5.0
    assert clamp(-1.0, 0.0, 10.0) == 0.0
    assert clamp(5.0, 15.0, -15.0) == 15.0


def test_normalize_zero_vector():
    assert normalize(0.0, 0.0) == (0.0, 0.0)
    assert normalize(3.0, 4.0) == (0.6, 0.8)


# ════════════════════════════════════════════════════════════════════════
#  TEST 2 — Player movement + clamping
# ════════════════════════════════════════════════════════════════════════

def test_player_moves_by_velocity_dt():
    w, vp = _arena()
    pid = spawn_player(w, 400.0, 300.0)
    w.get(pid, Velocity).x = 200.0
    player_movement_system(w, 0.5)
    pos = w.get(pid, Position)
    assert (pos.x, pos.y) == (500.0, 300.0)


def test_player_clamped_into_viewport():
    w, vp = _arena()
    pid = spawn_player(w, 20.0, 20.0)
    vel = w.get(pid, Velocity)
    vel.x, vel.y = -200.0, -200.0
    player_movement_system(w, 1.0)
    pos = w.get(pid, Position)
    assert (pos.x, pos.y) == (15.0, 15.0)

    vel.x, vel.y = 200.0, 200.0
    player_movement_system(w, 100.0)
    assert (pos.x, pos.y) == (785.0, 585.0)


def test_player_bounds_hold_for_many_steps():
    w, vp = _arena(320, 240)
    pid = spawn_player(w, 160.0, 120.0)
    rng = random.Random(3)
    pos = w.get(pid, Position)
    vel = w.get(pid, Velocity)
    for _ in range(500):
        vel.x = rng.uniform(-200, 200)
        vel.y = rng.uniform(-200, 200)
        player_movement_system(w, rng.uniform(0.0, 0.5))
        assert 15.0 <= pos.x <= 305.0
        assert 15.0 <= pos.y <= 225.0


def test_player_reclamped_after_resize():
    w, vp = _arena()
    pid = spawn_player(w, 700.0, 500.0)
    vp.width, vp.height = 400, 300
    player_movement_system(w, 0.0)
    pos = w.get(pid, Position)
    assert (pos.x, pos.y) == (385.0, 285.0)


def test_zero_viewport_pins_player_at_radius():
    w, vp = _arena(0, 0)
    pid = spawn_player(w, 50.0, 50.0)
    player_movement_system(w, 0.1)
    pos = w.get(pid, Position)
    assert (pos.x, pos.y) == (15.0, 15.0)


# ════════════════════════════════════════════════════════════════════════
#  TEST 3 — Patrol following
# ════════════════════════════════════════════════════════════════════════

def test_empty_patrol_is_noop():
    pos = Position(42.0, 24.0)
    facing = Facing(angle=1.0)
    patrol = Patrol(points=[], speed=100.0)
    for dt in (0.0, 0.016, 1.0, 10.0):
        assert patrol_step(pos, facing, patrol, dt) is False
    assert (pos.x, pos.y, facing.angle) == (42.0, 24.0, 1.0)
    assert patrol.target_index == 0


def test_patrol_two_point_route():
    pos = Position(0.0, 0.0)
    facing = Facing(angle=0.5)
    patrol = Patrol(points=[(0.0, 0.0), (100.0, 0.0)], speed=100.0)

    # Standing on waypoint 0: this update only selects waypoint 1
    assert patrol_step(pos, facing, patrol, 1.0) is False
    assert patrol.target_index == 1
    assert (pos.x, pos.y, facing.angle) == (0.0, 0.0, 0.5)

    # One second at 100 px/s reaches waypoint 1
    assert patrol_step(pos, facing, patrol, 1.0) is True
    assert math.isclose(pos.x, 100.0) and math.isclose(pos.y, 0.0)
    assert facing.angle == 0.0

    # Arrived: the next update wraps back to waypoint 0
    assert patrol_step(pos, facing, patrol, 1.0) is False
    assert patrol.target_index == 0
    assert math.isclose(pos.x, 100.0)

    # ...and the one after that heads home, facing left
    patrol_step(pos, facing, patrol, 0.5)
    assert math.isclose(pos.x, 50.0)
    assert math.isclose(abs(facing.angle), math.pi)


def test_facing_frozen_on_arrival_frame():
    pos = Position(98.0, 0.0)
    facing = Facing(angle=1.23)
    patrol = Patrol(points=[(100.0, 0.0), (100.0, 100.0)], speed=100.0)
    patrol_step(pos, facing, patrol, 0.1)
    assert facing.angle == 1.23
    assert (pos.x, pos.y) == (98.0, 0.0)
    assert patrol.target_index == 1


def test_patrol_system_steps_all_guards():
    w, vp = _arena()
    a = spawn_enemy(w, 0.0, 0.0, [(50.0, 0.0)])
    b = spawn_enemy(w, 0.0, 0.0, [(0.0, 50.0)])
    still = spawn_enemy(w, 7.0, 7.0, [])
    patrol_system(w, 0.1)
    assert math.isclose(w.get(a, Position).x, 10.0)
    assert math.isclose(w.get(b, Position).y, 10.0)
    assert math.isclose(w.get(b, Facing).angle, math.pi / 2)
    assert (w.get(still, Position).x, w.get(still, Position).y) == (7.0, 7.0)


# ════════════════════════════════════════════════════════════════════════
#  TEST 4 — Vision cone
# ════════════════════════════════════════════════════════════════════════

def test_player_ahead_in_range_is_seen():
    w, _ = _arena()
    gid = spawn_enemy(w, 100.0, 100.0, [], fov_degrees=60.0, view_distance=200.0)
    assert check_detection(w, gid, Position(150.0, 100.0)) is True
    assert w.get(gid, Detection).detected is True


def test_player_out_of_range_is_not_seen():
    w, _ = _arena()
    gid = spawn_enemy(w, 100.0, 100.0, [], fov_degrees=60.0, view_distance=200.0)
    w.get(gid, Detection).detected = True
    assert check_detection(w, gid, Position(100.0, 400.0)) is False
    assert w.get(gid, Detection).detected is False


def test_out_of_range_never_seen_at_any_angle():
    w, _ = _arena()
    gid = spawn_enemy(w, 0.0, 0.0, [], view_distance=200.0)
    for i in range(36):
        a = i * math.tau / 36
        w.get(gid, Facing).angle = a
        target = Position(201.0 * math.cos(a), 201.0 * math.sin(a))
        assert check_detection(w, gid, target) is False


def test_range_is_inclusive():
    cone = VisionCone(fov_degrees=60.0, view_distance=200.0)
    assert in_vision_cone(Position(100.0, 100.0), 0.0, Position(300.0, 100.0), cone)
    assert not in_vision_cone(Position(100.0, 100.0), 0.0, Position(300.5, 100.0), cone)


def test_half_angle_boundary_is_excluded():
    me = Position(0.0, 0.0)
    target = Position(50.0, 50.0)
    exact = abs(angle_diff(bearing(me.x, me.y, target.x, target.y), 0.0))
    on_edge = SimpleNamespace(view_distance=200.0, half_fov=exact)
    assert in_vision_cone(me, 0.0, target, on_edge) is False
    just_wider = SimpleNamespace(view_distance=200.0,
                                 half_fov=math.nextafter(exact, math.inf))
    assert in_vision_cone(me, 0.0, target, just_wider) is True


def test_player_behind_is_not_seen():
    cone = VisionCone(fov_degrees=60.0, view_distance=200.0)
    assert not in_vision_cone(Position(100.0, 100.0), 0.0, Position(50.0, 100.0), cone)
    # Facing almost straight up, target slightly clockwise past -π
    assert in_vision_cone(Position(0.0, 0.0), -math.pi + 0.1,
                          Position(-100.0, -5.0), cone)


def test_guard_on_top_of_player_sees_along_facing():
    # Zero offset → atan2(0, 0) == 0, so only a guard facing ~0 sees it
    cone = VisionCone(fov_degrees=60.0, view_distance=200.0)
    assert in_vision_cone(Position(10.0, 10.0), 0.0, Position(10.0, 10.0), cone)
    assert not in_vision_cone(Position(10.0, 10.0), math.pi, Position(10.0, 10.0), cone)


# ════════════════════════════════════════════════════════════════════════
#  TEST 5 — Game step: detection aggregation and scoring
# ════════════════════════════════════════════════════════════════════════

def test_score_accrues_only_while_unseen():
    game, gid = _guard_game(500.0, 500.0)

    game.update(0.5)
    assert game.score == 0.5 and game.detected is False
    assert game.player_color() == COLOR_PLAYER

    _move_player(game, 150.0, 100.0)
    game.update(0.25)
    assert game.detected is True
    assert game.score == 0.5
    assert game.player_color() == COLOR_SPOTTED

    # Transition frame: unseen again, but no score this frame
    _move_player(game, 500.0, 500.0)
    game.update(0.25)
    assert game.detected is False
    assert game.score == 0.5
    assert game.player_color() == COLOR_PLAYER

    game.update(0.25)
    assert game.score == 0.75


def test_score_never_decreases():
    game, gid = _guard_game(500.0, 500.0)
    rng = random.Random(11)
    last = 0.0
    for _ in range(200):
        if rng.random() < 0.4:
            _move_player(game, 150.0, 100.0)
        else:
            _move_player(game, 500.0, 500.0)
        before = game.detected
        game.update(0.1)
        expected = last + 0.1 if (not before and not game.detected) else last
        assert math.isclose(game.score, expected)
        assert game.score >= last
        last = game.score


def test_every_guard_refreshed_each_frame():
    w, vp = _arena()
    spawn_player(w, 150.0, 100.0)
    seer = spawn_enemy(w, 100.0, 100.0, [])
    blind = spawn_enemy(w, 600.0, 500.0, [])
    w.get(blind, Detection).detected = True    # stale from an old frame
    game = Game(w, populate=False)
    game.adopt()
    game.update(0.1)
    assert w.get(seer, Detection).detected is True
    assert w.get(blind, Detection).detected is False
    assert game.detected is True


def test_guard_flags_cleared_without_player():
    w, vp = _arena()
    gid = spawn_enemy(w, 100.0, 100.0, [(300.0, 100.0)])
    w.get(gid, Detection).detected = True
    assert tick_systems(w, 0.1, vp) == []
    assert w.get(gid, Detection).detected is False
    assert w.get(gid, Position).x > 100.0    # still patrols

def test_two_guards_both_flagged():
    w, vp = _arena()
    spawn_player(w, 150.0, 100.0)
    a = spawn_enemy(w, 100.0, 100.0, [])
    b = spawn_enemy(w, 200.0, 100.0, [], facing=math.pi)
    game = Game(w, populate=False)
    game.adopt()
    game.update(0.1)
    assert w.get(a, Detection).detected and w.get(b, Detection).detected


def test_guard_patrols_before_looking():
    # The guard turns toward the player during its patrol step, then
    # looks: same frame detection.
    w, vp = _arena()
    spawn_player(w, 100.0, 250.0)
    gid = spawn_enemy(w, 100.0, 100.0, [(100.0, 400.0)])
    game = Game(w, populate=False)
    game.adopt()
    game.update(0.01)
    assert math.isclose(w.get(gid, Facing).angle, math.pi / 2)
    assert game.detected is True


def test_spotted_and_lost_events():
    game, gid = _guard_game(500.0, 500.0)
    seen = []
    bus = game.world.res(EventBus)
    bus.subscribe("PlayerSpotted", lambda ev: seen.append(("spotted", ev.enemy_eids)))
    bus.subscribe("PlayerLost", lambda ev: seen.append(("lost", ev.score)))

    _move_player(game, 150.0, 100.0)
    game.update(0.1)
    game.update(0.1)         # still seen: no second event
    _move_player(game, 500.0, 500.0)
    game.update(0.1)
    bus.drain()
    assert seen == [("spotted", [gid]), ("lost", 0.0)], seen


def test_pause_freezes_simulation():
    game, gid = _guard_game(400.0, 300.0)
    game.world.get(game.player_eid, Velocity).x = 200.0
    game.update(0.5)
    pos = game.world.get(game.player_eid, Position)
    x_before, score_before = pos.x, game.score
    clock_before = game.world.res(GameClock).time

    assert game.toggle_pause() is True
    game.update(1.0)
    assert pos.x == x_before and game.score == score_before
    assert game.world.res(GameClock).time == clock_before

    assert game.toggle_pause() is False
    game.update(0.5)
    assert pos.x == x_before + 100.0
    assert game.score == score_before + 0.5


def test_zero_dt_frame():
    game, gid = _guard_game(500.0, 500.0)
    game.update(0.0)
    assert game.score == 0.0 and game.detected is False


def test_populate_and_reset():
    game = Game(World(), viewport=Viewport(800, 600), rng=random.Random(7))
    w = game.world
    assert len(game.enemy_eids) == 5
    pos = w.get(game.player_eid, Position)
    assert (pos.x, pos.y) == (400.0, 300.0)
    for eid in game.enemy_eids:
        p = w.get(eid, Position)
        patrol = w.get(eid, Patrol)
        assert 50.0 <= p.x <= 750.0 and 50.0 <= p.y <= 550.0
        assert len(patrol.points) == 2
        assert patrol.points[0] == (p.x, p.y)
        assert 0.0 <= patrol.points[1][0] <= 800.0
        assert 0.0 <= patrol.points[1][1] <= 600.0

    game.score = 12.0
    game.detected = True
    game.paused = True
    game.reset()
    assert game.score == 0.0 and not game.detected and not game.paused
    assert w.count(Enemy) == 5
    assert w.count(Sprite) == 6


def test_same_seed_same_layout():
    a = Game(World(), viewport=Viewport(800, 600), rng=random.Random(42))
    b = Game(World(), viewport=Viewport(800, 600), rng=random.Random(42))
    pa = [a.world.get(e, Patrol).points for e in a.enemy_eids]
    pb = [b.world.get(e, Patrol).points for e in b.enemy_eids]
    assert pa == pb


# ════════════════════════════════════════════════════════════════════════
#  Runner
# ════════════════════════════════════════════════════════════════════════

def _run_all() -> int:
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            try:
                fn()
                ok(name)
            except Exception:
                fail(name, traceback.format_exc())
    print(f"\n{'═' * 50}")
    print(f"  Results: {passed} passed, {failed} failed")
    print(f"{'═' * 50}")
    return failed


if __name__ == "__main__":
    sys.exit(1 if _run_all() else 0)

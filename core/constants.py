"""core/constants.py — Shared constants used across the codebase.

Unit System
-----------
The arena is the window itself, so all gameplay distances are
**pixels** and there is no tile/world conversion:

    Distance / position     px
    Speed                   px/s
    Time                    s     (frame timestamps arrive in ms)
    Angles                  rad   (tuning file uses degrees)

Tunable gameplay numbers live in ``data/tuning.toml``; the values
here are the fallbacks and the fixed palette.
"""

# ── Defaults (overridden by data/tuning.toml) ───────────────────────
PLAYER_SPEED = 200.0
PLAYER_RADIUS = 15.0

ENEMY_SPEED = 100.0
ENEMY_RADIUS = 15.0
ENEMY_COUNT = 5
SPAWN_MARGIN = 50.0
ARRIVAL_THRESHOLD = 5.0
VISION_FOV_DEGREES = 60.0
VISION_RANGE = 200.0

TOUCH_DEADZONE = 10.0

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 640
FPS = 60

# ── Palette ─────────────────────────────────────────────────────────
COLOR_BACKGROUND = (0, 0, 0)
COLOR_PLAYER     = (0, 128, 0)         # green
COLOR_SPOTTED    = (255, 165, 0)       # orange
COLOR_ENEMY      = (255, 0, 0)         # red
COLOR_CONE       = (255, 255, 0, 51)   # translucent yellow (α 0.2)
COLOR_CONE_ALERT = (255, 0, 0, 76)     # translucent red (α 0.3)
COLOR_TEXT       = (255, 255, 255)
COLOR_BANNER     = (255, 0, 0)

# ── HUD layout ──────────────────────────────────────────────────────
SCORE_FONT_SIZE = 20
BANNER_FONT_SIZE = 24
HUD_MARGIN = 10
BANNER_OFFSET_X = 120

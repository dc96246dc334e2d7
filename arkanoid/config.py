"""
config.py — Shared constants and the construction-time game configuration.
No imports from internal modules.
"""

from dataclasses import dataclass

# ── Arena & Grid ──────────────────────────────────────────────────
ARENA_W, ARENA_H = 800, 600
GRID_COLS        = 20
GRID_ROWS        = 15

# ── Window ────────────────────────────────────────────────────────
PANEL_H          = 60
OFFSET_X         = 10
OFFSET_Y         = PANEL_H + 10
WIDTH            = ARENA_W + 2 * OFFSET_X
HEIGHT           = OFFSET_Y + ARENA_H + 10
FPS              = 60

# ── Balls ─────────────────────────────────────────────────────────
BALL_RADIUS      = 8
SPEED_MIN        = 3.0
SPEED_MAX        = 5.0
NUDGE_STEPS      = 2      # velocity-steps a ball is pushed out of a converted cell

# ── Match policy ──────────────────────────────────────────────────
ON_WIN_STOP      = "stop"
ON_WIN_RESTART   = "restart"
RESTART_DELAY    = 3.0    # seconds before an ended match auto-restarts
MAX_SPEED_KEY    = 5      # speed multipliers selectable from the keyboard

# ── Factions ──────────────────────────────────────────────────────
LIGHT    = "light"
DARK     = "dark"
FACTIONS = (LIGHT, DARK)

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   0,   0)
LIGHT_COL   = (255, 215, 0)
DARK_COL    = (147, 112, 219)
LIGHT_BALL  = (255, 255, 0)
DARK_BALL   = (221, 160, 221)
UI_COL      = (120, 120, 170)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (26,  26,  62)

CELL_COLORS = {LIGHT: LIGHT_COL, DARK: DARK_COL}
BALL_COLORS = {LIGHT: LIGHT_BALL, DARK: DARK_BALL}

# ── Match States ──────────────────────────────────────────────────
STATE_IDLE    = "idle"
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_ENDED   = "ended"


class ConfigError(ValueError):
    """Raised for an invalid game configuration."""


def check_speed_multiplier(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ConfigError(f"speed multiplier must be a positive integer, got {n!r}")
    return n


@dataclass
class GameConfig:
    """
    Everything a match is built from. Validated on construction.

    Defaults reproduce the reference layout: a 20×15 grid on an
    800×600 arena, radius-8 balls moving 3–5 units per tick.
    """
    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    width: float = ARENA_W
    height: float = ARENA_H
    ball_radius: float = BALL_RADIUS
    speed_min: float = SPEED_MIN
    speed_max: float = SPEED_MAX
    speed_multiplier: int = 1
    auto_start: bool = False
    on_win: str = ON_WIN_STOP
    restart_delay: float = RESTART_DELAY

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigError(f"grid must be at least 1×1, got {self.cols}×{self.rows}")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"arena must have positive size, got {self.width}×{self.height}")
        if self.ball_radius <= 0:
            raise ConfigError(f"ball radius must be positive, got {self.ball_radius}")
        if 2 * self.ball_radius >= min(self.width, self.height):
            raise ConfigError("ball does not fit inside the arena")
        if self.speed_min <= 0 or self.speed_min > self.speed_max:
            raise ConfigError(
                f"invalid speed band [{self.speed_min}, {self.speed_max}]"
            )
        check_speed_multiplier(self.speed_multiplier)
        if self.on_win not in (ON_WIN_STOP, ON_WIN_RESTART):
            raise ConfigError(f"unknown on_win policy {self.on_win!r}")
        if self.restart_delay < 0:
            raise ConfigError(f"restart delay cannot be negative, got {self.restart_delay}")

    @property
    def cell_width(self) -> float:
        return self.width / self.cols

    @property
    def cell_height(self) -> float:
        return self.height / self.rows

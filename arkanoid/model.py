"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.
Exposes a clean API for the Controller to read/write.

Classes:
    Grid        — faction-per-cell ownership, counts, single-cell conversion
    Ball        — position, velocity, radius, faction
    GameModel   — top-level model; owns grid, balls, scores, match state

The simulation is single-threaded and GameModel.step() is not reentrant:
only the frame loop and explicit commands may touch model state.
"""

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Optional

from .config import (
    LIGHT, DARK, FACTIONS, NUDGE_STEPS,
    ON_WIN_RESTART,
    STATE_IDLE, STATE_RUNNING, STATE_PAUSED, STATE_ENDED,
    ConfigError, GameConfig, check_speed_multiplier,
)

logger = logging.getLogger(__name__)


# ──────────────────────────── Grid ───────────────────────────────
class Grid:
    """Rows × cols cells, each owned by exactly one faction."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ConfigError(f"grid must be at least 1×1, got {cols}×{rows}")
        self.rows = rows
        self.cols = cols
        self._cells: list[list[str]] = []
        self.initialize()

    def initialize(self) -> None:
        """Left half light, right half dark."""
        self._cells = [
            [LIGHT if col < self.cols / 2 else DARK for col in range(self.cols)]
            for _ in range(self.rows)
        ]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}×{self.cols} grid")

    def faction_at(self, row: int, col: int) -> str:
        self._check(row, col)
        return self._cells[row][col]

    def convert(self, row: int, col: int, faction: str) -> bool:
        """
        Give one cell to `faction`.
        Returns True if the cell changed owner.
        """
        self._check(row, col)
        if faction not in FACTIONS:
            raise ValueError(f"unknown faction {faction!r}")
        changed = self._cells[row][col] != faction
        self._cells[row][col] = faction
        return changed

    def count_by_faction(self) -> dict[str, int]:
        counts = {f: 0 for f in FACTIONS}
        for row in self._cells:
            for cell in row:
                counts[cell] += 1
        return counts

    def rows_snapshot(self) -> tuple[tuple[str, ...], ...]:
        return tuple(tuple(row) for row in self._cells)


# ──────────────────────────── Ball ───────────────────────────────
class Ball:
    """
    Pure game data for one ball.
    No rendering. Mutated only by GameModel.
    """

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 radius: float, faction: str):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.radius = radius
        self.faction = faction

    def move(self) -> None:
        self.x += self.vx
        self.y += self.vy

    def bounce_walls(self, width: float, height: float) -> None:
        """Reflect off arena edges; each axis is checked on its own."""
        r = self.radius
        if self.x - r <= 0 or self.x + r >= width:
            self.vx = -self.vx
            self.x = max(r, min(width - r, self.x))
        if self.y - r <= 0 or self.y + r >= height:
            self.vy = -self.vy
            self.y = max(r, min(height - r, self.y))

    def __repr__(self):
        return (f"Ball({self.faction}, pos=({self.x:.1f}, {self.y:.1f}), "
                f"vel=({self.vx:.2f}, {self.vy:.2f}))")


def ball_rect_collision(ball, rect_x: float, rect_y: float,
                        rect_w: float, rect_h: float) -> bool:
    """Closest point on the rectangle to the ball centre, compared to r²."""
    closest_x = max(rect_x, min(ball.x, rect_x + rect_w))
    closest_y = max(rect_y, min(ball.y, rect_y + rect_h))
    dx = ball.x - closest_x
    dy = ball.y - closest_y
    return dx * dx + dy * dy < ball.radius * ball.radius


# ─────────────────────────── Records ─────────────────────────────
@dataclass(frozen=True)
class Conversion:
    row: int
    col: int
    faction: str


@dataclass
class StepResult:
    conversions: list[Conversion] = field(default_factory=list)
    winner: Optional[str] = None


@dataclass(frozen=True)
class BallView:
    x: float
    y: float
    radius: float
    faction: str


@dataclass(frozen=True)
class Snapshot:
    """Read-only picture of the model for the view."""
    grid: tuple[tuple[str, ...], ...]
    balls: tuple[BallView, ...]
    scores: dict
    state: str
    winner: Optional[str]
    speed_multiplier: int
    restart_in: Optional[float]


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls update() once per frame; update() runs
    speed_multiplier simulation steps.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.speed_multiplier: int = self.config.speed_multiplier
        self.state: str = STATE_IDLE
        self.grid: Grid = None
        self.balls: list[Ball] = []
        self.scores: dict[str, int] = {}
        self.winner: Optional[str] = None
        self.tick: int = 0
        self._restart_timer: float = 0.0
        self._reset_entities()
        if self.config.auto_start:
            self.state = STATE_RUNNING

    # ── Public API ───────────────────────────────────────────────
    def start(self) -> None:
        if self.state == STATE_ENDED:
            self._reset_entities()
        elif self.state != STATE_IDLE:
            return
        self.state = STATE_RUNNING
        logger.info("Match started")

    def pause(self) -> None:
        if self.state == STATE_RUNNING:
            self.state = STATE_PAUSED
            logger.info("Match paused at tick %d", self.tick)

    def resume(self) -> None:
        if self.state == STATE_PAUSED:
            self.state = STATE_RUNNING
            logger.info("Match resumed")

    def toggle_pause(self) -> None:
        if self.state == STATE_RUNNING:
            self.pause()
        elif self.state == STATE_PAUSED:
            self.resume()

    def reset(self) -> None:
        self._reset_entities()
        self.state = STATE_RUNNING if self.config.auto_start else STATE_IDLE
        logger.info("Match reset (state=%s)", self.state)

    def set_speed_multiplier(self, n: int) -> None:
        self.speed_multiplier = check_speed_multiplier(n)
        logger.info("Speed multiplier set to x%d", n)

    def update(self, dt: float) -> list[StepResult]:
        """Advance one rendered frame of dt seconds."""
        results = []
        if self.state == STATE_RUNNING:
            for _ in range(self.speed_multiplier):
                results.append(self.step())
                if self.state != STATE_RUNNING:
                    break
        elif self.state == STATE_ENDED and self.config.on_win == ON_WIN_RESTART:
            self._restart_timer += dt
            if self._restart_timer >= self.config.restart_delay:
                self._reset_entities()
                self.state = STATE_RUNNING
                logger.info("Match restarted automatically")
        return results

    def step(self) -> StepResult:
        """
        One simulation tick: move every ball, resolve walls and cells,
        then check for a winner. Does nothing unless running.
        """
        result = StepResult()
        if self.state != STATE_RUNNING:
            return result

        self.tick += 1
        for ball in self.balls:
            ball.move()
            ball.bounce_walls(self.config.width, self.config.height)
            conversion = self._check_cell_collisions(ball)
            if conversion is not None:
                result.conversions.append(conversion)

        result.winner = self._check_win()
        return result

    def cell_rect(self, row: int, col: int) -> tuple[float, float, float, float]:
        cw, ch = self.config.cell_width, self.config.cell_height
        return col * cw, row * ch, cw, ch

    def snapshot(self) -> Snapshot:
        restart_in = None
        if self.state == STATE_ENDED and self.config.on_win == ON_WIN_RESTART:
            restart_in = max(0.0, self.config.restart_delay - self._restart_timer)
        return Snapshot(
            grid=self.grid.rows_snapshot(),
            balls=tuple(BallView(b.x, b.y, b.radius, b.faction) for b in self.balls),
            scores=dict(self.scores),
            state=self.state,
            winner=self.winner,
            speed_multiplier=self.speed_multiplier,
            restart_in=restart_in,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        cfg = self.config
        self.grid = Grid(cfg.rows, cfg.cols)
        self.balls = [
            Ball(cfg.width * 0.25, cfg.height * 0.5,
                 self._random_speed(), self._random_speed(),
                 cfg.ball_radius, LIGHT),
            Ball(cfg.width * 0.75, cfg.height * 0.5,
                 -self._random_speed(), -self._random_speed(),
                 cfg.ball_radius, DARK),
        ]
        self.scores = {f: 0 for f in FACTIONS}
        self.winner = None
        self.tick = 0
        self._restart_timer = 0.0

    def _random_speed(self) -> float:
        return self.rng.uniform(self.config.speed_min, self.config.speed_max)

    def _check_cell_collisions(self, ball: Ball) -> Optional[Conversion]:
        cw, ch = self.config.cell_width, self.config.cell_height
        col = math.floor(ball.x / cw)
        row = math.floor(ball.y / ch)

        for r in range(max(0, row - 1), min(self.grid.rows - 1, row + 1) + 1):
            for c in range(max(0, col - 1), min(self.grid.cols - 1, col + 1) + 1):
                if self.grid.faction_at(r, c) == ball.faction:
                    continue
                cell_x, cell_y, _, _ = self.cell_rect(r, c)
                if not ball_rect_collision(ball, cell_x, cell_y, cw, ch):
                    continue

                self.grid.convert(r, c, ball.faction)
                self.scores[ball.faction] += 1

                dx = ball.x - (cell_x + cw / 2)
                dy = ball.y - (cell_y + ch / 2)
                if abs(dx) > abs(dy):
                    ball.vx = -ball.vx
                else:
                    ball.vy = -ball.vy

                # Push clear of the converted cell
                ball.x += ball.vx * NUDGE_STEPS
                ball.y += ball.vy * NUDGE_STEPS

                logger.debug("%s ball converted cell (%d, %d)", ball.faction, r, c)
                return Conversion(r, c, ball.faction)
        return None

    def _check_win(self) -> Optional[str]:
        counts = self.grid.count_by_faction()
        if counts[LIGHT] and counts[DARK]:
            return None
        self.winner = DARK if counts[LIGHT] == 0 else LIGHT
        self.state = STATE_ENDED
        self._restart_timer = 0.0
        logger.info("%s wins after %d ticks (scores %s)",
                    self.winner.capitalize(), self.tick, self.scores)
        return self.winner

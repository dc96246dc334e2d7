"""
view.py — View layer.

Draws one frame from a model Snapshot:
  - Faction-coloured cell grid with a 1px gutter
  - Balls with a soft additive glow
  - HUD panel with both scores, live cell counts and the speed multiplier
  - Idle / paused / ended overlays (with auto-restart countdown)

Public API:
    GameView(screen)       — bind to a pygame surface
    view.render(snapshot)  — draw the current frame
"""

import math
import pygame

from .config import (
    WIDTH, PANEL_H, ARENA_W, ARENA_H,
    OFFSET_X, OFFSET_Y, MAX_SPEED_KEY,
    BG, UI_COL, PANEL_BG, BORDER_COL,
    LIGHT, DARK, CELL_COLORS, BALL_COLORS,
    STATE_IDLE, STATE_PAUSED, STATE_ENDED,
)
from .model import Snapshot, BallView


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a model snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1

        self.screen.fill(BG)
        self._draw_grid(snap.grid)
        for ball in snap.balls:
            self._draw_ball(ball)

        self._draw_border()
        self._draw_panel(snap)

        if snap.state == STATE_IDLE:
            self._draw_idle_overlay()
        elif snap.state == STATE_PAUSED:
            self._draw_paused_overlay()
        elif snap.state == STATE_ENDED:
            self._draw_ended_overlay(snap)

        pygame.display.flip()

    # ── Arena ────────────────────────────────────────────────────
    def _draw_grid(self, grid: tuple) -> None:
        rows, cols = len(grid), len(grid[0])
        cw, ch = ARENA_W / cols, ARENA_H / rows
        for r, row in enumerate(grid):
            for c, faction in enumerate(row):
                rect = pygame.Rect(
                    OFFSET_X + int(c * cw), OFFSET_Y + int(r * ch),
                    max(1, int(cw) - 1), max(1, int(ch) - 1),
                )
                pygame.draw.rect(self.screen, CELL_COLORS[faction], rect)

    def _draw_ball(self, ball: BallView) -> None:
        color = BALL_COLORS[ball.faction]
        cx = OFFSET_X + int(ball.x)
        cy = OFFSET_Y + int(ball.y)
        r = max(1, int(ball.radius))

        glow_size = r + 14
        glow = pygame.Surface((glow_size * 2, glow_size * 2), pygame.SRCALPHA)
        for gr in range(glow_size, r, -2):
            a = int(70 * (1 - (gr - r) / (glow_size - r)))
            pygame.draw.circle(glow, _with_alpha(color, a), (glow_size, glow_size), gr)
        self.screen.blit(glow, (cx - glow_size, cy - glow_size),
                         special_flags=pygame.BLEND_RGBA_ADD)

        pygame.draw.circle(self.screen, color, (cx, cy), r)
        pygame.draw.circle(self.screen, _brighten(color, 1.4),
                           (cx - max(1, r // 3), cy - max(1, r // 3)), max(1, r // 3))

    def _draw_border(self) -> None:
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, ARENA_W + 2, ARENA_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        light_col, dark_col = CELL_COLORS[LIGHT], CELL_COLORS[DARK]
        cells = {LIGHT: 0, DARK: 0}
        for row in snap.grid:
            for faction in row:
                cells[faction] += 1

        self.screen.blit(self.font_small.render("LIGHT", True, light_col), (16, 6))
        self.screen.blit(
            self.font_big.render(str(snap.scores[LIGHT]), True, light_col), (16, 24),
        )
        dark_label = self.font_small.render("DARK", True, dark_col)
        self.screen.blit(dark_label, dark_label.get_rect(topright=(WIDTH - 16, 6)))
        dark_score = self.font_big.render(str(snap.scores[DARK]), True, dark_col)
        self.screen.blit(dark_score, dark_score.get_rect(topright=(WIDTH - 16, 24)))

        self._draw_territory_bar(WIDTH // 2, 12, cells[LIGHT], cells[DARK])
        speed = self.font_small.render(f"SPEED x{snap.speed_multiplier}", True, UI_COL)
        self.screen.blit(speed, speed.get_rect(center=(WIDTH // 2, 36)))

        if snap.state == STATE_PAUSED:
            badge = self.font_tiny.render("[ PAUSED ]", True, light_col)
            self.screen.blit(badge, badge.get_rect(center=(WIDTH // 2, PANEL_H - 10)))

    def _draw_territory_bar(self, cx: int, y: int, light: int, dark: int) -> None:
        """Horizontal bar split by the number of cells each faction owns."""
        bar_w, bar_h = 240, 10
        bx = cx - bar_w // 2
        total = max(1, light + dark)
        lw = int(bar_w * light / total)
        pygame.draw.rect(self.screen, (18, 18, 30), (bx, y, bar_w, bar_h), border_radius=4)
        if lw > 0:
            pygame.draw.rect(self.screen, CELL_COLORS[LIGHT], (bx, y, lw, bar_h), border_radius=4)
        if bar_w - lw > 0:
            pygame.draw.rect(self.screen, CELL_COLORS[DARK],
                             (bx + lw, y, bar_w - lw, bar_h), border_radius=4)

    # ── Overlay infrastructure ────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((ARENA_W, ARENA_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 180))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_animated_title(self, title: str, color: tuple, cy: int) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = self.font_title.render(title, True, _brighten(color, pulse))
        gw, gh = surf.get_width() + 50, surf.get_height() + 16
        glow = pygame.Surface((gw, gh), pygame.SRCALPHA)
        glow.fill(_with_alpha(color, int(35 * pulse)))
        self.screen.blit(glow, (WIDTH // 2 - gw // 2, cy - 8))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple, cy: int,
                        font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    # ── State overlays ────────────────────────────────────────────
    def _draw_idle_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + ARENA_H // 2 - 60
        cy = self._draw_animated_title("DOUBLE ARKANOID", CELL_COLORS[LIGHT], cy)
        cy = self._draw_text_line("LIGHT  vs  DARK", UI_COL, cy, self.font_med)
        cy += 10
        cy = self._draw_text_line("ENTER / SPACE — START", CELL_COLORS[LIGHT], cy, self.font_small)
        self._draw_text_line(
            f"P PAUSE   R RESET   1-{MAX_SPEED_KEY} SPEED   Q QUIT",
            UI_COL, cy, self.font_tiny,
        )

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + ARENA_H // 2 - 36
        cy = self._draw_animated_title("PAUSED", CELL_COLORS[LIGHT], cy)
        self._draw_text_line("PRESS  P  TO RESUME", UI_COL, cy, self.font_med)

    def _draw_ended_overlay(self, snap: Snapshot) -> None:
        self._draw_overlay_base()
        color = CELL_COLORS[snap.winner]
        cy = OFFSET_Y + ARENA_H // 2 - 60
        cy = self._draw_animated_title(f"{snap.winner.upper()} WINS!", color, cy)
        cy = self._draw_text_line("ALL BRICKS CONVERTED", _lerp_color(UI_COL, color, 0.5),
                                  cy, self.font_med)
        cy = self._draw_text_line(
            f"LIGHT {snap.scores[LIGHT]}   —   {snap.scores[DARK]} DARK",
            UI_COL, cy, self.font_small,
        )
        if snap.restart_in is not None:
            self._draw_text_line(f"NEXT MATCH IN {math.ceil(snap.restart_in)}",
                                 UI_COL, cy, self.font_small)
        else:
            self._draw_text_line("ENTER — PLAY AGAIN", color, cy, self.font_small)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 42, True),
            ("font_big",   "courier", 26, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (OSError, pygame.error):
                setattr(self, attr, pygame.font.SysFont(None, size))

"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate raw keyboard events into model commands.
  - Drive the game loop: tick the model, hand its snapshot to the view.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging
import sys
from typing import Optional

import pygame

from .config import (
    WIDTH, HEIGHT, FPS, MAX_SPEED_KEY,
    STATE_IDLE, STATE_ENDED,
    GameConfig,
)
from .model import GameModel
from .view import GameView

logger = logging.getLogger(__name__)

_SPEED_KEYS = {getattr(pygame, f"K_{n}"): n for n in range(1, MAX_SPEED_KEY + 1)}


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Double Arkanoid — Light vs Dark")
        self.clock  = pygame.time.Clock()
        self.model  = GameModel(config)
        self.view   = GameView(self.screen)
        logger.info("Window opened (%dx%d, %d FPS)", WIDTH, HEIGHT, FPS)

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the window is closed."""
        while True:
            dt = self.clock.tick(FPS) / 1000.0
            self._handle_events()
            self.model.update(dt)
            self.view.render(self.model.snapshot())

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)

    def _handle_keydown(self, key: int) -> None:
        if key == pygame.K_q:
            self._quit()
        elif key in (pygame.K_RETURN, pygame.K_SPACE):
            if self.model.state in (STATE_IDLE, STATE_ENDED):
                self.model.start()
        elif key == pygame.K_p:
            self.model.toggle_pause()
        elif key == pygame.K_r:
            self.model.reset()
        elif key in _SPEED_KEYS:
            self.model.set_speed_multiplier(_SPEED_KEYS[key])

    # ── Utilities ─────────────────────────────────────────────────
    @staticmethod
    def _quit() -> None:
        logger.info("Quitting")
        pygame.quit()
        sys.exit()

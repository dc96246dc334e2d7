"""
Pytest configuration and shared fixtures for the game model tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'arkanoid' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from arkanoid.config import DARK, LIGHT, GameConfig  # noqa: E402
from arkanoid.model import GameModel  # noqa: E402


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def model(config):
    """A running match with a seeded RNG."""
    m = GameModel(config, rng=random.Random(1234))
    m.start()
    return m


def place(model, faction, x, y, vx=0.0, vy=0.0):
    """Move the ball of `faction` to an exact position and velocity."""
    ball = next(b for b in model.balls if b.faction == faction)
    ball.x, ball.y, ball.vx, ball.vy = x, y, vx, vy
    return ball


@pytest.fixture
def parked(model):
    """Running match with the dark ball resting deep inside dark territory."""
    place(model, DARK, 700, 300)
    place(model, LIGHT, 200, 300)
    return model

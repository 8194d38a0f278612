"""Pytest configuration and fixtures for Asteroid Dodge tests."""

import os
import random

# headless SDL before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

FIELD_WIDTH, FIELD_HEIGHT = 400, 800


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def game_logger(tmp_path):
    from asteroid_dodge.logger import GameLogger

    return GameLogger(str(tmp_path / "log.md"))


@pytest.fixture
def game(seeded_rng, game_logger):
    """A fresh 400x800 game that has not run a frame yet."""
    from asteroid_dodge.game import DodgeGame

    return DodgeGame(FIELD_WIDTH, FIELD_HEIGHT, rng=seeded_rng, logger=game_logger)

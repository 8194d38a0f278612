"""Asteroid Dodge: steer the ship, dodge falling asteroids, survive."""

from .game import DodgeGame
from .models import Bounds, Category, GameState

__all__ = ["DodgeGame", "Bounds", "Category", "GameState"]

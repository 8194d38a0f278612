"""Lightweight data models and bounds math used across the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pygame.math import Vector2


class Category(enum.IntFlag):
    """Physics category bits. A body's contact mask is a union of these."""

    NONE = 0
    PLAYER = 1 << 0
    OBSTACLE = 1 << 1


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


def clamp(value: float, low: float, high: float) -> float:
    """
    Clamp ``value`` into ``[low, high]``.

    An inverted range (``high < low``) collapses to its midpoint, so a field
    smaller than the entity being clamped still yields a finite coordinate.
    """
    if high < low:
        return (low + high) * 0.5
    return min(max(value, low), high)


@dataclass(frozen=True)
class Bounds:
    """
    The playable field rectangle in field coordinates (y grows upward).

    Attributes
    ----------
    min_x, min_y : float
        Bottom-left corner.
    max_x, max_y : float
        Top-right corner.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_size(cls, width: float, height: float) -> Bounds:
        return cls(0.0, 0.0, float(max(0, width)), float(max(0, height)))

    @property
    def width(self) -> float:
        return max(0.0, self.max_x - self.min_x)

    @property
    def height(self) -> float:
        return max(0.0, self.max_y - self.min_y)

    @property
    def mid_x(self) -> float:
        return (self.min_x + self.max_x) * 0.5

    @property
    def mid_y(self) -> float:
        return (self.min_y + self.max_y) * 0.5

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def center(self) -> Vector2:
        return Vector2(self.mid_x, self.mid_y)

    def clamp_point(self, point, inset: float = 0.0) -> Vector2:
        """
        Return the nearest point to ``point`` that lies at least ``inset`` away
        from every edge.

        Parameters
        ----------
        point : Vector2 | tuple[float, float]
            Location to clamp.
        inset : float
            Distance kept from each edge (usually an entity radius).

        Returns
        -------
        Vector2
            The clamped location; in-bounds points are returned unchanged.
        """
        x = clamp(point[0], self.min_x + inset, self.max_x - inset)
        y = clamp(point[1], self.min_y + inset, self.max_y - inset)
        return Vector2(x, y)

    def random_x(self, rng, inset: float = 0.0) -> float:
        """Uniform x between the left and right edges, kept ``inset`` from both."""
        low = self.min_x + inset
        high = self.max_x - inset
        if high < low:
            return (low + high) * 0.5
        return rng.uniform(low, high)

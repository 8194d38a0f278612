"""Hit policy: which contacts end a run."""

from __future__ import annotations

from .models import Category

# Each side tests only against the other; same-category peers never report.
PLAYER_CONTACT_MASK = Category.OBSTACLE
OBSTACLE_CONTACT_MASK = Category.PLAYER


def is_hit(category_a: int, category_b: int) -> bool:
    """
    True iff one participant is the player and the other an obstacle.

    Order-independent. Any other pairing, including categories this game does
    not define, is not a hit.
    """
    return (
        (category_a == Category.PLAYER and category_b == Category.OBSTACLE)
        or (category_a == Category.OBSTACLE and category_b == Category.PLAYER)
    )

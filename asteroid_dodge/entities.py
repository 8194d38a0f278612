"""Player and obstacle entities: a scene node id paired with a physics body."""

from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2

from .physics import PhysicsBody


@dataclass(eq=False)
class Player:
    node_id: int
    body: PhysicsBody
    radius: float

    @property
    def position(self) -> Vector2:
        return self.body.position


@dataclass(eq=False)
class Obstacle:
    """One falling asteroid. The body owns position and velocity."""
    node_id: int
    body: PhysicsBody
    radius: float

    @property
    def position(self) -> Vector2:
        return self.body.position

    @property
    def velocity(self) -> Vector2:
        return self.body.velocity

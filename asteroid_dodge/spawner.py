from __future__ import annotations

import random
from typing import Callable

from .collision import OBSTACLE_CONTACT_MASK
from .constants import (
    ASTEROID_COLOR, ASTEROID_RADIUS, ASTEROID_SPEED, SPAWN_ACTION_KEY, SPAWN_INTERVAL
)
from .entities import Obstacle
from .models import Category
from .physics import PhysicsWorld
from .scene_graph import NodeKind, SceneGraph
from .scheduler import ActionScheduler


class Spawner:
    """
    Responsible for dropping a new asteroid from the top edge at a fixed cadence.

    Notes
    - Spawning is a keyed repeating action, not polled against frame deltas:
      exactly one asteroid per interval, no catch-up after a stall.
    - ``start`` always cancels the running action before arming a new one, so
      at most one spawn loop exists.
    """

    def __init__(
        self,
        scene: SceneGraph,
        physics: PhysicsWorld,
        obstacles: dict[int, Obstacle],
        is_playing: Callable[[], bool],
        rng: random.Random | None = None,
        scheduler: ActionScheduler | None = None,
        interval: float = SPAWN_INTERVAL,
        speed: float = ASTEROID_SPEED,
        radius: float = ASTEROID_RADIUS,
    ) -> None:
        self.scene = scene
        self.physics = physics
        self.obstacles = obstacles
        self.is_playing = is_playing
        self.rng = rng or random.Random()
        self.scheduler = scheduler or ActionScheduler()
        self.interval = interval
        self.speed = speed
        self.radius = radius

    def start(self) -> None:
        """(Re-)arm the spawn loop; the first asteroid drops on the next tick."""
        self.stop()
        self.scheduler.run_repeating(SPAWN_ACTION_KEY, self.interval, self.spawn)

    def stop(self) -> None:
        self.scheduler.remove_action(SPAWN_ACTION_KEY)

    def tick(self, now: float) -> None:
        self.scheduler.tick(now)

    def spawn(self) -> Obstacle | None:
        """
        Create one asteroid just above the top edge, moving straight down.

        Returns
        -------
        Obstacle | None
            The new asteroid, or None when the game is not in play
        """
        if not self.is_playing():
            return None

        frame = self.scene.frame
        position = (frame.random_x(self.rng, self.radius), frame.max_y + self.radius)
        node_id = self.scene.create(
            NodeKind.CIRCLE, name="asteroid", position=position,
            radius=self.radius, color=ASTEROID_COLOR,
        )
        body = self.physics.add_body(
            Category.OBSTACLE, OBSTACLE_CONTACT_MASK, self.radius,
            position=position, velocity=(0, -self.speed), dynamic=True,
        )
        obstacle = Obstacle(node_id, body, self.radius)
        self.obstacles[node_id] = obstacle
        return obstacle

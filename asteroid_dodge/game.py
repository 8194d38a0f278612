"""Asteroid Dodge scene controller.

``DodgeGame`` owns all per-run state (player, live asteroids, score, game
state, frame timing) and drives it through one ``frame(now)`` call per rendered
frame. Drawing and windowing live elsewhere; this module only commands the
scene graph and the physics world.
"""

from __future__ import annotations

import random

from pygame.math import Vector2

from .collision import PLAYER_CONTACT_MASK, is_hit
from .constants import (
    HEIGHT, PLAYER_FALLBACK_COLOR, PLAYER_RADIUS, PLAYER_SIZE, PLAYER_SPAWN_OFFSET,
    PLAYER_SPRITE_PATH, WIDTH
)
from .entities import Obstacle, Player
from .logger import GameLogger
from .models import Category, GameState
from .physics import Contact, PhysicsWorld
from .scene_graph import NodeKind, SceneGraph
from .scoring import ScoreKeeper
from .spawner import Spawner
from .ui import GameOverScreen, HUD


class DodgeGame:
    """
    Game state machine: PLAYING until the player is hit, then GAME_OVER until
    the restart button is tapped.

    Frame cycle (``frame``):
    1. ``update``: frame delta, scoring, off-field cleanup.
    2. Spawner actions.
    3. Physics step with the same delta; contacts arrive in ``on_contact``.
    """

    def __init__(
        self,
        width: float = WIDTH,
        height: float = HEIGHT,
        rng: random.Random | None = None,
        logger: GameLogger | None = None,
    ) -> None:
        self.scene = SceneGraph(width, height)
        self.physics = PhysicsWorld(contact_listener=self.did_begin_contact)
        self.logger = logger

        self.state = GameState.PLAYING
        self.scores = ScoreKeeper()
        self.last_update_time: float | None = None   # None: next frame is delta-exempt
        self.obstacles: dict[int, Obstacle] = {}

        self.player = self.create_player()
        self.hud = HUD(self.scene)
        self.game_over_screen = GameOverScreen(self.scene)
        self.spawner = Spawner(
            self.scene, self.physics, self.obstacles,
            is_playing=lambda: self.state is GameState.PLAYING, rng=rng,
        )

        self.layout_ui()
        self.spawner.start()

    # --------------------------------- Setup ----------------------------------------

    def create_player(self) -> Player:
        position = self.player_spawn_point()
        node_id = self.scene.create(
            NodeKind.SPRITE, name="player", position=position, size=PLAYER_SIZE,
            radius=PLAYER_RADIUS, image_path=PLAYER_SPRITE_PATH, color=PLAYER_FALLBACK_COLOR,
        )
        body = self.physics.add_body(
            Category.PLAYER, PLAYER_CONTACT_MASK, PLAYER_RADIUS, position=position, dynamic=False,
        )
        return Player(node_id, body, PLAYER_RADIUS)

    def player_spawn_point(self) -> Vector2:
        """Bottom-centre of the field, just clear of the lower edge."""
        frame = self.scene.frame
        spawn = (frame.mid_x, frame.min_y + PLAYER_RADIUS + PLAYER_SPAWN_OFFSET)
        return frame.clamp_point(spawn, PLAYER_RADIUS)

    # --------------------------------- State ----------------------------------------

    @property
    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def score(self) -> int:
        return self.scores.score

    # --------------------------------- Loop -----------------------------------------

    def update(self, now: float) -> float:
        """
        Per-frame bookkeeping.

        Parameters
        ----------
        now : float
            Frame timestamp in seconds

        Returns
        -------
        float
            Seconds since the previous frame (0.0 on a delta-exempt frame)
        """
        delta = 0.0 if self.last_update_time is None else now - self.last_update_time
        self.last_update_time = now

        if self.is_game_over:
            return delta

        if delta > 0:
            self.scores.advance(delta)
            self.hud.set_text(self.scores.label)

        self.remove_fallen_obstacles()
        return delta

    def frame(self, now: float) -> None:
        """Run one full frame: update, spawn actions, physics and node sync."""
        delta = self.update(now)
        self.spawner.tick(now)
        self.physics.simulate(delta)
        for obstacle in self.obstacles.values():
            self.scene.set_position(obstacle.node_id, obstacle.position)

    def remove_fallen_obstacles(self) -> None:
        cutoff = self.scene.frame.min_y
        for obstacle in list(self.obstacles.values()):
            if obstacle.position.y < cutoff - obstacle.radius * 2:
                self.remove_obstacle(obstacle)

    def remove_obstacle(self, obstacle: Obstacle) -> None:
        self.scene.remove(obstacle.node_id)
        self.physics.remove_body(obstacle.body)
        self.obstacles.pop(obstacle.node_id, None)

    # --------------------------------- Contacts -------------------------------------

    def did_begin_contact(self, contact: Contact) -> bool:
        return self.on_contact(contact.body_a.category, contact.body_b.category)

    def on_contact(self, category_a: int, category_b: int) -> bool:
        """
        Apply the hit policy to one contact.

        Returns
        -------
        bool
            True if this contact ended the game
        """
        if self.is_game_over:
            return False
        if not is_hit(category_a, category_b):
            return False
        if self.logger:
            self.logger.log_hit((self.player.position.x, self.player.position.y))
        self.end_game()
        return True

    # --------------------------------- Transitions ----------------------------------

    def end_game(self) -> None:
        """PLAYING -> GAME_OVER: stop spawning, hide the player, freeze asteroids, show overlay."""
        if self.is_game_over:
            return
        self.state = GameState.GAME_OVER
        self.spawner.stop()

        self.scene.set_hidden(self.player.node_id, True)

        for obstacle in self.obstacles.values():
            self.physics.freeze(obstacle.body)

        self.game_over_screen.show(self.scores.label)
        self.layout_ui()

        if self.logger:
            self.logger.log_game_over(self.score)

    def restart_game(self) -> None:
        """GAME_OVER -> PLAYING: clear the field and start a fresh run."""
        if not self.is_game_over:
            return

        for node_id in self.scene.children_named("asteroid"):
            self.remove_obstacle(self.obstacles[node_id])

        self.game_over_screen.hide()

        self.scores.reset()
        self.last_update_time = None
        self.hud.set_text(self.scores.label)

        spawn = self.player_spawn_point()
        self.player.body.position = Vector2(spawn)
        self.scene.set_position(self.player.node_id, spawn)
        self.scene.set_hidden(self.player.node_id, False)

        self.state = GameState.PLAYING
        self.spawner.start()

        if self.logger:
            self.logger.log_restart()

    # --------------------------------- Input ----------------------------------------

    def move_player(self, location) -> Vector2:
        """
        Move the player to ``location``, clamped so its circle stays on the field.

        Returns
        -------
        Vector2
            The position actually applied
        """
        position = self.scene.frame.clamp_point(location, self.player.radius)
        self.player.body.position = Vector2(position)
        self.scene.set_position(self.player.node_id, position)
        return position

    def restart_hit(self, location) -> bool:
        return self.game_over_screen.restart_contains(location)

    # --------------------------------- Layout ---------------------------------------

    def layout_ui(self) -> None:
        """Position every UI node from the current field bounds."""
        frame = self.scene.frame
        self.hud.layout(frame)
        self.game_over_screen.layout(frame)

    def resize(self, width: float, height: float) -> None:
        """Handle a viewport change without touching the game state."""
        self.scene.resize(width, height)
        self.layout_ui()
        self.move_player(self.player.position)
        if self.logger:
            self.logger.log_resize(width, height)

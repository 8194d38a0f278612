"""Tests for the game state machine: scoring, game over, restart, layout."""

import math

import pytest
from pygame.math import Vector2

from asteroid_dodge.constants import SPAWN_ACTION_KEY
from asteroid_dodge.game import DodgeGame
from asteroid_dodge.input_mapper import InputMapper
from asteroid_dodge.models import Category, GameState


class RightEdgeRng:
    def uniform(self, low, high):
        return high


def run_frames(game, start, stop, step):
    """Drive ``frame`` from ``start`` to ``stop`` inclusive."""
    count = int(round((stop - start) / step))
    for i in range(count + 1):
        game.frame(start + i * step)


def node_positions(game, *node_ids):
    return [Vector2(game.scene.get(nid).position) for nid in node_ids]


class TestInitialState:
    def test_starts_playing_with_player_at_spawn_point(self, game):
        assert game.state is GameState.PLAYING
        assert game.score == 0
        assert game.player.position == Vector2(200, 64)
        assert not game.scene.get(game.player.node_id).hidden
        assert game.obstacles == {}
        assert game.spawner.scheduler.has_action(SPAWN_ACTION_KEY)

    def test_first_frame_is_delta_exempt_and_spawns(self, game):
        game.frame(1234.5)
        assert game.score == 0
        assert len(game.obstacles) == 1


class TestReferenceScenario:
    def test_survive_collide_and_restart(self, game):
        game.frame(0.0)
        (first,) = game.obstacles.values()
        assert 24 <= first.position.x <= 376
        assert first.position.y == 824

        run_frames(game, 0.5, 3.0, 0.5)
        assert game.score == 3
        assert game.scene.get(game.hud.score_label).text == "Score: 3"
        assert game.state is GameState.PLAYING

        # steer into the oldest asteroid; the next physics step reports the contact
        game.move_player(first.position)
        game.frame(3.2)
        assert game.state is GameState.GAME_OVER
        assert game.obstacles
        for obstacle in game.obstacles.values():
            assert obstacle.velocity == Vector2(0, 0)
            assert not obstacle.body.dynamic

        button = game.scene.world_position(game.game_over_screen.restart_button)
        InputMapper(game).pointer_down(button)
        assert game.state is GameState.PLAYING
        assert game.score == 0
        assert game.player.position == Vector2(200, 64)
        assert not game.scene.get(game.player.node_id).hidden
        assert game.obstacles == {}


class TestScoring:
    def test_score_is_floor_of_time_played(self, game_logger):
        # asteroids drop at the right edge while the player hugs the left one
        game = DodgeGame(400, 800, rng=RightEdgeRng(), logger=game_logger)
        game.move_player((0, 0))
        run_frames(game, 0.0, 5.25, 0.25)
        assert game.score == math.floor(5.25)
        assert 0.0 <= game.scores.accumulator < 1.0

    def test_backwards_clock_does_not_score(self, game):
        game.frame(10.0)
        game.frame(9.0)
        game.frame(9.0)
        assert game.score == 0

    def test_no_scoring_while_game_over(self, game):
        game.frame(0.0)
        game.end_game()
        game.frame(50.0)
        assert game.score == 0


class TestContacts:
    def test_unrelated_categories_are_ignored(self, game):
        assert not game.on_contact(Category.OBSTACLE, Category.OBSTACLE)
        assert not game.on_contact(Category.PLAYER, 64)
        assert game.state is GameState.PLAYING

    @pytest.mark.parametrize("a, b", [(Category.PLAYER, Category.OBSTACLE), (Category.OBSTACLE, Category.PLAYER)])
    def test_hit_in_either_order_ends_game(self, game, a, b):
        assert game.on_contact(a, b)
        assert game.state is GameState.GAME_OVER

    def test_many_contacts_in_one_tick_transition_once(self, game, monkeypatch):
        calls = []
        original = game.end_game

        def counting_end_game():
            calls.append(True)
            original()

        monkeypatch.setattr(game, "end_game", counting_end_game)

        game.frame(0.0)
        game.spawner.spawn()
        game.spawner.spawn()
        for obstacle in game.obstacles.values():
            obstacle.body.position = Vector2(game.player.position)
        game.frame(0.1)

        assert calls == [True]
        assert game.state is GameState.GAME_OVER
        assert not game.on_contact(Category.PLAYER, Category.OBSTACLE)


class TestGameOver:
    def test_end_game_effects(self, game):
        game.frame(0.0)
        game.frame(0.5)
        game.end_game()
        assert game.state is GameState.GAME_OVER
        assert not game.spawner.scheduler.has_action(SPAWN_ACTION_KEY)
        assert game.scene.get(game.player.node_id).hidden
        assert not game.scene.is_visible(game.player.node_id)
        assert game.game_over_screen.shown
        assert game.scene.get(game.game_over_screen.title).text == "Game Over"
        assert game.scene.get(game.game_over_screen.final_score).text == "Score: 0"

    def test_frozen_asteroids_stay_put(self, game):
        game.frame(0.0)
        game.end_game()
        positions = [Vector2(o.position) for o in game.obstacles.values()]
        game.frame(0.5)
        game.frame(1.0)
        assert [o.position for o in game.obstacles.values()] == positions

    def test_no_spawning_while_game_over(self, game):
        game.end_game()
        run_frames(game, 0.0, 5.0, 0.5)
        assert game.obstacles == {}

    def test_end_game_twice_is_a_no_op(self, game):
        game.end_game()
        overlay = game.game_over_screen.overlay
        game.end_game()
        assert game.game_over_screen.overlay == overlay
        assert len(game.scene.children_named("overlay")) == 1


class TestRestart:
    def test_restart_restores_invariants(self, game):
        run_frames(game, 0.0, 2.5, 0.5)
        game.end_game()
        overlay = game.game_over_screen.overlay

        game.restart_game()
        assert game.state is GameState.PLAYING
        assert game.score == 0
        assert game.scores.accumulator == 0.0
        assert game.last_update_time is None
        assert game.obstacles == {}
        assert game.scene.children_named("asteroid") == []
        assert overlay not in game.scene
        assert not game.game_over_screen.shown
        assert game.player.position == Vector2(200, 64)
        assert game.scene.is_visible(game.player.node_id)
        assert game.scene.get(game.hud.score_label).text == "Score: 0"
        assert len(game.spawner.scheduler) == 1
        assert game.spawner.scheduler.has_action(SPAWN_ACTION_KEY)

    def test_first_frame_after_restart_ignores_time_spent_game_over(self, game):
        game.frame(0.0)
        game.end_game()
        game.frame(100.0)
        game.restart_game()
        game.frame(500.0)
        assert game.score == 0
        game.frame(501.0)
        assert game.score == 1

    def test_new_asteroid_within_one_interval(self, game):
        game.frame(0.0)
        game.end_game()
        game.restart_game()
        game.frame(7.0)
        assert len(game.obstacles) == 1
        game.frame(7.5)
        assert len(game.obstacles) == 1
        game.frame(8.0)
        assert len(game.obstacles) == 2

    def test_restart_while_playing_is_ignored(self, game):
        game.frame(0.0)
        game.frame(1.0)
        game.restart_game()
        assert game.score == 1
        assert len(game.obstacles) == 2


class TestObstacleLifecycle:
    def test_asteroids_fall_and_are_removed_below_the_field(self, game):
        game.frame(0.0)
        (rock,) = game.obstacles.values()
        rock.body.position = Vector2(10, -47)
        game.frame(0.01)
        assert rock.node_id in game.obstacles
        rock.body.position = Vector2(10, -49)
        game.frame(0.02)
        assert rock.node_id not in game.obstacles
        assert rock.node_id not in game.scene
        assert rock.body not in game.physics

    def test_scene_nodes_follow_bodies(self, game):
        game.frame(0.0)
        (rock,) = game.obstacles.values()
        game.frame(0.5)
        assert game.scene.get(rock.node_id).position == Vector2(rock.position.x, 714)


class TestLayout:
    def test_score_label_pinned_top_left(self, game):
        assert game.scene.get(game.hud.score_label).position == Vector2(16, 784)

    def test_overlay_positions_follow_bounds(self, game):
        game.end_game()
        screen = game.game_over_screen
        assert game.scene.get(screen.backdrop).size == (400.0, 800.0)
        assert node_positions(game, screen.backdrop, screen.title, screen.final_score, screen.restart_button) == [
            Vector2(200, 400), Vector2(200, 480), Vector2(200, 400), Vector2(200, 340),
        ]

    def test_layout_is_idempotent(self, game):
        game.end_game()
        screen = game.game_over_screen
        ids = (game.hud.score_label, screen.backdrop, screen.title, screen.final_score, screen.restart_button)
        game.layout_ui()
        first = node_positions(game, *ids)
        game.layout_ui()
        assert node_positions(game, *ids) == first

    def test_resize_relayouts_without_changing_state(self, game):
        game.end_game()
        game.resize(600, 1000)
        screen = game.game_over_screen
        assert game.state is GameState.GAME_OVER
        assert game.scene.get(game.hud.score_label).position == Vector2(16, 984)
        assert game.scene.get(screen.backdrop).size == (600.0, 1000.0)
        assert game.scene.get(screen.restart_button).position == Vector2(300, 440)
        assert game.restart_hit((300, 440))
        assert not game.restart_hit((200, 340))

    def test_resize_keeps_player_on_the_field(self, game):
        game.move_player((352, 752))
        game.resize(300, 300)
        assert game.player.position == Vector2(252, 252)
        assert game.scene.get(game.player.node_id).position == Vector2(252, 252)

    def test_degenerate_resize_is_contained(self, game):
        game.frame(0.0)
        game.resize(0, 0)
        game.end_game()
        game.frame(0.5)
        assert game.player.position == Vector2(0, 0)
        assert not math.isnan(game.player.position.x)


class TestLogging:
    def test_game_events_reach_the_log(self, game, game_logger):
        run_frames(game, 0.0, 2.0, 0.5)
        game.on_contact(Category.PLAYER, Category.OBSTACLE)
        game.restart_game()
        game.resize(500, 900)
        with open(game_logger.log_file, encoding="utf-8") as f:
            text = f.read()
        assert "| HIT |" in text
        assert "Final score 2" in text
        assert "| RESTART |" in text
        assert "500x900" in text

"""Pointer/touch input: pygame events -> player moves or restart taps."""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .game import DodgeGame

MOUSE_POINTER = "mouse"


def to_field(pos, height: float) -> Vector2:
    """Screen coordinates (origin top-left, y down) to field coordinates (y up)."""
    return Vector2(pos[0], height - pos[1])


class InputMapper:
    """
    Routes a single active pointer to the game.

    While playing, pointer down and pointer moved both move the player. While
    the game is over, only pointer down is read, and only as a press of the
    restart button. A new pointer down always becomes the active pointer;
    moves from any other pointer are ignored.
    """

    def __init__(self, game: DodgeGame) -> None:
        self.game = game
        self.active_pointer: object | None = None

    # ------------------------------- Gestures ---------------------------------------

    def pointer_down(self, location, pointer_id: object = MOUSE_POINTER) -> bool:
        """
        Handle the start of a gesture.

        Parameters
        ----------
        location : Vector2 | tuple[float, float]
            Pointer position in field coordinates
        pointer_id : object
            Identifies the finger or mouse

        Returns
        -------
        bool
            True if the event changed the game
        """
        # every new touch takes over; moves follow only the latest one
        self.active_pointer = pointer_id

        if self.game.is_game_over:
            if self.game.restart_hit(location):
                self.game.restart_game()
                return True
            return False

        self.game.move_player(location)
        return True

    def pointer_moved(self, location, pointer_id: object = MOUSE_POINTER) -> bool:
        if pointer_id != self.active_pointer or self.game.is_game_over:
            return False
        self.game.move_player(location)
        return True

    def pointer_up(self, pointer_id: object = MOUSE_POINTER) -> None:
        if pointer_id == self.active_pointer:
            self.active_pointer = None

    # ------------------------------- pygame -----------------------------------------

    def handle_event(self, event: pygame.event.Event, size: tuple[int, int]) -> bool:
        """
        Translate one pygame event.

        Parameters
        ----------
        event : pygame.event.Event
            Raw event from the queue
        size : tuple[int, int]
            Current window size, for touch normalisation and the y flip

        Returns
        -------
        bool
            True if the event changed the game
        """
        width, height = size

        # SDL mirrors touches as mouse events; the finger events are authoritative
        if getattr(event, "touch", False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self.pointer_down(to_field(event.pos, height))
        if event.type == pygame.MOUSEMOTION and event.buttons[0]:
            return self.pointer_moved(to_field(event.pos, height))
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.pointer_up()
            return False

        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            location = to_field((event.x * width, event.y * height), height)
            if event.type == pygame.FINGERDOWN:
                return self.pointer_down(location, event.finger_id)
            if event.type == pygame.FINGERMOTION:
                return self.pointer_moved(location, event.finger_id)
            self.pointer_up(event.finger_id)
        return False

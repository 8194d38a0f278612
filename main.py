"""Game entry point"""

from __future__ import annotations

import pygame

from asteroid_dodge.constants import FPS, HEIGHT, LOG_FILE, WIDTH
from asteroid_dodge.game import DodgeGame
from asteroid_dodge.input_mapper import InputMapper
from asteroid_dodge.logger import GameLogger
from asteroid_dodge.renderer import PygameRenderer


class Game:
    """
    Main application: opens the window, pumps events, drives one game frame
    per rendered frame, and draws the scene.
    """

    def __init__(self) -> None:
        """Initialize pygame, the window, and a fresh run."""
        pygame.init()
        pygame.display.set_caption("Asteroid Dodge")

        # Make window resizable
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.current_width = WIDTH
        self.current_height = HEIGHT

        self.logger = GameLogger(LOG_FILE)
        self.game = DodgeGame(WIDTH, HEIGHT, logger=self.logger)
        self.input = InputMapper(self.game)
        self.renderer = PygameRenderer()

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Handle window resize events and re-layout the scene."""
        if new_width != self.current_width or new_height != self.current_height:
            self.current_width = new_width
            self.current_height = new_height
            self.screen = pygame.display.get_surface()
            self.game.resize(new_width, new_height)

    # --------------------------------- Loop -----------------------------------------

    def handle_events(self) -> bool:
        """Drain the event queue; returns False once the player asks to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.VIDEORESIZE:
                self.handle_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            else:
                self.input.handle_event(event, (self.current_width, self.current_height))
        return True

    def run(self) -> None:
        """Main game loop: update, process input, render; exits on quit request."""
        running = True
        while running:
            # frame update comes before this frame's input is dispatched
            now = pygame.time.get_ticks() / 1000.0
            self.game.frame(now)

            running = self.handle_events()

            self.renderer.draw(self.screen, self.game.scene)
            pygame.display.flip()

            # Cap frame rate
            self.clock.tick(FPS)

        pygame.quit()


if __name__ == "__main__":
    Game().run()

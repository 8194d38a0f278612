"""Game-wide constants for Asteroid Dodge.

Window dimensions, colors, font sizes, entity sizes and speeds, spawn cadence,
UI layout offsets, z-order, asset paths, and logging configuration.
"""

import os

WIDTH, HEIGHT = 400, 800           # portrait playfield
FPS = 60                           # target frame rate
BG_COLOR = (82, 51, 140)           # purple space
TEXT_COLOR = (255, 255, 255)
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 20               # score label
FONT_SIZE_MEDIUM = 22              # final score / restart label
FONT_SIZE_LARGE = 40               # "Game Over" title

# Player
PLAYER_SIZE = (96, 96)
PLAYER_RADIUS = min(PLAYER_SIZE) * 0.5
PLAYER_SPAWN_OFFSET = 16           # gap between the bottom edge and the player's circle
PLAYER_FALLBACK_COLOR = (120, 200, 255)

# Asteroids
ASTEROID_RADIUS = 24
ASTEROID_SPEED = 220               # field units per second, downward
ASTEROID_COLOR = (242, 140, 38)
SPAWN_INTERVAL = 1.0               # seconds between spawns
SPAWN_ACTION_KEY = "spawn"

# Scoring
SCORE_INCREMENT_SECONDS = 1.0

# HUD layout
HUD_PADDING = 16

# Game over overlay
OVERLAY_COLOR = (5, 8, 13, 224)
TITLE_COLOR = (250, 217, 51)
TITLE_OFFSET_Y = 80
RESTART_OFFSET_Y = -60
RESTART_BUTTON_SIZE = (180, 44)
RESTART_BUTTON_RADIUS = 10
RESTART_BUTTON_COLOR = (31, 158, 250)
RESTART_LABEL_COLOR = (235, 219, 255)

# Z-order
Z_OVERLAY = 100
Z_OVERLAY_CONTENT = 101
Z_OVERLAY_LABEL = 102

# Log file settings
LOG_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "log.md")
ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")
PLAYER_SPRITE_PATH = os.path.join(ASSETS_DIR, "spaceship.png")          # optional
BACKGROUND_PATH = os.path.join(ASSETS_DIR, "space_background.png")      # optional

"""
Constants for the game.
"""

from __future__ import annotations

import pygame

FPS = 30
WINDOW_SIZE = (640, 480)
WINDOW_TITLE = "Space Game"

# Player
START_LIVES = 3
SPAWN_X = 10
MOVE_STEP = 4
FIRE_COOLDOWN_MS = 500
SCORE_PER_HIT = 100

# Entities
PROJECTILE_SIZE = (3, 2)
PROJECTILE_SPEED = 4
OBSTACLE_SPEED = 1
SPAWN_ODDS = 30  # one obstacle every SPAWN_ODDS ticks on average
NUM_STARS = 20
STAR_SIZE = 2
STAR_SPEED = 2
STAR_MIN_BRIGHTNESS = 0.4

# Input
KEY_REPEAT_MS = 40
MODIFIER_KEYS = (pygame.K_LSHIFT, pygame.K_RSHIFT)
HELP_KEY = pygame.K_QUESTION
CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

# Rendering
BACKGROUND_COLOR = (0, 0, 0)
FOREGROUND_COLOR = (255, 255, 255)
HUD_FONT_SIZE = 13
PAGE_FONT_SIZE = 26
PAGE_LINE_HEIGHT = 50
HUD_MARGIN = 20
LIFE_ICON_SIZE = (10, 10)

INTRO_TEXT = "\nPress Enter\nTo begin your mission\n\n Press ? for help"
HELP_TEXT = (
    "Help:\n Your goal is to survive as long as you can!\n"
    " Use the directional keys to control your spaceship\n"
    "SPACE to shoot\n ESC to return to the main screen"
)
GAME_OVER_TEXT = "\nGame Over \n Press ESC to go back to the main screen"

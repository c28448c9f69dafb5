"""
Main application for Space Game using pygame.
"""

from __future__ import annotations

import pygame

from space_game.config import GameSettings
from space_game.game import SpaceGame
from space_game.render import PygameCanvas
from space_game.scheduler import Scheduler
from space_game.utils import (
    build_obstacle_sprite,
    build_ship_sprite,
    configure_logging,
    load_image,
    logger,
    set_screen,
)

IDLE_FPS = 240  # how often the event loop polls for input and due timers


def load_sprites(settings: GameSettings) -> tuple[pygame.Surface, pygame.Surface]:
    """
    Load the ship and obstacle images, or draw placeholder ones.

    :param settings: Game settings holding the optional image paths
    :type settings: GameSettings

    :return: (ship, obstacle)
    """
    if settings.ship_image:
        ship = load_image(settings.ship_image, transparent=True)
    else:
        ship = build_ship_sprite()

    if settings.obstacle_image:
        obstacle = load_image(settings.obstacle_image, transparent=True)
    else:
        obstacle = build_obstacle_sprite()

    return ship, obstacle


def run(settings_data: dict | None = None):
    """
    Main entry point for Space Game.

    - Builds the settings from a nested dictionary.
    - Opens the pygame window and loads the sprites.
    - Feeds pygame key events to the game and runs due timers until the
      window is closed.
    """
    # NOTE: A dictionary so yaml-based and/or cli-based configuration can
    # be added later.
    settings = GameSettings.from_dict(settings_data or {})
    configure_logging(settings.log_level)

    pygame.init()
    screen = set_screen(settings.title, settings.width, settings.height)
    ship, obstacle = load_sprites(settings)

    scheduler = Scheduler()
    game = SpaceGame(
        canvas=PygameCanvas(screen),
        ship=ship,
        obstacle=obstacle,
        scheduler=scheduler,
        settings=settings,
    )
    logger.info("Starting Space Game...")
    logger.info(settings.to_dict())

    clock = pygame.time.Clock()
    carry_on = game.running
    while carry_on:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.debug("Quitting the game")
                carry_on = False
            elif event.type == pygame.KEYDOWN:
                game.key_down(event.key)
            elif event.type == pygame.KEYUP:
                game.key_up(event.key)

        scheduler.run_pending()
        clock.tick(IDLE_FPS)

    game.stop()
    pygame.quit()


if __name__ == "__main__":
    run()

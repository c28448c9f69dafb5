"""
Space Game utils
"""

from __future__ import annotations

import logging

import pygame

from space_game.errors import ConfigurationError

logger = logging.getLogger("space_game")


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure the root handler used by the game.

    :param level: Logging level name or number
    :type level: str | int
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(level)


def load_image(filename: str, transparent: bool = False) -> pygame.Surface:
    """
    Load an image

    :param filename: Name of the file
    :type filename: str

    :param transparent: Use the top-left pixel as the colorkey
    :type transparent: bool

    :return: pygame.Surface

    :raises ConfigurationError: If pygame cannot read the file
    """
    logger.debug(f"Loading image {filename}")

    try:
        image = pygame.image.load(filename)
    except (pygame.error, FileNotFoundError) as e:
        raise ConfigurationError(f"Failed to load image {filename}: {e}") from e

    if pygame.display.get_surface() is not None:
        image = image.convert()
    if transparent:
        color = image.get_at((0, 0))
        image.set_colorkey(color, pygame.RLEACCEL)

    return image


def set_screen(title: str, width: int, height: int) -> pygame.Surface:
    """
    Open the game window.

    :param title: Window title
    :type title: str

    :return: The display surface the game draws on
    """
    logger.info(f"Opening {width}x{height} window {title!r}")
    window = pygame.display.set_mode((width, height))
    pygame.display.set_caption(title)
    return window


def build_ship_sprite(size: tuple[int, int] = (24, 12)) -> pygame.Surface:
    """Draw a small arrow-shaped ship pointing right."""
    width, height = size
    image = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.polygon(
        image,
        (200, 220, 255),
        [(0, 0), (width - 1, height // 2), (0, height - 1), (width // 4, height // 2)],
    )
    return image


def build_obstacle_sprite(size: tuple[int, int] = (16, 16)) -> pygame.Surface:
    """Draw a grey rock that fills the sprite bounds."""
    image = pygame.Surface(size, pygame.SRCALPHA)
    pygame.draw.ellipse(image, (150, 140, 130), image.get_rect())
    return image

"""
Player class
"""

from __future__ import annotations

from dataclasses import dataclass, field

from space_game.constants import (
    FIRE_COOLDOWN_MS,
    SCORE_PER_HIT,
    SPAWN_X,
    START_LIVES,
)
from space_game.entities import Box, Projectile
from space_game.scheduler import Scheduler
from space_game.utils import logger


@dataclass(eq=False)
class Player:  # pylint: disable=too-many-instance-attributes
    """
    The player's ship.

    A fresh instance is created every time a mission starts; nothing is
    carried over from the previous one.
    """

    canvas_size: tuple[int, int]
    ship_size: tuple[int, int]
    x: float = field(init=False)
    y: float = field(init=False)
    lives: int = START_LIVES
    score: int = 0
    projectiles: list[Projectile] = field(default_factory=list)
    can_fire: bool = True

    def __post_init__(self):
        self.x, self.y = self.spawn_point

    @property
    def spawn_point(self) -> tuple[float, float]:
        return SPAWN_X, self.canvas_size[1] / 2

    @property
    def bounds(self) -> tuple[float, float]:
        """Largest x and y the ship can reach."""
        return (
            max(0, self.canvas_size[0] - self.ship_size[0]),
            max(0, self.canvas_size[1] - self.ship_size[1]),
        )

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, *self.ship_size)

    def move(self, dx: float, dy: float):
        """
        Move the ship, keeping it fully on the canvas.

        :param dx: Horizontal offset
        :type dx: float

        :param dy: Vertical offset
        :type dy: float
        """
        max_x, max_y = self.bounds
        self.x = min(max(self.x + dx, 0), max_x)
        self.y = min(max(self.y + dy, 0), max_y)

    def damage(self) -> bool:
        """
        Take one life and send the ship back to its spawn point.

        :return: Whether the player still has lives left
        :rtype: bool
        """
        self.x, self.y = self.spawn_point
        self.lives = max(0, self.lives - 1)
        logger.debug(f"Player hit, {self.lives} lives left")
        return self.lives > 0

    def award_hit(self):
        self.score += SCORE_PER_HIT

    def fire(self, scheduler: Scheduler) -> Projectile | None:
        """
        Shoot a projectile from the nose of the ship.

        Firing is locked until ``FIRE_COOLDOWN_MS`` of real time has passed,
        whatever the frame rate.

        :param scheduler: Scheduler used to unlock firing
        :type scheduler: Scheduler

        :return: The new projectile, or None while cooling down
        """
        if not self.can_fire:
            return None

        width, height = self.ship_size
        projectile = Projectile(self.x + width + 1, self.y + height / 2)
        self.projectiles.append(projectile)
        self.can_fire = False
        scheduler.call_later(FIRE_COOLDOWN_MS, self.reload)

        logger.debug(f"Shooting projectile at ({projectile.x}, {projectile.y})")
        return projectile

    def reload(self):
        self.can_fire = True

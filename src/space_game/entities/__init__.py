"""
Space Game entities
"""

from __future__ import annotations

from dataclasses import dataclass

from space_game.constants import PROJECTILE_SIZE


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned bounding box. Edges are half-open, so boxes that only
    touch do not overlap.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Box) -> bool:
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


def overlaps(a: Box, b: Box) -> bool:
    """Return True when the two boxes overlap."""
    return a.intersects(b)


@dataclass(eq=False)
class Star:
    """
    Background star, purely decorative.
    """

    x: float
    y: float
    brightness: float


@dataclass(eq=False)
class Obstacle:
    """
    Obstacle entity, sized after the obstacle sprite.
    """

    x: float
    y: float
    width: int
    height: int

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


@dataclass(eq=False)
class Projectile:
    """
    Projectile fired by the player.
    """

    x: float
    y: float
    width: int = PROJECTILE_SIZE[0]
    height: int = PROJECTILE_SIZE[1]

    @property
    def collider(self) -> Box:
        return Box(self.x, self.y, self.width, self.height)


__all__ = ["Box", "Obstacle", "Projectile", "Star", "overlaps"]

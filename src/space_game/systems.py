"""
Per-tick simulation systems.

Each system is a small dataclass with a ``step(state)`` method. The game
runs them sorted by ``order``; lower runs first.
"""

from __future__ import annotations

from dataclasses import dataclass

from space_game.constants import (
    NUM_STARS,
    OBSTACLE_SPEED,
    PROJECTILE_SPEED,
    SPAWN_ODDS,
    STAR_MIN_BRIGHTNESS,
    STAR_SPEED,
)
from space_game.entities import Obstacle, Star
from space_game.state import GameState, Page
from space_game.utils import logger


def new_star(state: GameState, x: float) -> Star:
    """Make a star at ``x`` with random height and brightness."""
    _, height = state.canvas_size
    return Star(
        x=x,
        y=state.rng.random() * height,
        brightness=state.rng.random() + STAR_MIN_BRIGHTNESS,
    )


@dataclass
class StarfieldSystem:
    """
    Scroll the background stars. Runs on every page.
    """

    name: str = "starfield"
    order: int = 10
    count: int = NUM_STARS

    def step(self, state: GameState):
        width, _ = state.canvas_size

        if len(state.stars) < self.count:
            # The first fill scatters stars across the whole canvas; later
            # top-ups come in from the right edge.
            was_empty = not state.stars
            for _ in range(self.count - len(state.stars)):
                x = state.rng.random() * width if was_empty else width
                state.stars.append(new_star(state, x))

        for i, star in enumerate(state.stars):
            star.x -= STAR_SPEED
            if star.x <= -1:
                state.stars[i] = new_star(state, width)


@dataclass
class ProjectileSystem:
    """
    Move the player's projectiles and drop the ones past the right edge.
    """

    name: str = "projectiles"
    order: int = 20

    def step(self, state: GameState):
        player = state.player
        if player is None or not player.projectiles:
            return

        width, _ = state.canvas_size
        kept = []
        for projectile in player.projectiles:
            projectile.x += PROJECTILE_SPEED
            if projectile.x < width:
                kept.append(projectile)
        player.projectiles = kept


@dataclass
class ObstacleSpawnSystem:
    """
    Spawn an obstacle on the right edge with a 1 in ``odds`` chance per tick.
    """

    name: str = "obstacle_spawn"
    order: int = 30
    odds: int = SPAWN_ODDS

    def step(self, state: GameState):
        if state.rng.randrange(self.odds) != 0:
            return

        width, height = state.canvas_size
        obstacle_w, obstacle_h = state.obstacle_size
        obstacle = Obstacle(
            x=width,
            y=state.rng.random() * height,
            width=obstacle_w,
            height=obstacle_h,
        )
        state.obstacles.append(obstacle)
        logger.debug(f"Spawned obstacle at ({obstacle.x}, {obstacle.y:.1f})")


@dataclass
class ObstacleCollisionSystem:
    """
    Resolve hits against the ship and the projectiles, then move the
    obstacles that survived.

    - Ship hit: the obstacle goes away and the player loses a life.
    - Projectile hit: the obstacle and the first projectile touching it go
      away and the player scores.
    """

    name: str = "obstacle_collision"
    order: int = 40

    def step(self, state: GameState):
        player = state.player
        if player is None or not state.obstacles:
            return

        survivors = []
        for obstacle in state.obstacles:
            box = obstacle.collider

            if player.collider.intersects(box):
                state.kill_player()
                continue

            hit = next(
                (p for p in player.projectiles if p.collider.intersects(box)),
                None,
            )
            if hit is not None:
                player.projectiles.remove(hit)
                player.award_hit()
                logger.debug(f"Obstacle destroyed, score {player.score}")
                continue

            obstacle.x -= OBSTACLE_SPEED
            if obstacle.collider.right > 0:
                survivors.append(obstacle)

        state.obstacles = survivors


def playing_systems() -> list:
    """Systems that run while the page is ``Page.PLAYING``, in run order."""
    systems = [ObstacleCollisionSystem(), ObstacleSpawnSystem(), ProjectileSystem()]
    return sorted(systems, key=lambda s: s.order)


def run_systems(systems: list, state: GameState, page: Page | None = None):
    """
    Step every system, stopping early if the page changes under them.

    :param page: Page the systems belong to; None runs them on any page
    """
    for system in systems:
        if page is not None and state.page is not page:
            return
        system.step(state)

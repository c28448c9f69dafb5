"""
Game state shared by the input mapper, the systems and the renderer.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from space_game.entities import Obstacle, Star
from space_game.player import Player
from space_game.scheduler import Timer
from space_game.utils import logger


class Page(str, Enum):
    INTRO = "intro"
    HELP = "help"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:  # pylint: disable=too-many-instance-attributes
    """
    Everything that changes while the game runs.
    """

    canvas_size: tuple[int, int]
    ship_size: tuple[int, int]
    obstacle_size: tuple[int, int]
    page: Page = Page.INTRO
    player: Player | None = None  # only set while playing or game over
    obstacles: list[Obstacle] = field(default_factory=list)
    stars: list[Star] = field(default_factory=list)
    pressed_keys: dict[int, Timer] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)
    frame: int = 0

    @property
    def score(self) -> int:
        return self.player.score if self.player else 0

    @property
    def lives(self) -> int:
        return self.player.lives if self.player else 0

    def go_to_intro(self):
        """Back to the title page. Safe to call from any page, any number of times."""
        if self.page is Page.INTRO:
            return
        logger.debug(f"Page {self.page.value} -> intro")
        self.page = Page.INTRO
        self.player = None

    def show_help(self):
        if self.page is not Page.INTRO:
            return
        logger.debug("Page intro -> help")
        self.page = Page.HELP

    def start_mission(self):
        """Begin a new run with a fresh player and no obstacles."""
        if self.page is not Page.INTRO:
            return
        logger.debug("Page intro -> playing")
        self.page = Page.PLAYING
        self.obstacles = []
        self.player = Player(canvas_size=self.canvas_size, ship_size=self.ship_size)

    def kill_player(self):
        """Damage the player and end the run once the last life is gone."""
        if self.player is None:
            return
        if not self.player.damage() and self.page is Page.PLAYING:
            logger.debug(f"Game over with score {self.player.score}")
            self.page = Page.GAME_OVER

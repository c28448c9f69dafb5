"""
Space Game

A three-life side scroller: the ship has to dodge or shoot down the
obstacles flying past it.
"""

from __future__ import annotations

import random

from space_game.config import GameSettings
from space_game.errors import ConfigurationError
from space_game.input import InputMapper
from space_game.render import Renderer
from space_game.scheduler import Scheduler, Timer
from space_game.state import GameState, Page
from space_game.systems import StarfieldSystem, playing_systems, run_systems
from space_game.utils import logger


def _size_of(asset) -> tuple[int, int]:
    width, height = asset.get_size()
    return int(width), int(height)


class SpaceGame:  # pylint: disable=too-many-instance-attributes
    """
    Space Game class

    Owns the frame loop: every frame clears the canvas, scrolls and draws the
    starfield, runs the current page and draws the HUD, then schedules the
    next frame. The next frame is only scheduled once the current one is
    done, so slow frames delay the cadence instead of piling up.
    """

    def __init__(
        self,
        canvas=None,
        ship=None,
        obstacle=None,
        *,
        scheduler: Scheduler | None = None,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ):  # pylint: disable=too-many-arguments
        """
        :param canvas: Drawing surface with ``width``, ``height`` and
            ``get_context("2d")``
        :param ship: Ship image, anything with ``get_size()``
        :param obstacle: Obstacle image, anything with ``get_size()``

        :param scheduler: Timer queue, defaults to one on the pygame clock
        :type scheduler: Scheduler | None

        :param settings: Game settings
        :type settings: GameSettings | None

        :param rng: Random source for spawns and stars
        :type rng: random.Random | None

        :raises ConfigurationError: If canvas, ship or obstacle is missing
        """
        missing = [
            name
            for name, value in (("canvas", canvas), ("ship", ship), ("obstacle", obstacle))
            if value is None
        ]
        if missing:
            raise ConfigurationError(
                f"SpaceGame initialized without required resources: {', '.join(missing)}"
            )

        get_context = getattr(canvas, "get_context", None)
        ctx = get_context("2d") if callable(get_context) else None

        # An element without 2D support may not have a size either.
        canvas_size = (getattr(canvas, "width", 0), getattr(canvas, "height", 0))
        if settings is None:
            settings = GameSettings(*canvas_size) if ctx is not None else GameSettings()
        self.settings = settings
        self.canvas = canvas
        self.ship_image = ship
        self.obstacle_image = obstacle
        self.scheduler = scheduler or Scheduler()

        if rng is None:
            rng = random.Random(self.settings.seed)

        self.state = GameState(
            canvas_size=canvas_size,
            ship_size=_size_of(ship),
            obstacle_size=_size_of(obstacle),
            rng=rng,
        )
        self.input = InputMapper(self.state, self.scheduler)
        self.background_systems = [StarfieldSystem()]
        self.systems = playing_systems()

        self.ctx = None
        self.renderer: Renderer | None = None
        self._frame_timer: Timer | None = None

        if ctx is None:
            # Leave whatever the canvas shows on its own and stay idle.
            logger.info("2D drawing is not supported, the game will not start")
            return

        self.ctx = ctx
        self.renderer = Renderer(ctx, ship, obstacle)
        logger.debug(
            f"Starting game on a {canvas.width}x{canvas.height} canvas "
            f"at {self.settings.fps} fps"
        )
        self.redraw()

    @property
    def running(self) -> bool:
        return self.renderer is not None

    @property
    def page(self) -> Page:
        return self.state.page

    def key_down(self, code: int):
        if self.running:
            self.input.key_down(code)

    def key_up(self, code: int):
        if self.running:
            self.input.key_up(code)

    def next_timer(self):
        """Schedule the next frame."""
        self._frame_timer = self.scheduler.call_later(
            self.settings.frame_delay, self.redraw
        )

    def tick(self):
        """Advance the simulation by one frame without drawing."""
        run_systems(self.background_systems, self.state)
        if self.state.page is Page.PLAYING:
            run_systems(self.systems, self.state, Page.PLAYING)
        self.state.frame += 1

    def redraw(self):
        """Run one frame and schedule the next one."""
        if not self.running:
            return

        self.ctx.clear()
        self.tick()
        self.renderer.draw(self.state)
        self.ctx.present()

        self.next_timer()

    def stop(self):
        """Stop the frame loop and every key repeat."""
        if self._frame_timer is not None:
            self._frame_timer.cancel()
            self._frame_timer = None
        self.input.release_all()
        self.renderer = None
        logger.debug("Game stopped")

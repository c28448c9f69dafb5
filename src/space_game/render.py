"""
Drawing.

The game only talks to a small drawing context (clear, filled rectangles,
text, images and text measurement). ``PygameCanvas`` provides one on top of
a pygame surface; tests provide a recording one.
"""

from __future__ import annotations

from typing import Protocol

import pygame

from space_game.constants import (
    BACKGROUND_COLOR,
    FOREGROUND_COLOR,
    GAME_OVER_TEXT,
    HELP_TEXT,
    HUD_FONT_SIZE,
    HUD_MARGIN,
    INTRO_TEXT,
    LIFE_ICON_SIZE,
    PAGE_FONT_SIZE,
    PAGE_LINE_HEIGHT,
    STAR_SIZE,
)
from space_game.state import GameState, Page

Color = tuple[int, int, int]

PAGE_TEXTS = {
    Page.INTRO: INTRO_TEXT,
    Page.HELP: HELP_TEXT,
    Page.GAME_OVER: GAME_OVER_TEXT,
}


class DrawingContext(Protocol):
    def clear(self): ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color): ...

    def fill_text(self, text: str, x: float, y: float, font: str): ...

    def measure_text(self, text: str, font: str) -> float: ...

    def draw_image(self, image, x: float, y: float, size: tuple[int, int] | None = None): ...

    def present(self): ...


class PygameContext:
    """
    Drawing context over a pygame surface.

    Text ``y`` is the baseline, like a browser canvas, so lines of different
    fonts line up.
    """

    FONT_SIZES = {"hud": HUD_FONT_SIZE, "page": PAGE_FONT_SIZE}

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[str, pygame.font.Font] = {}

    def font(self, name: str) -> pygame.font.Font:
        if name not in self._fonts:
            self._fonts[name] = pygame.font.Font(None, self.FONT_SIZES[name])
        return self._fonts[name]

    def clear(self):
        self.surface.fill(BACKGROUND_COLOR)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color):
        self.surface.fill(color, pygame.Rect(int(x), int(y), int(w), int(h)))

    def fill_text(self, text: str, x: float, y: float, font: str):
        face = self.font(font)
        rendered = face.render(text, True, FOREGROUND_COLOR)
        self.surface.blit(rendered, (x, y - face.get_ascent()))

    def measure_text(self, text: str, font: str) -> float:
        return self.font(font).size(text)[0]

    def draw_image(self, image, x: float, y: float, size: tuple[int, int] | None = None):
        if size is not None:
            image = pygame.transform.scale(image, size)
        self.surface.blit(image, (x, y))

    def present(self):
        if self.surface is pygame.display.get_surface():
            pygame.display.flip()


class PygameCanvas:
    """
    A pygame surface the game can draw on.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def get_context(self, kind: str) -> PygameContext | None:
        """
        :param kind: Only ``"2d"`` is supported

        :return: A drawing context, or None when 2D drawing is unavailable
        """
        if kind != "2d" or not pygame.font.get_init():
            return None
        return PygameContext(self.surface)


def star_color(brightness: float) -> Color:
    level = round(255 * min(brightness, 1.0))
    return level, level, level


class Renderer:
    """
    Draw a ``GameState`` onto a drawing context.
    """

    def __init__(self, ctx: DrawingContext, ship_image, obstacle_image):
        self.ctx = ctx
        self.ship_image = ship_image
        self.obstacle_image = obstacle_image

    def draw_space(self, state: GameState):
        width, height = state.canvas_size
        self.ctx.fill_rect(0, 0, width, height, BACKGROUND_COLOR)
        for star in state.stars:
            self.ctx.fill_rect(
                star.x, star.y, STAR_SIZE, STAR_SIZE, star_color(star.brightness)
            )

    def draw_playing(self, state: GameState):
        player = state.player
        if player is not None:
            self.ctx.draw_image(self.ship_image, player.x, player.y)
            for projectile in player.projectiles:
                self.ctx.fill_rect(
                    projectile.x,
                    projectile.y,
                    projectile.width,
                    projectile.height,
                    FOREGROUND_COLOR,
                )

        for obstacle in state.obstacles:
            self.ctx.draw_image(self.obstacle_image, obstacle.x, obstacle.y)

    def draw_page_text(self, text: str, canvas_width: int):
        """
        Draw full page text, one line per ``\\n``, each line centered.
        """
        for i, line in enumerate(text.split("\n")):
            line_width = self.ctx.measure_text(line, "page")
            self.ctx.fill_text(
                line,
                (canvas_width - line_width) / 2,
                i * PAGE_LINE_HEIGHT + PAGE_LINE_HEIGHT,
                "page",
            )

    def draw_hud(self, state: GameState):
        width, _ = state.canvas_size

        text = f"Score: {state.score}"
        self.ctx.fill_text(
            text,
            width - self.ctx.measure_text(text, "hud") - HUD_MARGIN,
            HUD_MARGIN,
            "hud",
        )

        self.ctx.fill_text("Lives:", HUD_MARGIN, HUD_MARGIN, "hud")
        for i in range(state.lives):
            self.ctx.draw_image(self.ship_image, 20 * i + 60, 12, LIFE_ICON_SIZE)

    def draw(self, state: GameState):
        """Draw everything except the clear, in back to front order."""
        self.draw_space(state)
        if state.page is Page.PLAYING:
            self.draw_playing(state)
        else:
            self.draw_page_text(PAGE_TEXTS[state.page], state.canvas_size[0])
        self.draw_hud(state)

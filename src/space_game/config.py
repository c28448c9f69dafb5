"""
Game settings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from space_game.constants import FPS, WINDOW_SIZE, WINDOW_TITLE
from space_game.errors import ConfigurationError


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"Settings section {name!r} must be a mapping, got {type(section).__name__}"
        )
    return dict(section)


@dataclass
class GameSettings:
    """
    Settings for a game session.

    Built from the same nested dictionary layout the app entry point uses,
    so a yaml file or cli arguments can feed it later without changes here.
    """

    width: int = WINDOW_SIZE[0]
    height: int = WINDOW_SIZE[1]
    title: str = WINDOW_TITLE
    fps: int = FPS
    ship_image: str | None = None
    obstacle_image: str | None = None
    seed: int | None = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Window size must be positive, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def frame_delay(self) -> float:
        """Milliseconds between two frames."""
        return 1000 / self.fps

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameSettings:
        """
        Build settings from a nested dictionary.

        :param data: ``{"window": {...}, "game": {...}, "logging": {...}}``;
            every section and key is optional.
        :type data: dict[str, Any]

        :raises ConfigurationError: On unknown keys or invalid values.
        """
        unknown = set(data) - {"window", "game", "logging"}
        if unknown:
            raise ConfigurationError(f"Unknown settings sections: {sorted(unknown)}")

        window = _section(data, "window")
        game = _section(data, "game")
        logging_cfg = _section(data, "logging")

        kwargs: dict[str, Any] = {}
        for key in ("width", "height", "title"):
            if key in window:
                kwargs[key] = window.pop(key)
        for key in ("fps", "ship_image", "obstacle_image", "seed"):
            if key in game:
                kwargs[key] = game.pop(key)
        if "level" in logging_cfg:
            kwargs["log_level"] = logging_cfg.pop("level")

        leftovers = [*window, *game, *logging_cfg]
        if leftovers:
            raise ConfigurationError(f"Unknown settings: {sorted(leftovers)}")

        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "window": {
                "width": self.width,
                "height": self.height,
                "title": self.title,
            },
            "game": {
                "fps": self.fps,
                "ship_image": self.ship_image,
                "obstacle_image": self.obstacle_image,
                "seed": self.seed,
            },
            "logging": {"level": self.log_level},
        }

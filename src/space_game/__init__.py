"""
Space Game: dodge or shoot down the obstacles flying past your ship.
"""

from __future__ import annotations

from space_game.config import GameSettings
from space_game.errors import ConfigurationError, SpaceGameError
from space_game.game import SpaceGame
from space_game.state import GameState, Page

__all__ = [
    "ConfigurationError",
    "GameSettings",
    "GameState",
    "Page",
    "SpaceGame",
    "SpaceGameError",
]

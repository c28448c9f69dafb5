"""
Space Game errors
"""

from __future__ import annotations


class SpaceGameError(Exception):
    """Base class for every error raised by the game."""


class ConfigurationError(SpaceGameError):
    """
    Raised when the game is built with missing or invalid resources or
    settings. Nothing is started when this is raised.
    """

"""
Keyboard handling.

Raw key presses and releases come in, page-dependent game actions go out.
A held key repeats its action every ``KEY_REPEAT_MS`` until it is released.
"""

from __future__ import annotations

import pygame

from space_game.constants import (
    CONFIRM_KEYS,
    HELP_KEY,
    KEY_REPEAT_MS,
    MODIFIER_KEYS,
    MOVE_STEP,
)
from space_game.scheduler import Scheduler
from space_game.state import GameState, Page

MOVES = {
    pygame.K_LEFT: (-MOVE_STEP, 0),
    pygame.K_RIGHT: (MOVE_STEP, 0),
    pygame.K_UP: (0, -MOVE_STEP),
    pygame.K_DOWN: (0, MOVE_STEP),
}


class InputMapper:
    """
    Turn key events into game actions.
    """

    # Keys that mean something else while a modifier is held. Only "?"
    # (shift + slash on a US layout) is needed, so there is no general
    # modifier handling.
    MODIFIED_KEYS = {pygame.K_SLASH: HELP_KEY}

    def __init__(
        self,
        state: GameState,
        scheduler: Scheduler,
        repeat_ms: float = KEY_REPEAT_MS,
    ):
        """
        :param state: Game state mutated by the actions
        :type state: GameState

        :param scheduler: Scheduler for key repeat and fire cooldown timers
        :type scheduler: Scheduler

        :param repeat_ms: Key repeat interval in milliseconds
        :type repeat_ms: float
        """
        self.state = state
        self.scheduler = scheduler
        self.repeat_ms = repeat_ms

    @property
    def modifier_held(self) -> bool:
        return any(key in self.state.pressed_keys for key in MODIFIER_KEYS)

    def translate(self, code: int) -> int | None:
        """Return the action a modified key stands for, if any."""
        if self.modifier_held:
            return self.MODIFIED_KEYS.get(code)
        return None

    def key_down(self, code: int):
        """
        Handle a key press: act once now, then keep repeating until release.

        :param code: pygame key code
        :type code: int
        """
        modified = self.translate(code)
        if modified is not None:
            self.handle(modified)
            return

        if code in self.state.pressed_keys:
            return

        self.handle(code)
        self.state.pressed_keys[code] = self.scheduler.call_every(
            self.repeat_ms, self.handle, code
        )

    def key_up(self, code: int):
        """
        Handle a key release by cancelling that key's repeat timer.

        :param code: pygame key code
        :type code: int
        """
        timer = self.state.pressed_keys.pop(code, None)
        if timer is not None:
            timer.cancel()

    def release_all(self):
        for code in list(self.state.pressed_keys):
            self.key_up(code)

    def handle(self, code: int):
        """
        Apply the action bound to ``code`` on the current page.

        :param code: pygame key code
        :type code: int
        """
        state = self.state

        if code == pygame.K_ESCAPE:
            state.go_to_intro()
            return

        if state.page is Page.INTRO:
            if code == HELP_KEY:
                state.show_help()
            elif code in CONFIRM_KEYS:
                state.start_mission()
        elif state.page is Page.PLAYING:
            self._handle_playing(code)

    def _handle_playing(self, code: int):
        player = self.state.player
        if player is None:
            return

        if code in MOVES:
            player.move(*MOVES[code])
        elif code == pygame.K_SPACE and player.can_fire:
            player.fire(self.scheduler)

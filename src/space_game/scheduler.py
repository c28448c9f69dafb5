"""
Single-threaded timers.

Every timer family of the game (frame cadence, key repeat, fire cooldown)
runs through one ``Scheduler``. Callbacks run to completion one at a time,
so they can share game state without locking.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from space_game.utils import logger


@dataclass(eq=False)
class Timer:
    """
    Handle for a scheduled callback.
    """

    due: float
    callback: Callable[..., Any]
    args: tuple = ()
    interval: float | None = None  # None for one-shot timers
    cancelled: bool = False
    fired: int = 0

    @property
    def repeating(self) -> bool:
        return self.interval is not None

    @property
    def active(self) -> bool:
        if self.cancelled:
            return False
        return self.repeating or self.fired == 0

    def cancel(self):
        """Stop the timer. Cancelling twice is a no-op."""
        self.cancelled = True


@dataclass
class Scheduler:
    """
    Timer queue driven by a millisecond clock.

    The clock defaults to ``pygame.time.get_ticks``; tests inject their own.
    """

    clock: Callable[[], float] = pygame.time.get_ticks
    _queue: list[tuple[float, int, Timer]] = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def now(self) -> float:
        return self.clock()

    def call_later(self, delay: float, callback: Callable[..., Any], *args) -> Timer:
        """
        Run ``callback(*args)`` once, ``delay`` milliseconds from now.

        :param delay: Delay in milliseconds
        :type delay: float

        :return: Timer
        """
        timer = Timer(due=self.now() + max(0.0, delay), callback=callback, args=args)
        self._push(timer)
        return timer

    def call_every(
        self, interval: float, callback: Callable[..., Any], *args
    ) -> Timer:
        """
        Run ``callback(*args)`` every ``interval`` milliseconds until the
        returned timer is cancelled. The first call happens after one interval.

        :param interval: Interval in milliseconds
        :type interval: float

        :return: Timer

        :raises ValueError: If the interval is not positive
        """
        if interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")
        timer = Timer(
            due=self.now() + interval,
            callback=callback,
            args=args,
            interval=interval,
        )
        self._push(timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of timers that can still fire."""
        return sum(1 for _, _, timer in self._queue if timer.active)

    def run_pending(self) -> int:
        """
        Run every callback that is due, earliest first.

        A repeating timer fires at most once per call; when it has fallen
        behind it is re-armed one interval from now instead of bursting.

        :return: Number of callbacks run
        :rtype: int
        """
        now = self.now()
        ran = 0
        rearm: list[Timer] = []

        while self._queue and self._queue[0][0] <= now:
            _, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue

            timer.fired += 1
            timer.callback(*timer.args)
            ran += 1

            if timer.repeating and not timer.cancelled:
                timer.due += timer.interval
                if timer.due <= now:
                    timer.due = now + timer.interval
                rearm.append(timer)

        for timer in rearm:
            self._push(timer)

        return ran

    def clear(self):
        """Cancel every scheduled timer."""
        for _, _, timer in self._queue:
            timer.cancel()
        self._queue.clear()
        logger.debug("Scheduler cleared")

    def _push(self, timer: Timer):
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))

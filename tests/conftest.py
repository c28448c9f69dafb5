import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402

from space_game.game import SpaceGame  # noqa: E402
from space_game.scheduler import Scheduler  # noqa: E402
from space_game.state import GameState  # noqa: E402

CANVAS_SIZE = (640, 480)
SHIP_SIZE = (20, 10)
OBSTACLE_SIZE = (16, 16)


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self):
        self.ms = 0

    def __call__(self):
        return self.ms

    def advance(self, ms):
        self.ms += ms


class FixedRandom(random.Random):
    """Random source whose obstacle spawn roll is forced."""

    spawn = False

    def randrange(self, *args, **kwargs):
        return 0 if self.spawn else 1


class RecordingContext:
    """Drawing context that records every call."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def fill_text(self, text, x, y, font):
        self.calls.append(("fill_text", text, x, y, font))

    def measure_text(self, text, font):
        return 10 * len(text)

    def draw_image(self, image, x, y, size=None):
        self.calls.append(("draw_image", image, x, y, size))

    def present(self):
        self.calls.append(("present",))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]

    def reset(self):
        self.calls.clear()


class FakeCanvas:
    def __init__(self, width=CANVAS_SIZE[0], height=CANVAS_SIZE[1], supports_2d=True):
        self.width = width
        self.height = height
        self.supports_2d = supports_2d
        self.ctx = RecordingContext()

    def get_context(self, kind):
        if not self.supports_2d or kind != "2d":
            return None
        return self.ctx


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock=clock)


@pytest.fixture
def rng():
    return FixedRandom(1234)


@pytest.fixture
def state(rng):
    return GameState(
        canvas_size=CANVAS_SIZE,
        ship_size=SHIP_SIZE,
        obstacle_size=OBSTACLE_SIZE,
        rng=rng,
    )


@pytest.fixture
def playing_state(state):
    state.start_mission()
    return state


@pytest.fixture
def ship_image():
    return pygame.Surface(SHIP_SIZE)


@pytest.fixture
def obstacle_image():
    return pygame.Surface(OBSTACLE_SIZE)


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def unsupported_canvas():
    return FakeCanvas(supports_2d=False)


@pytest.fixture
def game(canvas, ship_image, obstacle_image, scheduler, rng):
    return SpaceGame(
        canvas, ship_image, obstacle_image, scheduler=scheduler, rng=rng
    )

import os
import random

import pytest

# headless pygame for the driver tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from duelpong.config import GameConfig
from duelpong.game_state import GameState


class FixedRng:
    """Stand-in random source returning preset draws."""

    def __init__(self, coin=0.25, angle=0.0):
        self.coin = coin
        self.angle = angle

    def random(self):
        return self.coin

    def uniform(self, a, b):
        return self.angle


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def state(cfg, rng):
    return GameState.from_config(cfg, rng=rng)


@pytest.fixture
def playing(state):
    state.start_round()
    return state

import random

import pytest

from tilesnake.grid import Grid
from tilesnake.storage import MemoryHighScoreStore


class ScriptedRandom:
    """Random source whose randrange() replays a fixed script, cycling forever."""

    def __init__(self, script):
        self.script = list(script)
        self.calls = 0
        self._fallback = random.Random(0)

    def randrange(self, *args, **kwargs):
        value = self.script[self.calls % len(self.script)]
        self.calls += 1
        return value

    def choice(self, seq):
        return self._fallback.choice(seq)


@pytest.fixture
def grid():
    return Grid.from_canvas(800, 600, 25)


@pytest.fixture
def tiny_grid():
    return Grid(tile_width=1, tile_height=1, columns=2, rows=2)


@pytest.fixture
def store():
    return MemoryHighScoreStore()

from dataclasses import dataclass
from enum import Enum

# ----- Canvas & grid -----
WIDTH, HEIGHT = 800, 600
TILE_SIZE = 25
GRID_W, GRID_H = WIDTH // TILE_SIZE, HEIGHT // TILE_SIZE

# ----- Colors -----
BG     = (20, 20, 24)
GREEN  = (80, 200, 80)
HEAD   = (120, 240, 120)
RED    = (220, 60, 60)
GOLD   = (240, 200, 60)
TEXT   = (220, 220, 230)
DIM    = (120, 120, 130)
GRID_LINE = (40, 40, 48)

FPS = 60


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


# ----- Levels (tick interval in ms) -----
class Level(Enum):
    BEGINNER = ("Beginner", 150)
    INTERMEDIATE = ("Intermediate", 100)

    def __init__(self, label: str, interval_ms: int):
        self.label = label
        self.interval_ms = interval_ms

    @classmethod
    def from_name(cls, name: str) -> "Level":
        for level in cls:
            if level.label.lower() == name.strip().lower():
                return level
        raise KeyError(name)


# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    award: int = 10
    initial_length: int = 3
    max_name_length: int = 20

CFG = Config()

"""Grid snake game: engine core plus a pygame front end."""

from .config import CFG, Config, Direction, Level
from .engine import GameEngine, ValidationError
from .food import place_food
from .game import Snapshot, Status, TickClock
from .grid import Grid
from .snake import Snake
from .storage import JsonHighScoreStore, MemoryHighScoreStore

__all__ = [
    "CFG", "Config", "Direction", "Level",
    "GameEngine", "ValidationError",
    "place_food",
    "Snapshot", "Status", "TickClock",
    "Grid", "Snake",
    "JsonHighScoreStore", "MemoryHighScoreStore",
]

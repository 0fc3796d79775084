# game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
import logging
import random

from .config import CFG, Config, Direction, Level
from .food import place_food
from .grid import Cell, Grid
from .snake import Snake, is_opposite

logger = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"
    WIN = "win"

    @property
    def is_terminal(self) -> bool:
        return self in (Status.GAME_OVER, Status.WIN)


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, handed to the renderer."""
    snake_cells: Tuple[Cell, ...]
    food_cell: Optional[Cell]
    score: int
    state: Status
    level: Optional[Level] = None
    high_score: int = 0
    player_name: Optional[str] = None
    tick: int = 0

    @property
    def head(self) -> Optional[Cell]:
        return self.snake_cells[0] if self.snake_cells else None


# ---------- Session ----------
@dataclass
class Session:
    grid: Grid
    snake: Snake
    direction: Direction
    food: Optional[Cell]
    level: Level
    score: int = 0
    tick: int = 0
    status: Status = Status.RUNNING
    pending: Optional[Direction] = field(default=None)

    def snapshot(self, high_score: int = 0, player_name: Optional[str] = None) -> Snapshot:
        return Snapshot(
            snake_cells=tuple(self.snake.positions),
            food_cell=self.food,
            score=self.score,
            state=self.status,
            level=self.level,
            high_score=high_score,
            player_name=player_name,
            tick=self.tick,
        )


def start_cell(grid: Grid) -> Cell:
    return (grid.columns // 2, grid.rows // 2)


def new_session(grid: Grid, level: Level, rng: random.Random,
                cfg: Config = CFG) -> Session:
    head = start_cell(grid)
    # Keep the whole starting body on the board for tiny grids.
    length = max(1, min(cfg.initial_length, head[0] + 1))
    snake = Snake.spawn(head, Direction.RIGHT, length)
    session = Session(
        grid=grid,
        snake=snake,
        direction=Direction.RIGHT,
        food=place_food(grid, snake.occupied(), rng),
        level=level,
    )
    if session.food is None:
        session.status = Status.WIN
    return session


# ---------- Input / Update ----------
def buffer_direction(session: Session, direction: Direction) -> bool:
    """
    Overwrite the pending direction slot. A reversal onto the second segment
    is ignored. Returns True if the input was kept.
    """
    if len(session.snake) > 1 and is_opposite(direction, session.direction):
        logger.debug("Ignoring reversal %s while heading %s",
                     direction.name, session.direction.name)
        return False
    session.pending = direction
    return True


def step_session(session: Session, rng: random.Random, award: int = CFG.award) -> Status:
    """
    Advance the session by one tick and return its status afterwards.
    Terminal sessions are left untouched.
    """
    if session.status is not Status.RUNNING:
        return session.status

    # Commit the latest buffered direction once per tick
    if session.pending is not None:
        cand, session.pending = session.pending, None
        if len(session.snake) == 1 or not is_opposite(cand, session.direction):
            session.direction = cand

    move = session.snake.advance(session.direction)

    if not session.grid.contains(move.new_head):
        logger.info("Wall collision at %s after %d ticks, score %d",
                    move.new_head, session.tick, session.score)
        session.status = Status.GAME_OVER
        return session.status

    if move.self_collision:
        logger.info("Self collision at %s after %d ticks, score %d",
                    move.new_head, session.tick, session.score)
        session.status = Status.GAME_OVER
        return session.status

    session.tick += 1

    if move.new_head == session.food:
        session.snake.commit_move(move.new_head, grow=True)
        session.score += award
        session.food = place_food(session.grid, session.snake.occupied(), rng)
        if session.food is None:
            logger.info("Board filled, score %d", session.score)
            session.status = Status.WIN
    else:
        session.snake.commit_move(move.new_head, grow=False)

    return session.status


# ---------- Clock ----------
class TickClock:
    """
    Fixed-period tick source gated on a caller-supplied millisecond clock.
    At most one tick is reported per `due()` call.
    """

    def __init__(self):
        self.interval_ms: Optional[int] = None
        self.last_tick = 0
        self.running = False

    def start(self, interval_ms: int, now_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError("Tick interval must be positive.")
        self.interval_ms = interval_ms
        self.last_tick = now_ms
        self.running = True

    def stop(self) -> None:
        self.running = False

    def due(self, now_ms: int) -> bool:
        if not self.running or now_ms - self.last_tick < self.interval_ms:
            return False
        self.last_tick = now_ms
        return True

# engine.py
from __future__ import annotations
from typing import Callable, List, Optional, Union
import logging
import random

from .config import CFG, Config, Direction, Level
from .game import (
    Session, Snapshot, Status, TickClock,
    buffer_direction, new_session, step_session,
)
from .grid import Grid
from .storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Please enter your name before starting the game!"

SnapshotListener = Callable[[Snapshot], None]


class ValidationError(ValueError):
    """A start command was rejected; the engine state is unchanged."""


class GameEngine:
    """
    Idle -> Running -> GameOver/Win -> (restart) -> Idle.

    The engine owns the session, the tick clock and the high score. Every
    tick while running, and once on the terminal transition, a `Snapshot`
    is passed to each subscribed listener.
    """

    def __init__(
        self,
        store: Optional[HighScoreStore] = None,
        grid: Optional[Grid] = None,
        rng: Optional[random.Random] = None,
        cfg: Config = CFG,
        clock: Optional[TickClock] = None,
    ):
        self.store = store if store is not None else MemoryHighScoreStore()
        self.grid = grid if grid is not None else Grid.from_canvas()
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.cfg = cfg
        self.clock = clock if clock is not None else TickClock()

        self.status = Status.IDLE
        self.session: Optional[Session] = None
        self.player_name: Optional[str] = None
        self.high_score = self.store.load()
        self._listeners: List[SnapshotListener] = []

    # ---------- Listeners ----------
    def subscribe(self, listener: SnapshotListener) -> None:
        self._listeners.append(listener)

    def _emit(self, snap: Snapshot) -> None:
        for listener in self._listeners:
            listener(snap)

    # ---------- Commands ----------
    def start(self, player_name: str, level: Union[Level, str] = Level.BEGINNER,
              now_ms: int = 0) -> Snapshot:
        if self.status is not Status.IDLE:
            logger.debug("Ignoring start while %s", self.status.value)
            return self.snapshot()

        name = (player_name or "").strip()
        if not name:
            raise ValidationError(NAME_REQUIRED)
        if isinstance(level, str):
            try:
                level = Level.from_name(level)
            except KeyError:
                raise ValidationError(f"Unknown level: {level!r}") from None

        self.player_name = name[: self.cfg.max_name_length]
        self.session = new_session(self.grid, level, self.rng, self.cfg)
        self.status = self.session.status
        logger.info("Starting %s game for %s on a %dx%d grid",
                    level.label, self.player_name, self.grid.columns, self.grid.rows)

        if self.status is Status.RUNNING:
            self.clock.start(level.interval_ms, now_ms)
            snap = self.snapshot()
            self._emit(snap)
            return snap
        # Degenerate board with no room for food
        return self._finish()

    def set_direction(self, direction: Direction) -> bool:
        if self.status is not Status.RUNNING:
            return False
        return buffer_direction(self.session, direction)

    def update(self, now_ms: int) -> Optional[Snapshot]:
        """Run a tick if one is due at `now_ms`."""
        if self.status is Status.RUNNING and self.clock.due(now_ms):
            return self.tick()
        return None

    def tick(self) -> Snapshot:
        if self.status is not Status.RUNNING:
            return self.snapshot()

        self.status = step_session(self.session, self.rng, self.cfg.award)
        if self.status.is_terminal:
            return self._finish()

        snap = self.snapshot()
        self._emit(snap)
        return snap

    def restart(self) -> bool:
        if not self.status.is_terminal:
            logger.debug("Ignoring restart while %s", self.status.value)
            return False
        self.session = None
        self.status = Status.IDLE
        return True

    def stop(self) -> None:
        """Abandon a running session without recording its score."""
        self.clock.stop()
        if self.status is Status.RUNNING:
            logger.info("Session stopped at score %d", self.session.score)
            self.session = None
            self.status = Status.IDLE

    # ---------- State ----------
    def snapshot(self) -> Snapshot:
        if self.session is None:
            return Snapshot(
                snake_cells=(),
                food_cell=None,
                score=0,
                state=self.status,
                high_score=self.high_score,
                player_name=self.player_name,
            )
        return self.session.snapshot(self.high_score, self.player_name)

    def _finish(self) -> Snapshot:
        self.clock.stop()
        score = self.session.score
        if self.status is Status.WIN:
            logger.info("%s filled the board with score %d", self.player_name, score)
        else:
            logger.info("Game over for %s with score %d", self.player_name, score)

        if score > self.high_score:
            logger.info("New high score %d (was %d)", score, self.high_score)
            self.high_score = score
            self.store.store(score)

        snap = self.snapshot()
        self._emit(snap)
        return snap

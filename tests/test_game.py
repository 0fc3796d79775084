"""Tests for a single session's tick loop and the tick clock."""

import random

import pytest

from tilesnake.config import Config, Direction, Level
from tilesnake.game import (
    Session, Status, TickClock, buffer_direction, new_session, start_cell, step_session,
)
from tilesnake.grid import Grid
from tilesnake.snake import Snake


@pytest.fixture
def session(grid):
    return new_session(grid, Level.BEGINNER, random.Random(0))


def _session_with(grid, cells, direction, food):
    return Session(grid=grid, snake=Snake(cells), direction=direction,
                   food=food, level=Level.BEGINNER)


class TestNewSession:
    def test_canonical_start(self, session, grid):
        assert start_cell(grid) == (16, 12)
        assert session.snake.cells() == [(16, 12), (15, 12), (14, 12)]
        assert session.direction is Direction.RIGHT
        assert session.score == 0
        assert session.status is Status.RUNNING

    def test_food_is_free_and_in_bounds(self, grid):
        for seed in range(30):
            s = new_session(grid, Level.BEGINNER, random.Random(seed))
            assert grid.contains(s.food)
            assert s.food not in s.snake.occupied()

    def test_start_body_fits_tiny_grid(self, tiny_grid):
        s = new_session(tiny_grid, Level.BEGINNER, random.Random(0), Config(initial_length=3))
        assert s.snake.cells() == [(1, 1), (0, 1)]
        assert all(tiny_grid.contains(c) for c in s.snake.cells())


class TestStep:
    def test_runs_into_right_wall(self, session, grid):
        session.food = (0, 0)
        start_x = session.snake.head[0]
        for _ in range(grid.columns - start_x - 1):
            assert step_session(session, random.Random(0)) is Status.RUNNING
        assert session.snake.head == (grid.columns - 1, 12)
        assert step_session(session, random.Random(0)) is Status.GAME_OVER

    def test_eating_grows_and_scores(self, session):
        session.food = (17, 12)
        step_session(session, random.Random(1), award=10)
        assert session.score == 10
        assert len(session.snake) == 4
        assert session.snake.head == (17, 12)
        assert session.food != (17, 12)
        assert session.food not in session.snake.occupied()

    def test_food_only_moves_when_eaten(self, session):
        session.food = (0, 0)
        for _ in range(5):
            step_session(session, random.Random(0))
        assert session.food == (0, 0)

    def test_growth_is_one_per_meal(self, session):
        rng = random.Random(2)
        for n in range(1, 6):
            hx, hy = session.snake.head
            session.food = (hx + 1, hy)
            step_session(session, rng, award=10)
            assert len(session.snake) == 3 + n
            assert session.score == 10 * n

    def test_self_collision_ends_session(self, grid):
        s = _session_with(grid, [(5, 5), (5, 6), (4, 6), (4, 5), (4, 4)], Direction.UP, (0, 0))
        assert buffer_direction(s, Direction.LEFT)
        assert step_session(s, random.Random(0)) is Status.GAME_OVER
        # Body untouched by the fatal move
        assert s.snake.head == (5, 5)

    def test_terminal_session_is_frozen(self, session):
        session.status = Status.GAME_OVER
        before = session.snake.cells()
        assert step_session(session, random.Random(0)) is Status.GAME_OVER
        assert session.snake.cells() == before
        assert session.tick == 0

    def test_filling_the_board_is_a_win(self, tiny_grid):
        s = _session_with(tiny_grid, [(1, 0), (0, 0), (0, 1)], Direction.DOWN, (1, 1))
        assert step_session(s, random.Random(0), award=10) is Status.WIN
        assert s.food is None
        assert s.score == 10
        assert len(s.snake) == 4


class TestDirectionBuffer:
    def test_reversal_is_ignored(self, session):
        session.food = (0, 0)
        assert buffer_direction(session, Direction.LEFT) is False
        step_session(session, random.Random(0))
        assert session.snake.head == (17, 12)
        assert session.direction is Direction.RIGHT

    def test_reversal_allowed_for_single_segment(self, grid):
        s = _session_with(grid, [(5, 5)], Direction.RIGHT, (0, 0))
        assert buffer_direction(s, Direction.LEFT) is True
        step_session(s, random.Random(0))
        assert s.snake.head == (4, 5)
        assert s.status is Status.RUNNING

    def test_latest_input_wins(self, session):
        session.food = (0, 0)
        buffer_direction(session, Direction.UP)
        buffer_direction(session, Direction.DOWN)
        step_session(session, random.Random(0))
        assert session.snake.head == (16, 13)

    def test_one_cell_per_tick(self, session):
        session.food = (0, 0)
        buffer_direction(session, Direction.UP)
        step_session(session, random.Random(0))
        step_session(session, random.Random(0))
        assert session.snake.head == (16, 10)
        assert session.pending is None

    def test_reversal_after_turn_is_checked_against_new_heading(self, session):
        session.food = (0, 0)
        buffer_direction(session, Direction.UP)
        step_session(session, random.Random(0))
        assert buffer_direction(session, Direction.DOWN) is False
        assert buffer_direction(session, Direction.LEFT) is True


class TestTickClock:
    def test_fires_once_per_interval(self):
        clock = TickClock()
        clock.start(100, now_ms=0)
        assert not clock.due(50)
        assert clock.due(100)
        assert not clock.due(150)
        assert clock.due(230)
        assert not clock.due(300)
        assert clock.due(330)

    def test_stopped_clock_never_fires(self):
        clock = TickClock()
        assert not clock.due(1000)
        clock.start(100, now_ms=0)
        clock.stop()
        assert not clock.due(10_000)

    def test_interval_must_be_positive(self):
        with pytest.raises(ValueError):
            TickClock().start(0, now_ms=0)

# food.py
from __future__ import annotations
import random
from typing import AbstractSet, Optional

from .grid import Cell, Grid


def place_food(grid: Grid, occupied: AbstractSet[Cell],
               rng: random.Random) -> Optional[Cell]:
    """
    Pick a uniformly random free cell by rejection sampling.

    Returns None when every cell is occupied; the caller treats that as a win.
    Sampling gives up after `grid.cell_count` rejections and picks from the
    enumerated free cells instead, so crowded boards still terminate promptly.
    """
    free_count = grid.cell_count - sum(1 for c in occupied if grid.contains(c))
    if free_count <= 0:
        return None

    for _ in range(grid.cell_count):
        cand = (rng.randrange(grid.columns), rng.randrange(grid.rows))
        if cand not in occupied:
            return cand

    free = [c for c in grid.cells() if c not in occupied]
    return rng.choice(free)

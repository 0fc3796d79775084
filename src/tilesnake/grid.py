# grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .config import WIDTH, HEIGHT, TILE_SIZE

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Tile coordinate space. Cells are (x, y) with 0 <= x < columns, 0 <= y < rows."""
    tile_width: int
    tile_height: int
    columns: int
    rows: int

    def __post_init__(self):
        if min(self.tile_width, self.tile_height, self.columns, self.rows) <= 0:
            raise ValueError("Grid dimensions must be positive.")

    @classmethod
    def from_canvas(cls, canvas_width: int = WIDTH, canvas_height: int = HEIGHT,
                    tile_width: int = TILE_SIZE, tile_height: int | None = None) -> Grid:
        if tile_height is None:
            tile_height = tile_width
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("Tile size must be positive.")
        if canvas_width % tile_width or canvas_height % tile_height:
            raise ValueError(
                f"Canvas {canvas_width}x{canvas_height} is not divisible "
                f"into {tile_width}x{tile_height} tiles."
            )
        return cls(
            tile_width=tile_width,
            tile_height=tile_height,
            columns=canvas_width // tile_width,
            rows=canvas_height // tile_height,
        )

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.columns * self.tile_width, self.rows * self.tile_height

    def contains(self, cell) -> bool:
        """True iff `cell` is an integer pair inside the board. Never raises."""
        try:
            x, y = cell
        except (TypeError, ValueError):
            return False
        # bool is an int subclass but never a coordinate
        if type(x) is not int or type(y) is not int:
            return False
        return 0 <= x < self.columns and 0 <= y < self.rows

    def cells(self) -> Iterator[Cell]:
        for y in range(self.rows):
            for x in range(self.columns):
                yield (x, y)

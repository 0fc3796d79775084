# render.py
from typing import Optional, Tuple
import pygame # type: ignore

from .config import BG, GREEN, HEAD, RED, GOLD, TEXT, DIM, GRID_LINE, Level
from .game import Snapshot, Status
from .grid import Cell, Grid

# ---------- Debug text ----------
def food_debug_text(cell: Optional[Cell], grid: Grid) -> str:
    if cell is None or not grid.contains(cell):
        return "INVALID"
    return f"({cell[0]}, {cell[1]})"

def grid_info_text(grid: Grid) -> str:
    return f"{grid.columns}x{grid.rows} ({grid.cell_count} tiles)"

def canvas_info_text(grid: Grid) -> str:
    w, h = grid.canvas_size
    return (f"Canvas: {w}x{h} | Grid: {grid.tile_width}x{grid.tile_height} | "
            f"Tiles: {grid.columns}x{grid.rows}")

def cell_rect(grid: Grid, cell: Cell) -> Tuple[int, int, int, int]:
    """Pixel rectangle (x, y, w, h) of a cell."""
    x, y = cell
    return (x * grid.tile_width, y * grid.tile_height, grid.tile_width, grid.tile_height)

# ---------- Drawing ----------
def draw_cell(screen: pygame.Surface, grid: Grid, cell: Cell,
              color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, pygame.Rect(*cell_rect(grid, cell)))

def draw_food(screen: pygame.Surface, grid: Grid, cell: Cell) -> None:
    # Filled tile plus a bright centre dot so food stays visible on any background
    x, y, w, h = cell_rect(grid, cell)
    pygame.draw.rect(screen, RED, pygame.Rect(x, y, w, h))
    pygame.draw.circle(screen, GOLD, (x + w // 2, y + h // 2), max(2, min(w, h) // 5))
    pygame.draw.rect(screen, GOLD, pygame.Rect(x, y, w, h), 1)

def draw_debug_grid(screen: pygame.Surface, grid: Grid) -> None:
    w, h = grid.canvas_size
    for x in range(0, w, grid.tile_width):
        pygame.draw.line(screen, GRID_LINE, (x, 0), (x, h))
    for y in range(0, h, grid.tile_height):
        pygame.draw.line(screen, GRID_LINE, (0, y), (w, y))

def draw_game(screen: pygame.Surface, font: pygame.font.Font, grid: Grid,
              snap: Snapshot, debug: bool = False) -> None:
    screen.fill(BG)
    if debug:
        draw_debug_grid(screen, grid)

    if snap.food_cell is not None:
        draw_food(screen, grid, snap.food_cell)
    for i, cell in enumerate(snap.snake_cells):
        draw_cell(screen, grid, cell, HEAD if i == 0 else GREEN)

    hud = f"Score: {snap.score}   High: {snap.high_score}"
    if snap.level is not None:
        hud += f"   Level: {snap.level.label}"
    screen.blit(font.render(hud, True, TEXT), (8, 6))

    if debug:
        lines = [
            f"Food: {food_debug_text(snap.food_cell, grid)}",
            f"Grid: {grid_info_text(grid)}",
            canvas_info_text(grid),
        ]
        _, height = grid.canvas_size
        for i, line in enumerate(reversed(lines)):
            screen.blit(font.render(line, True, DIM), (8, height - 22 * (i + 1)))

def _overlay(screen: pygame.Surface) -> None:
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

def _centered(screen: pygame.Surface, font: pygame.font.Font, lines) -> None:
    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    top = cy - 16 * len(lines)
    for i, (text, color) in enumerate(lines):
        surf = font.render(text, True, color)
        screen.blit(surf, surf.get_rect(center=(cx, top + 32 * i)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    _overlay(screen)
    title = "You filled the board!" if snap.state is Status.WIN else "Game Over!"
    lines = [(title, (240, 240, 250)), (f"Score: {snap.score}", TEXT)]
    if snap.score and snap.score >= snap.high_score:
        lines.append(("New high score!", GOLD))
    lines.append(("Press R to play again", TEXT))
    _centered(screen, font, lines)

def draw_start_screen(screen: pygame.Surface, font: pygame.font.Font, name: str,
                      selected: Level, high_score: int, error: Optional[str] = None) -> None:
    screen.fill(BG)
    lines = [
        ("Snake", (240, 240, 250)),
        (f"Your name: {name}_", TEXT),
        ("", TEXT),
    ]
    for level in Level:
        marker = ">" if level is selected else " "
        lines.append((f"{marker} {level.label}", GOLD if level is selected else TEXT))
    lines.append(("Tab: change level   Enter: play", DIM))
    lines.append((f"High score: {high_score}", DIM))
    if error:
        lines.append((error, RED))
    _centered(screen, font, lines)

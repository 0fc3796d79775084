# main.py
import argparse
import logging
from dataclasses import replace
import pygame # type: ignore

from .config import CFG, Direction, Level, FPS
from .engine import GameEngine, ValidationError
from .game import Status
from .grid import Grid
from .render import draw_game, draw_game_over, draw_start_screen
from .storage import DEFAULT_PATH, JsonHighScoreStore

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,       pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,   pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,   pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake game")
    parser.add_argument("--name", type=str, default=None,
                        help="player name (skips the start screen together with --level)")
    parser.add_argument("--level", type=str, default=None,
                        choices=[level.label for level in Level])
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement")
    parser.add_argument("--scores-file", type=str, default=str(DEFAULT_PATH))
    parser.add_argument("--debug-grid", action="store_true",
                        help="start with the debug grid overlay on")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = JsonHighScoreStore(args.scores_file)
    cfg = replace(CFG, seed=args.seed)
    grid = Grid.from_canvas()
    engine = GameEngine(store=store, grid=grid, cfg=cfg)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode(grid.canvas_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    name = args.name or store.load_player_name() or ""
    level_idx = 0
    levels = list(Level)
    error = None
    debug = args.debug_grid

    def try_start(level: Level) -> None:
        nonlocal error
        try:
            engine.start(name, level, pygame.time.get_ticks())
        except ValidationError as e:
            error = str(e)
            return
        error = None
        store.store_player_name(engine.player_name)

    if args.name and args.level:
        try_start(Level.from_name(args.level))
        if error:
            print(error)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type != pygame.KEYDOWN:
                continue
            elif event.key == pygame.K_ESCAPE:
                running = False
            elif engine.status is Status.IDLE:
                if event.key == pygame.K_RETURN:
                    try_start(levels[level_idx])
                elif event.key == pygame.K_TAB:
                    level_idx = (level_idx + 1) % len(levels)
                elif event.key == pygame.K_BACKSPACE:
                    name = name[:-1]
                elif event.unicode.isprintable() and len(name) < cfg.max_name_length:
                    name += event.unicode
            elif engine.status is Status.RUNNING:
                if event.key in KEY_DIRECTIONS:
                    engine.set_direction(KEY_DIRECTIONS[event.key])
                elif event.key == pygame.K_g:
                    debug = not debug
            elif event.key == pygame.K_r:
                engine.restart()

        # 2) update
        engine.update(pygame.time.get_ticks())

        # 3) render
        if engine.status is Status.IDLE:
            draw_start_screen(screen, font, name, levels[level_idx], engine.high_score, error)
        else:
            snap = engine.snapshot()
            draw_game(screen, font, grid, snap, debug)
            if snap.state.is_terminal:
                draw_game_over(screen, font, snap)
        pygame.display.flip()
        clock.tick(FPS)  # movement gated by the engine's tick clock

    engine.stop()
    pygame.quit()

if __name__ == "__main__":
    main()

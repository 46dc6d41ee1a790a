# main.py
from __future__ import annotations
import argparse
import logging
from typing import Optional

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CELL_SIZE, FPS, BG, RED, YELLOW, TEXT, Config
from .grid import Grid
from .session import Frame, Game
from .snake import Direction

logger = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

# ---------- Input / Draw ----------
def poll_input() -> tuple[bool, Optional[Direction]]:
    """
    Drain the event queue. Returns (keep_running, first arrow key pressed
    this frame or None).
    """
    pressed = None
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False, None
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False, None
            if pressed is None:
                pressed = KEYMAP.get(event.key)
    return True, pressed

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, frame: Frame, cell_size: int) -> None:
    screen.fill(BG)
    # snake
    for x, y in frame.body:
        pygame.draw.rect(screen, RED, pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size))
    # apple
    if frame.apple is not None:
        half = cell_size / 2
        center = (frame.apple.x * cell_size + half, frame.apple.y * cell_size + half)
        pygame.draw.circle(screen, YELLOW, center, half)
    # score
    txt = font.render(f"Score: {frame.score}", True, TEXT)
    screen.blit(txt, (20, 20))

# ---------- Main ----------
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in pixels")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    parser.add_argument(
        "--avoid-snake",
        action="store_true",
        help="never spawn apples under the snake",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    cfg = Config(seed=args.seed, avoid_snake_on_spawn=args.avoid_snake)
    grid = Grid.from_viewport(args.width, args.height, args.cell_size)

    pygame.init()
    font = pygame.font.SysFont(None, 30)
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    game = Game(grid, cfg)
    logger.info("Starting on a %dx%d grid", grid.columns, grid.rows)

    delta = 0.0
    running = True
    while running:
        # 1) input
        running, pressed = poll_input()
        if not running:
            break

        # 2) update; a finished session is replaced inside Game
        now = pygame.time.get_ticks() / 1000.0
        game.tick(delta, now, pressed)

        # 3) render
        draw_frame(screen, font, game.frame(), args.cell_size)
        pygame.display.flip()
        delta = clock.tick(args.fps) / 1000.0

    pygame.quit()
    print(f"Games played: {game.games_played}, high score: {game.high_score.best}")

if __name__ == "__main__":
    main()

# main.py
from __future__ import annotations
import argparse
import logging
import random
from typing import Dict, Optional, Sequence, Tuple

import pygame # type: ignore

from .config import CELL_SIZE, BG, GRID, HEAD, BODY, REWARD, TEXT, CFG
from .game import GameStatus, Heading, RandomSource, World

logger = logging.getLogger(__name__)

KEY_TO_HEADING: Dict[int, Heading] = {
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_a: Heading.LEFT,
    pygame.K_UP: Heading.UP,
    pygame.K_w: Heading.UP,
    pygame.K_RIGHT: Heading.RIGHT,
    pygame.K_d: Heading.RIGHT,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_s: Heading.DOWN,
}


# ---------- Helpers ----------
def key_to_heading(key: int) -> Optional[Heading]:
    return KEY_TO_HEADING.get(key)


def random_spawn_index(width: int, length: int, rng: RandomSource) -> int:
    """Random head cell with room for the whole body to its left in the same row."""
    if length > width:
        raise ValueError(f"snake of length {length} does not fit in a row of width {width}")
    row = rng(width)
    col = (length - 1) + rng(width - length + 1)
    return row * width + col


def new_world(width: int, length: int, rng: RandomSource) -> World:
    spawn = random_spawn_index(width, length, rng)
    world = World(width, spawn, Heading.RIGHT, length, rng=rng)
    logger.info("New world: %r", world)
    return world


def cell_rect(idx: int, width: int) -> pygame.Rect:
    col = idx % width
    row = idx // width
    return pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)


# ---------- Input / Draw ----------
def handle_input(world: World) -> Tuple[bool, bool]:
    """Process events; steer the snake. Returns (keep_running, restart_requested)."""
    restart = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False, False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_r and world.status is not GameStatus.PLAYED:
                restart = True
                continue
            heading = key_to_heading(event.key)
            if heading is not None and heading is not world.heading:
                world.set_heading(heading)
    return True, restart


def draw_grid(screen: pygame.Surface, width: int) -> None:
    extent = width * CELL_SIZE
    for i in range(width + 1):
        pygame.draw.line(screen, GRID, (i * CELL_SIZE, 0), (i * CELL_SIZE, extent))
        pygame.draw.line(screen, GRID, (0, i * CELL_SIZE), (extent, i * CELL_SIZE))


def draw_world(screen: pygame.Surface, font: pygame.font.Font, world: World) -> None:
    width = world.width
    screen.fill(BG)
    draw_grid(screen, width)

    body = world.body_view()
    head = int(body[0])
    # body, skipping segments stacked on the head after a collision
    for idx in body[1:]:
        if int(idx) != head:
            pygame.draw.rect(screen, BODY, cell_rect(int(idx), width))
    pygame.draw.rect(screen, HEAD, cell_rect(head, width))

    reward = world.reward_cell
    if reward is not None:
        pygame.draw.rect(screen, REWARD, cell_rect(reward, width))

    if world.status is not GameStatus.PLAYED:
        msg = "YOU WIN" if world.status is GameStatus.WON else "GAME OVER"
        txt = font.render(f"{msg} - length {world.body_len()} - press R", True, TEXT)
        screen.blit(txt, txt.get_rect(center=(width * CELL_SIZE // 2, width * CELL_SIZE // 2)))


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wraparound grid")
    parser.add_argument("--width", type=int, default=CFG.world_width, help="cells per side")
    parser.add_argument("--snake-length", type=int, default=CFG.snake_length)
    parser.add_argument("--fps", type=int, default=CFG.fps, help="ticks per second")
    parser.add_argument("--seed", type=int, default=CFG.seed)
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    if args.width < 2:
        parser.error("--width must be at least 2")
    if not 1 <= args.snake_length <= args.width:
        parser.error("--snake-length must be between 1 and --width")
    if args.fps < 1:
        parser.error("--fps must be positive")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    rng = random.Random(args.seed).randrange
    world = new_world(args.width, args.snake_length, rng)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((args.width * CELL_SIZE, args.width * CELL_SIZE))
    pygame.display.set_caption("Snake - wraparound")
    clock = pygame.time.Clock()

    running = True
    while running:
        # 1) input
        running, restart = handle_input(world)
        if not running:
            break
        if restart:
            world = new_world(args.width, args.snake_length, rng)

        # 2) update
        prev_status = world.status
        world.advance()
        if world.status is not prev_status:
            print(f"{world.status.name}: length={world.body_len()}")

        # 3) render
        draw_world(screen, font, world)
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()

if __name__ == "__main__":
    main()

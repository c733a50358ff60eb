# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional
import logging
import random

import numpy as np  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT

logger = logging.getLogger(__name__)

# Uniform integer in [0, n)
RandomSource = Callable[[int], int]


class Heading(Enum):
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT


class GameStatus(Enum):
    PLAYED = "played"
    WON = "won"
    LOST = "lost"


# ---------- Helpers ----------
def place_reward(max_cell: int, occupied: Iterable[int], rng: RandomSource) -> Optional[int]:
    """
    Rejection-sample a cell in [0, max_cell) that is not in `occupied`.
    Returns None if every cell is taken.
    """
    taken = {c for c in occupied if 0 <= c < max_cell}
    if len(taken) >= max_cell:
        return None
    while True:
        cell = rng(max_cell)
        if cell not in taken:
            return cell


# ---------- State ----------
@dataclass
class Snake:
    body: List[int]     # head at index 0
    heading: Heading


def new_snake(spawn_index: int, heading: Heading, length: int) -> Snake:
    return Snake(
        body=[spawn_index - i for i in range(length)],
        heading=heading,
    )


class World:
    """
    A toroidal width x width board holding one snake and one reward cell.

    Cells are row-major indices in [0, width*width). The driver calls
    advance() once per tick and set_heading() between ticks; everything
    else is read-only.
    """

    def __init__(
        self,
        width: int,
        spawn_index: int,
        heading: Heading,
        snake_length: int,
        rng: RandomSource | None = None,
    ):
        size = width * width
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        if snake_length < 1:
            raise ValueError(f"snake_length must be positive, got {snake_length}")
        if snake_length >= size:
            raise ValueError(
                f"snake_length {snake_length} leaves no room for a reward on a {width}x{width} board"
            )
        if not 0 <= spawn_index < size:
            raise ValueError(f"spawn_index {spawn_index} outside [0, {size})")
        tail = spawn_index - snake_length + 1
        if tail < 0 or tail // width != spawn_index // width:
            raise ValueError(
                f"snake of length {snake_length} spawned at {spawn_index} does not fit in one row"
            )

        self._width = width
        self._size = size
        self._rng: RandomSource = rng if rng is not None else random.randrange
        self.snake = new_snake(spawn_index, heading, snake_length)
        self._reward_cell = place_reward(size, self.snake.body, self._rng)
        self._status = GameStatus.PLAYED

    # Accessors ----------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def size(self) -> int:
        return self._size

    @property
    def reward_cell(self) -> Optional[int]:
        return self._reward_cell

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def heading(self) -> Heading:
        return self.snake.heading

    def head_index(self) -> int:
        return self.snake.body[0]

    def body_len(self) -> int:
        return len(self.snake.body)

    def body_view(self) -> np.ndarray:
        """
        Read-only snapshot of the body, head first.
        Only valid until the next advance() or set_heading().
        """
        view = np.array(self.snake.body, dtype=np.int64)
        view.flags.writeable = False
        return view

    # Geometry -----------------------------------------------------------------
    def next_cell(self, heading: Heading) -> int:
        """Cell the head would enter moving one step along `heading`, wrapping at every edge."""
        h = self.head_index()
        w = self._width
        row = h // w
        if heading is Heading.RIGHT:
            return row * w + (h + 1) % w
        if heading is Heading.LEFT:
            return row * w + (h - 1) % w
        if heading is Heading.UP:
            return (h - w) % self._size
        if heading is Heading.DOWN:
            return (h + w) % self._size
        raise ValueError(f"Unknown heading: {heading!r}")

    # Mutation -----------------------------------------------------------------
    def set_heading(self, heading: Heading) -> bool:
        """Change direction unless it would turn the head straight back onto the neck."""
        body = self.snake.body
        if len(body) > 1 and self.next_cell(heading) == body[1]:
            logger.debug("Rejected heading %s: reverses onto cell %s", heading.name, body[1])
            return False
        self.snake.heading = heading
        return True

    def advance(self) -> None:
        """Advance the game by one tick. Won and Lost absorb every further tick."""
        if self._status is GameStatus.PLAYED:
            self.move_whole_snake()
        elif self._status is GameStatus.WON:
            pass
        elif self._status is GameStatus.LOST:
            pass
        else:
            raise ValueError(f"Unknown game status: {self._status!r}")

    def move_whole_snake(self) -> None:
        body = self.snake.body
        prev = list(body)

        body[0] = self.next_cell(self.snake.heading)
        for i in range(1, len(body)):
            body[i] = prev[i - 1]

        # Self collision
        if body[0] in body[1:]:
            self._status = GameStatus.LOST
            logger.info("Game lost: head ran into its body at cell %s", body[0])

        # Reward (checked even after a collision this tick)
        if self._reward_cell == body[0]:
            if len(body) < self._size:
                body.append(prev[0])
            if len(body) < self._size:
                self._reward_cell = place_reward(self._size, body, self._rng)
                logger.debug("Snake grew to %s, reward moved to %s", len(body), self._reward_cell)
            else:
                self._reward_cell = None
                if self._status is GameStatus.PLAYED:
                    self._status = GameStatus.WON
                    logger.info("Game won: snake fills all %s cells", self._size)

    def __repr__(self):
        return (
            f"<World width={self._width}, status={self._status.name}, "
            f"head={self.head_index()}, length={self.body_len()}, reward={self._reward_cell}>"
        )


def create_world(
    width: int,
    spawn_index: int,
    heading: Heading,
    snake_length: int,
    rng: RandomSource | None = None,
) -> World:
    return World(width, spawn_index, heading, snake_length, rng=rng)

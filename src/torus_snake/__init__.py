"""Deterministic core of a snake game on a wraparound square grid."""

from torus_snake.game import (
    GameStatus,
    Heading,
    RandomSource,
    Snake,
    World,
    create_world,
    new_snake,
    place_reward,
)

__all__ = [
    "GameStatus",
    "Heading",
    "RandomSource",
    "Snake",
    "World",
    "create_world",
    "new_snake",
    "place_reward",
]

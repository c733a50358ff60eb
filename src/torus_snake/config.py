from dataclasses import dataclass
import random

# ----- Window & grid -----
CELL_SIZE = 20
WORLD_WIDTH = 32

# ----- Colors -----
BG     = (235, 235, 240)
GRID   = (180, 180, 190)
HEAD   = (120, 120, 189)   # #7878bd
BODY   = (0, 0, 0)
REWARD = (255, 0, 0)
TEXT   = (30, 30, 40)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Tunables -----
@dataclass
class Config:
    seed: int = 0
    world_width: int = WORLD_WIDTH
    snake_length: int = 5
    fps: int = 10

CFG = Config(seed=0)

# Make randomness reproducible for debugging
random.seed(CFG.seed)

from dataclasses import dataclass
from typing import Optional

# ----- Grid & window -----
GRID_EXTENT = 30                   # cells per side (toroidal)
CELL_SIZE = 20                     # pixels per cell
WIDTH, HEIGHT = GRID_EXTENT * CELL_SIZE, GRID_EXTENT * CELL_SIZE

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)
BLUE  = (0, 0, 255)

# ----- Initial snake (head first) -----
START_BODY = [(5, 5), (4, 5), (3, 5)]

# ----- Food -----
# Extra tail copies appended when a special food is eaten (net growth +4).
SPECIAL_GROWTH_EXTRA = 3
# Normal food when rng.integers(0, FOOD_ROLL_RANGE) < NORMAL_FOOD_THRESHOLD.
FOOD_ROLL_RANGE = 10
NORMAL_FOOD_THRESHOLD = 8

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> fresh OS entropy
    move_every_ms: int = 150
    max_food_attempts: int = 1000
    fps: int = 60

CFG = Config()

# food.py
from enum import Enum
from typing import Collection, List, Tuple
import logging

import numpy as np  # type: ignore

from .config import (
    GRID_EXTENT,
    FOOD_ROLL_RANGE,
    NORMAL_FOOD_THRESHOLD,
    CFG,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class FoodType(Enum):
    NORMAL = "normal"
    SPECIAL = "special"


class FoodPlacementError(RuntimeError):
    """Raised when every interior cell is occupied."""


def _interior_free_cells(occupied: Collection[Position]) -> List[Position]:
    return [
        (x, y)
        for x in range(1, GRID_EXTENT - 1)
        for y in range(1, GRID_EXTENT - 1)
        if (x, y) not in occupied
    ]


def _roll_food_type(rng: np.random.Generator) -> FoodType:
    if rng.integers(0, FOOD_ROLL_RANGE) < NORMAL_FOOD_THRESHOLD:
        return FoodType.NORMAL
    return FoodType.SPECIAL


def generate_food(
    occupied: Collection[Position],
    rng: np.random.Generator,
    max_attempts: int = CFG.max_food_attempts,
) -> Tuple[Position, FoodType]:
    """
    Pick a free interior cell (the outer border ring is never used) and a
    food type: 80% normal, 20% special.

    Cells are rejection-sampled; the snake is normally far smaller than the
    interior so a hit comes within a few draws. After `max_attempts` misses
    the free cells are enumerated and one is chosen uniformly, so the call
    always terminates. Raises FoodPlacementError if no interior cell is free.
    """
    occupied = set(occupied)
    for _ in range(max_attempts):
        food = (
            int(rng.integers(1, GRID_EXTENT - 1)),
            int(rng.integers(1, GRID_EXTENT - 1)),
        )
        if food not in occupied:
            return food, _roll_food_type(rng)

    free = _interior_free_cells(occupied)
    if not free:
        raise FoodPlacementError(
            f"no free interior cell on a {GRID_EXTENT}x{GRID_EXTENT} grid"
        )
    logger.debug(
        "food sampling missed %d times, choosing among %d free cells",
        max_attempts, len(free),
    )
    food = free[int(rng.integers(len(free)))]
    return food, _roll_food_type(rng)

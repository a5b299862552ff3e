"""Snake on a wrap-around grid."""

from wrap_snake.food import FoodPlacementError, FoodType, generate_food
from wrap_snake.game import (
    Direction,
    GameState,
    Key,
    Snake,
    handle_input,
    new_game_state,
    tick_due,
    tick_interval_ms,
    update,
)

__all__ = [
    "Direction",
    "FoodPlacementError",
    "FoodType",
    "GameState",
    "Key",
    "Snake",
    "generate_food",
    "handle_input",
    "new_game_state",
    "tick_due",
    "tick_interval_ms",
    "update",
]

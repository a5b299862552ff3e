# game.py
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Optional
import logging

import numpy as np  # type: ignore

from .config import GRID_EXTENT, START_BODY, SPECIAL_GROWTH_EXTRA, CFG, Config
from .food import FoodType, Position, generate_food

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Key(Enum):
    """Logical inputs understood by handle_input(); the driver maps raw keys here."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ACCELERATE = "accelerate"
    RESTART = "restart"


KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a.value[0] == -b.value[0] and a.value[1] == -b.value[1]

def wrap(x: int, y: int) -> Position:
    return ((x + GRID_EXTENT) % GRID_EXTENT, (y + GRID_EXTENT) % GRID_EXTENT)

# ---------- State ----------
@dataclass
class Snake:
    body: List[Position]           # head at index 0
    direction: Direction           # committed on the last tick
    next_direction: Direction      # applied at the start of the next tick

    @property
    def head(self) -> Position:
        return self.body[0]

@dataclass
class GameState:
    snake: Snake
    food: Position
    food_type: FoodType
    game_over: bool
    base_tick_ms: int              # step interval when not accelerating
    is_accelerating: bool
    rng: np.random.Generator = field(repr=False, compare=False)
    config: Config = field(repr=False, compare=False)

def new_game_state(rng: Optional[np.random.Generator] = None, config: Config = CFG) -> GameState:
    if rng is None:
        rng = np.random.default_rng(config.seed)
    body = list(START_BODY)
    food, food_type = generate_food(body, rng, config.max_food_attempts)
    return GameState(
        snake=Snake(body=body, direction=Direction.RIGHT, next_direction=Direction.RIGHT),
        food=food,
        food_type=food_type,
        game_over=False,
        base_tick_ms=config.move_every_ms,
        is_accelerating=False,
        rng=rng,
        config=config,
    )

def _restart(state: GameState) -> None:
    fresh = new_game_state(state.rng, state.config)
    for f in fields(GameState):
        setattr(state, f.name, getattr(fresh, f.name))
    logger.info("game restarted")

# ---------- Tick / Input ----------
def tick_interval_ms(state: GameState) -> int:
    """Acceleration halves the step interval."""
    if state.is_accelerating:
        return state.base_tick_ms // 2
    return state.base_tick_ms

def tick_due(state: GameState, elapsed_ms: int) -> bool:
    return elapsed_ms >= tick_interval_ms(state)

def update(state: GameState) -> None:
    """
    Advance the game by one tick.
    - Commits the pending direction, moves the head one cell and wraps it
      around the grid edges (there are no walls).
    - Running into the body sets game_over and leaves the body as it was.
    - Eating grows the snake: the tail is kept, and special food also
      duplicates the tail SPECIAL_GROWTH_EXTRA times.
    """
    if state.game_over:
        return

    snake = state.snake
    snake.direction = snake.next_direction

    hx, hy = snake.head
    dx, dy = snake.direction.value
    new_head = wrap(hx + dx, hy + dy)

    # Self collision, checked against the body before it moves
    if new_head in snake.body:
        state.game_over = True
        logger.info("game over at %s, length %d", new_head, len(snake.body))
        return

    snake.body.insert(0, new_head)

    if new_head == state.food:
        eaten = state.food_type
        new_food, new_food_type = generate_food(snake.body, state.rng, state.config.max_food_attempts)
        if eaten is FoodType.SPECIAL:
            tail = snake.body[-1]
            snake.body.extend([tail] * SPECIAL_GROWTH_EXTRA)
        state.food, state.food_type = new_food, new_food_type
        logger.debug("ate %s food, length %d", eaten.value, len(snake.body))
    else:
        snake.body.pop()

def handle_input(state: GameState, key: object, pressed: bool) -> None:
    """
    Apply one key event.
    - Game over: only a RESTART press is accepted; it resets the whole state.
    - ACCELERATE tracks the held state of the key.
    - Direction presses queue the next direction (no 180° turns against the
      committed direction; the latest valid request before a tick wins).
      Direction releases are dropped, so letting go of an old arrow key cannot
      overwrite a newer turn queued before the tick.
    Anything else is ignored.
    """
    if state.game_over:
        if key is Key.RESTART and pressed:
            _restart(state)
        return

    if key is Key.ACCELERATE:
        state.is_accelerating = pressed
        return

    cand = KEY_DIRECTIONS.get(key) if isinstance(key, Key) else None
    if cand is None or not pressed:
        return
    if not is_opposite(cand, state.snake.direction):
        state.snake.next_direction = cand

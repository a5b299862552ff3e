# render.py
from typing import Tuple
import pygame # type: ignore

from .config import CELL_SIZE, BG, GREEN, RED, BLUE
from .food import FoodType
from .game import GameState

FOOD_COLORS = {
    FoodType.NORMAL: RED,
    FoodType.SPECIAL: BLUE,
}

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    # 1px inset leaves a grid line between neighbouring cells
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE - 1, CELL_SIZE - 1)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, state: GameState) -> None:
    screen.fill(BG)
    # snake turns red once the game is over
    color = RED if state.game_over else GREEN
    for x, y in state.snake.body:
        draw_cell(screen, x, y, color)
    # food
    draw_cell(screen, state.food[0], state.food[1], FOOD_COLORS[state.food_type])

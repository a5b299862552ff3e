# main.py
import argparse
import logging
from dataclasses import replace
from typing import Iterable, List, Optional

import numpy as np  # type: ignore
import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .game import GameState, Key, new_game_state, handle_input, update, tick_due
from .render import draw_game

logger = logging.getLogger(__name__)

KEY_BINDINGS = {
    pygame.K_UP: Key.UP,
    pygame.K_w: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_s: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_a: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_d: Key.RIGHT,
    pygame.K_SPACE: Key.ACCELERATE,
    pygame.K_r: Key.RESTART,
}

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    parser.add_argument(
        "--seed",
        type=int,
        default=CFG.seed,
        help="Seed for food placement. Omit for a different game every run.",
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=CFG.move_every_ms,
        help="Milliseconds per step (halved while SPACE is held).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)

def config_from_args(args: argparse.Namespace) -> Config:
    if args.tick_ms <= 0:
        raise ValueError(f"--tick-ms must be positive, got {args.tick_ms}")
    return replace(CFG, seed=args.seed, move_every_ms=args.tick_ms)

def handle_events(state: GameState, events: Iterable[pygame.event.Event]) -> bool:
    """Feed key presses and releases to the game. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            continue
        pressed = event.type == pygame.KEYDOWN
        if event.key == pygame.K_ESCAPE and pressed:
            return False
        if event.key in KEY_BINDINGS:
            handle_input(state, KEY_BINDINGS[event.key], pressed)
    return True

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()

        state = new_game_state(np.random.default_rng(cfg.seed), cfg)
        last_update = pygame.time.get_ticks()
        logger.info("starting: tick=%dms seed=%s", cfg.move_every_ms, cfg.seed)

        while True:
            # 1) input (press and release, for held acceleration)
            if not handle_events(state, pygame.event.get()):
                break

            # 2) update
            now = pygame.time.get_ticks()
            if tick_due(state, now - last_update):
                update(state)
                last_update = now

            # 3) render
            draw_game(screen, state)
            pygame.display.flip()
            clock.tick(cfg.fps)  # movement gated by tick_due, not by FPS
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()

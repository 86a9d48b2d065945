from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from tris_engine.game import Action, GameConfig, TrisGame
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_x: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.PAUSE,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Tris with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell_size", type=int, default=30)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TrisGame(GameConfig(random_seed=args.seed))
        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game.config.width, game.config.height))
        pygame.display.set_caption("Tris")

        running = True
        while running:
            # Milliseconds since the previous frame; the game drops it while paused
            dt = clock.tick(args.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            game.step(action)

            game.advance(dt)
            renderer.draw(screen, game.snapshot())

        print(f"Final score: {game.score} (level {game.level}, {game.lines_cleared} lines)")
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()

"""Window and event loop for Flappy Bird."""

import argparse
from pathlib import Path

import pygame

from arcadecases.flappy.game import Game
from arcadecases.flappy.settings import ASSETS_PATH, WINDOW_HEIGHT, WINDOW_WIDTH, load_assets


def is_quit_event(event) -> bool:
    """Return True for a window close or an Escape key press."""
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE


def main(argv=None) -> int:
    """Run Flappy Bird until its window is closed."""
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument(
        "--assets", type=Path, default=ASSETS_PATH,
        help="directory holding graphics/, sounds/ and fonts/",
    )
    args = parser.parse_args(argv)

    try:
        assets = load_assets(args.assets)
        pygame.init()
        window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Flappy Bird")
        game = Game(assets, window)
        clock = pygame.time.Clock()
        dt = 0.0
        running = True

        while running:
            for event in pygame.event.get():
                if is_quit_event(event):
                    running = False
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
                    game.handle_inputs(event)
            if not running:
                break
            game.update(dt)
            game.render()
            dt = clock.tick() / 1000.0
    finally:
        pygame.quit()
    return 0
"""Window, event loop and frame timing for Pong."""

import argparse
import time
from pathlib import Path

import pygame

from arcadecases.pong.assets import load_fonts, load_sounds
from arcadecases.pong.config import (
    BLACK,
    FPS,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from arcadecases.pong.game import SINGLEPLAYER, Key, Pong

_KEY_CODES = {
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


def pressed_keys(key_state) -> set:
    """Return the game keys held down in a pygame key state."""
    return {key for code, key in _KEY_CODES.items() if key_state[code]}


def _drive_computer(pong: Pong, pressed) -> None:
    if pong.mode != SINGLEPLAYER:
        return
    if pong.ball.vx > 0 and pong.ball.x >= TABLE_WIDTH // 2:
        pong.handle_input(pressed)
    else:
        pong.player2.vy = 0


def main(argv=None) -> int:
    """Run the Pong game until its window is closed."""
    parser = argparse.ArgumentParser(prog="pong", description="Play Pong.")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding fonts/ and sounds/"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        display = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Pong")
        table = pygame.Surface((TABLE_WIDTH, TABLE_HEIGHT))
        fonts = load_fonts(args.assets)
        pong = Pong(load_sounds(args.assets))
        clock = pygame.time.Clock()
        last_frame = time.perf_counter()

        while True:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            for event in events:
                if event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    pong.handle_input(pressed_keys(pygame.key.get_pressed()))
            _drive_computer(pong, pressed_keys(pygame.key.get_pressed()))

            now = time.perf_counter()
            pong.update(now - last_frame)
            last_frame = now

            table.fill(BLACK)
            pong.render(table, fonts)
            display.blit(pygame.transform.scale(table, (WINDOW_WIDTH, WINDOW_HEIGHT)), (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0
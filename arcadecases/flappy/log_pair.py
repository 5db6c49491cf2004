"""A pair of logs with a gap the bird flies through."""

import pygame

from arcadecases.flappy.log import FloatRect, Log
from arcadecases.flappy.settings import LOG_HEIGHT, LOG_WIDTH, LOGS_GAP, MAIN_SCROLL_SPEED


class LogPair:
    """An upper and a lower log scrolling together."""

    def __init__(self, x: float, y: float, texture=None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.top = Log(self.x, self.y + LOG_HEIGHT, True, texture)
        self.bottom = Log(self.x, self.y + LOGS_GAP + LOG_HEIGHT, False, texture)
        self.scored = False

    def collides(self, rect: FloatRect) -> bool:
        return self.top.collision_rect().intersects(rect) or self.bottom.collision_rect().intersects(rect)

    def update(self, dt: float) -> None:
        self.x -= MAIN_SCROLL_SPEED * dt
        self.top.update(self.x)
        self.bottom.update(self.x)

    def render(self, surface: pygame.Surface) -> None:
        self.top.render(surface)
        self.bottom.render(surface)

    def is_out_of_game(self) -> bool:
        return self.x < -LOG_WIDTH

    def update_scored(self, rect: FloatRect) -> bool:
        """Return True the first time ``rect`` is wholly past the logs."""
        if self.scored:
            return False
        if rect.left > self.x + LOG_WIDTH:
            self.scored = True
            return True
        return False

    def reset(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.scored = False
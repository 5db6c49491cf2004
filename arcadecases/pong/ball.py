"""The Pong ball."""

import pygame

from arcadecases.pong.config import WHITE
from arcadecases.pong.hitbox import Hitbox


class Ball:
    """A square ball with a position and a velocity."""

    def __init__(self, x: float, y: float, size: float) -> None:
        self.reset(x, y, size)

    def reset(self, x: float, y: float, size: float) -> None:
        """Place the ball at ``(x, y)`` with the given size and no velocity."""
        self.x = float(x)
        self.y = float(y)
        self.width = float(size)
        self.height = float(size)
        self.vx = 0.0
        self.vy = 0.0

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.x + self.width, self.y + self.height)

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def render(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))
        pygame.draw.rect(surface, WHITE, rect)
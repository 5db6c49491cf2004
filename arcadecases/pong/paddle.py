"""The Pong paddle."""

from dataclasses import dataclass

import pygame

from arcadecases.pong.config import PADDLE_HEIGHT, TABLE_HEIGHT, WHITE, clamp
from arcadecases.pong.hitbox import Hitbox


@dataclass
class Paddle:
    """A paddle that moves vertically and stays on the table."""

    x: float
    y: float
    width: float
    height: float
    vy: float = 0.0

    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.x + self.width, self.y + self.height)

    def update(self, dt: float) -> None:
        self.y = clamp(self.y + self.vy * dt, 0, TABLE_HEIGHT - PADDLE_HEIGHT)

    def render(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(round(self.x), round(self.y), round(self.width), round(self.height))
        pygame.draw.rect(surface, WHITE, rect)
"""The bird the player steers."""

import pygame

from arcadecases.flappy.log import FloatRect
from arcadecases.flappy.settings import (
    BACK_SCROLL_SPEED,
    GRAVITY,
    JUMP_TAKEOFF_SPEED,
    MOVE_SPEED,
)


class Bird:
    """A bird pulled down by gravity that can flap and nudge sideways."""

    def __init__(self, x: float, y: float, width: float, height: float, assets=None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.vx = 0.0
        self.vy = 0.0
        self.assets = assets
        self._texture = assets.textures.get("bird") if assets is not None else None
        self._jumping = False
        self._moving = False

    def collision_rect(self) -> FloatRect:
        return FloatRect(self.x, self.y, self.width, self.height)

    def jump(self) -> None:
        """Flap on the next update."""
        self._jumping = True

    def move_left(self) -> None:
        if not self._moving:
            self._moving = True
            self.vx = MOVE_SPEED - BACK_SCROLL_SPEED

    def move_right(self) -> None:
        if not self._moving:
            self._moving = True
            self.vx = MOVE_SPEED

    def update(self, dt: float) -> None:
        self.vy += GRAVITY * dt
        self.vx += MOVE_SPEED * dt

        if self._jumping:
            if self.assets is not None:
                self.assets.play_sound("jump")
            self.vy = -JUMP_TAKEOFF_SPEED
            self._jumping = False

        if self._moving:
            self.x += self.vx * dt
            self._moving = False

        self.y += self.vy * dt
        self.vx = 0.0

    def render(self, surface: pygame.Surface) -> None:
        if self._texture is not None:
            surface.blit(self._texture, (round(self.x), round(self.y)))
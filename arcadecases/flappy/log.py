"""Rectangles and the single log obstacle."""

from dataclasses import dataclass

import pygame

from arcadecases.flappy.settings import LOG_HEIGHT, LOG_WIDTH

_LOG_COLOUR = (60, 160, 60)


@dataclass(frozen=True)
class FloatRect:
    """A rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _span(self):
        x1, x2 = sorted((self.left, self.left + self.width))
        y1, y2 = sorted((self.top, self.top + self.height))
        return x1, y1, x2, y2

    def intersects(self, other: "FloatRect") -> bool:
        """Return True when the rectangles share a non-empty area."""
        ax1, ay1, ax2, ay2 = self._span()
        bx1, by1, bx2, by2 = other._span()
        return max(ax1, bx1) < min(ax2, bx2) and max(ay1, by1) < min(ay2, by2)


class Log:
    """One log; an inverted log hangs from above, rotated half a turn."""

    def __init__(self, x: float, y: float, inverted: bool, texture=None) -> None:
        self.x = float(x)
        self.y = float(y)
        self.inverted = inverted
        if texture is not None and inverted:
            texture = pygame.transform.rotate(texture, 180)
        self._texture = texture

    def collision_rect(self) -> FloatRect:
        if not self.inverted:
            return FloatRect(self.x, self.y, LOG_WIDTH, LOG_HEIGHT)
        return FloatRect(self.x - LOG_WIDTH, self.y - LOG_HEIGHT, LOG_WIDTH, LOG_HEIGHT)

    def update(self, x: float) -> None:
        """Move the log so that its left side is at ``x``."""
        self.x = x + LOG_WIDTH if self.inverted else x

    def render(self, surface: pygame.Surface) -> None:
        if self._texture is None:
            rect = self.collision_rect()
            pygame.draw.rect(
                surface,
                _LOG_COLOUR,
                pygame.Rect(round(rect.left), round(rect.top), round(rect.width), round(rect.height)),
            )
            return
        width, height = self._texture.get_size()
        if self.inverted:
            position = (round(self.x - width), round(self.y - height))
        else:
            position = (round(self.x), round(self.y))
        surface.blit(self._texture, position)
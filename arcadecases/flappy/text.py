"""Drawing of shadowed text."""

import pygame

from arcadecases.flappy.settings import BLACK, WHITE

SHADOW_OFFSET = 2


def render_text(surface: pygame.Surface, font, x: float, y: float, text: str, center: bool = False) -> pygame.Rect:
    """Draw white text with a black drop shadow and return the text's area.

    With ``center`` the text is centred on ``(x, y)``; otherwise ``(x, y)`` is
    its top-left corner.
    """
    image = font.render(text, True, WHITE)
    shadow = font.render(text, True, BLACK)
    rect = image.get_rect()
    if center:
        rect.topleft = (round(x - rect.width / 2), round(y - rect.height / 2))
    else:
        rect.topleft = (round(x), round(y))
    surface.blit(shadow, rect.move(SHADOW_OFFSET, SHADOW_OFFSET))
    surface.blit(image, rect)
    return rect
import pygame
import pytest

from arcadecases.flappy.text import SHADOW_OFFSET, render_text

GREY = (128, 128, 128)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 28)


@pytest.fixture
def surface():
    canvas = pygame.Surface((300, 150))
    canvas.fill(GREY)
    return canvas


def _pixels(canvas, rect):
    rect = rect.clip(canvas.get_rect())
    return [
        canvas.get_at((px, py))[:3]
        for px in range(rect.left, rect.right)
        for py in range(rect.top, rect.bottom)
    ]


def test_top_left_placement(font, surface):
    rect = render_text(surface, font, 10, 20, "Score: 3")
    assert rect.topleft == (10, 20)
    assert rect.width > 0 and rect.height > 0


def test_centred_placement(font, surface):
    rect = render_text(surface, font, 150, 75, "Flappy Bird", center=True)
    assert abs(rect.centerx - 150) <= 1
    assert abs(rect.centery - 75) <= 1


def test_draws_white_text_over_dark_shadow(font, surface):
    rect = render_text(surface, font, 20, 20, "HELLO")
    assert (255, 255, 255) in _pixels(surface, rect)
    shadow = rect.move(SHADOW_OFFSET, SHADOW_OFFSET)
    assert any(max(pixel) < 64 for pixel in _pixels(surface, shadow))


def test_longer_text_is_wider(font, surface):
    short = render_text(surface, font, 0, 0, "1")
    long = render_text(surface, font, 0, 0, "1234567")
    assert long.width > short.width
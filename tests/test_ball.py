import pygame
import pytest

from arcadecases.pong.ball import Ball
from arcadecases.pong.hitbox import Hitbox


def test_new_ball_is_still_and_square():
    ball = Ball(10, 20, 4)
    assert (ball.x, ball.y) == (10, 20)
    assert ball.width == ball.height == 4
    assert (ball.vx, ball.vy) == (0, 0)


def test_hitbox_spans_ball():
    ball = Ball(10, 20, 4)
    assert ball.hitbox() == Hitbox(10, 20, 14, 24)


def test_update_moves_by_velocity():
    ball = Ball(0, 0, 4)
    ball.vx = 10
    ball.vy = -20
    ball.update(0.5)
    assert ball.x == pytest.approx(5)
    assert ball.y == pytest.approx(-10)


def test_reset_clears_velocity():
    ball = Ball(0, 0, 4)
    ball.vx = 100
    ball.vy = 50
    ball.reset(30, 40, 6)
    assert (ball.x, ball.y, ball.width) == (30, 40, 6)
    assert (ball.vx, ball.vy) == (0, 0)


def test_render_paints_ball_white():
    surface = pygame.Surface((20, 20))
    surface.fill((0, 0, 0))
    Ball(5, 5, 4).render(surface)
    assert tuple(surface.get_at((6, 6)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
import pytest

from arcadecases.pong.hitbox import Hitbox, collides


def test_overlapping_boxes_collide():
    assert collides(Hitbox(0, 0, 10, 10), Hitbox(5, 5, 15, 15)) is True


def test_touching_edges_collide():
    assert collides(Hitbox(0, 0, 10, 10), Hitbox(10, 0, 20, 10)) is True


def test_separated_horizontally_do_not_collide():
    assert collides(Hitbox(0, 0, 10, 10), Hitbox(11, 0, 20, 10)) is False


def test_separated_vertically_do_not_collide():
    assert collides(Hitbox(0, 0, 10, 10), Hitbox(0, 11, 10, 20)) is False


@pytest.mark.parametrize(
    "a, b",
    [
        (Hitbox(0, 0, 4, 4), Hitbox(2, 2, 6, 6)),
        (Hitbox(0, 0, 4, 4), Hitbox(50, 50, 60, 60)),
        (Hitbox(-5, -5, 0, 0), Hitbox(0, 0, 3, 3)),
    ],
)
def test_collides_is_symmetric(a, b):
    assert collides(a, b) == collides(b, a)


def test_contained_box_collides():
    assert collides(Hitbox(0, 0, 100, 100), Hitbox(40, 40, 50, 50)) is True
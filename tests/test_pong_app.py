from collections import defaultdict

import pygame
import pytest

from arcadecases.pong.app import main, pressed_keys
from arcadecases.pong.game import Key


def _state(*codes):
    return defaultdict(bool, {code: True for code in codes})


def test_no_keys_pressed():
    assert pressed_keys(_state()) == set()


def test_player_keys_are_mapped():
    assert pressed_keys(_state(pygame.K_w, pygame.K_DOWN)) == {Key.W, Key.DOWN}


def test_menu_keys_are_mapped():
    assert pressed_keys(_state(pygame.K_1, pygame.K_2, pygame.K_RETURN)) == {
        Key.ONE,
        Key.TWO,
        Key.ENTER,
    }


def test_unrelated_keys_are_ignored():
    assert pressed_keys(_state(pygame.K_q, pygame.K_s)) == {Key.S}


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
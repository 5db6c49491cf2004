import shutil
from pathlib import Path

import pygame
import pytest

from arcadecases.pong.assets import PongSounds, load_fonts, load_sounds


class _Channel:
    def __init__(self):
        self.volume = None

    def set_volume(self, left, right):
        self.volume = (left, right)


class _Sound:
    def __init__(self):
        self.channel = _Channel()
        self.plays = 0

    def play(self):
        self.plays += 1
        return self.channel


def _sounds():
    return PongSounds(paddle_hit=_Sound(), wall_hit=_Sound(), score=_Sound())


def test_play_left_pan_silences_right():
    sounds = _sounds()
    sounds.play("score", -1.0)
    assert sounds.score.plays == 1
    assert sounds.score.channel.volume == (1.0, 0.0)


def test_play_right_pan_silences_left():
    sounds = _sounds()
    sounds.play("paddle_hit", 1.0)
    assert sounds.paddle_hit.channel.volume == (0.0, 1.0)
    assert sounds.score.plays == 0


def test_play_centered_is_full_both_sides():
    sounds = _sounds()
    sounds.play("wall_hit", 0.0)
    assert sounds.wall_hit.channel.volume == (1.0, 1.0)


def test_play_unknown_sound_raises():
    with pytest.raises(KeyError):
        _sounds().play("boom", 0.0)


def test_load_fonts_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_fonts(tmp_path)


def test_load_sounds_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sounds(tmp_path)


def test_load_fonts_gives_larger_score_font(tmp_path):
    default_font = Path(pygame.__file__).parent / pygame.font.get_default_font()
    (tmp_path / "fonts").mkdir()
    shutil.copy(default_font, tmp_path / "fonts" / "font.ttf")
    fonts = load_fonts(tmp_path)
    assert fonts.score.get_height() > fonts.large.get_height()
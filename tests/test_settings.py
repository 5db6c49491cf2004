import shutil
import wave
from pathlib import Path

import pygame
import pytest

from arcadecases.flappy import settings
from arcadecases.flappy.settings import Assets, load_assets


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _write_textures(base: Path) -> None:
    graphics = base / "graphics"
    graphics.mkdir(parents=True)
    for name in ("bird", "background", "ground", "log"):
        pygame.image.save(pygame.Surface((4, 3)), str(graphics / f"{name}.png"))


def _write_sounds(base: Path) -> None:
    sounds = base / "sounds"
    sounds.mkdir(parents=True)
    for name in ("jump", "explosion", "hurt", "score"):
        with wave.open(str(sounds / f"{name}.wav"), "wb") as out:
            out.setnchannels(1)
            out.setsampwidth(2)
            out.setframerate(22050)
            out.writeframes(b"\x00\x00" * 100)
    (sounds / "marios_way.ogg").write_bytes(b"music")


def _write_fonts(base: Path) -> None:
    fonts = base / "fonts"
    fonts.mkdir(parents=True)
    default = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(default, fonts / "font.ttf")
    shutil.copy(default, fonts / "flappy.ttf")


def test_play_sound_plays_named_sound():
    jump = FakeSound()
    assets = Assets(sounds={"jump": jump, "score": FakeSound()})
    assets.play_sound("jump")
    assets.play_sound("jump")
    assert jump.plays == 2
    assert assets.sounds["score"].plays == 0


def test_play_unknown_sound_raises():
    with pytest.raises(KeyError):
        Assets().play_sound("missing")


def test_missing_texture_is_reported_first(tmp_path):
    with pytest.raises(FileNotFoundError, match="graphics/bird.png"):
        load_assets(tmp_path)


def test_missing_sound_is_reported_after_textures(tmp_path):
    _write_textures(tmp_path)
    with pytest.raises(FileNotFoundError, match="sounds/jump.wav"):
        load_assets(tmp_path)


def test_full_load(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    _write_textures(tmp_path)
    _write_sounds(tmp_path)
    _write_fonts(tmp_path)
    try:
        assets = load_assets(tmp_path)
    finally:
        pygame.mixer.quit()
    assert set(assets.textures) == {"bird", "background", "ground", "log"}
    assert assets.textures["bird"].get_size() == (4, 3)
    assert set(assets.sounds) == {"jump", "explosion", "hurt", "score"}
    assert set(assets.fonts) == {
        ("font", settings.MEDIUM_TEXT_SIZE),
        ("font", settings.HUGE_TEXT_SIZE),
        ("flappy", settings.FLAPPY_TEXT_SIZE),
    }
    assert assets.music == tmp_path / "sounds" / "marios_way.ogg"
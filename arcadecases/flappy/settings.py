"""Constants of the Flappy Bird game and loading of its media files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import pygame

ASSETS_PATH = Path("assets")
GRAPHICS_DIR = "graphics"
SOUNDS_DIR = "sounds"
FONTS_DIR = "fonts"

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
VIRTUAL_WIDTH = 512
VIRTUAL_HEIGHT = 288
BIRD_WIDTH = 39.0
BIRD_HEIGHT = 28.0
LOG_WIDTH = 70.0
LOG_HEIGHT = 288.0
LOGS_GAP = 90.0
GROUND_HEIGHT = 16.0
BACKGROUND_LOOPING_POINT = 1157.0
MAIN_SCROLL_SPEED = 100.0
BACK_SCROLL_SPEED = MAIN_SCROLL_SPEED / 2
GRAVITY = 980.0
JUMP_TAKEOFF_SPEED = GRAVITY / 6.0
MOVE_SPEED = 100.0

TIME_TO_SPAWN_LOGS = 1.5
MEDIUM_TEXT_SIZE = 18
HUGE_TEXT_SIZE = 56
FLAPPY_TEXT_SIZE = 28

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

_TEXTURE_FILES = {
    "bird": "bird.png",
    "background": "background.png",
    "ground": "ground.png",
    "log": "log.png",
}
_SOUND_FILES = {
    "jump": "jump.wav",
    "explosion": "explosion.wav",
    "hurt": "hurt.wav",
    "score": "score.wav",
}
_MUSIC_FILE = "marios_way.ogg"
_FONT_FILES = {
    "font": ("font.ttf", (MEDIUM_TEXT_SIZE, HUGE_TEXT_SIZE)),
    "flappy": ("flappy.ttf", (FLAPPY_TEXT_SIZE,)),
}


@dataclass
class Assets:
    """Loaded media: textures and sounds by name, fonts by ``(name, size)``."""

    textures: Dict[str, Any] = field(default_factory=dict)
    sounds: Dict[str, Any] = field(default_factory=dict)
    fonts: Dict[Tuple[str, int], Any] = field(default_factory=dict)
    music: Optional[Path] = None

    def play_sound(self, name: str) -> None:
        """Play the named sound effect once."""
        self.sounds[name].play()


def _locate(base: Path, kind: str, folder: str, filename: str) -> Path:
    relative = Path(folder) / filename
    path = base / relative
    if not path.is_file():
        raise FileNotFoundError(f"Error loading {kind} {relative.as_posix()}")
    return path


def load_assets(base_dir=ASSETS_PATH) -> Assets:
    """Load every texture, sound, the music track and fonts from ``base_dir``."""
    base = Path(base_dir)

    textures = {
        name: pygame.image.load(str(_locate(base, "texture", GRAPHICS_DIR, filename)))
        for name, filename in _TEXTURE_FILES.items()
    }

    sounds = {}
    for name, filename in _SOUND_FILES.items():
        path = _locate(base, "sound", SOUNDS_DIR, filename)
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        sounds[name] = pygame.mixer.Sound(str(path))

    music = _locate(base, "music", SOUNDS_DIR, _MUSIC_FILE)

    fonts = {}
    for name, (filename, sizes) in _FONT_FILES.items():
        path = _locate(base, "font", FONTS_DIR, filename)
        if not pygame.font.get_init():
            pygame.font.init()
        for size in sizes:
            fonts[(name, size)] = pygame.font.Font(str(path), size)

    return Assets(textures=textures, sounds=sounds, fonts=fonts, music=music)
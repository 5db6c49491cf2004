"""Loading of the fonts and sounds used by Pong."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

LARGE_FONT_SIZE = 16
SCORE_FONT_SIZE = 32

_FONT_FILE = Path("fonts") / "font.ttf"
_SOUND_FILES = {
    "paddle_hit": Path("sounds") / "paddle_hit.wav",
    "wall_hit": Path("sounds") / "wall_hit.wav",
    "score": Path("sounds") / "score.wav",
}


@dataclass
class PongFonts:
    """The two fonts the game draws with."""

    large: Any
    score: Any


@dataclass
class PongSounds:
    """The three sound effects of the game."""

    paddle_hit: Any
    wall_hit: Any
    score: Any

    def play(self, name: str, pan: float = 0.0) -> None:
        """Play a sound once; ``pan`` runs from -1 (left) to 1 (right)."""
        sounds = {"paddle_hit": self.paddle_hit, "wall_hit": self.wall_hit, "score": self.score}
        sound = sounds[name]
        channel = sound.play()
        if channel is not None:
            channel.set_volume(min(1.0, 1.0 - pan), min(1.0, 1.0 + pan))


def _require(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"missing asset: {path}")
    return path


def load_fonts(base_dir=Path("assets")) -> PongFonts:
    """Load the game fonts from ``base_dir``."""
    path = _require(Path(base_dir) / _FONT_FILE)
    if not pygame.font.get_init():
        pygame.font.init()
    return PongFonts(
        large=pygame.font.Font(str(path), LARGE_FONT_SIZE),
        score=pygame.font.Font(str(path), SCORE_FONT_SIZE),
    )


def load_sounds(base_dir=Path("assets")) -> PongSounds:
    """Load the game sounds from ``base_dir``."""
    paths = {name: _require(Path(base_dir) / rel) for name, rel in _SOUND_FILES.items()}
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return PongSounds(**{name: pygame.mixer.Sound(str(path)) for name, path in paths.items()})
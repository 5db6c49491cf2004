"""The Flappy Bird game: states, virtual screen and music."""

import pygame

from arcadecases.flappy.settings import BLACK, VIRTUAL_HEIGHT, VIRTUAL_WIDTH
from arcadecases.flappy.state_machine import StateMachine
from arcadecases.flappy.states import (
    CountDownState,
    PauseState,
    PlayingState,
    TitleScreenState,
)


class Game:
    """Draws the current state on a small surface scaled up to the window."""

    def __init__(self, assets=None, window=None) -> None:
        self.assets = assets
        self.window = window
        self.surface = pygame.Surface((VIRTUAL_WIDTH, VIRTUAL_HEIGHT))
        self.state_machine = StateMachine(
            {
                "title": TitleScreenState,
                "count_down": CountDownState,
                "playing": PlayingState,
                "pause": PauseState,
            },
            assets,
        )
        self.state_machine.change_state("title")
        self._start_music()

    def _start_music(self) -> None:
        music = getattr(self.assets, "music", None)
        if music is None or not pygame.mixer.get_init():
            return
        pygame.mixer.music.load(str(music))
        pygame.mixer.music.play(-1)

    def handle_inputs(self, event) -> None:
        self.state_machine.handle_inputs(event)

    def update(self, dt: float) -> None:
        self.state_machine.update(dt)

    def render(self) -> None:
        """Draw the current state and, with a window, show it scaled up."""
        self.surface.fill(BLACK)
        self.state_machine.render(self.surface)
        if self.window is not None:
            scaled = pygame.transform.scale(self.surface, self.window.get_size())
            self.window.blit(scaled, (0, 0))
            pygame.display.flip()
"""The title, count-down, playing and pause states of Flappy Bird."""

import pygame

from arcadecases.flappy.bird import Bird
from arcadecases.flappy.settings import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    FLAPPY_TEXT_SIZE,
    HUGE_TEXT_SIZE,
    MEDIUM_TEXT_SIZE,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)
from arcadecases.flappy.state_machine import BaseState
from arcadecases.flappy.text import render_text
from arcadecases.flappy.world import World

_LEFT_MOUSE_BUTTON = 1


def _key_pressed(event, key) -> bool:
    return event.type == pygame.KEYDOWN and getattr(event, "key", None) == key


def _draw_text(state, surface, font_name, size, x, y, text, center=True) -> None:
    assets = state.assets
    if assets is None:
        return
    font = assets.fonts.get((font_name, size))
    if font is None:
        return
    render_text(surface, font, x, y, text, center)


def _play(state, name: str) -> None:
    if state.assets is not None:
        state.assets.play_sound(name)


class CountDownState(BaseState):
    """Counts three seconds down over a quiet world, then starts play."""

    def __init__(self, state_machine) -> None:
        super().__init__(state_machine)
        self.world = None
        self.counter = 3
        self.timer = 0.0

    def enter(self, world=None, bird=None) -> None:
        self.world = World(False, self.assets)

    def update(self, dt: float) -> None:
        self.timer += dt
        if self.timer >= 1.0:
            self.timer = 0.0
            self.counter -= 1
            if self.counter == 0:
                self.state_machine.change_state("playing", self.world)
        self.world.update(dt)

    def render(self, surface) -> None:
        self.world.render(surface)
        _draw_text(
            self, surface, "font", HUGE_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 2, str(self.counter),
        )


class TitleScreenState(BaseState):
    """Shows the title over a scrolling world until Enter is pressed."""

    def __init__(self, state_machine) -> None:
        super().__init__(state_machine)
        self.world = World(False, self.assets)

    def handle_inputs(self, event) -> None:
        if getattr(event, "key", None) == pygame.K_RETURN:
            self.state_machine.change_state("count_down")

    def update(self, dt: float) -> None:
        self.world.update(dt)

    def render(self, surface) -> None:
        self.world.render(surface)
        _draw_text(
            self, surface, "flappy", FLAPPY_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 3, "Flappy Bird",
        )
        _draw_text(
            self, surface, "font", MEDIUM_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, 2 * VIRTUAL_HEIGHT // 3, "Press Enter to start",
        )


class PlayingState(BaseState):
    """The bird flies through the logs; a crash returns to the count-down."""

    def __init__(self, state_machine) -> None:
        super().__init__(state_machine)
        self.world = None
        self.bird = None
        self.score = 0

    def enter(self, world=None, bird=None) -> None:
        if world is None:
            raise ValueError("the playing state needs a world")
        self.world = world
        self.world.reset(True)
        if bird is None:
            bird = Bird(
                VIRTUAL_WIDTH / 2 - BIRD_WIDTH / 2,
                VIRTUAL_HEIGHT / 2 - BIRD_HEIGHT / 2,
                BIRD_WIDTH,
                BIRD_HEIGHT,
                self.assets,
            )
        self.bird = bird

    def handle_inputs(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == _LEFT_MOUSE_BUTTON:
            self.bird.jump()
        if _key_pressed(event, pygame.K_LEFT):
            self.bird.move_left()
        if _key_pressed(event, pygame.K_RIGHT):
            self.bird.move_right()

    def update(self, dt: float) -> None:
        self.bird.update(dt)
        self.world.update(dt)

        if self.world.collides(self.bird.collision_rect()):
            _play(self, "explosion")
            _play(self, "hurt")
            self.state_machine.change_state("count_down")

        if self.world.update_scored(self.bird.collision_rect()):
            self.score += 1
            _play(self, "score")

    def render(self, surface) -> None:
        self.world.render(surface)
        self.bird.render(surface)
        _draw_text(
            self, surface, "flappy", FLAPPY_TEXT_SIZE, 20, 10, f"Score: {self.score}", center=False
        )


class PauseState(BaseState):
    """Freezes the world and bird; P resumes, M returns to the title."""

    def __init__(self, state_machine) -> None:
        super().__init__(state_machine)
        self.world = None
        self.bird = None
        self.paused = False

    def enter(self, world=None, bird=None) -> None:
        self.world = world
        self.bird = bird
        self.paused = True

    def handle_inputs(self, event) -> None:
        if _key_pressed(event, pygame.K_p):
            self.paused = True
            self.state_machine.change_state("playing", self.world, self.bird)
            self.paused = False
        if self.paused and _key_pressed(event, pygame.K_m):
            self.state_machine.change_state("title", self.world, self.bird)
            self.paused = False

    def render(self, surface) -> None:
        self.world.render(surface)
        self.bird.render(surface)
        _draw_text(
            self, surface, "flappy", FLAPPY_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 3, "Game Paused",
        )
        _draw_text(
            self, surface, "font", MEDIUM_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, VIRTUAL_HEIGHT // 2, "Press P to continue playing",
        )
        _draw_text(
            self, surface, "font", MEDIUM_TEXT_SIZE,
            VIRTUAL_WIDTH // 2, 2 * VIRTUAL_HEIGHT // 3, "Press M to return main menu",
        )
"""The scrolling scenery and the logs that cross it."""

import random

import pygame

from arcadecases.flappy.factory import Factory
from arcadecases.flappy.log import FloatRect
from arcadecases.flappy.log_pair import LogPair
from arcadecases.flappy.settings import (
    BACK_SCROLL_SPEED,
    BACKGROUND_LOOPING_POINT,
    GROUND_HEIGHT,
    LOG_HEIGHT,
    MAIN_SCROLL_SPEED,
    TIME_TO_SPAWN_LOGS,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)


class World:
    """Background, ground and, when enabled, periodically spawned logs."""

    def __init__(self, generate_logs: bool = False, assets=None, rng=None) -> None:
        self.generate_logs = generate_logs
        self.assets = assets
        self._rng = rng if rng is not None else random.Random()
        self._factory = Factory(LogPair)
        self.logs = []
        self.background_x = 0.0
        self.ground_x = 0.0
        self._spawn_timer = 0.0
        self.last_log_y = -LOG_HEIGHT + self._rng.randint(0, 80) + 20

    def _texture(self, name):
        return self.assets.textures.get(name) if self.assets is not None else None

    def reset(self, generate_logs: bool) -> None:
        self.generate_logs = generate_logs

    def collides(self, rect: FloatRect) -> bool:
        """Return True when ``rect`` reaches the floor or hits a log."""
        if rect.top + rect.height >= VIRTUAL_HEIGHT:
            return True
        return any(pair.collides(rect) for pair in self.logs)

    def update_scored(self, rect: FloatRect) -> bool:
        """Return True when ``rect`` has just passed a log pair."""
        return any(pair.update_scored(rect) for pair in self.logs)

    def _spawn(self) -> None:
        low = -LOG_HEIGHT + 10
        high = VIRTUAL_HEIGHT + 90 - LOG_HEIGHT
        y = max(low, min(self.last_log_y + self._rng.randint(-20, 20), high))
        self.last_log_y = y
        self.logs.append(self._factory.create(VIRTUAL_WIDTH, y, self._texture("log")))

    def update(self, dt: float) -> None:
        if self.generate_logs:
            self._spawn_timer += dt
            if self._spawn_timer >= TIME_TO_SPAWN_LOGS:
                self._spawn_timer = 0.0
                self._spawn()

        self.background_x -= BACK_SCROLL_SPEED * dt
        if self.background_x <= -BACKGROUND_LOOPING_POINT:
            self.background_x = 0.0

        self.ground_x -= MAIN_SCROLL_SPEED * dt
        if self.ground_x <= -VIRTUAL_WIDTH:
            self.ground_x = 0.0

        remaining = []
        for pair in self.logs:
            if pair.is_out_of_game():
                self._factory.remove(pair)
            else:
                pair.update(dt)
                remaining.append(pair)
        self.logs = remaining

    def render(self, surface: pygame.Surface) -> None:
        background = self._texture("background")
        if background is not None:
            surface.blit(background, (round(self.background_x), 0))
        for pair in self.logs:
            pair.render(surface)
        ground = self._texture("ground")
        if ground is not None:
            surface.blit(ground, (round(self.ground_x), round(VIRTUAL_HEIGHT - GROUND_HEIGHT)))
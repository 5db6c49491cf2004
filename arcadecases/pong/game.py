"""The Pong game: serving, scoring, bouncing and drawing."""

import random
from enum import Enum, auto

import pygame

from arcadecases.pong.ball import Ball
from arcadecases.pong.config import (
    BALL_SIZE,
    MAX_POINTS,
    MID_LINE_WIDTH,
    PADDLE_HEIGHT,
    PADDLE_SPEED,
    PADDLE_WIDTH,
    PADDLE_X_OFFSET,
    PADDLE_Y_OFFSET,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    WHITE,
)
from arcadecases.pong.hitbox import collides
from arcadecases.pong.paddle import Paddle

SINGLEPLAYER = 1
MULTIPLAYER = 2

_BALL_START = (TABLE_WIDTH // 2 - BALL_SIZE // 2, TABLE_HEIGHT // 2 - BALL_SIZE // 2)


class PongState(Enum):
    START = auto()
    SERVE = auto()
    PLAY = auto()
    DONE = auto()


class Key(Enum):
    ONE = "1"
    TWO = "2"
    ENTER = "enter"
    W = "w"
    S = "s"
    UP = "up"
    DOWN = "down"


class Pong:
    """State of one Pong match."""

    def __init__(self, sounds=None, rng=None) -> None:
        self.player1 = Paddle(PADDLE_X_OFFSET, PADDLE_Y_OFFSET, PADDLE_WIDTH, PADDLE_HEIGHT)
        self.player2 = Paddle(
            TABLE_WIDTH - PADDLE_WIDTH - PADDLE_X_OFFSET,
            TABLE_HEIGHT - PADDLE_HEIGHT - PADDLE_Y_OFFSET,
            PADDLE_WIDTH,
            PADDLE_HEIGHT,
        )
        self.ball = Ball(*_BALL_START, BALL_SIZE)
        self.state = PongState.START
        self.mode = 0
        self.player1_score = 0
        self.player2_score = 0
        self.serving_player = 0
        self.winning_player = 0
        self.sounds = sounds
        self._rng = rng if rng is not None else random.Random()

    def _play(self, name: str, pan: float) -> None:
        if self.sounds is not None:
            self.sounds.play(name, pan)

    def _reset_ball(self) -> None:
        self.ball.reset(*_BALL_START, BALL_SIZE)

    def _start(self, mode: int) -> None:
        self.state = PongState.SERVE
        self.serving_player = self._rng.randrange(2) + 1
        self.mode = mode

    @staticmethod
    def _vertical_speed(pressed, down: Key, up: Key) -> float:
        if down in pressed:
            return PADDLE_SPEED
        if up in pressed:
            return -PADDLE_SPEED
        return 0

    def _steer_computer(self) -> None:
        ball, paddle = self.ball, self.player2
        if ball.vx >= 0 and ball.x > TABLE_WIDTH // 2:
            if ball.y < paddle.y:
                paddle.vy = -PADDLE_SPEED
            elif ball.y > paddle.y + PADDLE_HEIGHT:
                paddle.vy = PADDLE_SPEED
            else:
                paddle.vy = 0
        else:
            paddle.vy = 0

    def handle_input(self, pressed) -> None:
        """React to the set of keys currently held down."""
        pressed = set(pressed)
        if self.state is PongState.START:
            if Key.ONE in pressed:
                self._start(SINGLEPLAYER)
            if Key.TWO in pressed:
                self._start(MULTIPLAYER)
        elif self.state is PongState.SERVE:
            if Key.ENTER in pressed:
                self.state = PongState.PLAY
                self.ball.vx = float(self._rng.randrange(60) + 140)
                if self.serving_player == 2:
                    self.ball.vx *= -1
                self.ball.vy = float(self._rng.randrange(100) - 50)
        elif self.state is PongState.PLAY:
            self.player1.vy = self._vertical_speed(pressed, Key.S, Key.W)
            if self.mode == SINGLEPLAYER:
                self._steer_computer()
            if self.mode == MULTIPLAYER:
                self.player2.vy = self._vertical_speed(pressed, Key.DOWN, Key.UP)
        elif Key.ENTER in pressed:
            self.state = PongState.SERVE
            self._reset_ball()
            self.player1_score = 0
            self.player2_score = 0
            self.serving_player = 2 if self.winning_player == 1 else 1

    def _point_for(self, player: int) -> None:
        if player == 1:
            self._play("score", 1.0)
            self.player1_score += 1
            self.serving_player = 2
            score = self.player1_score
        else:
            self._play("score", -1.0)
            self.player2_score += 1
            self.serving_player = 1
            score = self.player2_score
        if score == MAX_POINTS:
            self.winning_player = player
            self.state = PongState.DONE
        else:
            self.state = PongState.SERVE
            self._reset_ball()

    def _bounce_off_paddle(self, pan: float) -> None:
        self._play("paddle_hit", pan)
        self.ball.vx *= -1.03
        magnitude = self._rng.randrange(140) + 10
        self.ball.vy = -magnitude if self.ball.vy < 0 else magnitude

    def update(self, dt: float) -> None:
        """Advance the match by ``dt`` seconds while in play."""
        if self.state is not PongState.PLAY:
            return
        self.player1.update(dt)
        self.player2.update(dt)
        self.ball.update(dt)

        ball_box = self.ball.hitbox()
        player1_box = self.player1.hitbox()
        player2_box = self.player2.hitbox()

        if ball_box.x1 > TABLE_WIDTH:
            self._point_for(1)
        elif ball_box.x2 < 0:
            self._point_for(2)

        if ball_box.y1 <= 0:
            self._play("wall_hit", 0.0)
            self.ball.y = 0.0
            self.ball.vy *= -1
        elif ball_box.y2 >= TABLE_HEIGHT:
            self._play("wall_hit", 0.0)
            self.ball.y = TABLE_HEIGHT - self.ball.height
            self.ball.vy *= -1

        if collides(ball_box, player1_box):
            self.ball.x = player1_box.x2
            self._bounce_off_paddle(-1.0)
        elif collides(ball_box, player2_box):
            self.ball.x = player2_box.x1 - self.ball.width
            self._bounce_off_paddle(1.0)

    @staticmethod
    def _draw_text(surface, font, text: str, x: float, y: float) -> None:
        image = font.render(text, False, WHITE)
        surface.blit(image, image.get_rect(midtop=(round(x), round(y))))

    def render(self, surface: pygame.Surface, fonts) -> None:
        """Draw the table, players, ball, scores and any message."""
        mid_line = pygame.Rect(
            TABLE_WIDTH // 2 - MID_LINE_WIDTH // 2, 0, MID_LINE_WIDTH, TABLE_HEIGHT
        )
        pygame.draw.rect(surface, WHITE, mid_line)
        self.player1.render(surface)
        self.player2.render(surface)
        self.ball.render(surface)

        score_y = TABLE_HEIGHT // 6
        self._draw_text(surface, fonts.score, str(self.player1_score), TABLE_WIDTH // 2 - 50, score_y)
        self._draw_text(surface, fonts.score, str(self.player2_score), TABLE_WIDTH // 2 + 50, score_y)

        centre_x = TABLE_WIDTH // 2
        if self.state is PongState.START:
            self._draw_text(surface, fonts.large, "Press 1 for Singleplayer", centre_x, TABLE_HEIGHT // 2)
            self._draw_text(surface, fonts.large, "Press 2 for Multiplayer", centre_x, TABLE_HEIGHT // 2 + 50)
        elif self.state is PongState.SERVE:
            self._draw_text(surface, fonts.large, "Press enter to serve", centre_x, TABLE_HEIGHT // 2)
        elif self.state is PongState.DONE:
            self._draw_text(
                surface, fonts.large, f"Player {self.winning_player} won!", centre_x, TABLE_HEIGHT // 3
            )
            self._draw_text(surface, fonts.large, "Press enter to restart", centre_x, TABLE_HEIGHT // 2)
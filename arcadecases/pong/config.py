"""Table dimensions, speeds and limits for the Pong game."""

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TABLE_WIDTH = 432
TABLE_HEIGHT = 243
PADDLE_WIDTH = 5
PADDLE_HEIGHT = 20
PADDLE_X_OFFSET = 10
PADDLE_Y_OFFSET = 30
PADDLE_SPEED = 200
BALL_SIZE = 4
MID_LINE_WIDTH = 2
FPS = 60.0
MAX_POINTS = 5

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def clamp(value, low, high):
    """Limit ``value`` to ``[low, high]``; ``low`` wins if the bounds cross."""
    return max(low, min(value, high))
"""Small arcade games on pygame: Pong and Flappy Bird."""

__version__ = "0.1.0"
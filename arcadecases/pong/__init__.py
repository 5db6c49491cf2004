"""Pong: paddles, ball, scoring, media loading and the window loop."""
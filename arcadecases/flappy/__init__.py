"""Flappy Bird: bird, scrolling world, log pairs, game screens and the window loop."""
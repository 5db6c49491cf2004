"""Axis-aligned hitboxes and their overlap test."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hitbox:
    """A rectangle given by its top-left and bottom-right corners."""

    x1: float
    y1: float
    x2: float
    y2: float


def collides(hitbox1: Hitbox, hitbox2: Hitbox) -> bool:
    """Return True when the two hitboxes overlap or touch."""
    if hitbox1.x1 > hitbox2.x2 or hitbox2.x1 > hitbox1.x2:
        return False
    if hitbox1.y1 > hitbox2.y2 or hitbox2.y1 > hitbox1.y2:
        return False
    return True
"""Movement directions on the maze."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """A direction of travel; NONE means standing still."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


def opposite_direction(direction: Direction) -> Direction:
    """Return the direction pointing the other way; NONE stays NONE."""
    return _OPPOSITES[direction]
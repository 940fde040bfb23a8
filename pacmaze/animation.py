"""Mouth and death animation of Pac-Man."""

from __future__ import annotations

from pacmaze.atlas import (
    PACMAN_CLOSED,
    PACMAN_DOWN_NARROW,
    PACMAN_DOWN_WIDE,
    PACMAN_LEFT_NARROW,
    PACMAN_LEFT_WIDE,
    PACMAN_RIGHT_NARROW,
    PACMAN_RIGHT_WIDE,
    PACMAN_UP_NARROW,
    PACMAN_UP_WIDE,
)
from pacmaze.direction import Direction
from pacmaze.position import GridPosition

_FRAMES = {
    Direction.DOWN: (PACMAN_DOWN_WIDE, PACMAN_DOWN_NARROW, PACMAN_CLOSED, PACMAN_DOWN_NARROW),
    Direction.LEFT: (PACMAN_LEFT_WIDE, PACMAN_LEFT_NARROW, PACMAN_CLOSED, PACMAN_LEFT_NARROW),
    Direction.RIGHT: (PACMAN_RIGHT_WIDE, PACMAN_RIGHT_NARROW, PACMAN_CLOSED, PACMAN_RIGHT_NARROW),
    Direction.UP: (PACMAN_UP_WIDE, PACMAN_UP_NARROW, PACMAN_CLOSED, PACMAN_UP_NARROW),
}

_FRAMES_PER_MS = 0.02
_LAST_DEATH_FRAME = 11
_MOUTH_FRAMES = 4
_DEATH_ROW = 1


class PacManAnimation:
    """Tracks which animation frame Pac-Man shows."""

    def __init__(self) -> None:
        self._position = 0
        self._position_delta = 0.0

    def animation_frame(self, direction: Direction) -> GridPosition:
        """Return the sprite for the current mouth frame facing a direction."""
        frames = _FRAMES.get(direction)
        if frames is None:
            return PACMAN_CLOSED
        return frames[self._position]

    def death_animation_frame(self) -> GridPosition:
        """Return the sprite for the current frame of the death animation."""
        return GridPosition(self._position, _DEATH_ROW)

    def update_animation_position(self, time_delta: int, dead: bool) -> None:
        """Advance the animation by time_delta milliseconds."""
        if dead and self._position >= _LAST_DEATH_FRAME:
            return

        self._position_delta += _FRAMES_PER_MS * time_delta
        self._position += int(self._position_delta)

        if not dead:
            self._position %= _MOUTH_FRAMES

        if self._position_delta > 1:
            self._position_delta -= 1

    def pause(self) -> None:
        """Stop on the first frame: against a wall the mouth stays wide open."""
        self._position = 0
        self._position_delta = 0.0
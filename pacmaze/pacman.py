"""Pac-Man himself: movement through the maze and his sprite."""

from __future__ import annotations

import math

from pacmaze.animation import PacManAnimation
from pacmaze.board import initial_pacman_position, is_portal, is_walkable_for_pacman, teleport
from pacmaze.direction import Direction
from pacmaze.position import (
    GridPosition,
    Position,
    grid_position_to_position,
    position_to_grid_position,
)

_CELLS_PER_MS = 0.004
_PACMAN_SIZE = 1


class PacMan:
    """The player's character."""

    def __init__(self) -> None:
        self._direction = Direction.NONE
        self._desired_direction = Direction.NONE
        self._pos = initial_pacman_position()
        self._animation = PacManAnimation()
        self._dead = False

    def current_sprite(self) -> GridPosition:
        """Return the sprite to draw for the current frame."""
        if self._dead:
            return self._animation.death_animation_frame()
        return self._animation.animation_frame(self._direction)

    def position(self) -> Position:
        return Position(self._pos.x, self._pos.y)

    def position_in_grid(self) -> GridPosition:
        return position_to_grid_position(self._pos)

    def update(self, time_delta: int, input_direction: Direction) -> None:
        """Advance by time_delta milliseconds, steering towards input_direction."""
        if self._dead:
            self._update_animation_position(time_delta, paused=False)
            return

        if input_direction is not Direction.NONE:
            self._desired_direction = input_direction

        old = self.position()
        self._update_maze_position(time_delta)
        self._update_animation_position(time_delta, paused=self._pos == old)

    def die(self) -> None:
        self._dead = True

    def reset(self) -> None:
        """Bring Pac-Man back to life at his starting point, standing still."""
        self._dead = False
        self._direction = Direction.NONE
        self._desired_direction = Direction.NONE
        self._pos = initial_pacman_position()

    def has_direction(self) -> bool:
        return self._direction is not Direction.NONE

    def current_direction(self) -> Direction:
        return self._direction

    def _update_animation_position(self, time_delta: int, paused: bool) -> None:
        if paused:
            self._animation.pause()
        else:
            self._animation.update_animation_position(time_delta, self._dead)

    def _next_cell(self, direction: Direction, position_delta: float) -> GridPosition:
        x, y = self._pos.x, self._pos.y
        if direction is Direction.LEFT:
            return GridPosition(int(x - position_delta), int(y))
        if direction is Direction.RIGHT:
            return GridPosition(int(x + _PACMAN_SIZE), int(y))
        if direction is Direction.UP:
            return GridPosition(int(x), int(y - position_delta))
        if direction is Direction.DOWN:
            return GridPosition(int(x), int(y + _PACMAN_SIZE))
        return position_to_grid_position(self._pos)

    def _can_go(self, direction: Direction, position_delta: float) -> bool:
        return is_walkable_for_pacman(self._next_cell(direction, position_delta))

    def _update_maze_position(self, time_delta: int) -> None:
        if is_portal(self.position_in_grid(), self._direction):
            self._pos = grid_position_to_position(teleport(self.position_in_grid()))
            return

        position_delta = _CELLS_PER_MS * time_delta

        if self._desired_direction is not self._direction and self._can_go(
            self._desired_direction, position_delta
        ):
            self._direction = self._desired_direction

        if not self._can_go(self._direction, position_delta):
            return

        if self._direction is Direction.LEFT:
            self._pos.x -= position_delta
            self._pos.y = math.floor(self._pos.y)
        elif self._direction is Direction.RIGHT:
            self._pos.x += position_delta
            self._pos.y = math.floor(self._pos.y)
        elif self._direction is Direction.UP:
            self._pos.x = math.floor(self._pos.x)
            self._pos.y -= position_delta
        elif self._direction is Direction.DOWN:
            self._pos.x = math.floor(self._pos.x)
            self._pos.y += position_delta
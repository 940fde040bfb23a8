"""The ghosts and how they chase Pac-Man."""

from __future__ import annotations

import bisect
import itertools
import math
from enum import Enum

from pacmaze.atlas import (
    GhostSprite,
    ending_frightened,
    eye_sprite,
    ghost_sprite,
    initial_frightened,
)
from pacmaze import board
from pacmaze.board import is_portal, is_walkable_for_ghost, pen_door_position, teleport
from pacmaze.direction import Direction, opposite_direction
from pacmaze.position import (
    GridPosition,
    Position,
    grid_position_to_position,
    position_to_grid_position,
)

_CELLS_PER_MS = 0.004
_FRIGHTENED_MS = 6000
_FRIGHTENED_BLINK_MS = 3500
_ANIMATION_STEP_MS = 250

# Alternating scatter and chase durations in seconds, starting with scatter.
_STATE_DURATIONS = (7, 20, 7, 20, 5, 20, 5)
_STATE_CHANGES = tuple(itertools.accumulate(_STATE_DURATIONS))


class GhostState(Enum):
    CHASE = 0
    SCATTER = 1
    FRIGHTENED = 2
    EYES = 3


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Ghost:
    """A ghost moving around the maze towards a target."""

    def __init__(self, sprite_set: GhostSprite, initial_position: Position) -> None:
        self.sprite_set = GhostSprite(sprite_set)
        self._start = Position(initial_position.x, initial_position.y)
        self.direction = Direction.NONE
        self.state = GhostState.CHASE
        self.target = Position()
        self._pos = Position(initial_position.x, initial_position.y)
        self._time_for_animation = 0.0
        self._animation_index = 0
        self._time_frighten = 0
        self._time_chase = 0
        self._last_grid_position = GridPosition(0, 0)

    def frighten(self) -> None:
        """Turn around and flee, unless already frightened or dead."""
        if self.state in (GhostState.FRIGHTENED, GhostState.EYES):
            return
        self.direction = opposite_direction(self.direction)
        self.state = GhostState.FRIGHTENED
        self._time_frighten = 0

    def is_frightened(self) -> bool:
        return self.state is GhostState.FRIGHTENED

    def is_eyes(self) -> bool:
        return self.state is GhostState.EYES

    def die(self) -> None:
        """Become a pair of eyes heading back to the pen."""
        if self.state is GhostState.EYES:
            return
        self.direction = opposite_direction(self.direction)
        self.state = GhostState.EYES
        self._time_frighten = 0
        self._time_chase = 0

    def reset(self) -> None:
        """Return to the starting position in scatter mode."""
        self._pos = self.initial_position()
        self.state = GhostState.SCATTER
        self._time_frighten = 0
        self._time_chase = 0

    def current_sprite(self) -> GridPosition:
        """Return the sprite to draw for the current state and frame."""
        if self.state is GhostState.EYES:
            return eye_sprite(self.direction)
        if self.state is GhostState.FRIGHTENED:
            if self._time_frighten < _FRIGHTENED_BLINK_MS:
                return initial_frightened(self._animation_index)
            return ending_frightened(self._animation_index)
        return ghost_sprite(self.sprite_set, self.direction, self._animation_index % 2 == 0)

    def position(self) -> Position:
        return Position(self._pos.x, self._pos.y)

    def position_in_grid(self) -> GridPosition:
        return position_to_grid_position(self._pos)

    def current_direction(self) -> Direction:
        return self.direction

    def update(self, time_delta: int) -> None:
        """Advance by time_delta milliseconds."""
        if self.state is GhostState.EYES and self.is_in_pen():
            self.state = GhostState.SCATTER

        if self.state is GhostState.FRIGHTENED:
            self._time_frighten += time_delta
            if self._time_frighten > _FRIGHTENED_MS:
                self.state = GhostState.SCATTER

        if self.state in (GhostState.SCATTER, GhostState.CHASE):
            self._time_chase += time_delta
            new_state = self.default_state_at_duration(self._time_chase // 1000)
            if new_state is not self.state:
                self.direction = opposite_direction(self.direction)
                self.state = new_state

        self._update_animation(time_delta)
        self._update_position(time_delta)

    def is_in_pen(self) -> bool:
        return board.is_in_pen(self.position_in_grid())

    def speed(self) -> float:
        """Return the speed factor for the current state."""
        if self.state is GhostState.EYES:
            return 2
        if self.state is GhostState.FRIGHTENED:
            return 0.5
        return 0.75

    def initial_position(self) -> Position:
        return Position(self._start.x, self._start.y)

    @staticmethod
    def default_state_at_duration(seconds: int) -> GhostState:
        """Return scatter or chase for the seconds spent in those states."""
        count = bisect.bisect_right(_STATE_CHANGES, seconds)
        return GhostState.SCATTER if count % 2 == 0 else GhostState.CHASE

    def _update_animation(self, time_delta: int) -> None:
        self._time_for_animation += time_delta
        if self._time_for_animation >= _ANIMATION_STEP_MS:
            self._time_for_animation = 0.0
            self._animation_index = (self._animation_index + 1) % 4

    def _update_position(self, time_delta: int) -> None:
        self._update_direction()

        position_delta = _CELLS_PER_MS * time_delta * self.speed()
        old_position = self.position()
        old_grid_position = position_to_grid_position(old_position)

        if self.direction is Direction.LEFT:
            self._pos.x -= position_delta
            self._pos.y = _round_half_away(self._pos.y)
        elif self.direction is Direction.RIGHT:
            self._pos.x += position_delta
            self._pos.y = _round_half_away(self._pos.y)
        elif self.direction is Direction.UP:
            self._pos.x = _round_half_away(self._pos.x)
            self._pos.y -= position_delta
        elif self.direction is Direction.DOWN:
            self._pos.x = _round_half_away(self._pos.x)
            self._pos.y += position_delta

        if is_portal(self.position_in_grid(), self.direction):
            self._pos = grid_position_to_position(teleport(self.position_in_grid()))
        elif not is_walkable_for_ghost(self.position_in_grid(), old_grid_position, self.is_eyes()):
            self._pos = old_position
            self.direction = opposite_direction(self.direction)

    def _update_direction(self) -> None:
        """At each new cell, pick the neighbour closest to the target.

        The way back and cells the ghost may not enter count as infinitely far;
        ties go to up, then left, then down, then right.
        """
        current = self.position_in_grid()
        if current == self._last_grid_position:
            return

        x, y = float(current.x), float(current.y)
        candidates = (
            (Direction.UP, Position(x, y - 1)),
            (Direction.LEFT, Position(x - 1, y)),
            (Direction.DOWN, Position(x, y + 1)),
            (Direction.RIGHT, Position(x + 1, y)),
        )
        backwards = opposite_direction(self.direction)

        def distance(direction: Direction, position: Position) -> float:
            if is_portal(current, direction):
                position = grid_position_to_position(teleport(current))
            if position.x < 0 or position.y < 0 or direction is backwards:
                return math.inf
            cell = GridPosition(int(position.x), int(position.y))
            if not is_walkable_for_ghost(cell, current, self.is_eyes()):
                return math.inf
            return math.hypot(position.x - self.target.x, position.y - self.target.y)

        self.direction = min(candidates, key=lambda move: distance(*move))[0]
        self._last_grid_position = current


def _offset_target(pacman_pos: GridPosition, pacman_dir: Direction, cells: int) -> GridPosition:
    x, y = pacman_pos.x, pacman_pos.y
    if pacman_dir is Direction.LEFT:
        x -= cells
    elif pacman_dir is Direction.RIGHT:
        x += cells
    elif pacman_dir is Direction.UP:
        y -= cells
        x -= cells
    elif pacman_dir is Direction.DOWN:
        y += cells
    else:
        raise ValueError("Pac-Man should be moving")
    return GridPosition(x, y)


class Blinky(Ghost):
    """The red ghost, who heads straight for Pac-Man."""

    _START = (13.5, 11)
    _SCATTER = (25, -3)

    def __init__(self) -> None:
        super().__init__(GhostSprite.BLINKY, Position(*self._START))

    def set_target(self, pacman_pos: Position) -> None:
        if self.state is GhostState.EYES:
            self.target = self.initial_position()
        elif self.is_in_pen():
            self.target = pen_door_position()
        elif self.state is GhostState.CHASE:
            self.target = Position(pacman_pos.x, pacman_pos.y)
        else:
            self.target = self.scatter_target()

    def initial_position(self) -> Position:
        return Position(*self._START)

    def scatter_target(self) -> Position:
        return Position(*self._SCATTER)


class Pinky(Ghost):
    """The pink ghost, who aims four cells ahead of Pac-Man."""

    _START = (11.5, 14)
    _SCATTER = (3, -2)

    def __init__(self) -> None:
        super().__init__(GhostSprite.PINKY, Position(*self._START))

    def set_target(self, pacman_pos: GridPosition, pacman_dir: Direction) -> None:
        if self.state is GhostState.EYES:
            self.target = self.initial_position()
        elif self.is_in_pen():
            self.target = pen_door_position()
        elif self.state is GhostState.SCATTER:
            self.target = self.scatter_target()
        else:
            self.target = grid_position_to_position(_offset_target(pacman_pos, pacman_dir, 4))

    def initial_position(self) -> Position:
        return Position(*self._START)

    def scatter_target(self) -> Position:
        return Position(*self._SCATTER)


class Inky(Ghost):
    """The cyan ghost, who aims past Pac-Man as seen from Blinky."""

    _START = (13.5, 14)
    _SCATTER = (27, 30)

    def __init__(self) -> None:
        super().__init__(GhostSprite.INKY, Position(*self._START))

    def set_target(
        self, pacman_pos: GridPosition, pacman_dir: Direction, blinky_pos: GridPosition
    ) -> None:
        if self.state is GhostState.EYES:
            self.target = self.initial_position()
            return
        if self.is_in_pen():
            self.target = pen_door_position()
            return
        if self.state is GhostState.SCATTER:
            self.target = self.scatter_target()
            return

        ahead = _offset_target(pacman_pos, pacman_dir, 2)
        dx = ahead.x - blinky_pos.x
        dy = ahead.y - blinky_pos.y
        distance = math.hypot(dx, dy)
        if distance:
            ahead = GridPosition(ahead.x + int(dx / distance) * 2, ahead.y + int(dy / distance) * 2)
        self.target = grid_position_to_position(ahead)

    def initial_position(self) -> Position:
        return Position(*self._START)

    def scatter_target(self) -> Position:
        return Position(*self._SCATTER)
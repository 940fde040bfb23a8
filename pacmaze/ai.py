"""A simple autopilot that steers Pac-Man towards the nearest pellet."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from operator import attrgetter
from typing import TYPE_CHECKING, Sequence

from pacmaze.board import initial_pacman_position, is_intersection, is_walkable_for_pacman
from pacmaze.direction import Direction, opposite_direction
from pacmaze.position import (
    GridPosition,
    Position,
    position_distance,
    position_to_grid_position,
)

if TYPE_CHECKING:
    from pacmaze.pacman import PacMan
    from pacmaze.pellets import Pellets


@dataclass
class Move:
    """A candidate step and how far it leaves Pac-Man from his target."""

    direction: Direction = Direction.NONE
    position: GridPosition = GridPosition(0, 0)
    distance_to_target: float = math.inf


class PacManAI:
    """Suggests a direction for Pac-Man at every intersection he reaches."""

    def __init__(self) -> None:
        self._pos = initial_pacman_position()
        self._suggested_direction = Direction.RIGHT

    def reset(self) -> None:
        """Forget the last decision and suggest going right."""
        self._pos = Position()
        self._suggested_direction = Direction.RIGHT

    def position(self) -> Position:
        """Return where the last decision was taken."""
        return Position(self._pos.x, self._pos.y)

    def direction(self) -> Direction:
        """Return the suggested direction."""
        return self._suggested_direction

    def pellet_closest_to_pacman(
        self, pacman_grid_position: GridPosition, pellets: Sequence[GridPosition]
    ) -> GridPosition:
        """Return the pellet nearest to Pac-Man; ties go to the earliest one."""
        if not pellets:
            raise ValueError("there are no pellets to choose from")
        return min(pellets, key=lambda pellet: position_distance(pacman_grid_position, pellet))

    def is_valid_move(self, move: Move) -> bool:
        """Tell whether a move neither turns back nor runs into a wall."""
        if move.direction is opposite_direction(self._suggested_direction):
            return False
        return is_walkable_for_pacman(move.position)

    def optimal_direction(self, moves: Sequence[Move]) -> Direction:
        """Return the direction of the shortest move; ties go to the first."""
        return min(moves, key=attrgetter("distance_to_target")).direction

    def update(self, pacman: PacMan, pellets: Pellets) -> None:
        """Choose a new direction when Pac-Man reaches a new intersection."""
        pacman_grid = pacman.position_in_grid()
        current_grid = position_to_grid_position(self._pos)

        if not is_intersection(pacman_grid) or current_grid == pacman_grid:
            return

        self._suggested_direction = self._choose_new_direction(pacman, pellets)
        self._pos = pacman.position()

    def _choose_new_direction(self, pacman: PacMan, pellets: Pellets) -> Direction:
        remaining = pellets.all_pellets()
        if not remaining:
            return Direction.NONE

        current = pacman.position_in_grid()
        target = self.pellet_closest_to_pacman(current, remaining)

        x, y = current.x, current.y
        candidates = (
            Move(Direction.UP, GridPosition(x, y - 1)),
            Move(Direction.LEFT, GridPosition(x - 1, y)),
            Move(Direction.DOWN, GridPosition(x, y + 1)),
            Move(Direction.RIGHT, GridPosition(x + 1, y)),
        )
        moves = [
            replace(move, distance_to_target=position_distance(move.position, target))
            if self.is_valid_move(move)
            else move
            for move in candidates
        ]
        return self.optimal_direction(moves)
"""Continuous and grid positions on the maze."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Protocol


@dataclass(eq=False)
class Position:
    """A point in maze coordinates, measured in cells."""

    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        epsilon = sys.float_info.epsilon
        return abs(self.x - other.x) <= epsilon and abs(self.y - other.y) <= epsilon

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class GridPosition:
    """A cell of the maze, or of a sprite sheet."""

    x: int
    y: int


class _Point(Protocol):
    x: float
    y: float


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5))


def position_to_grid_position(pos: Position) -> GridPosition:
    """Return the cell nearest to a position; halves round up."""
    if pos.x < 0 or pos.y < 0:
        raise ValueError("Position should have positive values")
    return GridPosition(_round_half_away(pos.x), _round_half_away(pos.y))


def grid_position_to_position(pos: GridPosition) -> Position:
    """Return the position at the origin of a cell."""
    return Position(float(pos.x), float(pos.y))


def position_distance(a: _Point, b: _Point) -> float:
    """Return the straight-line distance between two points of the same kind."""
    return math.hypot(float(a.x) - float(b.x), float(a.y) - float(b.y))
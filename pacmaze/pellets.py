"""Pellets and power pellets left on the maze."""

from __future__ import annotations

from pacmaze.board import initial_pellet_positions, initial_super_pellet_positions
from pacmaze.position import GridPosition


def _eat(positions: list[GridPosition], p: GridPosition) -> bool:
    try:
        positions.remove(p)
    except ValueError:
        return False
    return True


class Pellets:
    """The ordinary pellets."""

    _SPRITE = GridPosition(1, 9)

    def __init__(self) -> None:
        self._positions = initial_pellet_positions()

    def current_sprite(self) -> GridPosition:
        """Return the sprite used to draw each pellet."""
        return self._SPRITE

    def all_pellets(self) -> list[GridPosition]:
        """Return a copy of the cells that still hold a pellet."""
        return list(self._positions)

    def is_pellet(self, p: GridPosition) -> bool:
        """Tell whether a cell still holds a pellet."""
        return p in self._positions

    def eat_pellet_at_position(self, p: GridPosition) -> bool:
        """Remove the pellet at a cell; return whether there was one."""
        return _eat(self._positions, p)


class SuperPellets:
    """The power pellets that frighten the ghosts."""

    _SPRITE = GridPosition(0, 9)

    def __init__(self) -> None:
        self._positions = initial_super_pellet_positions()

    def current_sprite(self) -> GridPosition:
        """Return the sprite used to draw each power pellet."""
        return self._SPRITE

    def all_pellets(self) -> list[GridPosition]:
        """Return a copy of the cells that still hold a power pellet."""
        return list(self._positions)

    def is_pellet(self, p: GridPosition) -> bool:
        """Tell whether a cell still holds a power pellet."""
        return p in self._positions

    def eat_pellet_at_position(self, p: GridPosition) -> bool:
        """Remove the power pellet at a cell; return whether there was one."""
        return _eat(self._positions, p)
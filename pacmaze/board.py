"""The fixed maze layout and queries about its cells."""

from __future__ import annotations

from enum import Enum

from pacmaze.direction import Direction
from pacmaze.position import GridPosition, Position

ROWS = 31
COLUMNS = 28


class Cell(Enum):
    WALL = 0
    PELLET = 1
    NOTHING = 2
    POWER_PELLET = 4
    PEN = 5
    LEFT_PORTAL = 6
    RIGHT_PORTAL = 7


_ROW_0 = "0000000" "0000000" "0000000" "0000000"
_ROW_1 = "0111111" "1111110" "0111111" "1111110"
_ROW_2 = "0100001" "0000010" "0100000" "1000010"
_ROW_3 = "0400001" "0000010" "0100000" "1000040"
_ROW_5 = "0111111" "1111111" "1111111" "1111110"
_ROW_6 = "0100001" "0010000" "0000100" "1000010"
_ROW_8 = "0111111" "0011110" "0111100" "1111110"
_ROW_9 = "0000001" "0000020" "0200000" "1000000"
_ROW_11 = "0000001" "0022222" "2222200" "1000000"
_ROW_12 = "0000001" "0020005" "5000200" "1000000"
_ROW_13 = "0000001" "0020555" "5550200" "1000000"
_ROW_14 = "6222221" "2220555" "5550222" "1222227"
_ROW_16 = "0000001" "0020000" "0000200" "1000000"
_ROW_23 = "0411001" "1111112" "2111111" "1001140"
_ROW_24 = "0001001" "0010000" "0000100" "1001000"
_ROW_27 = "0100000" "0000010" "0100000" "0000010"

_BOARD = (
    _ROW_0,
    _ROW_1,
    _ROW_2,
    _ROW_3,
    _ROW_2,
    _ROW_5,
    _ROW_6,
    _ROW_6,
    _ROW_8,
    _ROW_9,
    _ROW_9,
    _ROW_11,
    _ROW_12,
    _ROW_13,
    _ROW_14,
    _ROW_13,
    _ROW_16,
    _ROW_11,
    _ROW_16,
    _ROW_16,
    _ROW_1,
    _ROW_2,
    _ROW_2,
    _ROW_23,
    _ROW_24,
    _ROW_24,
    _ROW_8,
    _ROW_27,
    _ROW_27,
    _ROW_5,
    _ROW_0,
)


def _cell_at(point: GridPosition) -> Cell:
    if not (0 <= point.x < COLUMNS and 0 <= point.y < ROWS):
        return Cell.WALL
    return Cell(int(_BOARD[point.y][point.x]))


def is_walkable_for_pacman(point: GridPosition) -> bool:
    """Tell whether Pac-Man may enter a cell."""
    return _cell_at(point) not in (Cell.WALL, Cell.PEN)


def is_walkable_for_ghost(
    target_position: GridPosition, current_position: GridPosition, is_eyes: bool
) -> bool:
    """Tell whether a ghost may step from one cell into another.

    Only eyes, or ghosts already in the pen, may enter the pen.
    """
    if _cell_at(target_position) is Cell.WALL:
        return False
    return is_eyes or is_in_pen(current_position) or not is_in_pen(target_position)


def is_in_pen(point: GridPosition) -> bool:
    """Tell whether a cell belongs to the ghost pen."""
    return _cell_at(point) is Cell.PEN


def is_portal(point: GridPosition, direction: Direction) -> bool:
    """Tell whether moving in a direction from a cell goes through a portal."""
    cell = _cell_at(point)
    return (cell is Cell.LEFT_PORTAL and direction is Direction.LEFT) or (
        cell is Cell.RIGHT_PORTAL and direction is Direction.RIGHT
    )


def is_intersection(point: GridPosition) -> bool:
    """Tell whether a walkable cell opens onto two perpendicular neighbours."""
    if not is_walkable_for_pacman(point) or _cell_at(point) in (
        Cell.LEFT_PORTAL,
        Cell.RIGHT_PORTAL,
    ):
        return False

    right = is_walkable_for_pacman(GridPosition(point.x + 1, point.y))
    left = is_walkable_for_pacman(GridPosition(point.x - 1, point.y))
    top = is_walkable_for_pacman(GridPosition(point.x, point.y - 1))
    bottom = is_walkable_for_pacman(GridPosition(point.x, point.y + 1))

    return (
        (top and right)
        or (right and bottom)
        or (bottom and left)
        or (left and top)
    )


def teleport(point: GridPosition) -> GridPosition:
    """Return the cell on the opposite edge of the maze for an edge cell."""
    right = COLUMNS - 1
    left = 0
    if point.x == left:
        return GridPosition(right, point.y)
    if point.x == right:
        return GridPosition(left, point.y)
    return point


def _positions_of(cell: Cell) -> list[GridPosition]:
    return [
        GridPosition(column, row)
        for row, line in enumerate(_BOARD)
        for column, value in enumerate(line)
        if Cell(int(value)) is cell
    ]


def initial_pellet_positions() -> list[GridPosition]:
    """Return the cells holding a pellet at the start, row by row."""
    return _positions_of(Cell.PELLET)


def initial_super_pellet_positions() -> list[GridPosition]:
    """Return the cells holding a power pellet at the start, row by row."""
    return _positions_of(Cell.POWER_PELLET)


def pen_door_position() -> Position:
    """Return the position of the door of the ghost pen."""
    return Position(13, 11)


def initial_pacman_position() -> Position:
    """Return where Pac-Man starts."""
    return Position(13.5, 23)
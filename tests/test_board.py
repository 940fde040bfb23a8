import pytest

from pacmaze.board import (
    COLUMNS,
    ROWS,
    initial_pacman_position,
    initial_pellet_positions,
    initial_super_pellet_positions,
    is_in_pen,
    is_intersection,
    is_portal,
    is_walkable_for_ghost,
    is_walkable_for_pacman,
    pen_door_position,
    teleport,
)
from pacmaze.direction import Direction
from pacmaze.position import GridPosition, Position

PEN = GridPosition(11, 13)
OUTSIDE = GridPosition(1, 1)
PORTAL_RIGHT = GridPosition(27, 14)
PORTAL_LEFT = GridPosition(0, 14)


@pytest.mark.parametrize(
    "point",
    [GridPosition(0, 0), GridPosition(27, 0), GridPosition(0, 30), GridPosition(27, 30), PEN],
)
def test_not_walkable_for_pacman(point):
    assert not is_walkable_for_pacman(point)


@pytest.mark.parametrize(
    "point",
    [GridPosition(1, 1), GridPosition(1, 3), GridPosition(1, 14), PORTAL_LEFT, PORTAL_RIGHT],
)
def test_walkable_for_pacman(point):
    assert is_walkable_for_pacman(point)


@pytest.mark.parametrize(
    "point",
    [GridPosition(0, 0), GridPosition(27, 0), GridPosition(0, 30), GridPosition(27, 30)],
)
def test_walls_not_walkable_for_ghost(point):
    assert not is_walkable_for_ghost(point, OUTSIDE, False)


@pytest.mark.parametrize(
    "point",
    [PEN, GridPosition(1, 1), GridPosition(1, 3), GridPosition(1, 14), PORTAL_LEFT, PORTAL_RIGHT],
)
def test_eyes_walk_anywhere_but_walls(point):
    assert is_walkable_for_ghost(point, OUTSIDE, True)


def test_pen_only_walkable_from_pen():
    assert not is_walkable_for_ghost(PEN, OUTSIDE, False)
    assert is_walkable_for_ghost(GridPosition(1, 1), OUTSIDE, False)
    assert is_walkable_for_ghost(GridPosition(1, 1), PEN, False)
    assert is_walkable_for_ghost(PEN, PEN, False)


def test_is_portal():
    assert is_portal(PORTAL_RIGHT, Direction.RIGHT)
    assert is_portal(PORTAL_LEFT, Direction.LEFT)
    assert not is_portal(PORTAL_RIGHT, Direction.LEFT)
    assert not is_portal(PORTAL_LEFT, Direction.RIGHT)


def test_teleport():
    assert teleport(PORTAL_RIGHT).x == PORTAL_LEFT.x
    assert teleport(PORTAL_LEFT).x == PORTAL_RIGHT.x


def test_teleport_round_trip_and_inner_cells():
    assert teleport(teleport(PORTAL_LEFT)) == PORTAL_LEFT
    assert teleport(GridPosition(5, 5)) == GridPosition(5, 5)


def test_outside_the_board_is_wall():
    assert not is_walkable_for_pacman(GridPosition(COLUMNS, 1))
    assert not is_walkable_for_pacman(GridPosition(1, ROWS))
    assert not is_walkable_for_pacman(GridPosition(-1, 14))
    assert not is_walkable_for_ghost(GridPosition(-1, 14), PORTAL_LEFT, True)


def test_is_in_pen():
    assert is_in_pen(PEN)
    assert not is_in_pen(OUTSIDE)


def test_intersections():
    assert is_intersection(GridPosition(1, 1))
    assert not is_intersection(GridPosition(1, 2))
    assert not is_intersection(GridPosition(0, 0))
    assert not is_intersection(PORTAL_LEFT)
    assert not is_intersection(PORTAL_RIGHT)


def test_initial_pellet_counts():
    assert len(initial_pellet_positions()) == 240
    assert len(initial_super_pellet_positions()) == 4


def test_initial_pellets_are_on_walkable_cells_in_row_order():
    pellets = initial_pellet_positions()
    assert all(is_walkable_for_pacman(p) for p in pellets)
    assert pellets == sorted(pellets, key=lambda p: (p.y, p.x))
    assert GridPosition(1, 1) in pellets
    assert GridPosition(1, 3) not in pellets


def test_super_pellets_include_corner_power_pellet():
    assert GridPosition(1, 3) in initial_super_pellet_positions()


def test_fixed_positions():
    assert pen_door_position() == Position(13, 11)
    assert initial_pacman_position() == Position(13.5, 23)
import pytest

from pacmaze.position import (
    GridPosition,
    Position,
    grid_position_to_position,
    position_distance,
    position_to_grid_position,
)


def test_positions_are_properly_initialized():
    pos = Position()
    assert pos.x == pytest.approx(0.0)
    assert pos.y == pytest.approx(0.0)

    pos2 = Position(10.0, 20.0)
    assert pos2.x == pytest.approx(10.0)
    assert pos2.y == pytest.approx(20.0)


def test_grid_positions_are_properly_initialized():
    grid_pos = GridPosition(10, 20)
    assert grid_pos.x == 10
    assert grid_pos.y == 20


def test_position_converts_to_grid_position():
    grid_pos = position_to_grid_position(Position(10.0, 20.0))
    assert grid_pos.x == 10
    assert grid_pos.y == 20


def test_grid_position_converts_to_position():
    pos = grid_position_to_position(GridPosition(10, 20))
    assert pos.x == pytest.approx(10.0)
    assert pos.y == pytest.approx(20.0)


def test_positions_compare_equal():
    pos1 = Position(10.0, 20.0)
    pos2 = Position(10.0, 20.0)
    assert pos1 == pos2

    pos3 = Position(9.9, 19.9)
    assert not pos1 == pos3

    pos3.x += 0.1
    pos3.y += 0.1
    assert pos1 == pos3


def test_half_cells_round_up():
    assert position_to_grid_position(Position(13.5, 23)) == GridPosition(14, 23)


def test_negative_position_is_rejected():
    with pytest.raises(ValueError):
        position_to_grid_position(Position(-1.0, 3.0))


def test_grid_round_trip():
    grid = GridPosition(7, 11)
    assert position_to_grid_position(grid_position_to_position(grid)) == grid


def test_position_distance_for_both_kinds():
    assert position_distance(GridPosition(0, 0), GridPosition(3, 4)) == pytest.approx(5.0)
    assert position_distance(Position(1.0, 1.0), Position(4.0, 5.0)) == pytest.approx(5.0)


def test_position_distance_is_symmetric():
    a = Position(2.5, 7.0)
    b = Position(10.0, 1.5)
    assert position_distance(a, b) == pytest.approx(position_distance(b, a))
    assert position_distance(a, a) == 0.0


def test_grid_positions_are_hashable_and_comparable():
    assert {GridPosition(1, 2), GridPosition(1, 2)} == {GridPosition(1, 2)}
    assert GridPosition(1, 2) != GridPosition(2, 1)
import pytest

from pacmaze.atlas import (
    GHOST_BLUE_FRIGHTENED,
    GHOST_BLUE_FRIGHTENED2,
    GHOST_WHITE_FRIGHTENED,
    GHOST_WHITE_FRIGHTENED2,
    GhostSprite,
    ending_frightened,
    eye_sprite,
    ghost_sprite,
    initial_frightened,
)
from pacmaze.direction import Direction
from pacmaze.position import GridPosition

MOVING = [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]


def test_eye_sprite_right_is_pinned():
    assert eye_sprite(Direction.RIGHT) == GridPosition(0, 6)


def test_eye_sprite_without_direction_looks_right():
    assert eye_sprite(Direction.NONE) == eye_sprite(Direction.RIGHT)


def test_eye_sprites_share_a_row_and_differ_by_direction():
    sprites = [eye_sprite(d) for d in MOVING]
    assert len({s.y for s in sprites}) == 1
    assert len(set(sprites)) == len(MOVING)


@pytest.mark.parametrize("ghost", list(GhostSprite))
@pytest.mark.parametrize("direction", MOVING)
def test_ghost_sprite_row_is_ghost_and_column_matches_eyes(ghost, direction):
    sprite = ghost_sprite(ghost, direction, False)
    assert sprite.y == int(ghost)
    assert sprite.x == eye_sprite(direction).x


@pytest.mark.parametrize("direction", MOVING)
def test_alternative_sprite_is_next_column(direction):
    plain = ghost_sprite(GhostSprite.INKY, direction, False)
    alternative = ghost_sprite(GhostSprite.INKY, direction, True)
    assert alternative == GridPosition(plain.x + 1, plain.y)


def test_ghost_sprite_without_direction_faces_right():
    assert ghost_sprite(GhostSprite.PINKY, Direction.NONE, False) == ghost_sprite(
        GhostSprite.PINKY, Direction.RIGHT, False
    )


def test_ghost_sprite_rejects_unknown_ghost():
    with pytest.raises(ValueError):
        ghost_sprite(1, Direction.LEFT, False)


def test_initial_frightened_alternates():
    assert initial_frightened(0) == GHOST_BLUE_FRIGHTENED2
    assert initial_frightened(1) == GHOST_BLUE_FRIGHTENED
    assert initial_frightened(2) == initial_frightened(0)
    assert initial_frightened(3) == initial_frightened(1)


def test_ending_frightened_cycles_through_four_sprites():
    assert [ending_frightened(i) for i in range(4)] == [
        GHOST_BLUE_FRIGHTENED,
        GHOST_BLUE_FRIGHTENED2,
        GHOST_WHITE_FRIGHTENED,
        GHOST_WHITE_FRIGHTENED2,
    ]


def test_ending_frightened_out_of_range():
    with pytest.raises(IndexError):
        ending_frightened(4)
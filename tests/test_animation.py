from pacmaze.animation import PacManAnimation
from pacmaze.atlas import (
    PACMAN_CLOSED,
    PACMAN_LEFT_NARROW,
    PACMAN_LEFT_WIDE,
    PACMAN_RIGHT_WIDE,
    PACMAN_UP_WIDE,
)
from pacmaze.direction import Direction


def test_initial_frames_are_wide_open():
    animation = PacManAnimation()
    assert animation.animation_frame(Direction.RIGHT) == PACMAN_RIGHT_WIDE
    assert animation.animation_frame(Direction.LEFT) == PACMAN_LEFT_WIDE
    assert animation.animation_frame(Direction.UP) == PACMAN_UP_WIDE


def test_no_direction_shows_closed_mouth():
    animation = PacManAnimation()
    animation.update_animation_position(50, False)
    assert animation.animation_frame(Direction.NONE) == PACMAN_CLOSED


def test_advances_one_frame_after_fifty_milliseconds():
    animation = PacManAnimation()
    animation.update_animation_position(50, False)
    assert animation.animation_frame(Direction.LEFT) == PACMAN_LEFT_NARROW


def test_pause_returns_to_wide_frame():
    animation = PacManAnimation()
    animation.update_animation_position(50, False)
    animation.pause()
    assert animation.animation_frame(Direction.LEFT) == PACMAN_LEFT_WIDE


def test_alive_animation_cycles_through_mouth_frames():
    animation = PacManAnimation()
    allowed = {PACMAN_LEFT_WIDE, PACMAN_LEFT_NARROW, PACMAN_CLOSED}
    for _ in range(200):
        animation.update_animation_position(16, False)
        assert animation.animation_frame(Direction.LEFT) in allowed


def test_death_frames_are_on_death_row():
    animation = PacManAnimation()
    animation.update_animation_position(50, True)
    assert animation.death_animation_frame().y == 1


def test_death_animation_stops_advancing():
    animation = PacManAnimation()
    for _ in range(100):
        animation.update_animation_position(50, True)
    final = animation.death_animation_frame()
    animation.update_animation_position(50, True)
    assert animation.death_animation_frame() == final
    assert final.x >= 11


def test_death_animation_never_goes_backwards():
    animation = PacManAnimation()
    previous = animation.death_animation_frame().x
    for _ in range(50):
        animation.update_animation_position(16, True)
        current = animation.death_animation_frame().x
        assert current >= previous
        previous = current
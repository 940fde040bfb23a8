"""The bonus fruit shown twice per level."""

from __future__ import annotations

from pacmaze.position import GridPosition, Position

_VISIBLE_FOR_MS = 9000
_FIRST_APPEARANCE_PELLETS = 70
_SECOND_APPEARANCE_PELLETS = 170


class Fruits:
    """A cherry that appears after 70 and after 170 pellets are eaten."""

    def __init__(self) -> None:
        self._visible = False
        self._index = 0
        self._time_visible = 0

    def update(self, time_delta: int, eaten_pellets: int) -> None:
        """Advance by time_delta milliseconds given the pellets eaten so far."""
        if self._visible:
            self._time_visible += time_delta

        if self._time_visible > _VISIBLE_FOR_MS:
            self._hide()
        elif (self._index == 0 and eaten_pellets >= _FIRST_APPEARANCE_PELLETS) or (
            self._index == 1 and eaten_pellets >= _SECOND_APPEARANCE_PELLETS
        ):
            self._visible = True

    def current_sprite(self) -> GridPosition:
        """Return the cherry sprite."""
        return GridPosition(3, 8)

    def position(self) -> Position:
        """Return where the fruit appears, under the pen."""
        return Position(13.5, 17)

    def is_visible(self) -> bool:
        return self._visible

    def value(self) -> int:
        """Return the points the fruit is worth."""
        return 100

    def eat(self) -> int:
        """Eat the fruit if it is showing and return the points gained."""
        if not self._visible:
            return 0
        self._hide()
        return self.value()

    def _hide(self) -> None:
        self._index += 1
        self._time_visible = 0
        self._visible = False
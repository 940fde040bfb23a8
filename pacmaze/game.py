"""The game loop."""

from __future__ import annotations

import time
from typing import Any, Protocol, Sequence

import pygame

from pacmaze.game_state import GameState, InputState

_STEP_MS = 1000 // 60


class _Screen(Protocol):
    def render(self, game_state: GameState) -> None: ...

    def poll_event(self) -> Any: ...


class Game:
    """Runs the game: reads input, advances the state in fixed steps, draws."""

    def __init__(self, canvas: _Screen | None = None, game_state: GameState | None = None) -> None:
        if canvas is None:
            from pacmaze.canvas import Canvas

            canvas = Canvas()
        self.canvas = canvas
        self.game_state = game_state if game_state is not None else GameState()

    def run(self) -> None:
        """Play until the window is closed."""
        accumulator = 0
        current_time = time.monotonic()

        while True:
            new_time = time.monotonic()
            accumulator += int((new_time - current_time) * 1000)
            current_time = new_time

            self.process_events(self.game_state.input_state)
            if self.game_state.input_state.close:
                return

            while accumulator >= _STEP_MS:
                self.game_state.step(_STEP_MS)
                accumulator -= _STEP_MS

            self.canvas.render(self.game_state)

    def process_events(self, input_state: InputState) -> None:
        """Apply the next window event, if any, to the input state."""
        event = self.canvas.poll_event()
        if event is None:
            return

        if event.type == pygame.QUIT:
            input_state.close = True
            return

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return

        def is_key_pressed(key: int) -> bool:
            return event.type == pygame.KEYDOWN and event.key == key

        if is_key_pressed(pygame.K_a):
            input_state.enable_ai = not input_state.enable_ai

        input_state.down = is_key_pressed(pygame.K_DOWN)
        input_state.up = is_key_pressed(pygame.K_UP)
        input_state.left = is_key_pressed(pygame.K_LEFT)
        input_state.right = is_key_pressed(pygame.K_RIGHT)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play."""
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
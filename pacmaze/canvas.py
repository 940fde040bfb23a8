"""Drawing the game in a window."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pygame

from pacmaze import atlas
from pacmaze.position import GridPosition, Position, grid_position_to_position

if TYPE_CHECKING:
    from pacmaze.fruits import Fruits
    from pacmaze.game_state import GameState
    from pacmaze.ghost import Ghost
    from pacmaze.pacman import PacMan
    from pacmaze.pellets import Pellets, SuperPellets

LEFT_MARGIN = 40 * 2
TOP_MARGIN = 40 * 2
BOTTOM_MARGIN = 40 * 2
MAZE_WIDTH = 448
MAZE_HEIGHT = 496
MAZE_SCALE_UP = 2
TARGET_MAZE_WIDTH = MAZE_WIDTH * MAZE_SCALE_UP
TARGET_MAZE_HEIGHT = MAZE_HEIGHT * MAZE_SCALE_UP
SCORE_WIDTH = 200 * 2
SPRITE_WIDTH = 32
SPRITE_HEIGHT = 32
FONT_SIZE = 40
FRAMERATE_LIMIT = 60

_SIDE_PANEL_X = LEFT_MARGIN + TARGET_MAZE_WIDTH + LEFT_MARGIN


def scaling_factor_for_window(window: object) -> float:
    """Return the display scaling factor of a window."""
    return 1.0


def _load_texture(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise SystemExit(f"Failed to load image {path}") from exc


def _load_font(path: Path) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), FONT_SIZE)
    except (pygame.error, OSError) as exc:
        raise SystemExit(f"Failed to load font {path}") from exc


class Canvas:
    """A window showing the maze, the characters and the score.

    The game is drawn at twice the native resolution onto an off-screen view,
    which is then scaled down to the window.
    """

    def __init__(self, asset_dir: str | Path = ".") -> None:
        pygame.display.init()
        pygame.font.init()

        assets = Path(asset_dir)
        maze_texture = _load_texture(assets / "maze.png")
        self._sprites_texture = _load_texture(assets / "sprites32.png")
        self._font = _load_font(assets / "retro_font.ttf")

        dims = self.view_dimensions()
        self.window = pygame.display.set_mode((dims.width // 2, dims.height // 2))
        pygame.display.set_caption("Pacman")

        scale = scaling_factor_for_window(self.window)
        size = (int(dims.width / 2.0 * scale), int(dims.height / 2.2 * scale))
        self.window = pygame.display.set_mode(size)

        self.view = pygame.Surface(dims.size)

        cropped = pygame.Surface((MAZE_WIDTH, MAZE_HEIGHT), pygame.SRCALPHA)
        cropped.blit(maze_texture, (0, 0))
        self._maze = pygame.transform.scale(cropped, (TARGET_MAZE_WIDTH, TARGET_MAZE_HEIGHT))
        self._clock = pygame.time.Clock()

    @staticmethod
    def view_dimensions() -> pygame.Rect:
        """Return the size of the full-resolution view."""
        width = LEFT_MARGIN + TARGET_MAZE_WIDTH + SCORE_WIDTH
        height = TOP_MARGIN + TARGET_MAZE_HEIGHT + BOTTOM_MARGIN
        return pygame.Rect(0, 0, width, height)

    def render(self, game_state: GameState) -> None:
        """Draw one frame of the game and show it."""
        self.view.fill((0, 0, 0))

        self._render_maze()
        self._render_pellets(game_state.pellets)
        self._render_pellets(game_state.super_pellets)

        for ghost in (game_state.blinky, game_state.pinky, game_state.inky):
            self._render_ghost(ghost)

        self._render_score(game_state.score.points)
        self._render_lives(game_state.score.lives)
        self._render_fruits(game_state.fruit, game_state.score.eaten_fruits)
        self._render_pacman(game_state.pacman)

        self._present()

    def poll_event(self) -> pygame.event.Event | None:
        """Return the next pending window event, if any."""
        event = pygame.event.poll()
        if event.type == pygame.NOEVENT:
            return None
        return event

    def _present(self) -> None:
        scaled = pygame.transform.scale(self.view, self.window.get_size())
        self.window.blit(scaled, (0, 0))
        pygame.display.flip()
        self._clock.tick(FRAMERATE_LIMIT)

    def _render_maze(self) -> None:
        self.view.blit(self._maze, (LEFT_MARGIN, TOP_MARGIN))

    def _render_pellets(self, pellets: Pellets | SuperPellets) -> None:
        sprite = pellets.current_sprite()
        for pos in pellets.all_pellets():
            self._render_sprite(sprite, grid_position_to_position(pos))

    def _render_pacman(self, pacman: PacMan) -> None:
        self._render_sprite(pacman.current_sprite(), pacman.position())

    def _render_ghost(self, ghost: Ghost) -> None:
        self._render_sprite(ghost.current_sprite(), ghost.position())

    def _render_fruits(self, fruit: Fruits, eaten_fruits: int) -> None:
        sprite = fruit.current_sprite()
        if fruit.is_visible():
            self._render_sprite(sprite, fruit.position())

        y = int(TARGET_MAZE_HEIGHT / 3.0 * 2)
        for i in range(eaten_fruits + 1):
            self._blit_sprite(sprite, (_SIDE_PANEL_X + i * SPRITE_WIDTH * 1.5, y))

    def _render_score(self, score: int) -> None:
        y = TOP_MARGIN * 2
        for line in f"SCORE\n{score}".splitlines():
            text = self._font.render(line, True, (255, 255, 255))
            self.view.blit(text, (_SIDE_PANEL_X, y))
            y += self._font.get_linesize()

    def _render_lives(self, lives: int) -> None:
        for i in range(lives - 1):
            self._blit_sprite(
                atlas.PACMAN_LEFT_NARROW,
                (_SIDE_PANEL_X + i * SPRITE_WIDTH * 1.5, TARGET_MAZE_HEIGHT),
            )

    def _render_sprite(self, sprite: GridPosition, pos: Position) -> None:
        self._blit_sprite(
            sprite,
            (LEFT_MARGIN + pos.x * SPRITE_WIDTH, TOP_MARGIN + pos.y * SPRITE_HEIGHT),
        )

    def _blit_sprite(self, sprite: GridPosition, dest: tuple[float, float]) -> None:
        area = pygame.Rect(
            sprite.x * SPRITE_WIDTH, sprite.y * SPRITE_HEIGHT, SPRITE_WIDTH, SPRITE_HEIGHT
        )
        self.view.blit(self._sprites_texture, (int(dest[0]), int(dest[1])), area)
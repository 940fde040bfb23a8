# pacmaze

A maze-chase arcade game. Steer through a 28 × 31 maze and clear it of pellets
while three ghosts, Blinky, Pinky and Inky, hunt you down.

## Installing

```
pip install .
```

The window needs the images `maze.png` and `sprites32.png` and the font
`retro_font.ttf` in the directory you start the game from. None of them ship
with the package. If one is missing, the game stops with a message such as
`Failed to load image maze.png`.

## Playing

```
pacmaze
```

`python -m pacmaze.game` does the same.

Controls:

- Arrow keys: choose a direction. Pac-Man turns as soon as the maze lets him.
- `A`: turn the autopilot on or off. The autopilot picks a direction at each
  intersection, heading for the nearest pellet.
- Close the window to quit.

Scoring:

- Pellet: 10 points.
- Power pellet: 50 points. It also frightens the ghosts for six seconds.
- Frightened ghost: 200 points. The ghost then goes back to the pen as a pair
  of eyes.
- Cherry: 100 points. It appears under the pen after 70 pellets and again
  after 170 pellets. Each time it stays for nine seconds.

You start with three lives. When a ghost that is not frightened catches you,
you lose a life. After a second, Pac-Man and the ghosts go back to their
starting places.

## Ghost behaviour

The ghosts switch between *scatter* and *chase* on a fixed timetable:
7 s scatter, 20 s chase, 7 s scatter, 20 s chase, 5 s scatter, 20 s chase,
5 s scatter, and after that chase for good. Each time they switch, they turn
around.

In scatter mode each ghost heads for its own target beyond a corner of the
maze. In chase mode:

- Blinky heads straight for you.
- Pinky aims four cells ahead of you.
- Inky aims at a point worked out from your position and Blinky's.

At every new cell a ghost moves to the neighbouring cell closest to its
target. It never turns back, and only eyes, or ghosts already inside, may
enter the pen.

## What the game does not do

- There is no game over. Losing your last life does not end the game.
- There is no next level. Clearing every pellet does not start a new maze.
- There is no sound.
- There is no high-score table, and nothing is saved between games.
- There are three ghosts only.

## Using the library

You can drive the game logic without a window:

```python
from pacmaze.game_state import GameState

state = GameState()
state.input_state.right = True
for _ in range(60):
    state.step(16)  # milliseconds

print(state.score.points, state.pacman.position_in_grid())
```

The modules:

- `pacmaze.direction`: `Direction` and `opposite_direction`.
- `pacmaze.position`: `Position`, `GridPosition` and conversions between them.
- `pacmaze.board`: queries about maze cells, such as `is_walkable_for_pacman`,
  `is_portal`, `is_intersection` and `teleport`.
- `pacmaze.atlas`: where sprites sit on the sprite sheet.
- `pacmaze.pellets`: `Pellets` and `SuperPellets`.
- `pacmaze.fruits`: `Fruits`.
- `pacmaze.animation`: `PacManAnimation`.
- `pacmaze.pacman`: `PacMan`.
- `pacmaze.ghost`: `Ghost`, `Blinky`, `Pinky` and `Inky`.
- `pacmaze.ai`: `PacManAI`, the autopilot.
- `pacmaze.game_state`: `GameState`, `InputState` and `Score`.
- `pacmaze.canvas`: `Canvas`, the pygame window.
- `pacmaze.game`: `Game`, the main loop, and `main`.

## Running the tests

```
pip install ".[test]"
pytest
```
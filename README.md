# mazerunner

A small arcade maze game built on pygame. Walk through a 20×20 maze, pick
up every star and keep away from the devils that roam the corridors. Clear
level 1 and level 2 begins, with devils that move twice as often.

## Installing

```
pip install .
```

## Playing

```
mazerunner
```

Options:

- `--assets DIR` – directory holding the fonts and images (default: `.`)
- `--maze FILE` – maze layout file (default: `Maze.txt`)
- `--scores FILE` – high-score file (default: `Scores.txt`)

Type a nickname on the welcome screen (up to 16 printable ASCII characters)
and press Enter to start; Esc or closing the window quits.

- Move with the WASD keys or the arrow keys; Esc quits the game.
- Each star is worth 10 points.
- If a devil lands on you, the game is over: the game-over screen is shown
  for five seconds and the game ends.
- Collect every star to complete the level; press Enter to go on, any other
  key quits. Going on starts level 2 with a fresh maze and your score kept.

When a game ends by being caught or by completing a level, a `name score`
line is appended to the scores file, and the top three scores are shown on
the game-over and level-complete screens.

At start-up the built-in layout is written to the maze file and then read
back from it.

### Assets

The game reads these files from the assets directory:

- required: `SuperPixel.ttf`, `FiraCode.ttf`, `maze wall.png`,
  `passage.png`, `player.png`, `enemy.png` – if any is missing the command
  logs an error and exits with status 1;
- optional: `collect.png` (stars are not drawn without it), `gameover.png`
  (without it the game-over screen is skipped), `trophy.png` (without it the
  level-complete screen is skipped and play goes straight on).

## Using the pieces

The game logic works without a window:

```python
from mazerunner.enemy import Enemy
from mazerunner.maze import Maze
from mazerunner.movement import move_player
from mazerunner.player import Player

maze = Maze("Maze.txt")          # writes the built-in layout to Maze.txt
player = Player()                # starts at (1, 1) with score 0
outcome = move_player(maze, player, "d")
print(outcome.value)             # "You just increased points!"
print(player.score)              # 10
print(maze.render_text(outcome.value, player, Enemy(2, 17)))
```

- `mazerunner.maze.Maze` – the grid: `cell`, `set_cell`, `is_wall`,
  `in_bounds`, `collectible_at`, `all_collected`, `save`, `load`,
  `create_layout`, `render_text` and `display` (console picture).
- `mazerunner.movement.move_player(maze, player, direction)` – moves the
  player for a WASD key and returns a `MoveOutcome` whose value is the
  status message.
- `mazerunner.enemy.Enemy.move(maze, rng)` – a random step that never enters
  a wall.
- `mazerunner.game.Game` – one run's state: `handle_direction`, `tick`,
  `is_caught`, `is_level_complete`, `next_level` and `draw`.
- `mazerunner.scores.append_score(path, name, score)` and
  `mazerunner.scores.top_scores(path, count)` – the high-score file;
  `top_scores` returns the best `(name, score)` pairs, highest first.

## Running the tests

```
pip install ".[test]"
pytest
```
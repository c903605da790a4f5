import pytest

from mazerunner.maze import Maze
from mazerunner.movement import MoveOutcome, move_player
from mazerunner.player import Player


@pytest.fixture
def maze(tmp_path):
    return Maze(tmp_path / "Maze.txt")


def test_move_onto_star_collects_it(maze):
    player = Player()
    outcome = move_player(maze, player, "d")
    assert outcome == "You just increased points!"
    assert player.position() == (2, 1)
    assert player.score == Player.SCORE_STEP
    assert maze.collectible_at(2, 1).collected is True


def test_move_onto_collected_star_just_moves(maze):
    player = Player()
    move_player(maze, player, "d")
    move_player(maze, player, "a")
    score = player.score
    move_player(maze, player, "d")
    outcome = move_player(maze, player, "a")
    assert outcome == "Moved"
    assert outcome is MoveOutcome.MOVED
    assert player.score == score


def test_uppercase_keys_work(maze):
    player = Player()
    assert move_player(maze, player, "S") is MoveOutcome.COLLECTED
    assert player.position() == (1, 2)


def test_wall_blocks_move(maze):
    player = Player()
    outcome = move_player(maze, player, "w")
    assert outcome == "Cannot move there!"
    assert player.position() == (1, 1)
    assert player.score == 0


@pytest.mark.parametrize("key", ["x", "q", "1", ""])
def test_invalid_key(maze, key):
    player = Player()
    outcome = move_player(maze, player, key)
    assert outcome == "WASD Keys only, please!"
    assert player.position() == (1, 1)


def test_out_of_bounds(maze):
    player = Player()
    player.move_to(0, 0)
    outcome = move_player(maze, player, "a")
    assert outcome == "Moving out of Maze Grid!"
    assert player.position() == (0, 0)


def test_move_into_empty_passage(maze):
    player = Player()
    player.move_to(9, 7)
    maze.set_cell(9, 6, " ")
    assert move_player(maze, player, "w") is MoveOutcome.MOVED
    assert player.position() == (9, 6)
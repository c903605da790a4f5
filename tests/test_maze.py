import io

import pytest

from mazerunner.enemy import Enemy
from mazerunner.maze import Maze
from mazerunner.player import Player


@pytest.fixture
def maze(tmp_path):
    return Maze(tmp_path / "Maze.txt")


def test_construction_writes_file(tmp_path):
    path = tmp_path / "Maze.txt"
    maze = Maze(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == maze.size
    assert all(len(line) == maze.size for line in lines)
    assert lines[0] == "+" + "-" * (maze.size - 2) + "+"
    assert lines[-1] == lines[0]


def test_cells_and_walls(maze):
    assert maze.cell(0, 0) == "+"
    assert maze.cell(1, 1) == "*"
    assert maze.is_wall(0, 0)
    assert maze.is_wall(0, 5)
    assert not maze.is_wall(1, 1)
    assert maze.cell(9, 5) == " "


def test_bounds(maze):
    assert maze.in_bounds(0, 0)
    assert maze.in_bounds(maze.size - 1, maze.size - 1)
    assert not maze.in_bounds(-1, 0)
    assert not maze.in_bounds(0, maze.size)


def test_cell_out_of_bounds_raises(maze):
    with pytest.raises(IndexError):
        maze.cell(maze.size, 0)
    with pytest.raises(IndexError):
        maze.set_cell(-1, 0, "*")


def test_set_cell_requires_single_character(maze):
    with pytest.raises(ValueError):
        maze.set_cell(2, 2, "**")


def test_set_cell_changes_cell(maze):
    maze.set_cell(9, 5, "*")
    assert maze.cell(9, 5) == "*"


def test_save_and_load_round_trip(maze):
    maze.set_cell(9, 5, "*")
    maze.save()
    maze.set_cell(9, 5, " ")
    maze.load()
    assert maze.cell(9, 5) == "*"


def test_load_missing_file_regenerates(maze):
    maze.set_cell(9, 5, "*")
    maze.path.unlink()
    maze.load()
    assert maze.path.exists()
    assert maze.cell(9, 5) == " "


def test_load_malformed_file_raises(maze):
    maze.path.write_text("abc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        maze.load()


def test_create_layout_resets_collectibles(maze):
    maze.collectible_at(1, 1).collect()
    maze.create_layout()
    assert maze.collectible_at(1, 1).collected is False


def test_all_collected(maze):
    assert maze.all_collected() is False
    for y in range(maze.size):
        for x in range(maze.size):
            if maze.cell(x, y) == "*":
                maze.collectible_at(x, y).collect()
    assert maze.all_collected() is True


def test_render_text_marks_player_and_enemy(maze):
    player = Player()
    enemy = Enemy(2, 1)
    text = maze.render_text("Welcome to the Maze", player, enemy)
    lines = text.splitlines()
    assert lines[1] == "Your Score: 0"
    assert lines[2].startswith("+ - ")
    assert lines[3].startswith("| P X * ")
    assert lines[-1] == "Welcome to the Maze"
    assert len(lines) == maze.size + 4


def test_render_text_hides_collected_star(maze):
    maze.collectible_at(3, 1).collect()
    text = maze.render_text("Moved", Player(), Enemy(10, 10))
    row = text.splitlines()[3]
    assert row.split(" ")[3] == ""


def test_display_writes_render_text(maze):
    stream = io.StringIO()
    player = Player()
    enemy = Enemy(5, 5)
    maze.display("Moved", player, enemy, stream)
    assert stream.getvalue() == maze.render_text("Moved", player, enemy)
import random

import pytest

from environment.maze import CELL_OPEN, CELL_PATH, CELL_WALL, PRESET_MAZES, Maze


def test_empty_maze_matches_initial_window():
    maze = Maze.empty(10, 13)
    assert (maze.rows, maze.cols) == (10, 13)
    assert maze.start_pos == (0, 0)
    assert maze.end_pos == (9, 12)
    assert all(value == CELL_OPEN for row in maze.grid for value in row)
    assert maze.label == "empty"


def test_presets_have_fixed_start_and_end():
    for index in range(len(PRESET_MAZES)):
        maze = Maze.from_preset(index)
        assert (maze.rows, maze.cols) == (10, 13)
        assert maze.start_pos == (1, 1)
        assert maze.end_pos == (8, 11)
        assert maze.label == f"preset-{index + 1}"


def test_preset_grid_is_a_copy():
    maze = Maze.from_preset(0)
    maze.grid[1][1] = CELL_PATH
    assert PRESET_MAZES[0][1][1] == CELL_OPEN
    assert Maze.from_preset(0).grid[1][1] == CELL_OPEN


def test_unknown_preset_is_rejected():
    with pytest.raises(ValueError):
        Maze.from_preset(len(PRESET_MAZES))


def test_random_preset_uses_given_rng():
    labels = {Maze.random_preset(random.Random(seed)).label for seed in range(40)}
    assert labels <= {f"preset-{i + 1}" for i in range(len(PRESET_MAZES))}
    assert len(labels) > 1


def test_generate_is_reproducible_with_seed():
    first = Maze.generate(9, 13, seed=123)
    second = Maze.generate(9, 13, seed=123)
    assert first.grid == second.grid
    assert first.seed == 123
    assert first.label == "generated-123"


def test_generate_records_random_seed():
    maze = Maze.generate(7, 7)
    assert maze.seed is not None
    assert Maze.generate(7, 7, maze.seed).grid == maze.grid


def test_generate_keeps_outer_border_walls():
    maze = Maze.generate(11, 11, seed=5)
    assert all(value == CELL_WALL for value in maze.grid[0])
    assert all(value == CELL_WALL for value in maze.grid[-1])
    assert all(row[0] == CELL_WALL and row[-1] == CELL_WALL for row in maze.grid)
    assert maze.is_walkable(*maze.start_pos)
    assert maze.is_walkable(*maze.end_pos)


@pytest.mark.parametrize("rows,cols", [(4, 7), (7, 4), (6, 9), (9, 8)])
def test_generate_rejects_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Maze.generate(rows, cols)


def test_constructor_validation():
    with pytest.raises(ValueError):
        Maze([], (0, 0), (0, 0))
    with pytest.raises(ValueError):
        Maze([[0, 0], [0]], (0, 0), (1, 0))
    with pytest.raises(ValueError):
        Maze([[0, 0], [0, 0]], (0, 0), (2, 0))
    with pytest.raises(ValueError):
        Maze([[1, 0], [0, 0]], (0, 0), (1, 1))


def test_cell_queries():
    maze = Maze([[0, 1], [0, 0]], (0, 0), (1, 1))
    assert maze.is_walkable(0, 0)
    assert not maze.is_walkable(0, 1)
    assert not maze.is_walkable(5, 5)
    assert maze.get_cell_type(0, 1) == CELL_WALL
    assert maze.get_cell_type(-1, 0) == CELL_WALL


def test_clear_path_removes_only_path_marks():
    maze = Maze([[0, 2, 1], [2, 2, 0]], (0, 0), (1, 2))
    assert maze.path_cells() == [(0, 1), (1, 0), (1, 1)]
    assert maze.clear_path() == 3
    assert maze.grid == [[0, 0, 1], [0, 0, 0]]
    assert maze.path_cells() == []


def test_display_prints_markers(capsys):
    maze = Maze([[0, 1], [2, 0]], (0, 0), (1, 1))
    maze.display()
    out = capsys.readouterr().out.splitlines()
    assert out == [" S##", " . E"]

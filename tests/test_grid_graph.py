import pytest

from pathfinding.grid_graph import Cell, DIRECTIONS, GridGraph, build_graph


def test_every_cell_is_in_graph():
    graph = build_graph(4, 6)
    cells = list(graph)
    assert len(cells) == 24 == len(graph)
    assert Cell(0, 0) in graph
    assert (3, 5) in graph
    assert (4, 0) not in graph
    assert (0, -1) not in graph
    assert "not a cell" not in graph


def test_neighbors_follow_fixed_direction_order():
    graph = build_graph(3, 3)
    # вгору, вниз, вліво, вправо
    assert graph.neighbors((1, 1)) == (Cell(0, 1), Cell(2, 1), Cell(1, 0), Cell(1, 2))
    assert DIRECTIONS == ((-1, 0), (1, 0), (0, -1), (0, 1))


def test_corner_and_edge_neighbors_stay_in_bounds():
    graph = build_graph(3, 4)
    assert graph.neighbors((0, 0)) == (Cell(1, 0), Cell(0, 1))
    assert graph.neighbors((2, 3)) == (Cell(1, 3), Cell(2, 2))
    assert graph.neighbors((0, 2)) == (Cell(1, 2), Cell(0, 1), Cell(0, 3))


def test_single_cell_graph_has_no_neighbors():
    graph = build_graph(1, 1)
    assert graph.neighbors((0, 0)) == ()


def test_adjacency_is_symmetric():
    graph = build_graph(5, 7)
    adjacency = graph.adjacency()
    for cell, neighbors in adjacency.items():
        for neighbor in neighbors:
            assert cell in adjacency[neighbor]


def test_build_graph_is_idempotent():
    assert build_graph(6, 4).adjacency() == build_graph(6, 4).adjacency()


def test_neighbor_count_matches_grid_edges():
    rows, cols = 4, 5
    graph = build_graph(rows, cols)
    total = sum(len(graph.neighbors(cell)) for cell in graph)
    # Кожне ребро враховується двічі
    assert total == 2 * (rows * (cols - 1) + cols * (rows - 1))


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_are_rejected(rows, cols):
    with pytest.raises(ValueError):
        GridGraph(rows, cols)

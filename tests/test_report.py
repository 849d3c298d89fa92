import numpy as np

from tilepath.engine import INFINITY, dijkstra
from tilepath.floor import tile_floor_graph
from tilepath.report import format_distances, format_grid, grid_matrix


def test_format_distances():
    dist = [INFINITY, 0, 10, INFINITY, INFINITY, INFINITY]
    assert format_distances(dist, 2) == "        1         2 \n        0        10 \n"


def test_grid_matrix_marks_unreachable_cells():
    dist = dijkstra(9, tile_floor_graph(3, 3))
    grid = grid_matrix(3, 3, dist)
    assert grid.shape == (3, 3)
    expected = np.full((3, 3), -1)
    expected[2, 2] = 0
    assert np.array_equal(grid, expected)


def test_grid_matrix_is_row_major():
    dist = dijkstra(1, tile_floor_graph(4, 2))
    assert grid_matrix(4, 2, dist).tolist() == [[0, 1, 2, 3], [1, 2, 3, 4]]


def test_format_grid():
    dist = dijkstra(1, tile_floor_graph(3, 3))
    assert format_grid(3, 3, dist) == "  0  1  2\n  1  2  3\n  2  3  4\n"


def test_format_grid_unreachable():
    dist = dijkstra(5, tile_floor_graph(3, 3))
    assert format_grid(3, 3, dist) == " -1 -1 -1\n -1  0  1\n -1  1  2\n"

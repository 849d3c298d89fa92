import numpy as np
import pytest

from tilepath.exceptions import GraphFormatError, InputError
from tilepath.graph import INFINITY, Graph


def test_new_graph_is_empty():
    g = Graph(4)
    assert g.capacity == 4
    assert g.node_count == -1
    assert g.weights.shape == (5, 5)
    assert not g.weights.any()
    assert g.edge_count == 0


def test_zero_capacity_graph():
    g = Graph(0)
    assert g.weights.shape == (1, 1)
    assert g.node_count == -1


@pytest.mark.parametrize("capacity", [-1, 2.5, "3", True])
def test_invalid_capacity(capacity):
    with pytest.raises(InputError):
        Graph(capacity)


def test_set_edge_tracks_highest_node():
    g = Graph(5)
    g.set_edge(1, 2, 10)
    assert g.node_count == 2
    g.set_edge(4, 3, 1)
    assert g.node_count == 4
    g.set_edge(1, 1, 2)
    assert g.node_count == 4
    assert int(g.weights[1, 2]) == 10
    assert int(g.weights[4, 3]) == 1


def test_edges_are_directed():
    g = Graph(3)
    g.set_edge(1, 2, 7)
    assert int(g.weights[2, 1]) == 0


def test_set_edge_overwrites_weight():
    g = Graph(3)
    g.set_edge(1, 2, 7)
    g.set_edge(1, 2, 3)
    assert int(g.weights[1, 2]) == 3
    assert g.edge_count == 1


def test_node_id_equal_to_capacity_is_allowed():
    g = Graph(3)
    g.set_edge(3, 1, 1)
    assert g.node_count == 3


@pytest.mark.parametrize("u,v", [(4, 1), (1, 4), (-1, 1)])
def test_out_of_range_node(u, v):
    g = Graph(3)
    with pytest.raises(InputError):
        g.set_edge(u, v, 1)
    assert g.node_count == -1


@pytest.mark.parametrize("weight", [0, -3, 1.5, "2"])
def test_invalid_weight(weight):
    g = Graph(3)
    with pytest.raises(GraphFormatError):
        g.set_edge(1, 2, weight)
    assert g.edge_count == 0


def test_from_edges_and_iteration_order():
    g = Graph.from_edges(4, [(3, 1, 2), (1, 3, 5), (1, 2, 1)])
    assert list(g.edges()) == [(1, 2, 1), (1, 3, 5), (3, 1, 2)]
    assert g.edge_count == 3
    assert g.node_count == 3


def test_freeze_blocks_mutation():
    g = Graph.from_edges(3, [(1, 2, 1)])
    assert g.freeze() is g
    assert g.frozen
    with pytest.raises(InputError):
        g.set_edge(2, 3, 1)
    with pytest.raises(ValueError):
        g.weights[2, 3] = 1
    assert np.array_equal(g.weights[1], [0, 0, 1, 0])


@pytest.mark.parametrize("weight", [INFINITY, INFINITY + 1, 2**64])
def test_weight_must_stay_below_sentinel(weight):
    g = Graph(3)
    with pytest.raises(GraphFormatError):
        g.set_edge(1, 2, weight)
    assert g.node_count == -1
    assert g.edge_count == 0


def test_engine_reexports_sentinel():
    from tilepath import engine

    assert engine.INFINITY is INFINITY

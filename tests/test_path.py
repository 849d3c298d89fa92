import pytest

from tilepath.exceptions import InputError
from tilepath.path import reconstruct_path


def test_walks_back_to_source():
    preds = [None, None, 1, 2, 3]
    assert reconstruct_path(preds, 1, 4) == [1, 2, 3, 4]


def test_source_equals_target():
    assert reconstruct_path([None, None, 1], 1, 1) == [1]


def test_unreached_target():
    assert reconstruct_path([None, None, 1, None], 1, 3) == []


def test_chain_from_another_source_is_not_a_path():
    preds = [None, None, 1, 2]
    assert reconstruct_path(preds, 2, 1) == []


def test_cycle_in_predecessors_terminates():
    assert reconstruct_path([None, 2, 1, 1], 3, 1) == []


@pytest.mark.parametrize("source,target", [(1, 5), (-1, 1), (5, 1)])
def test_out_of_range(source, target):
    with pytest.raises(InputError):
        reconstruct_path([None, None, 1], source, target)


def test_path_from_engine_predecessors():
    from tilepath.engine import ShortestPathEngine
    from tilepath.floor import tile_floor_graph

    result = ShortestPathEngine(tile_floor_graph(3, 3)).solve(1)
    assert result.predecessors[0] is None
    assert reconstruct_path(result.predecessors, 1, 9) == [1, 2, 3, 6, 9]
    assert reconstruct_path(result.predecessors, 5, 9) == []

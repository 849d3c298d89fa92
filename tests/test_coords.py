import pytest
from hypothesis import given, strategies as st

from tilepath.coords import Coord, coord_to_node, node_to_coord
from tilepath.exceptions import InputError


def test_corners_of_three_wide_floor():
    assert coord_to_node(3, 0, 0) == 1
    assert coord_to_node(3, 2, 0) == 3
    assert coord_to_node(3, 0, 1) == 4
    assert coord_to_node(3, 2, 2) == 9


def test_node_to_coord_returns_named_tuple():
    c = node_to_coord(3, 6)
    assert c == Coord(2, 1)
    assert (c.x, c.y) == (2, 1)


def test_single_column_floor():
    assert [node_to_coord(1, n) for n in (1, 2, 3)] == [Coord(0, 0), Coord(0, 1), Coord(0, 2)]


def test_zero_width_rejected():
    with pytest.raises(InputError):
        node_to_coord(0, 1)


@given(
    st.integers(min_value=1, max_value=64).flatmap(
        lambda w: st.tuples(
            st.just(w),
            st.integers(min_value=0, max_value=w - 1),
            st.integers(min_value=0, max_value=200),
        )
    )
)
def test_coordinate_mapping_round_trips(args):
    width, x, y = args
    node = coord_to_node(width, x, y)
    assert node >= 1
    assert node_to_coord(width, node) == (x, y)


@given(st.integers(min_value=1, max_value=64), st.integers(min_value=1, max_value=10_000))
def test_node_mapping_round_trips(width, node):
    c = node_to_coord(width, node)
    assert 0 <= c.x < width
    assert coord_to_node(width, c.x, c.y) == node

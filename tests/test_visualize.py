import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from tilepath.engine import dijkstra  # noqa: E402
from tilepath.floor import tile_floor_graph  # noqa: E402
from tilepath.graph import Graph  # noqa: E402
from tilepath.visualize import draw_graph, plot_grid_distances, to_networkx  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_to_networkx():
    G = to_networkx(tile_floor_graph(3, 3))
    assert G.number_of_nodes() == 9
    assert G.number_of_edges() == 12
    assert G[1][2]["weight"] == 1
    assert not G.has_edge(2, 1)


def test_to_networkx_empty_graph():
    assert to_networkx(Graph(3)).number_of_nodes() == 0


def test_plot_grid_distances(tmp_path):
    dist = dijkstra(5, tile_floor_graph(3, 3))
    ax = plot_grid_distances(3, 3, dist, source=5)
    labels = [t.get_text() for t in ax.texts]
    assert labels == ["-", "-", "-", "-", "0", "1", "-", "1", "2"]
    assert len(ax.patches) == 1
    out = tmp_path / "grid.png"
    ax.figure.savefig(out)
    assert out.stat().st_size > 0


def test_plot_without_annotations_uses_given_axes():
    _, ax = plt.subplots()
    dist = dijkstra(1, tile_floor_graph(2, 2))
    assert plot_grid_distances(2, 2, dist, ax=ax, annotate=False) is ax
    assert len(ax.texts) == 0


def test_draw_graph_on_grid_layout(tmp_path):
    g = tile_floor_graph(3, 3, bidirectional=True)
    dist = dijkstra(1, g)
    ax = draw_graph(g, source=1, distances=dist, width=3, show_weights=True)
    labels = {t.get_text() for t in ax.texts}
    assert "1:0" in labels
    assert "9:4" in labels
    ax.figure.savefig(tmp_path / "graph.png")


def test_draw_graph_spring_layout():
    g = Graph.from_edges(4, [(1, 2, 3), (2, 3, 1), (3, 1, 2)])
    ax = draw_graph(g)
    labels = {t.get_text() for t in ax.texts}
    assert {"1", "2", "3"} <= labels

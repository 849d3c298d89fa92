"""Matplotlib and NetworkX views of tile floors and their distances.

Example:
```python
import matplotlib.pyplot as plt
from tilepath import dijkstra, tile_floor_graph
from tilepath.visualize import plot_grid_distances

g = tile_floor_graph(5, 4, bidirectional=True)
plot_grid_distances(5, 4, dijkstra(1, g), source=1)
plt.show()
```
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
from matplotlib.axes import Axes
from matplotlib.patches import Rectangle

from .coords import node_to_coord
from .graph import INFINITY
from .graph import Graph, Vertex
from .report import UNREACHABLE, grid_matrix


def plot_grid_distances(
    width: int,
    height: int,
    distances: Sequence[int],
    *,
    ax: Optional[Axes] = None,
    source: Optional[Vertex] = None,
    annotate: bool = True,
) -> Axes:
    """Draw the distance of every tile as a heatmap.

    Unreachable tiles are left blank. The source tile, if given, is outlined.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, width), max(3, height)))
    grid = grid_matrix(width, height, distances)
    masked = np.ma.masked_equal(grid, UNREACHABLE)
    image = ax.imshow(masked, cmap="viridis", origin="upper")
    ax.figure.colorbar(image, ax=ax, label="distance")

    if annotate:
        for y in range(height):
            for x in range(width):
                d = int(grid[y, x])
                ax.text(x, y, "-" if d == UNREACHABLE else str(d),
                        ha="center", va="center", fontsize=8, color="white")

    if source is not None:
        sx, sy = node_to_coord(width, source)
        ax.add_patch(Rectangle((sx - 0.5, sy - 0.5), 1, 1,
                               fill=False, edgecolor="tab:red", linewidth=2))

    ax.set_xticks(range(width))
    ax.set_yticks(range(height))
    ax.set_title("Shortest distance per tile")
    return ax


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Return ``graph`` as a ``networkx.DiGraph`` with ``weight`` edge attributes."""
    G = nx.DiGraph()
    if graph.node_count >= 1:
        G.add_nodes_from(range(1, graph.node_count + 1))
    for u, v, w in graph.edges():
        G.add_edge(u, v, weight=w)
    return G


def draw_graph(
    graph: Graph,
    *,
    source: Optional[Vertex] = None,
    distances: Optional[Sequence[int]] = None,
    width: Optional[int] = None,
    ax: Optional[Axes] = None,
    show_weights: bool = False,
) -> Axes:
    """Render the graph with NetworkX.

    With ``width`` the nodes sit on their tile coordinates, otherwise a
    spring layout is used. With ``distances`` each label shows
    ``id:distance``.
    """
    G = to_networkx(graph)
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    if width is not None:
        pos: Dict[Vertex, Tuple[float, float]] = {}
        for node in G.nodes:
            c = node_to_coord(width, node)
            pos[node] = (c.x, -c.y)
    else:
        pos = nx.spring_layout(G, seed=42)

    node_colors = ["tab:red" if node == source else "tab:blue" for node in G.nodes]
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=300, alpha=0.9)
    nx.draw_networkx_edges(G, pos, ax=ax, arrowstyle="->", arrowsize=12, width=1.2, alpha=0.6)

    if distances is not None:
        labels = {
            node: f"{node}:{distances[node] if distances[node] < INFINITY else '-'}"
            for node in G.nodes
        }
    else:
        labels = {node: str(node) for node in G.nodes}
    nx.draw_networkx_labels(G, pos, labels=labels, ax=ax, font_size=8)

    if show_weights:
        edge_labels = {(u, v): d["weight"] for u, v, d in G.edges(data=True)}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, ax=ax, font_size=7)

    ax.set_title("Directed weighted graph")
    ax.set_axis_off()
    return ax


__all__ = ["draw_graph", "plot_grid_distances", "to_networkx"]

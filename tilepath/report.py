"""Plain-text renderings of distance vectors."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import numpy.typing as npt

from .coords import coord_to_node
from .graph import INFINITY

UNREACHABLE = -1


def format_distances(distances: Sequence[int], node_count: int) -> str:
    """Return a two-line table: node ids ``1..node_count`` over their distances."""
    ids = range(1, node_count + 1)
    header = "".join(f"{i:>9} " for i in ids)
    values = "".join(f"{distances[i]:>9} " for i in ids)
    return f"{header}\n{values}\n"


def grid_matrix(width: int, height: int, distances: Sequence[int]) -> npt.NDArray[np.int64]:
    """Return distances laid out as a ``height x width`` array.

    Cells whose node was not reached hold ``-1``.
    """
    grid = np.full((height, width), UNREACHABLE, dtype=np.int64)
    for y in range(height):
        for x in range(width):
            d = distances[coord_to_node(width, x, y)]
            if d < INFINITY:
                grid[y, x] = d
    return grid


def format_grid(width: int, height: int, distances: Sequence[int]) -> str:
    """Return one line per floor row with each distance in a 3-wide column."""
    rows: List[str] = []
    for row in grid_matrix(width, height, distances):
        rows.append("".join(f"{int(d):>3}" for d in row))
    return "\n".join(rows) + "\n"


__all__ = ["UNREACHABLE", "format_distances", "format_grid", "grid_matrix"]

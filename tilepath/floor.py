"""Synthetic tile-floor graphs.

A floor ``width`` tiles wide and ``height`` tiles high links each tile to its
right and lower neighbour with a unit-weight edge::

    *-*-*
    | | |
    *-*-*
    | | |
    *-*-*

Edges point right and down only, so a tile can reach the tiles to its right
and below but none of those to its left or above. Pass
``bidirectional=True`` to add the reverse edges as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from .coords import coord_to_node
from .exceptions import GraphIOError, InputError
from .graph import Edge, Graph
from .io import PathLike, parse_graph
from .logger import Logger, NoopLogger

TILE_DISTANCE = 1


def _check_size(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InputError(f"floor size must be positive, got {width}x{height}")


def tile_floor_edge_count(width: int, height: int, bidirectional: bool = False) -> int:
    """Return the number of edges of a ``width x height`` floor."""
    _check_size(width, height)
    count = width * (height - 1) + (width - 1) * height
    return 2 * count if bidirectional else count


def tile_floor_edges(width: int, height: int, bidirectional: bool = False) -> Iterator[Edge]:
    """Yield the floor's edges: all horizontal edges row by row, then all
    vertical edges column by column."""
    _check_size(width, height)
    for y in range(height):
        for x in range(1, width):
            u, v = coord_to_node(width, x - 1, y), coord_to_node(width, x, y)
            yield u, v, TILE_DISTANCE
            if bidirectional:
                yield v, u, TILE_DISTANCE
    for x in range(width):
        for y in range(1, height):
            u, v = coord_to_node(width, x, y - 1), coord_to_node(width, x, y)
            yield u, v, TILE_DISTANCE
            if bidirectional:
                yield v, u, TILE_DISTANCE


def tile_floor_text(width: int, height: int, bidirectional: bool = False) -> str:
    """Return the floor as edge-list text, header first."""
    lines = [str(tile_floor_edge_count(width, height, bidirectional))]
    lines.extend(f"{u} {v} {w}" for u, v, w in tile_floor_edges(width, height, bidirectional))
    return "\n".join(lines) + "\n"


def make_tile_floor(
    path: PathLike,
    width: int,
    height: int,
    bidirectional: bool = False,
    logger: Logger | None = None,
) -> Path:
    """Write a tile floor to ``path``, replacing any existing file.

    Returns:
        The path written.

    Raises:
        InputError: If ``width`` or ``height`` is not positive.
        GraphIOError: If the file cannot be written.
    """
    log = logger or NoopLogger()
    text = tile_floor_text(width, height, bidirectional)
    p = Path(path)
    try:
        p.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise GraphIOError(f"could not open {p} for writing: {exc.strerror or exc}") from exc
    log.info("floor_written", path=str(p), width=width, height=height, bidirectional=bidirectional)
    return p


def tile_floor_graph(
    width: int,
    height: int,
    bidirectional: bool = False,
    logger: Logger | None = None,
) -> Graph:
    """Return the floor as a :class:`Graph`, exactly as loading its file would."""
    return parse_graph(tile_floor_text(width, height, bidirectional), logger=logger)


__all__ = [
    "TILE_DISTANCE",
    "make_tile_floor",
    "tile_floor_edge_count",
    "tile_floor_edges",
    "tile_floor_graph",
    "tile_floor_text",
]

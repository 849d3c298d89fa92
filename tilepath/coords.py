"""Mapping between tile-floor coordinates and 1-based node ids."""

from __future__ import annotations

from typing import NamedTuple

from .exceptions import InputError


class Coord(NamedTuple):
    """Column ``x`` and row ``y`` of a tile, both counted from zero."""

    x: int
    y: int


def coord_to_node(width: int, x: int, y: int) -> int:
    """Return the node id of tile ``(x, y)`` on a floor ``width`` tiles wide.

    Examples:
        ```python
        >>> coord_to_node(3, 0, 0)
        1
        >>> coord_to_node(3, 2, 1)
        6
        ```
    """
    return 1 + y * width + x


def node_to_coord(width: int, node_id: int) -> Coord:
    """Return the tile coordinate of ``node_id``; inverse of :func:`coord_to_node`.

    Raises:
        InputError: If ``width`` is smaller than 1.
    """
    if width < 1:
        raise InputError("width must be a positive integer.")
    y, x = divmod(node_id - 1, width)
    return Coord(x, y)


__all__ = ["Coord", "coord_to_node", "node_to_coord"]

"""Utilities for reconstructing paths from predecessor arrays."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .exceptions import InputError

Vertex = int


def reconstruct_path(
    predecessors: Sequence[Optional[Vertex]],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the node ids on the shortest path from ``source`` to ``target``.

    Args:
        predecessors: :attr:`ShortestPathResult.predecessors`, indexed by node
            id with index 0 unused. Holds the node that last lowered each
            distance, ``None`` for the source and for unreached nodes.
        source: Source node id of that engine run.
        target: Node id to walk back from.

    Returns:
        Node ids from ``source`` to ``target`` inclusive, or an empty list when
        ``target`` was not reached from ``source``.

    Raises:
        InputError: If ``source`` or ``target`` is not an index of
            ``predecessors``.
    """
    size = len(predecessors)
    if not (0 <= source < size and 0 <= target < size):
        raise InputError(f"source/target must be node ids in [0, {size}).")

    # A path visits each node at most once, so a longer walk means the
    # array did not come from a run rooted at ``source``.
    chain: List[Vertex] = [target]
    while chain[-1] != source and len(chain) <= size:
        prev = predecessors[chain[-1]]
        if prev is None:
            return []
        chain.append(prev)
    if chain[-1] != source:
        return []
    chain.reverse()
    return chain


__all__ = ["reconstruct_path"]

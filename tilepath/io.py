"""Reading and writing graphs in the line-oriented edge-list text format.

The format is::

    <edge count>
    <node1> <node2> <distance>
    ...

The edge count on the first line also sizes the weight matrix, so it must be
at least the highest node id used by any edge line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from .exceptions import (
    GraphFileNotFoundError,
    GraphFormatError,
    GraphIOError,
    InputError,
    ParseError,
)
from .graph import Edge, Graph
from .logger import Logger, NoopLogger

PathLike = Union[str, Path]


def _leading_ints(line: str) -> List[int]:
    """Return the integers at the start of ``line``, stopping at the first non-integer."""
    values: List[int] = []
    for token in line.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def _parse_header(line: Optional[str]) -> int:
    if line is None:
        raise ParseError("missing edge count header", lineno=1)
    values = _leading_ints(line)
    if not values:
        raise ParseError(f"edge count header is not an integer: {line.strip()!r}", lineno=1)
    if values[0] < 0:
        raise ParseError(f"edge count must be non-negative, got {values[0]}", lineno=1)
    return values[0]


def _parse_edge(line: str, lineno: int) -> Edge:
    values = _leading_ints(line)
    if len(values) < 3:
        raise ParseError(
            f"expected 'node1 node2 distance', found {len(values)} integer(s)",
            lineno=lineno,
        )
    u, v, w = values[:3]
    return u, v, w


def parse_graph(lines: Union[str, Iterable[str]], logger: Logger | None = None) -> Graph:
    """Build a :class:`Graph` from edge-list text.

    Args:
        lines: The whole text, or an iterable of lines such as an open file.
        logger: Receives a ``graph_loaded`` event and one ``edge`` event per
            stored edge.

    Returns:
        A graph whose capacity is the declared edge count. Lines past the
        declared count are ignored; if the input ends early the remaining
        edges are simply absent.

    Raises:
        ParseError: If the header is missing or invalid, an edge line holds
            fewer than three integers, uses a node id above the edge count,
            or has a non-positive distance.
    """
    log = logger or NoopLogger()
    if isinstance(lines, str):
        lines = lines.splitlines()
    it = iter(lines)

    edge_count = _parse_header(next(it, None))
    graph = Graph(edge_count)
    log.debug("edge_count", edge_count=edge_count)

    for i in range(edge_count):
        raw = next(it, None)
        if raw is None:
            log.warning("short_edge_list", declared=edge_count, read=i)
            break
        lineno = i + 2
        u, v, w = _parse_edge(raw, lineno)
        try:
            graph.set_edge(u, v, w)
        except (InputError, GraphFormatError) as exc:
            raise ParseError(str(exc), lineno=lineno) from exc
        log.debug("edge", u=u, v=v, w=w)
    return graph


def read_graph(path: PathLike, logger: Logger | None = None) -> Graph:
    """Read an edge-list file.

    Raises:
        GraphFileNotFoundError: If ``path`` does not exist.
        GraphIOError: If the file cannot be opened or read.
        ParseError: If the content is malformed.
    """
    log = logger or NoopLogger()
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as fh:
            graph = parse_graph(fh, logger=log)
    except FileNotFoundError as exc:
        raise GraphFileNotFoundError(f"could not open {p}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{p} is not a UTF-8 text file") from exc
    except OSError as exc:
        raise GraphIOError(f"could not read {p}: {exc.strerror or exc}") from exc
    log.info(
        "graph_loaded",
        path=str(p),
        capacity=graph.capacity,
        node_count=graph.node_count,
        edges=graph.edge_count,
    )
    return graph


def format_graph(graph: Graph) -> str:
    """Serialize ``graph`` to edge-list text.

    The header is the graph capacity, raised to the number of stored edges
    when there are more edges than that so no edge line is cut off on reload.
    """
    edges = list(graph.edges())
    lines = [str(max(graph.capacity, len(edges)))]
    lines.extend(f"{u} {v} {w}" for u, v, w in edges)
    return "\n".join(lines) + "\n"


def write_graph(graph: Graph, path: PathLike) -> None:
    """Write ``graph`` to ``path`` in edge-list format, replacing the file.

    Raises:
        GraphIOError: If the file cannot be written.
    """
    p = Path(path)
    try:
        p.write_text(format_graph(graph), encoding="utf-8")
    except OSError as exc:
        raise GraphIOError(f"could not write {p}: {exc.strerror or exc}") from exc


__all__ = ["parse_graph", "read_graph", "format_graph", "write_graph"]

"""Custom exception types used across :mod:`tilepath`."""

from __future__ import annotations

from typing import Optional


class TilePathError(Exception):
    """Base class for all package-specific errors."""


class InputError(TilePathError, ValueError):
    """Raised for invalid user input such as out-of-range node ids."""


class GraphFormatError(InputError):
    """Raised when edge data violates the graph invariants."""


class ParseError(GraphFormatError):
    """Raised when an edge-list text cannot be parsed.

    Attributes:
        lineno: 1-based line number of the offending line, or ``None`` when
            the problem is not tied to a single line.
    """

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class InvalidSourceError(InputError):
    """Raised when a source id lies outside ``[1, node_count]``."""

    def __init__(self, source: int, node_count: int) -> None:
        self.source = source
        self.node_count = node_count
        super().__init__(f"source {source} is not a node id in [1, {node_count}]")


class EmptyGraphError(InputError):
    """Raised when a shortest-path query is made on a graph without nodes."""


class ConfigError(TilePathError, ValueError):
    """Raised for invalid configuration options."""


class GraphIOError(TilePathError, OSError):
    """Raised when a graph file cannot be opened, read or written."""


class GraphFileNotFoundError(GraphIOError, FileNotFoundError):
    """Raised when a graph file does not exist."""


__all__ = [
    "TilePathError",
    "InputError",
    "GraphFormatError",
    "ParseError",
    "InvalidSourceError",
    "EmptyGraphError",
    "ConfigError",
    "GraphIOError",
    "GraphFileNotFoundError",
]

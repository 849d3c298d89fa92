"""Public package exports for :mod:`tilepath`."""

from __future__ import annotations

from .coords import Coord, coord_to_node, node_to_coord
from .engine import (
    EngineConfig,
    EngineMetrics,
    ShortestPathEngine,
    ShortestPathResult,
    dijkstra,
)
from .exceptions import (
    ConfigError,
    EmptyGraphError,
    GraphFileNotFoundError,
    GraphFormatError,
    GraphIOError,
    InputError,
    InvalidSourceError,
    ParseError,
    TilePathError,
)
from .floor import (
    make_tile_floor,
    tile_floor_edge_count,
    tile_floor_edges,
    tile_floor_graph,
    tile_floor_text,
)
from .graph import INFINITY, Graph
from .io import format_graph, parse_graph, read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import reconstruct_path
from .report import format_distances, format_grid, grid_matrix

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "coord_to_node",
    "node_to_coord",
    "Graph",
    "INFINITY",
    "dijkstra",
    "ShortestPathEngine",
    "ShortestPathResult",
    "EngineConfig",
    "EngineMetrics",
    "reconstruct_path",
    "parse_graph",
    "read_graph",
    "format_graph",
    "write_graph",
    "make_tile_floor",
    "tile_floor_edge_count",
    "tile_floor_edges",
    "tile_floor_graph",
    "tile_floor_text",
    "format_distances",
    "format_grid",
    "grid_matrix",
    "Logger",
    "NoopLogger",
    "StdLogger",
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

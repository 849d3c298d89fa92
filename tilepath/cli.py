"""Command-line interface for loading graphs and printing shortest distances."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from .engine import INFINITY, EngineConfig, ShortestPathEngine
from .exceptions import ConfigError, GraphIOError, InputError, TilePathError
from .floor import make_tile_floor, tile_floor_graph
from .graph import Graph
from .io import read_graph
from .logger import Logger, StdLogger
from .report import format_distances, format_grid

DEMO_WIDTH = 3

EXAMPLE_EDGES = """5
1 2 7
1 3 9
2 3 10
3 4 2
4 5 6
"""

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_INTERNAL = 70
EXIT_IOERR = 74


def _json_distances(distances: Sequence[int], node_count: int) -> List[Optional[int]]:
    return [d if d < INFINITY else None for d in distances[1 : node_count + 1]]


def _solve(
    graph: Graph, source: int, cfg: EngineConfig, logger: Logger
) -> tuple[ShortestPathEngine, List[int], float]:
    engine = ShortestPathEngine(graph, config=cfg, logger=logger)
    t0 = time.perf_counter()
    distances = engine.solve(source).distances
    wall_ms = (time.perf_counter() - t0) * 1000.0
    return engine, distances, wall_ms


def _run_demo(cfg: EngineConfig, logger: Logger, bidirectional: bool) -> None:
    width = height = DEMO_WIDTH
    graph = tile_floor_graph(width, height, bidirectional=bidirectional, logger=logger).freeze()
    # The last tile first, then every tile in id order.
    sources = [width * height] + list(range(1, width * height + 1))
    for source in sources:
        _, distances, _ = _solve(graph, source, cfg, logger)
        sys.stdout.write(f"====================== source = {source}\n")
        sys.stdout.write(format_grid(width, height, distances))


def _report_failure(args: argparse.Namespace, logger: Logger, exc: Exception, prefix: str) -> None:
    if args.log_json:
        logger.error("failed", kind=type(exc).__name__, message=str(exc))
    if args.verbose:
        traceback.print_exc()
    elif not args.log_json:
        sys.stderr.write(f"{prefix}: {exc}\n")


def _build_parser() -> argparse.ArgumentParser:
    examples = (
        "Examples:\n"
        "  tilepath --edges graph.txt --source 1\n"
        "  tilepath --tile-floor 3 3 --out table_tile_floor.txt\n"
        "  tilepath --tile-floor 4 3 --source 1 --bidirectional\n"
        "  tilepath --demo\n"
    )
    p = argparse.ArgumentParser(
        prog="tilepath",
        description="Dense Dijkstra shortest paths over edge lists and tile floors",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit log events as JSON lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Log verbosity",
    )

    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument("--edges", type=str, help="Path to an edge-list file")
    mode.add_argument(
        "--tile-floor",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        help="Generate a tile floor of the given size",
    )
    mode.add_argument(
        "--demo",
        action="store_true",
        help="Solve a 3x3 tile floor from its last tile, then from every tile, printing each grid",
    )
    mode.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edge-list file to stdout and exit",
    )

    p.add_argument("--source", type=int, default=None, help="Source node id")
    p.add_argument(
        "--target",
        type=int,
        default=None,
        help="Target node id for path output (--edges JSON mode)",
    )
    p.add_argument("--out", type=str, default=None, help="Write the generated tile floor here")
    p.add_argument(
        "--bidirectional",
        action="store_true",
        help="Link tile-floor neighbours in both directions",
    )
    p.add_argument("--selection", choices=["scan", "heap"], default="scan")
    p.add_argument(
        "--table",
        action="store_true",
        help="Print a distance table instead of JSON (--edges mode)",
    )
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``tilepath`` command-line tool."""
    p = _build_parser()
    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_EDGES)
        return EXIT_OK

    level = "info" if args.log_json and args.log_level == "warning" else args.log_level
    logger = StdLogger(level=level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        cfg = EngineConfig(selection=args.selection)
        if args.target is not None and (args.demo or args.tile_floor is not None or args.table):
            raise ConfigError("--target is only supported with --edges JSON output")

        if args.demo:
            _run_demo(cfg, logger, args.bidirectional)
            return EXIT_OK

        if args.tile_floor is not None:
            width, height = args.tile_floor
            if args.out:
                make_tile_floor(args.out, width, height, args.bidirectional, logger=logger)
                return EXIT_OK
            graph = tile_floor_graph(width, height, args.bidirectional, logger=logger)
            source = args.source if args.source is not None else width * height
        else:
            if args.source is None:
                raise ConfigError("--source is required with --edges")
            graph = read_graph(args.edges, logger=logger)
            source = args.source
        graph.freeze()

        engine, distances, wall_ms = _solve(graph, source, cfg, logger)

        if args.tile_floor is not None:
            sys.stdout.write(f"source = {source}\n")
            sys.stdout.write(format_grid(width, height, distances))
        elif args.table:
            sys.stdout.write(format_distances(distances, graph.node_count))
        else:
            out: Dict[str, Any] = {
                "source": source,
                "node_count": graph.node_count,
                "distances": _json_distances(distances, graph.node_count),
            }
            if args.target is not None:
                out["target"] = args.target
                out["path"] = engine.path(args.target)
            print(json.dumps(out))

        if args.metrics_out:
            metrics = engine.metrics(wall_ms=wall_ms)
            try:
                with open(args.metrics_out, "w", encoding="utf-8") as fh:
                    json.dump(asdict(metrics), fh)
            except OSError as exc:
                raise GraphIOError(f"could not write {args.metrics_out}: {exc}") from exc

        logger.info(
            "run",
            source=source,
            node_count=graph.node_count,
            selection=args.selection,
            wall_ms=round(wall_ms, 3),
            **engine.summary(),
        )
        return EXIT_OK

    except GraphIOError as exc:
        _report_failure(args, logger, exc, "error")
        return EXIT_IOERR
    except (InputError, ConfigError) as exc:
        _report_failure(args, logger, exc, "error")
        return EXIT_USAGE
    except TilePathError as exc:
        _report_failure(args, logger, exc, "internal error")
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())

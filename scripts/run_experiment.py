#!/usr/bin/env python3
"""
Graph Path Lab CLI - compare BFS and DFS on random graphs.

Usage:
    python scripts/run_experiment.py
    python scripts/run_experiment.py --graphs 5 --seed 42
    python scripts/run_experiment.py --min-vertices 20 --max-vertices 30 --min-edges 25 --max-edges 40
    python scripts/run_experiment.py --directed --max-incoming 3 --max-outgoing 3
    python scripts/run_experiment.py --algorithms bfs --no-matrices

Algorithms:
    bfs - Breadth-first search, minimum hop-count path
    dfs - Depth-first search, some path (not necessarily shortest)

Environment:
    PATHLAB_SEED       default for --seed
    PATHLAB_LOG_LEVEL  default log level (overridden by --verbose)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathlab.config import (  # noqa: E402
    DEFAULT_ALGORITHMS,
    DEFAULT_MAX_EDGES,
    DEFAULT_MAX_EDGES_PER_VERTEX,
    DEFAULT_MAX_INCOMING_EDGES,
    DEFAULT_MAX_OUTGOING_EDGES,
    DEFAULT_MAX_VERTICES,
    DEFAULT_MIN_EDGES,
    DEFAULT_MIN_VERTICES,
    DEFAULT_NUM_GRAPHS,
    DEFAULT_SEED,
    LOG_LEVEL,
)
from pathlab.experiment import ExperimentRunner, GeneratorSettings  # noqa: E402
from pathlab.graph import SEARCHES, GraphError  # noqa: E402
from pathlab.report import (  # noqa: E402
    format_adj_list,
    format_adj_matrix,
    format_inc_matrix,
    format_trial,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare BFS and DFS path finding on random graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--graphs",
        type=int,
        default=DEFAULT_NUM_GRAPHS,
        help=f"Number of graphs to generate (default: {DEFAULT_NUM_GRAPHS})",
    )
    parser.add_argument("--min-vertices", type=int, default=DEFAULT_MIN_VERTICES)
    parser.add_argument("--max-vertices", type=int, default=DEFAULT_MAX_VERTICES)
    parser.add_argument("--min-edges", type=int, default=DEFAULT_MIN_EDGES)
    parser.add_argument("--max-edges", type=int, default=DEFAULT_MAX_EDGES)
    parser.add_argument(
        "--max-edges-per-vertex",
        type=int,
        default=DEFAULT_MAX_EDGES_PER_VERTEX,
        help=f"Degree cap per vertex (default: {DEFAULT_MAX_EDGES_PER_VERTEX})",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Generate directed graphs",
    )
    parser.add_argument(
        "--max-incoming",
        type=int,
        default=DEFAULT_MAX_INCOMING_EDGES,
        help=f"In-degree cap, directed only (default: {DEFAULT_MAX_INCOMING_EDGES})",
    )
    parser.add_argument(
        "--max-outgoing",
        type=int,
        default=DEFAULT_MAX_OUTGOING_EDGES,
        help=f"Out-degree cap, directed only (default: {DEFAULT_MAX_OUTGOING_EDGES})",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=list(DEFAULT_ALGORITHMS),
        choices=sorted(SEARCHES),
        help="Searches to run on every graph (default: bfs dfs)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "--no-matrices",
        action="store_true",
        help="Skip printing adjacency/incidence matrices and adjacency lists",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = GeneratorSettings(
        min_vertices=args.min_vertices,
        max_vertices=args.max_vertices,
        min_edges=args.min_edges,
        max_edges=args.max_edges,
        max_edges_per_vertex=args.max_edges_per_vertex,
        directed=args.directed,
        max_incoming_edges=args.max_incoming,
        max_outgoing_edges=args.max_outgoing,
    )
    runner = ExperimentRunner(settings, algorithms=args.algorithms, seed=args.seed)

    try:
        for trial in runner.run(args.graphs):
            if not args.no_matrices:
                print("Adjacency matrix:")
                print(format_adj_matrix(trial.graph) + "\n")
                print("Incidence matrix:")
                print(format_inc_matrix(trial.graph) + "\n")
                print("Adjacency list:")
                print(format_adj_list(trial.graph) + "\n")

            print(format_trial(trial))
            print("\n")
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nExperiment interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point for max-spacing clustering."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .parsing import GraphParseError
from .pipeline import ClusteringConfig, EdgesExhaustedError
from .runner import cluster_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cluster a weighted graph into k groups and report the largest intra-cluster distance."
    )
    parser.add_argument("input", type=Path, help="Path to the graph file (vertex count, then 'u v cost' lines)")
    parser.add_argument("k", type=int, nargs="?", default=3, help="Target number of clusters (default: 3)")
    parser.add_argument("--verbose", action="store_true", help="Report progress on stderr")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable the merge progress bar",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = ClusteringConfig(k=args.k, use_tqdm=not args.disable_tqdm, verbose=args.verbose)
    except ValueError as exc:
        print(f"ERROR: Invalid cluster count: {exc}", file=sys.stderr)
        return 1

    try:
        result = cluster_file(args.input, config)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{args.input}'.", file=sys.stderr)
        return 1
    except (OSError, GraphParseError, EdgesExhaustedError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(result.max_distance)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Convenience helpers for running the clustering end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .parsing import read_graph
from .pipeline import ClusteringConfig, ClusteringResult, MaxSpacingClusterer


def cluster_file(
    input_path: str | Path,
    config: Optional[ClusteringConfig] = None,
) -> ClusteringResult:
    """Load the graph at `input_path` and cluster it."""

    graph = read_graph(input_path)
    return MaxSpacingClusterer(config).cluster(graph)

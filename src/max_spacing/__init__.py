"""Max-spacing k-clustering library initialization."""

from .heap import EdgeHeap
from .parsing import Graph, GraphParseError, parse_graph, read_graph
from .pipeline import (
    ClusteringConfig,
    ClusteringResult,
    ClusteringSession,
    ClusteringStats,
    EdgesExhaustedError,
    MaxSpacingClusterer,
)
from .runner import cluster_file
from .structures import DisjointSet, Edge, Vertex

__all__ = [
    "ClusteringConfig",
    "ClusteringResult",
    "ClusteringSession",
    "ClusteringStats",
    "DisjointSet",
    "Edge",
    "EdgeHeap",
    "EdgesExhaustedError",
    "Graph",
    "GraphParseError",
    "MaxSpacingClusterer",
    "Vertex",
    "cluster_file",
    "parse_graph",
    "read_graph",
]

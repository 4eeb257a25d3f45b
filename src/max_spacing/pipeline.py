"""Core pipeline for max-spacing k-clustering."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Dict, List

from tqdm import tqdm

from .heap import EdgeHeap
from .parsing import Graph
from .structures import DisjointSet, Edge


class EdgesExhaustedError(RuntimeError):
    """Raised when the edges run out before the target cluster count is reached."""

    def __init__(self, cluster_count: int, k: int) -> None:
        super().__init__(
            f"ran out of edges with {cluster_count} clusters left; cannot reach k={k} "
            "(the graph has more connected components than k)"
        )
        self.cluster_count = cluster_count
        self.k = k


@dataclass
class ClusteringStats:
    """Summary metrics for a clustering run."""

    total_vertices: int
    declared_vertices: int
    total_edges: int
    edges_popped: int
    merges: int
    cycle_edges: int
    cluster_count: int
    runtime_seconds: float


@dataclass
class ClusteringResult:
    """Result bundle returned by :class:MaxSpacingClusterer."""

    max_distance: int
    spacing: int | None
    cluster_map: Dict[int, List[int]]
    stats: ClusteringStats


@dataclass
class ClusteringConfig:
    """Configuration parameters for :class:MaxSpacingClusterer."""

    k: int = 3
    use_tqdm: bool = True
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.k < 1:
            raise ValueError(f"k must be at least 1, got {self.k}")


class ClusteringSession:
    """Union-find state and remaining edges for a single run."""

    def __init__(self, clusters: DisjointSet, heap: EdgeHeap, k: int) -> None:
        self.clusters = clusters
        self.heap = heap
        self.k = k
        self.edges_popped = 0
        self.merges = 0
        self.cycle_edges = 0

    @classmethod
    def from_graph(cls, graph: Graph, k: int) -> ClusteringSession:
        clusters = DisjointSet(graph.vertex_ids())
        edges = [
            Edge(cost, index, clusters.vertices[first], clusters.vertices[second])
            for index, (first, second, cost) in enumerate(graph.edges)
        ]
        return cls(clusters, EdgeHeap(edges), k)

    @property
    def done(self) -> bool:
        return len(self.clusters) <= self.k

    def step(self) -> Edge:
        """Consume the cheapest edge, merging its endpoint clusters if they differ."""

        if not self.heap:
            raise EdgesExhaustedError(len(self.clusters), self.k)
        edge = self.heap.pop_min()
        self.edges_popped += 1

        left = self.clusters.find(edge.vertex1.id)
        right = self.clusters.find(edge.vertex2.id)
        self.clusters.bound_max_distance(left, edge.cost)
        self.clusters.bound_max_distance(right, edge.cost)

        if left == right:
            self.cycle_edges += 1
        else:
            self.clusters.union(left, right)
            self.merges += 1
        return edge

    def spacing(self) -> int | None:
        """Return the cheapest cost between two different clusters, if any."""

        crossing = [
            edge.cost
            for edge in self.heap
            if edge.vertex1.leader is not edge.vertex2.leader
        ]
        return min(crossing, default=None)


class MaxSpacingClusterer:
    """Merge clusters along the cheapest edges until exactly k remain."""

    def __init__(self, config: ClusteringConfig | None = None) -> None:
        self.config = config or ClusteringConfig()

    def cluster(self, graph: Graph) -> ClusteringResult:
        """Run single-linkage clustering on `graph` and summarise the k clusters."""

        k = self.config.k
        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            _log(f"--- Max-Spacing Clustering Started (k={k}) ---")
            _log("\n1. Building clusters and edge heap...")

        t0 = time.time()
        session = ClusteringSession.from_graph(graph, k)
        clusters = session.clusters
        if verbose:
            _log(f"   Registered {len(clusters)} vertices and {len(session.heap)} edges.")
            if len(clusters) != graph.num_vertices:
                _log(f"   Note: header declared {graph.num_vertices} vertices.")
            _log(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            _log("2. Merging clusters along the cheapest edges...")
        with tqdm(
            total=max(len(clusters) - k, 0),
            desc="   Merging clusters",
            unit="merge",
            disable=not self.config.use_tqdm,
        ) as progress:
            while not session.done:
                before = len(clusters)
                session.step()
                progress.update(before - len(clusters))
        if verbose:
            _log(f"   Popped {session.edges_popped} edges: {session.merges} merges, {session.cycle_edges} cycle edges.")
            _log(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            _log("3. Summarising final clusters...")
        max_distance = clusters.overall_max_distance()
        spacing = session.spacing()
        cluster_map = clusters.cluster_map()

        if verbose:
            _log("\n--- Results Summary ---")
            _log(f"   - Clusters: {len(clusters)}")
            _log(f"   - Max intra-cluster distance: {max_distance}")
            _log(f"   - Spacing: {spacing if spacing is not None else 'n/a'}")
            _log("\n   --- Largest Clusters ---")
            by_size = sorted(cluster_map.items(), key=lambda item: len(item[1]), reverse=True)
            for leader_id, members in by_size[:10]:
                leader = clusters.leaders[leader_id]
                _log(f"   Leader {leader_id} (Size: {len(members)}, max distance: {leader.cluster_max_distance})")
            _log(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = ClusteringStats(
            total_vertices=len(clusters.vertices),
            declared_vertices=graph.num_vertices,
            total_edges=graph.edge_count,
            edges_popped=session.edges_popped,
            merges=session.merges,
            cycle_edges=session.cycle_edges,
            cluster_count=len(clusters),
            runtime_seconds=elapsed,
        )

        if verbose:
            _log(f"\n--- Max-Spacing Clustering Finished in {elapsed:.2f} seconds ---")

        return ClusteringResult(
            max_distance=max_distance,
            spacing=spacing,
            cluster_map=cluster_map,
            stats=stats,
        )


def _log(message: str) -> None:
    # stdout is reserved for the answer.
    print(message, file=sys.stderr)


__all__ = [
    "ClusteringConfig",
    "ClusteringResult",
    "ClusteringSession",
    "ClusteringStats",
    "EdgesExhaustedError",
    "MaxSpacingClusterer",
]

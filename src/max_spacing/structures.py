"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List


@dataclass(eq=False)
class Vertex:
    """A graph vertex that also acts as a node of its cluster."""

    id: int
    cluster_max_distance: int = 0
    leader: Vertex = field(init=False, repr=False)
    followers: List[Vertex] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.leader = self
        self.followers = [self]

    @property
    def is_leader(self) -> bool:
        return self.leader is self

    def absorb(self, other: Vertex) -> None:
        """Take over every follower of the leader `other`."""

        if other.cluster_max_distance > self.cluster_max_distance:
            self.cluster_max_distance = other.cluster_max_distance
        for follower in other.followers:
            follower.leader = self
            follower.cluster_max_distance = self.cluster_max_distance
            self.followers.append(follower)
        other.followers = []

    def __str__(self) -> str:
        follower_ids = [follower.id for follower in self.followers]
        return (
            f"ID: {self.id}  Leader: {self.leader.id}  Followers: {follower_ids}  "
            f"clusterMaxDistance: {self.cluster_max_distance}"
        )


@dataclass(order=True)
class Edge:
    """Weighted undirected edge; orders by cost, then by input position."""

    cost: int
    index: int
    vertex1: Vertex = field(compare=False)
    vertex2: Vertex = field(compare=False)

    def __str__(self) -> str:
        return f"Vertex1: {self.vertex1.id}  Vertex2: {self.vertex2.id}  Cost: {self.cost}"


class DisjointSet:
    """Union-find over vertex ids with an explicit registry of cluster leaders.

    Every union re-points the absorbed followers straight at the new leader,
    so `find` is a single hop. The smaller cluster is always the one that
    gets re-pointed.
    """

    def __init__(self, vertex_ids: Iterable[int] = ()) -> None:
        self.vertices: Dict[int, Vertex] = {}
        self.leaders: Dict[int, Vertex] = {}
        for vertex_id in vertex_ids:
            self.add(vertex_id)

    def __len__(self) -> int:
        return len(self.leaders)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.vertices

    def add(self, vertex_id: int) -> Vertex:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            vertex = Vertex(vertex_id)
            self.vertices[vertex_id] = vertex
            self.leaders[vertex_id] = vertex
        return vertex

    def find(self, vertex_id: int) -> int:
        return self.vertices[vertex_id].leader.id

    def size(self, vertex_id: int) -> int:
        return len(self.vertices[vertex_id].leader.followers)

    def members(self, vertex_id: int) -> List[int]:
        return [follower.id for follower in self.vertices[vertex_id].leader.followers]

    def max_distance(self, vertex_id: int) -> int:
        return self.vertices[vertex_id].leader.cluster_max_distance

    def bound_max_distance(self, vertex_id: int, cost: int) -> None:
        """Make sure the cluster of `vertex_id` records at least `cost`."""

        leader = self.vertices[vertex_id].leader
        if cost > leader.cluster_max_distance:
            leader.cluster_max_distance = cost

    def union(self, left: int, right: int) -> int:
        """Merge the clusters of `left` and `right` and return the surviving leader id."""

        root_left = self.vertices[left].leader
        root_right = self.vertices[right].leader
        if root_left is root_right:
            return root_left.id
        if len(root_left.followers) > len(root_right.followers):
            winner, loser = root_left, root_right
        else:
            winner, loser = root_right, root_left
        winner.absorb(loser)
        del self.leaders[loser.id]
        return winner.id

    def overall_max_distance(self) -> int:
        return max((leader.cluster_max_distance for leader in self.leaders.values()), default=0)

    def cluster_map(self) -> Dict[int, List[int]]:
        return {
            leader_id: [follower.id for follower in leader.followers]
            for leader_id, leader in self.leaders.items()
        }

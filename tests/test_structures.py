from max_spacing.structures import DisjointSet, Edge, Vertex


def test_new_vertex_leads_itself():
    vertex = Vertex(7)
    assert vertex.is_leader
    assert vertex.followers == [vertex]
    assert vertex.cluster_max_distance == 0


def test_vertex_str_lists_followers():
    clusters = DisjointSet([1, 2])
    clusters.union(1, 2)
    assert str(clusters.vertices[2]) == "ID: 2  Leader: 2  Followers: [2, 1]  clusterMaxDistance: 0"
    assert "Leader: 2" in str(clusters.vertices[1])


def test_vertex_repr_does_not_recurse_through_leader():
    assert repr(Vertex(3)) == "Vertex(id=3, cluster_max_distance=0)"


def test_edges_order_by_cost_then_index():
    first, second = Vertex(1), Vertex(2)
    assert Edge(1, 5, first, second) < Edge(2, 0, first, second)
    assert Edge(3, 0, first, second) < Edge(3, 1, second, first)


def test_add_is_idempotent():
    clusters = DisjointSet()
    vertex = clusters.add(4)
    assert clusters.add(4) is vertex
    assert len(clusters) == 1
    assert 4 in clusters


def test_union_on_tie_keeps_right_leader():
    clusters = DisjointSet([1, 2])
    assert clusters.union(1, 2) == 2
    assert clusters.find(1) == 2
    assert len(clusters) == 1
    assert 1 not in clusters.leaders


def test_union_larger_cluster_absorbs_smaller():
    clusters = DisjointSet([1, 2, 3])
    clusters.union(1, 2)
    assert clusters.union(3, 1) == 2
    assert clusters.size(3) == 3
    assert clusters.members(1) == [2, 1, 3]
    assert {clusters.find(v) for v in (1, 2, 3)} == {2}


def test_union_same_cluster_is_noop():
    clusters = DisjointSet([1, 2])
    clusters.union(1, 2)
    assert clusters.union(2, 1) == 2
    assert clusters.members(2) == [2, 1]


def test_union_propagates_max_distance():
    clusters = DisjointSet([1, 2, 3])
    clusters.bound_max_distance(1, 5)
    clusters.bound_max_distance(2, 3)
    clusters.union(1, 2)
    assert clusters.max_distance(1) == 5
    assert clusters.vertices[1].cluster_max_distance == 5

    clusters.bound_max_distance(3, 2)
    clusters.union(3, 2)
    assert clusters.max_distance(3) == 5


def test_bound_max_distance_never_lowers():
    clusters = DisjointSet([1])
    clusters.bound_max_distance(1, 4)
    clusters.bound_max_distance(1, 2)
    assert clusters.max_distance(1) == 4


def test_overall_max_distance_and_cluster_map():
    clusters = DisjointSet([1, 2, 3, 4])
    assert clusters.overall_max_distance() == 0
    clusters.bound_max_distance(3, 9)
    clusters.union(3, 4)
    assert clusters.overall_max_distance() == 9
    assert clusters.cluster_map() == {1: [1], 2: [2], 4: [4, 3]}


def test_overall_max_distance_of_empty_set():
    assert DisjointSet().overall_max_distance() == 0

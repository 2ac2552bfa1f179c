from tgraph.graph import Graph, OrientedEdge


def base_graph() -> Graph[int, int]:
    g: Graph[int, int] = Graph()
    g.insert_node(1, 1)
    g.insert_node(2, 2)
    g.insert_node(3, 3)
    g.insert_edge(OrientedEdge(1, 3), 5)
    g.insert_edge(OrientedEdge(1, 2), 3)
    g.insert_edge(OrientedEdge(3, 1), 3)
    return g


def test_add_nodes():
    g: Graph[str, int] = Graph()
    assert g.insert_node(1, "the first") is None
    assert g.insert_node(2, "the second") is None
    assert g.insert_node(1, "the first_overrided") == "the first"
    assert sorted(g.traverse_bfs()) == [1, 2]
    assert g.get_vertex_value(1) == "the first_overrided"


def test_insert_node_keeps_existing_edges():
    g = base_graph()
    g.insert_node(1, 10)
    assert sorted(g.get_adjacents(1)) == [2, 3]


def test_add_edges():
    g: Graph[int, int] = Graph()
    g.insert_node(1, 1)
    g.insert_node(2, 2)
    g.insert_node(3, 3)
    assert g.insert_edge(OrientedEdge(1, 3), 5) is None
    assert g.insert_edge(OrientedEdge(1, 2), 3) is None
    # Vertex 5 does not exist.
    assert g.insert_edge(OrientedEdge(5, 3), 5) is None
    assert g.insert_edge(OrientedEdge(1, 3), 7) == 5
    assert g.insert_edge(OrientedEdge(3, 1), 3) is None
    assert sorted(g.get_adjacents(1)) == [2, 3]
    assert g.get_edge_value(OrientedEdge(1, 3)) == 7


def test_insert_edge_with_unknown_source_has_no_effect():
    g = base_graph()
    before = {src: dict(row) for src, row in g.adjacency.items()}
    assert g.insert_edge(OrientedEdge(9, 1), 1) is None
    assert g.adjacency == before
    assert 9 not in g.adjacency
    assert g.get_adjacents(9) is None


def test_remove_nodes():
    g = base_graph()
    assert g.remove_node(1) == 1
    assert g.get_adjacents(3) == []
    assert g.get_adjacents(1) is None
    assert g.get_vertex_value(1) is None
    assert 1 not in g


def test_remove_node_drops_incoming_edges_everywhere():
    g = base_graph()
    g.insert_edge(OrientedEdge(2, 1), 0)
    g.remove_node(1)
    for vid in g.vertex_ids():
        assert 1 not in g.get_adjacents(vid)


def test_remove_unknown_node():
    g = base_graph()
    assert g.remove_node(42) is None
    assert len(g) == 3


def test_remove_edges():
    g = base_graph()
    assert g.remove_edge(OrientedEdge(1, 3)) == 5
    assert g.get_adjacents(1) == [2]


def test_remove_edge_absent():
    g = base_graph()
    assert g.remove_edge(OrientedEdge(7, 1)) is None
    assert g.remove_edge(OrientedEdge(1, 7)) is None
    assert sorted(g.get_adjacents(1)) == [2, 3]


def test_dangling_edges_are_kept():
    # Edges may point at ids that are not vertices. They are only cleaned up
    # when that id is removed as a vertex, not when it is never inserted.
    g = base_graph()
    assert g.insert_edge(OrientedEdge(2, 99), 1) is None
    assert g.get_adjacents(2) == [99]
    g.remove_node(3)
    assert g.get_adjacents(2) == [99]
    g.remove_node(99)
    assert g.get_adjacents(2) == []


def test_vertices_and_adjacency_stay_in_lockstep():
    g = base_graph()
    g.remove_node(2)
    g.insert_node(4, 4)
    g.insert_edge(OrientedEdge(8, 4), 0)
    assert set(g.vertices) == set(g.adjacency)


def test_bfs_visits_every_vertex_once():
    g = base_graph()
    g.insert_node(10, 0)
    g.insert_node(11, 0)
    g.insert_edge(OrientedEdge(10, 11), 0)
    g.insert_edge(OrientedEdge(11, 10), 0)
    order = g.traverse_bfs()
    assert len(order) == len(g)
    assert sorted(order) == [1, 2, 3, 10, 11]


def test_bfs_is_breadth_first_within_component():
    g: Graph[str, str] = Graph()
    for vid in [1, 2, 3, 4]:
        g.insert_node(vid, str(vid))
    g.insert_edge(OrientedEdge(1, 2), "")
    g.insert_edge(OrientedEdge(1, 3), "")
    g.insert_edge(OrientedEdge(2, 4), "")
    order = g.traverse_bfs()
    assert order[0] == 1
    assert sorted(order[1:3]) == [2, 3]
    assert order[3] == 4


def test_bfs_skips_dangling_destinations():
    g = base_graph()
    g.insert_edge(OrientedEdge(1, 99), 0)
    order = g.traverse_bfs()
    assert sorted(order) == [1, 2, 3]


def test_bfs_empty_graph():
    assert Graph().traverse_bfs() == []


def test_edge_items():
    g = base_graph()
    assert dict(g.edge_items()) == {
        OrientedEdge(1, 3): 5,
        OrientedEdge(1, 2): 3,
        OrientedEdge(3, 1): 3,
    }


def test_repr():
    assert repr(base_graph()) == "Graph(V=3, E=3)"

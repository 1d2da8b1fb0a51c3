import random

import pytest

from graphlab import DuplicateRegistrationError, Edge, EmptyGraphError, Graph, Vertex


def test_edge_links_endpoints_before_registration():
    a, b = Vertex.new(), Vertex.new()
    e = Edge.new(a, b, 2.5)

    assert list(a.out_edges()) == [e]
    assert list(b.in_edges()) == [e]
    assert list(a.in_edges()) == []
    assert e.cost == 2.5

    g = Graph()
    g.add_vertex(a)
    g.add_vertex(b)
    assert not g.contains(e)
    assert g.add_edge(e) is e
    assert e in g


def test_adjacency_is_live_and_restartable():
    a, b, c = Vertex.new(), Vertex.new(), Vertex.new()
    out = a.out_edges
    e1 = Edge.new(a, b)
    assert [e.id for e in out()] == [e1.id]
    e2 = Edge.new(a, c)
    assert [e.id for e in out()] == [e1.id, e2.id]
    assert [e.id for e in out()] == [e1.id, e2.id]
    assert a.out_degree() == 2
    assert c.in_degree() == 1


def test_identity_is_by_id():
    assert Vertex(id=3) == Vertex(id=3)
    assert Vertex(id=3) != Vertex(id=4)
    assert len({Vertex(id=1), Vertex(id=1)}) == 1

    a, b = Vertex(id=0), Vertex(id=1)
    e = Edge(id=0, source=a, target=b)
    assert e != a
    assert Edge(id=0, source=b, target=a) == e


def test_add_vertex_creates_one_when_omitted():
    g = Graph()
    v = g.add_vertex()
    assert v.id == 0
    assert g.contains(v)
    assert g.has_vertex_id(0)
    assert len(g) == 1


def test_duplicate_registration_is_rejected():
    g = Graph()
    v = g.add_vertex()
    w = g.add_vertex()
    e = g.connect(v, w)

    with pytest.raises(DuplicateRegistrationError, match="Vertex already registered"):
        g.add_vertex(v)
    with pytest.raises(DuplicateRegistrationError, match="Edge already registered"):
        g.add_edge(e)

    assert g.vertex_count() == 2
    assert g.edge_count() == 1
    assert [x.id for x in g.vertices()] == [v.id, w.id]


def test_membership_is_per_graph():
    g = Graph()
    v = g.add_vertex()
    other = Graph()
    assert g.contains(v)
    assert not other.contains(v)
    assert not g.has_edge_id(0)


def test_contains_rejects_other_types():
    with pytest.raises(TypeError):
        Graph().contains(0)


def test_connect_registers_the_edge():
    g = Graph()
    v, w = g.add_vertex(), g.add_vertex()
    e = g.connect(v, w, 1.5)
    assert (e.source, e.target, e.cost) == (v, w, 1.5)
    assert list(g.edges()) == [e]


def test_bi_connect_creates_reverse_edge_first():
    g = Graph()
    v1, v2 = g.add_vertex(), g.add_vertex()
    forward = g.bi_connect(v1, v2, 3.0)

    reverse, fwd = list(g.edges())
    assert fwd is forward
    assert reverse.id < forward.id
    assert (reverse.source, reverse.target) == (v2, v1)
    assert (forward.source, forward.target) == (v1, v2)
    assert reverse.cost == forward.cost == 3.0


def test_vertices_and_edges_keep_insertion_order():
    g = Graph()
    vs = [Vertex.new() for _ in range(4)]
    for v in reversed(vs):
        g.add_vertex(v)
    assert [v.id for v in g.vertices()] == [3, 2, 1, 0]
    assert [v.id for v in g.vertices()] == [3, 2, 1, 0]
    assert g.first_vertex() is vs[3]


def test_out_edges_filters_through_membership():
    g = Graph()
    v, w = g.add_vertex(), g.add_vertex()
    inside = g.connect(v, w)
    Edge.new(v, w)
    assert v.out_degree() == 2
    assert list(g.out_edges(v)) == [inside]


def test_get_random_vertex_on_empty_graph():
    with pytest.raises(EmptyGraphError):
        Graph().get_random_vertex()
    with pytest.raises(IndexError):
        Graph().get_random_vertex()


def test_get_random_vertex_covers_all_vertices():
    g = Graph()
    vs = [g.add_vertex() for _ in range(4)]
    rng = random.Random(1234)
    picked = {g.get_random_vertex(rng).id for _ in range(200)}
    assert picked == {v.id for v in vs}


def test_get_random_vertex_single():
    g = Graph()
    v = g.add_vertex()
    assert g.get_random_vertex() is v


def test_clone_shares_objects_but_not_membership():
    g = Graph()
    a, b = g.add_vertex(), g.add_vertex()
    e = g.connect(a, b)

    c = g.clone()
    assert [v.id for v in c.vertices()] == [a.id, b.id]
    assert [x.id for x in c.edges()] == [e.id]
    assert next(c.vertices()) is a

    g.add_vertex()
    extra = c.connect(b, a)
    assert c.vertex_count() == 2
    assert not g.contains(extra)
    # adjacency is shared through the vertex objects
    assert extra in list(b.out_edges())


def test_total_cost():
    g = Graph()
    a, b, c = g.add_vertex(), g.add_vertex(), g.add_vertex()
    g.connect(a, b, 1.5)
    g.connect(b, c, 2.0)
    Edge.new(a, c, 100.0)
    assert g.total_cost() == 3.5


def test_to_networkx():
    g = Graph()
    a, b, c = g.add_vertex(), g.add_vertex(), g.add_vertex()
    e = g.connect(a, b, 0.5)
    g.bi_connect(b, c, 2.0)

    nxg = g.to_networkx()
    assert nxg.is_directed()
    assert set(nxg.nodes) == {a.id, b.id, c.id}
    assert nxg.number_of_edges() == 3
    assert nxg[a.id][b.id] == {"weight": 0.5, "id": e.id}
    assert nxg[c.id][b.id]["weight"] == 2.0

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, Iterator, List, Optional, Union

from .ids import DEFAULT_ALLOCATOR, IdAllocator

logger = logging.getLogger(__name__)

VertexId = int
EdgeId = int


class DuplicateRegistrationError(ValueError):
    pass


class EmptyGraphError(IndexError):
    pass


@dataclass(eq=False)
class Vertex:
    """A graph node with its incident edges.

    Adjacency lives on the vertex itself and is shared by every Graph that
    registers it. Graphs decide which of these edges they consider their own
    through their membership index.
    """

    id: VertexId
    _out_edges: List["Edge"] = field(default_factory=list, repr=False)
    _in_edges: List["Edge"] = field(default_factory=list, repr=False)

    @classmethod
    def new(cls, allocator: Optional[IdAllocator] = None) -> "Vertex":
        alloc = allocator or DEFAULT_ALLOCATOR
        return cls(id=alloc.next_id("vertex"))

    def out_edges(self) -> Iterator["Edge"]:
        for edge in self._out_edges:
            yield edge

    def in_edges(self) -> Iterator["Edge"]:
        for edge in self._in_edges:
            yield edge

    def out_degree(self) -> int:
        return len(self._out_edges)

    def in_degree(self) -> int:
        return len(self._in_edges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("vertex", self.id))


@dataclass(eq=False)
class Edge:
    """A directed, weighted link. Endpoints are referenced, never owned."""

    id: EdgeId
    source: Vertex
    target: Vertex
    cost: float = 0.0

    @classmethod
    def new(
        cls,
        source: Vertex,
        target: Vertex,
        cost: float = 0.0,
        allocator: Optional[IdAllocator] = None,
    ) -> "Edge":
        """Create an edge and link it into the adjacency of both endpoints.

        Linking happens here, not when the edge is registered in a Graph.
        """
        alloc = allocator or DEFAULT_ALLOCATOR
        edge = cls(id=alloc.next_id("edge"), source=source, target=target, cost=float(cost))
        source._out_edges.append(edge)
        target._in_edges.append(edge)
        return edge

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("edge", self.id))

    def __repr__(self) -> str:
        return f"Edge(id={self.id}, {self.source.id}->{self.target.id}, cost={self.cost!r})"


class Graph:
    """A directed graph defined by a membership index over shared objects.

    Vertex and Edge objects may belong to several graphs at once (clones,
    spanning trees). Each graph only keeps an insertion-ordered index of the
    ids it considers its own; traversals filter the global adjacency through
    that index.
    """

    def __init__(self) -> None:
        self._vertices: Dict[VertexId, Vertex] = {}
        self._edges: Dict[EdgeId, Edge] = {}

    # -- membership -------------------------------------------------------

    def contains(self, item: Union[Vertex, Edge]) -> bool:
        if isinstance(item, Vertex):
            return item.id in self._vertices
        if isinstance(item, Edge):
            return item.id in self._edges
        raise TypeError(f"Expected a Vertex or an Edge, got {type(item).__name__}")

    __contains__ = contains

    def has_vertex_id(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._vertices

    def has_edge_id(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    # -- mutation ---------------------------------------------------------

    def add_vertex(self, vertex: Optional[Vertex] = None) -> Vertex:
        if vertex is None:
            vertex = Vertex.new()
        if vertex.id in self._vertices:
            raise DuplicateRegistrationError(f"Vertex already registered: {vertex.id!r}")
        self._vertices[vertex.id] = vertex
        return vertex

    def add_edge(self, edge: Edge) -> Edge:
        if edge.id in self._edges:
            raise DuplicateRegistrationError(f"Edge already registered: {edge.id!r}")
        self._edges[edge.id] = edge
        return edge

    def connect(self, source: Vertex, target: Vertex, cost: float = 0.0) -> Edge:
        return self.add_edge(Edge.new(source, target, cost))

    def bi_connect(self, v1: Vertex, v2: Vertex, cost: float = 0.0) -> Edge:
        """Connect both ways and return the ``v1 -> v2`` edge.

        The reverse edge is created (and gets its id) first.
        """
        self.connect(v2, v1, cost)
        return self.connect(v1, v2, cost)

    # -- queries ----------------------------------------------------------

    def vertices(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def edges(self) -> Iterator[Edge]:
        return iter(self._edges.values())

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def first_vertex(self) -> Optional[Vertex]:
        return next(iter(self._vertices.values()), None)

    def out_edges(self, vertex: Vertex) -> Iterator[Edge]:
        """Out-edges of ``vertex`` that are registered in this graph."""
        for edge in vertex.out_edges():
            if edge.id in self._edges:
                yield edge

    def get_random_vertex(self, rng: Optional[random.Random] = None) -> Vertex:
        count = len(self._vertices)
        if count == 0:
            raise EmptyGraphError("Cannot pick a random vertex from an empty graph")
        index = (rng or random).randrange(count)
        return next(islice(self._vertices.values(), index, None))

    def total_cost(self) -> float:
        return sum(edge.cost for edge in self._edges.values())

    def clone(self) -> "Graph":
        """Copy the membership index; vertices and edges stay shared."""
        g = Graph()
        for vertex in self.vertices():
            g.add_vertex(vertex)
        for edge in self.edges():
            g.add_edge(edge)
        return g

    # -- algorithms -------------------------------------------------------

    def prim(self) -> "Graph":
        from .algorithms import prim

        return prim(self)

    def search_cycle(self) -> bool:
        from .algorithms import search_cycle

        return search_cycle(self)

    def to_networkx(self):
        """Convert to a networkx.DiGraph for ad-hoc experimentation.

        Parallel edges between the same ordered pair collapse into one.
        """
        import networkx as nx

        g = nx.DiGraph()
        g.add_nodes_from(self._vertices)
        for edge in self.edges():
            g.add_edge(edge.source.id, edge.target.id, weight=edge.cost, id=edge.id)
        return g

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"

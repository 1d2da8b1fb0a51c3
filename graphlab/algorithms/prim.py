from __future__ import annotations

import heapq
import itertools
import logging
from typing import List, Tuple

from ..graph import Edge, Graph

logger = logging.getLogger(__name__)


def prim(graph: Graph) -> Graph:
    """Grow a minimum spanning tree from the first registered vertex.

    The result shares its Vertex/Edge objects with ``graph``. Only edges
    registered in ``graph`` are followed. Stale queue entries are dropped
    when popped. If ``graph`` is not connected from the root the result
    covers the root's component only.
    """

    tree = Graph()
    root = graph.first_vertex()
    if root is None:
        return tree

    missing = graph.vertex_count()
    tree.add_vertex(root)
    missing -= 1

    # (cost, seq, edge); seq keeps equal costs in insertion order
    seq = itertools.count()
    frontier: List[Tuple[float, int, Edge]] = []

    def push_out_edges(vertex) -> None:
        for edge in graph.out_edges(vertex):
            heapq.heappush(frontier, (edge.cost, next(seq), edge))

    push_out_edges(root)

    while missing > 0 and frontier:
        _, _, edge = heapq.heappop(frontier)
        target = edge.target
        if not graph.contains(target) or tree.contains(target):
            continue
        missing -= 1
        tree.add_edge(edge)
        tree.add_vertex(target)
        push_out_edges(target)

    if missing > 0:
        logger.debug("prim: source graph not connected from root %d, %d vertices unreached", root.id, missing)
    logger.debug("prim: tree has %d vertices, %d edges, cost=%.6g", tree.vertex_count(), tree.edge_count(), tree.total_cost())
    return tree

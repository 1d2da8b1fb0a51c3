from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Set

from ..graph import Edge, Graph, VertexId

logger = logging.getLogger(__name__)


def search_cycle(graph: Graph) -> bool:
    """Breadth-first walk from the first vertex; report a revisit as a cycle.

    Any registered edge whose target was already visited counts, including
    the reverse twin of an edge just walked and self-loops. A tree built by
    :func:`prim` therefore reports ``False`` while a bidirectional grid
    reports ``True``.
    """

    root = graph.first_vertex()
    if root is None:
        return False

    visited: Set[VertexId] = {root.id}
    missing = graph.vertex_count() - 1
    queue: Deque[Edge] = deque(graph.out_edges(root))

    while queue:
        edge = queue.popleft()
        target = edge.target
        if not graph.contains(target):
            continue
        if target.id in visited:
            logger.debug("search_cycle: edge %d revisits vertex %d", edge.id, target.id)
            return True
        visited.add(target.id)
        missing -= 1
        queue.extend(graph.out_edges(target))

    if missing > 0:
        logger.debug("search_cycle: dead end with %d vertices unreached", missing)
    return False

from __future__ import annotations

import logging
from typing import List

from ..costs import CostFunction, zero
from ..graph import Graph, Vertex

logger = logging.getLogger(__name__)


def create_from_matrix(n: int, m: int = 1, cost_fn: CostFunction = zero) -> Graph:
    """Build an ``n`` x ``m`` 4-neighbour lattice wired both ways.

    Column ``i`` runs over ``range(n)`` and row ``j`` over ``range(m)``; the
    vertex at ``(i, j)`` is the ``j * n + i``-th one registered. Every
    adjacency gets two opposite edges carrying ``cost_fn(i0, j0, i1, j1)``.
    """

    if n < 1 or m < 1:
        raise ValueError(f"Grid dimensions must be positive (n={n!r}, m={m!r})")

    g = Graph()
    cells: List[Vertex] = [g.add_vertex() for _ in range(n * m)]

    # Horizontal neighbours within each row.
    for j in range(m):
        for i in range(n - 1):
            g.bi_connect(cells[j * n + i], cells[j * n + i + 1], cost_fn(i, j, i + 1, j))

    # Vertical neighbours within each column.
    for i in range(n):
        for j in range(m - 1):
            g.bi_connect(cells[j * n + i], cells[(j + 1) * n + i], cost_fn(i, j, i, j + 1))

    logger.debug("create_from_matrix(%d, %d): %d vertices, %d edges", n, m, g.vertex_count(), g.edge_count())
    return g

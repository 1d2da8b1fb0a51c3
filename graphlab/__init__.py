"""Grid graphs, Prim's minimum spanning tree and cycle search."""

from .algorithms import prim, search_cycle
from .costs import COST_FUNCTIONS, CostFunction, dist, get_cost_function, rand, zero
from .graph import DuplicateRegistrationError, Edge, EmptyGraphError, Graph, Vertex
from .ids import DEFAULT_ALLOCATOR, IdAllocator
from .spaces import create_from_matrix

__all__ = [
    "COST_FUNCTIONS",
    "CostFunction",
    "DEFAULT_ALLOCATOR",
    "DuplicateRegistrationError",
    "Edge",
    "EmptyGraphError",
    "Graph",
    "IdAllocator",
    "Vertex",
    "create_from_matrix",
    "dist",
    "get_cost_function",
    "prim",
    "rand",
    "search_cycle",
    "zero",
]

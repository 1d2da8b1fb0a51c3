from .cycles import search_cycle
from .prim import prim

__all__ = [
    "prim",
    "search_cycle",
]

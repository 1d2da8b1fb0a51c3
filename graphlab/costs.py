from __future__ import annotations

import math
import random
from typing import Callable, Dict, Tuple

CostFunction = Callable[[int, int, int, int], float]


def zero(i0: int, j0: int, i1: int, j1: int) -> float:
    return 0.0


def rand(i0: int, j0: int, i1: int, j1: int) -> float:
    """Uniform in [0, 1). Seed the ``random`` module for repeatable runs."""
    return random.random()


def dist(i0: int, j0: int, i1: int, j1: int) -> float:
    return math.hypot(i0 - i1, j0 - j1)


COST_FUNCTIONS: Dict[str, CostFunction] = {
    "zero": zero,
    "rand": rand,
    "dist": dist,
}

COST_CHOICES: Tuple[str, ...] = tuple(COST_FUNCTIONS)


def get_cost_function(name: str) -> CostFunction:
    try:
        return COST_FUNCTIONS[name]
    except KeyError as e:
        raise ValueError(f"Unknown cost function {name!r}. Choose one of: {', '.join(COST_CHOICES)}") from e

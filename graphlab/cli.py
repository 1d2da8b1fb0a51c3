from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .config import DemoConfig
from .costs import COST_CHOICES, get_cost_function
from .spaces import create_from_matrix

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    defaults = DemoConfig.from_env()

    parser = argparse.ArgumentParser(prog="graphlab", description="Grid graph MST + cycle search demo")
    parser.add_argument("--rows", type=int, default=defaults.rows, help="Grid height (m)")
    parser.add_argument("--cols", type=int, default=defaults.cols, help="Grid width (n)")
    parser.add_argument("--cost", choices=COST_CHOICES, default=defaults.cost, help="Edge cost function")
    parser.add_argument("--seed", type=int, default=defaults.seed, help="Seed for random costs and vertex picks")
    parser.add_argument("--log-level", type=str, default=defaults.log_level, help="Logging level")

    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.rows < 1 or args.cols < 1:
        parser.error("--rows and --cols must be positive")

    logging.basicConfig(level=args.log_level.upper())
    if args.seed is not None:
        random.seed(args.seed)

    graph = create_from_matrix(args.cols, args.rows, get_cost_function(args.cost))
    tree = graph.prim()

    cycle_tree = tree.clone()
    v1 = cycle_tree.get_random_vertex()
    v2 = cycle_tree.get_random_vertex()
    extra = cycle_tree.connect(v1, v2)
    logger.info("Injected edge %d: %d -> %d", extra.id, v1.id, v2.id)

    print(graph.search_cycle())
    print(tree.search_cycle())
    print(cycle_tree.search_cycle())
    return 0

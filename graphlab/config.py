from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class DemoConfig:
    """Defaults for the demo driver, overridable through the environment."""

    rows: int = 10
    cols: int = 10
    cost: str = "rand"
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "DemoConfig":
        env = os.environ if environ is None else environ
        seed = env.get("GRAPHLAB_SEED")
        try:
            return DemoConfig(
                rows=int(env.get("GRAPHLAB_ROWS", "10")),
                cols=int(env.get("GRAPHLAB_COLS", "10")),
                cost=env.get("GRAPHLAB_COST", "rand"),
                seed=int(seed) if seed else None,
                log_level=env.get("GRAPHLAB_LOG_LEVEL", "WARNING").upper(),
            )
        except ValueError as e:
            raise ValueError(f"Invalid GRAPHLAB_* environment setting: {e}") from e

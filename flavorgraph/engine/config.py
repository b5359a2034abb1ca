from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Tuning knobs for scoring and candidate search.

    `include_affinity=False` scores on direct ingredient matches only, which is
    how the catalog search endpoint of the earlier service behaved.
    """

    target_count: int = 5
    max_depth: int = 10
    greedy_limit: int = 8
    partial_match_threshold: int = 30
    direct_weight: int = 20
    affinity_weight: int = 5
    include_affinity: bool = True
    include_substitutions: bool = True


DEFAULT_ENGINE_CONFIG = EngineConfig()

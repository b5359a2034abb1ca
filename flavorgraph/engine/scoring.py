from __future__ import annotations

import math
from typing import AbstractSet

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .graph import IngredientGraph
from .models import Recipe


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def missing_ingredients(recipe: Recipe, available: AbstractSet[str]) -> list[str]:
    """Distinct recipe ingredients not in `available`, in recipe order."""
    return [i for i in recipe.distinct_ingredients() if i not in available]


def greedy_score(recipe: Recipe, available: AbstractSet[str]) -> float:
    """Overlap count plus a bonus for short recipes (negative above ten ingredients)."""
    distinct = recipe.distinct_ingredients()
    matches = sum(1 for i in distinct if i in available)
    return matches + (10 - len(distinct)) * 0.1


class MatchScorer:
    """Scores a recipe 0-100 against an available-ingredient set."""

    def __init__(
        self,
        graph: IngredientGraph,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self.graph = graph
        self.config = config

    def direct_matches(self, recipe: Recipe, available: AbstractSet[str]) -> list[str]:
        return [i for i in recipe.distinct_ingredients() if i in available]

    def affinity_links(self, recipe: Recipe, available: AbstractSet[str]) -> int:
        """
        Count ordered (ingredient, neighbour) pairs where both are available.

        A mutual pair of present recipe ingredients is counted from both sides.
        """
        links = 0
        for ingredient in self.direct_matches(recipe, available):
            links += sum(1 for n in self.graph.neighbors(ingredient) if n in available)
        return links

    def score(self, recipe: Recipe, available: AbstractSet[str]) -> int:
        distinct = recipe.distinct_ingredients()
        max_possible = self.config.direct_weight * len(distinct)
        if max_possible <= 0:
            return 0

        raw = self.config.direct_weight * len(self.direct_matches(recipe, available))
        if self.config.include_affinity:
            raw += self.config.affinity_weight * self.affinity_links(recipe, available)

        return min(100, round_half_up(100 * raw / max_possible))

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, Sequence

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .graph import IngredientGraph
from .models import Recipe, ScoredCandidate
from .scoring import MatchScorer, missing_ingredients
from .search import exhaustive_enumeration, greedy_allocation
from .substitutions import SubstitutionAdvisor, SubstitutionCatalog

logger = logging.getLogger(__name__)


def _dedupe_by_recipe(candidates: Iterable[ScoredCandidate]) -> list[ScoredCandidate]:
    seen: set[int] = set()
    unique: list[ScoredCandidate] = []
    for candidate in candidates:
        if candidate.recipe_id in seen:
            continue
        seen.add(candidate.recipe_id)
        unique.append(candidate)
    return unique


class RecommendationEngine:
    """
    Recommendation context bound to one catalog snapshot.

    The graph and substitution catalog are built once and only read
    afterwards, so one engine can serve any number of queries. Build a new
    engine when the catalog changes.
    """

    def __init__(
        self,
        catalog: Sequence[Recipe],
        substitutions: SubstitutionCatalog | None = None,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self.catalog: tuple[Recipe, ...] = tuple(catalog)
        self.config = config
        self.graph = IngredientGraph.build(self.catalog)
        self.scorer = MatchScorer(self.graph, config)
        self.advisor = SubstitutionAdvisor(substitutions)
        logger.info(
            "Recommendation engine ready: %d recipes, %d ingredients, %d edges",
            len(self.catalog), len(self.graph), self.graph.edge_count(),
        )

    def score(self, recipe: Recipe, available: AbstractSet[str]) -> int:
        return self.scorer.score(recipe, available)

    def search_exhaustive(self, available: AbstractSet[str]) -> list[ScoredCandidate]:
        return exhaustive_enumeration(self.catalog, available, self.scorer, self.config)

    def search_greedy(self, available: AbstractSet[str]) -> list[ScoredCandidate]:
        return greedy_allocation(self.catalog, available, self.scorer, self.config)

    def recommend(
        self,
        available: Iterable[str],
        include_substitutions: bool | None = None,
    ) -> list[ScoredCandidate]:
        """
        Merge both strategies into one annotated list.

        Exhaustive results come first in score order, followed by greedy-only
        results in greedy visit order. A recipe found by both keeps its
        exhaustive annotation.
        """
        available_set = frozenset(available)
        if include_substitutions is None:
            include_substitutions = self.config.include_substitutions

        merged = _dedupe_by_recipe(
            self.search_exhaustive(available_set) + self.search_greedy(available_set)
        )

        annotated: list[ScoredCandidate] = []
        for candidate in merged:
            update: dict = {
                "missing_ingredients": missing_ingredients(candidate.recipe, available_set),
            }
            if include_substitutions:
                update["substitutions"] = self.advisor.recommend(candidate.recipe, available_set)
            annotated.append(candidate.model_copy(update=update))
        return annotated


def recommend(
    catalog: Sequence[Recipe],
    available: Iterable[str],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredCandidate]:
    """One-shot recommendation against an in-memory catalog."""
    return RecommendationEngine(catalog, config=config).recommend(available)

"""
Candidate search strategies.

Both strategies scan the whole catalog for one query and return ScoredCandidate
lists. All bookkeeping (selected ids, consumed ingredients) is local to a call.
"""
from __future__ import annotations

import logging
from typing import AbstractSet, Sequence

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import Recipe, ScoredCandidate
from .scoring import MatchScorer, greedy_score, missing_ingredients

logger = logging.getLogger(__name__)


def exhaustive_enumeration(
    catalog: Sequence[Recipe],
    available: AbstractSet[str],
    scorer: MatchScorer,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredCandidate]:
    """
    Collect up to `target_count` recipes with a positive score, in catalog order,
    then rank them by score. Equal scores keep catalog order.

    `max_depth` bounds the number of selections; with the default settings the
    count cap is always reached first.
    """
    selected: set[int] = set()
    candidates: list[ScoredCandidate] = []
    depth = 0

    for recipe in catalog:
        if len(candidates) >= config.target_count or depth > config.max_depth:
            break
        if recipe.id in selected:
            continue

        score = scorer.score(recipe, available)
        if score > 0:
            selected.add(recipe.id)
            candidates.append(ScoredCandidate(
                recipe=recipe,
                match_score=score,
                missing_ingredients=missing_ingredients(recipe, available),
                source="exhaustive",
            ))
            depth += 1

    logger.debug("Exhaustive search selected %d candidates", len(candidates))
    return sorted(candidates, key=lambda c: c.match_score, reverse=True)


def greedy_allocation(
    catalog: Sequence[Recipe],
    available: AbstractSet[str],
    scorer: MatchScorer,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredCandidate]:
    """
    Allocate available ingredients to recipes greedily.

    Recipes are visited by descending greedy score. A recipe whose every
    ingredient is available and not yet consumed is "makeable": its
    ingredients are consumed and it is emitted with score 100. Other recipes
    are emitted with their normal score when it exceeds the partial-match
    threshold. Output is truncated in visit order, without re-sorting.
    """
    ordered = sorted(catalog, key=lambda r: greedy_score(r, available), reverse=True)
    used: set[str] = set()
    results: list[ScoredCandidate] = []

    for recipe in ordered:
        distinct = recipe.distinct_ingredients()
        makeable = bool(distinct) and all(i in available and i not in used for i in distinct)

        if makeable:
            used.update(distinct)
            results.append(ScoredCandidate(
                recipe=recipe,
                match_score=100,
                missing_ingredients=[],
                source="greedy",
                makeable=True,
                used_ingredients=distinct,
            ))
            continue

        score = scorer.score(recipe, available)
        if score > config.partial_match_threshold:
            results.append(ScoredCandidate(
                recipe=recipe,
                match_score=score,
                missing_ingredients=missing_ingredients(recipe, available),
                source="greedy",
            ))

    logger.debug("Greedy search produced %d candidates before truncation", len(results))
    return results[: config.greedy_limit]

from __future__ import annotations

import logging
from typing import Iterable

from .models import Recipe

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


class IngredientGraph:
    """
    Undirected, unweighted ingredient co-occurrence graph.

    Two ingredients are neighbours iff some recipe lists both. The graph is a
    snapshot of the catalog it was built from; rebuild it when the catalog
    changes.
    """

    def __init__(self, adjacency: dict[str, frozenset[str]] | None = None) -> None:
        self._adjacency: dict[str, frozenset[str]] = dict(adjacency or {})

    @classmethod
    def build(cls, catalog: Iterable[Recipe]) -> IngredientGraph:
        adjacency: dict[str, set[str]] = {}
        for recipe in catalog:
            ingredients = recipe.ingredients
            for ingredient in ingredients:
                adjacency.setdefault(ingredient, set())
            for i in range(len(ingredients)):
                for j in range(i + 1, len(ingredients)):
                    a, b = ingredients[i], ingredients[j]
                    if a == b:
                        continue
                    adjacency[a].add(b)
                    adjacency[b].add(a)

        graph = cls({name: frozenset(neighbors) for name, neighbors in adjacency.items()})
        logger.debug("Built ingredient graph with %d nodes", len(graph))
        return graph

    def neighbors(self, ingredient: str) -> frozenset[str]:
        return self._adjacency.get(ingredient, _EMPTY)

    def nodes(self) -> list[str]:
        return list(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(n) for n in self._adjacency.values()) // 2

    def __contains__(self, ingredient: object) -> bool:
        return ingredient in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

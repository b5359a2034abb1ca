from __future__ import annotations

from dataclasses import dataclass, field

from ..catalog.config import DEFAULT_CATALOG_CONFIG
from ..catalog.loader import load_ingredient_categories
from ..catalog.provider import CatalogProvider
from ..engine.models import Recipe
from ..engine.recommender import RecommendationEngine
from .cache import QueryCache


@dataclass
class CatalogContext:
    """Everything a query needs for one catalog version."""

    version: int
    engine: RecommendationEngine
    categories: dict[str, str]
    cache: QueryCache = field(default_factory=QueryCache)

    @property
    def recipes(self) -> tuple[Recipe, ...]:
        return self.engine.catalog

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        for recipe in self.engine.catalog:
            if recipe.id == recipe_id:
                return recipe
        return None


_provider: CatalogProvider = CatalogProvider()
_context: CatalogContext | None = None


def _build(recipes: list[Recipe], version: int) -> CatalogContext:
    return CatalogContext(
        version=version,
        engine=RecommendationEngine(recipes),
        categories=load_ingredient_categories(DEFAULT_CATALOG_CONFIG),
    )


def get_context() -> CatalogContext:
    """Return the current catalog context, loading it on first call."""
    global _context
    if _context is None:
        recipes = _provider.load()
        _context = _build(recipes, _provider.version)
    return _context


def reload_context() -> CatalogContext:
    """
    Rebuild the context from the provider.

    If the provider fails, its catalog version does not move and the current
    context is kept as is.
    """
    global _context
    recipes = _provider.load()
    if _context is not None and _provider.version == _context.version:
        return _context
    _context = _build(recipes, _provider.version)
    return _context


def set_provider(provider: CatalogProvider) -> None:
    """Swap the catalog source; the next access loads from it."""
    global _provider, _context
    _provider = provider
    _context = None

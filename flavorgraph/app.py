from __future__ import annotations

from collections import Counter

from fastapi import FastAPI, HTTPException

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .engine.models import Recipe
from .recommendations.data_store import get_context, reload_context
from .recommendations.models import (
    IngredientOut,
    NeighborsResponse,
    ReloadResponse,
    SearchRequest,
    SearchResponse,
    SubstitutesResponse,
)
from .recommendations.retrieval import search_recipes

app = FastAPI(title="FlavorGraph Recipe Recommendation API", version="1.0.0")


def _ingredient_key(name: str) -> str:
    return name.strip().lower()


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    context = get_context()
    cuisines = sorted({r.cuisine for r in context.recipes})
    difficulties = Counter(r.difficulty.value for r in context.recipes)
    return {
        "catalog_version": context.version,
        "recipe_count": len(context.recipes),
        "cuisines": cuisines,
        "difficulties": dict(difficulties),
    }


# ── Recipes ──────────────────────────────────────────────────────────────


@app.get("/recipes", response_model=list[Recipe])
def list_recipes(cuisine: str | None = None) -> list[Recipe]:
    recipes = get_context().recipes
    if cuisine:
        wanted = cuisine.strip().lower()
        return [r for r in recipes if r.cuisine == wanted]
    return list(recipes)


@app.get("/recipes/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: int) -> Recipe:
    recipe = get_context().get_recipe(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@app.post("/recipes/search", response_model=SearchResponse)
def search(body: SearchRequest) -> SearchResponse:
    return search_recipes(body)


# ── Ingredients ──────────────────────────────────────────────────────────


@app.get("/ingredients", response_model=list[IngredientOut])
def list_ingredients() -> list[IngredientOut]:
    context = get_context()
    graph = context.engine.graph
    names = set(graph.nodes()) | set(context.categories)
    return [
        IngredientOut(
            name=name,
            category=context.categories.get(name, "other"),
            neighbor_count=len(graph.neighbors(name)),
        )
        for name in sorted(names)
    ]


@app.get("/ingredients/{name}/neighbors", response_model=NeighborsResponse)
def ingredient_neighbors(name: str) -> NeighborsResponse:
    key = _ingredient_key(name)
    neighbors = get_context().engine.graph.neighbors(key)
    return NeighborsResponse(ingredient=key, neighbors=sorted(neighbors))


@app.get("/ingredients/{name}/substitutes", response_model=SubstitutesResponse)
def ingredient_substitutes(name: str) -> SubstitutesResponse:
    key = _ingredient_key(name)
    substitutes = get_context().engine.advisor.catalog.substitutes(key)
    return SubstitutesResponse(ingredient=key, substitutes=substitutes)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.post("/catalog/reload", response_model=ReloadResponse)
def reload_catalog() -> ReloadResponse:
    context = reload_context()
    return ReloadResponse(
        status="ok",
        catalog_version=context.version,
        recipe_count=len(context.recipes),
    )


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_context().cache.stats()


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..engine.models import GapReport, ScoredCandidate


class SearchRequest(BaseModel):
    ingredients: list[str] = Field(..., description="Ingredients the user has on hand")
    include_substitutions: bool = True

    @field_validator("ingredients")
    @classmethod
    def _normalize(cls, value: list[str]) -> list[str]:
        cleaned = (v.strip().lower() for v in value)
        return list(dict.fromkeys(v for v in cleaned if v))


class SearchResponse(BaseModel):
    results: list[ScoredCandidate]
    gaps: list[GapReport]
    total_results: int
    catalog_version: int


class IngredientOut(BaseModel):
    name: str
    category: str
    neighbor_count: int


class NeighborsResponse(BaseModel):
    ingredient: str
    neighbors: list[str]


class SubstitutesResponse(BaseModel):
    ingredient: str
    substitutes: list[str]


class ReloadResponse(BaseModel):
    status: str
    catalog_version: int
    recipe_count: int

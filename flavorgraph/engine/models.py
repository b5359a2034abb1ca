from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    ingredients: tuple[str, ...] = ()
    difficulty: Difficulty = Difficulty.medium
    time: int = Field(default=30, gt=0, description="Preparation time in minutes")
    cuisine: str = "international"

    @field_validator("ingredients", mode="before")
    @classmethod
    def _normalize_ingredients(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        # Order and duplicates are kept; only case and whitespace are normalised
        return tuple(
            str(v).strip().lower() for v in value if v is not None and str(v).strip()
        )

    @field_validator("difficulty", mode="before")
    @classmethod
    def _default_difficulty(cls, value):
        if isinstance(value, str) and value.strip().lower() in Difficulty.__members__:
            return value.strip().lower()
        if isinstance(value, Difficulty):
            return value
        return Difficulty.medium

    @field_validator("time", mode="before")
    @classmethod
    def _default_time(cls, value):
        try:
            minutes = int(value)
        except (TypeError, ValueError):
            return 30
        return minutes if minutes > 0 else 30

    @field_validator("cuisine", mode="before")
    @classmethod
    def _default_cuisine(cls, value):
        if value is None or not str(value).strip():
            return "international"
        return str(value).strip().lower()

    def distinct_ingredients(self) -> list[str]:
        """Ingredient names with duplicates removed, first occurrence order."""
        return list(dict.fromkeys(self.ingredients))


class SubstitutionSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str
    alternatives: list[str]
    confidence: float = Field(..., gt=0.0, le=1.0)


class ScoredCandidate(BaseModel):
    """A recipe annotated for one query. The wrapped recipe is never modified."""

    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    match_score: int = Field(..., ge=0, le=100)
    missing_ingredients: list[str] = Field(default_factory=list)
    substitutions: list[SubstitutionSuggestion] | None = None
    source: str = "exhaustive"
    makeable: bool = False
    used_ingredients: list[str] = Field(default_factory=list)

    @property
    def recipe_id(self) -> int:
        return self.recipe.id


class GapReport(BaseModel):
    recipe_id: int
    recipe_name: str
    missing: list[str]
    missing_count: int
    missing_percentage: int

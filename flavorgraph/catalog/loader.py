from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List

import pandas as pd
from pydantic import ValidationError

from ..engine.models import Recipe
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "name",
    "ingredients",
    "difficulty",
    "time",
    "cuisine",
]


def _split_ingredients(value: Any, separator: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [part for part in str(value).split(separator) if part.strip()]


def records_to_recipes(
    records: Iterable[dict[str, Any]],
    separator: str = ",",
) -> list[Recipe]:
    """
    Build Recipe objects from raw records.

    Records that cannot form a recipe (no usable id or name) are skipped with a
    warning; a missing ingredient list becomes an empty one.
    """
    recipes: list[Recipe] = []
    for record in records:
        row = dict(record)
        row["ingredients"] = _split_ingredients(row.get("ingredients"), separator)
        try:
            recipes.append(Recipe.model_validate(row))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed recipe record id=%r: %s",
                row.get("id"), exc.errors()[0].get("msg", "invalid"),
            )
    return recipes


def read_recipes_frame(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    for col in CANONICAL_COLUMNS:
        if col not in df.columns:
            df[col] = None
    df = df[CANONICAL_COLUMNS]
    # NaN -> None so pydantic defaults apply
    return df.astype(object).where(df.notna(), None)


def load_recipes(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> list[Recipe]:
    """Read the recipe CSV at `config.recipes_path` into Recipe objects."""
    df = read_recipes_frame(config.recipes_path)
    recipes = records_to_recipes(df.to_dict(orient="records"), config.ingredient_separator)
    logger.info("Loaded %d recipes from %s", len(recipes), config.recipes_path)
    return recipes


def load_ingredient_categories(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> dict[str, str]:
    """Ingredient name -> category. The first row wins for duplicate names."""
    if not config.ingredients_path.exists():
        return {}
    df = pd.read_csv(config.ingredients_path)
    df["name"] = df["name"].fillna("").astype(str).str.strip().str.lower()
    df["category"] = df["category"].fillna("other").astype(str).str.strip().str.lower()
    df = df[df["name"] != ""].drop_duplicates(subset="name", keep="first")
    return dict(zip(df["name"], df["category"]))

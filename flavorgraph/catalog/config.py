from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the recipe catalog and ingredient categories are read from.
    """

    recipes_path: Path = Path(os.getenv("FLAVORGRAPH_RECIPES_PATH", str(_DATA_DIR / "recipes.csv")))
    ingredients_path: Path = Path(
        os.getenv("FLAVORGRAPH_INGREDIENTS_PATH", str(_DATA_DIR / "ingredients.csv"))
    )
    ingredient_separator: str = ","


DEFAULT_CATALOG_CONFIG = CatalogConfig()

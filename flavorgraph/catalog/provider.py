from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..engine.models import Recipe
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .loader import load_recipes

logger = logging.getLogger(__name__)

CatalogSource = Callable[[], Sequence[Recipe]]


class CatalogProvider:
    """
    Fetches the recipe catalog from a source and remembers the last good copy.

    A failing source never raises to the caller: the previous catalog is
    returned instead, or an empty one if nothing has loaded yet.
    """

    def __init__(
        self,
        source: CatalogSource | None = None,
        config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    ) -> None:
        self._source: CatalogSource = source or (lambda: load_recipes(config))
        self._last_good: list[Recipe] | None = None
        self.version = 0

    @property
    def last_good(self) -> list[Recipe]:
        return list(self._last_good or [])

    def load(self) -> list[Recipe]:
        try:
            recipes = list(self._source())
        except Exception:
            logger.warning(
                "Catalog source failed, serving %s catalog",
                "last known good" if self._last_good is not None else "empty",
                exc_info=True,
            )
            return self.last_good

        self._last_good = recipes
        self.version += 1
        return list(recipes)

"""
Recipe recommendation engine.

Responsibilities:
- Build the ingredient co-occurrence graph from a recipe catalog.
- Score recipes against the ingredients a user has on hand.
- Search the catalog with exhaustive and greedy strategies.
- Suggest substitutes for missing ingredients.
"""
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .graph import IngredientGraph
from .models import Difficulty, GapReport, Recipe, ScoredCandidate, SubstitutionSuggestion
from .recommender import RecommendationEngine, recommend
from .substitutions import SubstitutionAdvisor, SubstitutionCatalog

__all__ = [
    "DEFAULT_ENGINE_CONFIG",
    "Difficulty",
    "EngineConfig",
    "GapReport",
    "IngredientGraph",
    "Recipe",
    "RecommendationEngine",
    "ScoredCandidate",
    "SubstitutionAdvisor",
    "SubstitutionCatalog",
    "SubstitutionSuggestion",
    "recommend",
]

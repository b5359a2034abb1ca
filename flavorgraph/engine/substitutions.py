from __future__ import annotations

from typing import AbstractSet, Mapping, Sequence

from .models import Recipe, SubstitutionSuggestion
from .scoring import missing_ingredients

# Curated, ordered by preference. Not derived from the co-occurrence graph.
DEFAULT_SUBSTITUTIONS: dict[str, list[str]] = {
    # Proteins
    "chicken": ["turkey", "tofu", "fish", "shrimp", "tempeh"],
    "beef": ["lamb", "pork", "mushrooms", "tofu", "tempeh"],
    "pork": ["chicken", "turkey", "tofu", "mushrooms"],
    "fish": ["salmon", "tuna", "shrimp", "tofu"],
    "eggs": ["flax eggs", "chia eggs", "applesauce", "banana"],
    "bacon": ["turkey bacon", "mushrooms", "smoked tofu"],
    "ground beef": ["ground turkey", "ground chicken", "lentils", "mushrooms"],
    # Dairy
    "milk": ["almond milk", "coconut milk", "oat milk", "soy milk"],
    "cheese": ["nutritional yeast", "cashew cream", "avocado", "vegan cheese"],
    "butter": ["olive oil", "coconut oil", "avocado", "ghee"],
    "cream": ["coconut cream", "cashew cream", "almond milk"],
    "yogurt": ["coconut yogurt", "almond yogurt", "cashew cream"],
    "sour cream": ["cashew cream", "coconut cream", "greek yogurt"],
    # Grains
    "pasta": ["rice", "quinoa", "zucchini noodles", "spaghetti squash"],
    "rice": ["quinoa", "cauliflower rice", "barley", "bulgur"],
    "bread": ["lettuce wraps", "tortillas", "rice cakes"],
    "flour": ["almond flour", "coconut flour", "oat flour", "rice flour"],
    # Vegetables
    "onion": ["onion powder", "scallions", "leek"],
    "garlic": ["garlic powder", "shallots", "chives"],
    "tomato": ["tomato sauce", "sun-dried tomatoes", "cherry tomatoes"],
    "potato": ["sweet potato", "cauliflower", "turnip"],
    "bell pepper": ["poblano pepper", "jalapeño", "cubanelle pepper"],
    "mushrooms": ["shiitake mushrooms", "portobello mushrooms", "oyster mushrooms"],
    # Oils
    "olive oil": ["coconut oil", "avocado oil", "vegetable oil"],
    "vegetable oil": ["olive oil", "coconut oil", "avocado oil"],
    "sesame oil": ["olive oil", "coconut oil", "peanut oil"],
    # Sauces
    "soy sauce": ["tamari", "coconut aminos", "worcestershire sauce"],
    "fish sauce": ["soy sauce", "worcestershire sauce", "miso paste"],
    "oyster sauce": ["hoisin sauce", "soy sauce", "teriyaki sauce"],
    "teriyaki sauce": ["soy sauce", "hoisin sauce", "bbq sauce"],
    "hot sauce": ["sriracha", "chili powder", "cayenne pepper"],
    # Spices
    "ginger": ["ginger powder", "galangal", "lemongrass"],
    "salt": ["sea salt", "kosher salt", "soy sauce"],
    "black pepper": ["white pepper", "cayenne pepper", "paprika"],
    # Herbs
    "basil": ["oregano", "thyme", "parsley"],
    "cilantro": ["parsley", "mint", "dill"],
    "parsley": ["cilantro", "chives", "dill"],
    "oregano": ["basil", "thyme", "marjoram"],
    "thyme": ["oregano", "rosemary", "sage"],
    # Nuts
    "peanuts": ["almonds", "cashews", "walnuts"],
    "almonds": ["cashews", "walnuts", "pecans"],
    "walnuts": ["pecans", "almonds", "cashews"],
    # Legumes
    "black beans": ["kidney beans", "pinto beans", "navy beans"],
    "chickpeas": ["white beans", "cannellini beans", "lentils"],
    "lentils": ["split peas", "chickpeas", "black beans"],
    # Fruits
    "lemon": ["lime", "vinegar", "citric acid"],
    "lime": ["lemon", "vinegar", "citric acid"],
    "apple": ["pear", "peach", "banana"],
    "banana": ["apple", "pear", "applesauce"],
    # Specials
    "miso paste": ["soy sauce", "tamari", "nutritional yeast"],
    "tahini": ["peanut butter", "almond butter", "cashew butter"],
    "kimchi": ["sauerkraut", "pickled vegetables", "fermented vegetables"],
    "gochujang": ["sriracha", "hot sauce", "chili paste"],
    "coconut milk": ["almond milk", "oat milk", "heavy cream"],
    "coconut cream": ["heavy cream", "cashew cream", "coconut milk"],
    # Sweeteners
    "sugar": ["honey", "maple syrup", "agave", "stevia"],
    "honey": ["maple syrup", "agave", "brown sugar"],
    "maple syrup": ["honey", "agave", "brown sugar"],
    "brown sugar": ["white sugar", "honey", "maple syrup"],
    # Vinegars
    "balsamic vinegar": ["red wine vinegar", "apple cider vinegar", "lemon juice"],
    "rice vinegar": ["white vinegar", "apple cider vinegar", "lemon juice"],
    "apple cider vinegar": ["white vinegar", "rice vinegar", "lemon juice"],
    # Broths
    "chicken broth": ["vegetable broth", "beef broth", "water"],
    "beef broth": ["chicken broth", "vegetable broth", "water"],
    "vegetable broth": ["chicken broth", "water", "bouillon"],
    # Wines
    "wine": ["broth", "vinegar", "lemon juice"],
    "red wine": ["beef broth", "balsamic vinegar", "tomato juice"],
    "white wine": ["chicken broth", "white vinegar", "lemon juice"],
}


class SubstitutionCatalog:
    """Read-only ingredient -> ranked substitutes lookup."""

    def __init__(self, table: Mapping[str, Sequence[str]] | None = None) -> None:
        source = DEFAULT_SUBSTITUTIONS if table is None else table
        self._table: dict[str, tuple[str, ...]] = {
            k.strip().lower(): tuple(s.strip().lower() for s in v) for k, v in source.items()
        }

    def substitutes(self, ingredient: str) -> list[str]:
        return list(self._table.get(ingredient, ()))

    def __contains__(self, ingredient: object) -> bool:
        return ingredient in self._table

    def __len__(self) -> int:
        return len(self._table)


class SubstitutionAdvisor:
    def __init__(self, catalog: SubstitutionCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else SubstitutionCatalog()

    def recommend(
        self, recipe: Recipe, available: AbstractSet[str]
    ) -> list[SubstitutionSuggestion]:
        """
        Suggest available substitutes for each missing ingredient.

        Missing ingredients without a catalog entry or without any available
        substitute are left out of the result.
        """
        suggestions: list[SubstitutionSuggestion] = []
        for ingredient in missing_ingredients(recipe, available):
            candidates = self.catalog.substitutes(ingredient)
            on_hand = [s for s in candidates if s in available]
            if on_hand:
                suggestions.append(SubstitutionSuggestion(
                    original=ingredient,
                    alternatives=on_hand,
                    confidence=len(on_hand) / len(candidates),
                ))
        return suggestions

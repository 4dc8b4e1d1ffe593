import json
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from fridgechef.core.logging_config import get_logger
from fridgechef.core.rules import COMPLEMENTARY_INGREDIENTS, SEASON_BY_MONTH, SEASONAL_INGREDIENTS
from fridgechef.models import RankedRecipe, Recipe, RecipeScore
from fridgechef.services.preference_store import PreferenceStore
from fridgechef.services.scoring import DEFAULT_QUALITY, score_recipe
from fridgechef.services.sources.base import RecipeSource, RecipeSourceError, adapt_records
from fridgechef.utils.ingredient_matching import normalize_ingredient

logger = get_logger(__name__)

RECIPE_OF_THE_DAY_KEY = "recipeOfTheDay"
DEFAULT_SUGGESTION_LIMIT = 8
TRENDING_TAG = "popular"


class RecommendationEngine:
    def __init__(
        self,
        preference_store: PreferenceStore,
        complementary: Optional[Dict[str, List[str]]] = None,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> None:
        self.preference_store = preference_store
        self.complementary = complementary if complementary is not None else COMPLEMENTARY_INGREDIENTS
        self.suggestion_limit = suggestion_limit

    def score(self, recipe: Recipe, available_ingredients: Iterable[str]) -> RecipeScore:
        """Score a single recipe against the stored preferences and history."""
        return score_recipe(
            recipe,
            self.preference_store.get_preferences(),
            self.preference_store.get_cooking_history(),
            list(available_ingredients or [])
        )

    def rank(self, recipes: Iterable[Any], available_ingredients: Iterable[str]) -> List[RankedRecipe]:
        """Score every candidate and return them best first.

        Args:
            recipes: Recipe objects or raw recipe records (Spoonacular shape).
            available_ingredients: Ingredient names currently on hand.

        Returns:
            A new list of RankedRecipe sorted by descending score. Ties keep
            their input order. Records that cannot be read as a recipe at all
            are skipped.
        """
        preferences = self.preference_store.get_preferences()
        history = self.preference_store.get_cooking_history()
        available = list(available_ingredients or [])

        ranked = []
        for recipe in adapt_records(recipes, "rank request"):
            result = score_recipe(recipe, preferences, history, available)
            ranked.append(RankedRecipe(recipe=recipe, personal_score=result.score, reasons=result.reasons))

        ranked.sort(key=lambda item: item.personal_score, reverse=True)
        return ranked

    def suggest_ingredients(self, current_ingredients: Iterable[str]) -> List[str]:
        """Suggest ingredients to buy: favorites first, then good pairings.

        Anything already covered by a current ingredient or by a disliked one
        is left out.
        """
        current = [normalize_ingredient(c) for c in current_ingredients or []]
        current = [c for c in current if c]
        preferences = self.preference_store.get_preferences()

        candidates: List[str] = []
        for name in list(preferences.favorite_ingredients) + self._complementary_for(current):
            name = normalize_ingredient(name)
            if name and name not in candidates:
                candidates.append(name)

        suggestions = [
            name for name in candidates
            if not any(name in c for c in current)
            and not any(name in d for d in preferences.disliked_ingredients)
        ]
        return suggestions[:self.suggestion_limit]

    def _complementary_for(self, ingredients: List[str]) -> List[str]:
        pairings: List[str] = []
        for ingredient in ingredients:
            for base, complements in self.complementary.items():
                if base.lower() in ingredient:
                    pairings.extend(c for c in complements if c not in pairings)
        return pairings

    def seasonal_ingredients(self, today: Optional[date] = None) -> List[str]:
        season = SEASON_BY_MONTH[(today or date.today()).month]
        return list(SEASONAL_INGREDIENTS.get(season, []))

    def recipe_of_the_day(self, source: RecipeSource, today: Optional[date] = None) -> Optional[Recipe]:
        """Return today's featured recipe, fetching a new one once per day.

        The pick honors a vegan or vegetarian restriction and is cached in
        the key/value store. Any failure returns None.
        """
        today_key = (today or date.today()).isoformat()
        cached = self._load_recipe_of_the_day()
        if cached and cached.get("date") == today_key:
            recipes = adapt_records([cached.get("recipe")], RECIPE_OF_THE_DAY_KEY)
            if recipes:
                return recipes[0]

        restrictions = self.preference_store.get_preferences().dietary_restrictions
        diet = None
        if "vegetarian" in restrictions:
            diet = "vegetarian"
        if "vegan" in restrictions:
            diet = "vegan"

        try:
            recipes = source.get_random_recipes(1, diet=diet)
        except RecipeSourceError as exc:
            logger.error(f"Error fetching recipe of the day: {exc}")
            return None
        if not recipes:
            return None

        recipe = recipes[0]
        self._save_recipe_of_the_day(today_key, recipe)
        return recipe

    def trending_recipes(self, source: RecipeSource, number: int = 5) -> List[Recipe]:
        try:
            return source.get_random_recipes(number, tags=[TRENDING_TAG])
        except RecipeSourceError as exc:
            logger.error(f"Error fetching trending recipes: {exc}")
            return []

    def healthy_alternatives(self, source: RecipeSource, recipe_id: str, number: int = 3) -> List[Recipe]:
        """Similar recipes, healthiest first."""
        try:
            similar = source.get_similar_recipes(str(recipe_id), number)
        except RecipeSourceError as exc:
            logger.error(f"Error fetching healthy alternatives: {exc}")
            return []
        return sorted(
            similar,
            key=lambda r: r.health_score if r.health_score is not None else DEFAULT_QUALITY,
            reverse=True
        )

    def _load_recipe_of_the_day(self) -> Optional[Dict[str, Any]]:
        try:
            saved = self.preference_store.store.get(RECIPE_OF_THE_DAY_KEY)
            data = json.loads(saved) if saved else None
        except Exception as exc:
            logger.warning(f"Error loading cached recipe of the day: {exc}")
            return None
        return data if isinstance(data, dict) else None

    def _save_recipe_of_the_day(self, today_key: str, recipe: Recipe) -> None:
        payload = {"date": today_key, "recipe": recipe.model_dump(mode="json", by_alias=True)}
        try:
            self.preference_store.store.set(RECIPE_OF_THE_DAY_KEY, json.dumps(payload))
        except Exception as exc:
            logger.error(f"Error caching recipe of the day: {exc}")

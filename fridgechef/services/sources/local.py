import json
import os
import random
from typing import List, Optional
from fridgechef.core.logging_config import get_logger
from fridgechef.core.rules import DIETARY_RESTRICTION_ALIASES, DIETARY_RESTRICTION_FLAGS
from fridgechef.models import Recipe
from fridgechef.services.sources.base import RecipeSource, adapt_records
from fridgechef.utils.ingredient_matching import count_matching

logger = get_logger(__name__)


class LocalSource(RecipeSource):
    """Recipes from a Spoonacular-formatted JSON file."""
    name = "Local"

    def __init__(self, file_path: str = "data/sample_recipes.json", rng: Optional[random.Random] = None):
        self.recipes = adapt_records(self._load_data(file_path), self.name)
        self.rng = rng or random.Random()

    def _load_data(self, file_path: str) -> List[dict]:
        if not os.path.exists(file_path):
            logger.warning(f"{file_path} not found.")
            return []
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            logger.error(f"Error decoding {file_path}")
            return []
        if isinstance(data, dict):
            data = data.get("recipes", [])
        return data if isinstance(data, list) else []

    def get_recipes(self) -> List[Recipe]:
        return list(self.recipes)

    def get_random_recipes(
        self,
        number: int,
        tags: Optional[List[str]] = None,
        diet: Optional[str] = None
    ) -> List[Recipe]:
        candidates = self.recipes
        for tag in tags or []:
            candidates = [r for r in candidates if self._has_tag(r, tag)]
        if diet:
            candidates = [r for r in candidates if self._matches_diet(r, diet)]
        if not candidates or number <= 0:
            return []
        return self.rng.sample(candidates, min(number, len(candidates)))

    def get_similar_recipes(self, recipe_id: str, number: int) -> List[Recipe]:
        """Recipes sharing the most ingredients with the given one."""
        target = next((r for r in self.recipes if r.id == str(recipe_id)), None)
        if target is None or not target.ingredients:
            return []
        overlaps = [
            (count_matching(r.ingredients, target.ingredients), r)
            for r in self.recipes
            if r.id != target.id
        ]
        overlaps = [pair for pair in overlaps if pair[0] > 0]
        overlaps.sort(key=lambda pair: pair[0], reverse=True)
        return [r for _, r in overlaps[:number]]

    def _has_tag(self, recipe: Recipe, tag: str) -> bool:
        wanted = tag.lower().replace("-", " ")
        labels = [t.lower().replace("-", " ") for t in recipe.dish_types + recipe.diets]
        return wanted in labels

    def _matches_diet(self, recipe: Recipe, diet: str) -> bool:
        # Tag match first, then the boolean flags (vegan implies vegetarian)
        if self._has_tag(recipe, diet):
            return True
        canonical = DIETARY_RESTRICTION_ALIASES.get(diet.lower())
        flag = DIETARY_RESTRICTION_FLAGS.get(canonical) if canonical else None
        if flag is None:
            return False
        if canonical == "vegetarian" and recipe.vegan:
            return True
        return getattr(recipe, flag) is True

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional
from pydantic import ValidationError
from fridgechef.core.logging_config import get_logger
from fridgechef.models import Recipe

logger = get_logger(__name__)


class RecipeSourceError(Exception):
    def __init__(self, source: str, message: str):
        super().__init__(f"Failed to fetch recipes from {source}: {message}")
        self.source = source
        self.message = message


class RecipeSource(ABC):
    name: str = "Unknown"

    @abstractmethod
    def get_random_recipes(
        self,
        number: int,
        tags: Optional[List[str]] = None,
        diet: Optional[str] = None
    ) -> List[Recipe]:
        """
        Fetch up to `number` random recipes, optionally restricted by tags/diet.
        """
        pass

    @abstractmethod
    def get_similar_recipes(self, recipe_id: str, number: int) -> List[Recipe]:
        """
        Fetch up to `number` recipes similar to the given one.
        """
        pass


def adapt_records(records: Optional[Iterable[Any]], origin: str) -> List[Recipe]:
    """Turn raw recipe records into Recipe objects, skipping unusable ones."""
    recipes = []
    for record in records or []:
        if isinstance(record, Recipe):
            recipes.append(record)
            continue
        try:
            recipes.append(Recipe.model_validate(record))
        except ValidationError as exc:
            logger.warning(f"Skipping malformed recipe record from {origin}: {exc.error_count()} error(s)")
    return recipes

import math
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime

from fridgechef.core.rules import DIETARY_RESTRICTION_ALIASES
from fridgechef.utils.ingredient_matching import unique_names

SkillLevel = Literal["beginner", "intermediate", "advanced"]


class UserPreferences(BaseModel):
    # Persisted with camelCase keys (dietaryRestrictions, maxCookingTime, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dietary_restrictions: List[str] = Field(default_factory=list)
    favorite_ingredients: List[str] = Field(default_factory=list)
    disliked_ingredients: List[str] = Field(default_factory=list)
    cuisine_preferences: List[str] = Field(default_factory=list)  # reserved, not scored
    max_cooking_time: int = Field(default=60, gt=0)
    skill_level: SkillLevel = "beginner"

    @field_validator("favorite_ingredients", "disliked_ingredients", mode="before")
    @classmethod
    def _normalize_ingredients(cls, value: Any) -> List[str]:
        return unique_names(value)

    @field_validator("dietary_restrictions", mode="before")
    @classmethod
    def _normalize_restrictions(cls, value: Any) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            value = [value]
        restrictions: List[str] = []
        for tag in value:
            tag = str(tag).strip()
            tag = DIETARY_RESTRICTION_ALIASES.get(tag.lower(), tag)
            if tag and tag not in restrictions:
                restrictions.append(tag)
        return restrictions

    @field_validator("cuisine_preferences", mode="before")
    @classmethod
    def _normalize_cuisines(cls, value: Any) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            value = [value]
        return list(dict.fromkeys(str(c).strip() for c in value if str(c).strip()))


class CookingHistoryEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recipe_id: str
    cooked_at: datetime
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None

    @field_validator("recipe_id", mode="before")
    @classmethod
    def _coerce_recipe_id(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(int(value))
        return value


class Recipe(BaseModel):
    """Recipe record as delivered by a recipe source.

    Field aliases follow the Spoonacular payload (healthScore, readyInMinutes,
    extendedIngredients, ...). Every field except `id` is optional and
    unusable values are dropped to None so loose records always validate.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list, alias="extendedIngredients")
    health_score: Optional[float] = Field(default=None, alias="healthScore")
    popularity_score: Optional[float] = Field(default=None, alias="spoonacularScore")
    ready_in_minutes: Optional[int] = Field(default=None, alias="readyInMinutes")
    instructions: Optional[str] = None
    vegetarian: Optional[bool] = None
    vegan: Optional[bool] = None
    gluten_free: Optional[bool] = Field(default=None, alias="glutenFree")
    diets: List[str] = Field(default_factory=list)
    dish_types: List[str] = Field(default_factory=list, alias="dishTypes")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Optional[str]:
        return str(value) if value is not None else None

    @field_validator("ingredients", mode="before")
    @classmethod
    def _extract_ingredient_names(cls, value: Any) -> List[str]:
        # extendedIngredients entries are dicts; plain name lists are accepted too
        if not isinstance(value, (list, tuple)):
            return []
        names = []
        for item in value:
            if isinstance(item, dict):
                name = item.get("name") or item.get("nameClean") or item.get("original")
            else:
                name = item
            if isinstance(name, str) and name.strip():
                names.append(name.strip().lower())
        return names

    @field_validator("health_score", "popularity_score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            score = float(value)
        except (TypeError, ValueError):
            return None
        return score if math.isfinite(score) else None

    @field_validator("ready_in_minutes", mode="before")
    @classmethod
    def _coerce_minutes(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            raw = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(raw):
            return None
        minutes = int(round(raw))
        return minutes if minutes > 0 else None

    @field_validator("instructions", mode="before")
    @classmethod
    def _join_instructions(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return " ".join(str(step).strip() for step in value if str(step).strip())
        return str(value)

    @field_validator("vegetarian", "vegan", "gluten_free", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Optional[bool]:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes"}
        return None

    @field_validator("diets", "dish_types", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> List[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [str(tag) for tag in value if tag is not None]


class RecipeScore(BaseModel):
    recipe_id: str
    score: float
    reasons: List[str] = Field(default_factory=list)


class RankedRecipe(BaseModel):
    recipe: Recipe
    personal_score: float
    reasons: List[str] = Field(default_factory=list)

    @property
    def id(self) -> str:
        return self.recipe.id

from typing import Iterable, List, Optional
from fridgechef.core.rules import DIETARY_RESTRICTION_FLAGS, SKILL_LEVEL_BONUS
from fridgechef.models import CookingHistoryEntry, Recipe, RecipeScore, UserPreferences
from fridgechef.utils.complexity import estimate_complexity
from fridgechef.utils.ingredient_matching import availability_fraction, count_matching

HEALTH_WEIGHT = 0.3
POPULARITY_WEIGHT = 0.2
DEFAULT_QUALITY = 50.0
AVAILABILITY_WEIGHT = 20.0
DEFAULT_READY_MINUTES = 60
TIME_FIT_BONUS = 15
QUICK_BONUS = 10
QUICK_MINUTES = 30
OVER_TIME_PENALTY = 10
FAVORITE_BONUS = 8
DISLIKED_PENALTY = 15
RATING_WEIGHT = 5
LOVED_RATING = 4
DIETARY_BONUS = 10
MOSTLY_AVAILABLE = 0.8
MIN_SCORE = 0.0
MAX_SCORE = 100.0

REASON_AVAILABLE = "Most ingredients available"
REASON_QUICK = "Quick to make"
REASON_FAVORITES = "Contains favorite ingredients"
REASON_DISLIKED = "Contains disliked ingredients"
REASON_LOVED = "You loved this before!"
REASON_DIETARY = "Matches dietary preferences"
REASON_SKILL = "Appropriate for your skill level"


def score_recipe(
    recipe: Recipe,
    preferences: UserPreferences,
    history: Optional[Iterable[CookingHistoryEntry]],
    available_ingredients: Iterable[str]
) -> RecipeScore:
    """Score a recipe for this user on a 0-100 scale.

    Args:
        recipe: Recipe to score. Missing fields fall back to defaults.
        preferences: The user's stored preferences.
        history: Cooking history; a rated entry for this recipe adds a bonus.
        available_ingredients: What the user currently has on hand.

    Returns:
        RecipeScore with the clamped score and the reasons that fired.

    Notes:
        - Base quality blends the health and popularity indexes (50 if absent).
        - Availability, favorite and disliked matching use symmetric substrings.
        - Dietary bonus needs at least one recognized restriction to be active.
        - Skill fit is skipped when complexity cannot be estimated.
    """
    score = 0.0
    reasons: List[str] = []
    ingredients = recipe.ingredients or []

    health = recipe.health_score if recipe.health_score is not None else DEFAULT_QUALITY
    popularity = recipe.popularity_score if recipe.popularity_score is not None else DEFAULT_QUALITY
    score += health * HEALTH_WEIGHT + popularity * POPULARITY_WEIGHT

    availability = availability_fraction(ingredients, available_ingredients)
    score += availability * AVAILABILITY_WEIGHT
    if availability > MOSTLY_AVAILABLE:
        reasons.append(REASON_AVAILABLE)

    ready = recipe.ready_in_minutes or DEFAULT_READY_MINUTES
    if ready <= preferences.max_cooking_time:
        score += TIME_FIT_BONUS
        if ready <= QUICK_MINUTES:
            score += QUICK_BONUS
            reasons.append(REASON_QUICK)
    else:
        score -= OVER_TIME_PENALTY

    favorites = count_matching(ingredients, preferences.favorite_ingredients)
    if favorites:
        score += favorites * FAVORITE_BONUS
        reasons.append(REASON_FAVORITES)

    disliked = count_matching(ingredients, preferences.disliked_ingredients)
    if disliked:
        score -= disliked * DISLIKED_PENALTY
        reasons.append(REASON_DISLIKED)

    rating = _rating_for(recipe.id, history)
    if rating:
        score += rating * RATING_WEIGHT
        if rating >= LOVED_RATING:
            reasons.append(REASON_LOVED)

    if is_dietary_compliant(recipe, preferences.dietary_restrictions):
        score += DIETARY_BONUS
        reasons.append(REASON_DIETARY)

    skill_bonus = skill_level_bonus(recipe, preferences.skill_level)
    score += skill_bonus
    if skill_bonus > 0:
        reasons.append(REASON_SKILL)

    return RecipeScore(
        recipe_id=recipe.id,
        score=round(max(MIN_SCORE, min(MAX_SCORE, score)), 2),
        reasons=reasons
    )


def is_dietary_compliant(recipe: Recipe, restrictions: Iterable[str]) -> bool:
    """True when every active restriction is satisfied by the recipe's tags.

    Unset tags count as not satisfied. With no recognized restriction active
    there is nothing to comply with and the result is False.
    """
    flags = [DIETARY_RESTRICTION_FLAGS[r] for r in restrictions if r in DIETARY_RESTRICTION_FLAGS]
    if not flags:
        return False
    return all(getattr(recipe, flag) is True for flag in flags)


def skill_level_bonus(recipe: Recipe, skill_level: str) -> int:
    complexity = estimate_complexity(
        recipe.ready_in_minutes,
        recipe.instructions,
        len(recipe.ingredients or [])
    )
    if complexity is None:
        return 0
    return SKILL_LEVEL_BONUS.get(skill_level, {}).get(complexity, 0)


def _rating_for(recipe_id: str, history: Optional[Iterable[CookingHistoryEntry]]) -> Optional[int]:
    if not recipe_id or not history:
        return None
    for entry in history:
        if entry.recipe_id == recipe_id:
            return entry.rating
    return None

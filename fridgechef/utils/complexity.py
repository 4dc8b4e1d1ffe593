from typing import Optional

COMPLEXITY_EASY = "easy"
COMPLEXITY_MEDIUM = "medium"
COMPLEXITY_HARD = "hard"

EASY_BELOW = 15
MEDIUM_BELOW = 30
DEFAULT_COMPLEXITY_MINUTES = 30


def estimate_complexity(
    ready_in_minutes: Optional[int],
    instructions: Optional[str],
    ingredient_count: int
) -> Optional[str]:
    """Bucket a recipe into easy/medium/hard.

    The estimate combines cooking time, instruction length and ingredient
    count: minutes / 10 + characters / 100 + ingredients, bucketed below 15
    (easy) and below 30 (medium). Returns None when the recipe carries no
    instruction text, since the estimate is then meaningless.
    """
    if not instructions or not instructions.strip():
        return None

    minutes = ready_in_minutes or DEFAULT_COMPLEXITY_MINUTES
    complexity = minutes / 10.0 + len(instructions) / 100.0 + max(0, ingredient_count)

    if complexity < EASY_BELOW:
        return COMPLEXITY_EASY
    if complexity < MEDIUM_BELOW:
        return COMPLEXITY_MEDIUM
    return COMPLEXITY_HARD

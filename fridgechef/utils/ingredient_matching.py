from typing import Any, Iterable, List


def normalize_ingredient(name: Any) -> str:
    """Canonical form used everywhere ingredient names are stored or compared."""
    if name is None:
        return ""
    return str(name).strip().lower()


def unique_names(names: Any) -> List[str]:
    """Normalize a loose collection of names, dropping blanks and duplicates.

    Order of first appearance is preserved.
    """
    if not names:
        return []
    if isinstance(names, str):
        names = [names]
    seen = set()
    result: List[str] = []
    for name in names:
        norm = normalize_ingredient(name)
        if norm and norm not in seen:
            seen.add(norm)
            result.append(norm)
    return result


def ingredients_match(first: str, second: str) -> bool:
    """Symmetric, case-insensitive substring match.

    "tomato" matches "tomatoes, diced" and vice versa. Blank names never match.
    """
    a = normalize_ingredient(first)
    b = normalize_ingredient(second)
    if not a or not b:
        return False
    return a in b or b in a


def matches_any(ingredient: str, candidates: Iterable[str]) -> bool:
    return any(ingredients_match(ingredient, candidate) for candidate in candidates)


def count_matching(recipe_ingredients: Iterable[str], terms: Iterable[str]) -> int:
    """Count recipe ingredients that match at least one of the given terms."""
    terms = [t for t in (normalize_ingredient(t) for t in terms) if t]
    if not terms:
        return 0
    return sum(1 for ingredient in recipe_ingredients if matches_any(ingredient, terms))


def availability_fraction(recipe_ingredients: List[str], available: Iterable[str]) -> float:
    """Fraction of the recipe's ingredients found among the available ones."""
    if not recipe_ingredients:
        return 0.0
    available = [a for a in (normalize_ingredient(a) for a in available) if a]
    matched = sum(1 for ingredient in recipe_ingredients if matches_any(ingredient, available))
    return matched / len(recipe_ingredients)

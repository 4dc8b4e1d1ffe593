import pytest
from fridgechef.utils.complexity import estimate_complexity
from fridgechef.utils.ingredient_matching import (
    availability_fraction,
    count_matching,
    ingredients_match,
    unique_names,
)


@pytest.mark.parametrize("first, second", [
    ("Tomato", "tomatoes, diced"),
    ("tomatoes, diced", "TOMATO"),
    ("olive oil", "extra virgin olive oil"),
])
def test_match_is_symmetric_substring_and_case_insensitive(first, second):
    assert ingredients_match(first, second)
    assert ingredients_match(second, first)


def test_blank_names_never_match():
    assert not ingredients_match("", "tomato")
    assert not ingredients_match("tomato", "   ")


def test_availability_fraction():
    assert availability_fraction(["tomato", "basil"], ["Tomato"]) == 0.5
    assert availability_fraction(["tomatoes, diced"], ["tomato"]) == 1.0
    assert availability_fraction([], ["tomato"]) == 0.0
    assert availability_fraction(["tomato"], ["", None]) == 0.0


def test_count_matching_counts_recipe_ingredients_once():
    recipe = ["chicken breast", "garlic", "chicken stock"]
    assert count_matching(recipe, ["chicken", "breast"]) == 2
    assert count_matching(recipe, []) == 0


def test_unique_names_normalizes_and_keeps_first_order():
    assert unique_names(["Basil", " basil ", "Garlic", ""]) == ["basil", "garlic"]
    assert unique_names(None) == []
    assert unique_names("Basil") == ["basil"]


def test_complexity_buckets():
    assert estimate_complexity(10, "Mix.", 3) == "easy"
    assert estimate_complexity(60, "x" * 500, 10) == "medium"
    assert estimate_complexity(180, "x" * 1000, 15) == "hard"
    assert estimate_complexity(None, "x" * 100, 4) == "easy"
    assert estimate_complexity(30, "", 4) is None

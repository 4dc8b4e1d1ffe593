from fridgechef.models import CookingHistoryEntry, Recipe, UserPreferences


def test_recipe_from_spoonacular_payload():
    recipe = Recipe.model_validate({
        "id": 716429,
        "title": "Pasta",
        "healthScore": 19,
        "spoonacularScore": 83.5,
        "readyInMinutes": 45,
        "vegetarian": False,
        "glutenFree": True,
        "extendedIngredients": [
            {"name": "Butter", "original": "1 tbsp butter"},
            {"original": "6-8 ounces pasta"},
            {"amount": 3},
        ],
        "instructions": ["Boil the pasta.", "", "Toss."],
        "dishTypes": ["main course"],
        "unknownField": "ignored",
    })

    assert recipe.id == "716429"
    assert recipe.health_score == 19.0
    assert recipe.popularity_score == 83.5
    assert recipe.ready_in_minutes == 45
    assert recipe.vegetarian is False
    assert recipe.vegan is None
    assert recipe.gluten_free is True
    assert recipe.ingredients == ["butter", "6-8 ounces pasta"]
    assert recipe.instructions == "Boil the pasta. Toss."
    assert recipe.dish_types == ["main course"]


def test_recipe_drops_unusable_values():
    recipe = Recipe.model_validate({
        "id": None,
        "healthScore": "high",
        "spoonacularScore": True,
        "readyInMinutes": 0,
        "vegan": "yes",
        "extendedIngredients": {"name": "not a list"},
    })

    assert recipe.id == ""
    assert recipe.health_score is None
    assert recipe.popularity_score is None
    assert recipe.ready_in_minutes is None
    assert recipe.vegan is True
    assert recipe.ingredients == []


def test_recipe_drops_non_finite_numbers():
    recipe = Recipe.model_validate({
        "id": 3,
        "healthScore": float("nan"),
        "spoonacularScore": float("inf"),
        "readyInMinutes": float("-inf"),
    })

    assert recipe.health_score is None
    assert recipe.popularity_score is None
    assert recipe.ready_in_minutes is None


def test_preferences_normalize_names_and_restrictions():
    preferences = UserPreferences.model_validate({
        "favoriteIngredients": ["Basil", "basil ", "  "],
        "dislikedIngredients": "Cilantro",
        "dietaryRestrictions": ["Gluten Free", "vegan", "vegan"],
        "cuisinePreferences": ["Thai", "Thai", ""],
    })

    assert preferences.favorite_ingredients == ["basil"]
    assert preferences.disliked_ingredients == ["cilantro"]
    assert preferences.dietary_restrictions == ["glutenFree", "vegan"]
    assert preferences.cuisine_preferences == ["Thai"]


def test_history_entry_uses_camel_case_on_dump():
    entry = CookingHistoryEntry.model_validate({
        "recipeId": 42,
        "cookedAt": "2024-02-01T12:00:00+00:00",
        "rating": 4,
    })
    dumped = entry.model_dump(mode="json", by_alias=True)

    assert entry.recipe_id == "42"
    assert dumped["recipeId"] == "42"
    assert dumped["rating"] == 4
    assert dumped["notes"] is None

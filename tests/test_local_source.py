import json
import random

import pytest
from fridgechef.services.sources.local import LocalSource


@pytest.fixture
def local_file(tmp_path):
    data = [
        {
            "id": 1,
            "title": "Caprese",
            "vegetarian": True,
            "diets": ["gluten free"],
            "dishTypes": ["salad"],
            "extendedIngredients": [{"name": "tomato"}, {"name": "mozzarella"}, {"name": "basil"}]
        },
        {
            "id": 2,
            "title": "Tomato Soup",
            "vegan": True,
            "vegetarian": True,
            "dishTypes": ["soup", "popular"],
            "extendedIngredients": [{"name": "tomatoes"}, {"name": "basil"}, {"name": "onion"}]
        },
        {
            "id": 3,
            "title": "Steak",
            "dishTypes": ["main course", "popular"],
            "extendedIngredients": [{"name": "beef"}, {"name": "butter"}]
        },
        "not a recipe"
    ]
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_loads_and_skips_malformed(local_file):
    source = LocalSource(local_file)

    assert [r.id for r in source.get_recipes()] == ["1", "2", "3"]


def test_missing_file_gives_no_recipes(tmp_path):
    assert LocalSource(str(tmp_path / "missing.json")).get_recipes() == []


def test_random_recipes_filter_by_tag_and_diet(local_file):
    source = LocalSource(local_file, rng=random.Random(7))

    popular = source.get_random_recipes(5, tags=["popular"])
    assert sorted(r.id for r in popular) == ["2", "3"]

    vegetarian = source.get_random_recipes(5, diet="vegetarian")
    assert sorted(r.id for r in vegetarian) == ["1", "2"]

    vegan = source.get_random_recipes(5, diet="vegan")
    assert [r.id for r in vegan] == ["2"]

    assert len(source.get_random_recipes(1)) == 1
    assert source.get_random_recipes(0) == []


def test_similar_recipes_share_ingredients(local_file):
    source = LocalSource(local_file)

    assert [r.id for r in source.get_similar_recipes("1", 3)] == ["2"]
    assert source.get_similar_recipes("3", 3) == []
    assert source.get_similar_recipes("404", 3) == []

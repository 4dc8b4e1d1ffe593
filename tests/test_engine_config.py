import json

import pytest
from fridgechef.core.engine_config import EngineConfig, load_engine_config
from fridgechef.factory import create_engine, create_spoonacular_source


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FRIDGECHEF_STORAGE_PATH", "FRIDGECHEF_RECIPES_PATH", "FRIDGECHEF_SUGGESTION_LIMIT"):
        monkeypatch.delenv(name, raising=False)


def test_missing_file_gives_defaults(tmp_path):
    assert load_engine_config(tmp_path / "missing.json") == EngineConfig()


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "engine_config.json"
    path.write_text("{oops")

    assert load_engine_config(path) == EngineConfig()


def test_values_from_file_and_bad_values_fall_back(tmp_path):
    path = tmp_path / "engine_config.json"
    path.write_text(json.dumps({
        "storage_path": "/tmp/store.json",
        "suggestion_limit": "5",
        "spoonacular_timeout_seconds": -1
    }))

    config = load_engine_config(path)
    assert config.storage_path == "/tmp/store.json"
    assert config.suggestion_limit == 5
    assert config.spoonacular_timeout_seconds == 10


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "engine_config.json"
    path.write_text(json.dumps({"suggestion_limit": 5}))
    monkeypatch.setenv("FRIDGECHEF_SUGGESTION_LIMIT", "3")
    monkeypatch.setenv("FRIDGECHEF_STORAGE_PATH", str(tmp_path / "env_store.json"))

    config = load_engine_config(path)
    assert config.suggestion_limit == 3
    assert config.storage_path == str(tmp_path / "env_store.json")


def test_factory_wires_file_backed_engine(tmp_path):
    config = EngineConfig(storage_path=str(tmp_path / "store.json"), suggestion_limit=2)
    engine = create_engine(config)

    engine.preference_store.record_ingredient_preference("saffron", True)
    assert engine.suggest_ingredients(["tomato"]) == ["saffron", "basil"]
    assert (tmp_path / "store.json").exists()


def test_factory_builds_spoonacular_source_from_config():
    config = EngineConfig(spoonacular_base_url="https://example.test/", spoonacular_timeout_seconds=4)
    source = create_spoonacular_source(config)

    assert source.base_url == "https://example.test"
    assert source.timeout == 4

"""
factory - Composition root for Fridge Chef.

Services take their collaborators as constructor arguments; this module is
the one place that wires them from an EngineConfig.

Usage:
    from fridgechef.core.engine_config import load_engine_config
    from fridgechef.factory import create_engine

    engine = create_engine(load_engine_config())
    ranked = engine.rank(recipes, ["tomato", "basil"])
"""
from typing import Optional

from fridgechef.core.engine_config import EngineConfig, load_engine_config
from fridgechef.core.logging_config import get_logger
from fridgechef.services.preference_store import PreferenceStore
from fridgechef.services.recommendation_engine import RecommendationEngine
from fridgechef.services.sources.spoonacular import SpoonacularSource
from fridgechef.services.storage import JsonFileStore, KeyValueStore

logger = get_logger(__name__)


def create_preference_store(config: EngineConfig, store: Optional[KeyValueStore] = None) -> PreferenceStore:
    return PreferenceStore(store or JsonFileStore(config.storage_path))


def create_engine(config: Optional[EngineConfig] = None, store: Optional[KeyValueStore] = None) -> RecommendationEngine:
    config = config or load_engine_config()
    logger.info(f"Creating recommendation engine (storage={config.storage_path})")
    return RecommendationEngine(
        create_preference_store(config, store),
        suggestion_limit=config.suggestion_limit
    )


def create_spoonacular_source(config: Optional[EngineConfig] = None) -> SpoonacularSource:
    config = config or load_engine_config()
    return SpoonacularSource(
        base_url=config.spoonacular_base_url,
        timeout=config.spoonacular_timeout_seconds
    )

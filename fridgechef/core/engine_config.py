import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from fridgechef.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_STORAGE_PATH = "data/fridgechef_store.json"
DEFAULT_RECIPES_PATH = "data/sample_recipes.json"
DEFAULT_SPOONACULAR_URL = "https://api.spoonacular.com"


@dataclass(frozen=True)
class EngineConfig:
    storage_path: str = DEFAULT_STORAGE_PATH
    recipes_path: str = DEFAULT_RECIPES_PATH
    suggestion_limit: int = 8
    spoonacular_base_url: str = DEFAULT_SPOONACULAR_URL
    spoonacular_timeout_seconds: int = 10


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value > 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return default
        return parsed if parsed > 0 else default
    return default


def _as_str(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _config_path() -> Path:
    return Path(__file__).resolve().parents[2] / "config" / "engine_config.json"


def load_engine_config(path: Optional[Path] = None) -> EngineConfig:
    """Load engine settings from JSON, then apply FRIDGECHEF_* environment overrides."""
    load_dotenv()
    config_path = path or _config_path()
    try:
        data: Dict[str, Any] = json.loads(Path(config_path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        data = {}
    except json.JSONDecodeError as exc:
        logger.warning(f"Invalid engine config JSON at {config_path}: {exc}")
        data = {}
    if not isinstance(data, dict):
        logger.warning(f"Engine config at {config_path} is not a JSON object; using defaults")
        data = {}

    storage_path = _as_str(data.get("storage_path"), DEFAULT_STORAGE_PATH)
    recipes_path = _as_str(data.get("recipes_path"), DEFAULT_RECIPES_PATH)
    suggestion_limit = _as_int(data.get("suggestion_limit"), 8)

    return EngineConfig(
        storage_path=_as_str(os.getenv("FRIDGECHEF_STORAGE_PATH"), storage_path),
        recipes_path=_as_str(os.getenv("FRIDGECHEF_RECIPES_PATH"), recipes_path),
        suggestion_limit=_as_int(os.getenv("FRIDGECHEF_SUGGESTION_LIMIT"), suggestion_limit),
        spoonacular_base_url=_as_str(data.get("spoonacular_base_url"), DEFAULT_SPOONACULAR_URL),
        spoonacular_timeout_seconds=_as_int(data.get("spoonacular_timeout_seconds"), 10)
    )

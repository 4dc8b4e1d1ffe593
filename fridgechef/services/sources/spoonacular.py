import os
import time
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from fridgechef.core.engine_config import DEFAULT_SPOONACULAR_URL
from fridgechef.core.logging_config import get_logger
from fridgechef.models import Recipe
from fridgechef.services.sources.base import RecipeSource, RecipeSourceError, adapt_records

logger = get_logger(__name__)


class SpoonacularSource(RecipeSource):
    name = "Spoonacular"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = DEFAULT_SPOONACULAR_URL,
        timeout: int = 10
    ):
        load_dotenv()
        self.api_key = api_key or os.getenv("SPOONACULAR_API_KEY")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if not self.api_key:
            logger.warning("SPOONACULAR_API_KEY not set. Spoonacular lookups are disabled.")

    def get_random_recipes(
        self,
        number: int,
        tags: Optional[List[str]] = None,
        diet: Optional[str] = None
    ) -> List[Recipe]:
        if not self.api_key:
            return []
        include_tags = list(tags or [])
        if diet:
            include_tags.append(diet)
        params: Dict[str, Any] = {"number": number}
        if include_tags:
            params["include-tags"] = ",".join(include_tags)

        payload = self._get("/recipes/random", params)
        records = payload.get("recipes") if isinstance(payload, dict) else None
        return adapt_records(records, self.name)

    def get_similar_recipes(self, recipe_id: str, number: int) -> List[Recipe]:
        if not self.api_key:
            return []
        payload = self._get(f"/recipes/{recipe_id}/similar", {"number": number})
        return adapt_records(payload if isinstance(payload, list) else None, self.name)

    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        query = dict(params, apiKey=self.api_key)
        try:
            api_start = time.time()
            response = requests.get(url, params=query, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise RecipeSourceError(self.name, f"GET {path} failed: {exc}") from exc
        logger.info(f"Spoonacular API ({path}): {time.time() - api_start:.2f}s")
        return payload

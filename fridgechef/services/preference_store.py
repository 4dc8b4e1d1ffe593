import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from fridgechef.core.logging_config import get_logger
from fridgechef.models import CookingHistoryEntry, UserPreferences
from fridgechef.services.storage import KeyValueStore
from fridgechef.utils.ingredient_matching import normalize_ingredient

logger = get_logger(__name__)

PREFERENCES_KEY = "userPreferences"
COOKING_HISTORY_KEY = "cookingHistory"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PreferenceStore:
    """User preferences and cooking history on top of a key/value store.

    Storage failures never reach the caller: reads fall back to defaults and
    writes are logged and dropped. Updates are read-modify-write without
    locking, so concurrent writers race and the last write wins.
    """

    def __init__(self, store: KeyValueStore, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.store = store
        self.clock = clock or _utc_now

    def get_preferences(self) -> UserPreferences:
        try:
            saved = self.store.get(PREFERENCES_KEY)
            if not saved:
                return UserPreferences()
            return UserPreferences.model_validate_json(saved)
        except Exception as exc:
            logger.warning(f"Error loading preferences, using defaults: {exc}")
            return UserPreferences()

    def update_preferences(
        self,
        partial: Union[Dict[str, Any], UserPreferences, None] = None,
        **fields: Any
    ) -> None:
        """Shallow-merge the given fields over the current preferences and persist.

        Field names may be snake_case or the persisted camelCase. Lists are
        replaced, not merged. Unknown fields are ignored.
        """
        try:
            if isinstance(partial, UserPreferences):
                changes = partial.model_dump(exclude_unset=True)
            else:
                changes = dict(partial or {})
            changes.update(fields)

            merged = self.get_preferences().model_dump()
            merged.update(_to_field_names(changes))
            updated = UserPreferences.model_validate(merged)
            self.store.set(PREFERENCES_KEY, updated.model_dump_json(by_alias=True))
        except Exception as exc:
            logger.error(f"Error saving preferences: {exc}")

    def record_ingredient_preference(self, ingredient: str, liked: bool) -> None:
        """Mark an ingredient as liked or disliked, removing it from the other list."""
        name = normalize_ingredient(ingredient)
        if not name:
            return
        preferences = self.get_preferences()
        favorites = list(preferences.favorite_ingredients)
        disliked = list(preferences.disliked_ingredients)

        if liked:
            if name not in favorites:
                favorites.append(name)
            disliked = [i for i in disliked if i != name]
        else:
            if name not in disliked:
                disliked.append(name)
            favorites = [i for i in favorites if i != name]

        self.update_preferences(favorite_ingredients=favorites, disliked_ingredients=disliked)

    def get_cooking_history(self) -> List[CookingHistoryEntry]:
        """Return cooking history, most recent first."""
        try:
            saved = self.store.get(COOKING_HISTORY_KEY)
            raw_entries = json.loads(saved) if saved else []
        except Exception as exc:
            logger.warning(f"Error loading cooking history: {exc}")
            return []
        if not isinstance(raw_entries, list):
            logger.warning("Stored cooking history is not a list; ignoring it")
            return []

        history: List[CookingHistoryEntry] = []
        for raw in raw_entries:
            try:
                history.append(CookingHistoryEntry.model_validate(raw))
            except ValidationError as exc:
                logger.warning(f"Skipping malformed cooking history entry: {exc}")
        return history

    def record_cooking_event(
        self,
        recipe_id: Union[str, int],
        rating: Optional[int] = None,
        notes: Optional[str] = None
    ) -> None:
        """Record that a recipe was cooked.

        Replaces any earlier entry for the same recipe and puts the new one
        first. An out-of-range rating raises ValidationError.
        """
        entry = CookingHistoryEntry(
            recipe_id=recipe_id,
            cooked_at=self.clock(),
            rating=rating,
            notes=notes
        )
        history = [h for h in self.get_cooking_history() if h.recipe_id != entry.recipe_id]
        history.insert(0, entry)

        try:
            payload = [h.model_dump(mode="json", by_alias=True) for h in history]
            self.store.set(COOKING_HISTORY_KEY, json.dumps(payload))
        except Exception as exc:
            logger.error(f"Error saving to cooking history: {exc}")


def _to_field_names(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Translate camelCase aliases to model field names."""
    by_alias = {
        (field.alias or name): name
        for name, field in UserPreferences.model_fields.items()
    }
    fields = set(UserPreferences.model_fields)
    translated = {}
    for key, value in changes.items():
        if key in fields:
            translated[key] = value
        elif key in by_alias:
            translated[by_alias[key]] = value
    return translated

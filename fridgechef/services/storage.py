import json
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from fridgechef.core.logging_config import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    def __init__(self, key: Optional[str], message: str):
        super().__init__(f"Storage failure for key {key!r}: {message}")
        self.key = key
        self.message = message


class KeyValueStore(ABC):
    """Persistence interface: serialized string values under string keys."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store the value, replacing any previous one."""
        pass


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore(KeyValueStore):
    """All keys kept in a single JSON object on disk."""

    def __init__(self, file_path: str):
        self.file_path = file_path

    def get(self, key: str) -> Optional[str]:
        value = self._load(key).get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(key, "stored value is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        data = self._load(key)
        data[key] = value
        self._save(key, data)

    def _load(self, key: str) -> Dict[str, object]:
        if not os.path.exists(self.file_path):
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as exc:
            raise StorageError(key, f"cannot read {self.file_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(key, f"{self.file_path} does not hold a JSON object")
        return data

    def _save(self, key: str, data: Dict[str, object]) -> None:
        try:
            directory = os.path.dirname(self.file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
        except OSError as exc:
            raise StorageError(key, f"cannot write {self.file_path}: {exc}") from exc
        logger.debug(f"Saved key {key!r} to {self.file_path}")

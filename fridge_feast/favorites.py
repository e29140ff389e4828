"""Local persistence for favorite recipes.

Favorites are kept as a single serialized string under one key of a small
key-value storage, the way a browser keeps data in ``localStorage``. Two
storages are provided: ``JsonFileStorage`` for the app and ``MemoryStorage``
for tests and throwaway sessions.
"""
from __future__ import annotations

import json
import os
from typing import Optional, Protocol

from .logging_config import get_logger
from .models import Recipe

logger = get_logger(__name__)

FAVORITES_KEY = "fridge-feast-favorites"


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Key-value storage held in a plain dict."""

    def __init__(self, items: Optional[dict[str, str]] = None):
        self.items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileStorage:
    """Key-value storage backed by one JSON object on disk."""

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning("Overwriting unreadable storage file %s", self.path)
            data = {}
        data[key] = value

        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)


class FavoritesStore:
    """Load and save the favorites collection without ever raising."""

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> dict[str, Recipe]:
        """Return favorites keyed by title; unreadable data counts as none."""
        try:
            raw = self.storage.get_item(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read favorites, starting empty: %s", exc)
            return {}

        if not raw:
            logger.info("No stored favorites found")
            return {}

        try:
            entries = json.loads(raw)
        except ValueError as exc:
            logger.warning("Stored favorites are not valid JSON: %s", exc)
            return {}

        if not isinstance(entries, list):
            logger.warning(
                "Stored favorites have unexpected type %s", type(entries).__name__
            )
            return {}

        favorites: dict[str, Recipe] = {}
        for entry in entries:
            try:
                recipe = Recipe.from_dict(entry)
            except ValueError as exc:
                logger.warning("Skipping malformed favorite: %s", exc)
                continue
            favorites[recipe.title] = recipe

        logger.info("Loaded %s favorite recipes", len(favorites))
        return favorites

    def save(self, favorites: dict[str, Recipe]) -> bool:
        """Serialize the whole collection; report failure instead of raising."""
        try:
            payload = json.dumps(
                [recipe.to_dict() for recipe in favorites.values()],
                ensure_ascii=False,
            )
            self.storage.set_item(self.key, payload)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to persist favorites: %s", exc, exc_info=True)
            return False

        logger.info("Persisted %s favorite recipes", len(favorites))
        return True


__all__ = [
    "FAVORITES_KEY",
    "FavoritesStore",
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
]

"""Tests for fridge_feast.favorites."""

from __future__ import annotations

import json

import pytest

from fridge_feast.favorites import (
    FAVORITES_KEY,
    FavoritesStore,
    JsonFileStorage,
    MemoryStorage,
)


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "{\"title\": \"Soup\"}",
        "42",
        "[{\"title\": \"Soup\"}]",
        "",
    ],
)
def test_malformed_data_loads_as_empty(raw):
    store = FavoritesStore(MemoryStorage({FAVORITES_KEY: raw}))
    assert store.load() == {}


def test_missing_key_loads_as_empty():
    assert FavoritesStore(MemoryStorage()).load() == {}


def test_malformed_entries_are_skipped(recipe_factory):
    good = recipe_factory("Tomato Soup")
    raw = json.dumps([good.to_dict(), {"title": 3}, "oops"])
    store = FavoritesStore(MemoryStorage({FAVORITES_KEY: raw}))

    assert list(store.load()) == ["Tomato Soup"]


def test_save_then_load_through_json_file(tmp_path, recipe_factory):
    path = tmp_path / "nested" / "favorites.json"
    soup = recipe_factory("Chicken Soup")
    stew = recipe_factory("Beef Stew", ("beef", "potatoes"))

    assert FavoritesStore(JsonFileStorage(str(path))).save(
        {soup.title: soup, stew.title: stew}
    )

    loaded = FavoritesStore(JsonFileStorage(str(path))).load()
    assert list(loaded) == ["Chicken Soup", "Beef Stew"]
    assert loaded["Beef Stew"] == stew


def test_stored_layout_uses_camel_case(recipe_factory):
    storage = MemoryStorage()
    recipe = recipe_factory()
    FavoritesStore(storage).save({recipe.title: recipe})

    (entry,) = json.loads(storage.get_item(FAVORITES_KEY))
    assert entry["prepTime"] == "15 minutes"
    assert entry["cookTime"] == "40 minutes"
    assert "imageUrl" not in entry


def test_corrupt_file_loads_empty_and_is_replaced_on_save(tmp_path, recipe_factory):
    path = tmp_path / "favorites.json"
    path.write_text("{broken", encoding="utf-8")
    store = FavoritesStore(JsonFileStorage(str(path)))

    assert store.load() == {}

    recipe = recipe_factory()
    assert store.save({recipe.title: recipe})
    assert list(store.load()) == ["Chicken Soup"]


def test_json_file_storage_keeps_other_keys(tmp_path):
    path = tmp_path / "storage.json"
    storage = JsonFileStorage(str(path))
    storage.set_item("theme", "dark")
    storage.set_item(FAVORITES_KEY, "[]")

    assert storage.get_item("theme") == "dark"
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "theme": "dark",
        FAVORITES_KEY: "[]",
    }


def test_save_failure_returns_false(recipe_factory):
    class ReadOnlyStorage(MemoryStorage):
        def set_item(self, key, value):
            raise PermissionError("read-only")

    recipe = recipe_factory()
    assert FavoritesStore(ReadOnlyStorage()).save({recipe.title: recipe}) is False

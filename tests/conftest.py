"""Shared fixtures: controllable fake services and in-memory storage."""

from __future__ import annotations

import asyncio
import os
import tempfile
from types import SimpleNamespace

import pytest

os.environ.setdefault("FRIDGE_FEAST_LOG_DIR", tempfile.mkdtemp(prefix="fridge-feast-logs-"))

from fridge_feast.controller import SessionController  # noqa: E402
from fridge_feast.favorites import FavoritesStore, MemoryStorage  # noqa: E402
from fridge_feast.models import Recipe  # noqa: E402


class ControlledService:
    """Async fake whose calls stay pending until the test settles them."""

    def __init__(self):
        self.calls: list[tuple] = []
        self._pending: list[tuple[asyncio.Event, dict]] = []

    async def __call__(self, *args):
        event = asyncio.Event()
        outcome: dict = {}
        self.calls.append(args)
        self._pending.append((event, outcome))
        await event.wait()
        if "error" in outcome:
            raise outcome["error"]
        return outcome["value"]

    def resolve(self, value, index: int = -1) -> None:
        event, outcome = self._pending[index]
        outcome["value"] = value
        event.set()

    def fail(self, error: BaseException, index: int = -1) -> None:
        event, outcome = self._pending[index]
        outcome["error"] = error
        event.set()


def make_recipe(
    title: str = "Chicken Soup",
    ingredients: tuple[str, ...] = ("chicken", "carrots", "onion"),
) -> Recipe:
    return Recipe(
        title=title,
        description=f"A comforting bowl of {title.lower()}.",
        ingredients=ingredients,
        instructions=("Chop everything.", "Simmer for 40 minutes."),
        prep_time="15 minutes",
        cook_time="40 minutes",
    )


async def _tick(times: int = 5) -> None:
    for _ in range(times):
        await asyncio.sleep(0)


@pytest.fixture()
def tick():
    return _tick


@pytest.fixture()
def recipe_factory():
    return make_recipe


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def services() -> SimpleNamespace:
    return SimpleNamespace(
        suggest=ControlledService(),
        details=ControlledService(),
        shopping=ControlledService(),
        image=ControlledService(),
    )


@pytest.fixture()
def controller(storage, services) -> SessionController:
    return SessionController(
        favorites_store=FavoritesStore(storage),
        suggest_recipes=services.suggest,
        fetch_recipe_details=services.details,
        compute_shopping_list=services.shopping,
    )

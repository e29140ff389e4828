"""Rendering tests for streamlit_app, run headless with Streamlit's AppTest."""

from __future__ import annotations

import json

from streamlit.testing.v1 import AppTest

from fridge_feast.controller import SessionController
from fridge_feast.favorites import FAVORITES_KEY, FavoritesStore, MemoryStorage
from fridge_feast.models import View


def _suggestions_page():
    import streamlit as st

    from streamlit_app import render_suggestions

    render_suggestions(st.session_state["controller"])


def _recipe_page():
    import streamlit as st

    from streamlit_app import render_recipe

    render_recipe(st.session_state["controller"])


def test_repeated_suggestion_names_render(services):
    controller = SessionController(
        FavoritesStore(MemoryStorage()),
        services.suggest,
        services.details,
        services.shopping,
    )
    controller.session.suggestions = ["Chicken Soup", "Chicken Soup"]
    controller.session.view = View.SUGGESTIONS_LOADED

    at = AppTest.from_function(_suggestions_page)
    at.session_state["controller"] = controller
    at.run()

    assert not at.exception
    labels = [button.label for button in at.button]
    assert labels.count("Chicken Soup") == 2


def test_recipe_with_image_renders(services, recipe_factory):
    recipe = recipe_factory()
    stored = dict(recipe.to_dict(), imageUrl="https://example.com/chicken-soup.jpg")
    storage = MemoryStorage({FAVORITES_KEY: json.dumps([stored])})
    controller = SessionController(
        FavoritesStore(storage), services.suggest, services.details, services.shopping
    )
    controller.view_favorites()
    controller.select_favorite(recipe.title)

    at = AppTest.from_function(_recipe_page)
    at.session_state["controller"] = controller
    at.run()

    assert not at.exception
    assert not at.warning
    assert at.header[0].value == "Chicken Soup"

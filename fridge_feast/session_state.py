"""Helpers for initializing Streamlit session state."""
from __future__ import annotations

import streamlit as st

from .config import FAVORITES_PATH, image_generation_enabled
from .controller import SessionController
from .favorites import FavoritesStore, JsonFileStorage
from .logging_config import get_logger
from .services.image_generation import generate_recipe_image
from .services.recipe_details import fetch_recipe_details
from .services.recipe_suggestions import suggest_recipes
from .services.shopping_list import compute_shopping_list

logger = get_logger(__name__)

CONTROLLER_KEY = "controller"


def build_controller(favorites_path: str = FAVORITES_PATH) -> SessionController:
    """Wire the OpenAI-backed services and file storage into a controller."""
    lookup_image = generate_recipe_image if image_generation_enabled() else None
    logger.info(
        "Creating session controller (favorites: %s, images: %s)",
        favorites_path,
        "on" if lookup_image else "off",
    )
    return SessionController(
        favorites_store=FavoritesStore(JsonFileStorage(favorites_path)),
        suggest_recipes=suggest_recipes,
        fetch_recipe_details=fetch_recipe_details,
        compute_shopping_list=compute_shopping_list,
        lookup_image=lookup_image,
    )


def initialize_session_state() -> SessionController:
    """Ensure Streamlit session state holds this browser session's controller."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = build_controller()
    return st.session_state[CONTROLLER_KEY]


def reset_session_state() -> None:
    """Drop the controller so the next run starts a fresh session."""
    st.session_state.pop(CONTROLLER_KEY, None)


__all__ = [
    "CONTROLLER_KEY",
    "build_controller",
    "initialize_session_state",
    "reset_session_state",
]

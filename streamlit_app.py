"""Streamlit entrypoint for the Fridge Feast recipe finder."""

from __future__ import annotations

import asyncio

import streamlit as st

from fridge_feast.controller import SessionController
from fridge_feast.logging_config import get_logger
from fridge_feast.models import Recipe, View
from fridge_feast.session_state import initialize_session_state, reset_session_state

logger = get_logger(__name__)


def show_pending_error(controller: SessionController) -> None:
    error = controller.pop_error()
    if error:
        st.error(error)


def render_search_form(controller: SessionController) -> None:
    """Ingredient input; shown wherever a new search can start."""
    with st.form("search_form"):
        ingredients = st.text_input(
            "Ingredients",
            value=controller.session.ingredients_text,
            placeholder="e.g., chicken breast, tomatoes, basil",
        )
        submitted = st.form_submit_button("Find Recipes")

    if not submitted:
        return

    logger.info("Search form submitted")
    with st.spinner("Searching for the best recipes..."):
        asyncio.run(controller.submit_search(ingredients))
    st.rerun()


def render_initial(controller: SessionController) -> None:
    st.write("Your recipe suggestions will appear here.")
    if controller.session.favorites and st.button("My Favorites"):
        controller.view_favorites()
        st.rerun()


def render_suggestions(controller: SessionController) -> None:
    st.subheader("Recipe Suggestions")
    col_new, col_fav = st.columns(2)
    if col_new.button("New Search"):
        controller.new_search()
        st.rerun()
    if controller.session.favorites and col_fav.button("My Favorites"):
        controller.view_favorites()
        st.rerun()

    for index, recipe_name in enumerate(controller.session.suggestions):
        if st.button(recipe_name, key=f"suggestion-{index}"):
            logger.info("Recipe selected: %s", recipe_name)
            with st.spinner("Preparing your recipe..."):
                asyncio.run(controller.select_recipe(recipe_name))
            st.rerun()


def render_favorites(controller: SessionController) -> None:
    st.subheader("My Favorites")
    if st.button("Close"):
        controller.close_favorites()
        st.rerun()

    for title in list(controller.session.favorites):
        col_open, col_remove = st.columns([4, 1])
        if col_open.button(title, key=f"favorite-{title}"):
            controller.select_favorite(title)
            st.rerun()
        if col_remove.button("Remove", key=f"remove-{title}"):
            controller.remove_favorite(title)
            st.rerun()


def render_recipe_details(recipe: Recipe) -> None:
    st.header(recipe.title)
    st.write(recipe.description)
    if recipe.image_url:
        st.image(recipe.image_url, width="stretch")

    st.markdown(f"**Prep:** {recipe.prep_time} · **Cook:** {recipe.cook_time}")

    col_ingredients, col_instructions = st.columns([1, 2])
    with col_ingredients:
        st.markdown("### Ingredients")
        st.markdown("\n".join(f"- {item}" for item in recipe.ingredients))
    with col_instructions:
        st.markdown("### Instructions")
        st.markdown(
            "\n".join(f"{i}. {step}" for i, step in enumerate(recipe.instructions, 1))
        )


def render_recipe(controller: SessionController) -> None:
    session = controller.session
    recipe = session.selected_recipe
    if recipe is None:
        return

    back_label = "Back to Suggestions" if session.suggestions else "Back"
    if st.button(back_label):
        controller.back()
        st.rerun()

    render_recipe_details(recipe)

    favorite_label = "Remove from Favorites" if session.is_favorite else "Save to Favorites"
    if st.button(favorite_label):
        controller.toggle_favorite()
        st.rerun()

    st.markdown("---")
    if st.button("What do I need to buy?"):
        with st.spinner("Checking your fridge against the recipe..."):
            asyncio.run(controller.request_shopping_list())
        st.rerun()

    if session.shopping_list is not None:
        st.markdown("### Shopping List")
        if session.shopping_list:
            st.markdown("\n".join(f"- {item}" for item in session.shopping_list))
        else:
            st.success("You already have everything you need!")


def main() -> None:
    """Primary Streamlit entrypoint."""
    controller = initialize_session_state()

    st.title("Fridge Feast")
    st.caption(
        "Enter your ingredients, separated by commas, to discover delicious recipes."
    )
    logger.info("Application started/refreshed in view %s", controller.view.value)

    show_pending_error(controller)

    view = controller.view
    if view in (View.INITIAL, View.SUGGESTIONS_LOADED, View.VIEWING_FAVORITES):
        render_search_form(controller)

    if view == View.INITIAL:
        render_initial(controller)
    elif view == View.SUGGESTIONS_LOADED:
        render_suggestions(controller)
    elif view == View.VIEWING_FAVORITES:
        render_favorites(controller)
    elif view == View.RECIPE_LOADED:
        render_recipe(controller)
    else:
        st.info("Still working on your last request...")


if __name__ == "__main__":
    logger.info("=== Fridge Feast Application Starting ===")
    try:
        main()
    except Exception as exc:  # noqa: BLE001 - top-level Streamlit error handler
        logger.critical("Unhandled exception in main application: %s", exc, exc_info=True)
        reset_session_state()
        st.error(f"A critical error occurred: {exc}")
    logger.info("=== Application execution completed ===")

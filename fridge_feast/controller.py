"""Interaction state machine behind the Fridge Feast UI.

``SessionController`` owns one ``Session`` and moves it between views in
response to user actions and to the completion of the AI services. Each
async operation captures the current request generation before awaiting its
service and only commits the result if that generation is still current, so
a slow, superseded request can never overwrite the state set by a newer one.
Service failures never escape: they become a message on ``session.error`` and
a return to the last stable view.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional, Sequence

from .favorites import FavoritesStore
from .logging_config import get_logger
from .models import (
    Failure,
    Recipe,
    RecipeSuggestions,
    ServiceResult,
    Session,
    ShoppingList,
    Success,
    View,
)

logger = get_logger(__name__)

SuggestRecipes = Callable[[str], Awaitable[RecipeSuggestions]]
FetchRecipeDetails = Callable[[str], Awaitable[Recipe]]
ComputeShoppingList = Callable[[str, Sequence[str]], Awaitable[ShoppingList]]
LookupImage = Callable[[Recipe], Awaitable[str]]

EMPTY_INGREDIENTS_MESSAGE = "Please enter some ingredients."
NO_RECIPES_MESSAGE = (
    "Could not find any recipes with these ingredients. Try different ones!"
)
SUGGESTIONS_FAILED_MESSAGE = (
    "An error occurred while fetching recipes. Please try again."
)
INVALID_RECIPE_MESSAGE = "Invalid recipe selected."
DETAILS_FAILED_MESSAGE = (
    "An error occurred while fetching recipe details. Please try again."
)
SHOPPING_LIST_FAILED_MESSAGE = (
    "An error occurred while creating your shopping list. Please try again."
)
IMAGE_FAILED_MESSAGE = "Could not generate an image for this recipe."

SEARCH_VIEWS = (View.INITIAL, View.SUGGESTIONS_LOADED, View.VIEWING_FAVORITES)
RECIPE_SELECTION_VIEWS = (View.SUGGESTIONS_LOADED, View.LOADING_RECIPE)
FAVORITE_SELECTION_VIEWS = (View.VIEWING_FAVORITES, View.SUGGESTIONS_LOADED)
FAVORITES_ENTRY_VIEWS = (View.INITIAL, View.SUGGESTIONS_LOADED)


class SessionController:
    """Drive a single user session through search, recipe and favorites views."""

    def __init__(
        self,
        favorites_store: FavoritesStore,
        suggest_recipes: SuggestRecipes,
        fetch_recipe_details: FetchRecipeDetails,
        compute_shopping_list: ComputeShoppingList,
        lookup_image: Optional[LookupImage] = None,
    ):
        self._favorites_store = favorites_store
        self._suggest_recipes = suggest_recipes
        self._fetch_recipe_details = fetch_recipe_details
        self._compute_shopping_list = compute_shopping_list
        self._lookup_image = lookup_image

        self._generation = 0
        self._shopping_token = 0

        self.session = Session(favorites=favorites_store.load())
        logger.info(
            "Session started with %s favorite recipes", len(self.session.favorites)
        )

    # ==========================================
    # Helpers
    # ==========================================

    @property
    def view(self) -> View:
        return self.session.view

    def _set_view(self, view: View) -> None:
        if view != self.session.view:
            logger.info("View %s -> %s", self.session.view.value, view.value)
        self.session.view = view

    def _advance(self) -> int:
        """Start a new request generation, dropping interest in older ones."""
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int, label: str) -> bool:
        if generation == self._generation:
            return True
        logger.info(
            "Discarding stale %s result (generation %s, current %s)",
            label,
            generation,
            self._generation,
        )
        return False

    def _reject(self, action: str) -> None:
        logger.warning(
            "Ignoring '%s' while in view %s", action, self.session.view.value
        )

    async def _settle(
        self,
        label: str,
        failure_message: str,
        service: Callable[..., Awaitable[Any]],
        *args: Any,
    ) -> ServiceResult[Any]:
        """Await a collaborator and normalize its outcome."""
        try:
            value = await service(*args)
        except Exception as exc:  # noqa: BLE001 - every service failure is recoverable
            logger.error("%s failed: %s", label, exc, exc_info=True)
            return Failure(failure_message, exc)
        return Success(value)

    def _persist_favorites(self) -> None:
        try:
            saved = self._favorites_store.save(self.session.favorites)
        except Exception as exc:  # noqa: BLE001 - persistence never breaks the session
            logger.error("Favorites store raised: %s", exc, exc_info=True)
            saved = False
        if not saved:
            logger.warning("Favorites kept in memory only for this session")

    def pop_error(self) -> Optional[str]:
        """Return the pending user-facing message and clear it."""
        error, self.session.error = self.session.error, None
        return error

    # ==========================================
    # Search
    # ==========================================

    def set_ingredients(self, text: str) -> None:
        self.session.ingredients_text = text

    async def submit_search(self, text: Optional[str] = None) -> None:
        """Ask for recipe suggestions for the current ingredients."""
        if self.session.view not in SEARCH_VIEWS:
            self._reject("submit search")
            return
        if text is not None:
            self.set_ingredients(text)

        self.session.error = None
        ingredients = self.session.ingredients_text.strip()
        if not ingredients:
            logger.warning("Search submitted without ingredients")
            self.session.error = EMPTY_INGREDIENTS_MESSAGE
            return

        generation = self._advance()
        self.session.suggestions = []
        self.session.selected_recipe = None
        self.session.shopping_list = None
        self._set_view(View.LOADING_SUGGESTIONS)
        logger.info("Searching recipes for: %s", ingredients)

        result = await self._settle(
            "Recipe suggestion",
            SUGGESTIONS_FAILED_MESSAGE,
            self._suggest_recipes,
            ingredients,
        )
        if not self._is_current(generation, "suggestion"):
            return

        if isinstance(result, Failure):
            self.session.error = result.reason
            self._set_view(View.INITIAL)
            return

        names = list(result.value.recipe_names)
        if not names:
            logger.info("No recipes found for: %s", ingredients)
            self.session.error = NO_RECIPES_MESSAGE
            self._set_view(View.INITIAL)
            return

        self.session.suggestions = names
        self._set_view(View.SUGGESTIONS_LOADED)

    def new_search(self) -> None:
        """Forget everything except favorites and return to the start."""
        self._advance()
        self.session.ingredients_text = ""
        self.session.suggestions = []
        self.session.selected_recipe = None
        self.session.shopping_list = None
        self.session.error = None
        self._set_view(View.INITIAL)

    # ==========================================
    # Recipe selection
    # ==========================================

    async def select_recipe(self, recipe_name: str) -> None:
        """Fetch the full recipe for one of the suggestions."""
        if self.session.view not in RECIPE_SELECTION_VIEWS:
            self._reject("select recipe")
            return

        self.session.error = None
        recipe_name = (recipe_name or "").strip()
        if not recipe_name:
            logger.warning("Recipe selected without a name")
            self.session.error = INVALID_RECIPE_MESSAGE
            return

        generation = self._advance()
        self.session.selected_recipe = None
        self.session.shopping_list = None
        self._set_view(View.LOADING_RECIPE)
        logger.info("Loading recipe '%s'", recipe_name)

        result = await self._settle(
            "Recipe details",
            DETAILS_FAILED_MESSAGE,
            self._fetch_recipe_details,
            recipe_name,
        )
        if not self._is_current(generation, "recipe details"):
            return

        if isinstance(result, Failure):
            self.session.error = result.reason
            self._set_view(View.SUGGESTIONS_LOADED)
            return

        recipe = result.value
        self.session.selected_recipe = recipe
        self.session.shopping_list = None
        self._set_view(View.RECIPE_LOADED)

        if self._lookup_image is not None and recipe.image_url is None:
            await self._attach_image(generation, recipe)

    def select_favorite(self, title: str) -> None:
        """Open a stored favorite as-is, without calling any service."""
        if self.session.view not in FAVORITE_SELECTION_VIEWS:
            self._reject("select favorite")
            return

        self.session.error = None
        recipe = self.session.favorites.get(title)
        if recipe is None:
            logger.warning("Favorite '%s' not found", title)
            self.session.error = INVALID_RECIPE_MESSAGE
            return

        self._advance()
        self._set_view(View.LOADING_RECIPE)
        self.session.selected_recipe = recipe
        self.session.shopping_list = None
        self._set_view(View.RECIPE_LOADED)

    async def _attach_image(self, generation: int, recipe: Recipe) -> None:
        result = await self._settle(
            "Image lookup", IMAGE_FAILED_MESSAGE, self._lookup_image, recipe
        )
        if not self._is_current(generation, "image"):
            return
        if self.session.selected_recipe is not recipe:
            logger.info("Recipe changed before its image arrived")
            return
        if isinstance(result, Failure):
            logger.warning("Showing '%s' without an image", recipe.title)
            return

        illustrated = replace(recipe, image_url=result.value)
        self.session.selected_recipe = illustrated
        if self.session.favorites.get(recipe.title) is recipe:
            self.session.favorites[recipe.title] = illustrated
            self._persist_favorites()

    def back(self) -> None:
        """Leave the recipe for the suggestions, the favorites or the start."""
        if self.session.view != View.RECIPE_LOADED:
            self._reject("back")
            return

        self._advance()
        self.session.error = None
        self.session.selected_recipe = None
        self.session.shopping_list = None
        if self.session.suggestions:
            self._set_view(View.SUGGESTIONS_LOADED)
        elif self.session.favorites:
            self._set_view(View.VIEWING_FAVORITES)
        else:
            self._set_view(View.INITIAL)

    # ==========================================
    # Favorites
    # ==========================================

    def toggle_favorite(self) -> bool:
        """Add or remove the selected recipe. Returns the new membership."""
        recipe = self.session.selected_recipe
        if self.session.view != View.RECIPE_LOADED or recipe is None:
            self._reject("toggle favorite")
            return False

        favorites = self.session.favorites
        if recipe.title in favorites:
            del favorites[recipe.title]
            logger.info("Removed '%s' from favorites", recipe.title)
        else:
            favorites[recipe.title] = recipe
            logger.info("Added '%s' to favorites", recipe.title)

        self._persist_favorites()
        return recipe.title in favorites

    def remove_favorite(self, title: str) -> None:
        """Drop a favorite from the favorites list."""
        if title not in self.session.favorites:
            logger.warning("Cannot remove unknown favorite '%s'", title)
            return

        del self.session.favorites[title]
        logger.info("Removed '%s' from favorites", title)
        self._persist_favorites()

        if self.session.view == View.VIEWING_FAVORITES and not self.session.favorites:
            self.close_favorites()

    def view_favorites(self) -> None:
        if self.session.view not in FAVORITES_ENTRY_VIEWS:
            self._reject("view favorites")
            return
        if not self.session.favorites:
            logger.warning("No favorites to show")
            return

        self._advance()
        self.session.error = None
        self._set_view(View.VIEWING_FAVORITES)

    def close_favorites(self) -> None:
        """Return from the favorites list to the suggestions or the start."""
        if self.session.view != View.VIEWING_FAVORITES:
            self._reject("close favorites")
            return

        self._advance()
        if self.session.suggestions:
            self._set_view(View.SUGGESTIONS_LOADED)
        else:
            self._set_view(View.INITIAL)

    # ==========================================
    # Shopping list
    # ==========================================

    async def request_shopping_list(self) -> None:
        """Work out which of the recipe's ingredients still need buying."""
        recipe = self.session.selected_recipe
        if self.session.view != View.RECIPE_LOADED or recipe is None:
            self._reject("request shopping list")
            return

        generation = self._generation
        self._shopping_token += 1
        token = self._shopping_token
        self.session.error = None
        self.session.shopping_list = None
        logger.info("Requesting shopping list for '%s'", recipe.title)

        result = await self._settle(
            "Shopping list",
            SHOPPING_LIST_FAILED_MESSAGE,
            self._compute_shopping_list,
            self.session.ingredients_text,
            list(recipe.ingredients),
        )
        if not self._is_current(generation, "shopping list"):
            return
        if token != self._shopping_token:
            logger.info("Discarding superseded shopping list for '%s'", recipe.title)
            return

        if isinstance(result, Failure):
            self.session.error = result.reason
            return

        self.session.shopping_list = list(result.value.missing)
        logger.info(
            "Shopping list for '%s' has %s items",
            recipe.title,
            len(self.session.shopping_list),
        )


__all__ = [
    "DETAILS_FAILED_MESSAGE",
    "EMPTY_INGREDIENTS_MESSAGE",
    "INVALID_RECIPE_MESSAGE",
    "NO_RECIPES_MESSAGE",
    "SHOPPING_LIST_FAILED_MESSAGE",
    "SUGGESTIONS_FAILED_MESSAGE",
    "SessionController",
]

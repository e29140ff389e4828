"""Dataclasses and type helpers used across the project."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, Field

T = TypeVar("T")


class View(str, Enum):
    """Which screen the session is showing."""

    INITIAL = "initial"
    LOADING_SUGGESTIONS = "loadingSuggestions"
    SUGGESTIONS_LOADED = "suggestionsLoaded"
    LOADING_RECIPE = "loadingRecipe"
    RECIPE_LOADED = "recipeLoaded"
    VIEWING_FAVORITES = "viewingFavorites"


@dataclass(frozen=True)
class Recipe:
    """A fully resolved recipe.

    Instances are never mutated; attaching an image produces a new record via
    ``dataclasses.replace``.
    """

    title: str
    description: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    prep_time: str
    cook_time: str
    image_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase layout kept in the favorites store."""
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "prepTime": self.prep_time,
            "cookTime": self.cook_time,
        }
        if self.image_url is not None:
            data["imageUrl"] = self.image_url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Recipe":
        """Build a recipe from its stored form, rejecting anything malformed."""
        if not isinstance(data, dict):
            raise ValueError(f"Expected a recipe object, got {type(data).__name__}")
        schema = RecipeDetailsSchema.model_validate(data)
        return schema.to_recipe()


class RecipeSuggestions(BaseModel):
    """Suggestion service output."""

    recipe_names: list[str] = Field(default_factory=list, alias="recipeNames")

    model_config = {"populate_by_name": True}


class RecipeDetailsSchema(BaseModel):
    """Recipe-detail service output, as returned by the model."""

    title: str
    description: str
    ingredients: list[str]
    instructions: list[str]
    prep_time: str = Field(alias="prepTime")
    cook_time: str = Field(alias="cookTime")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")

    model_config = {"populate_by_name": True}

    def to_recipe(self) -> Recipe:
        return Recipe(
            title=self.title,
            description=self.description,
            ingredients=tuple(self.ingredients),
            instructions=tuple(self.instructions),
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            image_url=self.image_url,
        )


class ShoppingList(BaseModel):
    """Shopping-list service output."""

    missing: list[str] = Field(default_factory=list, alias="shoppingList")

    model_config = {"populate_by_name": True}


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    reason: str
    exception: Optional[BaseException] = None


ServiceResult = Union[Success[T], Failure]


@dataclass
class Session:
    """Mutable view state owned by a single ``SessionController``."""

    view: View = View.INITIAL
    ingredients_text: str = ""
    suggestions: list[str] = field(default_factory=list)
    selected_recipe: Optional[Recipe] = None
    favorites: dict[str, Recipe] = field(default_factory=dict)
    shopping_list: Optional[list[str]] = None
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.view in (View.LOADING_SUGGESTIONS, View.LOADING_RECIPE)

    @property
    def is_favorite(self) -> bool:
        return (
            self.selected_recipe is not None
            and self.selected_recipe.title in self.favorites
        )


__all__ = [
    "Failure",
    "Recipe",
    "RecipeDetailsSchema",
    "RecipeSuggestions",
    "ServiceResult",
    "Session",
    "ShoppingList",
    "Success",
    "View",
]

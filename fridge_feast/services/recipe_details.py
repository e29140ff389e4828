"""Full recipe generation for a selected recipe name."""
from __future__ import annotations

from ..logging_config import get_logger
from ..models import Recipe, RecipeDetailsSchema
from ..prompts import RECIPE_DETAILS_PROMPT_TEMPLATE
from .completion import call_openai_for_json

logger = get_logger(__name__)


async def fetch_recipe_details(recipe_name: str) -> Recipe:
    """Generate a complete recipe; the title is always the requested name."""
    logger.info("Generating recipe details for '%s'", recipe_name)

    prompt = RECIPE_DETAILS_PROMPT_TEMPLATE.format(recipe_name=recipe_name)
    details = await call_openai_for_json(
        "recipe_details", prompt, RecipeDetailsSchema, temperature=0.2
    )

    recipe = details.model_copy(update={"title": recipe_name}).to_recipe()
    logger.info(
        "Recipe '%s' has %s ingredients and %s steps",
        recipe.title,
        len(recipe.ingredients),
        len(recipe.instructions),
    )
    return recipe


__all__ = ["fetch_recipe_details"]

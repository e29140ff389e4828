"""Recipe name suggestions for a set of on-hand ingredients."""
from __future__ import annotations

from ..logging_config import get_logger
from ..models import RecipeSuggestions
from ..prompts import SUGGESTIONS_PROMPT_TEMPLATE
from ..utils import split_ingredients
from .completion import call_openai_for_json

logger = get_logger(__name__)


async def suggest_recipes(ingredients: str) -> RecipeSuggestions:
    """Ask OpenAI for recipe names that can be made from ``ingredients``."""
    items = split_ingredients(ingredients)
    logger.info("Requesting recipe suggestions for %s ingredients", len(items))

    prompt = SUGGESTIONS_PROMPT_TEMPLATE.format(ingredients=", ".join(items))
    suggestions = await call_openai_for_json(
        "recipe_suggestions", prompt, RecipeSuggestions
    )

    names: list[str] = []
    seen: set[str] = set()
    for name in suggestions.recipe_names:
        name = name.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        names.append(name)

    logger.info("Received %s recipe suggestions", len(names))
    return RecipeSuggestions(recipe_names=names)


__all__ = ["suggest_recipes"]

"""Shopping list of recipe ingredients the user does not have yet."""
from __future__ import annotations

from typing import Sequence

from ..logging_config import get_logger
from ..models import ShoppingList
from ..prompts import SHOPPING_LIST_PROMPT_TEMPLATE
from ..utils import format_bullets, split_ingredients
from .completion import call_openai_for_json

logger = get_logger(__name__)


async def compute_shopping_list(
    available_ingredients: str, required_ingredients: Sequence[str]
) -> ShoppingList:
    """Return the required ingredients that are missing from the available ones.

    Matching is left to the model so that "tomato" and "tomatoes" count as the
    same ingredient. The model may shorten an item ("garlic" for "3 cloves
    garlic, minced"), so its wording is kept; only blanks and repeats are removed.
    """
    required = list(required_ingredients)
    logger.info(
        "Computing shopping list for %s required ingredients", len(required)
    )
    if not required:
        return ShoppingList(missing=[])

    prompt = SHOPPING_LIST_PROMPT_TEMPLATE.format(
        available_ingredients=", ".join(split_ingredients(available_ingredients)),
        required_ingredients=format_bullets(required),
    )
    result = await call_openai_for_json("shopping_list", prompt, ShoppingList)

    missing: list[str] = []
    seen: set[str] = set()
    for item in result.missing:
        key = item.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        missing.append(item.strip())

    logger.info("Shopping list has %s missing ingredients", len(missing))
    return ShoppingList(missing=missing)


__all__ = ["compute_shopping_list"]

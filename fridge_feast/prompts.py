"""Prompt templates shared across the application."""
from __future__ import annotations

JSON_ONLY_INSTRUCTIONS = (
    "Respond only with a single JSON object matching the requested shape. "
    "Do not wrap it in code fences and do not add any commentary."
)

SUGGESTIONS_PROMPT_TEMPLATE = """\
You are a recipe expert. Given the following ingredients, suggest some recipes that can be made with them.

Return the recipe names in this JSON shape:
{{"recipeNames": ["Recipe name", "Another recipe name"]}}

If nothing sensible can be made, return an empty list.

Ingredients: {ingredients}
"""

RECIPE_DETAILS_PROMPT_TEMPLATE = """\
You are a world-class chef. Generate a recipe for "{recipe_name}".

You must include a title, a short appetizing description, a list of all ingredients, step-by-step cooking instructions, prep time, and cook time. Ensure instructions are clear and easy to follow.

Return it in this JSON shape:
{{
  "title": "Recipe title",
  "description": "One or two appetizing sentences",
  "ingredients": ["ingredient with amount", "..."],
  "instructions": ["First step", "..."],
  "prepTime": "e.g. 15 minutes",
  "cookTime": "e.g. 30 minutes"
}}
"""

SHOPPING_LIST_PROMPT_TEMPLATE = """\
You are a helpful kitchen assistant. Your task is to determine which ingredients a user needs to buy for a recipe.

You will be given a list of ingredients the user has on hand and a list of ingredients required for the recipe.

Compare the two lists and identify which of the "required ingredients" are missing from the "available ingredients". Be smart about matching - "tomato" and "tomatoes" are the same thing. Copy missing items exactly as they appear in the required list.

Return the missing ingredients in this JSON shape:
{{"shoppingList": ["missing ingredient", "..."]}}

If all ingredients are available, return an empty list.

Available Ingredients: {available_ingredients}
Required Ingredients:
{required_ingredients}
"""

IMAGE_PROMPT_TEMPLATE = (
    "A cartoon sketch of the food, with bold lines, vibrant colors, and a playful, whimsical feel. "
    "Never have text in the image. It should depict {title} which is {description}."
)


__all__ = [
    "IMAGE_PROMPT_TEMPLATE",
    "JSON_ONLY_INSTRUCTIONS",
    "RECIPE_DETAILS_PROMPT_TEMPLATE",
    "SHOPPING_LIST_PROMPT_TEMPLATE",
    "SUGGESTIONS_PROMPT_TEMPLATE",
]

"""Utility helpers shared between services."""
from __future__ import annotations

import re


def strip_markdown_fences(text: str) -> str:
    """Remove optional markdown code fences from the response text."""
    text = text.strip()
    text = re.sub(r'^```(?:json|markdown)?\s*\n', "", text)
    text = re.sub(r'\n```$', "", text)
    return text.strip()


def split_ingredients(ingredients_text: str) -> list[str]:
    """Split the comma-separated ingredient input into clean entries."""
    return [part.strip() for part in ingredients_text.split(",") if part.strip()]


def format_bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


__all__ = ["format_bullets", "split_ingredients", "strip_markdown_fences"]

"""Configuration helpers for environment-dependent services."""
from __future__ import annotations

import os

from openai import AsyncOpenAI  # type: ignore

from .logging_config import get_logger

logger = get_logger(__name__)

FAVORITES_PATH = os.getenv("FAVORITES_PATH", "data/favorites.json")

OPENAI_MODELS = {
    "recipe_suggestions": os.getenv(
        "OPENAI_MODEL_RECIPE_SUGGESTIONS", "gpt-4.1-mini"
    ),
    "recipe_details": os.getenv("OPENAI_MODEL_RECIPE_DETAILS", "gpt-4.1-mini"),
    "shopping_list": os.getenv("OPENAI_MODEL_SHOPPING_LIST", "gpt-4.1-mini"),
    "image_generation": os.getenv(
        "OPENAI_MODEL_IMAGE_GENERATION", "gpt-image-1"
    ),
}

_TRUTHY = {"1", "true", "yes", "on"}


def get_openai_model(service: str) -> str:
    """Return configured OpenAI model name for a given service."""
    try:
        return OPENAI_MODELS[service]
    except KeyError as exc:
        message = f"OpenAI model not configured for '{service}'."
        logger.error(message)
        raise RuntimeError(message) from exc


def image_generation_enabled() -> bool:
    """Whether fetched recipes should be illustrated with a generated image."""
    return os.getenv("GENERATE_RECIPE_IMAGES", "").strip().lower() in _TRUTHY


# AsyncOpenAI clients hold an httpx pool bound to the running event loop, and
# the UI runs every action in a fresh loop, so clients are never cached and
# callers open them with `async with` to close the pool before the loop ends.
def get_openai_client() -> AsyncOpenAI:
    """Instantiate an async OpenAI client with environment credentials."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        message = "OPENAI_API_KEY environment variable is not set."
        logger.error(message)
        raise RuntimeError(message)

    logger.debug("Creating OpenAI client")
    return AsyncOpenAI(api_key=api_key)


def get_openai_image_client() -> AsyncOpenAI:
    """Instantiate an async OpenAI client for the Images API."""
    api_key = os.getenv("OPENAI_API_KEY_IMAGE") or os.getenv("OPENAI_API_KEY")
    if not api_key:
        message = (
            "Neither OPENAI_API_KEY_IMAGE nor OPENAI_API_KEY environment variable is set."
        )
        logger.error(message)
        raise RuntimeError(message)

    logger.debug("Creating OpenAI image client")
    return AsyncOpenAI(api_key=api_key)


__all__ = [
    "FAVORITES_PATH",
    "OPENAI_MODELS",
    "get_openai_client",
    "get_openai_image_client",
    "get_openai_model",
    "image_generation_enabled",
]

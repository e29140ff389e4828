"""Shared call that turns a prompt into a validated JSON response."""
from __future__ import annotations

import time
from typing import Optional, TypeVar

from pydantic import BaseModel

from ..config import get_openai_client, get_openai_model
from ..logging_config import get_logger
from ..prompts import JSON_ONLY_INSTRUCTIONS
from ..utils import strip_markdown_fences

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def call_openai_for_json(
    service: str,
    prompt: str,
    schema: type[ModelT],
    temperature: Optional[float] = None,
) -> ModelT:
    """Send a prompt to OpenAI and validate the JSON reply against ``schema``."""
    start_time = time.time()
    logger.info(
        "Sending %s prompt to OpenAI - Length: %s characters", service, len(prompt)
    )

    request = {
        "model": get_openai_model(service),
        "input": prompt,
        "instructions": JSON_ONLY_INSTRUCTIONS,
    }
    if temperature is not None:
        request["temperature"] = temperature
    async with get_openai_client() as client:
        response = await client.responses.create(**request)

    elapsed_time = time.time() - start_time
    logger.info(
        "Received %s response from OpenAI in %.2f seconds", service, elapsed_time
    )

    cleaned_response = strip_markdown_fences(response.output_text)
    logger.debug("Response after cleaning: First 100 chars: %s...", cleaned_response[:100])

    return schema.model_validate_json(cleaned_response)


__all__ = ["call_openai_for_json"]

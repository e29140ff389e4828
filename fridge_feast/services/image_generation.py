"""Utilities for generating and compressing recipe illustration images."""
from __future__ import annotations

import asyncio
import base64
import io
import time

from PIL import Image

from ..config import get_openai_image_client, get_openai_model
from ..logging_config import get_logger
from ..models import Recipe
from ..prompts import IMAGE_PROMPT_TEMPLATE

logger = get_logger(__name__)


def compress_image(image_bytes: bytes, quality: int = 75) -> bytes:
    """Re-encode an image as an optimized RGB JPEG."""
    image = Image.open(io.BytesIO(image_bytes))
    if image.mode in ("RGBA", "P"):
        logger.debug("Converting image to RGB mode")
        image = image.convert("RGB")

    compressed_io = io.BytesIO()
    image.save(compressed_io, format="JPEG", quality=quality, optimize=True)

    compressed_image_bytes = compressed_io.getvalue()
    original_size = len(image_bytes)
    compressed_size = len(compressed_image_bytes)
    logger.info(
        "Image compressed: %.1fKB -> %.1fKB (%.1f%%)",
        original_size / 1024,
        compressed_size / 1024,
        (compressed_size / original_size) * 100,
    )
    return compressed_image_bytes


async def generate_recipe_image(recipe: Recipe) -> str:
    """Generate an illustration for the recipe and return it as a data URI."""
    prompt = IMAGE_PROMPT_TEMPLATE.format(
        title=recipe.title,
        description=recipe.description or "a delicious dish",
    )

    logger.info("Generating image with prompt: '%s'", prompt)
    start_time = time.time()

    async with get_openai_image_client() as client:
        response = await client.images.generate(
            model=get_openai_model("image_generation"),
            prompt=prompt,
            size="1024x1024",
            quality="medium",
            output_format="jpeg",
            n=1,
        )

    elapsed_time = time.time() - start_time
    logger.info("Image generation completed in %.2f seconds", elapsed_time)

    image_bytes = base64.b64decode(response.data[0].b64_json)
    compressed = await asyncio.to_thread(compress_image, image_bytes)
    return "data:image/jpeg;base64," + base64.b64encode(compressed).decode("ascii")


__all__ = ["compress_image", "generate_recipe_image"]

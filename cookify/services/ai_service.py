"""
Claude AI integration for extracting bilingual recipes from photos.

The API forwards one uploaded photo per request to a vision-capable model and
validates the JSON it returns against RecipeAnalysisSchema, retrying with the
validation error in the conversation when the model's output does not fit.
"""

import asyncio
import base64
import json
import logging
import random
import re
from functools import wraps

import anthropic
import httpx
from anthropic import AsyncAnthropic
from pydantic import ValidationError

from cookify.config import settings
from cookify.services.ai_schemas import RecipeAnalysisSchema
from cookify.services.image_service import PreparedImage
from cookify.services.prompts import (
    RECIPE_ANALYSIS_SYSTEM_PROMPT,
    RECIPE_ANALYSIS_USER_PROMPT,
)


logger = logging.getLogger(__name__)

# The assistant turn is prefilled so the model starts inside a JSON object
JSON_PREFILL = "{"

_FENCE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
_TRAILING_COMMA = re.compile(r",\s*([}\]])")


def _clean_json_text(text: str) -> str:
    """Unwrap a markdown code fence and drop trailing commas before } or ]."""
    fenced = _FENCE.search(text)
    if fenced:
        text = fenced.group(1)
    return _TRAILING_COMMA.sub(r"\1", text.strip())


def retry_on_connection_error(max_attempts=3, base_delay=1.0):
    """
    Retry an async API call on ``anthropic.APIConnectionError``.

    Waits ``base_delay * 2**attempt`` seconds (with 10% jitter) between
    attempts and raises ServiceUnavailableError once they are used up.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except anthropic.APIConnectionError as e:
                    if attempt == max_attempts:
                        logger.error("Claude unreachable after %d attempts", attempt)
                        raise ServiceUnavailableError(
                            "AI service temporarily unavailable after retries"
                        ) from e
                    delay = base_delay * 2 ** (attempt - 1)
                    delay *= random.uniform(0.9, 1.1)
                    logger.warning(
                        "Connection error on attempt %d/%d, retrying in %.1fs",
                        attempt,
                        max_attempts,
                        delay,
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator


class ClaudeService:
    """Claude API integration for recipe photo extraction."""

    def __init__(self):
        timeout = httpx.Timeout(
            timeout=settings.anthropic_timeout,
            connect=settings.anthropic_connect_timeout,
        )
        self.client = AsyncAnthropic(
            api_key=settings.anthropic_api_key, timeout=timeout
        )
        self.vision_model = settings.vision_model
        self.max_tokens = settings.vision_max_tokens

    async def _request_recipe(
        self, messages: list[dict], max_retries: int = 2
    ) -> tuple[dict, str]:
        """
        Ask Claude for a recipe and validate it against RecipeAnalysisSchema.

        A reply that is not valid JSON for the schema is appended to
        ``messages`` together with the error, and the model is asked again.

        Returns:
            (validated recipe dict, raw reply text)

        Raises:
            ValueError: If no attempt produced a valid recipe
        """
        attempts = 1 + max_retries
        for attempt in range(1, attempts + 1):
            response = await self.client.messages.create(
                model=self.vision_model,
                max_tokens=self.max_tokens,
                system=RECIPE_ANALYSIS_SYSTEM_PROMPT,
                messages=[*messages, {"role": "assistant", "content": JSON_PREFILL}],
            )
            raw_text = "".join(
                block.text for block in response.content if hasattr(block, "text")
            ).strip()

            try:
                if not raw_text:
                    raise ValueError("reply contained no text")
                recipe = RecipeAnalysisSchema.model_validate(
                    json.loads(_clean_json_text(JSON_PREFILL + raw_text))
                )
                return recipe.model_dump(), raw_text
            except (ValueError, ValidationError) as e:
                # json.JSONDecodeError is a ValueError
                error = str(e)
                logger.warning(
                    "Recipe reply rejected (attempt %d/%d): %s", attempt, attempts, error
                )

            if attempt < attempts:
                messages.append(
                    {"role": "assistant", "content": JSON_PREFILL + raw_text}
                )
                messages.append(
                    {
                        "role": "user",
                        "content": (
                            f"Your response had a schema error:\n{error}\n\n"
                            "Please fix and return valid JSON matching the required schema."
                        ),
                    }
                )

        raise ValueError(
            f"AI response failed schema validation after {attempts} attempts: {error}"
        )

    @retry_on_connection_error()
    async def analyze_recipe_image(self, image: PreparedImage) -> dict:
        """
        Extract a bilingual recipe from a photo.

        Args:
            image: Photo already validated and re-encoded by ImageService

        Returns:
            {
                "recipe": {"name": {"english": ..., "vietnamese": ...}, ...},
                "raw_response": "...",
                "model": "claude-sonnet-4-5-20250929"
            }

        Raises:
            ServiceUnavailableError: AI service temporarily down
            RateLimitError: Too many requests
            ValueError: Invalid response or request error
        """
        messages = [
            {
                "role": "user",
                "content": [
                    {
                        "type": "image",
                        "source": {
                            "type": "base64",
                            "media_type": image.media_type,
                            "data": base64.standard_b64encode(image.data).decode(
                                "utf-8"
                            ),
                        },
                    },
                    {"type": "text", "text": RECIPE_ANALYSIS_USER_PROMPT},
                ],
            }
        ]

        try:
            validated, raw_text = await self._request_recipe(messages)
        except anthropic.RateLimitError as e:
            raise RateLimitError(
                "Too many requests, please try again in 1 minute"
            ) from e
        except anthropic.APIStatusError as e:
            if e.status_code >= 500:
                raise ServiceUnavailableError("AI service error") from e
            raise ValueError(f"Request error: {e.message}") from e

        logger.info(
            "Extracted recipe '%s' from photo (%d ingredients, %d steps)",
            validated["name"]["english"],
            len(validated["ingredients"]),
            len(validated["instructions"]),
        )
        return {
            "recipe": validated,
            "raw_response": raw_text,
            "model": self.vision_model,
        }


class ServiceUnavailableError(Exception):
    """Claude could not be reached or answered with a server error."""


class RateLimitError(Exception):
    """Claude rejected the request for exceeding the rate limit."""

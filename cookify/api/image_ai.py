"""API endpoint for extracting a recipe from a photo."""

import logging
from typing import Optional

from fastapi import APIRouter, File, HTTPException, UploadFile

from cookify.services.ai_schemas import RecipeAnalysisSchema
from cookify.services.ai_service import (
    ClaudeService,
    RateLimitError,
    ServiceUnavailableError,
)
from cookify.services.image_service import image_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/imageai", tags=["imageai"])

# Initialize AI service
claude_service = ClaudeService()


async def analyse_upload(file: Optional[UploadFile]) -> dict:
    """
    Validate an uploaded photo and run it through the vision model.

    Shared by the JSON endpoint and the portal's prefill endpoint.

    Returns:
        The extracted recipe as a snake_case dict

    Raises:
        HTTPException: 400 for bad uploads, 429/502/503 for AI failures
    """
    try:
        contents = await image_service.read_upload(file)
        prepared = image_service.prepare_for_analysis(contents)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = await claude_service.analyze_recipe_image(prepared)
    except ServiceUnavailableError as e:
        logger.warning("Recipe analysis unavailable: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    except RateLimitError as e:
        raise HTTPException(status_code=429, detail=str(e))
    except ValueError as e:
        logger.error("Recipe analysis failed: %s", e)
        raise HTTPException(
            status_code=502, detail=f"Could not extract a recipe from the image: {e}"
        )

    return result["recipe"]


@router.post("/analyse", response_model=RecipeAnalysisSchema)
async def analyse_recipe_image(file: Optional[UploadFile] = File(None)):
    """
    Extract a bilingual recipe from a photo.

    Returns: name, description, prepTime, cookTime, imageFileName, ingredients
    and instructions in the same shape the recipe endpoints accept.
    """
    return await analyse_upload(file)

"""
Pydantic models for validating structured JSON responses from Claude AI.

Used by ClaudeService._request_recipe() in ai_service.py for validation + retry.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cookify.models.localized_text import LocalizedText


# --- Recipe Extraction (analyze_recipe_image) ---


class RecipeAnalysisSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: LocalizedText
    description: LocalizedText = LocalizedText()
    prep_time: str = ""
    cook_time: str = ""
    image_file_name: str = ""
    ingredients: list[LocalizedText]
    instructions: list[LocalizedText]

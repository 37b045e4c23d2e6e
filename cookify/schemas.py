"""
Request/response models for the HTTP API.

Wire keys are lowerCamelCase; every LocalizedText travels as
{"english": ..., "vietnamese": ...}. Content rules (English required, length
bounds, non-empty lists) are enforced here, at the submission boundary.
"""

from typing import Annotated, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cookify.config import settings
from cookify.models.localized_text import LocalizedText


def _check_localized(value: LocalizedText) -> LocalizedText:
    limit = settings.localized_text_max_length
    if not value.english.strip():
        raise ValueError("English text is required")
    if len(value.english) > limit:
        raise ValueError(f"English text cannot exceed {limit} characters")
    if len(value.vietnamese) > limit:
        raise ValueError(f"Vietnamese text cannot exceed {limit} characters")
    return value


ValidLocalizedText = Annotated[LocalizedText, AfterValidator(_check_localized)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# =============================================================================
# Categories
# =============================================================================


class CategoryWrite(CamelModel):
    id: Optional[UUID] = None  # Must match the path on update
    name: ValidLocalizedText
    image_file_name: Optional[str] = Field(default=None, max_length=255)


class CategoryRead(CamelModel):
    id: UUID
    name: LocalizedText
    image_file_name: Optional[str] = None


# =============================================================================
# Recipes
# =============================================================================


class RecipeWrite(CamelModel):
    id: Optional[UUID] = None  # Must match the path on update
    name: ValidLocalizedText
    description: ValidLocalizedText
    prep_time: str = Field(default="", max_length=50)
    cook_time: str = Field(default="", max_length=50)
    image_file_name: Optional[str] = Field(default=None, max_length=255)
    category_id: UUID
    ingredients: list[ValidLocalizedText] = Field(min_length=1)
    instructions: list[ValidLocalizedText] = Field(min_length=1)


class RecipeRead(CamelModel):
    id: UUID
    name: LocalizedText
    description: LocalizedText
    prep_time: str = ""
    cook_time: str = ""
    image_file_name: Optional[str] = None
    category_id: UUID
    category: Optional[CategoryRead] = None
    ingredients: list[LocalizedText] = []
    instructions: list[LocalizedText] = []


class LocalizedRecipeRead(CamelModel):
    """A recipe with every localized field resolved for one language."""

    id: UUID
    language: str
    name: str
    description: str
    prep_time: str = ""
    cook_time: str = ""
    image_file_name: Optional[str] = None
    category_id: UUID
    category_name: str = ""
    ingredients: list[str] = []
    instructions: list[str] = []

    @classmethod
    def from_recipe(cls, recipe, language: Optional[str]) -> "LocalizedRecipeRead":
        language = language or settings.default_language
        return cls(
            id=recipe.id,
            language=language,
            name=recipe.name.get_localized(language),
            description=recipe.description.get_localized(language),
            prep_time=recipe.prep_time or "",
            cook_time=recipe.cook_time or "",
            image_file_name=recipe.image_file_name,
            category_id=recipe.category_id,
            category_name=(
                recipe.category.name.get_localized(language) if recipe.category else ""
            ),
            ingredients=[item.get_localized(language) for item in recipe.ingredients],
            instructions=[
                item.get_localized(language) for item in recipe.instructions
            ],
        )


# =============================================================================
# Portal form (flat, one text area per language per list)
# =============================================================================


class RecipeForm(CamelModel):
    id: Optional[UUID] = None
    name_english: str = ""
    name_vietnamese: str = ""
    description_english: str = ""
    description_vietnamese: str = ""
    prep_time: str = ""
    cook_time: str = ""
    image_file_name: Optional[str] = None
    category_id: Optional[UUID] = None
    ingredients_text_english: str = ""
    ingredients_text_vietnamese: str = ""
    instructions_text_english: str = ""
    instructions_text_vietnamese: str = ""


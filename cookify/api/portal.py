"""
Form-based editing endpoints for the recipe portal.

The portal edits each localized list as two text areas, one line per entry
and one text area per language. These endpoints convert between that flat
shape and the stored lists.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError
from sqlalchemy.orm import Session

from cookify.api.image_ai import analyse_upload
from cookify.database import get_db
from cookify.models.localized_text import LocalizedText
from cookify.schemas import RecipeForm, RecipeRead, RecipeWrite
from cookify.services.ai_schemas import RecipeAnalysisSchema
from cookify.services.category_service import category_service
from cookify.services.localized_list_codec import (
    from_flat_text,
    to_flat_text,
    update_english_column,
    update_vietnamese_column,
)
from cookify.services.recipe_service import UnknownCategoryError, recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/portal/recipes", tags=["portal"])


def _build_form(recipe_id, name, description, ingredients, instructions, **fields):
    ingredients_en, ingredients_vi = to_flat_text(ingredients)
    instructions_en, instructions_vi = to_flat_text(instructions)
    return RecipeForm(
        id=recipe_id,
        name_english=name.english,
        name_vietnamese=name.vietnamese,
        description_english=description.english,
        description_vietnamese=description.vietnamese,
        ingredients_text_english=ingredients_en,
        ingredients_text_vietnamese=ingredients_vi,
        instructions_text_english=instructions_en,
        instructions_text_vietnamese=instructions_vi,
        **fields,
    )


def _validated(**values) -> RecipeWrite:
    """Apply the API's content rules to a submitted form, 422 on failure."""
    try:
        return RecipeWrite(**values)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(
                include_url=False, include_context=False, include_input=False
            ),
        )


@router.get("/{recipe_id}/form", response_model=RecipeForm)
async def get_recipe_form(recipe_id: UUID, db: Session = Depends(get_db)):
    """Flatten a stored recipe for the editor."""
    recipe = recipe_service.get_recipe(db, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    return _build_form(
        recipe.id,
        recipe.name,
        recipe.description,
        recipe.ingredients,
        recipe.instructions,
        prep_time=recipe.prep_time or "",
        cook_time=recipe.cook_time or "",
        image_file_name=recipe.image_file_name,
        category_id=recipe.category_id,
    )


@router.post("", response_model=RecipeRead, status_code=201)
async def create_recipe_from_form(
    category_id: UUID = Form(...),
    name_english: str = Form(""),
    name_vietnamese: str = Form(""),
    description_english: str = Form(""),
    description_vietnamese: str = Form(""),
    prep_time: str = Form(""),
    cook_time: str = Form(""),
    image_file_name: Optional[str] = Form(None),
    ingredients_text_english: str = Form(""),
    ingredients_text_vietnamese: str = Form(""),
    instructions_text_english: str = Form(""),
    instructions_text_vietnamese: str = Form(""),
    db: Session = Depends(get_db),
):
    """Create a recipe from the editor's flat fields."""
    payload = _validated(
        name=LocalizedText(
            english=name_english.strip(), vietnamese=name_vietnamese.strip()
        ),
        description=LocalizedText(
            english=description_english.strip(),
            vietnamese=description_vietnamese.strip(),
        ),
        prep_time=prep_time.strip(),
        cook_time=cook_time.strip(),
        image_file_name=image_file_name or None,
        category_id=category_id,
        ingredients=from_flat_text(
            ingredients_text_english, ingredients_text_vietnamese
        ),
        instructions=from_flat_text(
            instructions_text_english, instructions_text_vietnamese
        ),
    )

    try:
        return recipe_service.create_recipe(
            db,
            name=payload.name,
            description=payload.description,
            category_id=payload.category_id,
            ingredients=payload.ingredients,
            instructions=payload.instructions,
            prep_time=payload.prep_time,
            cook_time=payload.cook_time,
            image_file_name=payload.image_file_name,
        )
    except UnknownCategoryError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/analyse", response_model=RecipeForm)
async def analyse_recipe_for_form(file: Optional[UploadFile] = File(None)):
    """Run photo extraction and return the result ready to prefill the editor."""
    extracted = RecipeAnalysisSchema.model_validate(await analyse_upload(file))
    return _build_form(
        None,
        extracted.name,
        extracted.description,
        extracted.ingredients,
        extracted.instructions,
        prep_time=extracted.prep_time,
        cook_time=extracted.cook_time,
        image_file_name=extracted.image_file_name or None,
    )


@router.post("/{recipe_id}", response_model=RecipeRead)
async def update_recipe_from_form(
    recipe_id: UUID,
    category_id: UUID = Form(...),
    name_english: str = Form(""),
    name_vietnamese: str = Form(""),
    description_english: str = Form(""),
    description_vietnamese: str = Form(""),
    prep_time: str = Form(""),
    cook_time: str = Form(""),
    image_file_name: Optional[str] = Form(None),
    ingredients_text_english: str = Form(""),
    ingredients_text_vietnamese: str = Form(""),
    instructions_text_english: str = Form(""),
    instructions_text_vietnamese: str = Form(""),
    db: Session = Depends(get_db),
):
    """
    Apply the editor's flat fields to a stored recipe.

    English text areas set the list lengths; Vietnamese text areas overwrite
    translations by line index without resizing.
    """
    recipe = recipe_service.get_recipe(db, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")

    if not category_service.category_exists(db, category_id):
        raise HTTPException(
            status_code=400, detail="Invalid CategoryId. Category does not exist."
        )

    # English first so new rows exist before translations are written
    kept = update_english_column(recipe.ingredients, ingredients_text_english)
    update_vietnamese_column(recipe.ingredients, ingredients_text_vietnamese, kept)
    kept = update_english_column(recipe.instructions, instructions_text_english)
    update_vietnamese_column(recipe.instructions, instructions_text_vietnamese, kept)

    recipe.name = LocalizedText(
        english=name_english.strip(), vietnamese=name_vietnamese.strip()
    )
    recipe.description = LocalizedText(
        english=description_english.strip(),
        vietnamese=description_vietnamese.strip(),
    )
    recipe.prep_time = prep_time.strip()
    recipe.cook_time = cook_time.strip()
    recipe.image_file_name = image_file_name or None
    recipe.category_id = category_id

    try:
        RecipeWrite.model_validate(recipe)
    except ValidationError as e:
        db.rollback()
        raise HTTPException(
            status_code=422,
            detail=e.errors(
                include_url=False, include_context=False, include_input=False
            ),
        )

    logger.info("Saving portal edits for recipe %s", recipe_id)
    return recipe_service.save_recipe(db, recipe)

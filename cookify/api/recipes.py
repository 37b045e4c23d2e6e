"""API endpoints for recipe management."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from cookify.database import get_db
from cookify.schemas import LocalizedRecipeRead, RecipeRead, RecipeWrite
from cookify.services.export_service import export_service
from cookify.services.recipe_service import UnknownCategoryError, recipe_service

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("", response_model=List[RecipeRead])
async def list_recipes(
    category_id: Optional[UUID] = Query(None, alias="categoryId"),
    db: Session = Depends(get_db),
):
    """List recipes, optionally limited to one category."""
    return recipe_service.get_recipes(db, category_id=category_id)


@router.get("/export")
async def export_recipes(db: Session = Depends(get_db)):
    """Download every recipe, with its category, as a JSON file."""
    filename, body = export_service.export_recipes(recipe_service.get_recipes(db))
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{recipe_id}", response_model=RecipeRead)
async def get_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    recipe = recipe_service.get_recipe(db, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.get("/{recipe_id}/localized", response_model=LocalizedRecipeRead)
async def get_localized_recipe(
    recipe_id: UUID,
    lang: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Render a recipe in one language.

    Vietnamese fields that are blank fall back to English.
    """
    recipe = recipe_service.get_recipe(db, recipe_id)
    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return LocalizedRecipeRead.from_recipe(recipe, lang)


@router.post("", response_model=RecipeRead, status_code=201)
async def create_recipe(payload: RecipeWrite, db: Session = Depends(get_db)):
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


@router.put("/{recipe_id}", response_model=RecipeRead)
async def update_recipe(
    recipe_id: UUID, payload: RecipeWrite, db: Session = Depends(get_db)
):
    if payload.id is not None and payload.id != recipe_id:
        raise HTTPException(status_code=400, detail="ID mismatch")

    try:
        recipe = recipe_service.update_recipe(
            db,
            recipe_id=recipe_id,
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

    if not recipe:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.delete("/{recipe_id}", status_code=204)
async def delete_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    if not recipe_service.delete_recipe(db, recipe_id):
        raise HTTPException(status_code=404, detail="Recipe not found")
    return Response(status_code=204)

"""API endpoints for recipe categories."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from cookify.database import get_db
from cookify.schemas import CategoryRead, CategoryWrite
from cookify.services.category_service import (
    CategoryInUseError,
    DuplicateCategoryError,
    category_service,
)
from cookify.services.export_service import export_service

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryRead])
async def list_categories(db: Session = Depends(get_db)):
    return category_service.get_categories(db)


@router.get("/export")
async def export_categories(db: Session = Depends(get_db)):
    """Download every category as a pretty-printed JSON file."""
    categories = category_service.get_categories(db)
    filename, body = export_service.export_categories(categories)
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: UUID, db: Session = Depends(get_db)):
    category = category_service.get_category(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=CategoryRead, status_code=201)
async def create_category(payload: CategoryWrite, db: Session = Depends(get_db)):
    try:
        return category_service.create_category(
            db, name=payload.name, image_file_name=payload.image_file_name
        )
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: UUID, payload: CategoryWrite, db: Session = Depends(get_db)
):
    if payload.id is not None and payload.id != category_id:
        raise HTTPException(status_code=400, detail="ID mismatch")

    try:
        category = category_service.update_category(
            db,
            category_id=category_id,
            name=payload.name,
            image_file_name=payload.image_file_name,
        )
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    try:
        deleted = category_service.delete_category(db, category_id)
    except CategoryInUseError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="Category not found")
    return Response(status_code=204)

"""Business logic for recipe categories."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cookify.models.category import Category
from cookify.models.localized_text import LocalizedText
from cookify.models.recipe import Recipe

logger = logging.getLogger(__name__)


class CategoryInUseError(Exception):
    """Category still has recipes and cannot be deleted."""

    pass


class DuplicateCategoryError(Exception):
    """Another category already has this name."""

    pass


class CategoryService:
    """Service for category-related operations."""

    @staticmethod
    def get_categories(db: Session) -> List[Category]:
        return db.query(Category).all()

    @staticmethod
    def get_category(db: Session, category_id: UUID) -> Optional[Category]:
        return db.query(Category).filter(Category.id == category_id).first()

    @staticmethod
    def category_exists(db: Session, category_id: UUID) -> bool:
        return (
            db.query(Category.id).filter(Category.id == category_id).first()
            is not None
        )

    @staticmethod
    def category_has_recipes(db: Session, category_id: UUID) -> bool:
        return (
            db.query(Recipe.id).filter(Recipe.category_id == category_id).first()
            is not None
        )

    @staticmethod
    def create_category(
        db: Session, name: LocalizedText, image_file_name: Optional[str] = None
    ) -> Category:
        """
        Create a new category.

        Raises:
            DuplicateCategoryError: If a category with the same name exists
        """
        category = Category(name=name, image_file_name=image_file_name)
        db.add(category)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DuplicateCategoryError(
                f"Category '{name.english}' already exists"
            ) from e
        db.refresh(category)
        logger.info("Created category %s (%s)", category.id, name.english)
        return category

    @staticmethod
    def update_category(
        db: Session,
        category_id: UUID,
        name: LocalizedText,
        image_file_name: Optional[str] = None,
    ) -> Optional[Category]:
        """
        Replace a category's name and image.

        Returns:
            Updated Category or None if not found

        Raises:
            DuplicateCategoryError: If the new name belongs to another category
        """
        category = CategoryService.get_category(db, category_id)
        if not category:
            return None

        category.name = name
        category.image_file_name = image_file_name
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DuplicateCategoryError(
                f"Category '{name.english}' already exists"
            ) from e
        db.refresh(category)
        return category

    @staticmethod
    def delete_category(db: Session, category_id: UUID) -> bool:
        """
        Delete a category that has no recipes.

        Returns:
            True if deleted, False if not found

        Raises:
            CategoryInUseError: If any recipe references the category
        """
        category = CategoryService.get_category(db, category_id)
        if not category:
            return False

        if CategoryService.category_has_recipes(db, category_id):
            raise CategoryInUseError(
                f"Category {category_id} still has recipes and cannot be deleted"
            )

        db.delete(category)
        db.commit()
        logger.info("Deleted category %s", category_id)
        return True


# Singleton instance
category_service = CategoryService()

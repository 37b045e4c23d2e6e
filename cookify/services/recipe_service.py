"""Business logic for recipe management."""

import logging
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from cookify.models.localized_text import LocalizedText
from cookify.models.recipe import Recipe
from cookify.services.category_service import CategoryService

logger = logging.getLogger(__name__)


class UnknownCategoryError(ValueError):
    """Recipe references a category that does not exist."""

    pass


class RecipeService:
    """Service for recipe-related operations."""

    @staticmethod
    def get_recipes(db: Session, category_id: Optional[UUID] = None) -> List[Recipe]:
        """Get all recipes with their categories, optionally for one category."""
        query = db.query(Recipe).options(joinedload(Recipe.category))
        if category_id is not None:
            query = query.filter(Recipe.category_id == category_id)
        return query.all()

    @staticmethod
    def get_recipe(db: Session, recipe_id: UUID) -> Optional[Recipe]:
        """Get a recipe by ID with its category loaded."""
        return (
            db.query(Recipe)
            .options(joinedload(Recipe.category))
            .filter(Recipe.id == recipe_id)
            .first()
        )

    @staticmethod
    def create_recipe(
        db: Session,
        name: LocalizedText,
        description: LocalizedText,
        category_id: UUID,
        ingredients: Sequence[LocalizedText],
        instructions: Sequence[LocalizedText],
        prep_time: str = "",
        cook_time: str = "",
        image_file_name: Optional[str] = None,
    ) -> Recipe:
        """
        Create a new recipe.

        Args:
            db: Database session
            name: Localized recipe name
            description: Localized description
            category_id: Existing category ID
            ingredients: Ordered ingredient list
            instructions: Ordered instruction steps
            prep_time: Free-text preparation time (e.g., "15 minutes")
            cook_time: Free-text cooking time
            image_file_name: Optional image file name

        Returns:
            Created Recipe with its category loaded

        Raises:
            UnknownCategoryError: If the category does not exist
        """
        if not CategoryService.category_exists(db, category_id):
            raise UnknownCategoryError("Invalid CategoryId. Category does not exist.")

        recipe = Recipe(
            name=name,
            description=description,
            category_id=category_id,
            ingredients=list(ingredients),
            instructions=list(instructions),
            prep_time=prep_time,
            cook_time=cook_time,
            image_file_name=image_file_name,
        )
        db.add(recipe)
        db.commit()
        db.refresh(recipe)
        logger.info("Created recipe %s (%s)", recipe.id, name.english)
        return recipe

    @staticmethod
    def update_recipe(
        db: Session,
        recipe_id: UUID,
        name: LocalizedText,
        description: LocalizedText,
        category_id: UUID,
        ingredients: Sequence[LocalizedText],
        instructions: Sequence[LocalizedText],
        prep_time: str = "",
        cook_time: str = "",
        image_file_name: Optional[str] = None,
    ) -> Optional[Recipe]:
        """
        Replace every field of a recipe.

        Unchanged localized lists compare equal element-wise, so assigning an
        equal list does not mark the column dirty.

        Returns:
            Updated Recipe or None if not found

        Raises:
            UnknownCategoryError: If the category does not exist
        """
        recipe = RecipeService.get_recipe(db, recipe_id)
        if not recipe:
            return None

        if not CategoryService.category_exists(db, category_id):
            raise UnknownCategoryError("Invalid CategoryId. Category does not exist.")

        recipe.name = name
        recipe.description = description
        recipe.category_id = category_id
        recipe.ingredients = list(ingredients)
        recipe.instructions = list(instructions)
        recipe.prep_time = prep_time
        recipe.cook_time = cook_time
        recipe.image_file_name = image_file_name

        if db.is_modified(recipe):
            db.commit()
            db.refresh(recipe)
            logger.info("Updated recipe %s", recipe_id)
        return recipe

    @staticmethod
    def save_recipe(db: Session, recipe: Recipe) -> Recipe:
        """Persist in-place edits made to a loaded recipe."""
        db.commit()
        db.refresh(recipe)
        return recipe

    @staticmethod
    def delete_recipe(db: Session, recipe_id: UUID) -> bool:
        """
        Delete a recipe.

        Returns:
            True if deleted, False if not found
        """
        recipe = db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if recipe:
            db.delete(recipe)
            db.commit()
            return True
        return False


# Singleton instance
recipe_service = RecipeService()

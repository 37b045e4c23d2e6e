"""
Factory functions for creating test data.

These factories create model instances with sensible defaults.
Use db.flush() to get IDs without committing.
"""

import io
import secrets
from typing import List, Optional

from PIL import Image
from sqlalchemy.orm import Session

from cookify.models import Category, LocalizedText, Recipe


# =============================================================================
# Category Factory
# =============================================================================


def create_category(
    db: Session,
    english: Optional[str] = None,
    vietnamese: str = "",
    **overrides,
) -> Category:
    """
    Create a test category.

    Args:
        db: Database session
        english: English name (auto-generated if not provided)
        vietnamese: Vietnamese name
        **overrides: Additional fields to override

    Returns:
        Created Category object
    """
    if english is None:
        english = f"Category {secrets.token_hex(4)}"

    defaults = {
        "name": LocalizedText(english=english, vietnamese=vietnamese),
        "image_file_name": None,
    }
    defaults.update(overrides)

    category = Category(**defaults)
    db.add(category)
    db.flush()
    return category


# =============================================================================
# Recipe Factory
# =============================================================================


def create_recipe(
    db: Session,
    category: Optional[Category] = None,
    english: str = "Test Recipe",
    vietnamese: str = "",
    ingredients: Optional[List[LocalizedText]] = None,
    instructions: Optional[List[LocalizedText]] = None,
    **overrides,
) -> Recipe:
    """
    Create a test recipe, creating a category when none is given.

    Args:
        db: Database session
        category: Category to file the recipe under
        english: English name
        vietnamese: Vietnamese name
        ingredients: Ingredient list (one default pair if not provided)
        instructions: Instruction list (one default pair if not provided)
        **overrides: Additional fields to override

    Returns:
        Created Recipe object
    """
    if category is None:
        category = create_category(db)

    if ingredients is None:
        ingredients = [LocalizedText(english="Salt", vietnamese="Muối")]
    if instructions is None:
        instructions = [LocalizedText(english="Mix well", vietnamese="Trộn đều")]

    defaults = {
        "name": LocalizedText(english=english, vietnamese=vietnamese),
        "description": LocalizedText(english=f"{english} description"),
        "prep_time": "10 minutes",
        "cook_time": "20 minutes",
        "category_id": category.id,
        "ingredients": list(ingredients),
        "instructions": list(instructions),
    }
    defaults.update(overrides)

    recipe = Recipe(**defaults)
    db.add(recipe)
    db.flush()
    return recipe


def create_spring_rolls(db: Session, category: Optional[Category] = None) -> Recipe:
    """The sample Spring Rolls recipe, with a two-item ingredient list."""
    if category is None:
        category = create_category(db, "Appetizers", "Món khai vị")

    return create_recipe(
        db,
        category=category,
        english="Spring Rolls",
        vietnamese="Chả giò",
        description=LocalizedText(
            english="Crispy Vietnamese spring rolls",
            vietnamese="Chả giò giòn rụm",
        ),
        ingredients=[
            LocalizedText(english="Rice paper", vietnamese=""),
            LocalizedText(english="Lettuce", vietnamese="Xà lách"),
        ],
        instructions=[
            LocalizedText(english="Soak rice paper", vietnamese="Nhúng bánh tráng"),
            LocalizedText(english="Roll tightly", vietnamese="Cuốn chặt"),
        ],
    )


# =============================================================================
# Image Factory
# =============================================================================


def create_image_bytes(
    width: int = 64,
    height: int = 48,
    mode: str = "RGB",
    image_format: str = "PNG",
) -> bytes:
    """Encode a solid-colour image in memory."""
    color = (200, 80, 40, 128) if mode == "RGBA" else (200, 80, 40)
    image = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()

"""
Database models for Cookify.

Import all models here so Alembic can detect them for migrations.
"""

from cookify.database import Base
from cookify.models.localized_text import LocalizedText, LocalizedTextList
from cookify.models.category import Category
from cookify.models.recipe import Recipe

__all__ = [
    "Base",
    "LocalizedText",
    "LocalizedTextList",
    "Category",
    "Recipe",
]

"""
Unit tests for CategoryService.
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from cookify.models import Category, LocalizedText
from cookify.services.category_service import (
    CategoryInUseError,
    DuplicateCategoryError,
    category_service,
)
from tests.factories import create_category, create_recipe


class TestCreateCategory:
    def test_create(self, db: Session):
        category = category_service.create_category(
            db,
            name=LocalizedText.create("Soups", "Món canh"),
            image_file_name="soups.jpg",
        )

        assert category.id is not None
        assert category.name.get_localized("vi") == "Món canh"
        assert category.image_file_name == "soups.jpg"

    def test_duplicate_name_rejected(self, db: Session):
        category_service.create_category(db, name=LocalizedText.create("Soups", "Món canh"))

        with pytest.raises(DuplicateCategoryError):
            category_service.create_category(
                db, name=LocalizedText.create("Soups", "Món canh")
            )

        # Session is still usable after the rollback
        assert db.query(Category).count() == 1

    def test_same_english_different_vietnamese_allowed(self, db: Session):
        category_service.create_category(db, name=LocalizedText.create("Soups", "Món canh"))
        category_service.create_category(db, name=LocalizedText.create("Soups", "Canh"))

        assert db.query(Category).count() == 2


class TestGetCategories:
    def test_get_categories(self, db: Session):
        create_category(db, "Desserts")
        create_category(db, "Beverages")

        names = {c.name.english for c in category_service.get_categories(db)}
        assert names == {"Desserts", "Beverages"}

    def test_get_category_missing(self, db: Session):
        assert category_service.get_category(db, uuid.uuid4()) is None

    def test_category_exists(self, db: Session):
        category = create_category(db)
        assert category_service.category_exists(db, category.id)
        assert not category_service.category_exists(db, uuid.uuid4())


class TestUpdateCategory:
    def test_update(self, db: Session):
        category = create_category(db, "Desserts")

        updated = category_service.update_category(
            db,
            category.id,
            name=LocalizedText.create("Sweets", "Đồ ngọt"),
            image_file_name="sweets.jpg",
        )

        assert updated.name == LocalizedText.create("Sweets", "Đồ ngọt")
        assert updated.image_file_name == "sweets.jpg"

    def test_update_missing(self, db: Session):
        result = category_service.update_category(
            db, uuid.uuid4(), name=LocalizedText.create("Sweets")
        )
        assert result is None

    def test_update_to_existing_name(self, db: Session):
        create_category(db, "Desserts")
        other = create_category(db, "Beverages")
        db.commit()

        with pytest.raises(DuplicateCategoryError):
            category_service.update_category(
                db, other.id, name=LocalizedText.create("Desserts")
            )


class TestDeleteCategory:
    def test_delete(self, db: Session):
        category = create_category(db)
        db.commit()

        assert category_service.delete_category(db, category.id) is True
        assert category_service.get_category(db, category.id) is None

    def test_delete_missing(self, db: Session):
        assert category_service.delete_category(db, uuid.uuid4()) is False

    def test_delete_with_recipes_refused(self, db: Session):
        category = create_category(db)
        create_recipe(db, category=category)
        db.commit()

        with pytest.raises(CategoryInUseError):
            category_service.delete_category(db, category.id)

        assert category_service.get_category(db, category.id) is not None

"""
Unit tests for CLI commands.

Tests table creation, sample seeding and recipe export.
"""

import json
from unittest.mock import patch

import pytest
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from cookify.cli import export_recipes, init_db, main, seed
from cookify.database import Base
from cookify.models import Category, Recipe
from tests.factories import create_spring_rolls


# =============================================================================
# init-db
# =============================================================================


class TestInitDb:
    def test_creates_tables(self, test_engine):
        Base.metadata.drop_all(test_engine)

        with patch("cookify.cli.engine", test_engine), patch("builtins.print"):
            init_db()

        tables = set(inspect(test_engine).get_table_names())
        assert {"categories", "recipes"} <= tables


# =============================================================================
# seed
# =============================================================================


class TestSeed:
    def test_seed_empty_database(self, db: Session):
        with patch("cookify.cli.SessionLocal", return_value=db), \
             patch("builtins.print") as mock_print:

            seed()

            mock_print.assert_called_with("Sample catalog seeded.")

        assert db.query(Category).count() == 4
        assert db.query(Recipe).count() == 4

        pho = next(r for r in db.query(Recipe).all() if r.name.english == "Beef Pho")
        assert pho.name.get_localized("vi") == "Phở bò"
        assert pho.category.name.english == "Main Courses"
        assert len(pho.ingredients) == 9

    def test_seed_skips_when_data_exists(self, db: Session):
        with patch("cookify.cli.SessionLocal", return_value=db), \
             patch("builtins.print"):
            seed()

        with patch("cookify.cli.SessionLocal", return_value=db), \
             patch("builtins.print") as mock_print:
            seed()

            mock_print.assert_called_with("Catalog already has categories. Skipping.")

        assert db.query(Category).count() == 4


# =============================================================================
# export-recipes
# =============================================================================


class TestExportRecipes:
    def test_export_writes_json(self, db: Session, tmp_path):
        create_spring_rolls(db)
        db.commit()

        with patch("cookify.cli.SessionLocal", return_value=db), \
             patch("builtins.print"):
            path = export_recipes(str(tmp_path))

        assert path.name.startswith("recipes_")
        assert path.suffix == ".json"

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data) == 1
        assert data[0]["name"] == {"english": "Spring Rolls", "vietnamese": "Chả giò"}
        assert data[0]["category"]["name"]["english"] == "Appetizers"
        assert data[0]["prepTime"] == "10 minutes"


# =============================================================================
# main
# =============================================================================


class TestMain:
    def test_no_command_exits(self):
        with patch("builtins.print"), pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1

    def test_dispatches_seed(self):
        with patch("cookify.cli.seed") as mock_seed:
            main(["seed"])

        mock_seed.assert_called_once()

    def test_dispatches_export_with_output_dir(self):
        with patch("cookify.cli.export_recipes") as mock_export:
            main(["export-recipes", "--output-dir", "/tmp/out"])

        mock_export.assert_called_once_with("/tmp/out")

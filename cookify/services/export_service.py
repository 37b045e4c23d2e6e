"""JSON export of the catalog, shared by the API download endpoints and the CLI."""

import json
from datetime import datetime, timezone
from typing import Iterable

from cookify.models.category import Category
from cookify.models.recipe import Recipe
from cookify.schemas import CategoryRead, RecipeRead


class ExportService:
    """Serialize categories and recipes in the same wire shape as the API."""

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")

    @staticmethod
    def _dump(items: list) -> str:
        return json.dumps(items, indent=2, ensure_ascii=False)

    def export_categories(self, categories: Iterable[Category]) -> tuple[str, str]:
        """
        Returns:
            (filename, json_body) tuple
        """
        items = [
            CategoryRead.model_validate(category).model_dump(
                by_alias=True, mode="json"
            )
            for category in categories
        ]
        return f"categories_{self._timestamp()}.json", self._dump(items)

    def export_recipes(self, recipes: Iterable[Recipe]) -> tuple[str, str]:
        """
        Returns:
            (filename, json_body) tuple, each recipe with its category embedded
        """
        items = [
            RecipeRead.model_validate(recipe).model_dump(by_alias=True, mode="json")
            for recipe in recipes
        ]
        return f"recipes_{self._timestamp()}.json", self._dump(items)


# Singleton instance
export_service = ExportService()

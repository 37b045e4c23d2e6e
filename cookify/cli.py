"""CLI commands for Cookify."""

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy.orm import Session

import cookify.models  # noqa: F401  registers tables on Base.metadata
from cookify.config import settings
from cookify.database import Base, SessionLocal, engine
from cookify.seed_data import seed_catalog
from cookify.services.export_service import export_service
from cookify.services.recipe_service import recipe_service

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create any missing tables."""
    Base.metadata.create_all(bind=engine)
    print("Database tables created.")


def seed() -> None:
    """Insert the sample catalog into an empty database."""
    db: Session = SessionLocal()

    try:
        if seed_catalog(db):
            print("Sample catalog seeded.")
        else:
            print("Catalog already has categories. Skipping.")
    finally:
        db.close()


def export_recipes(output_dir: str = ".") -> Path:
    """Write every recipe to a timestamped JSON file in ``output_dir``."""
    db: Session = SessionLocal()

    try:
        recipes = recipe_service.get_recipes(db)
        filename, body = export_service.export_recipes(recipes)
    finally:
        db.close()

    path = Path(output_dir) / filename
    path.write_text(body, encoding="utf-8")
    logger.info("Exported %d recipes to %s", len(recipes), path)
    print(f"Exported {len(recipes)} recipes to {path}")
    return path


def main(argv=None):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(description="Cookify CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Seed sample categories and recipes")

    export_parser = subparsers.add_parser(
        "export-recipes", help="Export all recipes as JSON"
    )
    export_parser.add_argument(
        "--output-dir", default=".", help="Directory for the export file"
    )

    args = parser.parse_args(argv)

    if args.command == "init-db":
        init_db()
    elif args.command == "seed":
        seed()
    elif args.command == "export-recipes":
        export_recipes(args.output_dir)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

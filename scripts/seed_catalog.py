#!/usr/bin/env python
# RessourcesMG - Catalog Seeding
# ==============================
# Loads the default catalog into the SQLite database
"""
Catalog seeding and search check.

1. Create the catalog database under DATA_DIR (or --db-path)
2. Load the bundled default catalog, or a JSON file given with --file
3. Optionally run a search or a question against the seeded catalog

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --file my_catalog.json
    python scripts/seed_catalog.py --stats
    python scripts/seed_catalog.py --search "pédiatrie ordonnance"
    python scripts/seed_catalog.py --question "antibiotique pour une otite de l'enfant"
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ressources_mg.catalog import CatalogService, load_default_catalog
from ressources_mg.exceptions import ConflictError, RessourcesError
from ressources_mg.search import match_question_locally, search_catalog

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def seed(service: CatalogService, file_path: str = None) -> bool:
    """Seed the catalog if empty."""
    categories = load_default_catalog(Path(file_path) if file_path else None)
    try:
        stats = service.seed(categories)
    except ConflictError:
        logger.info("Catalog already initialized, nothing to do")
        return True
    except RessourcesError as e:
        logger.error(f"Seeding failed: {e.message}")
        return False

    logger.info(f"Seeded {stats.categories} categories ({stats.specialties} specialties), "
                f"{stats.resources} resources")
    return True


def show_statistics(service: CatalogService):
    """Show catalog statistics."""
    stats = service.get_stats()
    logger.info("=" * 60)
    logger.info("CATALOG STATISTICS")
    logger.info("=" * 60)
    logger.info(f"Database: {service.db.db_path}")
    logger.info(f"Categories: {stats.categories} ({stats.specialties} specialties)")
    logger.info(f"Resources: {stats.resources} ({stats.hidden_resources} hidden)")
    logger.info("=" * 60)


def run_search(service: CatalogService, query: str):
    """Print the result of a catalog search."""
    result = search_catalog(service.get_catalog(), query)
    logger.info(f"Query: '{query}' -> {result.result_count} result(s){' (partial)' if result.partial else ''}")
    for category in result.categories:
        logger.info(f"  [{category.name}]")
        for resource in category.resources:
            logger.info(f"    - {resource.name}: {resource.description}")
    if result.did_you_mean:
        logger.info(f"  Did you mean: {', '.join(result.did_you_mean)}")


def run_question(service: CatalogService, question: str):
    """Print local suggestions for a question."""
    suggestions = match_question_locally(question, service.get_catalog())
    logger.info(f"Question: '{question}' -> {len(suggestions)} suggestion(s)")
    for s in suggestions:
        logger.info(f"  -> {s.resource_name} ({s.category_name}) {s.resource_url}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="RessourcesMG: catalog seeding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/seed_catalog.py                          # Seed default catalog
  python scripts/seed_catalog.py --reset                  # Drop and reseed
  python scripts/seed_catalog.py --stats                  # Show statistics
  python scripts/seed_catalog.py --search "echographie"   # Try a search
        """
    )

    parser.add_argument(
        "--db-path",
        default=None,
        help="Path to the catalog database (default: $DATA_DIR/catalog.db)"
    )

    parser.add_argument(
        "--file",
        default=None,
        help="Catalog JSON file to load instead of the bundled one"
    )

    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete the catalog database before seeding"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show catalog statistics"
    )

    parser.add_argument(
        "--search",
        metavar="QUERY",
        help="Run a search against the catalog"
    )

    parser.add_argument(
        "--question",
        metavar="TEXT",
        help="Run the local question matcher against the catalog"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.reset and args.db_path and Path(args.db_path).exists():
        Path(args.db_path).unlink()
        logger.info(f"Deleted {args.db_path}")

    service = CatalogService(args.db_path)

    if args.reset and not args.db_path:
        db_file = Path(service.db.db_path)
        db_file.unlink()
        logger.info(f"Deleted {db_file}")
        service = CatalogService()

    if args.stats:
        show_statistics(service)
        sys.exit(0)

    if args.search or args.question:
        if args.search:
            run_search(service, args.search)
        if args.question:
            run_question(service, args.question)
        sys.exit(0)

    success = seed(service, args.file)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()

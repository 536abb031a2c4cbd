"""Wipe the products database.

Usage:
    python -m products_api.database.clear --clear
"""
import argparse
import sys
from typing import Optional, Sequence

from products_api.config import Settings
from products_api.database.database import Database
from products_api.utils.logging import get_logger

logger = get_logger(__name__)


def clear_db(database: Database) -> int:
    try:
        database.reset()
        logger.info("Datos eliminados correctamente")
        return 0
    except Exception as e:
        logger.error("Could not clear the database: {}", e)
        return 1


def main(argv: Optional[Sequence[str]] = None, database: Optional[Database] = None) -> int:
    parser = argparse.ArgumentParser(description="Products database maintenance")
    parser.add_argument("--clear", action="store_true", help="drop and recreate every table")
    args = parser.parse_args(argv)

    if not args.clear:
        return 0

    if database is not None:
        return clear_db(database)

    database = Database(Settings())
    try:
        return clear_db(database)
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main())

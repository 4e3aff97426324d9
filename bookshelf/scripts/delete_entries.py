#!/usr/bin/env python3
"""
delete_entries.py — remove all books of a given genre.

Usage:
    poetry run python -m bookshelf.scripts.delete_entries --genre Sci-Fi
"""

import argparse
import logging
import sys

from bookshelf import books
from bookshelf import db as db_module
from bookshelf.utils.helpers import format_documents, genre_filter


def delete_genre(db, genre: str) -> int:
    """Deletes every book whose genre matches exactly. Returns the deleted count."""
    return books.delete_by_genre(db["books"], genre).deleted_count


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Delete all books of a specific genre from the library database."
    )
    parser.add_argument(
        "--genre",
        required=True,
        help="Genre to delete (e.g., Fiction, Sci-Fi, Mystery). Case-sensitive.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Do not ask for confirmation.",
    )
    args = parser.parse_args(argv)
    genre = args.genre.strip()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    logger = logging.getLogger("delete_entries")

    with db_module.connect() as db:
        coll = db["books"]
        match_filter = genre_filter(genre)
        match_count = coll.count_documents(match_filter)

        if match_count == 0:
            logger.warning(f"⚠️  No books found where genre='{genre}'. Nothing to delete.")
            sys.exit(0)

        logger.info(f"🔍 Found {match_count} books with genre='{genre}':\n"
                    f"{format_documents(coll.find(match_filter))}")

        if not args.yes:
            confirm = input(
                f"⚠️  This will permanently delete {match_count} books. Continue? (yes/no): "
            ).strip().lower()
            if confirm not in {"yes", "y"}:
                logger.info("Operation cancelled.")
                sys.exit(0)

        deleted = delete_genre(db, genre)
        logger.info(f"🧹 Deleted {deleted} books for genre '{genre}'.")

        remaining = coll.count_documents(match_filter)
        if remaining > 0:
            logger.warning(f"⚠️  {remaining} books still remain for genre='{genre}'.")
        else:
            logger.info(f"✅ Verification passed: no remaining '{genre}' books.")


if __name__ == "__main__":
    main()

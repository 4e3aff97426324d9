# bookshelf/walkthrough.py

"""
Fixed walkthrough against the library database.

Usage:
    poetry run python -m bookshelf.walkthrough
    poetry run python -m bookshelf.walkthrough --uri mongodb://db:27017 --db library
"""

import argparse
import logging
import sys

from bookshelf import books
from bookshelf import db as db_module
from bookshelf.scripts.update_indexes import ensure_indexes
from bookshelf.shop import insert_shop_records

logger = logging.getLogger(__name__)

INDEX_NOTE = "Indexing improves query performance by allowing faster lookups on indexed fields."


def run_walkthrough(db):
    """Run every step in order against `db`. Errors propagate."""
    coll = db["books"]

    # 1. Insert
    books.insert_books(coll)
    print("Books inserted")

    # 2. Read
    print(books.find_all(coll))
    print(books.find_by_author(coll, "Author A"))
    print(books.find_published_after(coll, 2000))

    # 3. Update
    books.update_published_year(coll, "1111", 2001)
    books.add_rating_to_all(coll, 5)

    # 4. Delete
    books.delete_by_isbn(coll, "2222")
    books.delete_by_genre(coll, "Sci-Fi")

    # 5. E-commerce records
    insert_shop_records(db)

    # 6. Aggregation
    print(books.count_by_genre(coll))
    print(books.average_published_year(coll))
    print(books.top_rated(coll))

    # 7. Indexing
    ensure_indexes(db)
    print("Index created on author field")
    print(INDEX_NOTE)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the library database walkthrough")
    parser.add_argument("--uri", help=f"MongoDB connection string (default: {db_module.MONGO_URI})")
    parser.add_argument("--db", dest="db_name", help=f"Database name (default: {db_module.DB_NAME})")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        with db_module.connect(args.uri, args.db_name) as db:
            run_walkthrough(db)
    except Exception:
        logger.exception("❌ Walkthrough failed")
        return 1

    logger.info("✅ Walkthrough complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

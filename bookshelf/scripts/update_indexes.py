"""
Ensure MongoDB indexes exist for the library database.
Safe to run multiple times — MongoDB will skip duplicates.

Usage:
    poetry run python -m bookshelf.scripts.update_indexes
    poetry run python -m bookshelf.scripts.update_indexes --list
"""

import argparse
import logging
from typing import Dict, List

from bookshelf import books
from bookshelf import db as db_module

logger = logging.getLogger(__name__)


def ensure_indexes(db) -> str:
    logger.info("🔧 Ensuring indexes for library database...")

    # ----------------------------------------------------------------------
    # books collection
    # ----------------------------------------------------------------------
    name = books.create_author_index(db["books"])

    logger.info("✅ Index verification complete (%s).", name)
    return name


def list_index_fields(coll) -> Dict[str, List[str]]:
    """
    Map index name -> indexed field names, as reported by the server.
    Always contains the default `_id_` index.
    """
    return {
        name: [field for field, _direction in info["key"]]
        for name, info in coll.index_information().items()
    }


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    parser = argparse.ArgumentParser()
    parser.add_argument("--list", action="store_true",
                        help="Print the indexes on the books collection afterwards")

    args = parser.parse_args()

    with db_module.connect() as db:
        ensure_indexes(db)

        if args.list:
            for name, fields in list_index_fields(db["books"]).items():
                print(f"{name}: {', '.join(fields)}")

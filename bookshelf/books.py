# bookshelf/books.py

"""
Operations on the `books` collection.

Every function is a single driver call: no validation, no retries. Errors
from pymongo propagate to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from bookshelf.sample_data import sample_books
from bookshelf.utils.helpers import author_filter, genre_filter, published_after_filter

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Create
# ----------------------------------------------------------------------
def insert_books(coll: Collection, books: Optional[List[Dict[str, Any]]] = None) -> list:
    """Insert the sample books (or the given list) and return the new ids."""
    if books is None:
        books = sample_books()
    result = coll.insert_many(books)
    logger.info("📚 Inserted %d books into '%s'", len(result.inserted_ids), coll.name)
    return result.inserted_ids


# ----------------------------------------------------------------------
# Read
# ----------------------------------------------------------------------
def find_all(coll: Collection) -> List[dict]:
    return list(coll.find())


def find_by_author(coll: Collection, author: str) -> List[dict]:
    return list(coll.find(author_filter(author)))


def find_published_after(coll: Collection, year: int) -> List[dict]:
    return list(coll.find(published_after_filter(year)))


def top_rated(coll: Collection, limit: int = 1) -> List[dict]:
    return list(coll.find().sort("rating", DESCENDING).limit(limit))


# ----------------------------------------------------------------------
# Update
# ----------------------------------------------------------------------
def update_published_year(coll: Collection, isbn: str, year: int):
    result = coll.update_one({"ISBN": isbn}, {"$set": {"publishedYear": year}})
    logger.info(
        "Updated ISBN %s: matched=%d modified=%d",
        isbn, result.matched_count, result.modified_count,
    )
    return result


def add_rating_to_all(coll: Collection, rating: int):
    result = coll.update_many({}, {"$set": {"rating": rating}})
    logger.info(
        "Set rating=%s on %d books (matched=%d)",
        rating, result.modified_count, result.matched_count,
    )
    return result


# ----------------------------------------------------------------------
# Delete
# ----------------------------------------------------------------------
def delete_by_isbn(coll: Collection, isbn: str):
    result = coll.delete_one({"ISBN": isbn})
    logger.info("🧹 Deleted %d book(s) with ISBN %s", result.deleted_count, isbn)
    return result


def delete_by_genre(coll: Collection, genre: str):
    result = coll.delete_many(genre_filter(genre))
    logger.info("🧹 Deleted %d book(s) with genre '%s'", result.deleted_count, genre)
    return result


# ----------------------------------------------------------------------
# Aggregation
# ----------------------------------------------------------------------
def count_by_genre(coll: Collection) -> List[dict]:
    """One `{"_id": genre, "count": n}` group per genre present."""
    pipeline = [
        {"$group": {"_id": "$genre", "count": {"$sum": 1}}},
    ]
    return list(coll.aggregate(pipeline))


def average_published_year(coll: Collection) -> List[dict]:
    """A single `{"_id": None, "avgPublishedYear": x}` group over every book."""
    pipeline = [
        {"$group": {"_id": None, "avgPublishedYear": {"$avg": "$publishedYear"}}},
    ]
    return list(coll.aggregate(pipeline))


# ----------------------------------------------------------------------
# Indexes
# ----------------------------------------------------------------------
def create_author_index(coll: Collection) -> str:
    # Returns the server-side name, e.g. "author_1"
    return coll.create_index([("author", ASCENDING)])

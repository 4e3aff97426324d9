# bookshelf/sample_data.py

"""
Literal records used by the walkthrough.

pymongo writes the generated `_id` back into every dict it inserts, so the
accessors hand out copies and the module-level literals stay untouched.
"""

import copy

BOOKS = [
    {"title": "Book One", "author": "Author A", "publishedYear": 1999, "genre": "Fiction", "ISBN": "1111"},
    {"title": "Book Two", "author": "Author B", "publishedYear": 2005, "genre": "Sci-Fi", "ISBN": "2222"},
    {"title": "Book Three", "author": "Author A", "publishedYear": 2010, "genre": "Mystery", "ISBN": "3333"},
    {"title": "Book Four", "author": "Author C", "publishedYear": 2018, "genre": "Fiction", "ISBN": "4444"},
    {"title": "Book Five", "author": "Author D", "publishedYear": 2021, "genre": "Sci-Fi", "ISBN": "5555"},
]

# E-commerce records. Order references are plain strings, nothing resolves them.
USER = {
    "name": "User One",
    "email": "user1@example.com",
    "address": "123 Street, City",
}

PRODUCT = {
    "name": "Product A",
    "price": 100,
    "category": "Electronics",
}

ORDER = {
    "userId": "User1_ID",
    "productIds": ["ProductA_ID"],
    "totalPrice": 100,
    "status": "Pending",
}


def sample_books():
    return copy.deepcopy(BOOKS)


def sample_user():
    return copy.deepcopy(USER)


def sample_product():
    return copy.deepcopy(PRODUCT)


def sample_order():
    return copy.deepcopy(ORDER)

# bookshelf/shop.py

"""E-commerce records: one user, one product, one order."""

import logging

from bookshelf.sample_data import sample_order, sample_product, sample_user

logger = logging.getLogger(__name__)


def insert_user(db, user=None):
    result = db["users"].insert_one(user if user is not None else sample_user())
    logger.info("👤 Inserted user %s", result.inserted_id)
    return result.inserted_id


def insert_product(db, product=None):
    result = db["products"].insert_one(product if product is not None else sample_product())
    logger.info("📦 Inserted product %s", result.inserted_id)
    return result.inserted_id


def insert_order(db, order=None):
    # userId / productIds are stored as given; they are not looked up.
    result = db["orders"].insert_one(order if order is not None else sample_order())
    logger.info("🧾 Inserted order %s", result.inserted_id)
    return result.inserted_id


def insert_shop_records(db) -> dict:
    return {
        "user": insert_user(db),
        "product": insert_product(db),
        "order": insert_order(db),
    }

import os
import logging
from contextlib import contextmanager
from pymongo import MongoClient
from dotenv import load_dotenv

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)

# Connection settings (falls back to a local server and the "library" database)
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "library")


def get_client(uri=None) -> MongoClient:
    return MongoClient(uri or MONGO_URI)


@contextmanager
def connect(uri=None, db_name=None):
    """
    Open a client, ping the server and yield the target database.

    The client is closed when the block exits, whether it finished
    normally or raised.
    """
    client = get_client(uri)
    try:
        client.admin.command("ping")
        print("Connected to MongoDB")
        db = client[db_name or DB_NAME]
        logger.info("MongoDB connection ready (database: %s)", db.name)
        yield db
    finally:
        client.close()
        logger.info("MongoDB connection closed")

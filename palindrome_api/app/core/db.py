"""
Storage backend selection.

``build_store`` turns settings into a ``MessageStore``: an in‑memory
store when no MongoDB URI is configured, otherwise a store bound to
``<mongo_database>.<mongo_collection>`` through a ``MongoClient`` that
the store owns and closes on shutdown.
"""

import logging

from pymongo import MongoClient

from palindrome_api.app.store import InMemoryMessageStore, MessageStore, MongoMessageStore

from .config import Settings


logger = logging.getLogger(__name__)


def get_mongo_client(uri: str) -> MongoClient:
    """Create a client for ``uri``.

    The driver connects lazily, so an unreachable server surfaces on the
    first operation rather than here.
    """
    return MongoClient(uri)


def build_store(settings: Settings) -> MessageStore:
    """Return the message store selected by ``settings``."""
    if not settings.uses_mongo:
        logger.info("Using in-memory message store")
        return InMemoryMessageStore()
    client = get_mongo_client(settings.mongo_uri)
    collection = client[settings.mongo_database][settings.mongo_collection]
    logger.info(
        "Using MongoDB message store %s.%s",
        settings.mongo_database,
        settings.mongo_collection,
    )
    return MongoMessageStore(collection, client=client)

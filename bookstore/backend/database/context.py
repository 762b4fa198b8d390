"""
Explicitly constructed client handles for the Flask application.
The factory builds them once per app; services receive them through the ServiceFactory.
"""
import logging

from flask import current_app

logger = logging.getLogger(__name__)

EXTENSION_KEY = "bookstore"


class AppClients:
    """
    Holds the MongoDB database and the cache store for one application instance.
    Only clients created here (not injected ones) are closed on shutdown.
    """

    def __init__(self, mongo_db, cache_store, owned=None):
        self.mongo_db = mongo_db
        self.cache_store = cache_store
        self._owned = list(owned or [])

    def close(self):
        for client in self._owned:
            try:
                client.close()
            except Exception as e:
                logger.warning(f"Failed to close {client.__class__.__name__}: {e}")
        self._owned = []


class DatabaseContext:
    """
    Access to the clients of the current application.
    Works in request context (controllers) and application context (CLI commands).
    """

    @staticmethod
    def get_clients() -> AppClients:
        return current_app.extensions[EXTENSION_KEY]

    @staticmethod
    def get_mongo_db():
        return DatabaseContext.get_clients().mongo_db

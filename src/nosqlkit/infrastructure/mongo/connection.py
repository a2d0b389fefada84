"""MongoDB connection management.

One client is created lazily per factory and shared by every domain; each
domain resolves to its own database.
"""

from pymongo import MongoClient
from pymongo.database import Database

from nosqlkit.core.config import Settings
from nosqlkit.core.logging import get_logger

logger = get_logger(__name__)


class MongoConnectionFactory:
    """Creates the MongoDB client and hands out per-domain databases."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._client: MongoClient | None = None

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(
                self.settings.mongo_uri,
                serverSelectionTimeoutMS=self.settings.mongo_server_selection_timeout_ms,
                connectTimeoutMS=self.settings.mongo_connect_timeout_ms,
            )
            logger.debug("MongoDB client created")
        return self._client

    def get_database(self, domain: str) -> Database:
        """Return the database backing a domain."""
        return self.client[self.settings.database_name_for(domain)]

    def __call__(self, domain: str) -> Database:
        return self.get_database(domain)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("MongoDB client closed")

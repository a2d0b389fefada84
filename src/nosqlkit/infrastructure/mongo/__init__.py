"""MongoDB integration: connections and validation schema sync."""

from nosqlkit.infrastructure.mongo.connection import MongoConnectionFactory
from nosqlkit.infrastructure.mongo.sync_service import (
    CollectionSyncResult,
    SyncOrchestrator,
    SyncReport,
    SyncStatus,
)

__all__ = [
    "CollectionSyncResult",
    "MongoConnectionFactory",
    "SyncOrchestrator",
    "SyncReport",
    "SyncStatus",
]

"""Synchronization of collection validation schemas with MongoDB.

For each collection of a domain the validation schema is synthesized and the
collection is created with that schema as its validator. A collection that
already exists counts as synchronized, so the operation can be repeated.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from pymongo.database import Database
from pymongo.errors import CollectionInvalid, OperationFailure, PyMongoError

from nosqlkit.core.exceptions import (
    NAMESPACE_EXISTS_CODE,
    ExternalSyncError,
    NoSQLKitError,
    SchemaSynthesisError,
)
from nosqlkit.core.logging import LoggingContext, get_logger
from nosqlkit.domain.entities import CollectionDefinition
from nosqlkit.domain.services import SchemaSynthesizer, to_validator
from nosqlkit.infrastructure.persistence.collection_store import CollectionStore

logger = get_logger(__name__)

DatabaseProvider = Callable[[str], Database]


class SyncStatus(str, Enum):
    """Outcome of synchronizing one collection."""

    CREATED = "created"
    EXISTS = "exists"
    UPDATED = "updated"
    FAILED = "failed"


@dataclass
class CollectionSyncResult:
    """Outcome of synchronizing one collection."""

    name: str
    status: SyncStatus
    error: NoSQLKitError | None = None

    @property
    def success(self) -> bool:
        return self.status is not SyncStatus.FAILED


@dataclass
class SyncReport:
    """Outcome of synchronizing every collection of a domain."""

    domain: str
    results: list[CollectionSyncResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def errors(self) -> list[NoSQLKitError]:
        return [r.error for r in self.results if r.error is not None]


class SyncOrchestrator:
    """Applies synthesized validation schemas to MongoDB collections."""

    def __init__(
        self,
        collection_store: CollectionStore,
        synthesizer: SchemaSynthesizer,
        database_provider: DatabaseProvider,
        update_existing: bool = False,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            collection_store: Source of the domain's collection definitions.
            synthesizer: Validation schema synthesizer.
            database_provider: Callable returning the database of a domain.
            update_existing: Replace the validator of existing collections
                with ``collMod`` instead of leaving them untouched.
        """
        self.collection_store = collection_store
        self.synthesizer = synthesizer
        self.database_provider = database_provider
        self.update_existing = update_existing

    def sync(self, domain: str) -> bool:
        """Synchronize a domain, returning True only if every collection succeeded."""
        return self.sync_report(domain).success

    def sync_report(self, domain: str) -> SyncReport:
        """Synchronize every collection of a domain.

        Every collection is attempted even after a failure.

        Raises:
            PersistenceError: If the domain's definitions cannot be read.
        """
        report = SyncReport(domain=domain)
        with LoggingContext(domain=domain):
            collections = self.collection_store.get_collections(domain)
            if not collections:
                logger.info("No collections to sync")
                return report

            try:
                database = self.database_provider(domain)
            except PyMongoError as e:
                logger.error("Database unavailable", error=str(e))
                report.results.extend(
                    CollectionSyncResult(
                        c.name,
                        SyncStatus.FAILED,
                        ExternalSyncError(c.name, str(e), getattr(e, "code", None)),
                    )
                    for c in collections
                )
                return report

            for collection in collections:
                result = self._sync_collection(database, collection)
                report.results.append(result)

            logger.info(
                "Domain synchronized",
                collection_count=len(report.results),
                failed=sum(1 for r in report.results if not r.success),
                success=report.success,
            )
        return report

    def _sync_collection(
        self, database: Database, collection: CollectionDefinition
    ) -> CollectionSyncResult:
        name = collection.name
        try:
            validator = to_validator(self.synthesizer.synthesize(collection))
        except SchemaSynthesisError as e:
            logger.error("Validation schema synthesis failed", collection=name, error=str(e))
            return CollectionSyncResult(name, SyncStatus.FAILED, e)

        try:
            database.create_collection(name, validator=validator, check_exists=False)
        except CollectionInvalid:
            return self._handle_existing(database, name, validator)
        except OperationFailure as e:
            if e.code == NAMESPACE_EXISTS_CODE:
                return self._handle_existing(database, name, validator)
            logger.error("Collection creation failed", collection=name, code=e.code, error=str(e))
            return CollectionSyncResult(
                name, SyncStatus.FAILED, ExternalSyncError(name, str(e), e.code)
            )
        except PyMongoError as e:
            logger.error("Collection creation failed", collection=name, error=str(e))
            return CollectionSyncResult(name, SyncStatus.FAILED, ExternalSyncError(name, str(e)))

        logger.info("Collection created with validator", collection=name)
        return CollectionSyncResult(name, SyncStatus.CREATED)

    def _handle_existing(
        self, database: Database, name: str, validator: dict
    ) -> CollectionSyncResult:
        if not self.update_existing:
            logger.info("Collection already exists", collection=name)
            return CollectionSyncResult(name, SyncStatus.EXISTS)

        try:
            database.command("collMod", name, validator=validator)
        except PyMongoError as e:
            code = getattr(e, "code", None)
            logger.error("Validator update failed", collection=name, code=code, error=str(e))
            return CollectionSyncResult(
                name, SyncStatus.FAILED, ExternalSyncError(name, str(e), code)
            )

        logger.info("Validator applied to existing collection", collection=name)
        return CollectionSyncResult(name, SyncStatus.UPDATED)

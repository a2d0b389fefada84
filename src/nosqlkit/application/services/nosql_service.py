"""NoSQL service for hosting layers.

Wires the collection store, the schema synthesizer, the artifact generator
and the sync orchestrator behind one object.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from nosqlkit.core.config import Settings, get_settings
from nosqlkit.core.logging import get_logger
from nosqlkit.domain.entities import CollectionDefinition
from nosqlkit.domain.services import (
    SchemaSynthesizer,
    list_field_validations,
    list_property_types,
    to_json_schema,
)
from nosqlkit.infrastructure.generation import ArtifactGenerator, ArtifactResult, TemplateRenderer
from nosqlkit.infrastructure.mongo import MongoConnectionFactory, SyncOrchestrator, SyncReport
from nosqlkit.infrastructure.persistence import CollectionStore, LocalFileStore, ProjectLayout

logger = get_logger(__name__)


class NoSQLService:
    """Service for collection definition management."""

    def __init__(
        self,
        collection_store: CollectionStore,
        generator: ArtifactGenerator,
        synthesizer: SchemaSynthesizer,
        sync_orchestrator: SyncOrchestrator,
        connection_factory: MongoConnectionFactory | None = None,
    ) -> None:
        self.collection_store = collection_store
        self.generator = generator
        self.synthesizer = synthesizer
        self.sync_orchestrator = sync_orchestrator
        self.connection_factory = connection_factory

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        connection_factory: MongoConnectionFactory | None = None,
    ) -> "NoSQLService":
        """Build a service with the default local collaborators.

        Args:
            settings: Settings to use; loaded from the environment if omitted.
            connection_factory: MongoDB connection factory; created from the
                settings if omitted. No connection is opened until a sync.
        """
        settings = settings or get_settings()
        layout = ProjectLayout.from_settings(settings)
        file_store = LocalFileStore()
        generator = ArtifactGenerator(
            renderer=TemplateRenderer(settings.templates_dir),
            file_store=file_store,
            layout=layout,
        )
        store = CollectionStore(
            file_store=file_store,
            layout=layout,
            generator=generator,
            root_label=settings.root_domain_label,
        )
        synthesizer = SchemaSynthesizer()
        connection_factory = connection_factory or MongoConnectionFactory(settings)
        orchestrator = SyncOrchestrator(
            collection_store=store,
            synthesizer=synthesizer,
            database_provider=connection_factory,
            update_existing=settings.sync_update_existing,
        )
        return cls(store, generator, synthesizer, orchestrator, connection_factory)

    def get_types(self) -> list[str]:
        return sorted(list_property_types())

    def get_validations(self) -> list[str]:
        return sorted(list_field_validations())

    def get_domains(self) -> list[str]:
        return self.collection_store.get_domains()

    def get_collections(self, domain: str) -> list[CollectionDefinition]:
        return self.collection_store.get_collections(domain)

    def set_collections(
        self,
        domain: str,
        collections: Sequence[CollectionDefinition | Mapping[str, Any]],
    ) -> list[ArtifactResult]:
        """Replace a domain's collection definitions and regenerate its artifacts."""
        return self.collection_store.set_collections(domain, collections)

    def generate(self, domain: str) -> list[ArtifactResult]:
        """Regenerate the artifacts of the stored definitions without rewriting them."""
        return self.generator.generate_all(domain, self.get_collections(domain))

    def get_validation_schema(self, domain: str, collection_name: str) -> dict[str, Any]:
        """Return the ``$jsonSchema`` document that a sync would apply.

        Raises:
            KeyError: If the domain has no collection with that name.
            SchemaSynthesisError: If the definition cannot be synthesized.
        """
        for collection in self.get_collections(domain):
            if collection.name == collection_name:
                return to_json_schema(self.synthesizer.synthesize(collection))
        raise KeyError(f"Collection '{collection_name}' not found in domain '{domain}'")

    def sync_collections(self, domain: str) -> bool:
        return self.sync_orchestrator.sync(domain)

    def sync_report(self, domain: str) -> SyncReport:
        return self.sync_orchestrator.sync_report(domain)

    def close(self) -> None:
        """Release the MongoDB client, if one was opened."""
        if self.connection_factory is not None:
            self.connection_factory.close()

"""Collection store for per-domain collection definitions.

Persists the authoritative list of collection definitions of each domain and
enumerates the domains known to the project.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from nosqlkit.core.exceptions import CollectionDefinitionError, PersistenceError
from nosqlkit.core.logging import get_logger
from nosqlkit.domain.entities import CollectionDefinition
from nosqlkit.domain.services import CollectionValidator
from nosqlkit.infrastructure.persistence.file_store import DataKind, FileStore
from nosqlkit.infrastructure.persistence.layout import ProjectLayout

if TYPE_CHECKING:
    from nosqlkit.infrastructure.generation.artifact_generator import (
        ArtifactGenerator,
        ArtifactResult,
    )

logger = get_logger(__name__)

# Decoration characters wrapped around labels in the domain registry ("@shop/")
DOMAIN_DECORATION = ("@", "/")


class CollectionStore:
    """Reads and writes collection definitions through a file store."""

    def __init__(
        self,
        file_store: FileStore,
        layout: ProjectLayout,
        generator: "ArtifactGenerator | None" = None,
        root_label: str = "ROOT",
    ) -> None:
        """Initialize the store.

        Args:
            file_store: Structured-data reader/writer.
            layout: Path layout of the project.
            generator: Artifact generator run after every write, if any.
            root_label: Reserved label of the root domain, never enumerated.
        """
        self.file_store = file_store
        self.layout = layout
        self.generator = generator
        self.root_label = root_label

    @staticmethod
    def clean_domain_label(label: str) -> str:
        for char in DOMAIN_DECORATION:
            label = label.replace(char, "")
        return label

    def get_domains(self) -> list[str]:
        """List the domains of the registry in stored order.

        Returns:
            Cleaned domain labels, without the root domain. Empty if the
            registry does not exist.

        Raises:
            PersistenceError: If the registry exists but cannot be read.
        """
        registry_file = self.layout.domains_file()
        if not self.file_store.exists(registry_file):
            logger.debug("Domain registry not found", path=str(registry_file))
            return []

        stored = self.file_store.read(registry_file, DataKind.JSON)
        if not stored:
            return []
        if not isinstance(stored, (Mapping, list)):
            raise PersistenceError(str(registry_file), "domain registry must be an object or a list")

        domains = []
        for entry in stored:
            label = self.clean_domain_label(str(entry))
            if label and label != self.root_label:
                domains.append(label)
        return domains

    def get_collections(self, domain: str) -> list[CollectionDefinition]:
        """Load the collection definitions of a domain.

        Returns:
            The stored definitions, or an empty list if the domain has no
            schema file yet.

        Raises:
            PersistenceError: If the schema file cannot be read or is malformed.
        """
        schema_file = self.layout.schema_file(domain)
        if not self.file_store.exists(schema_file):
            return []

        stored = self.file_store.read(schema_file, DataKind.JSON)
        if stored is None:
            return []
        if not isinstance(stored, list):
            raise PersistenceError(str(schema_file), "collection schema must be a list")

        try:
            return [CollectionDefinition.from_dict(raw) for raw in stored]
        except (AttributeError, TypeError, ValueError) as e:
            raise PersistenceError(str(schema_file), f"invalid collection definition: {e}") from e

    def set_collections(
        self,
        domain: str,
        collections: Sequence[CollectionDefinition | Mapping[str, Any]],
    ) -> list["ArtifactResult"]:
        """Replace the collection definitions of a domain and regenerate artifacts.

        Args:
            domain: The domain label.
            collections: The new, complete definition set.

        Returns:
            Per-file generation results (empty when no generator is configured).

        Raises:
            CollectionDefinitionError: If the definitions fail validation.
            PersistenceError: If the schema file cannot be written.
        """
        raw_collections = [
            c.to_dict() if isinstance(c, CollectionDefinition) else dict(c)
            for c in collections
        ]
        errors = CollectionValidator.validate_all(raw_collections)
        if errors:
            logger.warning(
                "Rejected collection definitions",
                domain=domain,
                error_count=len(errors),
            )
            raise CollectionDefinitionError(errors)

        definitions = [CollectionDefinition.from_dict(raw) for raw in raw_collections]
        schema_file = self.layout.schema_file(domain)
        self.file_store.write(
            schema_file,
            [d.to_dict() for d in definitions],
            DataKind.JSON,
            create_dirs=True,
        )
        logger.info(
            "Collection definitions stored",
            domain=domain,
            collection_count=len(definitions),
            path=str(schema_file),
        )

        if self.generator is None:
            return []
        return self.generator.generate_all(domain, definitions)

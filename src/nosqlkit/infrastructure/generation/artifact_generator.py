"""Artifact generator for collection definitions.

Renders a fixed set of templates for every collection of a domain. Base and
DTO artifacts are machine owned and rewritten on each run; the other
artifacts are skeletons written once and then left to hand edits.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from jinja2 import TemplateError

from nosqlkit.core.exceptions import ArtifactWriteError, PersistenceError
from nosqlkit.core.logging import LoggingContext, get_logger
from nosqlkit.domain.entities import CollectionDefinition
from nosqlkit.infrastructure.generation.template_renderer import TemplateRenderer
from nosqlkit.infrastructure.persistence.file_store import DataKind, FileStore
from nosqlkit.infrastructure.persistence.layout import ArtifactKind, ProjectLayout

logger = get_logger(__name__)


@dataclass(frozen=True)
class ArtifactTemplate:
    """A template and the artifact it produces.

    Attributes:
        template: Template file name.
        kind: Artifact kind, which determines the target directory.
        force: Overwrite an existing target on every run.
    """

    template: str
    kind: ArtifactKind
    force: bool


ARTIFACT_TEMPLATES: tuple[ArtifactTemplate, ...] = (
    ArtifactTemplate("model_base.py.j2", ArtifactKind.MODEL_BASE, force=True),
    ArtifactTemplate("model.py.j2", ArtifactKind.MODEL, force=False),
    ArtifactTemplate("api.py.j2", ArtifactKind.API, force=False),
    ArtifactTemplate("api_base.py.j2", ArtifactKind.API_BASE, force=True),
    ArtifactTemplate("dto.py.j2", ArtifactKind.DTO, force=True),
)


@dataclass
class ArtifactResult:
    """Outcome of generating one artifact file."""

    template: str
    path: Path
    created: bool
    skipped: bool = False
    error: ArtifactWriteError | None = None


class ArtifactGenerator:
    """Renders collection definitions into source files."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        file_store: FileStore,
        layout: ProjectLayout,
        templates: Sequence[ArtifactTemplate] = ARTIFACT_TEMPLATES,
    ) -> None:
        self.renderer = renderer
        self.file_store = file_store
        self.layout = layout
        self.templates = tuple(templates)

    def generate(self, domain: str, collection: CollectionDefinition) -> list[ArtifactResult]:
        """Generate every artifact of one collection.

        A failure on one file is logged and recorded in its result; the
        remaining templates are still processed.

        Args:
            domain: The owning domain.
            collection: The collection definition.

        Returns:
            One result per template, in template order.
        """
        context = {
            "domain": domain,
            "collection_name": collection.name,
            "properties": collection.properties,
        }
        results = []
        with LoggingContext(domain=domain, collection=collection.name):
            for artifact in self.templates:
                target = self.layout.artifact_file(domain, artifact.kind, collection.name)
                results.append(self._generate_file(artifact, target, context))
        return results

    def generate_all(
        self, domain: str, collections: Sequence[CollectionDefinition]
    ) -> list[ArtifactResult]:
        """Generate the artifacts of every collection of a domain."""
        results: list[ArtifactResult] = []
        for collection in collections:
            results.extend(self.generate(domain, collection))

        created = sum(1 for r in results if r.created)
        failed = sum(1 for r in results if r.error is not None)
        logger.info(
            "Artifacts generated",
            domain=domain,
            collection_count=len(collections),
            created=created,
            skipped=sum(1 for r in results if r.skipped),
            failed=failed,
        )
        return results

    def _generate_file(
        self, artifact: ArtifactTemplate, target: Path, context: dict
    ) -> ArtifactResult:
        if not artifact.force and self.file_store.exists(target):
            logger.debug("Artifact already exists, keeping it", path=str(target))
            return ArtifactResult(artifact.template, target, created=False, skipped=True)

        try:
            self.file_store.ensure_dir(target.parent)
            content = self.renderer.render(artifact.template, context)
            self.file_store.write(target, content, DataKind.TEXT, create_dirs=False)
        except (PersistenceError, TemplateError) as e:
            error = ArtifactWriteError(str(target), str(e))
            logger.error("Artifact not created", path=str(target), error=str(e))
            return ArtifactResult(artifact.template, target, created=False, error=error)

        return ArtifactResult(artifact.template, target, created=True)

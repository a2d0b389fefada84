"""Path layout of a NoSQLKit project.

Every domain owns a directory under ``core_dir``::

    <core_dir>/<domain>/config/schema.json
    <core_dir>/<domain>/models/base/<Collection>.py
    <core_dir>/<domain>/models/<Collection>.py
    <core_dir>/<domain>/api/<Collection>.py
    <core_dir>/<domain>/api/base/<Collection>.py
    <core_dir>/<domain>/dto/models/<Collection>.py

The domain registry lives at ``<config_dir>/domains.json``.
"""

from enum import Enum
from pathlib import Path

from nosqlkit.core.config import Settings


class ArtifactKind(str, Enum):
    """Kinds of generated artifacts, valued by their directory below the domain."""

    MODEL_BASE = "models/base"
    MODEL = "models"
    API = "api"
    API_BASE = "api/base"
    DTO = "dto/models"


class ProjectLayout:
    """Computes the paths used by the collection store and the generator."""

    DOMAINS_FILENAME = "domains.json"
    SCHEMA_FILENAME = "schema.json"
    ARTIFACT_SUFFIX = ".py"

    def __init__(self, core_dir: str | Path, config_dir: str | Path) -> None:
        self.core_dir = Path(core_dir)
        self.config_dir = Path(config_dir)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProjectLayout":
        return cls(core_dir=settings.core_dir, config_dir=settings.config_dir)

    def domains_file(self) -> Path:
        return self.config_dir / self.DOMAINS_FILENAME

    def domain_dir(self, domain: str) -> Path:
        return self.core_dir / domain

    def schema_file(self, domain: str) -> Path:
        return self.domain_dir(domain) / "config" / self.SCHEMA_FILENAME

    def artifact_dir(self, domain: str, kind: ArtifactKind) -> Path:
        return self.domain_dir(domain).joinpath(*kind.value.split("/"))

    def artifact_file(self, domain: str, kind: ArtifactKind, collection_name: str) -> Path:
        return self.artifact_dir(domain, kind) / f"{collection_name}{self.ARTIFACT_SUFFIX}"

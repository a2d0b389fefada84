"""Persistence of collection definitions and project files."""

from nosqlkit.infrastructure.persistence.collection_store import CollectionStore
from nosqlkit.infrastructure.persistence.file_store import DataKind, FileStore, LocalFileStore
from nosqlkit.infrastructure.persistence.layout import ArtifactKind, ProjectLayout

__all__ = [
    "ArtifactKind",
    "CollectionStore",
    "DataKind",
    "FileStore",
    "LocalFileStore",
    "ProjectLayout",
]

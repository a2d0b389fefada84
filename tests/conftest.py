"""Pytest configuration for all tests."""

from pathlib import Path

import pytest

from nosqlkit.core.config import Settings
from nosqlkit.domain.entities import CollectionDefinition, PropertyDefinition
from nosqlkit.infrastructure.generation import ArtifactGenerator, TemplateRenderer
from nosqlkit.infrastructure.persistence import CollectionStore, LocalFileStore, ProjectLayout


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing every directory into a temporary project."""
    return Settings(
        _env_file=None,
        environment="testing",
        core_dir=str(tmp_path / "modules"),
        config_dir=str(tmp_path / "config"),
        mongo_uri="mongodb://localhost:27017",
    )


@pytest.fixture
def layout(settings: Settings) -> ProjectLayout:
    return ProjectLayout.from_settings(settings)


@pytest.fixture
def file_store() -> LocalFileStore:
    return LocalFileStore()


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def generator(renderer, file_store, layout) -> ArtifactGenerator:
    return ArtifactGenerator(renderer=renderer, file_store=file_store, layout=layout)


@pytest.fixture
def collection_store(file_store, layout, generator) -> CollectionStore:
    return CollectionStore(file_store=file_store, layout=layout, generator=generator)


@pytest.fixture
def product() -> CollectionDefinition:
    """The Product collection of the shop domain."""
    return CollectionDefinition(
        name="Product",
        properties=[
            PropertyDefinition(name="price", type="double", required=True),
            PropertyDefinition(name="status", type="enum", enum="active|archived"),
        ],
    )


@pytest.fixture
def customer() -> CollectionDefinition:
    return CollectionDefinition(
        name="Customer",
        properties=[
            PropertyDefinition(name="email", type="string", required=True, description="Login email"),
            PropertyDefinition(name="age", type="int"),
            PropertyDefinition(name="joined", type="date"),
        ],
    )

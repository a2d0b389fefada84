"""Source code generation from collection definitions."""

from nosqlkit.infrastructure.generation.artifact_generator import (
    ARTIFACT_TEMPLATES,
    ArtifactGenerator,
    ArtifactResult,
    ArtifactTemplate,
)
from nosqlkit.infrastructure.generation.template_renderer import TemplateRenderer

__all__ = [
    "ARTIFACT_TEMPLATES",
    "ArtifactGenerator",
    "ArtifactResult",
    "ArtifactTemplate",
    "TemplateRenderer",
]

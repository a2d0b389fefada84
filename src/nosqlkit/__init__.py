"""NoSQLKit - collection definitions to MongoDB validators and source code.

Turns user-authored collection definitions into MongoDB ``$jsonSchema``
validators and generated model, API and DTO source files.
"""

__version__ = "0.1.0"

from nosqlkit.application.services import NoSQLService
from nosqlkit.domain.entities import CollectionDefinition, PropertyDefinition, ValidationSchema
from nosqlkit.domain.services import SchemaSynthesizer

__all__ = [
    "CollectionDefinition",
    "NoSQLService",
    "PropertyDefinition",
    "SchemaSynthesizer",
    "ValidationSchema",
    "__version__",
]

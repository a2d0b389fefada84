"""Domain entities for NoSQLKit.

Entities are pure Python dataclasses that represent core concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from nosqlkit.domain.entities.collection import (
    ENUM_SEPARATOR,
    CollectionDefinition,
    PropertyDefinition,
)
from nosqlkit.domain.entities.validation_schema import (
    EnumSchema,
    NumberSchema,
    PropertySchema,
    StringSchema,
    ValidationSchema,
)

__all__ = [
    "ENUM_SEPARATOR",
    "CollectionDefinition",
    "EnumSchema",
    "NumberSchema",
    "PropertyDefinition",
    "PropertySchema",
    "StringSchema",
    "ValidationSchema",
]

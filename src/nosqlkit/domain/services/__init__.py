"""Domain services for NoSQLKit.

Services contain logic that doesn't naturally fit within a single entity.
They have no dependencies on infrastructure or external frameworks.
"""

from nosqlkit.domain.services.collection_validator import (
    NAME_PATTERN,
    RESERVED_PROPERTY_NAMES,
    CollectionValidationError,
    CollectionValidator,
)
from nosqlkit.domain.services.property_types import (
    FIELD_VALIDATIONS,
    NUMERIC_TYPES,
    PROPERTY_TYPES,
    FieldValidation,
    PropertyType,
    list_field_validations,
    list_property_types,
    python_type_for,
)
from nosqlkit.domain.services.schema_synthesizer import (
    SchemaSynthesizer,
    select_fragment,
    to_json_schema,
    to_validator,
)

__all__ = [
    "FIELD_VALIDATIONS",
    "NAME_PATTERN",
    "NUMERIC_TYPES",
    "PROPERTY_TYPES",
    "RESERVED_PROPERTY_NAMES",
    "CollectionValidationError",
    "CollectionValidator",
    "FieldValidation",
    "PropertyType",
    "SchemaSynthesizer",
    "list_field_validations",
    "list_property_types",
    "python_type_for",
    "select_fragment",
    "to_json_schema",
    "to_validator",
]

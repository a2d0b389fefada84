"""Property type registry.

Declares the closed vocabularies used by collection definitions: the semantic
property types (which double as MongoDB ``$jsonSchema`` type tags) and the
validation rules that generated model fields may carry.
"""

from enum import Enum
from typing import Any


class PropertyType(str, Enum):
    """Supported property types for collection definitions."""

    INTEGER = "int"
    LONG = "long"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    ENUM = "enum"
    BOOLEAN = "bool"
    DATE = "date"
    TIMESTAMP = "timestamp"
    OBJECT_ID = "objectId"
    OBJECT = "object"
    ARRAY = "array"
    BINARY = "binData"

    @classmethod
    def _missing_(cls, value: object) -> "PropertyType | None":
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
            return _ALIASES.get(key)
        return None

    @classmethod
    def parse(cls, value: str | None) -> "PropertyType | None":
        """Resolve a type tag or alias, returning None when unknown."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_numeric(self) -> bool:
        return self in NUMERIC_TYPES

    @property
    def bson_alias(self) -> str | None:
        """MongoDB ``bsonType`` alias; ``enum`` is constrained by its keyword only."""
        if self is PropertyType.ENUM:
            return None
        return self.value

    @property
    def python_type(self) -> str:
        """Annotation used for this type in generated source files."""
        return _PYTHON_TYPES[self]


class FieldValidation(str, Enum):
    """Validation rules usable on generated model fields."""

    REQUIRED = "required"
    NOT_EMPTY = "notEmpty"
    EMAIL = "email"
    URL = "url"
    REGEX = "regex"
    NUMERIC = "numeric"
    PHONE = "phone"
    DATE = "date"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"


_ALIASES = {
    "integer": PropertyType.INTEGER,
    "float": PropertyType.DOUBLE,
    "str": PropertyType.STRING,
    "text": PropertyType.STRING,
    "boolean": PropertyType.BOOLEAN,
    "datetime": PropertyType.DATE,
    "object-id": PropertyType.OBJECT_ID,
    "object_id": PropertyType.OBJECT_ID,
    "binary": PropertyType.BINARY,
}

_PYTHON_TYPES = {
    PropertyType.INTEGER: "int",
    PropertyType.LONG: "int",
    PropertyType.DOUBLE: "float",
    PropertyType.DECIMAL: "Decimal",
    PropertyType.STRING: "str",
    PropertyType.ENUM: "str",
    PropertyType.BOOLEAN: "bool",
    PropertyType.DATE: "datetime",
    PropertyType.TIMESTAMP: "datetime",
    PropertyType.OBJECT_ID: "str",
    PropertyType.OBJECT: "dict[str, Any]",
    PropertyType.ARRAY: "list[Any]",
    PropertyType.BINARY: "bytes",
}

NUMERIC_TYPES = frozenset({
    PropertyType.INTEGER,
    PropertyType.LONG,
    PropertyType.DOUBLE,
    PropertyType.DECIMAL,
})

PROPERTY_TYPES = frozenset(t.value for t in PropertyType)
FIELD_VALIDATIONS = frozenset(v.value for v in FieldValidation)

if not PROPERTY_TYPES or not FIELD_VALIDATIONS:
    raise RuntimeError("Property type registry is empty")
if set(_PYTHON_TYPES) != set(PropertyType):
    raise RuntimeError("Every property type needs a generated-code annotation")


def list_property_types() -> frozenset[str]:
    """Return the full vocabulary of property type tags."""
    return PROPERTY_TYPES


def list_field_validations() -> frozenset[str]:
    """Return the full vocabulary of field validation rule identifiers."""
    return FIELD_VALIDATIONS


def python_type_for(property_type: str | None, default: str = "Any") -> str:
    """Map a raw property type tag to a Python annotation for templates."""
    resolved = PropertyType.parse(property_type)
    return resolved.python_type if resolved else default


def resolve_bson_type(type_tag: Any) -> Any:
    """Normalize a type tag to its MongoDB alias, leaving unknown tags untouched."""
    if not isinstance(type_tag, str):
        return type_tag
    resolved = PropertyType.parse(type_tag)
    if resolved is None:
        return type_tag
    return resolved.bson_alias

"""Collection validation service for collection definitions.

Provides validation for collection names, property definitions and property
types before a domain's definitions are persisted.
"""

import keyword
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from nosqlkit.domain.entities.collection import ENUM_SEPARATOR
from nosqlkit.domain.services.property_types import PropertyType

# "_id" belongs to MongoDB; the rest are members or imported names of the
# generated models, which a field of the same name would shadow
RESERVED_PROPERTY_NAMES = frozenset({
    "_id",
    "id",
    "model_config",
    "collection_name",
    "required_fields",
    "Any",
    "BaseModel",
    "ClassVar",
    "ConfigDict",
    "Decimal",
    "Field",
    "Literal",
    "datetime",
    "bool",
    "bytes",
    "dict",
    "float",
    "int",
    "list",
    "str",
})

# pydantic reserves this prefix for BaseModel members
RESERVED_PROPERTY_PREFIX = "model_"

# Pattern for valid collection and property names
NAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*$")


@dataclass
class CollectionValidationError:
    """A single collection validation error."""

    field: str
    message: str
    code: str


class CollectionValidator:
    """Validator for collection definitions.

    Works on raw mappings so that malformed input is reported instead of
    failing during entity construction.
    """

    MAX_NAME_LENGTH = 64
    MAX_PROPERTY_NAME_LENGTH = 64

    @classmethod
    def validate_name(cls, name: str, path: str = "name") -> list[CollectionValidationError]:
        """Validate a collection name.

        Args:
            name: The collection name to validate.
            path: Location of the name, used in error messages.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []

        if not name:
            errors.append(
                CollectionValidationError(
                    field=path,
                    message="Collection name is required",
                    code="name_required",
                )
            )
            return errors

        if len(name) > cls.MAX_NAME_LENGTH:
            errors.append(
                CollectionValidationError(
                    field=path,
                    message=f"Collection name must be at most {cls.MAX_NAME_LENGTH} characters",
                    code="name_too_long",
                )
            )

        if not NAME_PATTERN.match(name):
            errors.append(
                CollectionValidationError(
                    field=path,
                    message="Collection name must start with a letter and contain only alphanumeric characters and underscores",
                    code="name_invalid_format",
                )
            )
        elif keyword.iskeyword(name):
            errors.append(
                CollectionValidationError(
                    field=path,
                    message=f"Collection name '{name}' is a Python keyword",
                    code="name_keyword",
                )
            )

        return errors

    @classmethod
    def validate_property_name(cls, name: str, path: str) -> list[CollectionValidationError]:
        """Validate a property name.

        Args:
            name: The property name to validate.
            path: Location of the property, used in error messages.

        Returns:
            List of validation errors (empty if valid).
        """
        errors = []
        field_path = f"{path}.name"

        if not name:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message="Property name is required",
                    code="property_name_required",
                )
            )
            return errors

        if len(name) > cls.MAX_PROPERTY_NAME_LENGTH:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Property name must be at most {cls.MAX_PROPERTY_NAME_LENGTH} characters",
                    code="property_name_too_long",
                )
            )

        if name in RESERVED_PROPERTY_NAMES or name.startswith(RESERVED_PROPERTY_PREFIX):
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Property name '{name}' is reserved and cannot be used",
                    code="property_name_reserved",
                )
            )
        elif not NAME_PATTERN.match(name):
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message="Property name must start with a letter and contain only alphanumeric characters and underscores",
                    code="property_name_invalid_format",
                )
            )
        elif keyword.iskeyword(name):
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Property name '{name}' is a Python keyword",
                    code="property_name_keyword",
                )
            )

        return errors

    @classmethod
    def validate_property_type(cls, property_type: str, path: str) -> list[CollectionValidationError]:
        """Validate a property type against the registry."""
        errors = []
        field_path = f"{path}.type"

        if not property_type:
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message="Property type is required",
                    code="property_type_required",
                )
            )
            return errors

        if PropertyType.parse(property_type) is None:
            valid_types = [t.value for t in PropertyType]
            errors.append(
                CollectionValidationError(
                    field=field_path,
                    message=f"Invalid property type '{property_type}'. Valid types: {', '.join(valid_types)}",
                    code="property_type_invalid",
                )
            )

        return errors

    @classmethod
    def validate_enum(cls, prop: Mapping[str, Any], path: str) -> list[CollectionValidationError]:
        """Validate that an enum property lists at least one value."""
        values = prop.get("enum")
        if isinstance(values, str):
            values = values.split(ENUM_SEPARATOR)
        if not values or not any(str(v).strip() for v in values):
            return [
                CollectionValidationError(
                    field=f"{path}.enum",
                    message="Enum property requires at least one value",
                    code="enum_values_required",
                )
            ]
        return []

    @classmethod
    def validate_property(cls, prop: Mapping[str, Any], path: str) -> list[CollectionValidationError]:
        """Validate a single property definition."""
        errors = []
        errors.extend(cls.validate_property_name(prop.get("name", ""), path))

        property_type = prop.get("type", "")
        errors.extend(cls.validate_property_type(property_type, path))

        if PropertyType.parse(property_type) is PropertyType.ENUM:
            errors.extend(cls.validate_enum(prop, path))

        return errors

    @classmethod
    def validate_properties(
        cls, properties: Sequence[Mapping[str, Any]], path: str
    ) -> list[CollectionValidationError]:
        """Validate the property list of one collection."""
        errors = []
        seen_names: set[str] = set()
        for i, prop in enumerate(properties):
            prop_path = f"{path}.properties[{i}]"
            errors.extend(cls.validate_property(prop, prop_path))

            name = prop.get("name", "")
            if name and name in seen_names:
                errors.append(
                    CollectionValidationError(
                        field=f"{prop_path}.name",
                        message=f"Duplicate property name '{name}'",
                        code="property_name_duplicate",
                    )
                )
            seen_names.add(name)

        return errors

    @classmethod
    def validate(cls, collection: Mapping[str, Any], path: str = "collection") -> list[CollectionValidationError]:
        """Validate a complete collection definition."""
        errors = []
        errors.extend(cls.validate_name(collection.get("name", ""), f"{path}.name"))
        errors.extend(cls.validate_properties(collection.get("properties") or [], path))
        return errors

    @classmethod
    def validate_all(cls, collections: Sequence[Mapping[str, Any]]) -> list[CollectionValidationError]:
        """Validate the full definition set of a domain."""
        errors = []
        seen_names: set[str] = set()
        for i, collection in enumerate(collections):
            path = f"collections[{i}]"
            errors.extend(cls.validate(collection, path))

            name = collection.get("name", "")
            if name and name in seen_names:
                errors.append(
                    CollectionValidationError(
                        field=f"{path}.name",
                        message=f"Duplicate collection name '{name}'",
                        code="name_duplicate",
                    )
                )
            seen_names.add(name)

        return errors

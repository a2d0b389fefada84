"""Schema synthesis for collection validation.

Turns a collection definition into the validation document MongoDB applies
to a collection. Synthesis is pure: the same definition always yields a
structurally identical schema.
"""

from typing import Any

from nosqlkit.core.exceptions import SchemaSynthesisError
from nosqlkit.domain.entities import (
    CollectionDefinition,
    EnumSchema,
    NumberSchema,
    PropertyDefinition,
    PropertySchema,
    StringSchema,
    ValidationSchema,
)
from nosqlkit.domain.services.property_types import PropertyType, resolve_bson_type


def select_fragment(prop: PropertyDefinition, collection: str = "") -> PropertySchema:
    """Build the schema fragment variant for one property.

    Numeric types map to a number fragment, ``enum`` to an enum fragment and
    every other type falls back to a string fragment.

    Raises:
        SchemaSynthesisError: If an enum property has no allowed values.
    """
    property_type = PropertyType.parse(prop.type)

    if property_type is PropertyType.ENUM:
        values = prop.enum_values
        if not any(value.strip() for value in values):
            raise SchemaSynthesisError(
                collection, "enum property requires at least one value", prop.name
            )
        fragment: PropertySchema = EnumSchema(enum=values)
    elif property_type is not None and property_type.is_numeric:
        fragment = NumberSchema()
    else:
        fragment = StringSchema()

    if prop.bson_type or prop.type:
        fragment.bson_type = prop.bson_type or prop.type
    if prop.description is not None:
        fragment.description = prop.description
    return fragment


class SchemaSynthesizer:
    """Builds validation schemas from collection definitions."""

    def synthesize(self, collection: CollectionDefinition) -> ValidationSchema:
        """Synthesize the validation schema of a collection.

        Properties are processed in declaration order; required names are
        accumulated in that same order.

        Args:
            collection: The collection definition (read only).

        Returns:
            A new ValidationSchema.

        Raises:
            SchemaSynthesisError: On an enum property without values or a
                duplicated property name.
        """
        schema = ValidationSchema()
        for prop in collection.properties:
            if prop.name in schema.properties:
                raise SchemaSynthesisError(
                    collection.name, "duplicate property name", prop.name
                )
            fragment = select_fragment(prop, collection.name)
            if prop.required:
                schema.required.append(prop.name)
            schema.properties[prop.name] = fragment
        return schema


def to_json_schema(schema: ValidationSchema) -> dict[str, Any]:
    """Serialize a validation schema to MongoDB's ``$jsonSchema`` dialect.

    Type tags are normalized to their BSON aliases. The ``enum`` pseudo type
    has no alias so enum fragments keep only their ``enum`` keyword. An empty
    ``required`` list is omitted because MongoDB rejects it.
    """
    properties: dict[str, Any] = {}
    for name, fragment in schema.properties.items():
        document = fragment.to_dict()
        if "bsonType" in document:
            alias = resolve_bson_type(document["bsonType"])
            if alias is None:
                del document["bsonType"]
            else:
                document["bsonType"] = alias
        properties[name] = document

    json_schema: dict[str, Any] = {"bsonType": "object", "properties": properties}
    if schema.required:
        json_schema["required"] = list(schema.required)
    return json_schema


def to_validator(schema: ValidationSchema) -> dict[str, Any]:
    """Wrap a validation schema as a collection ``validator`` option."""
    return {"$jsonSchema": to_json_schema(schema)}

"""Tests for the property type registry."""

import pytest

from nosqlkit.domain.services.property_types import (
    NUMERIC_TYPES,
    FieldValidation,
    PropertyType,
    list_field_validations,
    list_property_types,
    python_type_for,
    resolve_bson_type,
)


def test_list_property_types_is_complete():
    types = list_property_types()
    assert types == {t.value for t in PropertyType}
    assert {"int", "long", "double", "string", "enum", "objectId", "date", "bool", "array"} <= types


def test_list_field_validations_is_complete():
    validations = list_field_validations()
    assert validations == {v.value for v in FieldValidation}
    assert {"notEmpty", "email", "regex"} <= validations


def test_vocabularies_are_immutable():
    assert isinstance(list_property_types(), frozenset)
    assert isinstance(list_field_validations(), frozenset)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("int", PropertyType.INTEGER),
        ("integer", PropertyType.INTEGER),
        ("Double", PropertyType.DOUBLE),
        ("objectid", PropertyType.OBJECT_ID),
        ("object-id", PropertyType.OBJECT_ID),
        ("boolean", PropertyType.BOOLEAN),
        ("enum", PropertyType.ENUM),
    ],
)
def test_parse_accepts_tags_and_aliases(raw, expected):
    assert PropertyType.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", None, "uuid", "money"])
def test_parse_unknown_returns_none(raw):
    assert PropertyType.parse(raw) is None


def test_numeric_types():
    assert NUMERIC_TYPES == {
        PropertyType.INTEGER,
        PropertyType.LONG,
        PropertyType.DOUBLE,
        PropertyType.DECIMAL,
    }
    assert PropertyType.LONG.is_numeric
    assert not PropertyType.STRING.is_numeric
    assert not PropertyType.ENUM.is_numeric


def test_bson_alias():
    assert PropertyType.DOUBLE.bson_alias == "double"
    assert PropertyType.OBJECT_ID.bson_alias == "objectId"
    assert PropertyType.ENUM.bson_alias is None


def test_resolve_bson_type():
    assert resolve_bson_type("integer") == "int"
    assert resolve_bson_type("enum") is None
    assert resolve_bson_type("custom") == "custom"
    assert resolve_bson_type(["date", "null"]) == ["date", "null"]


def test_python_type_for():
    assert python_type_for("long") == "int"
    assert python_type_for("double") == "float"
    assert python_type_for("date") == "datetime"
    assert python_type_for("unknown") == "Any"

"""Tests for collection definition entities."""

import pytest

from nosqlkit.domain.entities import CollectionDefinition, PropertyDefinition


def test_property_bson_type_defaults_to_type():
    prop = PropertyDefinition(name="price", type="double")
    assert prop.bson_type == "double"
    assert prop.required is False


def test_property_enum_values():
    assert PropertyDefinition(name="s", type="enum", enum="a|b|c").enum_values == ["a", "b", "c"]
    assert PropertyDefinition(name="s", type="enum", enum=["a", "b"]).enum_values == ["a", "b"]
    assert PropertyDefinition(name="s", type="enum").enum_values == []
    assert PropertyDefinition(name="s", type="enum", enum="").enum_values == []


def test_property_from_dict():
    prop = PropertyDefinition.from_dict({
        "name": "status",
        "type": "enum",
        "description": "Lifecycle",
        "required": 1,
        "enum": "active|archived",
    })
    assert prop.name == "status"
    assert prop.bson_type == "enum"
    assert prop.description == "Lifecycle"
    assert prop.required is True


def test_property_to_dict_omits_enum_when_absent():
    data = PropertyDefinition(name="price", type="double", required=True).to_dict()
    assert data == {
        "name": "price",
        "type": "double",
        "bsonType": "double",
        "description": None,
        "required": True,
    }


def test_collection_requires_name():
    with pytest.raises(ValueError, match="Collection name is required"):
        CollectionDefinition(name="")


def test_collection_from_dict_builds_properties():
    collection = CollectionDefinition.from_dict({
        "name": "Product",
        "properties": [
            {"name": "price", "type": "double", "required": True},
            {"name": "status", "type": "enum", "enum": "active|archived"},
        ],
    })
    assert [p.name for p in collection.properties] == ["price", "status"]
    assert [p.required for p in collection.properties] == [True, False]
    assert collection.properties[1].enum_values == ["active", "archived"]


def test_collection_accepts_raw_property_mappings():
    collection = CollectionDefinition(name="Tag", properties=[{"name": "label", "type": "string"}])
    assert isinstance(collection.properties[0], PropertyDefinition)


def test_collection_dict_round_trip(product):
    assert CollectionDefinition.from_dict(product.to_dict()) == product

"""Tests for the NoSQL service facade."""

import json
from unittest.mock import MagicMock

import pytest
from pymongo.errors import OperationFailure

from nosqlkit.application.services import NoSQLService
from nosqlkit.core.exceptions import CollectionDefinitionError


@pytest.fixture
def database():
    return MagicMock()


@pytest.fixture
def service(settings, database):
    return NoSQLService.from_settings(settings, connection_factory=MagicMock(return_value=database))


def test_types_and_validations_are_sorted(service):
    types = service.get_types()
    assert types == sorted(types)
    assert {"int", "double", "string", "enum"} <= set(types)
    assert "email" in service.get_validations()


def test_domains(service, layout):
    layout.domains_file().parent.mkdir(parents=True)
    layout.domains_file().write_text(json.dumps({"@ROOT/": {}, "@shop/": {}}), encoding="utf-8")
    assert service.get_domains() == ["shop"]


def test_set_and_get_collections(service, layout, product):
    results = service.set_collections("shop", [product])

    assert len(results) == 5
    assert service.get_collections("shop") == [product]
    assert layout.schema_file("shop").is_file()


def test_set_collections_rejects_invalid_input(service):
    with pytest.raises(CollectionDefinitionError):
        service.set_collections("shop", [{"name": "1bad", "properties": []}])


def test_generate_uses_stored_definitions(service, layout, product):
    service.set_collections("shop", [product])

    results = service.generate("shop")

    assert [r.created for r in results] == [True, False, False, True, True]


def test_generate_empty_domain(service):
    assert service.generate("shop") == []


def test_get_validation_schema(service, product):
    service.set_collections("shop", [product])

    assert service.get_validation_schema("shop", "Product") == {
        "bsonType": "object",
        "properties": {
            "price": {"bsonType": "double"},
            "status": {"enum": ["active", "archived"]},
        },
        "required": ["price"],
    }


def test_get_validation_schema_unknown_collection(service):
    with pytest.raises(KeyError):
        service.get_validation_schema("shop", "Missing")


def test_sync_collections(service, database, product, customer):
    service.set_collections("shop", [product, customer])
    database.create_collection.side_effect = [OperationFailure("exists", code=48), None]

    assert service.sync_collections("shop") is True


def test_sync_report(service, database, product, customer):
    service.set_collections("shop", [product, customer])
    database.create_collection.side_effect = [OperationFailure("exists", code=48), None]

    report = service.sync_report("shop")

    assert report.success is True
    assert [(r.name, r.status.value) for r in report.results] == [
        ("Product", "exists"),
        ("Customer", "created"),
    ]


def test_sync_failure(service, database, product):
    service.set_collections("shop", [product])
    database.create_collection.side_effect = OperationFailure("unauthorized", code=13)

    assert service.sync_collections("shop") is False


def test_settings_drive_sync_options(settings, database, product):
    settings = settings.model_copy(update={"sync_update_existing": True})
    service = NoSQLService.from_settings(settings, connection_factory=MagicMock(return_value=database))
    service.set_collections("shop", [product])
    database.create_collection.side_effect = OperationFailure("exists", code=48)

    report = service.sync_report("shop")

    assert report.results[0].status.value == "updated"
    database.command.assert_called_once()


def test_close_releases_connection(settings):
    factory = MagicMock()
    service = NoSQLService.from_settings(settings, connection_factory=factory)

    service.close()

    factory.close.assert_called_once()

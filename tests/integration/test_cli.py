"""CLI tests running the commands against a temporary project."""

import json
from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from nosqlkit.cli import cli
from nosqlkit.core.exceptions import ExternalSyncError, PersistenceError
from nosqlkit.infrastructure.mongo import CollectionSyncResult, SyncReport, SyncStatus


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep log output out of the command output."""
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    with patch("nosqlkit.cli.configure_logging") as mock_configure:
        yield mock_configure
    structlog.reset_defaults()


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(settings, collection_store, product, layout):
    layout.domains_file().parent.mkdir(parents=True, exist_ok=True)
    layout.domains_file().write_text(json.dumps({"@ROOT/": {}, "@shop/": {}}), encoding="utf-8")
    collection_store.set_collections("shop", [product])
    with patch("nosqlkit.cli.get_settings", return_value=settings):
        yield settings


def test_types(runner, project):
    result = runner.invoke(cli, ["types"])
    assert result.exit_code == 0
    assert "double" in result.output.splitlines()
    assert "enum" in result.output.splitlines()


def test_validations(runner, project):
    result = runner.invoke(cli, ["validations"])
    assert result.exit_code == 0
    assert "email" in result.output.splitlines()


def test_domains(runner, project):
    result = runner.invoke(cli, ["domains"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["shop"]


def test_collections(runner, project, product):
    result = runner.invoke(cli, ["collections", "shop"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [product.to_dict()]


def test_schema(runner, project):
    result = runner.invoke(cli, ["schema", "shop", "Product"])
    assert result.exit_code == 0
    document = json.loads(result.output)
    assert document["$jsonSchema"]["required"] == ["price"]
    assert document["$jsonSchema"]["properties"]["price"] == {"bsonType": "double"}


def test_schema_unknown_collection(runner, project):
    result = runner.invoke(cli, ["schema", "shop", "Missing"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_generate_keeps_skeletons(runner, project, layout):
    result = runner.invoke(cli, ["generate", "shop"])
    assert result.exit_code == 0
    states = [line.split()[0] for line in result.output.splitlines()]
    assert states == ["written", "kept", "kept", "written", "written"]


def test_log_level_option_overrides_settings(runner, project, quiet_logging):
    result = runner.invoke(cli, ["--log-level", "DEBUG", "types"])
    assert result.exit_code == 0
    configured = quiet_logging.call_args.args[0]
    assert configured.log_level == "DEBUG"


@patch("nosqlkit.cli.NoSQLService")
def test_sync_success(mock_service_cls, runner, project):
    mock_service_cls.from_settings.return_value.sync_report.return_value = SyncReport(
        domain="shop",
        results=[
            CollectionSyncResult("Product", SyncStatus.EXISTS),
            CollectionSyncResult("Customer", SyncStatus.CREATED),
        ],
    )

    result = runner.invoke(cli, ["sync", "shop"])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["exists   Product", "created  Customer"]


@patch("nosqlkit.cli.NoSQLService")
def test_sync_failure_exits_non_zero(mock_service_cls, runner, project):
    mock_service_cls.from_settings.return_value.sync_report.return_value = SyncReport(
        domain="shop",
        results=[
            CollectionSyncResult(
                "Product", SyncStatus.FAILED, ExternalSyncError("Product", "not authorized", 13)
            ),
        ],
    )

    result = runner.invoke(cli, ["sync", "shop"])

    assert result.exit_code == 1
    assert "failed   Product (Product: not authorized)" in result.output


def test_info(runner, project):
    result = runner.invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "NoSQLKit v0.1.0" in result.output
    assert "(per domain)" in result.output


def test_sync_without_collections(runner, project):
    with patch("nosqlkit.cli.NoSQLService") as mock_service_cls:
        mock_service_cls.from_settings.return_value.sync_report.return_value = SyncReport("crm")
        result = runner.invoke(cli, ["sync", "crm"])
    assert result.exit_code == 0
    assert result.output == ""


def test_build_service_uses_settings(runner, project):
    with patch("nosqlkit.cli.NoSQLService") as mock_service_cls:
        mock_service_cls.from_settings.return_value.get_domains.return_value = []
        runner.invoke(cli, ["domains"])
    mock_service_cls.from_settings.assert_called_once_with(project)


def test_info_masks_credentials(runner, project):
    settings = project.model_copy(update={"mongo_uri": "mongodb://admin:s3cret@db:27017"})
    with patch("nosqlkit.cli.get_settings", return_value=settings):
        result = runner.invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "s3cret" not in result.output
    assert "mongodb://***@db:27017" in result.output


def test_sync_closes_the_client(runner, project):
    with patch("nosqlkit.cli.NoSQLService") as mock_service_cls:
        service = mock_service_cls.from_settings.return_value
        service.sync_report.return_value = SyncReport("shop")
        runner.invoke(cli, ["sync", "shop"])
    service.close.assert_called_once()


def test_sync_closes_the_client_on_error(runner, project):
    with patch("nosqlkit.cli.NoSQLService") as mock_service_cls:
        service = mock_service_cls.from_settings.return_value
        service.sync_report.side_effect = PersistenceError("schema.json", "invalid JSON")
        result = runner.invoke(cli, ["sync", "shop"])
    assert result.exit_code == 1
    service.close.assert_called_once()

"""Command-line interface for NoSQLKit.

This module provides the CLI commands for inspecting collection definitions,
regenerating artifacts and synchronizing validators with MongoDB.
"""

import json
from typing import Any, NoReturn

import click

from nosqlkit.application.services import NoSQLService
from nosqlkit.core.config import get_settings
from nosqlkit.core.exceptions import NoSQLKitError
from nosqlkit.core.logging import configure_logging, get_logger


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _build_service(ctx: click.Context) -> NoSQLService:
    settings = get_settings()
    overrides: dict[str, Any] = {}
    if ctx.obj.get("log_level"):
        overrides["log_level"] = ctx.obj["log_level"]
    if ctx.obj.get("debug"):
        overrides["debug"] = True
    if overrides:
        settings = settings.model_copy(update=overrides)
    configure_logging(settings)
    return NoSQLService.from_settings(settings)


@click.group()
@click.version_option(version="0.1.0", prog_name="NoSQLKit")
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Enable debug mode",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides environment)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_level: str | None) -> None:
    """NoSQLKit - MongoDB validators and source code from collection definitions."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["log_level"] = log_level


@cli.command()
@click.pass_context
def types(ctx: click.Context) -> None:
    """List the supported property types."""
    for property_type in _build_service(ctx).get_types():
        click.echo(property_type)


@cli.command()
@click.pass_context
def validations(ctx: click.Context) -> None:
    """List the supported field validation rules."""
    for validation in _build_service(ctx).get_validations():
        click.echo(validation)


@cli.command()
@click.pass_context
def domains(ctx: click.Context) -> None:
    """List the registered domains."""
    try:
        for domain in _build_service(ctx).get_domains():
            click.echo(domain)
    except NoSQLKitError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)


@cli.command()
@click.argument("domain")
@click.pass_context
def collections(ctx: click.Context, domain: str) -> None:
    """Print the collection definitions of DOMAIN as JSON."""
    try:
        definitions = _build_service(ctx).get_collections(domain)
    except NoSQLKitError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)
    _echo_json([d.to_dict() for d in definitions])


@cli.command()
@click.argument("domain")
@click.argument("collection")
@click.pass_context
def schema(ctx: click.Context, domain: str, collection: str) -> None:
    """Print the $jsonSchema validator of COLLECTION in DOMAIN."""
    try:
        document = _build_service(ctx).get_validation_schema(domain, collection)
    except KeyError as e:
        click.echo(f"Error: {e.args[0]}", err=True)
        raise SystemExit(1)
    except NoSQLKitError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)
    _echo_json({"$jsonSchema": document})


@cli.command()
@click.argument("domain")
@click.pass_context
def generate(ctx: click.Context, domain: str) -> None:
    """Regenerate the source artifacts of DOMAIN."""
    try:
        results = _build_service(ctx).generate(domain)
    except NoSQLKitError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    for result in results:
        if result.error is not None:
            state = "failed"
        elif result.skipped:
            state = "kept"
        else:
            state = "written"
        click.echo(f"{state:8} {result.path}")

    if any(r.error is not None for r in results):
        raise SystemExit(1)


@cli.command()
@click.argument("domain")
@click.pass_context
def sync(ctx: click.Context, domain: str) -> None:
    """Apply the validators of DOMAIN to MongoDB."""
    service = _build_service(ctx)
    logger = get_logger(__name__)
    try:
        report = service.sync_report(domain)
    except NoSQLKitError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)
    finally:
        service.close()

    for result in report.results:
        line = f"{result.status.value:8} {result.name}"
        if result.error is not None:
            line += f" ({result.error.message})"
        click.echo(line)

    if not report.success:
        logger.warning("Sync finished with failures", domain=domain)
        raise SystemExit(1)


@cli.command()
def info() -> None:
    """Display NoSQLKit configuration."""
    settings = get_settings()

    click.echo(f"""
NoSQLKit v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

Project:
  Core dir:     {settings.core_dir}
  Config dir:   {settings.config_dir}
  Templates:    {settings.templates_dir or '(bundled)'}

MongoDB:
  URI:          {settings.mongo_uri_masked}
  Database:     {settings.mongo_database or '(per domain)'}
  Update:       {settings.sync_update_existing}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `nosqlkit` command is run
    or when using `python -m nosqlkit`.
    """
    cli()


if __name__ == "__main__":
    main()

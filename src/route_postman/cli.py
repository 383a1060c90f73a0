"""CLI entry point for route-postman."""

import logging
from pathlib import Path

import click

from route_postman.config import DEFAULT_CONFIG_FILE, load_config
from route_postman.errors import ExportError
from route_postman.exporter.collection import build_collection, write_collection
from route_postman.routes.source import load_routes


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
def main(verbose: bool):
    """Route Postman — export API routes as a Postman collection."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.option(
    "-c", "--config", "config_path",
    default=DEFAULT_CONFIG_FILE,
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML configuration file.",
)
def export(config_path: Path):
    """Export routes and their validated fields to a Postman collection."""
    try:
        config = load_config(config_path)
        routes = load_routes(config.routes)
        document = build_collection(routes, config)
        file_path = write_collection(document, config)
    except ExportError as e:
        raise click.ClickException(str(e)) from e

    click.echo("Postman collection exported successfully")
    click.echo(f"Path: {file_path}")

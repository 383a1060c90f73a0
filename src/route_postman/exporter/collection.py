"""Build and write the Postman collection document."""

import json
from datetime import datetime
from pathlib import Path

import click

from route_postman.config import ExportConfig
from route_postman.errors import CollectionWriteError
from route_postman.exporter.fields import RuleProvider, SignatureRuleProvider
from route_postman.exporter.filter import filter_routes
from route_postman.exporter.items import build_body_fields, build_item
from route_postman.exporter.paths import normalize_uri
from route_postman.exporter.tree import FolderTree
from route_postman.routes.base import RouteRecord

SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"


def build_collection(
    routes: list[RouteRecord],
    config: ExportConfig,
    provider: RuleProvider | None = None,
) -> dict:
    """Run the route table through filtering, tree building and field lookup."""
    provider = provider or SignatureRuleProvider()
    tree = FolderTree()

    for route in filter_routes(routes, config):
        path = normalize_uri(route.uri)
        item = build_item(route, path)
        click.echo(f"Creating item: {item.name}")

        if config.include_fields:
            fields = provider.fields_for(route.handler.controller, route.handler.method)
            item.body_fields = build_body_fields(fields)

        tree.insert(path, item)

    return {
        "variable": [{"key": "app_url", "value": config.base_url}],
        "info": {"name": config.collection_name, "schema": SCHEMA_URL},
        "item": tree.flatten(),
    }


def collection_filename(config: ExportConfig, now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"{config.collection_name} {now:%Y-%m-%d %H:%M:%S}.json"


def write_collection(document: dict, config: ExportConfig, now: datetime | None = None) -> Path:
    """Write the document as pretty-printed JSON and return the file path."""
    file_path = config.path / collection_filename(config, now)
    content = json.dumps(document, indent=4, ensure_ascii=False)
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise CollectionWriteError(file_path, e.strerror or str(e)) from e
    return file_path

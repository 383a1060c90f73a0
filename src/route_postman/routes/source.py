"""Route table loaders.

A route source is either a YAML/JSON file or a ``module:attribute``
reference to Python objects that produce route records.
"""

import importlib
import json
import logging
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import ValidationError

from route_postman.errors import RouteSourceError
from route_postman.routes.base import RouteRecord

logger = logging.getLogger(__name__)


def load_routes(source: str | Path) -> list[RouteRecord]:
    """Load the route table from a file path or a ``module:attribute`` reference."""
    path = Path(source)
    if path.exists():
        return parse_route_file(path)

    if isinstance(source, str) and ":" in source:
        return _load_from_reference(source)

    raise RouteSourceError(f"Route source not found: {source}")


def parse_route_file(file_path: Path) -> list[RouteRecord]:
    """Parse a YAML or JSON route table file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RouteSourceError(f"Cannot read route file {file_path}: {e}") from e

    data = _decode(text, file_path)
    if isinstance(data, dict):
        data = data.get("routes", [])
    if not isinstance(data, list):
        raise RouteSourceError(f"Route file {file_path} must contain a list of routes")

    return to_records(data)


def to_records(entries: Iterable) -> list[RouteRecord]:
    """Validate route entries (dicts or RouteRecord) into RouteRecord models."""
    records = []
    for index, entry in enumerate(entries):
        if isinstance(entry, RouteRecord):
            records.append(entry)
            continue
        if not isinstance(entry, dict):
            raise RouteSourceError(f"Route #{index} is not a mapping: {entry!r}")
        try:
            records.append(RouteRecord(**entry))
        except ValidationError as e:
            raise RouteSourceError(f"Invalid route #{index}: {e}") from e
    logger.debug("Loaded %d routes", len(records))
    return records


def _decode(text: str, file_path: Path):
    # JSON first for .json files; YAML parses both otherwise
    if file_path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except (json.JSONDecodeError, ValueError) as e:
            raise RouteSourceError(f"Invalid JSON in {file_path}: {e}") from e

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RouteSourceError(f"Invalid YAML in {file_path}: {e}") from e


def _load_from_reference(reference: str) -> list[RouteRecord]:
    module_name, _, attr = reference.partition(":")
    try:
        module = importlib.import_module(module_name)
    except Exception as e:  # importing runs application code
        raise RouteSourceError(f"Cannot import route module {module_name!r}: {e}") from e

    try:
        target = getattr(module, attr)
    except AttributeError as e:
        raise RouteSourceError(f"Module {module_name!r} has no attribute {attr!r}") from e

    if callable(target):
        try:
            target = target()
        except Exception as e:
            raise RouteSourceError(f"Calling {reference} failed: {e}") from e
    if isinstance(target, (str, bytes, dict)) or not isinstance(target, Iterable):
        raise RouteSourceError(f"{reference} did not produce a list of routes")
    return to_records(target)

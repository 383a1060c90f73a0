"""Exceptions raised while exporting a collection."""

from pathlib import Path


class ExportError(Exception):
    """Base class for errors that abort an export run."""


class ConfigError(ExportError):
    """The configuration file could not be read or is invalid."""


class RouteSourceError(ExportError):
    """The route table could not be loaded."""


class CollectionWriteError(ExportError):
    """The collection file could not be written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Could not write collection to {path}: {reason}")

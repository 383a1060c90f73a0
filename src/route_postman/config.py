"""Export configuration.

Loaded once from a YAML file and passed explicitly to every stage.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from route_postman.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "route-postman.yaml"


class ExportConfig(BaseModel):
    """Settings for one export run."""

    app_url: str = Field(default_factory=lambda: os.getenv("APP_URL", "http://localhost"))
    collection_name: str = Field(default_factory=lambda: os.getenv("APP_NAME", "API"))
    port: int | None = 8000
    ignored_routes: list[str] = []
    match_all_ignore_patterns: bool = False  # only the first pattern is checked otherwise
    path: Path = Path(".")
    routes: str = "routes.yaml"
    api_middleware: str = "api"
    include_fields: bool = True

    @property
    def base_url(self) -> str:
        """The ``app_url`` variable value, with the port when one is set."""
        if self.port is None:
            return self.app_url
        return f"{self.app_url}:{self.port}"


def load_config(file_path: Path | None = None) -> ExportConfig:
    """Load configuration from a YAML file.

    A missing file yields the defaults.
    """
    file_path = file_path or Path(DEFAULT_CONFIG_FILE)
    if not file_path.exists():
        logger.debug("No config file at %s, using defaults", file_path)
        return ExportConfig()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {file_path} must contain a mapping")

    try:
        config = ExportConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {file_path}: {e}") from e

    # Relative file paths are resolved against the config file's directory
    if not config.path.is_absolute():
        config.path = file_path.parent / config.path
    if ":" not in config.routes and not Path(config.routes).is_absolute():
        config.routes = str(file_path.parent / config.routes)
    return config

"""Route selection."""

import logging
from fnmatch import fnmatchcase

from route_postman.config import ExportConfig
from route_postman.exporter.paths import strip_api_prefix
from route_postman.routes.base import RouteRecord

logger = logging.getLogger(__name__)


def is_api_route(route: RouteRecord, marker: str = "api") -> bool:
    return marker in route.middleware


def is_ignored_route(uri: str, patterns: list[str], match_all: bool = False) -> bool:
    """Check ``uri`` against the ignore patterns.

    Only the first pattern is evaluated unless ``match_all`` is set.
    """
    if not match_all:
        patterns = patterns[:1]
    return any(fnmatchcase(uri, pattern) for pattern in patterns)


def filter_routes(routes: list[RouteRecord], config: ExportConfig) -> list[RouteRecord]:
    """Keep exportable routes, in registration order."""
    kept = []
    for route in routes:
        if not is_api_route(route, config.api_middleware):
            continue
        if not route.method or route.method == "HEAD":
            continue
        if route.handler is None or route.handler.closure:
            continue
        if is_ignored_route(
            strip_api_prefix(route.uri),
            config.ignored_routes,
            config.match_all_ignore_patterns,
        ):
            logger.debug("Ignoring route %s %s", route.method, route.uri)
            continue
        kept.append(route)
    return kept

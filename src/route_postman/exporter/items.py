"""Postman request items."""

from typing import Literal

from pydantic import BaseModel

from route_postman.exporter.paths import NormalizedPath, item_name
from route_postman.routes.base import RouteRecord

APP_URL_VARIABLE = "{{app_url}}"


class BodyField(BaseModel):
    """A placeholder body field."""

    key: str
    value: str = ""
    type: str = "text"


class RequestItem(BaseModel):
    """One request of the collection."""

    name: str
    method: str
    uri: str
    body_mode: Literal["formdata", "urlencoded"]
    body_fields: list[BodyField] = []

    def to_postman(self) -> dict:
        """Render the item in Postman Collection v2.1 shape."""
        uri = self.uri.strip("/")
        return {
            "name": self.name,
            "request": {
                "method": self.method,
                "header": [],
                "body": {
                    "mode": self.body_mode,
                    self.body_mode: [f.model_dump() for f in self.body_fields],
                },
                "url": {
                    "raw": f"{APP_URL_VARIABLE}/{uri}",
                    "host": [APP_URL_VARIABLE],
                    "path": uri.split("/"),
                },
            },
        }


def body_mode_for(method: str) -> Literal["formdata", "urlencoded"]:
    """PUT and PATCH bodies are url-encoded, everything else is form data."""
    return "urlencoded" if method in ("PUT", "PATCH") else "formdata"


def build_body_fields(fields: list[str] | None) -> list[BodyField]:
    return [BodyField(key=key) for key in fields or []]


def build_item(route: RouteRecord, path: NormalizedPath) -> RequestItem:
    """Create the request item for a filtered route, without body fields."""
    return RequestItem(
        name=item_name(path, route.uri, route.handler.method),
        method=route.method,
        uri=route.uri,
        body_mode=body_mode_for(route.method),
    )

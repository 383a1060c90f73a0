"""Route table models.

Every route source (YAML/JSON files, Python objects) is converted into
these models before the exporter sees it.
"""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class HandlerRef(BaseModel):
    """The controller method a route dispatches to."""

    model_config = ConfigDict(frozen=True)

    controller: str  # dotted path: app.http.controllers.UserController
    method: str
    closure: bool = False

    @classmethod
    def parse(cls, value: str) -> "HandlerRef":
        """Parse the ``"package.module.Controller@method"`` form."""
        controller, sep, method = value.partition("@")
        if not sep or not controller or not method:
            raise ValueError(f"handler must look like 'module.Controller@method', got {value!r}")
        return cls(controller=controller, method=method)

    def __str__(self) -> str:
        return f"{self.controller}@{self.method}"


class RouteRecord(BaseModel):
    """A single registered route."""

    model_config = ConfigDict(frozen=True)

    methods: list[str]  # GET / POST / PUT / DELETE / PATCH / HEAD
    uri: str  # api/v1/users/{id}
    middleware: list[str] = []
    handler: HandlerRef | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_single_method(cls, data):
        if isinstance(data, dict) and "method" in data and "methods" not in data:
            data = dict(data)
            data["methods"] = data.pop("method")
        return data

    @field_validator("methods", mode="before")
    @classmethod
    def _normalize_methods(cls, value):
        if isinstance(value, str):
            value = [value]
        return [m.upper() for m in value]

    @field_validator("middleware", mode="before")
    @classmethod
    def _wrap_middleware(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("handler", mode="before")
    @classmethod
    def _parse_handler(cls, value):
        if isinstance(value, str):
            if value == "Closure":
                return {"controller": "Closure", "method": "__invoke", "closure": True}
            return HandlerRef.parse(value)
        return value

    @property
    def method(self) -> str:
        """The route's primary HTTP method (the first one declared)."""
        return self.methods[0] if self.methods else ""

import pytest
from pydantic import ValidationError

from route_postman.routes.base import HandlerRef, RouteRecord


class TestHandlerRef:
    def test_parse_controller_at_method(self):
        ref = HandlerRef.parse("app.controllers.UserController@store")
        assert ref.controller == "app.controllers.UserController"
        assert ref.method == "store"
        assert ref.closure is False

    def test_parse_rejects_missing_method(self):
        with pytest.raises(ValueError):
            HandlerRef.parse("app.controllers.UserController")

    def test_str_roundtrips_to_string_form(self):
        assert str(HandlerRef.parse("a.B@c")) == "a.B@c"


class TestRouteRecord:
    def test_single_method_string(self):
        route = RouteRecord(method="post", uri="api/users")
        assert route.methods == ["POST"]
        assert route.method == "POST"

    def test_first_declared_method_wins(self):
        route = RouteRecord(methods=["GET", "HEAD"], uri="api/users")
        assert route.method == "GET"

    def test_middleware_string_is_wrapped(self):
        route = RouteRecord(method="GET", uri="api/users", middleware="api")
        assert route.middleware == ["api"]

    def test_handler_string_is_parsed(self):
        route = RouteRecord(method="GET", uri="api/users", handler="app.UserController@index")
        assert route.handler == HandlerRef(controller="app.UserController", method="index")

    def test_closure_handler(self):
        route = RouteRecord(method="GET", uri="api/health", handler="Closure")
        assert route.handler.closure is True

    def test_invalid_handler_string(self):
        with pytest.raises(ValidationError):
            RouteRecord(method="GET", uri="api/users", handler="not-a-handler")

    def test_records_are_read_only(self):
        route = RouteRecord(method="GET", uri="api/users")
        with pytest.raises(ValidationError):
            route.uri = "api/other"
